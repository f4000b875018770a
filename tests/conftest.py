from winversion.lib.runtime.internal.constants import VER_PLATFORM_WIN32_NT
from winversion.lib.runtime.internal.dataclasses import ProductType, VersionRecord, VersionRecordEx
from winversion.lib.runtime.internal.errors import HostQueryFailure
from winversion.lib.runtime.providers import HostVersionProvider, reset_provider
from winversion.lib.utils.config import LibraryConfig
from winversion.lib.utils.logging import reset_logger

import pytest
from typing import Dict, List, Optional


def make_record(
        major: int = 10,
        minor: int = 0,
        build: int = 19045,
        product_type: int = ProductType.WORKSTATION,
        service_pack_major: int = 0,
        service_pack_minor: int = 0,
        suite_mask: int = 0,
        csd_version: str = ""
    ) -> VersionRecordEx:
    return VersionRecordEx(
        major, minor, build, VER_PLATFORM_WIN32_NT, csd_version,
        service_pack_major, service_pack_minor, suite_mask, product_type
    )


class FakeProvider(HostVersionProvider):
    __slots__ = ("record", "metrics", "metric_calls", "queries", "failure")
    name = "fake"

    def __init__(
            self,
            record: Optional[VersionRecordEx] = None,
            metrics: Optional[Dict[int, int]] = None,
            failure: Optional[HostQueryFailure] = None
        ) -> None:
        self.record = record if record is not None else make_record()
        self.metrics = metrics or {}
        self.metric_calls: List[int] = []
        self.queries = 0
        self.failure = failure

    def query_version(self) -> VersionRecord:
        return self.query_version_ex().basic()

    def query_version_ex(self) -> VersionRecordEx:
        self.queries += 1
        if self.failure is not None:
            raise self.failure
        return self.record

    def get_system_metric(self, index: int) -> int:
        self.metric_calls.append(index)
        return self.metrics.get(index, 0)


@pytest.fixture(autouse=True)
def isolated_library(tmp_path):
    LibraryConfig.reset()
    LibraryConfig.get(config_dir=str(tmp_path / "configs"))
    reset_logger()
    reset_provider()
    yield
    reset_provider()
    reset_logger()
    LibraryConfig.reset()


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def failing_provider() -> FakeProvider:
    return FakeProvider(failure=HostQueryFailure("RtlGetVersion", status=0xC000000D))
