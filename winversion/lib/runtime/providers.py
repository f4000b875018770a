from winversion.lib.runtime.internal.constants import STATUS_SUCCESS, PROVIDER_RTL, PROVIDER_SYS
from winversion.lib.runtime.internal.dataclasses import (
    RTL_OSVERSIONINFOW, RTL_OSVERSIONINFOEXW, VersionInfoStruct,
    VersionRecord, VersionRecordEx, bound_csd
)
from winversion.lib.runtime.internal.errors import HostQueryFailure
from winversion.lib.utils.logging import log_debug, log_error

import sys
import ctypes
import threading
from typing import Optional, Type

class HostVersionProvider:
    __slots__ = ()
    name = "base"

    def query_version(self) -> VersionRecord:
        raise NotImplementedError

    def query_version_ex(self) -> VersionRecordEx:
        raise NotImplementedError

    def get_system_metric(self, index: int) -> int:
        raise NotImplementedError


class RtlVersionProvider(HostVersionProvider):
    __slots__ = ("_rtl_get_version",)
    name = PROVIDER_RTL

    def __init__(self) -> None:
        self._rtl_get_version = None

    def _bind(self):
        if self._rtl_get_version is None:
            try:
                from winversion.lib.runtime.internal.win32_api import RtlGetVersion
            except (ImportError, AttributeError, OSError) as e:
                log_error(f"Unable to bind ntdll.RtlGetVersion: {e}", exc_info=False)
                raise HostQueryFailure("RtlGetVersion", reason=str(e)) from e
            self._rtl_get_version = RtlGetVersion
        return self._rtl_get_version

    def _query(self, struct_type: Type[VersionInfoStruct]) -> VersionInfoStruct:
        rtl_get_version = self._bind()
        osvi = struct_type()
        osvi.dwOSVersionInfoSize = ctypes.sizeof(struct_type)

        status = rtl_get_version(ctypes.byref(osvi))
        if status != STATUS_SUCCESS:
            log_error(f"RtlGetVersion({struct_type.__name__}) returned 0x{status & 0xFFFFFFFF:08X}", exc_info=False)
            raise HostQueryFailure("RtlGetVersion", status=status)

        log_debug(f"RtlGetVersion({struct_type.__name__}) ok")
        return osvi

    def query_version(self) -> VersionRecord:
        return VersionRecord.from_struct(self._query(RTL_OSVERSIONINFOW))

    def query_version_ex(self) -> VersionRecordEx:
        return VersionRecordEx.from_struct(self._query(RTL_OSVERSIONINFOEXW))

    def get_system_metric(self, index: int) -> int:
        return _system_metric(index)


class SysVersionProvider(HostVersionProvider):
    __slots__ = ()
    name = PROVIDER_SYS

    def _query(self):
        getwindowsversion = getattr(sys, "getwindowsversion", None)
        if getwindowsversion is None:
            log_error("sys.getwindowsversion is not available on this platform", exc_info=False)
            raise HostQueryFailure("sys.getwindowsversion", reason="not available on this platform")

        ver = getwindowsversion()
        major, minor, build = ver.platform_version
        log_debug(f"sys.getwindowsversion ok ({major}.{minor}.{build}, reported {ver.major}.{ver.minor}.{ver.build})")
        return ver

    def query_version(self) -> VersionRecord:
        return self.query_version_ex().basic()

    def query_version_ex(self) -> VersionRecordEx:
        ver = self._query()
        # major/minor/build may be shimmed by the app manifest, platform_version is not
        major, minor, build = ver.platform_version
        return VersionRecordEx(
            major,
            minor,
            build,
            ver.platform,
            bound_csd(ver.service_pack),
            ver.service_pack_major,
            ver.service_pack_minor,
            ver.suite_mask,
            ver.product_type,
        )

    def get_system_metric(self, index: int) -> int:
        return _system_metric(index)


def _system_metric(index: int) -> int:
    try:
        import win32api # type: ignore
    except ImportError as e:
        log_error(f"win32api unavailable for GetSystemMetrics({index}): {e}", exc_info=False)
        raise HostQueryFailure("GetSystemMetrics", reason=str(e)) from e

    value = win32api.GetSystemMetrics(index)
    log_debug(f"GetSystemMetrics({index}) = {value}")
    return value


_PROVIDERS = {
    PROVIDER_RTL: RtlVersionProvider,
    PROVIDER_SYS: SysVersionProvider,
}

_p_lock = threading.Lock()
_override: Optional[HostVersionProvider] = None
_default: Optional[HostVersionProvider] = None

def create_provider(name: str) -> HostVersionProvider:
    provider_cls = _PROVIDERS.get(name.lower())
    if provider_cls is None:
        raise ValueError(f"Unknown version provider: {name!r}")
    return provider_cls()

def get_provider() -> HostVersionProvider:
    global _default
    if _override is not None:
        return _override

    with _p_lock:
        if _default is None:
            from winversion.lib.utils.config import get_config
            _default = create_provider(get_config().provider)
            log_debug(f"Using {_default.name} version provider")
        return _default

def set_provider(provider: Optional[HostVersionProvider]) -> None:
    global _override
    with _p_lock:
        _override = provider

def reset_provider() -> None:
    global _default, _override
    with _p_lock:
        _default = None
        _override = None
