from winversion.lib.runtime.internal.constants import (
    VER_SUITE_WH_SERVER, SM_SERVERR2, WINDOWS_11_MIN_BUILD
)
from winversion.lib.runtime.internal.dataclasses import VersionRecordEx

from enum import Enum
from typing import Callable, NamedTuple, Optional, Tuple

MetricQuery = Callable[[int], int]

class ProductFilter(Enum):
    ANY = "any"
    WORKSTATION = "workstation"
    NON_WORKSTATION = "non-workstation"


class NameRule(NamedTuple):
    major: int
    minor: Optional[int]
    product: ProductFilter
    name: str
    min_build: Optional[int] = None
    suite_bits: Optional[int] = None
    system_metric: Optional[int] = None

    def matches(self, info: VersionRecordEx, metric: MetricQuery) -> bool:
        if info.major != self.major:
            return False
        if self.minor is not None and info.minor != self.minor:
            return False
        if self.product is ProductFilter.WORKSTATION and not info.is_workstation:
            return False
        if self.product is ProductFilter.NON_WORKSTATION and info.is_workstation:
            return False
        if self.min_build is not None and info.build < self.min_build:
            return False
        if self.suite_bits is not None and (info.suite_mask & self.suite_bits) != self.suite_bits:
            return False
        # host metric is only queried once every cheaper field matched
        if self.system_metric is not None and metric(self.system_metric) == 0:
            return False
        return True


_W = ProductFilter.WORKSTATION
_S = ProductFilter.NON_WORKSTATION
_A = ProductFilter.ANY

# evaluated top to bottom, first match wins
NAME_RULES: Tuple[NameRule, ...] = (
    NameRule(10, None, _W, "Windows 11", min_build=WINDOWS_11_MIN_BUILD),
    NameRule(10, None, _W, "Windows 10"),
    NameRule(10, None, _S, "Windows Server 2016"),

    NameRule(6, 3, _W, "Windows 8.1"),
    NameRule(6, 2, _W, "Windows 8"),
    NameRule(6, 1, _W, "Windows 7"),
    NameRule(6, 0, _W, "Windows Vista"),
    NameRule(6, 3, _S, "Windows Server 2012 R2"),
    NameRule(6, 2, _S, "Windows Server 2012"),
    NameRule(6, 1, _S, "Windows Server 2008 R2"),
    NameRule(6, 0, _S, "Windows Server 2008"),

    NameRule(5, 2, _W, "Windows XP Professional x64 Edition"),
    NameRule(5, 2, _S, "Windows Home Server", suite_bits=VER_SUITE_WH_SERVER),
    NameRule(5, 2, _S, "Windows Server 2003 R2", system_metric=SM_SERVERR2),
    NameRule(5, 2, _S, "Windows Server 2003"),
    NameRule(5, 1, _A, "Windows XP"),
    NameRule(5, 0, _A, "Windows 2000"),
)

def numeric_name(info: VersionRecordEx) -> str:
    return f"{info.major}.{info.minor}"

def match_name(
        info: VersionRecordEx,
        metric: MetricQuery,
        rules: Tuple[NameRule, ...] = NAME_RULES
    ) -> Optional[str]:
    for rule in rules:
        if rule.matches(info, metric):
            return rule.name
    return None

def resolve_name(
        info: VersionRecordEx,
        metric: MetricQuery,
        rules: Tuple[NameRule, ...] = NAME_RULES
    ) -> str:
    name = match_name(info, metric, rules) or numeric_name(info)
    if info.service_pack_major > 0:
        name += f" SP{info.service_pack_major}"
    return name
