from winversion.lib.runtime.internal.constants import (
    WINDOWS_11_MIN_BUILD, WINDOWS_2000, WINDOWS_XP, WINDOWS_XP_SP1, WINDOWS_XP_SP2,
    WINDOWS_XP_SP3, WINDOWS_VISTA, WINDOWS_VISTA_SP1, WINDOWS_VISTA_SP2, WINDOWS_7,
    WINDOWS_7_SP1, WINDOWS_8, WINDOWS_8_POINT_1, WINDOWS_10
)
from winversion.lib.runtime.internal.dataclasses import VersionRecord, VersionRecordEx
from winversion.lib.runtime.providers import HostVersionProvider, get_provider
from winversion.lib.utils.name_rules import resolve_name

from typing import Optional

def _provider(provider: Optional[HostVersionProvider]) -> HostVersionProvider:
    return provider if provider is not None else get_provider()

def get_windows_version(provider: Optional[HostVersionProvider] = None) -> VersionRecord:
    return _provider(provider).query_version()

def get_windows_version_ex(provider: Optional[HostVersionProvider] = None) -> VersionRecordEx:
    return _provider(provider).query_version_ex()

def get_windows_os(provider: Optional[HostVersionProvider] = None) -> str:
    p = _provider(provider)
    return resolve_name(p.query_version_ex(), p.get_system_metric)

def compare_version(
        info: VersionRecordEx,
        major: int,
        minor: int,
        service_pack_major: int
    ) -> bool:
    # strict on major/minor, inclusive on the service pack: a lexicographic floor
    if info.major > major:
        return True
    if info.major == major:
        if info.minor > minor:
            return True
        if info.minor == minor:
            return info.service_pack_major >= service_pack_major
    return False

def is_windows_or_greater(
        major: int,
        minor: int,
        service_pack_major: int,
        provider: Optional[HostVersionProvider] = None
    ) -> bool:
    return compare_version(get_windows_version_ex(provider), major, minor, service_pack_major)

def is_windows_2000_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_2000, provider=provider)

def is_windows_xp_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_XP, provider=provider)

def is_windows_xp_sp1_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_XP_SP1, provider=provider)

def is_windows_xp_sp2_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_XP_SP2, provider=provider)

def is_windows_xp_sp3_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_XP_SP3, provider=provider)

def is_windows_vista_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_VISTA, provider=provider)

def is_windows_vista_sp1_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_VISTA_SP1, provider=provider)

def is_windows_vista_sp2_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_VISTA_SP2, provider=provider)

def is_windows_7_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_7, provider=provider)

def is_windows_7_sp1_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_7_SP1, provider=provider)

def is_windows_8_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_8, provider=provider)

def is_windows_8_point_1_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_8_POINT_1, provider=provider)

def is_windows_10_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    return is_windows_or_greater(*WINDOWS_10, provider=provider)

def is_windows_11_or_greater(provider: Optional[HostVersionProvider] = None) -> bool:
    # 11 reports as 10.0, only the build tells them apart
    v = get_windows_version_ex(provider)
    return v.major >= 10 and v.build >= WINDOWS_11_MIN_BUILD
