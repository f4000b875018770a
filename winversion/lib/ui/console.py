from winversion.lib.runtime.internal.errors import HostQueryFailure
from winversion.lib.runtime.providers import HostVersionProvider
from winversion.lib.utils.logging import log_error, log_info
from winversion.lib.utils.os_version import (
    get_windows_os, is_windows_vista_or_greater, get_windows_version, get_windows_version_ex
)

import sys
from typing import Optional

def report(provider: Optional[HostVersionProvider] = None) -> None:
    print(get_windows_os(provider))

    if is_windows_vista_or_greater(provider):
        print("It's Windows Vista or greater")
    else:
        print("It's not Windows Vista or greater")

    print(repr(get_windows_version(provider)))
    print(repr(get_windows_version_ex(provider)))

def main(provider: Optional[HostVersionProvider] = None) -> int:
    try:
        report(provider)
    except HostQueryFailure as e:
        log_error(f"Version query failed: {e}", exc_info=False)
        print(f"Unable to read the Windows version: {e}", file=sys.stderr)
        return 1

    log_info("Version report printed")
    return 0
