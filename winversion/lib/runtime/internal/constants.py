from typing import Tuple

Milestone = Tuple[int, int, int]

CONFIG_VERSION = 1

# ntstatus.h
STATUS_SUCCESS = 0x00000000

# winnt.h
VER_NT_WORKSTATION = 0x0000001
VER_NT_DOMAIN_CONTROLLER = 0x0000002
VER_NT_SERVER = 0x0000003
VER_SUITE_WH_SERVER = 0x00008000
VER_PLATFORM_WIN32_NT = 2

# winuser.h
SM_SERVERR2 = 89

CSD_VERSION_LENGTH = 128
WINDOWS_11_MIN_BUILD = 22000

# (major, minor, service pack major)
WINDOWS_2000: Milestone = (5, 0, 0)
WINDOWS_XP: Milestone = (5, 1, 0)
WINDOWS_XP_SP1: Milestone = (5, 1, 1)
WINDOWS_XP_SP2: Milestone = (5, 1, 2)
WINDOWS_XP_SP3: Milestone = (5, 1, 3)
WINDOWS_VISTA: Milestone = (6, 0, 0)
WINDOWS_VISTA_SP1: Milestone = (6, 0, 1)
WINDOWS_VISTA_SP2: Milestone = (6, 0, 2)
WINDOWS_7: Milestone = (6, 1, 0)
WINDOWS_7_SP1: Milestone = (6, 1, 1)
WINDOWS_8: Milestone = (6, 2, 0)
WINDOWS_8_POINT_1: Milestone = (6, 3, 0)
WINDOWS_10: Milestone = (10, 0, 0)

PROVIDER_RTL = "rtl"
PROVIDER_SYS = "sys"
DEFAULT_PROVIDER = PROVIDER_RTL
DEFAULT_LOG_LEVEL = "INFO"

FILE_MODE_DEFAULT = 0o644
CHUNK_SIZE_READ = 4096
