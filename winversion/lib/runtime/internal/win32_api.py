from winversion.lib.runtime.internal.dataclasses import NTSTATUS

import ctypes

_ntdll = ctypes.WinDLL("ntdll")

# RtlGetVersion reads either layout, selected by dwOSVersionInfoSize
RtlGetVersion = _ntdll.RtlGetVersion
RtlGetVersion.argtypes = [ctypes.c_void_p]
RtlGetVersion.restype = NTSTATUS
