from winversion.lib.runtime.internal.constants import (
    CSD_VERSION_LENGTH, VER_NT_WORKSTATION, VER_NT_DOMAIN_CONTROLLER, VER_NT_SERVER
)

import ctypes
from enum import IntEnum
from typing import NamedTuple, Union

# fixed width so the layout matches the kernel on any interpreter
ULONG = ctypes.c_uint32
USHORT = ctypes.c_uint16
UCHAR = ctypes.c_uint8
WCHAR = ctypes.c_uint16
NTSTATUS = ctypes.c_int32

class RTL_OSVERSIONINFOW(ctypes.Structure):
    _fields_ = [
        ("dwOSVersionInfoSize", ULONG),
        ("dwMajorVersion",      ULONG),
        ("dwMinorVersion",      ULONG),
        ("dwBuildNumber",       ULONG),
        ("dwPlatformId",        ULONG),
        ("szCSDVersion",        WCHAR * CSD_VERSION_LENGTH),
    ]


class RTL_OSVERSIONINFOEXW(ctypes.Structure):
    _fields_ = [
        ("dwOSVersionInfoSize", ULONG),
        ("dwMajorVersion",      ULONG),
        ("dwMinorVersion",      ULONG),
        ("dwBuildNumber",       ULONG),
        ("dwPlatformId",        ULONG),
        ("szCSDVersion",        WCHAR * CSD_VERSION_LENGTH),
        ("wServicePackMajor",   USHORT),
        ("wServicePackMinor",   USHORT),
        ("wSuiteMask",          USHORT),
        ("wProductType",        UCHAR),
        ("wReserved",           UCHAR),
    ]


VersionInfoStruct = Union[RTL_OSVERSIONINFOW, RTL_OSVERSIONINFOEXW]


class ProductType(IntEnum):
    WORKSTATION = VER_NT_WORKSTATION
    DOMAIN_CONTROLLER = VER_NT_DOMAIN_CONTROLLER
    SERVER = VER_NT_SERVER


def decode_csd(raw) -> str:
    data = bytes(raw)
    text = data.decode("utf-16-le", errors="replace")
    return bound_csd(text)

def bound_csd(text: str) -> str:
    end = text.find("\x00")
    if end != -1:
        text = text[:end]
    return text[:CSD_VERSION_LENGTH]


class VersionRecord(NamedTuple):
    major: int
    minor: int
    build: int
    platform_id: int
    csd_version: str = ""

    @classmethod
    def from_struct(cls, osvi: VersionInfoStruct) -> "VersionRecord":
        return cls(
            osvi.dwMajorVersion,
            osvi.dwMinorVersion,
            osvi.dwBuildNumber,
            osvi.dwPlatformId,
            decode_csd(osvi.szCSDVersion),
        )

    def __str__(self) -> str:
        ver = f"{self.major}.{self.minor}.{self.build}"
        if self.csd_version:
            return f"{ver} {self.csd_version}"
        return ver


class VersionRecordEx(NamedTuple):
    major: int
    minor: int
    build: int
    platform_id: int
    csd_version: str = ""
    service_pack_major: int = 0
    service_pack_minor: int = 0
    suite_mask: int = 0
    product_type: int = ProductType.WORKSTATION
    reserved: int = 0

    @classmethod
    def from_struct(cls, osvi: RTL_OSVERSIONINFOEXW) -> "VersionRecordEx":
        return cls(
            osvi.dwMajorVersion,
            osvi.dwMinorVersion,
            osvi.dwBuildNumber,
            osvi.dwPlatformId,
            decode_csd(osvi.szCSDVersion),
            osvi.wServicePackMajor,
            osvi.wServicePackMinor,
            osvi.wSuiteMask,
            osvi.wProductType,
            osvi.wReserved,
        )

    @property
    def is_workstation(self) -> bool:
        return self.product_type == ProductType.WORKSTATION

    def basic(self) -> VersionRecord:
        return VersionRecord(
            self.major, self.minor, self.build, self.platform_id, self.csd_version
        )

    def __str__(self) -> str:
        ver = f"{self.major}.{self.minor}.{self.build}"
        if self.service_pack_major or self.service_pack_minor:
            ver += f" SP{self.service_pack_major}.{self.service_pack_minor}"
        try:
            product = ProductType(self.product_type).name.lower()
        except ValueError:
            product = f"product {self.product_type}"
        return f"{ver} ({product})"
