from winversion.lib.runtime.internal.constants import (
    CONFIG_VERSION, DEFAULT_PROVIDER, DEFAULT_LOG_LEVEL, PROVIDER_RTL, PROVIDER_SYS
)
from winversion.lib.utils.common import (
    get_project_root, join_path, file_exists, read_file_text, write_file_text
)
from winversion.lib.utils.lazy import LazyInit

import logging
from typing import Dict, List, Optional

COMMON_HEADER = f"version = {CONFIG_VERSION}\n\n[Common Settings Config]\n"
LIBRARY_CFG = "winversion.cfg"

PROVIDERS = (PROVIDER_RTL, PROVIDER_SYS)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE = ("true", "yes", "on", "1")
_FALSE = ("false", "no", "off", "0")

class LibraryConfig(LazyInit):
    def __init__(self, config_dir: Optional[str] = None) -> None:
        self.config_dir = config_dir or join_path(get_project_root(2), "configs")
        self.provider = DEFAULT_PROVIDER
        self.log_level = DEFAULT_LOG_LEVEL
        self.log_to_file = False
        self.log_folder_path = ""
        self.is_loaded = False
        # load() runs before the logger exists, so problems are queued here
        self._warnings: List[str] = []

    def config_path(self) -> str:
        return join_path(self.config_dir, LIBRARY_CFG)

    def default_log_folder(self) -> str:
        return join_path(get_project_root(2), "logs")

    def log_folder(self) -> str:
        return self.log_folder_path or self.default_log_folder()

    def load(self) -> Dict[str, str]:
        self.is_loaded = True
        try:
            content = read_file_text(self.config_path())
        except UnicodeDecodeError as e:
            self._warnings.append(f"Ignoring unreadable config {self.config_path()}: {e}")
            return self.as_dict()

        if content is None:
            return self.as_dict()

        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith("#") or line.startswith("["):
                continue

            parts = line.split("=", 1)
            if len(parts) != 2:
                self._warnings.append(f"Ignoring malformed config line: {line}")
                continue

            key, value = parts[0].strip(), parts[1].strip()
            self._apply(key, value)

        return self.as_dict()

    def _apply(self, key: str, value: str) -> None:
        if key == "provider":
            if value.lower() in PROVIDERS:
                self.provider = value.lower()
            else:
                self._warnings.append(f"Unknown provider {value!r}, keeping {self.provider}")
        elif key == "log_level":
            if value.upper() in LOG_LEVELS:
                self.log_level = value.upper()
            else:
                self._warnings.append(f"Unknown log level {value!r}, keeping {self.log_level}")
        elif key == "log_to_file":
            if value.lower() in _TRUE:
                self.log_to_file = True
            elif value.lower() in _FALSE:
                self.log_to_file = False
            else:
                self._warnings.append(f"Invalid log_to_file value {value!r}")
        elif key == "log_folder_path":
            self.log_folder_path = value

    def drain_warnings(self) -> List[str]:
        warnings, self._warnings = self._warnings, []
        return warnings

    def as_dict(self) -> Dict[str, str]:
        return {
            "provider": self.provider,
            "log_level": self.log_level,
            "log_to_file": str(self.log_to_file),
            "log_folder_path": self.log_folder_path,
        }

    def level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)

    def save(self) -> bool:
        content = COMMON_HEADER
        content += "\n".join(f"{key} = {value}" for key, value in self.as_dict().items())
        return write_file_text(self.config_path(), content + "\n")

    def make_config(self) -> bool:
        cfg = self.config_path()
        if file_exists(cfg):
            return False

        comments = """
# provider = rtl | sys
# log_level = DEBUG | INFO | WARNING | ERROR | CRITICAL
# log_to_file = True | False
# log_folder_path = <path>
"""
        return write_file_text(cfg, f"{COMMON_HEADER}{comments}")


def get_config() -> LibraryConfig:
    cfg = LibraryConfig.get()
    if not cfg.is_loaded:
        cfg.load()
    return cfg
