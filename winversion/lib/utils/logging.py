from winversion.lib.utils.common import ensure_dir_exists, join_path
from winversion.lib.utils.lazy import LazyInit

import logging
import threading
from logging import Handler, Logger
from typing import Optional

LOGGER_NAME = "winversion"
DEBUG_LOG = "debug.log"

class _DebugLogger(LazyInit):
    __slots__ = ("_is_init", "_logger", "_handler", "_lock")

    def __init__(self) -> None:
        self._is_init = False
        self._logger = None
        self._handler = None
        self._lock = threading.Lock()

    def _make_handler(self, cfg) -> Handler:
        if not cfg.log_to_file:
            return logging.NullHandler()

        log_dir = cfg.log_folder()
        ensure_dir_exists(log_dir)
        handler = logging.FileHandler(
            join_path(log_dir, DEBUG_LOG), mode="w", encoding="utf-8", delay=True
        )
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        return handler

    def start(self):
        with self._lock:
            if self._is_init:
                return

            from winversion.lib.utils.config import get_config
            cfg = get_config()

            self._logger = logging.getLogger(LOGGER_NAME)
            self._logger.setLevel(cfg.level())
            self._logger.propagate = False
            # only our own handler is managed, others on the logger are left alone
            self._handler = self._make_handler(cfg)
            self._logger.addHandler(self._handler)
            self._is_init = True

            for warning in cfg.drain_warnings():
                self._logger.warning(warning)

    def stop(self) -> None:
        with self._lock:
            if self._logger is not None and self._handler is not None:
                self._logger.removeHandler(self._handler)
                self._handler.close()
            self._handler = None
            self._is_init = False

    @property
    def handler(self) -> Optional[Handler]:
        return self._handler

    @classmethod
    def get_logger(cls) -> Logger:
        instance = cls.get()
        if not instance._is_init:
            instance.start()
        assert instance._logger is not None
        return instance._logger

def get_handler() -> Optional[Handler]:
    if not _DebugLogger.is_created():
        return None
    return _DebugLogger.get().handler

def reset_logger() -> None:
    if _DebugLogger.is_created():
        _DebugLogger.get().stop()
    _DebugLogger.reset()

def log_info(msg: str, *args, exc_info: bool = False, **kwargs):
    _DebugLogger.get_logger().info(msg, *args, exc_info=exc_info, **kwargs)

def log_debug(msg: str, *args, exc_info: bool = False, **kwargs):
    _DebugLogger.get_logger().debug(msg, *args, exc_info=exc_info, **kwargs)

def log_error(msg: str, *args, exc_info: bool = True, **kwargs):
    _DebugLogger.get_logger().error(msg, *args, exc_info=exc_info, **kwargs)

def log_warning(msg: str, *args, exc_info: bool = False, **kwargs):
    _DebugLogger.get_logger().warning(msg, *args, exc_info=exc_info, **kwargs)
