from winversion.lib.runtime.internal.constants import CHUNK_SIZE_READ, FILE_MODE_DEFAULT

import os
from typing import Iterator, Optional, Union
from pathlib import Path

PathType = Union[str, Path]

def get_project_root(levels_up: int = 3) -> str:
    path = os.path.dirname(os.path.abspath(__file__))
    for _ in range(levels_up):
        path = os.path.dirname(path)
    return path

def join_path(first: PathType, *others: PathType) -> str:
    p = Path(first)
    for other in others:
        p = p / other
    return str(p)

def ensure_dir_exists(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def file_exists(path: str) -> bool:
    return os.path.exists(path)

def _read_chunks(fd: int, chunk_size: int = CHUNK_SIZE_READ) -> Iterator[bytes]:
    while True:
        chunk = os.read(fd, chunk_size)
        if not chunk:
            break
        yield chunk

def _close_fd(fd: int) -> None:
    try:
        os.close(fd)
    except OSError:
        pass

def read_file_text(path: str) -> Optional[str]:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return None

    try:
        return b"".join(_read_chunks(fd)).decode("utf-8")
    finally:
        _close_fd(fd)

def write_file_text(path: str, content: str, mode: int = FILE_MODE_DEFAULT) -> bool:
    dir_path = os.path.dirname(path)
    if dir_path:
        ensure_dir_exists(dir_path)

    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, mode)
    except OSError:
        return False

    try:
        os.write(fd, content.encode("utf-8"))
        return True
    except OSError:
        return False
    finally:
        _close_fd(fd)
