from __future__ import annotations

import contextlib
import functools
import shutil
from pathlib import Path
from typing import Iterator, Protocol

from .errors import FilesystemError


class FileSystem(Protocol):
    """The filesystem operations a build needs. Paths are `/`-separated strings."""

    def is_dir(self, path: str) -> bool: ...

    def is_file(self, path: str) -> bool: ...

    def make_dir(self, path: str) -> None: ...

    def make_dirs(self, path: str) -> None:
        """Like `make_dir`, also creating any missing parents."""

    def write_file(self, path: str, content: str) -> None: ...

    def read_file(self, path: str) -> str: ...

    def remove_dir(self, path: str) -> None: ...

    def remove_file(self, path: str) -> None: ...


@contextlib.contextmanager
def _wrap_errors(action: str, path: str) -> Iterator[None]:
    try:
        yield
    except OSError as e:
        raise FilesystemError(f"Failed to {action} {path!r}: {e.strerror or e}") from e


def _fs_operation(action: str):
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, path, *args, **kwargs):
            with _wrap_errors(action, path):
                return func(self, path, *args, **kwargs)

        return wrapper

    return decorator


class LocalFileSystem:
    """The real filesystem, relative to the current directory."""

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()

    @_fs_operation("create directory")
    def make_dir(self, path: str) -> None:
        Path(path).mkdir(exist_ok=True)

    @_fs_operation("create directory")
    def make_dirs(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    @_fs_operation("write")
    def write_file(self, path: str, content: str) -> None:
        # Binary mode: identical bytes on every platform.
        Path(path).write_bytes(content.encode("utf-8"))

    @_fs_operation("read")
    def read_file(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    @_fs_operation("remove directory")
    def remove_dir(self, path: str) -> None:
        shutil.rmtree(path)

    @_fs_operation("remove")
    def remove_file(self, path: str) -> None:
        Path(path).unlink()
