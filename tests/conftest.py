from __future__ import annotations

import pytest

from moonwave_nextra.errors import FilesystemError
from moonwave_nextra.items import ClassDescriptor


class MemoryFileSystem:
    """Refuses to write into directories that weren't created first."""

    def __init__(self, dirs=(), files=None):
        self.dirs = {"", *dirs}
        self.files = dict(files or {})
        self.log = []

    def _parent(self, path):
        return path.rpartition("/")[0]

    def is_dir(self, path):
        return path in self.dirs

    def is_file(self, path):
        return path in self.files

    def make_dir(self, path):
        if self._parent(path) not in self.dirs:
            raise FilesystemError(f"No parent directory for {path!r}")
        self.log.append(("make_dir", path))
        self.dirs.add(path)

    def make_dirs(self, path):
        parts = path.split("/")
        for i in range(1, len(parts) + 1):
            self.dirs.add("/".join(parts[:i]))
        self.log.append(("make_dirs", path))

    def write_file(self, path, content):
        if self._parent(path) not in self.dirs:
            raise FilesystemError(f"No parent directory for {path!r}")
        self.log.append(("write_file", path))
        self.files[path] = content

    def read_file(self, path):
        try:
            return self.files[path]
        except KeyError:
            raise FilesystemError(f"No such file {path!r}") from None

    def remove_dir(self, path):
        self.log.append(("remove_dir", path))
        self.dirs = {d for d in self.dirs if d != path and not d.startswith(path + "/")}
        self.files = {f: c for f, c in self.files.items() if not f.startswith(path + "/")}

    def remove_file(self, path):
        self.log.append(("remove_file", path))
        del self.files[path]


@pytest.fixture
def memory_fs():
    return MemoryFileSystem(dirs=["pages", "pages/Packages"])


def make_class(name, path, functions=(), properties=(), desc=""):
    return ClassDescriptor(
        {
            "name": name,
            "desc": desc,
            "source": {"path": path, "line": 1},
            "properties": list(properties),
            "functions": list(functions),
        }
    )
