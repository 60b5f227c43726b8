from __future__ import annotations

from typing import Sequence

SEP = "/"

INDEX_STEM = "init"


def split(path: str) -> list[str]:
    return path.split(SEP)


def join(segments: Sequence[str]) -> str:
    return SEP.join(segments)


def remove_segment(segments: Sequence[str], index: int) -> list[str]:
    """Return a copy of `segments` without the item at (0-based) `index`.

    Raises:
        IndexError: if there's no such segment.
    """
    if not -len(segments) <= index < len(segments):
        raise IndexError(f"No segment {index} in {join(segments)!r}")
    return [*segments[:index], *segments[index + 1 :]]


def parent(path: str) -> str:
    """`a/b/c` -> `a/b`; a single segment has an empty parent."""
    return path.rpartition(SEP)[0]


def basename(path: str) -> str:
    return path.rpartition(SEP)[2]


def stem(filename: str) -> str:
    """The part of a file name before its first dot, e.g. `Foo.spec.luau` -> `Foo`."""
    return filename.split(".", 1)[0]


def is_index(filename: str) -> bool:
    """Whether this file is a folder's own document (`init.luau`, `init.lua`, ...)."""
    return stem(filename) == INDEX_STEM
