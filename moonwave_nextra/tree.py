from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Dict, Iterable, Iterator, Union

from . import paths
from .errors import TreeCollisionError
from .items import ClassDescriptor
from .renderer import render_class

log = logging.getLogger(__name__)

# The second segment of a source path is the package's source directory
# (e.g. `src` in `Signal/src/init.luau`), which isn't part of the published path.
DROPPED_SEGMENT = 1

DUPLICATE_POLICIES = ("overwrite", "warn", "error")


def check_duplicate_policy(on_duplicate: str) -> None:
    if on_duplicate not in DUPLICATE_POLICIES:
        raise ValueError(f"on_duplicate must be one of {DUPLICATE_POLICIES}, not {on_duplicate!r}")


def handle_duplicate(on_duplicate: str, message: str) -> None:
    """Apply the duplicate policy before a page replaces another one."""
    if on_duplicate == "error":
        raise TreeCollisionError(message)
    if on_duplicate == "warn":
        log.warning(message)


@dataclasses.dataclass
class FileNode:
    """A rendered document, placed at `full_path` in the tree."""

    name: str
    class_name: str
    full_path: str
    document: str

    @property
    def is_index(self) -> bool:
        """Whether this is the folder's own document (`init.luau`)."""
        return paths.is_index(self.name)


@dataclasses.dataclass
class FolderNode:
    name: str
    children: Dict[str, Node] = dataclasses.field(default_factory=dict)

    def folder(self, name: str) -> FolderNode:
        """Get the sub-folder by this name, creating it if needed.

        Raises:
            TreeCollisionError: if a file already occupies that name.
        """
        child = self.children.get(name)
        if child is None:
            child = self.children[name] = FolderNode(name)
        elif not isinstance(child, FolderNode):
            raise TreeCollisionError(
                f"Can't make a folder {name!r}: class {child.class_name!r} is already "
                f"documented at {child.full_path!r}"
            )
        return child

    def folders(self) -> Iterator[FolderNode]:
        for child in self.children.values():
            if isinstance(child, FolderNode):
                yield child

    def files(self) -> Iterator[FileNode]:
        for child in self.children.values():
            if isinstance(child, FileNode):
                yield child

    def index_file(self) -> FileNode | None:
        return next((f for f in self.files() if f.is_index), None)


Node = Union[FolderNode, FileNode]


@dataclasses.dataclass
class FileTree:
    root: FolderNode
    file_count: int = 0


def published_segments(source_path: str) -> list[str]:
    """`Signal/src/init.luau` -> `["Signal", "init.luau"]`."""
    return paths.remove_segment(paths.split(source_path), DROPPED_SEGMENT)


def build_tree(
    classes: Iterable[ClassDescriptor],
    *,
    on_duplicate: str = "warn",
    render: Callable[[ClassDescriptor], str] = render_class,
) -> FileTree:
    """Place a rendered document for every class into a tree mirroring their source paths.

    Args:
        classes: Descriptors from the extractor, placed in order.
        on_duplicate: What to do when two classes land on the same file:
            `overwrite` quietly keeps the last one, `warn` does the same but logs it,
            `error` raises.
        render: Turns one class into its document.

    Raises:
        TreeCollisionError: if a name is needed both as a folder and as a file,
            or on a duplicate file with `on_duplicate="error"`.
    """
    check_duplicate_policy(on_duplicate)

    tree = FileTree(FolderNode(""))

    for cls in classes:
        segments = published_segments(cls.source_path)

        log.info("Building MDX for class '%s'", cls.name)
        document = render(cls)

        node = tree.root
        for segment in segments[:-1]:
            node = node.folder(segment)

        file_name = segments[-1]
        new = FileNode(file_name, cls.name, paths.join(segments), document)
        old = node.children.get(file_name)
        if isinstance(old, FolderNode):
            raise TreeCollisionError(
                f"Can't place class {cls.name!r} at {new.full_path!r}: that's already a folder"
            )
        if old is not None:
            handle_duplicate(
                on_duplicate,
                f"Class {cls.name!r} replaces class {old.class_name!r} at {new.full_path!r}",
            )
        node.children[file_name] = new

        tree.file_count += 1

    log.info("Built #%d virtual MDXs", tree.file_count)
    return tree
