from __future__ import annotations

import json
import logging
import urllib.parse
from typing import Dict, Mapping

from . import paths
from .filesystem import FileSystem
from .tree import FileNode, FolderNode, check_duplicate_policy, handle_duplicate

log = logging.getLogger(__name__)

OUTPUT_EXTENSION = ".mdx"
MANIFEST_NAME = "_meta.json"

Manifests = Dict[str, Dict[str, str]]
"""Folder path -> {file stem: class name}."""


def url_encode(name: str) -> str:
    return urllib.parse.quote(name, safe="")


def target_of(file: FileNode, folder_path: str) -> tuple[str, str]:
    """Where a file in `folder_path` is published: (directory, encoded stem).

    An index file (`Foo/init.luau`) becomes its folder's own page (`Foo.mdx` next to `Foo/`).
    """
    if file.is_index:
        directory, name = paths.parent(folder_path), paths.basename(folder_path)
    else:
        directory, name = folder_path, paths.stem(file.name)
    return directory, url_encode(name)


def write_folders(fs: FileSystem, folder: FolderNode, path: str) -> None:
    """Create the directory of every folder under `folder`, parents before children."""
    for child in folder.folders():
        child_path = f"{path}/{child.name}"
        fs.make_dir(child_path)
        write_folders(fs, child, child_path)


def write_files(
    fs: FileSystem,
    folder: FolderNode,
    path: str,
    manifests: Manifests,
    on_duplicate: str = "warn",
) -> None:
    """Write every document under `folder`, recording each one into `manifests`.

    The directories must already exist, see `write_folders`.

    Raises:
        TreeCollisionError: if two files publish to the same page and `on_duplicate="error"`.
    """
    for child in folder.children.values():
        if isinstance(child, FolderNode):
            write_files(fs, child, f"{path}/{child.name}", manifests, on_duplicate)
            continue
        directory, name = target_of(child, path)
        entries = manifests.setdefault(directory, {})
        target = f"{directory}/{name}{OUTPUT_EXTENSION}"
        if name in entries:
            # e.g. `Foo/Util/init.luau` and `Foo/Util.luau` are both `Foo/Util.mdx`.
            handle_duplicate(
                on_duplicate,
                f"Class {child.class_name!r} from {child.full_path!r} replaces "
                f"class {entries[name]!r} at {target!r}",
            )
        entries[name] = child.class_name
        fs.write_file(target, child.document)


def materialize(
    fs: FileSystem, root: FolderNode, path: str, *, on_duplicate: str = "warn"
) -> Manifests:
    """Write out the whole tree into the existing directory `path`.

    Returns:
        The navigation entries of every directory that received a document.
    Raises:
        FilesystemError: at the first failed operation; the output is left as is.
        TreeCollisionError: see `write_files`.
    """
    check_duplicate_policy(on_duplicate)
    write_folders(fs, root, path)
    manifests: Manifests = {}
    write_files(fs, root, path, manifests, on_duplicate)
    return manifests


def dump_manifest(entries: Mapping[str, str]) -> str:
    return json.dumps(entries, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def write_manifests(fs: FileSystem, manifests: Manifests) -> None:
    for directory in sorted(manifests):
        fs.write_file(f"{directory}/{MANIFEST_NAME}", dump_manifest(manifests[directory]))
    log.debug("Wrote %d navigation manifests", len(manifests))
