from __future__ import annotations

import dataclasses
import logging
from typing import Iterator

from . import paths
from .errors import MetadataMissing
from .filesystem import FileSystem
from .packages import PackageIndex, PackageMetadata
from .renderer import MdxRenderer, default_renderer
from .tree import FolderNode

log = logging.getLogger(__name__)

INDEX_PAGE = "index.mdx"
PACKAGES_DIR = "Packages"
BINARIES_URL = "https://github.com/4x8Matrix/wally-packages/tree/master/binaries"


@dataclasses.dataclass
class PackageRow:
    folder: str
    link: str
    metadata: PackageMetadata

    @property
    def binary_url(self) -> str:
        return f"{BINARIES_URL}/{self.folder}.rbxm"


def package_rows(root: FolderNode, packages: PackageIndex) -> Iterator[PackageRow]:
    """One row per top-level folder that has its own document and a readable manifest."""
    for folder in sorted(root.folders(), key=lambda f: f.name):
        index_file = folder.index_file()
        if index_file is None:
            continue
        try:
            metadata = packages.lookup(folder.name)
        except MetadataMissing as e:
            log.warning("Leaving package %r out of the index: %s", folder.name, e)
            continue
        link = f"{PACKAGES_DIR}/{paths.parent(index_file.full_path)}"
        yield PackageRow(folder.name, link, metadata)


def render_index_page(
    root: FolderNode, packages: PackageIndex, renderer: MdxRenderer | None = None
) -> str:
    renderer = renderer or default_renderer()
    return renderer.render_index(
        packages=list(package_rows(root, packages)),
        binaries_url=BINARIES_URL,
    )


def write_index_page(
    fs: FileSystem, output_dir: str, root: FolderNode, packages: PackageIndex
) -> None:
    """Replace `<output_dir>/index.mdx` with a fresh landing page."""
    path = f"{output_dir}/{INDEX_PAGE}"
    content = render_index_page(root, packages)
    if fs.is_file(path):
        fs.remove_file(path)
    fs.write_file(path, content)
