from __future__ import annotations

import dataclasses
import logging
from typing import Sequence

from .extractor import run_extractor
from .filesystem import FileSystem, LocalFileSystem
from .index_page import PACKAGES_DIR, write_index_page
from .items import ClassDescriptor
from .materialize import materialize, write_manifests
from .packages import PackageIndex
from .tree import build_tree

log = logging.getLogger(__name__)


@dataclasses.dataclass
class BuildConfig:
    extractor: str = "vendor/moonwave-extractor"
    """The extractor executable."""
    input_dir: str = "package-index/packages"
    """Directory the extractor scans for doc comments."""
    output_dir: str = "pages"
    """Root of the site's pages; `Packages/` and `index.mdx` are written here."""
    package_index: str = "package-index/packages"
    """Directory holding `<package>/wally.toml` for every package."""
    on_duplicate: str = "warn"
    """See [build_tree][moonwave_nextra.tree.build_tree]."""

    @property
    def packages_dir(self) -> str:
        return f"{self.output_dir}/{PACKAGES_DIR}"


def generate(
    classes: Sequence[ClassDescriptor], config: BuildConfig, fs: FileSystem | None = None
) -> None:
    """Regenerate all pages from already extracted classes.

    Everything under `<output_dir>/Packages` is deleted first.
    """
    fs = fs or LocalFileSystem()

    if fs.is_dir(config.packages_dir):
        fs.remove_dir(config.packages_dir)
    fs.make_dirs(config.packages_dir)

    tree = build_tree(classes, on_duplicate=config.on_duplicate)

    log.info("Writing #%d virtual MDXs", tree.file_count)
    manifests = materialize(
        fs, tree.root, config.packages_dir, on_duplicate=config.on_duplicate
    )

    write_index_page(fs, config.output_dir, tree.root, PackageIndex(fs, config.package_index))
    write_manifests(fs, manifests)

    log.info("Finished writing Virtual FS")


def build(config: BuildConfig, fs: FileSystem | None = None) -> None:
    """Extract the docs and regenerate all pages.

    Raises:
        BuildError: on any failure; the output directory may be left half-written.
    """
    classes = run_extractor(config.extractor, config.input_dir)
    generate(classes, config, fs)
