from __future__ import annotations

import dataclasses
import tomllib
from typing import Optional

from .errors import FilesystemError, MetadataMissing
from .filesystem import FileSystem

MANIFEST_NAME = "wally.toml"


@dataclasses.dataclass(frozen=True)
class PackageMetadata:
    """The `[package]` table of a `wally.toml`."""

    name: str
    """The registry name, e.g. `scope/signal`."""
    version: str
    description: Optional[str] = None

    @property
    def dependency(self) -> str:
        """The registry reference, e.g. `scope/signal@1.0.0`."""
        return f"{self.name}@{self.version}"


class PackageIndex:
    """Reads package manifests out of `<root>/<folder>/wally.toml`."""

    def __init__(self, fs: FileSystem, root: str):
        self.fs = fs
        self.root = root
        self._found: dict[str, PackageMetadata] = {}

    def manifest_path(self, folder: str) -> str:
        return f"{self.root}/{folder}/{MANIFEST_NAME}"

    def lookup(self, folder: str) -> PackageMetadata:
        """Raises:
        MetadataMissing: if the manifest is absent, unreadable or lacks a name or version.
        """
        if folder not in self._found:
            self._found[folder] = self._read(folder)
        return self._found[folder]

    def _read(self, folder: str) -> PackageMetadata:
        path = self.manifest_path(folder)
        if not self.fs.is_file(path):
            raise MetadataMissing(f"{path!r} not found")
        try:
            data = tomllib.loads(self.fs.read_file(path))
        except (FilesystemError, tomllib.TOMLDecodeError) as e:
            raise MetadataMissing(f"Can't read {path!r}: {e}") from e

        package = data.get("package")
        if not isinstance(package, dict):
            raise MetadataMissing(f"`[package]` not found in {path!r}")
        try:
            return PackageMetadata(
                name=package["name"],
                version=package["version"],
                description=package.get("description"),
            )
        except KeyError as e:
            raise MetadataMissing(f"`package.{e.args[0]}` not found in {path!r}") from None
