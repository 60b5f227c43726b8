from __future__ import annotations

from .errors import (
    BuildError,
    DescriptorError,
    ExtractionFailure,
    FilesystemError,
    MetadataMissing,
    TreeCollisionError,
)
from .pipeline import BuildConfig, build, generate

__version__ = "0.1.0"

__all__ = [
    "BuildConfig",
    "BuildError",
    "DescriptorError",
    "ExtractionFailure",
    "FilesystemError",
    "MetadataMissing",
    "TreeCollisionError",
    "build",
    "generate",
]
