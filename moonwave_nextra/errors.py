from __future__ import annotations


class BuildError(Exception):
    """Base class for everything that aborts (or skips part of) a documentation build."""


class ExtractionFailure(BuildError):
    """The external extractor exited with a non-zero status.

    The message is the extractor's stderr, verbatim.
    """


class DescriptorError(BuildError):
    """A class descriptor doesn't follow the shape the extractor promises."""


class TreeCollisionError(BuildError):
    """A path segment is claimed both as a folder and as a file."""


class FilesystemError(BuildError):
    """A filesystem primitive failed."""


class MetadataMissing(BuildError):
    """A package has no readable `wally.toml`. Not fatal; the package is left out of the index."""
