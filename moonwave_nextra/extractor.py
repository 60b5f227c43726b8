from __future__ import annotations

import json
import logging
import shlex
import subprocess
from typing import IO, Sequence

from .errors import DescriptorError, ExtractionFailure
from .items import ClassDescriptor, read_descriptors

log = logging.getLogger(__name__)


def read(file: IO) -> list[ClassDescriptor]:
    """Read the extractor's JSON output from a file."""
    return loads(file.read())


def loads(text: str | bytes) -> list[ClassDescriptor]:
    try:
        data = json.loads(text)
    except ValueError as e:  # also UnicodeDecodeError on non-UTF-8 bytes
        raise DescriptorError(f"The extractor produced invalid JSON: {e}") from e
    return read_descriptors(data)


def extract_command(extractor: str, input_dir: str) -> Sequence[str]:
    return [extractor, "extract", input_dir]


def run_extractor(extractor: str, input_dir: str) -> list[ClassDescriptor]:
    """Run `<extractor> extract <input_dir>` and read the classes it found.

    Raises:
        ExtractionFailure: if the extractor can't be started or exits with an error.
    """
    command = extract_command(extractor, input_dir)
    log.debug("Running `%s`", " ".join(shlex.quote(arg) for arg in command))

    try:
        proc = subprocess.run(command, capture_output=True)
    except OSError as e:
        raise ExtractionFailure(f"Can't run {extractor!r}: {e}") from e
    if proc.returncode:
        raise ExtractionFailure(proc.stderr.decode("utf-8", errors="replace"))
    return loads(proc.stdout)
