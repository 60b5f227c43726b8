from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .errors import BuildError
from .pipeline import BuildConfig, build
from .tree import DUPLICATE_POLICIES

log = logging.getLogger("moonwave_nextra")


def make_parser() -> argparse.ArgumentParser:
    defaults = BuildConfig()
    parser = argparse.ArgumentParser(
        prog="moonwave-nextra",
        description="Generate Nextra MDX pages from Moonwave doc comments.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--extractor",
        default=defaults.extractor,
        help="The moonwave-extractor executable (default: %(default)s)",
    )
    parser.add_argument(
        "--input-dir",
        default=defaults.input_dir,
        help="Directory to extract doc comments from (default: %(default)s)",
    )
    parser.add_argument(
        "--output-dir",
        default=defaults.output_dir,
        help="The site's pages directory (default: %(default)s)",
    )
    parser.add_argument(
        "--package-index",
        default=defaults.package_index,
        help="Directory with a <package>/wally.toml per package (default: %(default)s)",
    )
    parser.add_argument(
        "--on-duplicate",
        choices=DUPLICATE_POLICIES,
        default=defaults.on_duplicate,
        help="When two classes map to the same page (default: %(default)s)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Also log debug messages")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = make_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s - %(message)s")

    fields = {f.name for f in dataclasses.fields(BuildConfig)}
    config = BuildConfig(**{k: v for k, v in vars(args).items() if k in fields})
    try:
        build(config)
    except BuildError as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
