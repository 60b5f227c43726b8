import logging

import pytest

from moonwave_nextra.errors import MetadataMissing
from moonwave_nextra.index_page import package_rows, render_index_page, write_index_page
from moonwave_nextra.packages import PackageIndex, PackageMetadata
from moonwave_nextra.tree import build_tree

from .conftest import MemoryFileSystem, make_class

WALLY = """\
[package]
name = "someone/{name}"
version = "1.2.0"
{extra}
"""


def _fs(**packages):
    return MemoryFileSystem(
        dirs=["pages"],
        files={
            f"index/{folder}/wally.toml": WALLY.format(name=folder.lower(), extra=extra)
            for folder, extra in packages.items()
        },
    )


def _tree():
    return build_tree(
        [
            make_class("Signal", "Signal/src/init.luau"),
            make_class("Connection", "Signal/src/Connection.luau"),
            make_class("Janitor", "Janitor/src/init.luau"),
            make_class("Loose", "Loose/src/Loose.luau"),
        ],
        render=lambda cls: "",
    ).root


def test_package_index_lookup():
    packages = PackageIndex(_fs(Signal='description = "Signals."'), "index")
    assert packages.lookup("Signal") == PackageMetadata("someone/signal", "1.2.0", "Signals.")
    assert packages.lookup("Signal").dependency == "someone/signal@1.2.0"
    with pytest.raises(MetadataMissing):
        packages.lookup("Nope")


@pytest.mark.parametrize(
    "content",
    ["not = [toml", '[package]\nname = "a/b"\n', 'name = "a/b"\n'],
)
def test_package_index_broken_manifest(content):
    fs = MemoryFileSystem(files={"index/Broken/wally.toml": content})
    with pytest.raises(MetadataMissing):
        PackageIndex(fs, "index").lookup("Broken")


def test_package_rows(caplog):
    packages = PackageIndex(_fs(Signal=""), "index")
    with caplog.at_level(logging.WARNING):
        rows = list(package_rows(_tree(), packages))
    assert [(row.folder, row.link) for row in rows] == [("Signal", "Packages/Signal")]
    assert rows[0].binary_url.endswith("/binaries/Signal.rbxm")
    assert "Leaving package 'Janitor' out of the index" in caplog.text
    assert "Loose" not in caplog.text


def test_render_index_page():
    packages = PackageIndex(_fs(Signal='description = "Signals."', Janitor=""), "index")
    page = render_index_page(_tree(), packages)
    assert page.startswith("# Welcome 👋\n")
    assert (
        '| [Janitor](Packages/Janitor) | ```Janitor = "someone/janitor@1.2.0"``` '
        "| No description provided. |\n"
        '| [Signal](Packages/Signal) | ```Signal = "someone/signal@1.2.0"``` | Signals. |\n'
    ) in page
    assert (
        "| [Janitor](Packages/Janitor) | [direct download]"
        "(https://github.com/4x8Matrix/wally-packages/tree/master/binaries/Janitor.rbxm) |\n"
    ) in page
    assert "## Reuploads" in page
    assert page.endswith("their own section in this documentation.\n")


def test_write_index_page_replaces_old():
    fs = _fs(Signal="")
    fs.files["pages/index.mdx"] = "old"
    write_index_page(fs, "pages", _tree(), PackageIndex(fs, "index"))
    assert fs.files["pages/index.mdx"].startswith("# Welcome")
    assert ("remove_file", "pages/index.mdx") in fs.log


def test_package_index_reads_each_manifest_once():
    fs = _fs(Signal="")
    packages = PackageIndex(fs, "index")
    first = packages.lookup("Signal")
    fs.files["index/Signal/wally.toml"] = "broken ["
    assert packages.lookup("Signal") is first
    with pytest.raises(MetadataMissing):
        PackageIndex(fs, "index").lookup("Signal")
