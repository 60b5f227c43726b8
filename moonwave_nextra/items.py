from __future__ import annotations

import abc
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence

from cached_property import cached_property

from . import paths
from .errors import DescriptorError


class DocItem(metaclass=abc.ABCMeta):
    """A view over one entry of the extractor's JSON output."""

    def __init__(self, data: Mapping[str, Any], parent: Optional[DocItem] = None):
        self.data = data
        self.parent = parent

    @property
    def name(self) -> str:
        """The name of this item, e.g. `Signal` or `Connect`."""
        try:
            return self.data["name"]
        except KeyError:
            raise DescriptorError(f"{type(self).__name__} without a name: {self.data!r}") from None

    @property
    def description(self) -> str:
        """The doc comment of this item, may be empty."""
        return self.data.get("desc") or ""

    @classmethod
    def _properties(cls):
        for attr in dir(cls):
            if attr.startswith("_") or attr in ("data", "parent"):
                continue
            if isinstance(getattr(cls, attr), (property, cached_property)):
                yield attr

    def __repr__(self) -> str:
        items = ", ".join(
            f"{attr}={getattr(self, attr)!r}"
            for attr in self._properties()
            if attr not in ("properties", "functions", "methods", "static_functions")
            and getattr(self, attr)
        )
        return f"{type(self).__name__}({items})"


def _present(
    entries: Optional[Iterable[Optional[Mapping[str, Any]]]],
) -> Iterator[Mapping[str, Any]]:
    # The extractor may leave holes (`null`) in its arrays.
    for entry in entries or ():
        if entry is not None:
            yield entry


class TypedItem(DocItem):
    @property
    def type_name(self) -> str:
        """The raw Luau type as written in the doc comment, e.g. `{ [string]: number }`."""
        return self.data.get("lua_type") or ""


class DocParam(TypedItem):
    """A parameter of a [DocFunction][moonwave_nextra.items.DocFunction]."""


class DocReturn(TypedItem):
    """One of the returned values of a [DocFunction][moonwave_nextra.items.DocFunction]."""

    @property
    def name(self) -> str:
        return ""


class DocProperty(TypedItem):
    """A property of a class."""


class DocFunction(DocItem):
    """A function of a class, either a method (`Class:name`) or static (`Class.name`)."""

    METHOD = "method"
    STATIC = "static"

    @property
    def kind(self) -> str:
        """One of `method`, `static`. Functions of any other kind are not rendered."""
        return self.data.get("function_type")

    @property
    def separator(self) -> str:
        """The call syntax between class and function name."""
        return ":" if self.kind == self.METHOD else "."

    @property
    def since(self) -> Optional[str]:
        return self.data.get("since")

    @property
    def unreleased(self) -> bool:
        return bool(self.data.get("unreleased"))

    @cached_property
    def params(self) -> Sequence[DocParam]:
        return [DocParam(x, self) for x in _present(self.data.get("params"))]

    @cached_property
    def returns(self) -> Sequence[DocReturn]:
        return [DocReturn(x, self) for x in _present(self.data.get("returns"))]


class ClassDescriptor(DocItem):
    """One documented class (or module), as emitted by the extractor."""

    @property
    def source_path(self) -> str:
        """Slash-delimited path of the file that defined this class, e.g. `Signal/src/init.luau`."""
        try:
            path = self.data["source"]["path"]
        except (KeyError, TypeError):
            raise DescriptorError(f"Class {self.name!r} has no source path") from None
        if len(paths.split(path)) < 2:
            raise DescriptorError(
                f"Class {self.name!r} has source path {path!r}, expected at least 2 segments"
            )
        return path

    @cached_property
    def properties(self) -> Sequence[DocProperty]:
        return [DocProperty(x, self) for x in _present(self.data.get("properties"))]

    @cached_property
    def functions(self) -> Sequence[DocFunction]:
        """All functions of this class, in declaration order."""
        return [DocFunction(x, self) for x in _present(self.data.get("functions"))]

    @cached_property
    def methods(self) -> Sequence[DocFunction]:
        return self._functions_of_kind(DocFunction.METHOD)

    @cached_property
    def static_functions(self) -> Sequence[DocFunction]:
        return self._functions_of_kind(DocFunction.STATIC)

    def _functions_of_kind(self, kind: str) -> Sequence[DocFunction]:
        return [func for func in self.functions if func.kind == kind]


def read_descriptors(data: Any) -> list[ClassDescriptor]:
    """Wrap the decoded JSON array of the extractor."""
    if not isinstance(data, list):
        raise DescriptorError(f"Expected a JSON array of classes, got {type(data).__name__}")
    return [ClassDescriptor(x) for x in _present(data)]
