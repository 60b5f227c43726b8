from __future__ import annotations

import functools
from typing import Any, Sequence

import jinja2

from .errors import DescriptorError
from .items import ClassDescriptor, DocFunction, TypedItem
from .type_links import type_link

SINCE_PREFIX_LENGTH = 6


def since_version(since: str) -> str:
    """Cut the version out of a `since` tag, which always starts with a 6-character prefix.

    e.g. `Added 1.2.3` -> `1.2.3`.

    Raises:
        DescriptorError: if there's nothing after the prefix.
    """
    if len(since) <= SINCE_PREFIX_LENGTH:
        raise DescriptorError(f"Can't find a version in the `since` tag {since!r}")
    return since[SINCE_PREFIX_LENGTH:]


def _spaced_list(items: Sequence[str]) -> str:
    return " " + ", ".join(items) + " "


def param_list(func: DocFunction) -> str:
    """e.g. `` `a` number, `b` string `` (with the surrounding spaces), or nothing."""
    if not func.params:
        return ""
    return _spaced_list([f"`{param.name}` {type_link(param.type_name)}" for param in func.params])


def return_list(func: DocFunction) -> str:
    if not func.returns:
        return type_link("nil")
    return _spaced_list([type_link(ret.type_name) for ret in func.returns])


def property_type(prop: TypedItem) -> str:
    return type_link(prop.type_name or "any")


class MdxRenderer:
    """Renders classes and the landing page into Nextra MDX documents."""

    def __init__(self, templates: jinja2.BaseLoader | None = None) -> None:
        self.env = jinja2.Environment(
            loader=templates or jinja2.PackageLoader("moonwave_nextra", "templates"),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self.env.filters["type_link"] = type_link
        self.env.filters["property_type"] = property_type
        self.env.filters["param_list"] = param_list
        self.env.filters["return_list"] = return_list
        self.env.filters["since_version"] = since_version

    def render_class(self, cls: ClassDescriptor) -> str:
        template = self.env.get_template("class.mdx")
        return template.render(
            cls=cls,
            methods=cls.methods,
            functions=cls.static_functions,
        )

    def render_index(self, **context: Any) -> str:
        template = self.env.get_template("index.mdx")
        return template.render(**context)


@functools.lru_cache(maxsize=None)
def default_renderer() -> MdxRenderer:
    """A renderer over the bundled templates."""
    return MdxRenderer()


def render_class(cls: ClassDescriptor) -> str:
    return default_renderer().render_class(cls)
