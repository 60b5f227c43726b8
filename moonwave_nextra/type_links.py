from __future__ import annotations

import re
from typing import Optional, Sequence

_LUAU_DOCS = "https://create.roblox.com/docs/en-us/luau"
_ENGINE_DOCS = "https://create.roblox.com/docs/en-us/reference/engine"

# Checked in this order, first match wins.
KNOWN_TYPES: Sequence[tuple[frozenset[str], str]] = [
    # Luau builtins
    (frozenset({"boolean", "bool"}), f"{_LUAU_DOCS}/booleans"),
    (frozenset({"nil"}), f"{_LUAU_DOCS}/nil"),
    (frozenset({"number"}), f"{_LUAU_DOCS}/numbers"),
    (frozenset({"string"}), f"{_LUAU_DOCS}/strings"),
    (frozenset({"table"}), f"{_LUAU_DOCS}/tables"),
    (frozenset({"tuple"}), f"{_LUAU_DOCS}/tuples"),
    (frozenset({"userdata", "proxy"}), f"{_LUAU_DOCS}/userdata"),
    # Common engine datatypes
    (frozenset({"instance"}), f"{_ENGINE_DOCS}/datatypes/Instance"),
    (frozenset({"player"}), f"{_ENGINE_DOCS}/classes/Player"),
    (frozenset({"vector3", "vec3"}), f"{_ENGINE_DOCS}/datatypes/Vector3"),
    (frozenset({"vector2", "vec2"}), f"{_ENGINE_DOCS}/datatypes/Vector2"),
    (frozenset({"udim2"}), f"{_ENGINE_DOCS}/datatypes/UDim2"),
    (frozenset({"udim"}), f"{_ENGINE_DOCS}/datatypes/UDim"),
    (frozenset({"rbxscriptsignal", "signal"}), f"{_ENGINE_DOCS}/datatypes/RBXScriptSignal"),
    (
        frozenset({"rbxscriptconnection", "connection"}),
        f"{_ENGINE_DOCS}/datatypes/RBXScriptConnection",
    ),
]


def normalize(type_name: str) -> str:
    """`Vector3?` -> `vector3`, `VEC-3` -> `vec3`."""
    return re.sub(r"[^a-z0-9]", "", type_name.lower())


def lookup_url(type_name: str) -> Optional[str]:
    """The documentation URL of a known type, or None."""
    key = normalize(type_name)
    for aliases, url in KNOWN_TYPES:
        if key in aliases:
            return url
    return None


def type_link(type_name: str) -> str:
    """Turn a type into a Markdown link to its documentation, if it's a known one.

    Only linked text gets its `{` escaped (MDX would read it as an expression);
    unknown types are returned exactly as given.
    """
    url = lookup_url(type_name)
    if url is None:
        return type_name
    escaped = type_name.replace("{", "\\{")
    return f"[{escaped}]({url})"
