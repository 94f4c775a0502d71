"""Locations inside nested values.

A path is a tuple of steps read from the root value down to the failing
value. Steps are object keys (``str``), sequence indices (``int``) or
``PathSymbol`` tokens.

Paths are kept as tuples rather than strings, since keys can contain ``.``
or brackets and symbols have no unambiguous text form. Use
``path_to_string`` for a readable rendering.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Tuple, Union


class PathSymbol:
    """Opaque key with identity semantics and an optional description.

    Two symbols are never equal unless they are the same object, even when
    their descriptions match, so a symbol can be used as a mapping key that
    never collides with ordinary string keys.

    Example:
        ```python
        secret = PathSymbol("secret")
        v = v_object({secret: v_string})
        v({secret: "token"})
        ```
    """

    __slots__ = ("_description",)

    def __init__(self, description: str | None = None):
        self._description = description

    @property
    def description(self) -> str | None:
        return self._description

    def __repr__(self) -> str:
        if self._description is None:
            return "PathSymbol()"
        return f"PathSymbol({self._description!r})"

    def __str__(self) -> str:
        if self._description is None:
            return "Symbol()"
        return f"Symbol({self._description})"


PathStep = Union[str, int, PathSymbol]
Path = Tuple[Hashable, ...]


def escape_string(key: str) -> str:
    """Escape backslashes, double quotes, newlines, carriage returns and tabs."""
    return (
        key.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def step_to_string(step: Hashable) -> str:
    """Render a single path step."""
    if isinstance(step, PathSymbol):
        if step.description:
            return f'[Symbol("{escape_string(step.description)}")]'
        return "[Symbol()]"

    if isinstance(step, int) and not isinstance(step, bool):
        return f"[{step}]"

    key = step if isinstance(step, str) else str(step)
    escaped = escape_string(key)
    if escaped != key or " " in key or "." in key:
        return f'["{escaped}"]'
    return f".{key}"


def path_to_string(path: Iterable[Hashable]) -> str:
    """Convert a path to a readable string.

    Example:
        ```python
        path_to_string((1, "a", PathSymbol("description")))
        # '[1].a[Symbol("description")]'
        path_to_string(("first name",))
        # '["first name"]'
        ```
    """
    return "".join(step_to_string(step) for step in path)
