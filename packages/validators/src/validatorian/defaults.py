"""Combinators that substitute values: defaults, fallbacks and overrides.

Each takes either a literal value or a producer, never both, in the style of
``dataclasses.field(default=..., default_factory=...)``. A producer is only
called when its value is needed, so mutable defaults can be created fresh.
"""

from __future__ import annotations

from typing import Any, Callable

from .errors import ValidationError
from .validator import Validator, is_absent


class _NoValue:
    """Marks a keyword argument that was not passed."""

    def __repr__(self) -> str:
        return "<no value>"


_NO_VALUE: Any = _NoValue()


def _check_choice(
    combinator: str,
    literal_name: str,
    literal: Any,
    factory_name: str,
    factory: Callable[..., Any] | None,
) -> None:
    if literal is _NO_VALUE and factory is None:
        raise ValueError(f"{combinator} requires either {literal_name} or {factory_name}")
    if literal is not _NO_VALUE and factory is not None:
        raise ValueError(f"{combinator} accepts {literal_name} or {factory_name}, not both")
    if factory is not None and not callable(factory):
        raise TypeError(f"{factory_name} must be callable, got {type(factory).__name__}")


def v_with_default(
    v: Validator[Any],
    default: Any = _NO_VALUE,
    *,
    default_factory: Callable[[], Any] | None = None,
) -> Validator[Any]:
    """Replace ``None`` and ``UNDEFINED`` with a default; validate anything else with ``v``.

    Args:
        v: Validator for present values
        default: Value returned for absent input
        default_factory: Zero-argument callable producing the value for absent input

    Use ``v_with_fallback`` to substitute every value that fails validation.

    Example:
        ```python
        v_port = v_with_default(v_natural_number, 8080)
        v_port(None)
        # 8080
        v_tags = v_with_default(v_array(v_string), default_factory=list)
        ```
    """
    _check_choice("v_with_default", "default", default, "default_factory", default_factory)

    def validate(value: Any) -> Any:
        if is_absent(value):
            return default_factory() if default_factory is not None else default
        return v(value)

    return validate


def v_with_fallback(
    v: Validator[Any],
    fallback: Any = _NO_VALUE,
    *,
    fallback_factory: Callable[[Any], Any] | None = None,
) -> Validator[Any]:
    """Validate with ``v`` and substitute a fallback when validation fails.

    Only ``ValidationError`` triggers the fallback; other exceptions
    propagate.

    Args:
        v: Validator to try
        fallback: Value returned when ``v`` rejects the input
        fallback_factory: Callable receiving the rejected input and producing the value
    """
    _check_choice("v_with_fallback", "fallback", fallback, "fallback_factory", fallback_factory)

    def validate(value: Any) -> Any:
        try:
            return v(value)
        except ValidationError:
            if fallback_factory is not None:
                return fallback_factory(value)
            return fallback

    return validate


def v_override(
    value: Any = _NO_VALUE,
    *,
    factory: Callable[[Any], Any] | None = None,
) -> Validator[Any]:
    """Ignore the input and return ``value``, or ``factory(input)``.

    Example:
        ```python
        v_record = v_object({"id": v_string, "source": v_override("import")})
        ```
    """
    _check_choice("v_override", "value", value, "factory", factory)

    def validate(original: Any) -> Any:
        if factory is not None:
            return factory(original)
        return value

    return validate
