"""Leaf validators for booleans, numbers, strings and constants.

All of these are pass-through guards built with ``boolean_validator``: they
return the input itself or raise ``SingleValidationError``.

Numbers are a single kind at this level: ``int`` and ``float`` are both
numbers, ``bool`` is not, and an integral float such as ``2.0`` counts as
an integer.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from .validator import UNDEFINED, Validator, boolean_validator

MAX_SAFE_INTEGER = 2**53 - 1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    # Python ints are always finite, however large
    return _is_number(value) and (isinstance(value, int) or math.isfinite(value))


def _is_integral(value: Any) -> bool:
    if isinstance(value, int):
        return not isinstance(value, bool)
    return isinstance(value, float) and value.is_integer()


def _is_safe_integer(value: Any) -> bool:
    return _is_integral(value) and abs(value) <= MAX_SAFE_INTEGER


v_boolean = boolean_validator("boolean", lambda value: isinstance(value, bool))

# Excludes bool. NaN and infinities pass; use v_real_number to reject them.
v_number = boolean_validator("number", _is_number)

v_real_number = boolean_validator("real number", _is_real)


def v_number_between(min: Real, max: Real) -> Validator[Any]:
    """Validate a real number in the range ``[min, max)``."""
    if min > max:
        raise ValueError(f"min ({min}) cannot be greater than max ({max})")
    return boolean_validator(
        f"number between {min} and {max}",
        lambda value: _is_real(value) and min <= value < max,
    )


# Rejects integers beyond MAX_SAFE_INTEGER; use v_any_integer to allow them.
v_integer = boolean_validator("integer", _is_safe_integer)

v_any_integer = boolean_validator("any integer", _is_integral)

v_natural_number = boolean_validator(
    "natural number", lambda value: _is_safe_integer(value) and value > 0
)

v_non_negative_integer = boolean_validator(
    "non-negative integer", lambda value: _is_safe_integer(value) and value >= 0
)

v_string = boolean_validator("string", lambda value: isinstance(value, str))

v_non_empty_string = boolean_validator(
    "non-empty string", lambda value: isinstance(value, str) and len(value) > 0
)


def v_string_of_length(min_length: int, max_length: int | None = None) -> Validator[Any]:
    """Validate a string whose length lies in ``[min_length, max_length]``.

    With only ``min_length`` given, the string must be exactly that long.
    Length counts code points, as ``len`` does.
    """
    if max_length is None:
        max_length = min_length
    if min_length < 0:
        raise ValueError(f"min length cannot be negative: {min_length}")
    if min_length > max_length:
        raise ValueError(f"min length ({min_length}) cannot be greater than max ({max_length})")

    if min_length == max_length:
        type_name = f"string of length {min_length}"
    else:
        type_name = f"string of length [{min_length}, {max_length}]"
    return boolean_validator(
        type_name,
        lambda value: isinstance(value, str) and min_length <= len(value) <= max_length,
    )


def _describe_const(value: Any) -> str:
    if value is None:
        return "exact None"
    if value is UNDEFINED:
        return "exact undefined"
    if _is_number(value):
        return f"exact number `{value!s}`"
    return f"exact {type(value).__name__} `{value!s}`"


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _same_constant(candidate: Any, expected: Any) -> bool:
    if candidate is expected:
        return True
    if _is_number(expected):
        if not _is_number(candidate):
            return False
        # NaN never equals itself, but should still match a NaN constant
        return candidate == expected or (_is_nan(candidate) and _is_nan(expected))
    return type(candidate) is type(expected) and candidate == expected


def v_const(value: Any) -> Validator[Any]:
    """Validate that a value is strictly equal to ``value``.

    Unlike ``==``, ``True`` does not match ``1``. NaN matches NaN.

    Example:
        ```python
        v_const("example")("example")
        # 'example'
        ```
    """
    return boolean_validator(_describe_const(value), lambda candidate: _same_constant(candidate, value))


v_null = v_const(None)
v_undefined = v_const(UNDEFINED)
v_true = v_const(True)
v_false = v_const(False)
