"""Combinators that build validators out of other validators.

Example:
    ```python
    v_user = v_object({
        "name": v_non_empty_string,
        "tags": v_array(v_string),
        "position": v_tuple(v_number, v_number),
        "id": v_union(v_natural_number, v_string),
        "email": v_optional(v_string),
    })
    user = v_user(json.loads(payload))
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Hashable, List

from .errors import SingleValidationError, UnionValidationError, ValidationError
from .paths import PathSymbol
from .primitives import v_null, v_undefined
from .validator import UNDEFINED, Validator

logger = logging.getLogger(__name__)

# Values that can never act as a bag of properties.
_SCALAR_TYPES = (bool, int, float, complex, str, bytes, bytearray, PathSymbol)


def _is_object_like(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    if value is None or value is UNDEFINED or isinstance(value, _SCALAR_TYPES):
        return False
    return not callable(value)


def _read_property(value: Any, key: Hashable) -> Any:
    if isinstance(value, Mapping):
        return value.get(key, UNDEFINED)
    if isinstance(value, (list, tuple)):
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(value):
            return value[key]
        return UNDEFINED
    if isinstance(key, str):
        return getattr(value, key, UNDEFINED)
    return UNDEFINED


def _is_array_like(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def v_object(template: Mapping[Hashable, Validator[Any]]) -> Validator[Dict[Hashable, Any]]:
    """Validate that a value is an object matching ``template``.

    Mappings, lists, tuples and other non-scalar objects with the right
    properties are accepted; the result is always a new ``dict``.

    Only the keys of ``template`` are copied: other keys of the input are
    dropped, and keys missing from the input are read as ``UNDEFINED`` and
    handed to the key's validator, so ``v_optional`` fields come out as
    ``UNDEFINED``.

    A ``SingleValidationError`` raised for a field gets the field's key
    prepended to its path.
    """
    template = dict(template)

    def validate(value: Any) -> Dict[Hashable, Any]:
        if not _is_object_like(value):
            raise SingleValidationError("object", value)

        output: Dict[Hashable, Any] = {}
        for key, field_validator in template.items():
            try:
                output[key] = field_validator(_read_property(value, key))
            except SingleValidationError as error:
                raise error.with_extended_path(key) from None
        return output

    return validate


def _array_validator(
    item_validator: Validator[Any],
    type_name: str,
    min_length: int | None = None,
    max_length: int | None = None,
) -> Validator[List[Any]]:
    if min_length is not None and min_length < 0:
        raise ValueError(f"min length cannot be negative: {min_length}")
    if max_length is not None and max_length < 0:
        raise ValueError(f"max length cannot be negative: {max_length}")
    if min_length is not None and max_length is not None and min_length > max_length:
        raise ValueError(f"min length ({min_length}) cannot be greater than max ({max_length})")

    def validate(value: Any) -> List[Any]:
        if (
            not _is_array_like(value)
            or (min_length is not None and len(value) < min_length)
            or (max_length is not None and len(value) > max_length)
        ):
            raise SingleValidationError(type_name, value)
        # Element errors are re-raised as they are; no index is added to the path.
        return [item_validator(item) for item in value]

    return validate


def v_array(item_validator: Validator[Any]) -> Validator[List[Any]]:
    """Validate a list or tuple whose every item passes ``item_validator``."""
    return _array_validator(item_validator, "array")


def v_array_of_length(item_validator: Validator[Any], length: int) -> Validator[List[Any]]:
    """Validate an array of exactly ``length`` items."""
    return _array_validator(item_validator, f"array of length {length}", length, length)


def v_array_of_length_between(
    item_validator: Validator[Any], min_length: int, max_length: int
) -> Validator[List[Any]]:
    """Validate an array of ``min_length`` to ``max_length`` items, inclusive."""
    return _array_validator(
        item_validator, f"array of length [{min_length}, {max_length}]", min_length, max_length
    )


def v_array_of_at_least_length(item_validator: Validator[Any], min_length: int) -> Validator[List[Any]]:
    """Validate an array of at least ``min_length`` items."""
    return _array_validator(item_validator, f"array of at least length {min_length}", min_length=min_length)


def v_array_of_at_most_length(item_validator: Validator[Any], max_length: int) -> Validator[List[Any]]:
    """Validate an array of at most ``max_length`` items."""
    return _array_validator(item_validator, f"array of at most length {max_length}", max_length=max_length)


def v_nonempty_array_of(item_validator: Validator[Any]) -> Validator[List[Any]]:
    """Validate a non-empty array."""
    return v_array_of_at_least_length(item_validator, 1)


def v_tuple(*validators: Validator[Any]) -> Validator[List[Any]]:
    """Validate a fixed sequence of positions.

    Missing positions are read as ``UNDEFINED`` and extra items are dropped,
    so the result always has one item per validator. Use ``v_strict_tuple``
    to require the exact length instead.
    """

    def validate(value: Any) -> List[Any]:
        if not _is_array_like(value):
            raise SingleValidationError("tuple", value)
        return [
            position_validator(value[index] if index < len(value) else UNDEFINED)
            for index, position_validator in enumerate(validators)
        ]

    return validate


def v_strict_tuple(*validators: Validator[Any]) -> Validator[List[Any]]:
    """Validate a sequence with exactly one item per validator."""
    type_name = f"tuple of length {len(validators)}"

    def validate(value: Any) -> List[Any]:
        if not _is_array_like(value) or len(value) != len(validators):
            raise SingleValidationError(type_name, value)
        return [
            position_validator(item)
            for position_validator, item in zip(validators, value)
        ]

    return validate


def v_union(*validators: Validator[Any]) -> Validator[Any]:
    """Validate a value that may take one of several shapes.

    Alternatives are tried in order and the first result is returned; later
    alternatives are not called. When all of them raise ``ValidationError``,
    a ``UnionValidationError`` holding every error is raised. Any other
    exception stops validation immediately.

    Example:
        ```python
        v_number_or_string = v_union(v_number, v_string)
        v_number_or_string(1)
        # 1
        v_number_or_string("test")
        # 'test'
        ```
    """
    if not validators:
        raise ValueError("v_union requires at least one validator")

    def validate(value: Any) -> Any:
        errors: List[ValidationError] = []
        for alternative in validators:
            try:
                return alternative(value)
            except ValidationError as error:
                errors.append(error)
        logger.debug("All %d union alternatives rejected %r", len(errors), value)
        raise UnionValidationError(errors, value)

    return validate


def v_optional(v: Validator[Any]) -> Validator[Any]:
    """Accept values passing ``v``, ``UNDEFINED`` or ``None``."""
    return v_union(v, v_undefined, v_null)


def v_nullable(v: Validator[Any]) -> Validator[Any]:
    """Accept values passing ``v`` or ``None``."""
    return v_union(v, v_null)


def v_or_undefined(v: Validator[Any]) -> Validator[Any]:
    """Accept values passing ``v`` or ``UNDEFINED``."""
    return v_union(v, v_undefined)
