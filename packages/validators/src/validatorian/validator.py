"""The validator contract and the factory for predicate validators.

A validator is any callable taking one untyped value. It either returns a
value of the validated type (the input itself, or a newly built copy) or
raises a ``ValidationError``.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .errors import SingleValidationError

T = TypeVar("T")

Validator = Callable[[Any], T]


class Undefined:
    """Type of ``UNDEFINED``, the marker for a value that is not present at all.

    ``None`` is a value someone wrote down; ``UNDEFINED`` is what the object
    and tuple combinators read for a missing key or position. There is only
    ever one instance.
    """

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return "undefined"

    def __reduce__(self):
        return (Undefined, ())

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> Undefined:
        return self


UNDEFINED = Undefined()


def is_absent(value: Any) -> bool:
    """True for the two empty sentinels, ``None`` and ``UNDEFINED``."""
    return value is None or value is UNDEFINED


def validator(v: Validator[T]) -> Validator[T]:
    """Mark a hand-written function as a validator.

    Returns the function unchanged; useful as a decorator to document intent.

    Example:
        ```python
        @validator
        def v_even(value):
            if not isinstance(value, int) or value % 2:
                raise SingleValidationError("even integer", value)
            return value
        ```
    """
    return v


def boolean_validator(type_name: str, predicate: Callable[[Any], bool]) -> Validator[Any]:
    """Create a validator from a predicate.

    The validator returns its input unchanged when ``predicate`` accepts it
    and raises ``SingleValidationError(type_name, value)`` otherwise.
    Exceptions raised by the predicate itself are not caught.

    Args:
        type_name: Kind description used in error messages
        predicate: Test applied to each value
    """

    def validate(value: Any) -> Any:
        if not predicate(value):
            raise SingleValidationError(type_name, value)
        return value

    validate.__name__ = f"v_{type_name.replace(' ', '_')}"
    validate.__qualname__ = validate.__name__
    return validate
