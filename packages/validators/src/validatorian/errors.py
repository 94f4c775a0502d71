"""Validation error taxonomy.

Every failure raised by a validator is a ``ValidationError``:

- ``SingleValidationError``: a value was not of the one expected kind.
- ``UnionValidationError``: every alternative of a union rejected the value.

Both record an optional path to the failing value. Errors are immutable;
``with_extended_path`` returns a copy whose path gains a new leading step,
which is how enclosing combinators attach their own key while an error
propagates outwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Iterable, Sequence, Tuple

from validatorian_common import ValidationError as BaseValidationError

from .paths import Path, path_to_string, step_to_string


def _indent(text: str) -> str:
    return "\n".join(f"  {line}" for line in text.split("\n"))


def _freeze_path(path: Iterable[Hashable] | None) -> Path | None:
    return None if path is None else tuple(path)


class ValidationError(BaseValidationError, ABC):
    """Failure to validate a value.

    All errors raised by validators are subclasses of this class; catching it
    separates validation failures from bugs in user-supplied predicates.
    """

    def __init__(self, message: str, value: Any, path: Path | None):
        super().__init__(message, context={"path": path, "value": value})
        self._path = path

    @property
    def path(self) -> Path | None:
        """Steps from the root value to the failing value, or None for the root."""
        return self._path

    def path_string(self) -> str:
        """Readable rendering of ``path``; empty when the root value failed."""
        return path_to_string(self._path) if self._path else ""

    @abstractmethod
    def with_extended_path(self, step: Hashable) -> ValidationError:
        """Return a copy of this error with ``step`` prepended to its path."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly summary of the error."""

    def _base_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "message": self.message,
            "path": None if self._path is None else [step_to_string(s) for s in self._path],
            "path_string": self.path_string(),
        }


class SingleValidationError(ValidationError):
    """A value was not of the single expected kind.

    Attributes:
        expected_type: Description of the expected kind, e.g. ``"string"``
        actual_value: The offending value
        path: Where the offending value was found (None for the root)

    Example:
        ```python
        error = SingleValidationError("string", 1, ("key", 2))
        str(error)
        # 'Expected string but got 1 at .key[2]'
        error.with_extended_path("outer").path_string()
        # '.outer.key[2]'
        ```
    """

    def __init__(
        self,
        expected_type: str,
        actual_value: Any,
        path: Iterable[Hashable] | None = None,
    ):
        path = _freeze_path(path)
        if path is not None:
            message = f"Expected {expected_type} but got {actual_value!s} at {path_to_string(path)}"
        else:
            message = f"Expected {expected_type} but got {actual_value!s}"
        super().__init__(message, actual_value, path)
        self._expected_type = expected_type
        self._actual_value = actual_value

    @property
    def expected_type(self) -> str:
        return self._expected_type

    @property
    def actual_value(self) -> Any:
        return self._actual_value

    def with_extended_path(self, step: Hashable) -> SingleValidationError:
        """Return a new error with ``step`` put at the start of the path.

        A path rendering as ``.key`` becomes ``.step.key``.
        """
        path = (step, *self._path) if self._path is not None else (step,)
        return SingleValidationError(self._expected_type, self._actual_value, path)

    def to_dict(self) -> Dict[str, Any]:
        result = self._base_dict()
        result["expected_type"] = self._expected_type
        return result

    def __reduce__(self):
        return (SingleValidationError, (self._expected_type, self._actual_value, self._path))

    def __repr__(self) -> str:
        return (
            f"SingleValidationError({self._expected_type!r}, "
            f"{self._actual_value!r}, {self._path!r})"
        )


class UnionValidationError(ValidationError):
    """Every alternative of a union rejected the value.

    ``errors`` holds one error per alternative, in the order the
    alternatives were tried.

    Example:
        ```python
        error = UnionValidationError(
            [SingleValidationError("string", None), SingleValidationError("number", None)],
            None,
        )
        print(error)
        # Expected one of string, number but got an error for every option:
        #   Expected string but got None
        #   Expected number but got None
        ```
    """

    def __init__(
        self,
        errors: Sequence[ValidationError],
        value: Any,
        path: Iterable[Hashable] | None = None,
    ):
        errors = tuple(errors)
        path = _freeze_path(path)

        combined = "\n".join(_indent(error.message) for error in errors)
        if all(isinstance(error, SingleValidationError) for error in errors):
            short_types = ", ".join(error.expected_type for error in errors)  # type: ignore[attr-defined]
        else:
            short_types = "multiple types"

        if path is not None:
            message = (
                f"Expected one of {short_types} at {path_to_string(path)} "
                f"but got an error for every option:\n{combined}"
            )
        else:
            message = f"Expected one of {short_types} but got an error for every option:\n{combined}"
        super().__init__(message, value, path)
        self._errors: Tuple[ValidationError, ...] = errors
        self._value = value

    @property
    def errors(self) -> Tuple[ValidationError, ...]:
        return self._errors

    @property
    def value(self) -> Any:
        return self._value

    def with_extended_path(self, step: Hashable) -> UnionValidationError:
        """Return a new error with ``step`` put at the start of the path.

        Every constituent error is extended with the same step, so the
        constituents keep describing the same location as the union.
        """
        path = (step, *self._path) if self._path is not None else (step,)
        return UnionValidationError(
            [error.with_extended_path(step) for error in self._errors],
            self._value,
            path,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = self._base_dict()
        result["errors"] = [error.to_dict() for error in self._errors]
        return result

    def __reduce__(self):
        return (UnionValidationError, (self._errors, self._value, self._path))

    def __repr__(self) -> str:
        return f"UnionValidationError({list(self._errors)!r}, {self._value!r}, {self._path!r})"
