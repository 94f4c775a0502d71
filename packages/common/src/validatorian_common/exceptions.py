"""Shared exception hierarchy for the validatorian packages.

Every error raised by validatorian derives from ``ValidatorianError``, so a
caller can catch the whole family with one ``except`` clause while still
being able to tell categories apart.

Errors may carry a ``context`` dictionary with structured information about
the failure (the offending value, a path, a configuration key, ...).

Example:
    ```python
    from validatorian_common.exceptions import ConfigurationError

    raise ConfigurationError(
        "Unknown validator kind",
        context={"kind": "emial", "available_kinds": ["email", "string"]}
    )
    ```

Package-specific errors extend one of the categories below:
    ```python
    from validatorian_common.exceptions import ValidationError

    class ShapeError(ValidationError):
        '''Raised when a value has the wrong shape.'''
    ```
"""

from typing import Any, Dict


class ValidatorianError(Exception):
    """Base exception for all validatorian packages.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context; takes precedence when both are given

    Example:
        ```python
        error = ValidatorianError("Build failed", context={"kind": "object"})
        str(error)
        # 'Build failed'
        error.context
        # {'kind': 'object'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context

    @property
    def message(self) -> str:
        """The human-readable message the error was created with."""
        return str(self.args[0]) if self.args else ""


class ValidationError(ValidatorianError):
    """Raised when a value fails validation.

    The validation engine's own error taxonomy is built on this category.
    """

    pass


class ConfigurationError(ValidatorianError):
    """Raised when configuration is invalid or incomplete.

    Example:
        ```python
        raise ConfigurationError(
            "Validator configuration must declare a kind",
            context={"config": {"items": {}}}
        )
        ```
    """

    pass


class NotFoundError(ValidatorianError):
    """Raised when a requested item is not registered."""

    pass


class OperationError(ValidatorianError):
    """Raised when an operation cannot be carried out, e.g. a duplicate registration."""

    pass


__all__ = [
    "ValidatorianError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
