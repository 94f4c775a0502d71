"""Common base classes shared by the validatorian packages.

- **Exceptions**: exception hierarchy with context support
- **Registry**: thread-safe registry of named items

Example:
    ```python
    from validatorian_common import ValidatorianError, Registry

    registry = Registry[int]("limits")
    registry.register("max_depth", 32)
    ```
"""

from validatorian_common.exceptions import (
    ConfigurationError,
    NotFoundError,
    OperationError,
    ValidationError,
    ValidatorianError,
)
from validatorian_common.registry import Registry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "ValidatorianError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    # Registry
    "Registry",
]
