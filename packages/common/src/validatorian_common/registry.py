"""Thread-safe registry of named items.

Used to keep named builders (such as the validator kinds known to the
configuration factory) that callers can extend at runtime.

Example:
    ```python
    from validatorian_common.registry import Registry

    builders = Registry[Callable[..., Any]]("builders")
    builders.register("email", build_email_validator)
    builder = builders.get("email")
    ```
"""

import logging
import threading
from typing import Dict, Generic, List, TypeVar

from validatorian_common.exceptions import NotFoundError, OperationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry(Generic[T]):
    """Registry mapping unique string keys to items.

    Attributes:
        name: Name of the registry (used in error context and logging)

    Example:
        ```python
        registry = Registry[str]("greetings")
        registry.register("en", "hello")
        registry.get("en")
        # 'hello'
        registry.count()
        # 1
        ```
    """

    def __init__(self, name: str):
        self._name = name
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Register an item by key.

        Args:
            key: Unique identifier for the item
            item: Item to register
            allow_overwrite: Whether to replace an existing item

        Raises:
            OperationError: If the key is taken and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = item
        logger.debug("Registered '%s' in %s", key, self._name)

    def unregister(self, key: str) -> T:
        """Remove and return an item.

        Raises:
            NotFoundError: If the key is not registered
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={"key": key, "registry": self._name},
                )
            item = self._items.pop(key)
        logger.debug("Unregistered '%s' from %s", key, self._name)
        return item

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If the key is not registered
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={
                        "key": key,
                        "registry": self._name,
                        "available_keys": sorted(self._items),
                    },
                )
            return self._items[key]

    def get_optional(self, key: str) -> T | None:
        """Get an item by key, returning None if not found."""
        with self._lock:
            return self._items.get(key)

    def has(self, key: str) -> bool:
        """Check if an item is registered."""
        with self._lock:
            return key in self._items

    def list_keys(self) -> List[str]:
        """List registered keys in registration order."""
        with self._lock:
            return list(self._items.keys())

    def count(self) -> int:
        """Number of registered items."""
        with self._lock:
            return len(self._items)

    def copy(self, name: str | None = None) -> "Registry[T]":
        """Return an independent registry holding the same items.

        Args:
            name: Name for the copy (defaults to this registry's name)
        """
        clone: Registry[T] = Registry(name or self._name)
        with self._lock:
            clone._items = dict(self._items)
        return clone

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"Registry(name={self._name!r}, items={self.count()})"
