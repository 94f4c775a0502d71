"""Object construction from configuration dictionaries."""

import copy
import importlib
import logging
from typing import Any, Dict, Type

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

# Keys that describe a configuration entry rather than configure the object.
METADATA_KEYS = ("type", "name")


class FactoryBase:
    """Base class for factory objects.

    Factories that inherit from this should implement
    the create method.
    """

    def create(self, **config: Any) -> Any:
        """Create an object from configuration.

        Args:
            **config: Configuration parameters

        Returns:
            Created object
        """
        raise NotImplementedError("Subclasses must implement create method")


class ObjectBuilder:
    """Builds objects from configuration dictionaries.

    A configuration names a ``factory`` by dotted import path: a
    ``FactoryBase`` subclass such as ``ValidatorFactory``, a factory instance,
    any class with a ``create``/``build`` method, or a plain callable. The
    remaining keys, minus the metadata keys ``type`` and ``name``, are passed
    on as keyword arguments.

    Example:
        ```python
        builder = ObjectBuilder()
        v = builder.build({
            "factory": "validatorian.factory.ValidatorFactory",
            "name": "port",
            "kind": "integer",
            "non_negative": True,
        })
        ```
    """

    def build(self, config: Dict[str, Any], **kwargs: Any) -> Any:
        """Build an object from a configuration dictionary.

        Args:
            config: Configuration dictionary
            **kwargs: Extra keyword arguments merged over the configuration

        Returns:
            Built object instance

        Raises:
            ConfigError: If the object cannot be built
        """
        if not isinstance(config, dict):
            raise ConfigError(
                "Object configuration must be a dictionary",
                context={"config_type": type(config).__name__},
            )

        config = copy.deepcopy(config)
        config.update(kwargs)

        if "factory" in config:
            return self._build_with_factory(config)
        raise ConfigError(
            "Configuration must specify a 'factory' for object construction",
            context={"keys": sorted(config)},
        )

    def _build_with_factory(self, config: Dict[str, Any]) -> Any:
        factory_path = config.pop("factory")
        factory_cls = self._load(factory_path)
        _strip_metadata(config)
        logger.debug("Building with factory %s", factory_path)

        if isinstance(factory_cls, type):
            try:
                factory = factory_cls()
            except TypeError as e:
                raise ConfigError(
                    f"Factory {factory_path} cannot be instantiated without arguments",
                    context={"factory": factory_path},
                ) from e
        else:
            # Module-level factory function
            factory = factory_cls

        if hasattr(factory, "create"):
            return factory.create(**config)
        if hasattr(factory, "build"):
            return factory.build(**config)
        if callable(factory):
            return factory(**config)
        raise ConfigError(
            f"Factory {factory_path} must have 'create', 'build' method or be callable",
            context={"factory": factory_path},
        )

    def _load(self, path: str) -> Type[Any]:
        """Load an attribute from a dotted module path.

        Raises:
            ConfigError: If the module or attribute cannot be loaded
        """
        if not isinstance(path, str) or "." not in path:
            raise ConfigError(f"Invalid import path: {path}", context={"path": path})

        module_path, attr_name = path.rsplit(".", 1)
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise ConfigError(f"Failed to import {path}: {e}", context={"path": path}) from e

        if not hasattr(module, attr_name):
            raise ConfigError(
                f"{attr_name} not found in {module_path}",
                context={"path": path},
            )
        loaded: Type[Any] = getattr(module, attr_name)
        return loaded


def _strip_metadata(config: Dict[str, Any]) -> None:
    for key in METADATA_KEYS:
        config.pop(key, None)
