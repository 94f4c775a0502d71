"""Configuration-driven construction for validatorian objects."""

from .builders import FactoryBase, ObjectBuilder
from .exceptions import ConfigError

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "FactoryBase",
    "ObjectBuilder",
]
