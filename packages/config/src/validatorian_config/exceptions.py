"""Exceptions for the config package, built on the common exception hierarchy."""

from validatorian_common import ConfigurationError

# The config package raises the common ConfigurationError under a short name.
ConfigError = ConfigurationError

__all__ = ["ConfigError"]
