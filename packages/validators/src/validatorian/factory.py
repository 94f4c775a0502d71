"""Build validator trees from configuration dictionaries."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict

from validatorian_common import ConfigurationError, Registry
from validatorian_config import FactoryBase

from .combinators import (
    v_array,
    v_array_of_at_least_length,
    v_array_of_at_most_length,
    v_array_of_length,
    v_array_of_length_between,
    v_nullable,
    v_object,
    v_optional,
    v_strict_tuple,
    v_tuple,
    v_union,
)
from .defaults import v_with_default, v_with_fallback
from .errors import ValidationError
from .primitives import (
    v_any_integer,
    v_boolean,
    v_const,
    v_integer,
    v_natural_number,
    v_non_empty_string,
    v_non_negative_integer,
    v_null,
    v_number,
    v_number_between,
    v_real_number,
    v_string,
    v_string_of_length,
    v_undefined,
)
from .validator import UNDEFINED, Validator, boolean_validator, is_absent, validator

logger = logging.getLogger(__name__)

KindBuilder = Callable[["ValidatorFactory", Dict[str, Any], str], Validator[Any]]

# Options understood for every kind; they wrap whatever the kind builds.
WRAPPER_OPTIONS = ("kind", "optional", "nullable", "default", "fallback", "description")

_v_flag = v_with_default(v_boolean, False)
_v_optional_length = v_optional(v_non_negative_integer)
_v_optional_bound = v_optional(v_real_number)


def _read_options(
    kind: str,
    options: Dict[str, Any],
    schema: Mapping[str, Validator[Any]],
    location: str,
) -> Dict[str, Any]:
    """Check a kind's options against ``schema`` and return the normalized values."""
    unknown = sorted((key for key in options if key not in schema), key=str)
    if unknown:
        raise ConfigurationError(
            f"Unknown option(s) for kind '{kind}' at {location}: {', '.join(map(str, unknown))}",
            context={"kind": kind, "location": location, "unknown_options": unknown,
                     "allowed_options": sorted(schema)},
        )
    normalized: Dict[str, Any] = {}
    for name, option_validator in schema.items():
        try:
            normalized[name] = option_validator(options.get(name, UNDEFINED))
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid option '{name}' for kind '{kind}' at {location}: {e.message}",
                context={"kind": kind, "location": location, "option": name},
            ) from e
    return normalized


def _require(kind: str, options: Dict[str, Any], name: str, location: str) -> None:
    if name not in options:
        raise ConfigurationError(
            f"Kind '{kind}' at {location} requires option '{name}'",
            context={"kind": kind, "location": location, "option": name},
        )


@validator
def _accept_any(value: Any) -> Any:
    return value


def _build_any(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    _read_options("any", options, {}, location)
    return _accept_any


def _build_boolean(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    _read_options("boolean", options, {}, location)
    return v_boolean


def _build_null(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    _read_options("null", options, {}, location)
    return v_null


def _build_undefined(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    _read_options("undefined", options, {}, location)
    return v_undefined


def _build_number(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    opts = _read_options(
        "number", options,
        {"min": _v_optional_bound, "max": _v_optional_bound, "real": _v_flag},
        location,
    )
    low, high = opts["min"], opts["max"]
    if is_absent(low) != is_absent(high):
        raise ConfigurationError(
            f"Kind 'number' at {location} needs both 'min' and 'max' for a range",
            context={"kind": "number", "location": location},
        )
    if not is_absent(low):
        try:
            return v_number_between(low, high)
        except ValueError as e:
            raise ConfigurationError(str(e), context={"kind": "number", "location": location}) from e
    return v_real_number if opts["real"] else v_number


def _build_integer(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    opts = _read_options(
        "integer", options,
        {"natural": _v_flag, "non_negative": _v_flag, "safe": v_with_default(v_boolean, True)},
        location,
    )
    if opts["natural"]:
        return v_natural_number
    if opts["non_negative"]:
        return v_non_negative_integer
    return v_integer if opts["safe"] else v_any_integer


def _build_string(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    opts = _read_options(
        "string", options,
        {
            "length": _v_optional_length,
            "min_length": _v_optional_length,
            "max_length": _v_optional_length,
            "non_empty": _v_flag,
        },
        location,
    )
    length, low, high = opts["length"], opts["min_length"], opts["max_length"]
    try:
        if not is_absent(length):
            return v_string_of_length(length)
        if not is_absent(high):
            return v_string_of_length(0 if is_absent(low) else low, high)
    except ValueError as e:
        raise ConfigurationError(str(e), context={"kind": "string", "location": location}) from e
    if not is_absent(low):
        return boolean_validator(
            f"string of at least length {low}",
            lambda value: isinstance(value, str) and len(value) >= low,
        )
    return v_non_empty_string if opts["non_empty"] else v_string


def _build_const(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    _require("const", options, "value", location)
    opts = _read_options("const", options, {"value": _accept_any}, location)
    return v_const(opts["value"])


def _build_object(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    _require("object", options, "fields", location)
    opts = _read_options("object", options, {"fields": _accept_any}, location)
    fields = opts["fields"]
    if not isinstance(fields, Mapping):
        raise ConfigurationError(
            f"Kind 'object' at {location} needs 'fields' to be a mapping",
            context={"kind": "object", "location": location},
        )
    return v_object({
        key: factory.build(field_config, f"{location}.fields.{key}")
        for key, field_config in fields.items()
    })


def _build_array(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    _require("array", options, "items", location)
    opts = _read_options(
        "array", options,
        {
            "items": _accept_any,
            "length": _v_optional_length,
            "min_length": _v_optional_length,
            "max_length": _v_optional_length,
        },
        location,
    )
    items = factory.build(opts["items"], f"{location}.items")
    length, low, high = opts["length"], opts["min_length"], opts["max_length"]
    try:
        if not is_absent(length):
            return v_array_of_length(items, length)
        if not is_absent(low) and not is_absent(high):
            return v_array_of_length_between(items, low, high)
    except ValueError as e:
        raise ConfigurationError(str(e), context={"kind": "array", "location": location}) from e
    if not is_absent(low):
        return v_array_of_at_least_length(items, low)
    if not is_absent(high):
        return v_array_of_at_most_length(items, high)
    return v_array(items)


def _build_sequence(kind: str, options: Dict[str, Any], name: str, location: str) -> list:
    _require(kind, options, name, location)
    entries = options[name]
    if not isinstance(entries, (list, tuple)) or (kind == "union" and not entries):
        raise ConfigurationError(
            f"Kind '{kind}' at {location} needs '{name}' to be a "
            f"{'non-empty ' if kind == 'union' else ''}list",
            context={"kind": kind, "location": location},
        )
    return list(entries)


def _build_tuple(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    entries = _build_sequence("tuple", options, "items", location)
    opts = _read_options("tuple", options, {"items": _accept_any, "strict": _v_flag}, location)
    validators = [
        factory.build(entry, f"{location}.items[{index}]")
        for index, entry in enumerate(entries)
    ]
    return v_strict_tuple(*validators) if opts["strict"] else v_tuple(*validators)


def _build_union(factory: ValidatorFactory, options: Dict[str, Any], location: str) -> Validator[Any]:
    entries = _build_sequence("union", options, "options", location)
    _read_options("union", options, {"options": _accept_any}, location)
    return v_union(*(
        factory.build(entry, f"{location}.options[{index}]")
        for index, entry in enumerate(entries)
    ))


BUILTIN_KINDS: Registry[KindBuilder] = Registry("validator_kinds")
for _kind, _builder in (
    ("any", _build_any),
    ("boolean", _build_boolean),
    ("null", _build_null),
    ("undefined", _build_undefined),
    ("number", _build_number),
    ("integer", _build_integer),
    ("string", _build_string),
    ("const", _build_const),
    ("object", _build_object),
    ("array", _build_array),
    ("tuple", _build_tuple),
    ("union", _build_union),
):
    BUILTIN_KINDS.register(_kind, _builder)
del _kind, _builder


class ValidatorFactory(FactoryBase):
    """Factory for creating validators from configuration.

    Configuration Options (every kind):
        kind (str): Validator kind (any, boolean, null, undefined, number,
            integer, string, const, object, array, tuple, union, or a
            registered custom kind)
        optional (bool): Also accept None and UNDEFINED
        nullable (bool): Also accept None
        default (any): Value used when the input is None or UNDEFINED
        fallback (any): Value used when validation fails
        description (str): Free text, ignored

    Kind Options:
        number: min, max (range [min, max)), real (reject NaN/inf)
        integer: natural, non_negative, safe (default true)
        string: length, min_length, max_length, non_empty
        const: value
        object: fields (mapping of key to configuration)
        array: items, length, min_length, max_length
        tuple: items (list of configurations), strict
        union: options (list of configurations)

    Example Configuration:
        ```python
        v_user = ValidatorFactory().create(
            kind="object",
            fields={
                "name": {"kind": "string", "min_length": 1},
                "age": {"kind": "integer", "non_negative": True, "optional": True},
                "roles": {"kind": "array", "items": {"kind": "string"}, "default": []},
            },
        )
        ```

    Custom kinds receive the factory, the kind's own options and the
    location of the entry, and return a validator:
        ```python
        def build_email(factory, options, location):
            return boolean_validator("email", lambda v: isinstance(v, str) and "@" in v)

        factory.register_kind("email", build_email)
        ```
    """

    def __init__(self) -> None:
        self._kinds = BUILTIN_KINDS.copy("validator_kinds")

    def register_kind(self, kind: str, builder: KindBuilder, allow_overwrite: bool = False) -> None:
        """Make a custom kind available to this factory."""
        self._kinds.register(kind, builder, allow_overwrite=allow_overwrite)

    def kinds(self) -> list[str]:
        """Names of the kinds this factory can build."""
        return self._kinds.list_keys()

    def create(self, **config: Any) -> Validator[Any]:
        """Create a validator from keyword configuration.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        return self.build(config)

    def build(self, config: Any, location: str = "$") -> Validator[Any]:
        """Create a validator from a configuration mapping.

        A bare string is shorthand for ``{"kind": <string>}``.

        Args:
            config: Configuration for this validator
            location: Where ``config`` sits in the root configuration, used in errors

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        if isinstance(config, str):
            config = {"kind": config}
        if not isinstance(config, Mapping):
            raise ConfigurationError(
                f"Validator configuration at {location} must be a mapping or a kind name",
                context={"location": location, "config_type": type(config).__name__},
            )

        kind = config.get("kind")
        if not isinstance(kind, str) or not kind:
            raise ConfigurationError(
                f"Validator configuration at {location} must declare a kind",
                context={"location": location, "config": dict(config)},
            )
        builder = self._kinds.get_optional(kind)
        if builder is None:
            raise ConfigurationError(
                f"Unknown validator kind '{kind}' at {location}",
                context={"location": location, "kind": kind, "available_kinds": self.kinds()},
            )

        options = {key: value for key, value in config.items() if key not in WRAPPER_OPTIONS}
        built = builder(self, options, location)
        logger.debug(f"Built '{kind}' validator at {location}")
        return self._wrap(built, config, location)

    def _wrap(self, built: Validator[Any], config: Mapping[str, Any], location: str) -> Validator[Any]:
        for flag in ("optional", "nullable"):
            if flag in config and not isinstance(config[flag], bool):
                raise ConfigurationError(
                    f"Option '{flag}' at {location} must be a boolean",
                    context={"location": location, "option": flag},
                )

        if config.get("optional"):
            built = v_optional(built)
        elif config.get("nullable"):
            built = v_nullable(built)

        if "default" in config:
            default = config["default"]
            if isinstance(default, (list, dict, set)):
                # Hand every result its own copy of a mutable default
                built = v_with_default(built, default_factory=lambda: copy.deepcopy(default))
            else:
                built = v_with_default(built, default)

        if "fallback" in config:
            fallback = config["fallback"]
            if isinstance(fallback, (list, dict, set)):
                built = v_with_fallback(built, fallback_factory=lambda _value: copy.deepcopy(fallback))
            else:
                built = v_with_fallback(built, fallback)

        return built


# Create singleton instance for registration
validator_factory = ValidatorFactory()
