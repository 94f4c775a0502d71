"""validatorian: runtime validation of untyped values.

A validator takes any value (for example the result of ``json.loads``) and
either returns a normalized value of the expected shape or raises a
``ValidationError`` saying what was expected and where it was not found.

Validators are plain callables composed with combinators:

    ```python
    from validatorian import v_object, v_array, v_string, v_optional, v_natural_number

    v_order = v_object({
        "id": v_natural_number,
        "items": v_array(v_object({"sku": v_string, "quantity": v_natural_number})),
        "note": v_optional(v_string),
    })
    order = v_order(payload)
    ```

Failures carry the path to the offending value:

    ```python
    try:
        v_order({"id": 1, "items": [], "note": 3})
    except ValidationError as e:
        print(e.path_string())
        # .note
    ```
"""

from .combinators import (
    v_array,
    v_array_of_at_least_length,
    v_array_of_at_most_length,
    v_array_of_length,
    v_array_of_length_between,
    v_nonempty_array_of,
    v_nullable,
    v_object,
    v_optional,
    v_or_undefined,
    v_strict_tuple,
    v_tuple,
    v_union,
)
from .defaults import v_override, v_with_default, v_with_fallback
from .errors import SingleValidationError, UnionValidationError, ValidationError
from .factory import ValidatorFactory, validator_factory
from .paths import PathStep, PathSymbol, escape_string, path_to_string
from .primitives import (
    MAX_SAFE_INTEGER,
    v_any_integer,
    v_boolean,
    v_const,
    v_false,
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
    v_true,
    v_undefined,
)
from .validator import UNDEFINED, Undefined, Validator, boolean_validator, is_absent, validator

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ValidationError",
    "SingleValidationError",
    "UnionValidationError",
    # Paths
    "PathStep",
    "PathSymbol",
    "escape_string",
    "path_to_string",
    # Contract
    "Validator",
    "UNDEFINED",
    "Undefined",
    "is_absent",
    "validator",
    "boolean_validator",
    # Primitives
    "MAX_SAFE_INTEGER",
    "v_boolean",
    "v_true",
    "v_false",
    "v_number",
    "v_real_number",
    "v_number_between",
    "v_integer",
    "v_any_integer",
    "v_natural_number",
    "v_non_negative_integer",
    "v_string",
    "v_non_empty_string",
    "v_string_of_length",
    "v_const",
    "v_null",
    "v_undefined",
    # Combinators
    "v_object",
    "v_array",
    "v_array_of_length",
    "v_array_of_length_between",
    "v_array_of_at_least_length",
    "v_array_of_at_most_length",
    "v_nonempty_array_of",
    "v_tuple",
    "v_strict_tuple",
    "v_union",
    "v_optional",
    "v_nullable",
    "v_or_undefined",
    "v_with_default",
    "v_with_fallback",
    "v_override",
    # Configuration
    "ValidatorFactory",
    "validator_factory",
]
