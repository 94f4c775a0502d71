"""Tests for the leaf validators."""

import math

import pytest

from validatorian import (
    MAX_SAFE_INTEGER,
    UNDEFINED,
    PathSymbol,
    SingleValidationError,
    UnionValidationError,
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
    v_union,
)


def assert_rejects(v, value, expected_type):
    with pytest.raises(SingleValidationError) as exc_info:
        v(value)
    assert exc_info.value.expected_type == expected_type
    assert exc_info.value.actual_value is value or exc_info.value.actual_value == value
    assert exc_info.value.path is None


class TestBoolean:
    """Test boolean validators."""

    def test_accepts_booleans(self):
        assert v_boolean(True) is True
        assert v_boolean(False) is False

    @pytest.mark.parametrize("value", [0, 1, "true", None, UNDEFINED, []])
    def test_rejects_non_booleans(self, value):
        assert_rejects(v_boolean, value, "boolean")

    def test_true_and_false(self):
        assert v_true(True) is True
        assert v_false(False) is False
        assert_rejects(v_true, False, "exact bool `True`")
        assert_rejects(v_true, 1, "exact bool `True`")
        assert_rejects(v_false, 0, "exact bool `False`")


class TestNumbers:
    """Test number validators."""

    @pytest.mark.parametrize("value", [0, 1, -1.5, 10**30, math.inf, -math.inf])
    def test_number_accepts(self, value):
        assert v_number(value) == value

    def test_number_accepts_nan(self):
        assert math.isnan(v_number(math.nan))

    @pytest.mark.parametrize("value", [True, False, "1", None, UNDEFINED, [1]])
    def test_number_rejects(self, value):
        assert_rejects(v_number, value, "number")

    def test_real_number(self):
        assert v_real_number(1.5) == 1.5
        for value in (math.nan, math.inf, -math.inf, "1", True):
            assert_rejects(v_real_number, value, "real number")

    def test_number_between_is_half_open(self):
        v = v_number_between(0, 10)
        assert v(0) == 0
        assert v(9.99) == 9.99
        assert_rejects(v, 10, "number between 0 and 10")
        assert_rejects(v, -1, "number between 0 and 10")
        assert_rejects(v, math.nan, "number between 0 and 10")
        assert_rejects(v, "5", "number between 0 and 10")

    def test_huge_integers_are_finite(self):
        """Test ints too large for a float, as json.loads can produce."""
        huge = 10**400
        assert v_number(huge) == huge
        assert v_real_number(huge) == huge
        assert v_any_integer(huge) == huge
        assert_rejects(v_number_between(0, 10), huge, "number between 0 and 10")
        assert_rejects(v_number_between(0, 10), -huge, "number between 0 and 10")
        assert_rejects(v_integer, huge, "integer")

    def test_huge_integers_in_union(self):
        """Test that a union moves past a range that rejects a huge int."""
        v = v_union(v_number_between(0, 10), v_string)
        with pytest.raises(UnionValidationError) as exc_info:
            v(10**400)
        assert [e.expected_type for e in exc_info.value.errors] == ["number between 0 and 10", "string"]
        assert v_union(v_number_between(0, 10), v_real_number)(10**400) == 10**400

    def test_const_number_description(self):
        assert_rejects(v_const(2.0), "2", "exact number `2.0`")
        assert v_const(2.0)(2) == 2

    def test_number_between_rejects_inverted_range(self):
        with pytest.raises(ValueError):
            v_number_between(10, 0)

    def test_integer(self):
        assert v_integer(3) == 3
        assert v_integer(2.0) == 2.0
        assert v_integer(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER
        for value in (1.5, MAX_SAFE_INTEGER + 1, math.inf, math.nan, True, "1"):
            assert_rejects(v_integer, value, "integer")

    def test_any_integer(self):
        assert v_any_integer(MAX_SAFE_INTEGER + 1) == MAX_SAFE_INTEGER + 1
        assert v_any_integer(1e300) == 1e300
        for value in (1.5, math.inf, True):
            assert_rejects(v_any_integer, value, "any integer")

    def test_natural_number(self):
        assert v_natural_number(1) == 1
        for value in (0, -1, 1.5, MAX_SAFE_INTEGER + 1):
            assert_rejects(v_natural_number, value, "natural number")

    def test_non_negative_integer(self):
        assert v_non_negative_integer(0) == 0
        for value in (-1, 0.5, False):
            assert_rejects(v_non_negative_integer, value, "non-negative integer")


class TestStrings:
    """Test string validators."""

    def test_string(self):
        assert v_string("") == ""
        assert v_string("abc") == "abc"
        for value in (1, None, b"abc", ["a"]):
            assert_rejects(v_string, value, "string")

    def test_non_empty_string(self):
        assert v_non_empty_string("a") == "a"
        assert_rejects(v_non_empty_string, "", "non-empty string")

    def test_string_of_exact_length(self):
        v = v_string_of_length(3)
        assert v("abc") == "abc"
        assert_rejects(v, "ab", "string of length 3")
        assert_rejects(v, "abcd", "string of length 3")

    def test_string_of_length_range(self):
        v = v_string_of_length(1, 3)
        assert v("a") == "a"
        assert v("abc") == "abc"
        assert_rejects(v, "", "string of length [1, 3]")
        assert_rejects(v, "abcd", "string of length [1, 3]")
        assert_rejects(v, 3, "string of length [1, 3]")

    def test_string_of_length_rejects_bad_bounds(self):
        with pytest.raises(ValueError):
            v_string_of_length(3, 1)
        with pytest.raises(ValueError):
            v_string_of_length(-1, 1)


class TestConstants:
    """Test exact-value validators."""

    def test_const(self):
        assert v_const("test")("test") == "test"
        assert v_const(1)(1) == 1
        symbol = PathSymbol("test")
        assert v_const(symbol)(symbol) is symbol

    def test_const_is_strict(self):
        assert_rejects(v_const(1), True, "exact number `1`")
        assert_rejects(v_const(1), "1", "exact number `1`")
        assert_rejects(v_const("a"), "b", "exact str `a`")
        assert_rejects(v_const(PathSymbol("x")), PathSymbol("x"), "exact PathSymbol `Symbol(x)`")

    def test_const_numbers_are_one_kind(self):
        assert v_const(1)(1.0) == 1.0

    def test_const_nan(self):
        assert math.isnan(v_const(math.nan)(math.nan))
        assert_rejects(v_const(math.nan), 1, "exact number `nan`")

    def test_null_and_undefined(self):
        assert v_null(None) is None
        assert v_undefined(UNDEFINED) is UNDEFINED
        assert_rejects(v_null, UNDEFINED, "exact None")
        assert_rejects(v_undefined, None, "exact undefined")
        assert_rejects(v_null, 0, "exact None")


class TestPassThrough:
    """Test that primitive validators return their input."""

    @pytest.mark.parametrize(
        "v, value",
        [
            (v_boolean, True),
            (v_number, 1.5),
            (v_integer, 7),
            (v_string, "text"),
            (v_const("x"), "x"),
        ],
    )
    def test_identity(self, v, value):
        assert v(value) is value
