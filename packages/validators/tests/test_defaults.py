"""Tests for defaults, fallbacks and overrides."""

import pytest

from validatorian import (
    UNDEFINED,
    SingleValidationError,
    v_array,
    v_number,
    v_object,
    v_override,
    v_string,
    v_with_default,
    v_with_fallback,
)


class TestWithDefault:
    """Test v_with_default."""

    def test_absent_values_get_the_default(self):
        v = v_with_default(v_number, 1)
        assert v(UNDEFINED) == 1
        assert v(None) == 1

    def test_present_values_are_validated(self):
        v = v_with_default(v_number, 1)
        assert v(2) == 2
        assert v(0) == 0
        with pytest.raises(SingleValidationError):
            v("test")

    def test_default_is_not_validated(self):
        assert v_with_default(v_number, "not a number")(None) == "not a number"

    def test_default_factory_called_per_absent_value(self):
        v = v_with_default(v_array(v_string), default_factory=list)
        first = v(None)
        second = v(UNDEFINED)
        assert first == [] and second == []
        assert first is not second

    def test_default_factory_not_called_for_present_values(self):
        calls = []

        def produce():
            calls.append(1)
            return 0

        v = v_with_default(v_number, default_factory=produce)
        assert v(5) == 5
        assert calls == []
        assert v(None) == 0
        assert calls == [1]

    def test_none_is_a_valid_literal_default(self):
        assert v_with_default(v_number, None)(UNDEFINED) is None

    def test_in_object(self):
        v = v_object({"port": v_with_default(v_number, 8080), "host": v_string})
        assert v({"host": "localhost"}) == {"port": 8080, "host": "localhost"}

    def test_requires_exactly_one_source(self):
        with pytest.raises(ValueError):
            v_with_default(v_number)
        with pytest.raises(ValueError):
            v_with_default(v_number, 1, default_factory=lambda: 2)

    def test_factory_must_be_callable(self):
        with pytest.raises(TypeError):
            v_with_default(v_number, default_factory=5)


class TestWithFallback:
    """Test v_with_fallback."""

    def test_valid_values_pass(self):
        v = v_with_fallback(v_number, 1)
        assert v(2) == 2
        assert v(0) == 0

    def test_invalid_values_get_the_fallback(self):
        v = v_with_fallback(v_number, 1)
        assert v("test") == 1
        assert v(None) == 1
        assert v(UNDEFINED) == 1

    def test_fallback_factory_receives_the_input(self):
        v = v_with_fallback(v_number, fallback_factory=lambda value: len(value))
        assert v("abc") == 3
        assert v(7) == 7

    def test_catches_union_errors(self):
        from validatorian import v_union

        assert v_with_fallback(v_union(v_number, v_string), 0)(True) == 0

    def test_other_exceptions_propagate(self):
        def broken(value):
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            v_with_fallback(broken, 1)(2)

    def test_requires_exactly_one_source(self):
        with pytest.raises(ValueError):
            v_with_fallback(v_number)
        with pytest.raises(ValueError):
            v_with_fallback(v_number, 1, fallback_factory=lambda value: 2)
        with pytest.raises(TypeError):
            v_with_fallback(v_number, fallback_factory="nope")


class TestOverride:
    """Test v_override."""

    def test_ignores_input(self):
        v = v_override(1)
        for value in (2, "test", None, UNDEFINED, {"a": 1}):
            assert v(value) == 1

    def test_factory_receives_input(self):
        v = v_override(factory=lambda value: f"<{value}>")
        assert v(2) == "<2>"
        assert v(UNDEFINED) == "<undefined>"

    def test_in_object(self):
        v = v_object({"id": v_string, "source": v_override("import")})
        assert v({"id": "a", "source": "user"}) == {"id": "a", "source": "import"}
        assert v({"id": "b"}) == {"id": "b", "source": "import"}

    def test_requires_exactly_one_source(self):
        with pytest.raises(ValueError):
            v_override()
        with pytest.raises(ValueError):
            v_override(1, factory=lambda value: 2)
