"""Tests for leaf matchers, wrappers and BaseMatcher behaviour."""

from __future__ import annotations

import pytest

from diffmatch import (
    MAX_DEPTH,
    AttributeInput,
    FieldMatcher,
    InvalidParameterError,
    KeyInput,
    MatchDescription,
    Matcher,
    MatcherError,
    Not,
    anything,
    every_item,
    has_attribute,
    has_field,
    has_item,
    has_key,
    instance_of,
    is_equal,
    is_in,
    is_none,
    matcher,
    matcher_depth,
    not_none,
    nothing,
    type_safe,
    validate_depth,
)
from diffmatch.testing import mismatch_of

from conftest import CountingPredicate, DeliveryInfo


class TestIsEqual:
    def test_equal(self) -> None:
        assert is_equal(5).matches(5) is True

    def test_not_equal(self) -> None:
        assert is_equal(5).matches(6) is False

    def test_none_reference_never_matches(self) -> None:
        assert is_equal(None).matches(None) is False
        assert is_equal(None).matches(1) is False

    def test_none_value_never_matches(self) -> None:
        assert is_equal("x").matches(None) is False

    def test_description(self) -> None:
        assert str(is_equal("x")) == 'equal to "x"'

    def test_satisfies_protocol(self) -> None:
        assert isinstance(is_equal(1), Matcher)


class TestPredicateMatcher:
    def test_truthy_result_is_bool(self) -> None:
        m = matcher(lambda v: v, "identity")
        assert m.matches([1]) is True
        assert m.matches([]) is False

    def test_label_used_in_description(self) -> None:
        assert str(matcher(lambda v: True, "always")) == "always"

    def test_named_function_used_without_label(self) -> None:
        def is_positive(v: int) -> bool:
            return v > 0

        assert str(matcher(is_positive)) == "is_positive"

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            matcher(5)  # type: ignore[arg-type]

    def test_exception_propagates(self) -> None:
        m = matcher(lambda v: 1 / v)
        with pytest.raises(ZeroDivisionError):
            m.matches(0)


class TestSimpleLeaves:
    def test_instance_of(self) -> None:
        assert instance_of(int).matches(1) is True
        assert instance_of(int).matches("1") is False
        assert instance_of((int, str)).matches("1") is True

    def test_instance_of_mismatch(self) -> None:
        assert str(mismatch_of(instance_of(int), "a")) == 'was a str ("a")'

    def test_none_and_not_none(self) -> None:
        assert is_none().matches(None) is True
        assert is_none().matches(0) is False
        assert not_none().matches(0) is True
        assert str(not_none()) == "not None"

    def test_anything_nothing(self) -> None:
        assert anything().matches(object()) is True
        assert nothing().matches(object()) is False

    def test_is_in(self) -> None:
        m = is_in({"a", "b"})
        assert m.matches("a") is True
        assert m.matches("c") is False

    def test_is_in_unhashable_value(self) -> None:
        assert is_in({"a"}).matches(["a"]) is False

    def test_every_item(self) -> None:
        m = every_item(instance_of(int))
        assert m.matches([1, 2]) is True
        assert m.matches([1, "2"]) is False
        assert m.matches([]) is True
        assert m.matches(None) is False
        assert m.matches(5) is False

    def test_has_item(self) -> None:
        m = has_item(is_equal(2))
        assert m.matches((1, 2)) is True
        assert m.matches([]) is False
        assert m.matches("2") is False


class TestTypeSafeMatcher:
    def test_wrong_type_never_reaches_predicate(self) -> None:
        pred = CountingPredicate(lambda v: v > 0)
        m = type_safe(int, pred, "positive")
        assert m.matches("5") is False
        assert m.matches(None) is False
        assert pred.calls == 0

    def test_right_type_consults_predicate(self) -> None:
        m = type_safe(int, lambda v: v > 0, "positive")
        assert m.matches(5) is True
        assert m.matches(-5) is False

    def test_description(self) -> None:
        assert str(type_safe(int, lambda v: v > 0, "positive")) == "<int> with positive"

    def test_mismatch_distinguishes_wrong_type(self) -> None:
        m = type_safe(int, lambda v: v > 0, "positive")
        assert str(mismatch_of(m, "x")) == 'was a str ("x")'
        assert str(mismatch_of(m, None)) == "was None"
        assert str(mismatch_of(m, -1)) == "was -1"


class TestFieldMatcher:
    def test_attribute(self, delivery: DeliveryInfo) -> None:
        assert has_attribute("type", is_equal(5)).matches(delivery) is True
        assert has_attribute("type", is_equal(6)).matches(delivery) is False

    def test_missing_attribute_passes_none(self, delivery: DeliveryInfo) -> None:
        assert has_attribute("missing", is_none()).matches(delivery) is True

    def test_key(self) -> None:
        assert has_key("a", is_equal(1)).matches({"a": 1}) is True
        assert has_key("a", is_equal(1)).matches({"b": 1}) is False
        assert has_key("a", is_none()).matches("not a mapping") is True

    def test_accessor(self) -> None:
        m = has_field("length", len, is_equal(3))
        assert m.matches("abc") is True

    def test_description(self) -> None:
        assert str(has_attribute("gid", is_equal("TEST"))) == 'gid equal to "TEST"'

    def test_mismatch(self, delivery: DeliveryInfo) -> None:
        m = FieldMatcher(AttributeInput("type"), is_equal(6))
        assert str(mismatch_of(m, delivery)) == "type was 5"

    def test_requires_input(self) -> None:
        with pytest.raises(InvalidParameterError):
            FieldMatcher(None, is_equal(1))  # type: ignore[arg-type]

    def test_inputs_are_plain_values(self) -> None:
        assert KeyInput("a") == KeyInput("a")
        assert KeyInput("a").get({"a": 1}) == 1


class TestBaseMatcher:
    def test_default_mismatch(self) -> None:
        d = MatchDescription()
        is_equal(5).describe_mismatch("x", d)
        assert str(d) == 'was "x"'

    def test_describe_returns_fresh_description(self) -> None:
        m = is_equal(1)
        assert m.describe() == MatchDescription("equal to 1")
        assert m.describe() is not m.describe()

    def test_equality_ignores_handler(self) -> None:
        a = is_equal(1)
        b = is_equal(1)
        a.add_listener(object())
        assert a == b

    def test_all_any_none_match(self) -> None:
        m = instance_of(int)
        assert m.all_match([1, 2]) is True
        assert m.all_match([1, "2"]) is False
        assert m.any_match(["1", 2]) is True
        assert m.none_match(["1", "2"]) is True

    def test_bulk_none_is_empty(self) -> None:
        m = instance_of(int)
        assert m.all_match(None) is True
        assert m.any_match(None) is False
        assert m.none_match(None) is True


class TestDepth:
    def test_leaf(self) -> None:
        assert matcher_depth(is_equal(1)) == 1

    def test_wrappers_and_nodes(self) -> None:
        m = has_attribute("a", is_equal(1) & (is_equal(2) | ~is_equal(3)))
        # field → and → or → not → leaf
        assert matcher_depth(m) == 5

    def test_too_deep(self) -> None:
        m = is_equal(1)
        for _ in range(MAX_DEPTH):
            m = Not(m)
        with pytest.raises(MatcherError, match="exceeds maximum"):
            validate_depth(m)

    def test_within_limit(self) -> None:
        assert validate_depth(is_equal(1) & is_equal(2)) == 2
