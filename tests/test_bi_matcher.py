"""Tests for pairwise matchers."""

from __future__ import annotations

import pytest

from diffmatch import (
    InvalidParameterError,
    TypeSafeBiMatcher,
    and_all,
    bi_matcher,
    compares_equal,
    equal_values,
    same_key,
    same_type,
    type_safe_bi,
)

from conftest import DeliveryInfo


class TestLeaves:
    def test_predicate(self) -> None:
        m = bi_matcher(lambda a, b: a < b, "ascending")
        assert m.matches(1, 2) is True
        assert m.matches(2, 1) is False
        assert str(m) == "ascending"

    def test_same_type(self) -> None:
        assert same_type().matches(1, 2) is True
        assert same_type().matches(1, "2") is False
        assert same_type().matches(True, 1) is False
        assert same_type().matches(None, None) is False

    def test_equal_values(self) -> None:
        assert equal_values().matches("a", "a") is True
        assert equal_values().matches(None, None) is False

    def test_comparator_default_compares_str(self) -> None:
        assert compares_equal().matches(1, "1") is True
        assert compares_equal().matches(1, 2) is False
        assert compares_equal().matches(None, None) is True
        assert compares_equal().matches(None, "None") is False

    def test_custom_comparator(self) -> None:
        m = compares_equal(lambda a, b: len(a) - len(b))
        assert m.matches("ab", "xy") is True

    def test_same_key(self, delivery: DeliveryInfo) -> None:
        m = same_key(lambda d: d.gid, "gid")
        other = DeliveryInfo(type=6, gid=delivery.gid, created_at=delivery.created_at)
        assert m.matches(delivery, other) is True
        assert str(m) == "same gid"

    def test_same_key_none_key_never_matches(self) -> None:
        m = same_key(lambda d: d.get("k"))
        assert m.matches({}, {}) is False


class TestTypeSafeBiMatcher:
    def test_guard(self) -> None:
        calls: list[tuple[object, object]] = []

        def pred(a: int, b: int) -> bool:
            calls.append((a, b))
            return a == b

        m = type_safe_bi(int, int, pred, "same number")
        assert m.matches(1, 1) is True
        assert m.matches(1, "1") is False
        assert calls == [(1, 1)]
        assert str(m) == "<int, int> with same number"

    def test_none_matcher_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            TypeSafeBiMatcher(int, int, None)


class TestComposition:
    def test_combinators(self) -> None:
        m = same_type() & ~equal_values()
        assert m.arity == 2
        assert m.matches(1, 2) is True
        assert m.matches(1, 1) is False

    def test_n_ary(self) -> None:
        m = and_all(same_type(), compares_equal())
        assert m.matches("1", "1") is True
        assert m.matches(1, "1") is False

    def test_bulk_pairs(self) -> None:
        m = same_type()
        assert m.all_match([(1, 2), ("a", "b")]) is True
        assert m.any_match([(1, "2"), (1, 2)]) is True
        assert m.none_match([(1, "2")]) is True
