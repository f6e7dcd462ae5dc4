"""Pairwise matchers: matches(first, last).

Bi matchers compose with each other through the same combinators as
single-value matchers; mixing the two arities in one node is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from diffmatch._errors import InvalidParameterError
from diffmatch._matcher import BaseBiMatcher

if TYPE_CHECKING:
    from collections.abc import Callable

    from diffmatch._description import MatchDescription


@dataclass(frozen=True, slots=True)
class PredicateBiMatcher(BaseBiMatcher):
    """Adapt a two-argument callable into a bi matcher."""

    predicate: Callable[[Any, Any], Any]
    label: str = ""

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            msg = f"predicate must be callable, got {self.predicate!r}"
            raise InvalidParameterError(msg)

    def _matches(self, *values: Any) -> bool:
        first, last = values
        return bool(self.predicate(first, last))

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text(self.label or "predicate")


@dataclass(frozen=True, slots=True)
class ComparatorBiMatcher(BaseBiMatcher):
    """Match when a three-way comparator returns 0.

    The default comparator orders values by their str() rendering. Two Nones
    compare equal; None against a value never does.
    """

    comparator: Callable[[Any, Any], int] | None = None

    def _matches(self, *values: Any) -> bool:
        first, last = values
        if first is None or last is None:
            return first is last
        compare = self.comparator or _compare_str
        return compare(first, last) == 0

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("compares equal")


@dataclass(frozen=True, slots=True)
class SameTypeBiMatcher(BaseBiMatcher):
    def _matches(self, *values: Any) -> bool:
        first, last = values
        if first is None or last is None:
            return False
        return type(first) is type(last)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("same type")


@dataclass(frozen=True, slots=True)
class EqualBiMatcher(BaseBiMatcher):
    def _matches(self, *values: Any) -> bool:
        first, last = values
        if first is None or last is None:
            return False
        return bool(first == last)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("equal values")


@dataclass(frozen=True, slots=True)
class SameKeyBiMatcher(BaseBiMatcher):
    """Both values yield equal, non-None keys."""

    key: Callable[[Any], Any]
    label: str = ""

    def _matches(self, *values: Any) -> bool:
        first, last = values
        if first is None or last is None:
            return False
        left = self.key(first)
        if left is None:
            return False
        return bool(left == self.key(last))

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text(f"same {self.label or 'key'}")


@dataclass(frozen=True, slots=True)
class TypeSafeBiMatcher(BaseBiMatcher):
    """Guard a bi matcher so that both values must be instances of their types."""

    first_type: type | tuple[type, ...]
    last_type: type | tuple[type, ...]
    matcher: Any

    def __post_init__(self) -> None:
        if self.matcher is None:
            msg = "matcher should not be None"
            raise InvalidParameterError(msg)

    def _matches(self, *values: Any) -> bool:
        first, last = values
        if not isinstance(first, self.first_type) or not isinstance(last, self.last_type):
            return False
        return bool(self.matcher.matches(first, last))

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text(
            f"<{_name(self.first_type)}, {_name(self.last_type)}> with "
        ).append_description_of(self.matcher)


def bi_matcher(predicate: Callable[[Any, Any], Any], label: str = "") -> PredicateBiMatcher:
    return PredicateBiMatcher(predicate, label)


def compares_equal(comparator: Callable[[Any, Any], int] | None = None) -> ComparatorBiMatcher:
    return ComparatorBiMatcher(comparator)


def same_type() -> SameTypeBiMatcher:
    return SameTypeBiMatcher()


def equal_values() -> EqualBiMatcher:
    return EqualBiMatcher()


def same_key(key: Callable[[Any], Any], label: str = "") -> SameKeyBiMatcher:
    return SameKeyBiMatcher(key, label)


def type_safe_bi(
    first_type: type | tuple[type, ...],
    last_type: type | tuple[type, ...],
    predicate: Callable[[Any, Any], Any],
    label: str = "",
) -> TypeSafeBiMatcher:
    return TypeSafeBiMatcher(first_type, last_type, PredicateBiMatcher(predicate, label))


def _compare_str(first: Any, last: Any) -> int:
    a, b = str(first), str(last)
    return (a > b) - (a < b)


def _name(t: type | tuple[type, ...]) -> str:
    if isinstance(t, tuple):
        return " | ".join(x.__name__ for x in t)
    return t.__name__
