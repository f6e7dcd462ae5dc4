"""Leaf and wrapping matchers over single values.

Leaves (PredicateMatcher, EqualMatcher, InstanceOfMatcher, ...) test a value
directly. Wrappers (TypeSafeMatcher, FieldMatcher, EveryItemMatcher,
HasItemMatcher) apply a nested matcher to the value or to something derived
from it, and expose that nested matcher as `.matcher`.

The lower-case factories at the bottom of the module are the usual way to
build these:

    >>> is_equal(5).matches(5)
    True
    >>> str(type_safe(int, lambda v: v > 0, "positive"))
    '<int> with positive'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from diffmatch._errors import InvalidParameterError
from diffmatch._matcher import BaseMatcher

if TYPE_CHECKING:
    from collections.abc import Callable, Collection

    from diffmatch._description import MatchDescription
    from diffmatch._types import DataInput


@dataclass(frozen=True, slots=True)
class PredicateMatcher(BaseMatcher):
    """Adapt a plain one-argument callable into a matcher."""

    predicate: Callable[[Any], Any]
    label: str = ""

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            msg = f"predicate must be callable, got {self.predicate!r}"
            raise InvalidParameterError(msg)

    def _matches(self, *values: Any) -> bool:
        return bool(self.predicate(*values))

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text(self.label or _callable_name(self.predicate))


@dataclass(frozen=True, slots=True)
class EqualMatcher(BaseMatcher):
    """Equality against a reference value. None never matches (either side)."""

    expected: Any

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if self.expected is None or value is None:
            return False
        return bool(value == self.expected)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("equal to ").append_value(self.expected)


@dataclass(frozen=True, slots=True)
class InstanceOfMatcher(BaseMatcher):
    expected_type: type | tuple[type, ...]

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        return isinstance(value, self.expected_type)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("an instance of ").append_text(_type_name(self.expected_type))

    def describe_mismatch(self, value: Any, description: MatchDescription) -> None:
        if value is None:
            description.append_text("was None")
            return
        description.append_text("was a ").append_text(type(value).__name__)
        description.append_text(" (").append_value(value).append_text(")")


@dataclass(frozen=True, slots=True)
class NoneMatcher(BaseMatcher):
    def _matches(self, *values: Any) -> bool:
        (value,) = values
        return value is None

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("None")


@dataclass(frozen=True, slots=True)
class ConstantMatcher(BaseMatcher):
    """Always answers `result`, whatever the value."""

    result: bool

    def _matches(self, *values: Any) -> bool:
        return self.result

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("ANYTHING" if self.result else "NOTHING")


@dataclass(frozen=True, slots=True)
class InMatcher(BaseMatcher):
    """Membership in a fixed collection."""

    collection: Collection[Any]

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        try:
            return value in self.collection
        except TypeError:
            # e.g. an unhashable value tested against a set
            return False

    def describe_to(self, description: MatchDescription) -> None:
        description.append_list("one of {", ", ", "}", self.collection)


@dataclass(frozen=True, slots=True)
class TypeSafeMatcher(BaseMatcher):
    """Guard a matcher with a type check.

    The nested matcher is only consulted for instances of expected_type, so
    it never sees a value of the wrong shape. None is never an instance.
    """

    expected_type: type | tuple[type, ...]
    matcher: Any

    def __post_init__(self) -> None:
        if self.matcher is None:
            msg = "matcher should not be None"
            raise InvalidParameterError(msg)

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if not isinstance(value, self.expected_type):
            return False
        return bool(self.matcher.matches(value))

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text(f"<{_type_name(self.expected_type)}> with ")
        description.append_description_of(self.matcher)

    def describe_mismatch(self, value: Any, description: MatchDescription) -> None:
        if value is None:
            description.append_text("was None")
        elif not isinstance(value, self.expected_type):
            description.append_text("was a ").append_text(type(value).__name__)
            description.append_text(" (").append_value(value).append_text(")")
        elif hasattr(self.matcher, "describe_mismatch"):
            self.matcher.describe_mismatch(value, description)
        else:
            description.append_text("was ").append_value(value)


@dataclass(frozen=True, slots=True)
class FieldMatcher(BaseMatcher):
    """Extract a value with a DataInput, then apply a matcher to it.

    The extracted value (None included) is handed to the nested matcher as-is;
    matchers that cannot handle None answer False themselves.
    """

    input: DataInput[Any]
    matcher: Any
    name: str = ""

    def __post_init__(self) -> None:
        if self.input is None or self.matcher is None:
            msg = "field matcher needs both an input and a matcher"
            raise InvalidParameterError(msg)

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        return bool(self.matcher.matches(self.input.get(value)))

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text(f"{self.name or _input_name(self.input)} ")
        description.append_description_of(self.matcher)

    def describe_mismatch(self, value: Any, description: MatchDescription) -> None:
        field_value = self.input.get(value)
        description.append_text(f"{self.name or _input_name(self.input)} ")
        if hasattr(self.matcher, "describe_mismatch"):
            self.matcher.describe_mismatch(field_value, description)
        else:
            description.append_text("was ").append_value(field_value)


@dataclass(frozen=True, slots=True)
class EveryItemMatcher(BaseMatcher):
    """An iterable whose items all match. None is not an iterable."""

    matcher: Any

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if value is None or isinstance(value, str):
            return False
        try:
            items = iter(value)
        except TypeError:
            return False
        return all(self.matcher.matches(item) for item in items)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("every item is ").append_description_of(self.matcher)


@dataclass(frozen=True, slots=True)
class HasItemMatcher(BaseMatcher):
    """An iterable with at least one matching item."""

    matcher: Any

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if value is None or isinstance(value, str):
            return False
        try:
            items = iter(value)
        except TypeError:
            return False
        return any(self.matcher.matches(item) for item in items)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("a collection containing ").append_description_of(self.matcher)


# ═══════════════════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════════════════


def matcher(predicate: Callable[[Any], Any], label: str = "") -> PredicateMatcher:
    """Wrap a callable as a matcher; label is used in descriptions."""
    return PredicateMatcher(predicate, label)


def is_equal(expected: Any) -> EqualMatcher:
    return EqualMatcher(expected)


def instance_of(expected_type: type | tuple[type, ...]) -> InstanceOfMatcher:
    return InstanceOfMatcher(expected_type)


def is_none() -> NoneMatcher:
    return NoneMatcher()


def not_none() -> BaseMatcher:
    return NoneMatcher().negate()


def anything() -> ConstantMatcher:
    return ConstantMatcher(True)


def nothing() -> ConstantMatcher:
    return ConstantMatcher(False)


def is_in(collection: Collection[Any]) -> InMatcher:
    return InMatcher(collection)


def every_item(item_matcher: Any) -> EveryItemMatcher:
    return EveryItemMatcher(item_matcher)


def has_item(item_matcher: Any) -> HasItemMatcher:
    return HasItemMatcher(item_matcher)


def type_safe(
    expected_type: type | tuple[type, ...],
    predicate: Callable[[Any], Any],
    label: str = "",
) -> TypeSafeMatcher:
    """Type-guarded predicate: predicate only ever sees expected_type values."""
    return TypeSafeMatcher(expected_type, PredicateMatcher(predicate, label))


def field_matcher(input: DataInput[Any], matcher: Any, name: str = "") -> FieldMatcher:
    return FieldMatcher(input, matcher, name)


def _callable_name(fn: Callable[..., Any]) -> str:
    name = getattr(fn, "__name__", None)
    if name is None or name == "<lambda>":
        return "predicate"
    return name


def _type_name(expected_type: type | tuple[type, ...]) -> str:
    if isinstance(expected_type, tuple):
        return " | ".join(t.__name__ for t in expected_type)
    return expected_type.__name__


def _input_name(input: DataInput[Any]) -> str:
    return getattr(input, "name", None) or getattr(input, "key", None) or type(input).__name__
