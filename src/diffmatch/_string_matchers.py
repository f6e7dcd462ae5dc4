"""String matchers.

Each matcher is a frozen dataclass, immutable after construction, and
answers False for anything that is not a str (None included).

Regex uses ``google-re2`` for guaranteed linear-time matching. RE2 does not
support backreferences or lookahead/lookbehind; patterns using them are
rejected at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import re2

from diffmatch._errors import InvalidParameterError
from diffmatch._matcher import BaseMatcher

if TYPE_CHECKING:
    from diffmatch._description import MatchDescription


def _fold(value: str, ignore_case: bool) -> str:
    return value.casefold() if ignore_case else value


@dataclass(frozen=True, slots=True)
class ExactMatcher(BaseMatcher):
    """Exact string equality.

    With ignore_case, comparison uses casefold(). The comparison value is
    folded once at construction time.
    """

    value: str
    ignore_case: bool = False
    _cmp_value: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cmp_value", _fold(self.value, self.ignore_case))

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if not isinstance(value, str):
            return False
        return _fold(value, self.ignore_case) == self._cmp_value

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("a string equal to ").append_value(self.value)
        if self.ignore_case:
            description.append_text(" ignoring case")


@dataclass(frozen=True, slots=True)
class PrefixMatcher(BaseMatcher):
    prefix: str
    ignore_case: bool = False
    _cmp_prefix: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cmp_prefix", _fold(self.prefix, self.ignore_case))

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if not isinstance(value, str):
            return False
        return _fold(value, self.ignore_case).startswith(self._cmp_prefix)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("a string starting with ").append_value(self.prefix)
        if self.ignore_case:
            description.append_text(" ignoring case")


@dataclass(frozen=True, slots=True)
class SuffixMatcher(BaseMatcher):
    suffix: str
    ignore_case: bool = False
    _cmp_suffix: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cmp_suffix", _fold(self.suffix, self.ignore_case))

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if not isinstance(value, str):
            return False
        return _fold(value, self.ignore_case).endswith(self._cmp_suffix)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("a string ending with ").append_value(self.suffix)
        if self.ignore_case:
            description.append_text(" ignoring case")


@dataclass(frozen=True, slots=True)
class ContainsMatcher(BaseMatcher):
    substring: str
    ignore_case: bool = False
    _cmp_substring: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cmp_substring", _fold(self.substring, self.ignore_case))

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if not isinstance(value, str):
            return False
        return self._cmp_substring in _fold(value, self.ignore_case)

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("a string containing ").append_value(self.substring)
        if self.ignore_case:
            description.append_text(" ignoring case")


@dataclass(frozen=True, slots=True)
class RegexMatcher(BaseMatcher):
    """Regular expression match.

    The pattern is compiled at construction time via ``google-re2``. By
    default the pattern may match anywhere in the string (search); with
    full_match it must cover the whole string.

    Raises:
        InvalidParameterError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    full_match: bool = False
    _compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            msg = f'invalid regex pattern "{self.pattern}": {e}'
            raise InvalidParameterError(msg) from e
        object.__setattr__(self, "_compiled", compiled)

    def _matches(self, *values: Any) -> bool:
        (value,) = values
        if not isinstance(value, str):
            return False
        if self.full_match:
            return self._compiled.fullmatch(value) is not None
        return self._compiled.search(value) is not None

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("a string matching ").append_value(self.pattern)


def equal_to_ignoring_case(value: str) -> ExactMatcher:
    return ExactMatcher(value, ignore_case=True)


def starts_with(prefix: str, *, ignore_case: bool = False) -> PrefixMatcher:
    return PrefixMatcher(prefix, ignore_case)


def ends_with(suffix: str, *, ignore_case: bool = False) -> SuffixMatcher:
    return SuffixMatcher(suffix, ignore_case)


def contains_string(substring: str, *, ignore_case: bool = False) -> ContainsMatcher:
    return ContainsMatcher(substring, ignore_case)


def matches_pattern(pattern: str, *, full_match: bool = False) -> RegexMatcher:
    return RegexMatcher(pattern, full_match)
