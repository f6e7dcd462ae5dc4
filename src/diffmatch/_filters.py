"""Filtering helpers that apply matchers to collections.

Several matchers passed to one helper are combined with and_all. A None
collection is treated as empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from diffmatch._matcher import and_all

if TYPE_CHECKING:
    from collections.abc import Iterable


def match_if(values: Iterable[Any] | None, *matchers: Any) -> list[Any]:
    """Values matched by every matcher, in order."""
    m = and_all(*matchers)
    return [v for v in values or () if m.matches(v)]


def remove_if(values: Iterable[Any] | None, *matchers: Any) -> list[Any]:
    """Values not matched by the matchers, in order."""
    m = and_all(*matchers)
    return [v for v in values or () if not m.matches(v)]


def match_first_if(values: Iterable[Any] | None, *matchers: Any, default: Any = None) -> Any:
    m = and_all(*matchers)
    return next((v for v in values or () if m.matches(v)), default)


def match_last_if(values: Iterable[Any] | None, *matchers: Any, default: Any = None) -> Any:
    m = and_all(*matchers)
    result = default
    for v in values or ():
        if m.matches(v):
            result = v
    return result


def partition(values: Iterable[Any] | None, *matchers: Any) -> dict[bool, list[Any]]:
    """Split values into {True: matched, False: unmatched}, preserving order."""
    m = and_all(*matchers)
    parts: dict[bool, list[Any]] = {True: [], False: []}
    for v in values or ():
        parts[bool(m.matches(v))].append(v)
    return parts
