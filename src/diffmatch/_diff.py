"""DiffMatcher: run a batch of matchers and report the ones that fail.

    >>> diff = DiffMatcher([is_equal(5), instance_of(int)])
    >>> diff.diff_match(6)
    [DiffMatchEntry(value=6, description=MatchDescription('equal to 5'))]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Self

from diffmatch._description import MatchDescription
from diffmatch._events import MatcherEventType, MatcherHandler

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from diffmatch._types import MatcherEventListener

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DiffMatchEntry:
    """One failed evaluation: the value and a snapshot of the failed matcher's description."""

    value: Any
    description: MatchDescription = field(hash=False)

    def __str__(self) -> str:
        return f"{self.description} (value: {self.value!r})"


class DiffMatcher:
    """Ordered, mutable collection of matchers evaluated as a batch.

    Order is evaluation order and duplicates are kept. The collection is not
    thread-safe; build it up front and share it read-only.
    """

    def __init__(
        self,
        matchers: Iterable[Any] | None = None,
        handler: MatcherHandler | None = None,
    ) -> None:
        self._matchers: list[Any] = []
        self.handler = handler or MatcherHandler()
        if matchers is not None:
            self.include(matchers)

    @property
    def matchers(self) -> tuple[Any, ...]:
        return tuple(self._matchers)

    def include(self, matcher: Any) -> Self:
        """Register matchers.

        A single matcher is appended. Any other iterable replaces the whole
        registered sequence. None, and None items, are ignored.
        """
        if matcher is None:
            return self
        if _is_matcher(matcher):
            self._matchers.append(matcher)
            return self
        self._matchers = [m for m in matcher if m is not None]
        return self

    def exclude(self, matcher: Any) -> Self:
        """Remove the first equal occurrence of a matcher (or of each matcher in an iterable)."""
        if matcher is None:
            return self
        if not _is_matcher(matcher):
            for m in list(matcher):
                self.exclude(m)
            return self
        try:
            self._matchers.remove(matcher)
        except ValueError:
            pass
        return self

    def add_listener(self, listener: MatcherEventListener) -> Self:
        self.handler.add_listener(listener)
        return self

    def diff_match(self, value: Any) -> list[DiffMatchEntry]:
        """Evaluate every matcher against value; one entry per failing matcher.

        Matcher exceptions propagate and abort the run.
        """
        entries: list[DiffMatchEntry] = []
        for m in tuple(self._matchers):
            result = bool(m.matches(value))
            self.handler.dispatch(m, value, MatcherEventType.from_result(result))
            if not result:
                entries.append(DiffMatchEntry(value, MatchDescription.of(m)))
        logger.debug(
            "diff_match: %d of %d matchers failed for %r",
            len(entries),
            len(self._matchers),
            value,
        )
        return entries

    def matches(self, value: Any) -> bool:
        return all(m.matches(value) for m in tuple(self._matchers))

    def describe_to(self, description: MatchDescription) -> None:
        description.append_list("[", ", ", "]", self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._matchers))

    def __str__(self) -> str:
        return str(MatchDescription.of(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._matchers!r})"


def _is_matcher(obj: Any) -> bool:
    return callable(getattr(obj, "matches", None))
