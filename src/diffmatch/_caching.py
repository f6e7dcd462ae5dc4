"""Result-caching matcher decorators.

CachingMatcher remembers the boolean computed for each value. Once a value
is cached the delegate is never consulted for it again, even if the
delegate's behaviour would change. Each key pairs a value with its exact
type, so values that compare equal across types (1, 1.0, True) are cached
separately.

Concurrency: each cache read and each cache write holds the lock, but the
delegate runs outside it. Two threads missing on the same key may both call
the delegate; both store the same boolean for a pure delegate.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from diffmatch._errors import InvalidParameterError
from diffmatch._matcher import BaseMatcher, arity_of

if TYPE_CHECKING:
    from collections.abc import Hashable

    from diffmatch._description import MatchDescription

logger = logging.getLogger(__name__)

_MISSING = object()


def _cache_key(values: tuple[Any, ...]) -> Hashable:
    return tuple((type(v), v) for v in values)


@dataclass(frozen=True, slots=True)
class CacheInfo:
    hits: int
    misses: int
    size: int
    max_size: int | None


@dataclass(frozen=True, slots=True)
class CachingMatcher(BaseMatcher):
    """Memoize a matcher's results per value, without bound.

    Bi matchers are cached by the (first, last) pair. Unhashable values are
    evaluated by the delegate every time. A delegate exception is never
    cached.
    """

    matcher: Any
    _cache: dict[Hashable, bool] = field(init=False, repr=False, compare=False)
    _lock: threading.Lock = field(init=False, repr=False, compare=False)
    _counts: list[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.matcher is None:
            msg = "matcher should not be None"
            raise InvalidParameterError(msg)
        object.__setattr__(self, "_cache", {})
        object.__setattr__(self, "_lock", threading.Lock())
        object.__setattr__(self, "_counts", [0, 0])

    @property
    def arity(self) -> int:
        return arity_of(self.matcher)

    def _matches(self, *values: Any) -> bool:
        key = _cache_key(values)
        try:
            hash(key)
        except TypeError:
            return bool(self.matcher.matches(*values))

        with self._lock:
            cached = self._cache.get(key, _MISSING)
            if cached is not _MISSING:
                self._counts[0] += 1
                return cached
            self._counts[1] += 1

        result = bool(self.matcher.matches(*values))
        with self._lock:
            self._store(key, result)
        return result

    def _store(self, key: Hashable, result: bool) -> None:
        self._cache[key] = result

    def _capacity(self) -> int | None:
        return None

    def cache_info(self) -> CacheInfo:
        with self._lock:
            hits, misses = self._counts
            return CacheInfo(hits, misses, len(self._cache), self._capacity())

    def cache_clear(self) -> None:
        """Drop every cached result and reset the statistics."""
        with self._lock:
            self._cache.clear()
            self._counts[:] = [0, 0]

    def describe_to(self, description: MatchDescription) -> None:
        description.append_description_of(self.matcher)

    def describe_mismatch(self, value: Any, description: MatchDescription) -> None:
        if hasattr(self.matcher, "describe_mismatch"):
            self.matcher.describe_mismatch(value, description)
        else:
            BaseMatcher.describe_mismatch(self, value, description)


@dataclass(frozen=True, slots=True)
class EvictingCachingMatcher(CachingMatcher):
    """CachingMatcher holding at most max_size results.

    When a new key arrives and the cache is full, the entry that comes first
    in the dict's iteration order is dropped. That is the oldest surviving
    insertion today, but callers should treat the choice as unspecified.
    Overwriting an existing key never evicts.

    Raises:
        InvalidParameterError: If max_size is not a positive integer.
    """

    max_size: int

    def __post_init__(self) -> None:
        if isinstance(self.max_size, bool) or not isinstance(self.max_size, int) or self.max_size < 1:
            msg = f"max_size must be a positive integer, got {self.max_size!r}"
            raise InvalidParameterError(msg)
        CachingMatcher.__post_init__(self)

    def _store(self, key: Hashable, result: bool) -> None:
        if key not in self._cache and len(self._cache) >= self.max_size:
            evicted = next(iter(self._cache))
            del self._cache[evicted]
            logger.debug("evicted cached result for %r (max_size=%d)", evicted, self.max_size)
        self._cache[key] = result

    def _capacity(self) -> int | None:
        return self.max_size


def caching(matcher: Any, max_size: int | None = None) -> CachingMatcher:
    """Wrap matcher in a cache; bounded when max_size is given."""
    if max_size is None:
        return CachingMatcher(matcher)
    return EvictingCachingMatcher(matcher, max_size)
