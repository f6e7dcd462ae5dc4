"""Core protocols for diffmatch.

- Matcher is the single-value predicate port
- BiMatcher is the pairwise predicate port
- DataInput extracts a field from a value (the accessor capability)
- MatcherEventListener observes evaluations

Any object with the right methods satisfies these protocols; the concrete
matchers in this package additionally derive from BaseMatcher, which
supplies combinators, descriptions and listener dispatch.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from diffmatch._description import MatchDescription
    from diffmatch._events import MatcherEvent

T = TypeVar("T", contravariant=True)
U = TypeVar("U", contravariant=True)
Ctx = TypeVar("Ctx", contravariant=True)


@runtime_checkable
class Matcher(Protocol[T]):
    """Predicate over a single value.

    matches() must be a pure function of the value and the matcher's
    construction-time configuration. describe_to() must never raise.
    """

    def matches(self, value: T, /) -> bool: ...

    def describe_to(self, description: MatchDescription, /) -> None: ...


@runtime_checkable
class BiMatcher(Protocol[T, U]):
    """Predicate over a pair of values (e.g. "same runtime type")."""

    def matches(self, first: T, last: U, /) -> bool: ...

    def describe_to(self, description: MatchDescription, /) -> None: ...


@runtime_checkable
class DataInput(Protocol[Ctx]):
    """Extract a value from a context.

    Used by FieldMatcher so that field access is an explicit capability
    supplied at construction time instead of runtime introspection.
    """

    def get(self, ctx: Ctx, /) -> Any: ...


class MatcherEventListener(Protocol):
    """Observer notified by a MatcherHandler.

    Implementations only need the hooks they care about; the handler skips
    hooks a listener does not define.
    """

    def on_success(self, event: MatcherEvent, /) -> None: ...

    def on_failure(self, event: MatcherEvent, /) -> None: ...


class MatcherMode(Enum):
    """Whether a matcher takes part in notification and n-ary combination.

    STRICT matchers notify their listeners and are folded by the *_all
    combinators. SILENT matchers never notify and are dropped from *_all.
    """

    STRICT = "strict"
    SILENT = "silent"

    @property
    def is_enabled(self) -> bool:
        return self is MatcherMode.STRICT


def mode_of(matcher: object) -> MatcherMode:
    """Mode of any matcher; protocol-only matchers are STRICT."""
    return getattr(matcher, "mode", MatcherMode.STRICT)
