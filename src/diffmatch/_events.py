"""Matcher events, the MatcherHandler, and the stock listeners.

Every BaseMatcher owns a MatcherHandler. When a STRICT matcher with at least
one registered listener is evaluated, the handler receives, in order:

    START, BEFORE, SUCCESS | FAILURE, AFTER, COMPLETE

or, when the evaluation raises:

    START, BEFORE, ERROR, COMPLETE

Listeners only observe. They cannot change a result, and an exception they
raise is re-raised as EventDispatchError.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Self

from diffmatch._description import MatchDescription
from diffmatch._errors import EventDispatchError
from diffmatch._types import mode_of

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diffmatch._types import MatcherEventListener

logger = logging.getLogger(__name__)


class MatcherEventType(Enum):
    START = "start"
    BEFORE = "before"
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"
    AFTER = "after"
    COMPLETE = "complete"

    @classmethod
    def from_result(cls, result: bool) -> MatcherEventType:
        return cls.SUCCESS if result else cls.FAILURE

    @property
    def hook(self) -> str:
        """Name of the listener method handling this event type."""
        return f"on_{self.value}"


@dataclass(frozen=True, slots=True)
class MatcherEvent:
    """One notification: which matcher saw which value, and what happened."""

    matcher: Any
    value: Any
    type: MatcherEventType

    @property
    def description(self) -> MatchDescription:
        return MatchDescription.of(self.matcher)


class MatcherHandler:
    """Append-only listener registry that fans events out to listeners.

    Registration is guarded by a lock; dispatch iterates over a snapshot,
    so listeners added while an evaluation is running see the next one.
    A handler may be shared by several matchers.
    """

    __slots__ = ("_listeners", "_lock")

    def __init__(self, listeners: Iterable[MatcherEventListener] | None = None) -> None:
        self._listeners: tuple[MatcherEventListener, ...] = ()
        self._lock = threading.Lock()
        self.add_listeners(listeners)

    def add_listener(self, listener: MatcherEventListener | None) -> Self:
        """Register a listener. None is ignored."""
        if listener is not None:
            with self._lock:
                self._listeners = (*self._listeners, listener)
        return self

    def add_listeners(self, listeners: Iterable[MatcherEventListener] | None) -> Self:
        for listener in listeners or ():
            self.add_listener(listener)
        return self

    @property
    def listeners(self) -> tuple[MatcherEventListener, ...]:
        return self._listeners

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def dispatch(self, matcher: Any, value: Any, type_: MatcherEventType) -> None:
        """Build an event for an enabled matcher and hand it to listeners."""
        if not self._listeners or not mode_of(matcher).is_enabled:
            return
        self.handle_event(MatcherEvent(matcher=matcher, value=value, type=type_))

    def handle_event(self, event: MatcherEvent) -> None:
        for listener in self._listeners:
            hook = getattr(listener, event.type.hook, None)
            if hook is None:
                continue
            try:
                hook(event)
            except Exception as e:
                raise EventDispatchError(event, listener) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(listeners={len(self._listeners)})"


class BaseMatcherEventListener:
    """Listener with no-op hooks for every event type. Override what you need."""

    def on_start(self, event: MatcherEvent) -> None:
        pass

    def on_before(self, event: MatcherEvent) -> None:
        pass

    def on_success(self, event: MatcherEvent) -> None:
        pass

    def on_failure(self, event: MatcherEvent) -> None:
        pass

    def on_error(self, event: MatcherEvent) -> None:
        pass

    def on_after(self, event: MatcherEvent) -> None:
        pass

    def on_complete(self, event: MatcherEvent) -> None:
        pass


class CollectingMatcherEventListener(BaseMatcherEventListener):
    """Record which matchers succeeded, failed or raised.

    Useful for test reporting: attach one instance to several matchers (or to
    a DiffMatcher) and inspect the lists after a run.
    """

    def __init__(self) -> None:
        self.successes: list[Any] = []
        self.failures: list[Any] = []
        self.errors: list[Any] = []

    def on_success(self, event: MatcherEvent) -> None:
        self.successes.append(event.matcher)

    def on_failure(self, event: MatcherEvent) -> None:
        self.failures.append(event.matcher)

    def on_error(self, event: MatcherEvent) -> None:
        self.errors.append(event.matcher)

    def clear(self) -> None:
        self.successes.clear()
        self.failures.clear()
        self.errors.clear()


class LoggingMatcherEventListener(BaseMatcherEventListener):
    """Write every event to a logger (this module's logger by default)."""

    def __init__(
        self, target: logging.Logger | None = None, level: int = logging.DEBUG
    ) -> None:
        self.logger = target or logger
        self.level = level

    def _log(self, event: MatcherEvent) -> None:
        self.logger.log(
            self.level,
            "%s event for matcher %s, value=%r",
            event.type.name,
            event.description,
            event.value,
        )

    on_start = on_before = on_success = on_failure = _log
    on_error = on_after = on_complete = _log
