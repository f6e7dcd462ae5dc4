"""Error types shared across diffmatch.

Registry and config errors live next to the code that raises them and
derive from MatcherError as well.
"""

from __future__ import annotations


class MatcherError(Exception):
    """Base class for errors raised by diffmatch."""


class InvalidParameterError(MatcherError, ValueError):
    """A matcher was composed or configured with invalid arguments.

    Raised at composition time for a missing operand (binary or n-ary
    combinators alike), an empty matcher list, mixed arities, or an invalid
    cache size. Never raised during evaluation.
    """


class EventDispatchError(MatcherError):
    """A listener raised while handling a matcher event."""

    def __init__(self, event: object, listener: object) -> None:
        self.event = event
        self.listener = listener
        super().__init__(f"cannot dispatch {event!r} to listener {listener!r}")
