"""MatchDescription — append-only text builder for matcher explanations.

A description is written during a single describe_to / describe_mismatch
pass and then read back with str(). Two descriptions are equal when they
render the same text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from collections.abc import Iterable


class MatchDescription:
    """Mutable sequence-of-text builder.

    Every append method returns the description itself so calls chain:

    >>> str(MatchDescription().append_text("equal to ").append_value(5))
    'equal to 5'
    """

    __slots__ = ("_parts",)

    def __init__(self, text: str = "") -> None:
        self._parts: list[str] = [text] if text else []

    @classmethod
    def of(cls, matcher: Any) -> MatchDescription:
        """Build a fresh description of a matcher."""
        return cls().append_description_of(matcher)

    def append_text(self, text: str) -> Self:
        """Append raw text."""
        self._parts.append(text)
        return self

    def append_value(self, value: Any) -> Self:
        """Append a value rendered for humans: strings quoted, others repr()."""
        return self.append_text(_render_value(value))

    def append(self, value: Any) -> Self:
        """Append text, another description, or a rendered value."""
        match value:
            case str():
                return self.append_text(value)
            case MatchDescription():
                return self.append_description(value)
            case _:
                return self.append_value(value)

    def append_description(self, description: MatchDescription) -> Self:
        """Append the rendered text of another description."""
        return self.append_text(str(description))

    def append_description_of(self, matcher: Any) -> Self:
        """Let a matcher describe itself into this description.

        Objects that do not implement describe_to are rendered with repr().
        """
        describe_to = getattr(matcher, "describe_to", None)
        if describe_to is None:
            return self.append_text(repr(matcher))
        describe_to(self)
        return self

    def append_list(
        self, start: str, separator: str, end: str, values: Iterable[Any] | None
    ) -> Self:
        """Append values joined by separator and wrapped in start/end.

        Matchers in the list describe themselves; other values are rendered.
        """
        self.append_text(start)
        for i, value in enumerate(values or ()):
            if i:
                self.append_text(separator)
            if hasattr(value, "describe_to"):
                self.append_description_of(value)
            else:
                self.append_value(value)
        return self.append_text(end)

    def copy(self) -> MatchDescription:
        """Return an independent snapshot of this description."""
        return MatchDescription(str(self))

    @property
    def is_empty(self) -> bool:
        return not any(self._parts)

    def __str__(self) -> str:
        return "".join(self._parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchDescription):
            return NotImplemented
        return str(self) == str(other)

    __hash__ = None  # type: ignore[assignment]


class EmptyMatchDescription(MatchDescription):
    """A description that discards everything appended to it."""

    __slots__ = ()

    def append_text(self, text: str) -> Self:
        return self

    def append_description_of(self, matcher: Any) -> Self:
        return self


EMPTY_DESCRIPTION = EmptyMatchDescription()


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, MatchDescription):
        return str(value)
    return repr(value)
