"""DataInput accessors: explicit field extraction for FieldMatcher.

An input returns None when the field is not available; the matcher it feeds
decides what None means.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from diffmatch._core_matchers import FieldMatcher

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable


@dataclass(frozen=True, slots=True)
class AttributeInput:
    """Read an attribute from an object."""

    name: str

    def get(self, ctx: Any, /) -> Any:
        return getattr(ctx, self.name, None)


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Read a key from a mapping. Non-mappings yield None."""

    key: Hashable

    def get(self, ctx: Any, /) -> Any:
        if not isinstance(ctx, Mapping):
            return None
        return ctx.get(self.key)


@dataclass(frozen=True, slots=True)
class CallableInput:
    """Extract with an arbitrary accessor function."""

    fn: Callable[[Any], Any]
    name: str = ""

    def get(self, ctx: Any, /) -> Any:
        return self.fn(ctx)


def has_attribute(name: str, matcher: Any) -> FieldMatcher:
    """Match objects whose attribute `name` satisfies matcher."""
    return FieldMatcher(AttributeInput(name), matcher, name)


def has_key(key: Hashable, matcher: Any) -> FieldMatcher:
    """Match mappings whose entry `key` satisfies matcher."""
    return FieldMatcher(KeyInput(key), matcher, str(key))


def has_field(name: str, accessor: Callable[[Any], Any], matcher: Any) -> FieldMatcher:
    """Match values whose accessor(value) satisfies matcher."""
    return FieldMatcher(CallableInput(accessor, name), matcher, name)
