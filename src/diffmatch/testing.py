"""Test utilities for diffmatch.

assert_that() turns a matcher into a test assertion with a readable failure
message:

>>> from diffmatch import is_equal
>>> from diffmatch.testing import assert_that
>>> assert_that(5, is_equal(5))
"""

from __future__ import annotations

from typing import Any

from diffmatch._description import MatchDescription


def assert_that(actual: Any, matcher: Any, reason: str = "") -> None:
    """Raise AssertionError unless matcher matches actual.

    The message reads::

        <reason>
        Expected: <matcher description>
             but: <mismatch description>
    """
    if matcher.matches(actual):
        return
    description = MatchDescription()
    if reason:
        description.append_text(reason).append_text("\n")
    description.append_text("Expected: ").append_description_of(matcher)
    description.append_text("\n     but: ")
    description.append_description(mismatch_of(matcher, actual))
    raise AssertionError(str(description))


def mismatch_of(matcher: Any, actual: Any) -> MatchDescription:
    """Describe why actual fails matcher (default: ``was <value>``)."""
    description = MatchDescription()
    describe_mismatch = getattr(matcher, "describe_mismatch", None)
    if describe_mismatch is None:
        return description.append_text("was ").append_value(actual)
    describe_mismatch(actual, description)
    return description
