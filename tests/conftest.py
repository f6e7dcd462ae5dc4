"""Shared fixtures and YAML fixture loading for diffmatch tests.

Truth-table fixtures live in tests/fixtures/*.yaml. Each document names an
operator and lists cases of input booleans and the expected fold result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
import yaml

from diffmatch import (
    BaseMatcher,
    DiffMatcher,
    MatchDescription,
    has_attribute,
    is_equal,
    matcher,
)

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass(frozen=True, slots=True)
class DeliveryInfo:
    type: int
    gid: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class Const(BaseMatcher):
    """Matcher with a fixed answer that counts how often it was asked."""

    result: bool
    name: str = "const"
    calls: list[tuple[Any, ...]] = field(default_factory=list, compare=False, repr=False)

    def _matches(self, *values: Any) -> bool:
        self.calls.append(values)
        return self.result

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text(self.name)


class CountingPredicate:
    """Callable predicate recording every value it sees."""

    def __init__(self, fn: Any) -> None:
        self.fn = fn
        self.seen: list[Any] = []

    def __call__(self, value: Any) -> Any:
        self.seen.append(value)
        return self.fn(value)

    @property
    def calls(self) -> int:
        return len(self.seen)


CUTOFF = datetime(2020, 1, 1)


def delivery_diff_matcher() -> DiffMatcher:
    return DiffMatcher(
        [
            has_attribute("type", is_equal(5)),
            has_attribute("gid", is_equal("TEST")),
            has_attribute("created_at", matcher(lambda d: d > CUTOFF, "after 2020-01-01")),
        ]
    )


@pytest.fixture
def delivery() -> DeliveryInfo:
    return DeliveryInfo(type=5, gid="TEST", created_at=datetime(2024, 6, 1, 12, 0))


# ─── Fixture loading ────────────────────────────────────────────────────────


@dataclass
class TruthCase:
    operator: str
    inputs: list[bool]
    expect: bool

    @property
    def id(self) -> str:
        bits = "".join("T" if b else "F" for b in self.inputs)
        return f"{self.operator}::{bits}"


def load_truth_tables(name: str = "truth_tables.yaml") -> list[TruthCase]:
    """Load operator truth tables (may contain multiple documents)."""
    cases: list[TruthCase] = []
    with (FIXTURE_DIR / name).open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            for case in doc["cases"]:
                cases.append(
                    TruthCase(
                        operator=doc["operator"],
                        inputs=list(case["inputs"]),
                        expect=case["expect"],
                    )
                )
    return cases


def load_yaml(name: str) -> Any:
    with (FIXTURE_DIR / name).open() as f:
        return yaml.safe_load(f)
