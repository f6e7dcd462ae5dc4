"""Evaluate benchmarks for diffmatch.

Measures the hot path: leaf and field evaluation, combinator folds,
cache hits, listener overhead and DiffMatcher batches.

Run: pytest tests/bench/test_bench_evaluate.py --benchmark-only
"""

from __future__ import annotations

from dataclasses import dataclass

from diffmatch import (
    BaseMatcherEventListener,
    CachingMatcher,
    DiffMatcher,
    ExactMatcher,
    RegexMatcher,
    and_all,
    has_attribute,
    is_equal,
    or_all,
)

# ── Test fixtures ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Ctx:
    value: str
    count: int = 0


def value_is(expected: str):  # noqa: ANN201
    return has_attribute("value", ExactMatcher(expected))


def _make_diff_matcher(n: int) -> DiffMatcher:
    return DiffMatcher([value_is(f"rule_{i}") for i in range(n)])


# ── Leaves ───────────────────────────────────────────────────────────────────


def test_bench_equal_hit_evaluate(benchmark):
    m = is_equal(5)
    benchmark(m.matches, 5)


def test_bench_field_exact_hit_evaluate(benchmark):
    m = value_is("/api")
    benchmark(m.matches, Ctx("/api"))


def test_bench_regex_hit_evaluate(benchmark):
    m = has_attribute("value", RegexMatcher(r"^/api/v\d+/users/\d+$"))
    benchmark(m.matches, Ctx("/api/v2/users/12345"))


# ── Combinators ──────────────────────────────────────────────────────────────


def test_bench_and_all_10_evaluate(benchmark):
    m = and_all(*(has_attribute("count", is_equal(0)) for _ in range(10)))
    benchmark(m.matches, Ctx("x"))


def test_bench_or_all_10_last_match_evaluate(benchmark):
    m = or_all(*(value_is(f"rule_{i}") for i in range(10)))
    benchmark(m.matches, Ctx("rule_9"))


def test_bench_nested_negation_evaluate(benchmark):
    m = ~(value_is("a") | value_is("b")) & ~value_is("c")
    benchmark(m.matches, Ctx("d"))


# ── Caching ──────────────────────────────────────────────────────────────────


def test_bench_cache_hit_evaluate(benchmark):
    m = CachingMatcher(has_attribute("value", RegexMatcher(r"^/api/v\d+/users/\d+$")))
    ctx = Ctx("/api/v2/users/12345")
    m.matches(ctx)
    benchmark(m.matches, ctx)


# ── Listener overhead ────────────────────────────────────────────────────────


def test_bench_listener_overhead_evaluate(benchmark):
    m = value_is("/api").add_listener(BaseMatcherEventListener())
    benchmark(m.matches, Ctx("/api"))


# ── DiffMatcher scaling ──────────────────────────────────────────────────────


def test_bench_diff_match_10_evaluate(benchmark):
    diff = _make_diff_matcher(10)
    benchmark(diff.diff_match, Ctx("rule_3"))


def test_bench_diff_match_100_evaluate(benchmark):
    diff = _make_diff_matcher(100)
    benchmark(diff.diff_match, Ctx("rule_3"))
