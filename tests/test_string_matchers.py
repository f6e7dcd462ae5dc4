"""Tests for string matchers."""

import pytest

from diffmatch import (
    ContainsMatcher,
    ExactMatcher,
    InvalidParameterError,
    PrefixMatcher,
    RegexMatcher,
    SuffixMatcher,
    contains_string,
    ends_with,
    equal_to_ignoring_case,
    matches_pattern,
    starts_with,
)


class TestExactMatcher:
    def test_exact_match(self) -> None:
        assert ExactMatcher("hello").matches("hello") is True

    def test_case_sensitive_by_default(self) -> None:
        assert ExactMatcher("hello").matches("Hello") is False

    def test_ignore_case(self) -> None:
        m = equal_to_ignoring_case("hello")
        assert m.matches("HELLO") is True
        assert m.matches("Hello") is True

    def test_none_and_non_string(self) -> None:
        assert ExactMatcher("42").matches(None) is False
        assert ExactMatcher("42").matches(42) is False

    def test_description(self) -> None:
        assert str(ExactMatcher("a", ignore_case=True)) == 'a string equal to "a" ignoring case'

    def test_equality_ignores_folded_value(self) -> None:
        assert ExactMatcher("a") == ExactMatcher("a")
        assert ExactMatcher("a") != ExactMatcher("a", ignore_case=True)


class TestPrefixSuffixContains:
    def test_prefix(self) -> None:
        assert PrefixMatcher("/api").matches("/api/users") is True
        assert PrefixMatcher("/api").matches("/web") is False
        assert starts_with("/API", ignore_case=True).matches("/api/x") is True

    def test_suffix(self) -> None:
        assert SuffixMatcher(".json").matches("a.json") is True
        assert ends_with(".JSON", ignore_case=True).matches("a.json") is True
        assert SuffixMatcher(".json").matches(None) is False

    def test_contains(self) -> None:
        assert ContainsMatcher("ell").matches("hello") is True
        assert contains_string("ELL", ignore_case=True).matches("hello") is True
        assert ContainsMatcher("x").matches(["x"]) is False

    def test_descriptions(self) -> None:
        assert str(starts_with("a")) == 'a string starting with "a"'
        assert str(ends_with("z")) == 'a string ending with "z"'
        assert str(contains_string("m")) == 'a string containing "m"'


class TestRegexMatcher:
    def test_search_anywhere(self) -> None:
        assert RegexMatcher(r"\d+").matches("abc123def") is True

    def test_full_match(self) -> None:
        m = matches_pattern(r"\d+", full_match=True)
        assert m.matches("123") is True
        assert m.matches("abc123") is False

    def test_anchors(self) -> None:
        assert RegexMatcher(r"^sms/[0-9]+$").matches("sms/42") is True
        assert RegexMatcher(r"^sms/[0-9]+$").matches("xsms/42") is False

    def test_non_string(self) -> None:
        assert RegexMatcher("a").matches(None) is False

    def test_invalid_pattern(self) -> None:
        with pytest.raises(InvalidParameterError, match="invalid regex"):
            RegexMatcher("(unclosed")

    def test_backreference_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            RegexMatcher(r"(a)\1")

    def test_description(self) -> None:
        assert str(RegexMatcher("^a")) == 'a string matching "^a"'

    def test_composes(self) -> None:
        m = starts_with("mail/") | matches_pattern(r"^sms/\d+$")
        assert m.matches("mail/inbox") is True
        assert m.matches("sms/7") is True
        assert m.matches("push/1") is False
