"""Tests for concrete string matchers."""

import re

import pytest

from unless import ExactMatcher, MatcherError, RegexMatcher, SuffixMatcher


class TestExactMatcher:
    def test_exact_match(self) -> None:
        m = ExactMatcher("/health")
        assert m.matches("/health") is True

    def test_case_sensitive(self) -> None:
        m = ExactMatcher("GET")
        assert m.matches("get") is False

    def test_none_returns_false(self) -> None:
        m = ExactMatcher("/health")
        assert m.matches(None) is False

    def test_partial_no_match(self) -> None:
        m = ExactMatcher("/health")
        assert m.matches("/health/x") is False


class TestSuffixMatcher:
    def test_suffix_match(self) -> None:
        m = SuffixMatcher(".js")
        assert m.matches("/app.js") is True

    def test_longer_extension_no_match(self) -> None:
        m = SuffixMatcher(".js")
        assert m.matches("/app.jsx") is False

    def test_case_sensitive(self) -> None:
        m = SuffixMatcher(".css")
        assert m.matches("/APP.CSS") is False

    def test_empty_suffix_only_matches_empty(self) -> None:
        m = SuffixMatcher("")
        assert m.matches("") is True
        assert m.matches("/app.js") is False

    def test_none_returns_false(self) -> None:
        m = SuffixMatcher(".js")
        assert m.matches(None) is False


class TestRegexMatcher:
    def test_search_not_fullmatch(self) -> None:
        m = RegexMatcher("/api/")
        assert m.matches("/public/api/") is True

    def test_anchored(self) -> None:
        m = RegexMatcher(r"^/api/")
        assert m.matches("/api/users") is True
        assert m.matches("/public/api/") is False

    def test_precompiled_pattern(self) -> None:
        m = RegexMatcher(re.compile(r"\.PNG$", re.IGNORECASE))
        assert m.matches("/logo.png") is True
        assert m.source == r"\.PNG$"

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(MatcherError, match="invalid regex pattern"):
            RegexMatcher("(unclosed")

    def test_backreference_rejected(self) -> None:
        with pytest.raises(MatcherError):
            RegexMatcher(r"(a)\1")

    def test_none_returns_false(self) -> None:
        m = RegexMatcher(".*")
        assert m.matches(None) is False
