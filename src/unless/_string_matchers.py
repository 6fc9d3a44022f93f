"""Concrete string matchers used by the path, extension and method rules.

Each matcher is a frozen dataclass, immutable after construction.
All matchers return False for non-string or None input values.

String patterns are compiled with ``google-re2`` for guaranteed linear-time
matching. RE2 does not support backreferences or lookahead/lookbehind
because they require backtracking; patterns using them are rejected at
compile time. Patterns that are already compiled (``re.Pattern`` or an RE2
pattern) are used as given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import re2

if TYPE_CHECKING:
    from unless._types import MatchingData


class MatcherError(ValueError):
    """Errors from matcher construction."""


@dataclass(frozen=True, slots=True)
class ExactMatcher:
    """Exact, case-sensitive string equality."""

    value: str

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        return value == self.value


@dataclass(frozen=True, slots=True)
class SuffixMatcher:
    """String suffix match (endswith).

    An empty suffix only matches the empty string, so a blank extension
    entry never skips a request for a real path.
    """

    suffix: str

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        if not self.suffix:
            return not value
        return value.endswith(self.suffix)


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Regular expression match.

    Uses search (not fullmatch): the expression may match anywhere in the
    value unless it anchors itself.

    Raises:
        MatcherError: If a string pattern is not valid RE2 syntax.
    """

    pattern: Any
    _compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            object.__setattr__(self, "_compiled", self.pattern)
            return
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            msg = f'invalid regex pattern "{self.pattern}": {e}'
            raise MatcherError(msg) from e
        object.__setattr__(self, "_compiled", compiled)

    @property
    def source(self) -> str:
        """The pattern text, whether given as a string or compiled."""
        if isinstance(self.pattern, str):
            return self.pattern
        return self.pattern.pattern

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        return self._compiled.search(value) is not None
