"""Rule types: the canonical, immutable form of an unless configuration.

A RuleSet is built once when a handler is wrapped and only read afterwards.
Path entries are a closed variant, discriminated by construction:

| Variant      | Matches when                                          |
|--------------|-------------------------------------------------------|
| LiteralPath  | pathname equals the value                             |
| PathPattern  | the regular expression is found anywhere in pathname  |
| NestedRule   | nested path AND (possibly inherited) method both match |
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from unless._string_matchers import ExactMatcher, RegexMatcher

if TYPE_CHECKING:
    from unless._types import CustomPredicate


@dataclass(frozen=True, slots=True)
class LiteralPath:
    """Exact pathname."""

    value: str
    _matcher: ExactMatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_matcher", ExactMatcher(self.value))

    def matches(self, pathname: str, /) -> bool:
        return self._matcher.matches(pathname)


@dataclass(frozen=True, slots=True)
class PathPattern:
    """Regular expression searched within the pathname.

    Accepts a pattern string (compiled with RE2) or a compiled pattern.
    """

    pattern: Any
    _matcher: RegexMatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_matcher", RegexMatcher(self.pattern))

    def matches(self, pathname: str, /) -> bool:
        return self._matcher.matches(pathname)


@dataclass(frozen=True, slots=True)
class NestedRule:
    """A sub-rule scoped to its own path list and, optionally, methods."""

    rule: RuleSet


type PathRule = LiteralPath | PathPattern | NestedRule


@dataclass(frozen=True, slots=True)
class RuleSet:
    """When to skip the wrapped handler.

    Every field is optional; an unset field contributes no matches. A field
    set to an empty tuple behaves the same as an unset one.
    """

    custom: CustomPredicate | None = None
    path: tuple[PathRule, ...] | None = None
    ext: tuple[str, ...] | None = None
    method: tuple[str, ...] | None = None
    use_original_url: bool = True

    def merge(self, nested: NestedRule) -> RuleSet:
        """Return a copy of this rule set scoped to a nested path entry.

        ``path`` is always taken from the nested entry; ``method`` only when
        the nested entry sets one, otherwise the parent's is inherited.
        """
        child = nested.rule
        method = child.method if child.method is not None else self.method
        return dataclasses.replace(self, path=child.path, method=method)
