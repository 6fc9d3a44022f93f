"""Matchers: one pure predicate per rule category.

Each matcher reads the request and the rule set and returns a bool. An unset
rule category never matches. The decision function ORs them in this order:
custom, path, extension, method.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from unless._rules import NestedRule
from unless._string_matchers import ExactMatcher, SuffixMatcher
from unless.http._inputs import MethodInput

if TYPE_CHECKING:
    from collections.abc import Mapping

    from unless._rules import RuleSet
    from unless._types import RequestContext
    from unless.http._url import ParsedUrl

_METHOD = MethodInput()


def matches_custom(ctx: RequestContext | Mapping[str, Any], rules: RuleSet) -> Any:
    """Return the custom predicate's verdict, unchanged, or False if unset.

    Exceptions raised by the predicate propagate to the caller.
    """
    if rules.custom is None:
        return False
    return rules.custom(ctx)


def matches_path(ctx: RequestContext | Mapping[str, Any], url: ParsedUrl, rules: RuleSet) -> bool:
    """Match the pathname against the path entries, descending into nested rules.

    A nested rule matches only if its own path entries AND its method (its
    own, or inherited from the enclosing rule set) both match.
    """
    if not rules.path:
        return False
    for entry in rules.path:
        if isinstance(entry, NestedRule):
            scoped = rules.merge(entry)
            if matches_path(ctx, url, scoped) and matches_method(ctx, scoped):
                return True
        elif entry.matches(url.pathname):
            return True
    return False


def matches_extension(url: ParsedUrl, rules: RuleSet) -> bool:
    """True if the pathname ends with any configured extension (case-sensitive)."""
    if not rules.ext:
        return False
    return any(SuffixMatcher(ext).matches(url.pathname) for ext in rules.ext)


def matches_method(ctx: RequestContext | Mapping[str, Any], rules: RuleSet) -> bool:
    """True if the request method is one of the configured methods.

    A context without a method never matches.
    """
    if not rules.method:
        return False
    method = _METHOD.get(ctx)
    if method is None:
        return False  # None -> false
    return any(ExactMatcher(m).matches(method) for m in rules.method)
