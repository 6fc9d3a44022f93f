"""Core protocols and type aliases for unless.

- RequestContext is the read-only request the pipeline hands to every handler
- Next is the continuation that runs the rest of the pipeline
- Handler is the middleware unit that may be skipped
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

# Value extracted from a context. None means "not available" and never matches.
MatchingData = str | None

type Next = Callable[[], Any]
type CustomPredicate = Callable[[Any], Any]


@runtime_checkable
class RequestContext(Protocol):
    """Attribute-shaped request context.

    ``original_url`` is the URL as received, before any upstream rewrite;
    ``url`` is the current, possibly rewritten one. Mapping-shaped contexts
    with the same keys are accepted too (see unless.http._inputs).
    """

    method: str
    url: str
    original_url: str


class Handler(Protocol):
    """A middleware unit: ``handler(context, next_) -> result``."""

    def __call__(self, ctx: Any, next_: Next, /) -> Any: ...
