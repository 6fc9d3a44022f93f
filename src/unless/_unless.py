"""Wrap a handler so it is skipped for matching requests.

    wrapped = wrap(handler, {"path": ["/health", re.compile(r"^/static/")]})

    @unless({"method": "OPTIONS", "ext": [".css", ".js"]})
    def auth(ctx, next_): ...

Per request the URL (original by default) is parsed, then the custom, path,
extension and method matchers are consulted in that order. The first match
skips the handler and calls ``next_()`` instead. Results are passed through
untouched, so coroutine handlers and continuations work unchanged.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from unless._config import normalize_options
from unless._matchers import matches_custom, matches_extension, matches_method, matches_path
from unless.http._inputs import UrlInput
from unless.http._url import parse_url

if TYPE_CHECKING:
    from unless._config import Options
    from unless._rules import RuleSet
    from unless._types import Handler, Next, RequestContext

logger = logging.getLogger(__name__)

_ORIGINAL_URL = UrlInput(original=True)
_CURRENT_URL = UrlInput(original=False)


def should_skip(ctx: RequestContext | Mapping[str, Any], rules: RuleSet) -> bool:
    """Decide whether the wrapped handler should be bypassed for this request.

    Reads ``ctx`` only; a missing URL is treated as "".
    """
    url_input = _ORIGINAL_URL if rules.use_original_url else _CURRENT_URL
    url = parse_url(url_input.get(ctx) or "")

    # Short-circuits: later matchers run only if earlier ones did not match.
    return bool(
        matches_custom(ctx, rules)
        or matches_path(ctx, url, rules)
        or matches_extension(url, rules)
        or matches_method(ctx, rules)
    )


def wrap(handler: Handler, options: Options) -> Handler:
    """Return ``handler`` wrapped so matching requests skip straight to ``next_``.

    ``options`` is a predicate over the request context, a RuleSet, or a
    mapping (see unless._config). It is normalized once, here.

    Raises:
        ConfigParseError: If options cannot be normalized.
    """
    rules = normalize_options(options)
    name = getattr(handler, "__qualname__", type(handler).__name__)

    @functools.wraps(handler)
    def wrapped(ctx: Any, next_: Next) -> Any:
        if should_skip(ctx, rules):
            logger.debug("skipping %s", name)
            return next_()
        return handler(ctx, next_)

    wrapped.rules = rules  # type: ignore[attr-defined]
    return wrapped


def unless(options: Options) -> Callable[[Handler], Handler]:
    """Decorator form of wrap()."""

    def decorator(handler: Handler) -> Handler:
        return wrap(handler, options)

    return decorator
