"""Extraction of request fields from an opaque context.

Each input reads one field and returns it as MatchingData. Attribute access
is tried first, then mapping access, so both framework request objects and
plain dicts work. A missing field comes back as None.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from unless._types import MatchingData

_MISSING = object()


def _field(ctx: Any, *names: str) -> Any:
    for name in names:
        value = getattr(ctx, name, _MISSING)
        if value is _MISSING and isinstance(ctx, Mapping):
            value = ctx.get(name, _MISSING)
        if value is not _MISSING:
            return value
    return None


@dataclass(frozen=True, slots=True)
class MethodInput:
    """Extracts the HTTP method (case-sensitive)."""

    def get(self, ctx: Any, /) -> MatchingData:
        method = _field(ctx, "method")
        return method if isinstance(method, str) else None


@dataclass(frozen=True, slots=True)
class UrlInput:
    """Extracts the request URL.

    With ``original`` set, reads the URL as first received (``original_url``,
    or Koa-style ``originalUrl``), otherwise the current ``url``. URL objects
    are converted with ``str()``.
    """

    original: bool = True

    def get(self, ctx: Any, /) -> MatchingData:
        if self.original:
            url = _field(ctx, "original_url", "originalUrl")
        else:
            url = _field(ctx, "url")
        return None if url is None else str(url)
