"""ParsedUrl: the URL of a request, split into its components.

The request target is usually origin-form ("/path?query"), but absolute URLs
are accepted too. A leading "//" is part of the path, never a host, because
request targets are not protocol-relative references.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlsplit


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    """URL components.

    ``query`` holds the decoded query string; only ``pathname`` is used for
    matching.
    """

    href: str
    pathname: str = ""
    search: str = ""
    hash: str = ""
    host: str = ""
    query: dict[str, list[str]] = field(default_factory=dict)


def parse_url(raw: str | None) -> ParsedUrl:
    """Parse a request URL. None and "" both give an empty pathname.

    Never raises: a target that urlsplit rejects (such as a malformed IPv6
    host) keeps everything before the first "?" or "#" as its pathname.
    """
    if not raw:
        return ParsedUrl(href="")

    if raw.startswith("/"):
        return _parse_origin_form(raw)

    try:
        parts = urlsplit(raw)
    except ValueError:
        return ParsedUrl(href=raw, pathname=re.split(r"[?#]", raw, maxsplit=1)[0])

    return ParsedUrl(
        href=raw,
        pathname=parts.path,
        search=f"?{parts.query}" if parts.query else "",
        hash=f"#{parts.fragment}" if parts.fragment else "",
        host=parts.netloc,
        query=parse_qs(parts.query, keep_blank_values=True),
    )


def _parse_origin_form(raw: str) -> ParsedUrl:
    """Split "/path?query#fragment" by hand; "//a/b" stays a path."""
    rest, _, fragment = raw.partition("#")
    pathname, _, query = rest.partition("?")
    return ParsedUrl(
        href=raw,
        pathname=pathname,
        search=f"?{query}" if query else "",
        hash=f"#{fragment}" if fragment else "",
        query=parse_qs(query, keep_blank_values=True),
    )
