"""HttpRequest: simple request context for wrapped handlers.

Holds method, the current URL, the URL as originally received, and headers
(case-insensitive). Useful in tests and for adapting frameworks whose request
objects do not carry an ``original_url``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """HTTP request context.

    ``original_url`` defaults to ``url``: a request nobody rewrote has the
    same value for both. Headers are stored with lowercased keys.
    """

    method: str = "GET"
    url: str = "/"
    original_url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    _lower_headers: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.original_url is None:
            object.__setattr__(self, "original_url", self.url)
        object.__setattr__(
            self,
            "_lower_headers",
            {k.lower(): v for k, v in self.headers.items()},
        )

    def rewrite(self, url: str) -> HttpRequest:
        """Return a copy with ``url`` replaced and ``original_url`` kept."""
        return HttpRequest(
            method=self.method,
            url=url,
            original_url=self.original_url,
            headers=self.headers,
        )

    def header(self, name: str) -> str | None:
        """Get a header value by name (case-insensitive)."""
        return self._lower_headers.get(name.lower())
