"""unless.http: HTTP request side.

Provides the HttpRequest context, URL parsing, and the inputs that read the
method and URL from any request-shaped context.
"""

from unless.http._inputs import MethodInput, UrlInput
from unless.http._request import HttpRequest
from unless.http._url import ParsedUrl, parse_url

__all__ = [
    # Context
    "HttpRequest",
    # URL
    "ParsedUrl",
    "parse_url",
    # Inputs
    "MethodInput",
    "UrlInput",
]
