"""Test utilities for unless.

Recording stand-ins for a handler and a pipeline continuation, so tests can
assert which of the two a wrapped handler called.

>>> from unless import wrap
>>> from unless.http import HttpRequest
>>> from unless.testing import RecordingHandler, RecordingNext
>>> handler, next_ = RecordingHandler(), RecordingNext()
>>> wrap(handler, {"method": "OPTIONS"})(HttpRequest("OPTIONS"), next_)
'next'
>>> (handler.calls, next_.calls)
(0, 1)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class RecordingNext:
    """A ``next_`` continuation that counts calls and returns ``result``."""

    result: Any = "next"
    calls: int = 0

    def __call__(self) -> Any:
        self.calls += 1
        return self.result


@dataclass(slots=True)
class RecordingHandler:
    """A handler that records each context it sees and returns ``result``.

    It does not call ``next_``; the tests only need to know it ran.
    """

    result: Any = "handler"
    contexts: list[Any] = field(default_factory=list)

    @property
    def calls(self) -> int:
        return len(self.contexts)

    def __call__(self, ctx: Any, next_: Any, /) -> Any:
        self.contexts.append(ctx)
        return self.result
