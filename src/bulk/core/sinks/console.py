"""Console sink: prints each completed bulk to standard output."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from .types import BufferedSink, Sink

if TYPE_CHECKING:
    from ..engine import BulkEngine


class ConsoleSink(BufferedSink):
    """Writes one ``bulk: ...`` line per bulk to ``stream`` (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream

    def write_line(self, line: str) -> None:
        # Resolve sys.stdout lazily so redirection after construction is honoured.
        print(line, file=self._stream or sys.stdout, flush=True)


def create_console_sink(
    stream: TextIO | None = None,
    engine: BulkEngine | None = None,
) -> Sink:
    """Create a console sink, subscribing it to ``engine`` when given.

    The engine only holds a weak reference; keep the returned sink alive.
    """
    sink = ConsoleSink(stream=stream)
    if engine is not None:
        engine.subscribe(sink)
    return sink
