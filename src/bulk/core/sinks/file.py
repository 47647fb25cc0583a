"""File sink: writes each completed bulk to its own ``bulk<us>.log`` file."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from .types import BufferedSink, Sink

if TYPE_CHECKING:
    from ..engine import BulkEngine

logger = logging.getLogger("bulk")

FILE_PREFIX = "bulk"
FILE_SUFFIX = ".log"


def monotonic_us() -> int:
    """Microseconds on the monotonic clock."""
    return time.monotonic_ns() // 1000


def bulk_file_name(timestamp_us: int) -> str:
    return f"{FILE_PREFIX}{timestamp_us}{FILE_SUFFIX}"


class FileSink(BufferedSink):
    """Writes every bulk to a file named after the moment the bulk started.

    The name is fixed at ``on_bulk_started`` from the monotonic clock; the
    file is created (or truncated) at ``on_bulk_ended``. Two bulks started in
    the same microsecond share a name and the later one wins.

    ``directory`` defaults to the process working directory, resolved at
    write time.
    """

    def __init__(
        self,
        directory: str | Path | None = None,
        clock: Callable[[], int] = monotonic_us,
    ) -> None:
        super().__init__()
        self._directory = Path(directory) if directory is not None else None
        self._clock = clock
        self._file_name: str | None = None
        self.last_path: Path | None = None

    @property
    def file_name(self) -> str | None:
        return self._file_name

    def on_bulk_started(self) -> None:
        super().on_bulk_started()
        self._file_name = bulk_file_name(self._clock())

    def write_line(self, line: str) -> None:
        if self._file_name is None:
            # A bulk ended without a start; name it now rather than lose it.
            self._file_name = bulk_file_name(self._clock())
        path = (self._directory or Path.cwd()) / self._file_name
        self._file_name = None
        try:
            with open(path, "w", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as exc:
            logger.error("FileSink: could not write %s: %s", path, exc)
            return
        self.last_path = path
        logger.debug("FileSink: wrote %s", path)


def create_file_sink(
    directory: str | Path | None = None,
    engine: BulkEngine | None = None,
    *,
    clock: Callable[[], int] = monotonic_us,
) -> Sink:
    """Create a file sink, subscribing it to ``engine`` when given.

    The engine only holds a weak reference; keep the returned sink alive.
    """
    sink = FileSink(directory=directory, clock=clock)
    if engine is not None:
        engine.subscribe(sink)
    return sink
