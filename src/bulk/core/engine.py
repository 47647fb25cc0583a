"""BulkEngine: groups a stream of commands into bulks."""

from __future__ import annotations

import logging

from .schema.commands import CommandKind, classify_command
from .schema.events import BULK_ENDED, BULK_STARTED, BulkEvent, CommandAppendedEvent
from .sinks.bus import SinkBus
from .sinks.types import Sink
from .tokenizer import split_commands

logger = logging.getLogger("bulk")

DEFAULT_MAX_BULK = 3


class BulkEngine:
    """Batching state machine shared by every input source.

    Outside brackets (size mode) a bulk closes as soon as it holds
    ``max_bulk`` commands. A ``{`` command switches to bracket mode, where
    the bulk only closes at the matching outermost ``}``; nested brackets are
    merged into it. Bracket tokens are never part of a bulk and a bulk
    without commands is never emitted.

    The engine is synchronous and not thread-safe: every call must come from
    the same thread (in the server, the event loop).
    """

    def __init__(self, max_bulk: int = DEFAULT_MAX_BULK) -> None:
        if max_bulk < 1:
            raise ValueError(f"max_bulk must be >= 1, got {max_bulk}")
        self._max_bulk = max_bulk
        self._bulk_size = 0
        self._bulk_depth = 0
        self._bus = SinkBus()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def max_bulk(self) -> int:
        return self._max_bulk

    @property
    def bulk_size(self) -> int:
        """Commands appended to the bulk currently open, 0 if none is."""
        return self._bulk_size

    @property
    def bulk_depth(self) -> int:
        return self._bulk_depth

    @property
    def is_open(self) -> bool:
        """True while sinks hold a started, not yet ended bulk."""
        return self._bulk_size > 0

    def __repr__(self) -> str:
        return (
            f"BulkEngine(max_bulk={self._max_bulk}, bulk_size={self._bulk_size}, "
            f"bulk_depth={self._bulk_depth})"
        )

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------

    def subscribe(self, sink: Sink) -> None:
        """Register ``sink`` without taking ownership of it."""
        self._bus.add(sink)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def on_input(self, chunk: bytes | bytearray | str) -> None:
        """Tokenize one transport chunk and process its commands in order."""
        for command in split_commands(chunk):
            self.process_command(command)

    def process_command(self, command: str) -> None:
        if not command:
            return
        kind = classify_command(command)
        if kind is CommandKind.BLOCK_OPEN:
            self._open_block()
        elif kind is CommandKind.BLOCK_CLOSE:
            self._close_block()
        else:
            self._append(command)

    def terminate(self) -> None:
        """Signal the end of input.

        An open size-bulk is flushed. An unclosed bracket bulk is dropped:
        nothing is emitted for it. Calling this again has no further effect.
        """
        if self._bulk_depth == 0 and self._bulk_size > 0:
            self._end_bulk()
        elif self._bulk_depth > 0:
            logger.debug("Discarding unterminated block at depth %d", self._bulk_depth)

    def reset(self) -> None:
        """Forget any open bulk without emitting events.

        Sinks still hold the commands of a dropped bulk until the next
        ``on_bulk_started``, which must clear them.
        """
        if self._bulk_depth or self._bulk_size:
            logger.debug(
                "Resetting engine: dropping %d command(s) at depth %d",
                self._bulk_size,
                self._bulk_depth,
            )
        self._bulk_size = 0
        self._bulk_depth = 0

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _open_block(self) -> None:
        if self._bulk_depth == 0 and self._bulk_size > 0:
            self._end_bulk()
        self._bulk_depth += 1

    def _close_block(self) -> None:
        if self._bulk_depth == 0:
            return  # nothing to close
        self._bulk_depth -= 1
        if self._bulk_depth == 0 and self._bulk_size > 0:
            self._end_bulk()

    def _append(self, command: str) -> None:
        if self._bulk_size == 0:
            self._emit(BULK_STARTED)
        self._bulk_size += 1
        self._emit(CommandAppendedEvent(command=command))
        if self._bulk_depth == 0 and self._bulk_size >= self._max_bulk:
            self._end_bulk()

    def _end_bulk(self) -> None:
        logger.debug("Bulk of %d command(s) complete", self._bulk_size)
        self._bulk_size = 0
        self._emit(BULK_ENDED)

    def _emit(self, event: BulkEvent) -> None:
        self._bus.emit(event)
