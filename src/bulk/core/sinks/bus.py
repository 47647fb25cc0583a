"""SinkBus: the engine's registry of weakly held sinks."""

from __future__ import annotations

import logging
import weakref

from ..schema.events import BulkEndedEvent, BulkEvent, BulkStartedEvent, CommandAppendedEvent
from .types import Sink

logger = logging.getLogger("bulk")


class SinkBus:
    """Fans out bulk events to multiple sinks.

    Sinks are referenced through ``weakref.ref`` so the bus never keeps one
    alive. A reference whose sink has been collected is dropped the next time
    an event is emitted. Errors raised by individual sinks are caught and
    logged at DEBUG but do not propagate; the remaining sinks still get the
    event. Sinks report failures that matter themselves.

    Sinks must not call ``add`` from inside an event handler.
    """

    def __init__(self) -> None:
        self._refs: list[weakref.ref[Sink]] = []

    def add(self, *sinks: Sink) -> None:
        for sink in sinks:
            self._refs.append(weakref.ref(sink))

    def __len__(self) -> int:
        return sum(1 for ref in self._refs if ref() is not None)

    def emit(self, event: BulkEvent) -> None:
        i = 0
        while i < len(self._refs):
            sink = self._refs[i]()
            if sink is None:
                del self._refs[i]
                continue
            try:
                _deliver(sink, event)
            except Exception as exc:
                logger.debug("Sink %r failed on %s: %s", sink, event.kind, exc, exc_info=True)
            i += 1


def _deliver(sink: Sink, event: BulkEvent) -> None:
    if isinstance(event, CommandAppendedEvent):
        sink.on_command_appended(event.command)
    elif isinstance(event, BulkStartedEvent):
        sink.on_bulk_started()
    elif isinstance(event, BulkEndedEvent):
        sink.on_bulk_ended()
    else:
        raise TypeError(f"Unknown bulk event: {event!r}")
