"""Sink interface and the shared bulk line format."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

BULK_PREFIX = "bulk: "
BULK_SEPARATOR = ", "


def format_bulk(commands: Iterable[str]) -> str:
    """Render a bulk as ``bulk: c1, c2, ...`` without a trailing newline."""
    return BULK_PREFIX + BULK_SEPARATOR.join(commands)


class Sink(ABC):
    """A sink receives bulk lifecycle events and writes bulks somewhere.

    ``on_bulk_started`` is an optional no-op by default. Sinks are held
    weakly by the engine: whoever creates a sink must keep a reference to it
    for as long as it should receive events.
    """

    def on_bulk_started(self) -> None:
        """Called before the first command of a bulk."""

    @abstractmethod
    def on_command_appended(self, command: str) -> None:
        """Called for every command of the current bulk, in order."""

    @abstractmethod
    def on_bulk_ended(self) -> None:
        """Called once the current bulk is complete."""


class BufferedSink(Sink):
    """Collects the commands of the current bulk and writes them as one line."""

    def __init__(self) -> None:
        self._commands: list[str] = []

    @property
    def pending(self) -> list[str]:
        return list(self._commands)

    def on_bulk_started(self) -> None:
        # Leftovers belong to a bulk the engine dropped without ending it.
        self._commands.clear()

    def on_command_appended(self, command: str) -> None:
        self._commands.append(command)

    def on_bulk_ended(self) -> None:
        line = format_bulk(self._commands)
        self._commands.clear()
        self.write_line(line)

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one rendered bulk line. ``line`` has no trailing newline."""
