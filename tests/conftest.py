from __future__ import annotations

import itertools
from typing import Callable

import pytest

from bulk.core import BulkEngine, ConsoleSink, FileSink, Sink

# ---------------------------------------------------------------------------
# Test scaffolding
# ---------------------------------------------------------------------------


class RecordingSink(Sink):
    """Records every event it receives as a tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[str, ...]] = []

    def on_bulk_started(self) -> None:
        self.events.append(("start",))

    def on_command_appended(self, command: str) -> None:
        self.events.append(("cmd", command))

    def on_bulk_ended(self) -> None:
        self.events.append(("end",))

    @property
    def commands(self) -> list[str]:
        return [e[1] for e in self.events if e[0] == "cmd"]

    @property
    def bulks(self) -> list[list[str]]:
        """Completed bulks, in order."""
        done: list[list[str]] = []
        current: list[str] = []
        for event in self.events:
            if event[0] == "start":
                current = []
            elif event[0] == "cmd":
                current.append(event[1])
            else:
                done.append(current)
        return done


@pytest.fixture
def recorder() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def engine_with_recorder(recorder: RecordingSink) -> Callable[[int], BulkEngine]:
    def _make(max_bulk: int = 3) -> BulkEngine:
        engine = BulkEngine(max_bulk)
        engine.subscribe(recorder)
        return engine

    return _make


@pytest.fixture
def counter_clock() -> Callable[[], int]:
    """Deterministic stand-in for the monotonic microsecond clock."""
    return itertools.count(1_000_000).__next__


@pytest.fixture
def run_script(
    tmp_path, capsys, counter_clock
) -> Callable[..., tuple[list[str], dict[str, str]]]:
    """Feed ``script`` to a fresh engine wired to a console and a file sink.

    Returns the stdout lines and a ``{file name: content}`` mapping.
    """

    def _run(script: bytes | str, max_bulk: int = 3) -> tuple[list[str], dict[str, str]]:
        engine = BulkEngine(max_bulk)
        console = ConsoleSink()
        files = FileSink(directory=tmp_path, clock=counter_clock)
        engine.subscribe(console)
        engine.subscribe(files)
        engine.on_input(script)
        engine.terminate()
        out = capsys.readouterr().out
        written = {p.name: p.read_text(encoding="utf-8") for p in sorted(tmp_path.glob("bulk*.log"))}
        return out.splitlines(), written

    return _run
