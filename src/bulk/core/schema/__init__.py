"""
Event and command schema types shared by the engine and its sinks.
"""

from .commands import BLOCK_CLOSE_MARK, BLOCK_OPEN_MARK, CommandKind, classify_command
from .events import (
    BULK_ENDED,
    BULK_STARTED,
    BulkEndedEvent,
    BulkEvent,
    BulkStartedEvent,
    CommandAppendedEvent,
)

__all__ = [
    # commands
    "BLOCK_CLOSE_MARK",
    "BLOCK_OPEN_MARK",
    "CommandKind",
    "classify_command",
    # events
    "BULK_ENDED",
    "BULK_STARTED",
    "BulkEndedEvent",
    "BulkEvent",
    "BulkStartedEvent",
    "CommandAppendedEvent",
]
