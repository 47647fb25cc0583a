"""bulk-core: batching of line-oriented command streams into bulks."""

from .engine import DEFAULT_MAX_BULK, BulkEngine
from .schema import (
    BulkEndedEvent,
    BulkEvent,
    BulkStartedEvent,
    CommandAppendedEvent,
    CommandKind,
    classify_command,
)
from .sinks import (
    BufferedSink,
    ConsoleSink,
    FileSink,
    Sink,
    SinkBus,
    bulk_file_name,
    create_console_sink,
    create_file_sink,
    format_bulk,
)
from .tokenizer import split_commands
from .types import ServerConfig

__all__ = [
    # engine
    "BulkEngine",
    "DEFAULT_MAX_BULK",
    # schema
    "BulkEndedEvent",
    "BulkEvent",
    "BulkStartedEvent",
    "CommandAppendedEvent",
    "CommandKind",
    "classify_command",
    # sinks
    "BufferedSink",
    "ConsoleSink",
    "FileSink",
    "Sink",
    "SinkBus",
    "bulk_file_name",
    "create_console_sink",
    "create_file_sink",
    "format_bulk",
    # tokenizer
    "split_commands",
    # config
    "ServerConfig",
]
