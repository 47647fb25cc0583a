from .bus import SinkBus
from .console import ConsoleSink, create_console_sink
from .file import FileSink, bulk_file_name, create_file_sink, monotonic_us
from .types import BufferedSink, Sink, format_bulk

__all__ = [
    "BufferedSink",
    "ConsoleSink",
    "FileSink",
    "Sink",
    "SinkBus",
    "bulk_file_name",
    "create_console_sink",
    "create_file_sink",
    "format_bulk",
    "monotonic_us",
]
