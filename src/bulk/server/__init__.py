"""bulk-server: TCP front end for the bulk engine."""

from .cli import main, parse_config, serve
from .logging_config import setup_logging
from .transport import BulkServer

__all__ = [
    "BulkServer",
    "main",
    "parse_config",
    "serve",
    "setup_logging",
]
