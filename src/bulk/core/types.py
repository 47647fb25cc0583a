"""Configuration types for the bulk server."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_READ_CHUNK_SIZE",
    "LogLevel",
    "ServerConfig",
]

DEFAULT_HOST = "0.0.0.0"
DEFAULT_READ_CHUNK_SIZE = 1024

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ---------------------------------------------------------------------------
# ServerConfig
# ---------------------------------------------------------------------------


class ServerConfig(BaseModel):
    """Everything needed to start a bulk server.

    ``port=0`` binds an ephemeral port; the CLI only accepts positive ports.
    """

    model_config = ConfigDict(frozen=True)

    port: int = Field(ge=0, le=65535)
    bulk_size: int = Field(default=3, ge=1)
    host: str = DEFAULT_HOST
    read_chunk_size: int = Field(default=DEFAULT_READ_CHUNK_SIZE, ge=1)
    log_dir: Path | None = None
    # Call engine.terminate() each time a client disconnects.
    terminate_on_disconnect: bool = False
    log_level: LogLevel = "WARNING"
