"""Command-line entry point: ``bulk_server <port> <bulk_size>``."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from ..core.types import DEFAULT_HOST, ServerConfig
from .logging_config import DEFAULT_LOG_LEVEL, setup_logging
from .transport import BulkServer

logger = logging.getLogger("bulk")

PROG = "bulk_server"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Group commands received over TCP into bulks.",
    )
    parser.add_argument("port", type=_positive_int, help="TCP port to listen on")
    parser.add_argument("bulk_size", type=_positive_int, help="commands per bulk")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to bind")
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="directory for bulk<us>.log files (default: working directory)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    parser.add_argument(
        "--terminate-on-disconnect",
        action="store_true",
        help="on each disconnect flush an open size bulk and drop an unclosed block",
    )
    return parser


def parse_config(argv: Sequence[str] | None = None) -> ServerConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return ServerConfig(
            port=args.port,
            bulk_size=args.bulk_size,
            host=args.host,
            log_dir=args.log_dir,
            log_level=args.log_level,
            terminate_on_disconnect=args.terminate_on_disconnect,
        )
    except ValidationError as exc:
        parser.error(str(exc))


async def serve(config: ServerConfig) -> None:
    server = BulkServer(config)
    await server.start()
    try:
        await server.serve_forever()
    finally:
        await server.close()


def main(argv: Sequence[str] | None = None) -> int:
    config = parse_config(argv)
    setup_logging(config.log_level)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        logger.error("Could not serve on %s:%d: %s", config.host, config.port, exc)
        return 1
    return 0
