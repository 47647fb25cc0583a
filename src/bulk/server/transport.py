"""Asyncio TCP transport feeding one shared BulkEngine."""

from __future__ import annotations

import asyncio
import logging

from ..core.engine import BulkEngine
from ..core.sinks import Sink, create_console_sink, create_file_sink
from ..core.types import ServerConfig

logger = logging.getLogger("bulk")


class BulkServer:
    """Accepts any number of TCP clients and feeds their input to one engine.

    Every read completes on the event loop, so calls into the engine are
    serialized without locking. Chunks from one connection keep their order;
    chunks from different connections interleave in arrival order.

    The server owns the console and file sinks; the engine only holds weak
    references to them.
    """

    def __init__(self, config: ServerConfig, engine: BulkEngine | None = None) -> None:
        self._config = config
        self.engine = engine if engine is not None else BulkEngine(config.bulk_size)
        self.sinks: list[Sink] = [
            create_console_sink(engine=self.engine),
            create_file_sink(config.log_dir, engine=self.engine),
        ]
        self._server: asyncio.Server | None = None
        self._writers: set[asyncio.StreamWriter] = set()
        self._handlers: set[asyncio.Task[None]] = set()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        self._server = await asyncio.start_server(
            self._handle_connection,
            host=self._config.host,
            port=self._config.port,
        )
        logger.info("Listening on %s:%d", self._config.host, self.port)

    @property
    def port(self) -> int:
        if self._server is None or not self._server.sockets:
            raise RuntimeError("Server is not started")
        return self._server.sockets[0].getsockname()[1]

    async def serve_forever(self) -> None:
        if self._server is None:
            await self.start()
        assert self._server is not None
        await self._server.serve_forever()

    async def close(self) -> None:
        """Stop accepting, drop live clients, then flush the engine.

        Connection handlers are awaited first so input they already read
        reaches the engine before it is terminated.
        """
        if self._server is not None:
            self._server.close()
            for writer in list(self._writers):
                writer.close()
            if self._handlers:
                await asyncio.gather(*self._handlers, return_exceptions=True)
            await self._server.wait_closed()
            self._server = None
        self.engine.terminate()

    async def __aenter__(self) -> BulkServer:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------

    async def _handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        peer = writer.get_extra_info("peername")
        self._writers.add(writer)
        task = asyncio.current_task()
        if task is not None:
            self._handlers.add(task)
        logger.debug("Client connected: %s", peer)
        try:
            while True:
                chunk = await reader.read(self._config.read_chunk_size)
                if not chunk:
                    break
                self.engine.on_input(chunk)
        except OSError as exc:
            logger.debug("Client %s read failed: %s", peer, exc)
        finally:
            self._writers.discard(writer)
            if task is not None:
                self._handlers.discard(task)
            writer.close()
            logger.debug("Client disconnected: %s", peer)
            if self._config.terminate_on_disconnect:
                # Flush a size bulk; an unclosed block dies with its client.
                self.engine.terminate()
                self.engine.reset()
