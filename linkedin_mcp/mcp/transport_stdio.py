"""Stdio transport for MCP: newline-delimited JSON-RPC over stdin/stdout."""

import asyncio
import logging
import sys
from typing import TextIO

from linkedin_mcp.mcp.errors import PARSE_ERROR, make_error_data
from linkedin_mcp.mcp.jsonrpc import JsonRpcProcessor
from linkedin_mcp.mcp.models import JsonRpcError, JsonRpcResponse

logger = logging.getLogger(__name__)

# Profiles can be large; keep single lines well below this
STREAM_LIMIT = 16 * 1024 * 1024


async def open_stdin_reader(limit: int = STREAM_LIMIT) -> asyncio.StreamReader:
    """Wrap the process stdin in an asyncio StreamReader."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=limit)
    protocol = asyncio.StreamReaderProtocol(reader)
    try:
        await loop.connect_read_pipe(lambda: protocol, sys.stdin)
    except ValueError:
        # stdin redirected from a regular file cannot be registered with the loop
        logger.debug("stdin is not a pipe, reading it eagerly")
        reader.feed_data(sys.stdin.buffer.read())
        reader.feed_eof()
    return reader


class StdioTransport:
    """Reads one JSON-RPC message per line and writes one response per request.

    Lines are handled strictly in order: the next line is not read until the
    response for the current one has been written and flushed.
    """

    def __init__(
        self,
        processor: JsonRpcProcessor,
        reader: asyncio.StreamReader,
        writer: TextIO,
    ):
        self.processor = processor
        self.reader = reader
        self.writer = writer

    def _write(self, response: JsonRpcResponse) -> None:
        self.writer.write(self.processor.serialize_response(response) + "\n")
        self.writer.flush()

    async def handle_line(self, line: bytes) -> None:
        """Process one raw line and emit its response, if any."""
        if not line.strip():
            return

        response = await self.processor.handle_message(line)
        if response is not None:
            self._write(response)

    async def _discard_oversized_line(self, consumed: int) -> None:
        """Drop an over-limit line up to and including its newline."""
        await self.reader.readexactly(consumed)
        while True:
            try:
                await self.reader.readuntil(b"\n")
                return
            except asyncio.LimitOverrunError as e:
                await self.reader.readexactly(e.consumed)
            except asyncio.IncompleteReadError:
                return

    async def serve(self) -> None:
        """Run until end of input or until the task is cancelled."""
        logger.info("Listening for JSON-RPC messages on stdin")
        try:
            while True:
                try:
                    line = await self.reader.readuntil(b"\n")
                except asyncio.IncompleteReadError as e:
                    # Last line without a trailing newline, or b"" at end of input
                    line = e.partial
                except asyncio.LimitOverrunError as e:
                    await self._discard_oversized_line(e.consumed)
                    logger.error("Discarded input line longer than the reader limit")
                    self._write(
                        JsonRpcResponse(
                            id=None,
                            error=JsonRpcError(
                                **make_error_data(PARSE_ERROR, data="Line exceeds maximum length")
                            ),
                        )
                    )
                    continue
                if not line:
                    logger.info("End of input, stopping")
                    break
                try:
                    await self.handle_line(line)
                except Exception:
                    logger.exception("Unhandled error while processing input line")
        except asyncio.CancelledError:
            logger.info("Transport cancelled, stopping")
            raise
