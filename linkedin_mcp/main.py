"""LinkedIn MCP server - stdio entry point."""

import asyncio
import signal
import sys

from linkedin_mcp.config.loader import Settings, get_settings
from linkedin_mcp.mcp.handlers import MCPHandlers
from linkedin_mcp.mcp.jsonrpc import JsonRpcProcessor
from linkedin_mcp.mcp.registry import ToolRegistry
from linkedin_mcp.mcp.transport_stdio import StdioTransport, open_stdin_reader
from linkedin_mcp.tools.linkedin import LinkedInClient, register_tools
from linkedin_mcp.utils.logging import setup_logging, get_logger


def create_processor(settings: Settings, client: LinkedInClient | None = None) -> JsonRpcProcessor:
    """Assemble the tool registry, method handlers and JSON-RPC processor."""
    if client is None:
        client = LinkedInClient.from_settings(settings)

    registry = ToolRegistry()
    register_tools(registry, client)
    handlers = MCPHandlers(registry, settings)
    return JsonRpcProcessor(handlers)


async def serve(settings: Settings) -> None:
    """Serve JSON-RPC on stdin/stdout until EOF or SIGINT/SIGTERM."""
    log = get_logger("server")
    processor = create_processor(settings)
    reader = await open_stdin_reader()
    transport = StdioTransport(processor, reader, sys.stdout)

    task = asyncio.current_task()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, task.cancel)  # type: ignore[union-attr]
        except NotImplementedError:
            # Windows event loops have no signal handler support
            pass

    log.info(
        "Starting MCP server",
        server_name=settings.server_name,
        version=settings.server_version,
    )
    try:
        await transport.serve()
    except asyncio.CancelledError:
        log.info("Shutting down MCP server")


def main() -> None:
    """Run the server on stdio."""
    settings = get_settings()
    setup_logging(settings)
    log = get_logger("startup")

    if not settings.token_configured:
        if settings.require_token:
            log.error("APIFY_TOKEN environment variable is not set")
            sys.exit(1)
        log.warning("APIFY_TOKEN is not set, fetch-profile calls will fail")

    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
