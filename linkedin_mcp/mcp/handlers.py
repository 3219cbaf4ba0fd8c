"""MCP method handlers for JSON-RPC requests."""

import logging
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from linkedin_mcp.config.loader import Settings
from linkedin_mcp.mcp.models import (
    McpMethod,
    InitializeResult,
    ServerInfo,
    Capabilities,
    ToolsListResult,
    ToolCallParams,
)
from linkedin_mcp.mcp.registry import ToolRegistry
from linkedin_mcp.mcp.errors import (
    McpError,
    UnknownMethodError,
    error_from_exception,
)

logger = logging.getLogger(__name__)

# MCP protocol version we support
PROTOCOL_VERSION = "2024-11-05"

MethodHandler = Callable[[Any], Awaitable[dict[str, Any]]]


class MCPHandlers:
    """Handlers for MCP protocol methods."""

    def __init__(self, registry: ToolRegistry, settings: Settings):
        self.registry = registry
        self.settings = settings
        self._handlers: dict[McpMethod, MethodHandler] = {
            McpMethod.INITIALIZE: self.handle_initialize,
            McpMethod.TOOLS_LIST: self.handle_tools_list,
            McpMethod.TOOLS_CALL: self.handle_tools_call,
        }
        missing = set(McpMethod) - set(self._handlers)
        if missing:
            raise RuntimeError(
                f"No handler for methods: {sorted(m.value for m in missing)}"
            )

    async def handle_initialize(self, params: Any) -> dict[str, Any]:
        """Handle the initialize request."""
        result = InitializeResult(
            protocolVersion=PROTOCOL_VERSION,
            capabilities=Capabilities(tools={}),
            serverInfo=ServerInfo(
                name=self.settings.server_name,
                version=self.settings.server_version,
            ),
        )
        return result.model_dump()

    async def handle_tools_list(self, params: Any) -> dict[str, Any]:
        """Handle the tools/list request."""
        tools = self.registry.list_tools()
        result = ToolsListResult(tools=tools)
        return result.model_dump()

    async def handle_tools_call(self, params: Any) -> dict[str, Any]:
        """Handle the tools/call request."""
        try:
            call_params = ToolCallParams.model_validate(params or {})
        except ValidationError as e:
            raise McpError(f"Invalid tools/call params: {e}") from e

        logger.info(f"Calling tool: {call_params.name}")
        result = await self.registry.call_tool(
            call_params.name, call_params.arguments or {}
        )
        return result.model_dump()

    def resolve(self, method: str) -> MethodHandler:
        """Map a method name onto its handler."""
        try:
            return self._handlers[McpMethod(method)]
        except ValueError:
            raise UnknownMethodError(f"Unknown method: {method}") from None

    async def dispatch(
        self, method: str, params: Any
    ) -> tuple[Any | None, dict[str, Any] | None]:
        """
        Dispatch a method call to the appropriate handler.

        Returns (result, error) tuple. One will be None.
        """
        try:
            handler = self.resolve(method)
            result = await handler(params)
            return result, None
        except McpError as e:
            logger.warning(f"Error handling method {method}: {e}")
            return None, error_from_exception(e)
        except Exception as e:
            logger.exception(f"Error handling method {method}")
            return None, error_from_exception(e)
