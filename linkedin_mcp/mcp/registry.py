"""Tool registry for managing MCP tools."""

import logging
from typing import Any, Callable, Awaitable

from linkedin_mcp.mcp.errors import UnknownToolError
from linkedin_mcp.mcp.models import Tool, TextContent, ToolCallResult

logger = logging.getLogger(__name__)

# Type alias for tool handlers
ToolHandler = Callable[[dict[str, Any]], Awaitable[list[TextContent]]]


class ToolDefinition:
    """A registered tool with its metadata and handler."""

    def __init__(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        handler: ToolHandler,
    ):
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.handler = handler
        self._descriptor = Tool(
            name=name,
            description=description,
            inputSchema=input_schema,
        )

    def to_mcp_tool(self) -> Tool:
        """Return the MCP Tool model for protocol responses."""
        return self._descriptor


class ToolRegistry:
    """Registry for MCP tools."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        handler: ToolHandler,
    ) -> None:
        """Register a tool with the registry."""
        if name in self._tools:
            logger.warning(f"Tool '{name}' already registered, overwriting")
        self._tools[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            handler=handler,
        )
        logger.info(f"Registered tool: {name}")

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[Tool]:
        """List all registered tools as MCP Tool models."""
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """
        Call a tool by name with the given arguments.

        Raises:
            UnknownToolError: If no tool is registered under ``name``.

        Errors raised by the handler propagate so the dispatcher can
        report them as JSON-RPC errors.
        """
        tool = self.get(name)
        if tool is None:
            raise UnknownToolError(f"Unknown tool: {name}")

        content = await tool.handler(arguments)
        return ToolCallResult(content=content, isError=False)

    @property
    def tool_count(self) -> int:
        """Return the number of registered tools."""
        return len(self._tools)
