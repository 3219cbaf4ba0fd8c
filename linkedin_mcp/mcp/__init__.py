"""MCP (Model Context Protocol) implementation with JSON-RPC 2.0 over stdio."""

from linkedin_mcp.mcp.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcError,
    McpMethod,
    Tool,
    TextContent,
    ToolCallResult,
)
from linkedin_mcp.mcp.registry import ToolRegistry
from linkedin_mcp.mcp.errors import (
    PARSE_ERROR,
    INTERNAL_ERROR,
    McpError,
)

__all__ = [
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "McpMethod",
    "Tool",
    "TextContent",
    "ToolCallResult",
    "ToolRegistry",
    "PARSE_ERROR",
    "INTERNAL_ERROR",
    "McpError",
]
