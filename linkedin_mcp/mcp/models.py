"""Pydantic models for MCP JSON-RPC 2.0 protocol."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, StrictInt, StrictStr

# Booleans are not valid ids, so the strict types keep pydantic from coercing them.
# NaN and Infinity are not JSON, so they cannot be echoed back either.
RequestId = StrictInt | Annotated[float, Field(strict=True, allow_inf_nan=False)] | StrictStr


# =============================================================================
# JSON-RPC 2.0 Base Models
# =============================================================================


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request object."""

    jsonrpc: Literal["2.0"]
    id: RequestId | None = None  # None for notifications
    method: StrictStr
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return self.id is None


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Omit data when there is no diagnostic to report."""
        data: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            data["data"] = self.data
        return data


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response object."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId | None = None
    result: Any = None
    error: JsonRpcError | None = None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Custom serialization so exactly one of result/error is present."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump()
        else:
            data["result"] = self.result
        return data


# =============================================================================
# MCP Methods
# =============================================================================


class McpMethod(str, Enum):
    """JSON-RPC methods served by this process."""

    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


# =============================================================================
# MCP Content Types
# =============================================================================


class TextContent(BaseModel):
    """Text content returned by tools."""

    type: Literal["text"] = "text"
    text: str


# =============================================================================
# MCP Tool Models
# =============================================================================


class Tool(BaseModel):
    """MCP tool definition."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Tool name (lowercase with hyphens)")
    description: str = Field(..., description="Human-readable description")
    inputSchema: dict[str, Any] = Field(
        ..., description="JSON Schema for tool input"
    )


class ToolCallResult(BaseModel):
    """Result of a tool call."""

    content: list[TextContent]
    isError: bool = False


# =============================================================================
# MCP Protocol Models
# =============================================================================


class ServerInfo(BaseModel):
    """Server information returned during initialization."""

    name: str
    version: str


class Capabilities(BaseModel):
    """Server capabilities."""

    tools: dict[str, Any] = Field(default_factory=dict)


class InitializeResult(BaseModel):
    """Result of initialize request."""

    protocolVersion: str
    capabilities: Capabilities
    serverInfo: ServerInfo


class ToolsListResult(BaseModel):
    """Result of tools/list request."""

    tools: list[Tool]


class ToolCallParams(BaseModel):
    """Parameters for tools/call request."""

    name: str
    arguments: dict[str, Any] | None = None
