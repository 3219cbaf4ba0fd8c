"""JSON-RPC 2.0 error codes, exceptions and error response helpers."""

import traceback
from typing import Any

# JSON-RPC 2.0 error codes used by this server
PARSE_ERROR = -32700  # Line is not a valid JSON-RPC message
INTERNAL_ERROR = -32603  # Any failure while handling a decoded request


def error_message(code: int) -> str:
    """Get the standard message for a JSON-RPC error code."""
    messages = {
        PARSE_ERROR: "Parse error",
        INTERNAL_ERROR: "Internal error",
    }
    return messages.get(code, "Unknown error")


def make_error_data(code: int, message: str | None = None, data: Any = None) -> dict[str, Any]:
    """Create an error object for JSON-RPC response."""
    error: dict[str, Any] = {
        "code": code,
        "message": message or error_message(code),
    }
    if data is not None:
        error["data"] = data
    return error


class McpError(Exception):
    """Base class for failures reported back to the client as JSON-RPC errors.

    ``data`` is the diagnostic payload embedded in the error object.
    """

    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.message = message
        self.data = data


class UnknownMethodError(McpError):
    """Raised for a JSON-RPC method this server does not implement."""


class UnknownToolError(McpError):
    """Raised when tools/call names a tool that is not registered."""


class InvalidArgumentError(McpError):
    """Raised when a tool argument is missing or unusable."""


def error_from_exception(exc: Exception) -> dict[str, Any]:
    """Convert an exception raised while dispatching into an internal error object."""
    data = getattr(exc, "data", None)
    if data is None:
        data = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return make_error_data(INTERNAL_ERROR, str(exc) or error_message(INTERNAL_ERROR), data)
