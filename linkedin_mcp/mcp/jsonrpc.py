"""JSON-RPC 2.0 message processing."""

import json
import logging
import math
from typing import Any

from pydantic import ValidationError

from linkedin_mcp.mcp.models import JsonRpcRequest, JsonRpcResponse, JsonRpcError
from linkedin_mcp.mcp.handlers import MCPHandlers
from linkedin_mcp.mcp.errors import PARSE_ERROR, make_error_data
from linkedin_mcp.utils.logging import set_request_id

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def recover_request_id(raw_data: str) -> str | int | float | None:
    """Best-effort extraction of the id from a line that failed to decode."""
    try:
        data = json.loads(raw_data, parse_constant=_reject_constant)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    request_id = data.get("id")
    # bool is a subclass of int but never a valid id
    if isinstance(request_id, bool):
        return None
    if isinstance(request_id, float) and not math.isfinite(request_id):
        # Overflowing literals such as 1e400 decode to inf
        return None
    if isinstance(request_id, (str, int, float)):
        return request_id
    return None


class JsonRpcProcessor:
    """Process JSON-RPC 2.0 messages."""

    def __init__(self, handlers: MCPHandlers):
        self.handlers = handlers

    def parse_request(self, raw_data: str | bytes) -> tuple[JsonRpcRequest | None, dict | None]:
        """
        Parse a JSON-RPC request from raw data.

        Returns (request, error) tuple. One will be None.
        """
        if isinstance(raw_data, bytes):
            try:
                raw_data = raw_data.decode("utf-8")
            except UnicodeDecodeError as e:
                return None, make_error_data(PARSE_ERROR, data=f"Invalid UTF-8: {e}")

        try:
            request = JsonRpcRequest.model_validate_json(raw_data)
            return request, None
        except ValidationError as e:
            return None, make_error_data(PARSE_ERROR, data=str(e))

    async def process_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Dispatch a decoded request and wrap the outcome in a response."""
        set_request_id(request.id)
        try:
            result, error = await self.handlers.dispatch(request.method, request.params)
        finally:
            set_request_id(None)

        if error is not None:
            return JsonRpcResponse(
                id=request.id,
                error=JsonRpcError(**error),
            )
        return JsonRpcResponse(
            id=request.id,
            result=result,
        )

    async def handle_message(self, raw_data: str | bytes) -> JsonRpcResponse | None:
        """
        Handle a raw JSON-RPC message end-to-end.

        Returns a response or None for notifications.
        """
        request, parse_error = self.parse_request(raw_data)

        if parse_error is not None:
            text = raw_data.decode("utf-8", errors="replace") if isinstance(raw_data, bytes) else raw_data
            logger.error(f"Failed to parse request: {parse_error.get('data')}")
            return JsonRpcResponse(
                id=recover_request_id(text),
                error=JsonRpcError(**parse_error),
            )

        if request.is_notification:  # type: ignore[union-attr]
            logger.debug(f"Received notification: {request.method}")
            return None

        return await self.process_request(request)  # type: ignore[arg-type]

    def serialize_response(self, response: JsonRpcResponse) -> str:
        """Serialize a JSON-RPC response to a compact single-line JSON string."""
        return json.dumps(response.model_dump(), separators=(",", ":"), allow_nan=False)
