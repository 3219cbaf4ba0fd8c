"""Utility modules: logging and HTTP client."""

from linkedin_mcp.utils.logging import setup_logging, get_logger
from linkedin_mcp.utils.http import create_http_client

__all__ = [
    "setup_logging",
    "get_logger",
    "create_http_client",
]
