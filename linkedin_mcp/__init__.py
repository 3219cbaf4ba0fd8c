"""MCP server exposing LinkedIn profile fetching over stdio."""

__version__ = "1.0.0"
