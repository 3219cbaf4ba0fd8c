"""LinkedIn profile provider backed by the Apify scraper."""

from linkedin_mcp.tools.linkedin.client import LinkedInClient
from linkedin_mcp.tools.linkedin.tools import register_tools

__all__ = ["LinkedInClient", "register_tools"]
