"""LinkedIn provider tools."""

import functools
import logging
from typing import Any

from linkedin_mcp.mcp.errors import InvalidArgumentError
from linkedin_mcp.mcp.models import TextContent
from linkedin_mcp.mcp.registry import ToolRegistry
from linkedin_mcp.tools.linkedin.client import EmptyProfileError, LinkedInClient
from linkedin_mcp.tools.linkedin.profile import (
    OPTIONAL_SECTIONS,
    decode_profile,
    filter_sections,
    parse_include,
    render_yaml,
)

logger = logging.getLogger(__name__)

FETCH_PROFILE_TOOL = "fetch-profile"

FETCH_PROFILE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "profile_url": {
            "type": "string",
            "description": "The LinkedIn profile URL (e.g., https://www.linkedin.com/in/username)",
        },
        "include": {
            "type": "array",
            "description": "Optional list of sections to include. If not specified, all sections are included.",
            "items": {
                "type": "string",
                "enum": list(OPTIONAL_SECTIONS),
            },
        },
    },
    "required": ["profile_url"],
}


def get_profile_url(arguments: dict[str, Any]) -> str:
    """Read the required profile_url argument, coerced to a string."""
    if "profile_url" not in arguments:
        raise InvalidArgumentError("Missing required argument: profile_url")

    value = arguments["profile_url"]
    profile_url = "" if value is None else str(value)
    if not profile_url:
        raise InvalidArgumentError("profile_url cannot be empty")
    return profile_url


async def fetch_profile_handler(
    arguments: dict[str, Any], client: LinkedInClient
) -> list[TextContent]:
    """Handle the fetch-profile tool call."""
    profile_url = get_profile_url(arguments)
    include = parse_include(arguments.get("include"))

    logger.info("This may take 30-60 seconds while Apify scrapes the profile")
    raw_json = await client.fetch_profile_json(profile_url)

    profile = decode_profile(raw_json)
    if profile == []:
        raise EmptyProfileError(f"No profile data returned for {profile_url}")

    if include is not None:
        profile = filter_sections(profile, include)

    logger.info("Profile fetched, converting to YAML")
    return [TextContent(text=render_yaml(profile))]


def register_tools(registry: ToolRegistry, client: LinkedInClient) -> None:
    """Register LinkedIn tools with the registry."""

    registry.register(
        name=FETCH_PROFILE_TOOL,
        description=(
            "Fetches a LinkedIn profile and returns it in YAML format. "
            "Optionally filter which optional sections to include."
        ),
        input_schema=FETCH_PROFILE_SCHEMA,
        handler=functools.partial(fetch_profile_handler, client=client),
    )
