"""Profile tree decoding, optional-section filtering and YAML rendering."""

import json
from typing import Any

import yaml

from linkedin_mcp.mcp.errors import McpError

# Top-level profile sections the caller may select through the `include` argument.
# Shared by the tool input schema and the filter.
OPTIONAL_SECTIONS: tuple[str, ...] = (
    "experiences",
    "updates",
    "profilePicAllDimensions",
    "skills",
    "educations",
    "licenseAndCertificates",
    "honorsAndAwards",
    "languages",
    "volunteerAndAwards",
    "verifications",
    "promos",
    "highlights",
    "projects",
    "publications",
    "patents",
    "courses",
    "testScores",
    "organizations",
    "volunteerCauses",
    "interests",
    "recommendations",
)

_OPTIONAL_SECTION_KEYS = frozenset(name.lower() for name in OPTIONAL_SECTIONS)


def parse_include(value: Any) -> frozenset[str] | None:
    """
    Build the case-insensitive include set from the `include` argument.

    Returns None when no filtering should happen (argument absent or not a
    list). Non-string and empty elements are ignored.
    """
    if not isinstance(value, list):
        return None
    return frozenset(item.lower() for item in value if isinstance(item, str) and item)


def decode_profile(raw_json: str) -> Any:
    """Decode fetched JSON text into a plain tree of dicts, lists and scalars."""
    try:
        return json.loads(raw_json)
    except ValueError as e:
        raise McpError(f"Invalid profile JSON returned by Apify: {e}", data=raw_json) from e


def filter_sections(node: Any, include: frozenset[str]) -> Any:
    """
    Return a copy of ``node`` without the optional sections not in ``include``.

    Applies at every mapping in the tree, not only the root. Keys outside
    OPTIONAL_SECTIONS are always kept.
    """
    if isinstance(node, list):
        return [filter_sections(item, include) for item in node]
    if isinstance(node, dict):
        return {
            key: filter_sections(value, include)
            for key, value in node.items()
            if key.lower() not in _OPTIONAL_SECTION_KEYS or key.lower() in include
        }
    return node


def render_yaml(tree: Any) -> str:
    """Render a profile tree as block-style YAML, keeping key order."""
    return yaml.safe_dump(
        tree,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
