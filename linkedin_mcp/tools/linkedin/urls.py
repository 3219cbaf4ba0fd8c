"""LinkedIn profile URL normalization."""

import re

PROFILE_URL_RE = re.compile(
    r"(?:https?://)?(?:www\.)?linkedin\.com/in/([^/?]+)",
    re.IGNORECASE,
)

CANONICAL_PREFIX = "https://www.linkedin.com/in/"


def normalize_profile_url(url: str | None) -> str | None:
    """
    Normalize a LinkedIn profile URL to ``https://www.linkedin.com/in/<handle>``.

    Accepts the URL with or without scheme and ``www.``, with a trailing
    slash or a query string.

    Returns:
        The canonical URL, or None if ``url`` is not a LinkedIn profile URL.
    """
    if url is None or not url.strip():
        return None

    match = PROFILE_URL_RE.search(url.strip())
    if match is None:
        return None

    return f"{CANONICAL_PREFIX}{match.group(1)}"
