"""Apify LinkedIn Profile Scraper client.

API documentation: https://apify.com/dev_fusion/Linkedin-Profile-Scraper
"""

import logging
from typing import Any

import httpx

from linkedin_mcp.config.loader import Settings
from linkedin_mcp.mcp.errors import McpError
from linkedin_mcp.tools.linkedin.urls import normalize_profile_url
from linkedin_mcp.utils.http import create_http_client

logger = logging.getLogger(__name__)


class LinkedInFetchError(McpError):
    """Raised when a profile could not be fetched."""


class MissingTokenError(LinkedInFetchError):
    """Raised when no Apify token is configured."""


class InvalidProfileUrlError(LinkedInFetchError):
    """Raised when the URL is not a LinkedIn profile URL."""


class UpstreamError(LinkedInFetchError):
    """Raised when the Apify API answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"Apify API error: {status_code} - {body}",
            data={"status": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class EmptyProfileError(LinkedInFetchError):
    """Raised when the scraper succeeds but returns no profile data."""


class LinkedInClient:
    """Client for the Apify LinkedIn profile scraper."""

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.apify.com/v2/",
        actor: str = "dev_fusion~Linkedin-Profile-Scraper",
        timeout: float = 300.0,
        transport: httpx.AsyncBaseTransport | None = None,
        settings: Settings | None = None,
    ):
        self._token = token
        self.base_url = base_url
        self.actor = actor
        self.timeout = timeout
        self._transport = transport
        self._settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "LinkedInClient":
        """Build a client from application settings."""
        return cls(
            token=settings.apify_token,
            base_url=settings.apify_base_url,
            actor=settings.apify_actor,
            timeout=float(settings.fetch_timeout),
            settings=settings,
        )

    @property
    def endpoint(self) -> str:
        return f"acts/{self.actor}/run-sync-get-dataset-items"

    async def fetch_profile_json(self, profile_url: str) -> str:
        """
        Fetch the raw JSON for a LinkedIn profile.

        Args:
            profile_url: Profile URL in any accepted form; it is normalized first.

        Returns:
            Response body as returned by Apify (a JSON array of profile records).

        Raises:
            MissingTokenError: No Apify token configured.
            InvalidProfileUrlError: ``profile_url`` is not a LinkedIn profile URL.
            UpstreamError: Apify answered with a non-success status.
            EmptyProfileError: Apify answered with an empty body.
            LinkedInFetchError: Apify could not be reached.
        """
        if not self._token.strip():
            raise MissingTokenError("APIFY_TOKEN environment variable is not set")

        normalized_url = normalize_profile_url(profile_url)
        if normalized_url is None:
            raise InvalidProfileUrlError(f"Invalid LinkedIn profile URL: {profile_url}")

        payload: dict[str, Any] = {"profileUrls": [normalized_url]}
        logger.info(f"Fetching LinkedIn profile: {normalized_url}")

        async with create_http_client(
            timeout=self.timeout,
            base_url=self.base_url,
            transport=self._transport,
            settings=self._settings,
        ) as client:
            try:
                response = await client.post(
                    self.endpoint, params={"token": self._token}, json=payload
                )
            except httpx.HTTPError as e:
                raise LinkedInFetchError(
                    f"Apify request failed: {type(e).__name__}", data=str(e)
                ) from e

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        content = response.text
        if not content.strip():
            raise EmptyProfileError(
                "Failed to fetch LinkedIn profile. Check your APIFY_TOKEN and "
                "ensure the profile URL is valid."
            )
        return content
