"""Tests for the Apify LinkedIn client and the fetch-profile tool registration."""

import json

import httpx
import pytest

from conftest import FakeLinkedInClient
from linkedin_mcp.mcp.errors import InvalidArgumentError, UnknownToolError
from linkedin_mcp.mcp.registry import ToolRegistry
from linkedin_mcp.tools.linkedin.client import (
    EmptyProfileError,
    InvalidProfileUrlError,
    LinkedInClient,
    LinkedInFetchError,
    MissingTokenError,
    UpstreamError,
)
from linkedin_mcp.tools.linkedin.tools import (
    FETCH_PROFILE_TOOL,
    fetch_profile_handler,
    get_profile_url,
    register_tools,
)


def make_client(settings, handler, token: str = "secret") -> LinkedInClient:
    return LinkedInClient(
        token=token,
        base_url="https://api.apify.test/v2/",
        transport=httpx.MockTransport(handler),
        settings=settings,
    )


class TestLinkedInClient:
    """Tests for the Apify client."""

    @pytest.mark.asyncio
    async def test_posts_normalized_url(self, settings):
        """Test the request shape sent to Apify."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text='[{"fullName": "Jane"}]')

        client = make_client(settings, handler)
        body = await client.fetch_profile_json("linkedin.com/in/janedoe/")

        assert body == '[{"fullName": "Jane"}]'
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == (
            "/v2/acts/dev_fusion~Linkedin-Profile-Scraper/run-sync-get-dataset-items"
        )
        assert request.url.params["token"] == "secret"
        assert json.loads(request.content) == {
            "profileUrls": ["https://www.linkedin.com/in/janedoe"]
        }
        assert request.headers["User-Agent"] == "linkedin-mcp/1.0.0"

    @pytest.mark.asyncio
    async def test_missing_token(self, settings):
        """Test that a missing token fails before any request is made."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        client = make_client(settings, handler, token="")
        with pytest.raises(MissingTokenError, match="APIFY_TOKEN"):
            await client.fetch_profile_json("linkedin.com/in/janedoe")

    @pytest.mark.asyncio
    async def test_invalid_url(self, settings):
        """Test that an invalid URL fails before any request is made."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        client = make_client(settings, handler)
        with pytest.raises(InvalidProfileUrlError, match="not-a-url"):
            await client.fetch_profile_json("not-a-url")

    @pytest.mark.asyncio
    async def test_upstream_error(self, settings):
        """Test that a non-success status raises with status and body."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(402, text="payment required")

        client = make_client(settings, handler)
        with pytest.raises(UpstreamError) as exc_info:
            await client.fetch_profile_json("linkedin.com/in/janedoe")

        assert exc_info.value.status_code == 402
        assert exc_info.value.data == {"status": 402, "body": "payment required"}
        assert "402" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_body(self, settings):
        """Test that an empty success body is an error."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="")

        client = make_client(settings, handler)
        with pytest.raises(EmptyProfileError):
            await client.fetch_profile_json("linkedin.com/in/janedoe")

    @pytest.mark.asyncio
    async def test_connection_error_is_wrapped(self, settings):
        """Test that transport failures surface as fetch errors."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(settings, handler)
        with pytest.raises(LinkedInFetchError, match="ConnectError"):
            await client.fetch_profile_json("linkedin.com/in/janedoe")

    def test_from_settings(self, settings):
        client = LinkedInClient.from_settings(settings)
        assert client.base_url == settings.apify_base_url
        assert client.timeout == 300.0
        assert client.endpoint == "acts/dev_fusion~Linkedin-Profile-Scraper/run-sync-get-dataset-items"


class TestFetchProfileTool:
    """Tests for the fetch-profile handler and registration."""

    def test_get_profile_url_coerces_to_string(self):
        assert get_profile_url({"profile_url": 123}) == "123"

    def test_get_profile_url_missing(self):
        with pytest.raises(InvalidArgumentError, match="Missing required argument"):
            get_profile_url({})

    @pytest.mark.asyncio
    async def test_handler_returns_text_content(self):
        client = FakeLinkedInClient(body='[{"fullName": "Jane", "skills": ["Go"]}]')
        result = await fetch_profile_handler(
            {"profile_url": "linkedin.com/in/jane", "include": []}, client=client  # type: ignore[arg-type]
        )

        assert len(result) == 1
        assert result[0].type == "text"
        assert result[0].text == "- fullName: Jane\n"

    def test_register_tools_adds_fetch_profile(self):
        registry = ToolRegistry()
        register_tools(registry, FakeLinkedInClient())  # type: ignore[arg-type]

        tool = registry.get(FETCH_PROFILE_TOOL)
        assert tool is not None
        assert registry.tool_count == 1
        assert tool.input_schema["required"] == ["profile_url"]

    @pytest.mark.asyncio
    async def test_call_unknown_tool_raises(self):
        registry = ToolRegistry()
        with pytest.raises(UnknownToolError, match="Unknown tool: nope"):
            await registry.call_tool("nope", {})
