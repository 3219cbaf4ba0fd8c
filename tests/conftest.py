"""Pytest configuration and fixtures."""

import json
from typing import Any

import pytest

from linkedin_mcp.config.loader import Settings, get_settings
from linkedin_mcp.main import create_processor
from linkedin_mcp.mcp.jsonrpc import JsonRpcProcessor

SAMPLE_PROFILE: list[dict[str, Any]] = [
    {
        "fullName": "Jane Doe",
        "headline": "Engineer",
        "linkedinUrl": "https://www.linkedin.com/in/janedoe",
        "skills": [{"title": "Python"}, {"title": "Go"}],
        "educations": [{"title": "MIT", "subComponents": []}],
        "experiences": [
            {
                "title": "Staff Engineer",
                "companyName": "Acme",
                "skills": ["Python"],
                "description": [{"text": "Built things"}],
            }
        ],
        "languages": [{"name": "English"}],
    }
]


class FakeLinkedInClient:
    """Stands in for LinkedInClient and records the URLs it was asked for."""

    def __init__(self, body: str | None = None, error: Exception | None = None):
        self.body = json.dumps(SAMPLE_PROFILE) if body is None else body
        self.error = error
        self.calls: list[str] = []

    async def fetch_profile_json(self, profile_url: str) -> str:
        self.calls.append(profile_url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure cached settings never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with a token and no .env lookup."""
    return Settings(apify_token="test-token", _env_file=None)


@pytest.fixture
def fake_client() -> FakeLinkedInClient:
    return FakeLinkedInClient()


@pytest.fixture
def processor(settings: Settings, fake_client: FakeLinkedInClient) -> JsonRpcProcessor:
    """JSON-RPC processor wired to the fake LinkedIn client."""
    return create_processor(settings, client=fake_client)  # type: ignore[arg-type]


@pytest.fixture
def sample_jsonrpc_request():
    """Sample JSON-RPC request factory."""
    def _make_request(method: str, params: dict | None = None, id: int | str | None = 1):
        request: dict[str, Any] = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or {},
        }
        if id is not None:
            request["id"] = id
        return request
    return _make_request


@pytest.fixture
def call_tool_request(sample_jsonrpc_request):
    """Factory for fetch-profile tools/call requests."""
    def _make_request(arguments: dict, id: int | str = 1, name: str = "fetch-profile"):
        return sample_jsonrpc_request(
            "tools/call", {"name": name, "arguments": arguments}, id=id
        )
    return _make_request
