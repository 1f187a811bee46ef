"""Pytest configuration and fixtures for opensearch-security-client tests."""

import pytest
import httpx
from typing import Any, Dict, List, Optional

from opensearch_security_client.http import Transport


# ============================================================================
# Mock Transport
# ============================================================================


class RecordingTransport(Transport):
    """Transport that records requests and replies with a canned response."""

    def __init__(
        self,
        status_code: int = 200,
        json_data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.json_data = json_data if json_data is not None else {}
        self.headers = headers or {}
        self.error = error
        self.requests: List[httpx.Request] = []
        self.closed = False

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    async def perform(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            json=self.json_data,
            headers=self.headers,
            request=request,
        )

    async def close(self) -> None:
        self.closed = True


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def transport():
    """Transport answering 200 with an empty JSON object."""
    return RecordingTransport()


@pytest.fixture
def role_mapping_data():
    """Role mapping body as the cluster accepts it."""
    return {
        "backend_roles": ["starfleet", "captains"],
        "hosts": ["*.starfleetintranet.com"],
        "users": ["worf"],
    }


@pytest.fixture
def get_role_mapping_response():
    """Cluster answer for GET on a single role mapping."""
    return {
        "human_resources": {
            "hosts": [],
            "users": ["ashley"],
            "reserved": False,
            "hidden": False,
            "backend_roles": ["hr"],
            "and_backend_roles": [],
        }
    }


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return "https://localhost:9200"
