"""
Transports for the OpenSearch security client.

Endpoints build a relative ``httpx.Request`` and hand it to a transport. The
transport owns everything below that line: base URL, credentials, TLS,
connection pooling and timeouts. This module provides:
- The abstract Transport every endpoint depends on
- HTTPXTransport, an httpx-backed implementation
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


class Transport(ABC):
    """Abstract base class for request transports."""

    @abstractmethod
    async def perform(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and return the response with its body read.

        Errors are raised as-is; endpoints do not catch them.
        """
        ...


class HTTPXTransport(Transport):
    """
    Transport backed by an ``httpx.AsyncClient``.

    This transport handles:
    - Base URL resolution for the relative requests built by endpoints
    - Default headers (never overriding headers set on the request)
    - Credentials and TLS verification, passed through to httpx
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        auth: Optional[Any] = None,
        verify: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: Cluster URL (e.g., "https://localhost:9200")
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            auth: httpx auth, e.g. a ("user", "password") tuple
            verify: Whether to verify TLS certificates
            transport: Custom httpx transport (e.g. httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._default_headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._auth = auth
        self._verify = verify
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                auth=self._auth,
                verify=self._verify,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HTTPXTransport":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, request: httpx.Request) -> httpx.Headers:
        """Fill in transport defaults the request does not already carry."""
        headers = httpx.Headers(request.headers)
        for key, value in self._default_headers.items():
            if key not in headers:
                headers[key] = value
        if request.content and "Content-Type" not in headers:
            headers["Content-Type"] = "application/json"
        return headers

    async def perform(self, request: httpx.Request) -> httpx.Response:
        client = await self._get_client()

        outgoing = client.build_request(
            request.method,
            request.url,
            headers=self._build_headers(request),
            content=request.content or None,
        )

        logger.debug(f"{outgoing.method} {outgoing.url}")
        response = await client.send(outgoing)
        logger.debug(f"{outgoing.method} {outgoing.url} -> {response.status_code}")
        return response
