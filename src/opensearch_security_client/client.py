"""
Main OpenSearch security client.

This module provides the SecurityClient class, the primary entry point for
the security API bindings. It owns the transport and hands it to the
endpoint clients.
"""

from typing import Any, Dict, Optional, Type, TypeVar
import logging

from opensearch_security_client.config import SecuritySettings, get_settings
from opensearch_security_client.endpoints import RoleMappingsClient
from opensearch_security_client.http import HTTPXTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SecurityClient:
    """
    Main client for the OpenSearch security API.

    Example usage:
        ```python
        async with SecurityClient("https://localhost:9200", auth=("admin", "admin")) as client:
            response = await client.role_mappings.get("all_access", pretty=True)
            print(response.status_code, response.text)
        ```

    With no base URL and no transport, connection settings are read from
    ``OPENSEARCH_*`` environment variables.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        settings: Optional[SecuritySettings] = None,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        auth: Optional[Any] = None,
        verify: Optional[bool] = None,
    ):
        """
        Initialize the security client.

        Args:
            base_url: Cluster URL; defaults to the configured settings
            transport: Pre-built transport; all connection arguments are ignored
            settings: Settings to use instead of the environment
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            auth: httpx auth passed to the transport
            verify: Whether to verify TLS certificates
        """
        if transport is None:
            settings = settings or get_settings()
            transport = HTTPXTransport(
                base_url or settings.url,
                timeout=timeout if timeout is not None else settings.timeout,
                headers=headers,
                auth=auth if auth is not None else settings.auth,
                verify=verify if verify is not None else settings.verify_certs,
            )

        self._transport = transport

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @property
    def transport(self) -> Transport:
        """Get the transport used by all endpoint clients."""
        return self._transport

    @property
    def base_url(self) -> Optional[str]:
        return getattr(self._transport, "base_url", None)

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def _get_endpoint_client(self, client_class: Type[T]) -> T:
        """Get or create an endpoint client instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(self._transport)
        return self._endpoint_clients[class_name]

    @property
    def role_mappings(self) -> RoleMappingsClient:
        return self._get_endpoint_client(RoleMappingsClient)

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the transport and release resources."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "SecurityClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"SecurityClient(base_url={self.base_url!r})"
