"""
Endpoint client for role mappings.

Each method builds the request value for one endpoint and performs it
through the transport. The keyword options are the fields shared by all
requests: ``pretty``, ``human``, ``error_trace``, ``filter_path``,
``headers``, ``opaque_id`` and ``timeout``.
"""

from typing import Any

from opensearch_security_client.api import (
    BulkUpsertRoleMappingsRequest,
    CreateRoleMappingRequest,
    GetRoleMappingRequest,
    PatchRoleMappingRequest,
)
from opensearch_security_client.http import Transport
from opensearch_security_client.response import Response


class RoleMappingsClient:
    """
    Client for role mapping endpoints.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def create(
        self,
        name: str,
        body: Any,
        **options: Any,
    ) -> Response:
        """Create Role Mapping"""
        request = CreateRoleMappingRequest(name=name, body=body, **options)
        return await request.perform(self._transport)

    async def get(
        self,
        name: str = "",
        **options: Any,
    ) -> Response:
        """Get Role Mapping (all role mappings when name is empty)"""
        request = GetRoleMappingRequest(name=name, **options)
        return await request.perform(self._transport)

    async def patch(
        self,
        name: str,
        body: Any,
        **options: Any,
    ) -> Response:
        """Patch Role Mapping"""
        request = PatchRoleMappingRequest(name=name, body=body, **options)
        return await request.perform(self._transport)

    async def bulk_upsert(
        self,
        body: Any,
        **options: Any,
    ) -> Response:
        """Bulk Upsert Role Mappings"""
        request = BulkUpsertRoleMappingsRequest(body=body, **options)
        return await request.perform(self._transport)
