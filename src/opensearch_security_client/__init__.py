"""
OpenSearch Security Client Library.

An async client binding for the role mapping endpoints of the OpenSearch
security plugin REST API.

Example usage:
    ```python
    from opensearch_security_client import SecurityClient, RoleMapping

    async with SecurityClient("https://localhost:9200", auth=("admin", "admin")) as client:
        # Create a role mapping
        await client.role_mappings.create(
            "kibana_user",
            RoleMapping(backend_roles=["analysts"], users=["jdoe"]),
        )

        # Get one role mapping, or all of them
        response = await client.role_mappings.get("kibana_user", pretty=True)
        response = await client.role_mappings.get()
    ```

Responses are returned unparsed; see ``Response``.
"""

__version__ = "0.1.0"

# Main client
from opensearch_security_client.client import SecurityClient

# Transport (for advanced usage)
from opensearch_security_client.http import (
    HTTPXTransport,
    Transport,
)

# Request values
from opensearch_security_client.base import (
    ROLES_MAPPING_PATH,
    SecurityRequest,
)
from opensearch_security_client.api import (
    BulkUpsertRoleMappingsRequest,
    CreateRoleMappingRequest,
    GetRoleMappingRequest,
    PatchRoleMappingRequest,
)

# Endpoint clients
from opensearch_security_client.endpoints import RoleMappingsClient

# Payloads and responses
from opensearch_security_client.models import (
    PatchOperation,
    RoleMapping,
    upsert_operations,
)
from opensearch_security_client.response import Response

# Configuration
from opensearch_security_client.config import (
    SecuritySettings,
    configure_settings,
    get_settings,
    reset_settings,
)

# Exceptions
from opensearch_security_client.exceptions import (
    SecurityClientError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "SecurityClient",
    # Transport
    "HTTPXTransport",
    "Transport",
    # Request values
    "ROLES_MAPPING_PATH",
    "SecurityRequest",
    "BulkUpsertRoleMappingsRequest",
    "CreateRoleMappingRequest",
    "GetRoleMappingRequest",
    "PatchRoleMappingRequest",
    # Endpoint clients
    "RoleMappingsClient",
    # Payloads and responses
    "PatchOperation",
    "RoleMapping",
    "upsert_operations",
    "Response",
    # Configuration
    "SecuritySettings",
    "configure_settings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "SecurityClientError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "exception_from_response",
]
