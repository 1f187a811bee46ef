"""
Endpoint clients.
"""

from opensearch_security_client.endpoints.role_mappings import RoleMappingsClient

__all__ = [
    "RoleMappingsClient",
]
