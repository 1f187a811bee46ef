"""
Request values for the role mapping endpoints, one module per endpoint.
"""

from opensearch_security_client.api.bulk_upsert_role_mappings import BulkUpsertRoleMappingsRequest
from opensearch_security_client.api.create_role_mapping import CreateRoleMappingRequest
from opensearch_security_client.api.get_role_mapping import GetRoleMappingRequest
from opensearch_security_client.api.patch_role_mapping import PatchRoleMappingRequest

__all__ = [
    "BulkUpsertRoleMappingsRequest",
    "CreateRoleMappingRequest",
    "GetRoleMappingRequest",
    "PatchRoleMappingRequest",
]
