"""
Bulk Upsert Role Mappings API.

Creates, updates or deletes several role mappings in one call. The body is a
list of JSON patch operations whose paths name the role mappings, e.g.
``{"op": "add", "path": "/my_role", "value": {...}}``. Requires the
``manage_security`` cluster privilege.

https://opensearch.org/docs/latest/security/access-control/api/#patch-role-mappings
"""

from typing import Any, ClassVar

from opensearch_security_client.base import ROLES_MAPPING_PATH, SecurityRequest


class BulkUpsertRoleMappingsRequest(SecurityRequest):
    """Configures the Bulk Upsert Role Mappings API request."""

    method: ClassVar[str] = "PATCH"

    body: Any = None

    def build_path(self) -> str:
        return ROLES_MAPPING_PATH

    def payload(self) -> Any:
        return self.body
