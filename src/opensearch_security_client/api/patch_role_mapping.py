"""
Patch Role Mapping API.

Applies JSON patch operations to a single role mapping. Requires the
``manage_security`` cluster privilege.

https://opensearch.org/docs/latest/security/access-control/api/#patch-role-mapping
"""

from typing import Any, ClassVar

from opensearch_security_client.base import ROLES_MAPPING_PATH, SecurityRequest, quote_name


class PatchRoleMappingRequest(SecurityRequest):
    """Configures the Patch Role Mapping API request."""

    method: ClassVar[str] = "PATCH"

    name: str
    body: Any = None

    def build_path(self) -> str:
        return ROLES_MAPPING_PATH + quote_name(self.name)

    def payload(self) -> Any:
        return self.body
