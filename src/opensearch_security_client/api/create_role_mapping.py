"""
Create Role Mapping API.

Creates or replaces a role mapping. Requires the ``manage_security``
cluster privilege.

https://opensearch.org/docs/latest/security/access-control/api/#create-role-mapping
"""

from typing import Any, ClassVar

from opensearch_security_client.base import ROLES_MAPPING_PATH, SecurityRequest, quote_name


class CreateRoleMappingRequest(SecurityRequest):
    """Configures the Create Role Mapping API request."""

    method: ClassVar[str] = "PUT"

    name: str
    body: Any = None

    def build_path(self) -> str:
        return ROLES_MAPPING_PATH + quote_name(self.name)

    def payload(self) -> Any:
        return self.body
