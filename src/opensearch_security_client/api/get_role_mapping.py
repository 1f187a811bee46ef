"""
Get Role Mapping API.

Retrieves one role mapping, or all of them when no name is given.
Requires the ``manage_security`` cluster privilege.

https://opensearch.org/docs/latest/security/access-control/api/#get-role-mapping
"""

from typing import ClassVar

from opensearch_security_client.base import ROLES_MAPPING_PATH, SecurityRequest, quote_name


class GetRoleMappingRequest(SecurityRequest):
    """Configures the Get Role Mapping API request."""

    method: ClassVar[str] = "GET"

    name: str = ""

    def build_path(self) -> str:
        return ROLES_MAPPING_PATH + quote_name(self.name)
