from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Literal, Mapping, Optional


class RoleMapping(BaseModel):
    backend_roles: List[str] = Field(default_factory=list, description="Backend roles mapped to the role")
    and_backend_roles: List[str] = Field(default_factory=list, description="Backend roles that must all be present")
    hosts: List[str] = Field(default_factory=list, description="Hosts mapped to the role")
    users: List[str] = Field(default_factory=list, description="Users mapped to the role")
    description: Optional[str] = Field(None, description="Role mapping description")

    model_config = ConfigDict(extra="allow")


class PatchOperation(BaseModel):
    op: Literal["add", "remove", "replace", "copy", "move", "test"] = Field(description="JSON patch operation")
    path: str = Field(description="JSON pointer to the patched location")
    value: Optional[Any] = Field(None, description="Value for add, replace and test operations")


def upsert_operations(mappings: Mapping[str, RoleMapping]) -> List[PatchOperation]:
    """Build one ``add`` operation per role mapping for a bulk upsert."""
    return [
        PatchOperation(op="add", path=f"/{name}", value=mapping)
        for name, mapping in mappings.items()
    ]
