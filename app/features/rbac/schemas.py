"""
Pydantic schemas for access control.

Subject and resource descriptors consumed by the policy functions, the task
scope record they produce, and the permission summary response.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.features.rbac.roles import Role


# Descriptors accept snake_case or camelCase keys and ORM objects
DESCRIPTOR_CONFIG = ConfigDict(
    frozen=True,
    from_attributes=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


# ============================================================================
# Descriptors
# ============================================================================

class RbacUser(BaseModel):
    """Authenticated user as supplied by the identity layer."""
    id: int
    email: str
    role: Role
    organization_id: int

    model_config = DESCRIPTOR_CONFIG


class RbacTask(BaseModel):
    """Task fields the policies need (identity, creator and organization)."""
    id: int
    created_by_user_id: int
    organization_id: int

    model_config = DESCRIPTOR_CONFIG


class TaskScope(BaseModel):
    """
    Equality constraints a task query must AND together.

    organization_id is always present; created_by_user_id only restricts
    the result set when set.
    """
    organization_id: int
    created_by_user_id: Optional[int] = None

    model_config = DESCRIPTOR_CONFIG

    def as_filter(self) -> Dict[str, int]:
        """Constraints keyed by task column name, unset keys omitted."""
        return self.model_dump(exclude_none=True)


# ============================================================================
# Responses
# ============================================================================

class PermissionCapabilities(BaseModel):
    """Resource-independent capability flags."""
    can_read_tasks: bool
    can_create_task: bool
    can_view_audit_logs: bool


class PermissionSummaryResponse(BaseModel):
    """Schema for the caller's permission summary."""
    user_id: int
    role: Role
    organization_id: int
    description: str
    capabilities: PermissionCapabilities
    task_scope: Dict[str, Any] = Field(..., description="Scope for organization-wide task reads")
    own_task_scope: Dict[str, Any] = Field(..., description="Scope for 'my tasks' queries")
