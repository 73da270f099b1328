"""
Permission introspection API routes.
"""
from fastapi import APIRouter, Depends, Request

from app.core import config
from app.core.limiter import limiter
from app.features.rbac.dependencies import get_current_user
from app.features.rbac.policies import (
    can_create_task,
    can_read_tasks,
    can_view_audit_logs,
    get_user_permission_description,
    scope_for_own_tasks,
    scope_for_tasks,
)
from app.features.rbac.schemas import PermissionCapabilities, PermissionSummaryResponse, RbacUser


router = APIRouter()


@router.get("/me", response_model=PermissionSummaryResponse)
@limiter.limit(config.RATE_LIMIT)
async def get_my_permissions(
    request: Request,
    current_user: RbacUser = Depends(get_current_user),
):
    """Describe what the current user may do with tasks in their organization."""
    return PermissionSummaryResponse(
        user_id=current_user.id,
        role=current_user.role,
        organization_id=current_user.organization_id,
        description=get_user_permission_description(current_user),
        capabilities=PermissionCapabilities(
            can_read_tasks=can_read_tasks(current_user),
            can_create_task=can_create_task(current_user),
            can_view_audit_logs=can_view_audit_logs(current_user),
        ),
        task_scope=scope_for_tasks(current_user).model_dump(by_alias=True, exclude_none=True),
        own_task_scope=scope_for_own_tasks(current_user).model_dump(by_alias=True, exclude_none=True),
    )
