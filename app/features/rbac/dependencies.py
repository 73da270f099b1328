"""
FastAPI dependencies that enforce the task access policies on routes.

Implements:
- Current user resolution from the upstream authentication layer
- Predicate-based policy guards (roles, task creation, audit logs)
- Resource-based task guards backed by validate_task_access
"""
from typing import Any, Callable, Iterable, Optional, Union
from fastapi import Depends, HTTPException, Request, status
from pydantic import ValidationError

from app.features.rbac.exceptions import AccessDeniedError
from app.features.rbac.policies import can_create_task, can_view_audit_logs, is_admin_or_owner, is_owner
from app.features.rbac.roles import Role
from app.features.rbac.schemas import RbacTask, RbacUser
from app.features.rbac.validation import (
    TaskOperation,
    parse_task_operation,
    require_role,
    validate_task_access,
)
from app.utils import get_logger


log = get_logger(__name__)

PolicyPredicate = Callable[[RbacUser], bool]


# ============================================================================
# Current User
# ============================================================================

async def get_current_user(request: Request) -> RbacUser:
    """
    Get the authenticated user stored on the request by the auth layer.

    The identity is trusted as-is; it may be an RbacUser, a mapping or
    an ORM object with the same fields.

    Raises:
        HTTPException: 403 if no identity is attached or it is malformed
    """
    identity = getattr(request.state, "user", None)
    if identity is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User not authenticated")

    if isinstance(identity, RbacUser):
        return identity

    try:
        return RbacUser.model_validate(identity)
    except ValidationError as e:
        log.warning(f"Malformed identity on request: {e.error_count()} validation errors")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User not authenticated") from e


# ============================================================================
# Policy Guards
# ============================================================================

def require_policy(predicate: PolicyPredicate, error_message: Optional[str] = None):
    """
    FastAPI dependency factory evaluating a policy predicate.

    Usage:
        @router.post("/tasks")
        async def create_task(
            user: RbacUser = Depends(require_policy(can_create_task, "Access denied: Cannot create tasks"))
        ):
            pass

    Returns:
        Dependency function that returns the current user if the predicate holds

    Raises:
        HTTPException: 403 if the predicate is false or fails to evaluate
    """
    detail = error_message or "Access denied: Insufficient permissions"

    async def policy_dependency(current_user: RbacUser = Depends(get_current_user)) -> RbacUser:
        try:
            allowed = predicate(current_user)
        except Exception as e:
            log.exception(f"Policy evaluation error for user {current_user.id}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied: Policy evaluation failed",
            ) from e

        if not allowed:
            log.info(
                f"User {current_user.id} ({current_user.role.value}) denied in org "
                f"{current_user.organization_id}: {detail}"
            )
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)

        return current_user

    return policy_dependency


def require_roles(roles: Iterable[Role], error_message: Optional[str] = None):
    """Allow only the listed roles (exact match, no hierarchy)."""
    allowed = tuple(roles)
    detail = error_message or f"Access denied: Required roles: {', '.join(role.value for role in allowed)}"
    return require_policy(lambda user: user.role in allowed, detail)


def require_owner(error_message: Optional[str] = None):
    return require_policy(is_owner, error_message or "Access denied: Owner role required")


def require_admin_or_owner(error_message: Optional[str] = None):
    return require_policy(is_admin_or_owner, error_message or "Access denied: Admin or Owner role required")


def require_authenticated(error_message: Optional[str] = None):
    return require_policy(lambda user: True, error_message or "Access denied: Authentication required")


def require_task_creation(error_message: Optional[str] = None):
    return require_policy(can_create_task, error_message or "Access denied: Cannot create tasks")


def require_audit_log_access(error_message: Optional[str] = None):
    return require_policy(can_view_audit_logs, error_message or "Access denied: Cannot view audit logs")


def require_minimum_role(required_role: Role, operation: str):
    """
    Require a role at or above required_role.

    Failures raise AccessDeniedError so the application handler can return
    the descriptive message and reason.
    """

    async def role_dependency(current_user: RbacUser = Depends(get_current_user)) -> RbacUser:
        try:
            require_role(current_user, required_role, operation)
        except AccessDeniedError as e:
            log.info(f"User {current_user.id} denied {operation}: {e.reason.value}")
            raise
        return current_user

    return role_dependency


# ============================================================================
# Resource Guards
# ============================================================================

def require_task_access(operation: Union[TaskOperation, str], task_loader: Callable[..., Any]):
    """
    FastAPI dependency factory checking access to a specific task.

    task_loader is itself a dependency (it may take path params, a db session,
    etc.) returning the task as an RbacTask, mapping or ORM object, or None
    when the task does not exist.

    Usage:
        @router.delete("/tasks/{task_id}")
        async def delete_task(
            task: RbacTask = Depends(require_task_access("delete", load_task))
        ):
            pass

    Returns:
        Dependency function that returns the validated RbacTask

    Raises:
        UnknownOperationError: If operation is not a known task operation
        HTTPException: 404 if the loader finds no task, 403 if the task is malformed
        AccessDeniedError: If the user cannot perform the operation on the task
    """
    operation = parse_task_operation(operation)

    async def task_dependency(
        current_user: RbacUser = Depends(get_current_user),
        loaded: Any = Depends(task_loader),
    ) -> RbacTask:
        if loaded is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")

        if isinstance(loaded, RbacTask):
            task = loaded
        else:
            try:
                task = RbacTask.model_validate(loaded)
            except ValidationError as e:
                log.warning(f"Malformed task for {operation.value}: {e.error_count()} validation errors")
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Access denied: Task could not be verified",
                ) from e

        try:
            validate_task_access(current_user, task, operation)
        except AccessDeniedError as e:
            log.info(
                f"User {current_user.id} denied {operation.value} on task {task.id} "
                f"in org {task.organization_id}: {e.reason.value}"
            )
            raise
        return task

    return task_dependency
