"""
Validation helpers that turn a failed policy check into AccessDeniedError.
"""
import enum
from typing import Union

from app.features.rbac.exceptions import AccessDeniedError, DenialReason, UnknownOperationError
from app.features.rbac.policies import (
    can_delete_task,
    can_read_tasks,
    can_update_task,
    is_owner,
    is_same_organization,
    is_task_creator,
    is_viewer,
)
from app.features.rbac.roles import Role, has_role_or_higher
from app.features.rbac.schemas import RbacTask, RbacUser


class TaskOperation(str, enum.Enum):
    """Task operations checked by validate_task_access."""
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


def parse_task_operation(operation: Union[TaskOperation, str]) -> TaskOperation:
    """Coerce 'read'/'update'/'delete' to TaskOperation or raise UnknownOperationError."""
    try:
        return TaskOperation(operation)
    except ValueError as exc:
        raise UnknownOperationError(f"Unknown operation: {operation}") from exc


def _role_name(role: Union[Role, str]) -> str:
    return role.value if isinstance(role, Role) else str(role)


def require_role(user: RbacUser, required_role: Union[Role, str], operation: str) -> None:
    """
    Validate that a user has the minimum required role for an operation.

    Args:
        user: The user to validate
        required_role: The minimum role required
        operation: Description of the operation (used in the error message)

    Raises:
        AccessDeniedError: If the user's role ranks below required_role
    """
    required_role = Role(required_role)
    if not has_role_or_higher(user, required_role):
        raise AccessDeniedError(
            DenialReason.INSUFFICIENT_ROLE,
            f"Insufficient permissions: {operation} requires {_role_name(required_role)} role or higher. "
            f"Current role: {_role_name(user.role)}",
        )


def validate_task_access(
    user: RbacUser,
    task: RbacTask,
    operation: Union[TaskOperation, str],
) -> None:
    """
    Validate that a user can perform an operation on a specific task.

    Args:
        user: The user to validate
        task: The task to operate on
        operation: 'read', 'update' or 'delete'

    Raises:
        AccessDeniedError: If the user cannot perform the operation
        UnknownOperationError: If operation is not a known task operation
    """
    operation = parse_task_operation(operation)

    if operation is TaskOperation.READ:
        if not can_read_tasks(user, task):
            raise AccessDeniedError(
                DenialReason.DIFFERENT_ORGANIZATION,
                f"Access denied: Cannot read task {task.id}. Task belongs to different organization.",
            )

    elif operation is TaskOperation.UPDATE:
        if not can_update_task(user, task):
            prefix = f"Access denied: Cannot update task {task.id}."
            if not is_same_organization(user, task.organization_id):
                raise AccessDeniedError(
                    DenialReason.DIFFERENT_ORGANIZATION,
                    f"{prefix} Task belongs to different organization.",
                )
            if is_viewer(user) and not is_task_creator(user, task):
                raise AccessDeniedError(
                    DenialReason.NOT_TASK_CREATOR,
                    f"{prefix} Viewers can only update their own tasks.",
                )
            raise AccessDeniedError(DenialReason.INSUFFICIENT_PERMISSIONS, f"{prefix} Insufficient permissions.")

    elif operation is TaskOperation.DELETE:
        if not can_delete_task(user, task):
            prefix = f"Access denied: Cannot delete task {task.id}."
            if not is_same_organization(user, task.organization_id):
                raise AccessDeniedError(
                    DenialReason.DIFFERENT_ORGANIZATION,
                    f"{prefix} Task belongs to different organization.",
                )
            if not is_owner(user):
                raise AccessDeniedError(DenialReason.OWNER_REQUIRED, f"{prefix} Only owners can delete tasks.")
            raise AccessDeniedError(DenialReason.INSUFFICIENT_PERMISSIONS, f"{prefix} Insufficient permissions.")
