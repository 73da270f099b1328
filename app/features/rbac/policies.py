"""
Task access policies.

Pure functions over RbacUser/RbacTask descriptors:
- Role checks and organization/creator comparisons
- Task permission predicates (read, create, update, delete, audit logs)
- Query scope builders
- Human-readable permission descriptions

Nothing here performs I/O or raises for a "no" answer; a denied check
returns False.
"""
from typing import Optional

from app.features.rbac.roles import Role, has_role_or_higher
from app.features.rbac.schemas import RbacTask, RbacUser, TaskScope


# ============================================================================
# Role and Ownership Checks
# ============================================================================

def is_owner(user: RbacUser) -> bool:
    return user.role == Role.OWNER


def is_admin_or_owner(user: RbacUser) -> bool:
    return has_role_or_higher(user, Role.ADMIN)


def is_viewer(user: RbacUser) -> bool:
    return user.role == Role.VIEWER


def is_same_organization(user: RbacUser, organization_id: int) -> bool:
    """Check if a user belongs to the organization that owns a resource."""
    return user.organization_id == organization_id


def is_task_creator(user: RbacUser, task: RbacTask) -> bool:
    return user.id == task.created_by_user_id


# ============================================================================
# Task Permission Predicates
# ============================================================================

def can_read_tasks(user: RbacUser, task: Optional[RbacTask] = None) -> bool:
    """
    Check if a user can read tasks.

    With a task, access requires the same organization. Without one this is
    the general capability check and every role has it.
    """
    if task is not None:
        return is_same_organization(user, task.organization_id)
    return True


def can_create_task(user: RbacUser) -> bool:
    """Owners and admins can create tasks; viewers are read-only."""
    return is_admin_or_owner(user)


def can_update_task(user: RbacUser, task: RbacTask) -> bool:
    """
    Check if a user can update a task.

    Rules:
        - Cross-organization updates are blocked
        - Owners and admins can update any task in their organization
        - Viewers can only update tasks they created
    """
    if not is_same_organization(user, task.organization_id):
        return False

    if is_admin_or_owner(user):
        return True

    if is_viewer(user):
        return is_task_creator(user, task)

    return False


def can_delete_task(user: RbacUser, task: RbacTask) -> bool:
    """
    Check if a user can delete a task.

    Only owners can delete, and only within their organization. Admins
    are deliberately excluded.
    """
    if not is_same_organization(user, task.organization_id):
        return False

    return is_owner(user)


def can_view_audit_logs(user: RbacUser) -> bool:
    return is_admin_or_owner(user)


# ============================================================================
# Query Scoping
# ============================================================================

def scope_for_tasks(user: RbacUser) -> TaskScope:
    """
    Scope for reading every task visible to the user.

    Read visibility is organization-wide for all roles, so no creator
    constraint is added even for viewers.
    """
    return TaskScope(organization_id=user.organization_id)


def scope_for_own_tasks(user: RbacUser) -> TaskScope:
    """
    Scope for "my tasks" style queries.

    Viewers are restricted to tasks they created; owners and admins
    get the organization-wide scope.
    """
    if is_viewer(user):
        return TaskScope(organization_id=user.organization_id, created_by_user_id=user.id)
    return TaskScope(organization_id=user.organization_id)


# ============================================================================
# Descriptions
# ============================================================================

PERMISSION_DESCRIPTIONS = {
    Role.OWNER: (
        "Owner in organization {organization_id}: Can read, create, update, and delete "
        "all tasks within the organization. Can view audit logs."
    ),
    Role.ADMIN: (
        "Admin in organization {organization_id}: Can read, create, and update all tasks "
        "within the organization. Cannot delete tasks. Can view audit logs."
    ),
    Role.VIEWER: (
        "Viewer in organization {organization_id}: Can read all tasks within the organization. "
        "Can only update tasks they created. Cannot create, delete tasks, or view audit logs."
    ),
}

UNKNOWN_ROLE_DESCRIPTION = "Unknown role: No permissions."


def get_user_permission_description(user: RbacUser) -> str:
    """Presentational summary of a user's permissions; not used for enforcement."""
    template = PERMISSION_DESCRIPTIONS.get(user.role)
    if template is None:
        return UNKNOWN_ROLE_DESCRIPTION
    return template.format(organization_id=user.organization_id)
