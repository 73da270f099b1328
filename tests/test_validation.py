"""Tests for require_role and validate_task_access."""

import pytest

from app.features.rbac.exceptions import AccessDeniedError, DenialReason, UnknownOperationError
from app.features.rbac.roles import Role
from app.features.rbac.validation import TaskOperation, parse_task_operation, require_role, validate_task_access


def test_require_role_passes(techcorp_owner, techcorp_admin):
    assert require_role(techcorp_owner, Role.ADMIN, "test") is None
    assert require_role(techcorp_admin, Role.ADMIN, "test") is None


def test_require_role_message(techcorp_admin):
    with pytest.raises(AccessDeniedError) as exc_info:
        require_role(techcorp_admin, Role.OWNER, "x")

    message = str(exc_info.value)
    assert message == "Insufficient permissions: x requires OWNER role or higher. Current role: ADMIN"
    assert exc_info.value.reason is DenialReason.INSUFFICIENT_ROLE


def test_require_role_error_is_permission_error(techcorp_viewer):
    with pytest.raises(PermissionError):
        require_role(techcorp_viewer, Role.ADMIN, "create task")


def test_require_role_with_string_role(techcorp_owner, techcorp_admin):
    assert require_role(techcorp_owner, "admin", "x") is None

    with pytest.raises(AccessDeniedError) as exc_info:
        require_role(techcorp_admin, "owner", "x")
    assert str(exc_info.value) == "Insufficient permissions: x requires OWNER role or higher. Current role: ADMIN"


def test_parse_task_operation():
    assert parse_task_operation("delete") is TaskOperation.DELETE
    assert parse_task_operation(TaskOperation.READ) is TaskOperation.READ
    with pytest.raises(UnknownOperationError, match="Unknown operation: archive"):
        parse_task_operation("archive")


def test_read_access(techcorp_owner, techcorp_task, startup_task):
    validate_task_access(techcorp_owner, techcorp_task, "read")

    with pytest.raises(AccessDeniedError, match="different organization") as exc_info:
        validate_task_access(techcorp_owner, startup_task, "read")
    assert exc_info.value.reason is DenialReason.DIFFERENT_ORGANIZATION
    assert exc_info.value.message == "Access denied: Cannot read task 3. Task belongs to different organization."


def test_update_access(techcorp_owner, techcorp_viewer, techcorp_task, techcorp_task_by_viewer, startup_task):
    validate_task_access(techcorp_owner, techcorp_task, TaskOperation.UPDATE)
    validate_task_access(techcorp_viewer, techcorp_task_by_viewer, "update")

    with pytest.raises(AccessDeniedError) as exc_info:
        validate_task_access(techcorp_viewer, techcorp_task, "update")
    assert exc_info.value.reason is DenialReason.NOT_TASK_CREATOR
    assert str(exc_info.value) == "Access denied: Cannot update task 1. Viewers can only update their own tasks."

    # Organization mismatch is reported first
    with pytest.raises(AccessDeniedError) as exc_info:
        validate_task_access(techcorp_viewer, startup_task, "update")
    assert exc_info.value.reason is DenialReason.DIFFERENT_ORGANIZATION
    assert str(exc_info.value) == "Access denied: Cannot update task 3. Task belongs to different organization."


def test_delete_access(techcorp_owner, techcorp_admin, techcorp_viewer, techcorp_task, startup_task):
    validate_task_access(techcorp_owner, techcorp_task, "delete")

    with pytest.raises(AccessDeniedError) as exc_info:
        validate_task_access(techcorp_admin, techcorp_task, "delete")
    assert exc_info.value.reason is DenialReason.OWNER_REQUIRED
    assert str(exc_info.value) == "Access denied: Cannot delete task 1. Only owners can delete tasks."

    with pytest.raises(AccessDeniedError) as exc_info:
        validate_task_access(techcorp_viewer, techcorp_task, "delete")
    assert exc_info.value.reason is DenialReason.OWNER_REQUIRED

    with pytest.raises(AccessDeniedError) as exc_info:
        validate_task_access(techcorp_owner, startup_task, "delete")
    assert exc_info.value.reason is DenialReason.DIFFERENT_ORGANIZATION
    assert "different organization" in str(exc_info.value)


@pytest.mark.parametrize("operation", ["archive", "READ", "", None])
def test_unknown_operation(techcorp_owner, techcorp_task, operation):
    with pytest.raises(UnknownOperationError, match="Unknown operation"):
        validate_task_access(techcorp_owner, techcorp_task, operation)
