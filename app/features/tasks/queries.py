"""
Translation of task scopes into SQLAlchemy statements.

The access policies hand back a TaskScope; this module is the single place
that turns it into WHERE clauses. Statements are built, never executed.
"""
from typing import Any, List
from sqlalchemy import Select, select

from app.features.rbac.policies import scope_for_own_tasks, scope_for_tasks
from app.features.rbac.schemas import RbacUser, TaskScope
from app.features.tasks.models import Task


def scope_conditions(scope: TaskScope, entity: Any = Task) -> List[Any]:
    """
    Build one equality expression per scope constraint.

    Args:
        scope: Scope produced by the access policies
        entity: Mapped class exposing organization_id / created_by_user_id

    Returns:
        List of SQLAlchemy boolean expressions to AND together
    """
    return [getattr(entity, column) == value for column, value in scope.as_filter().items()]


def apply_task_scope(stmt: Select, scope: TaskScope, entity: Any = Task) -> Select:
    """AND every scope constraint onto an existing select."""
    return stmt.where(*scope_conditions(scope, entity))


def select_visible_tasks(user: RbacUser) -> Select:
    """
    Select every task the user may read, newest first.

    Usage:
        result = await db.execute(select_visible_tasks(user))
        tasks = result.scalars().all()
    """
    stmt = apply_task_scope(select(Task), scope_for_tasks(user))
    return stmt.order_by(Task.created_at.desc())


def select_own_tasks(user: RbacUser) -> Select:
    """Select the user's own tasks (creator-scoped for viewers), newest first."""
    stmt = apply_task_scope(select(Task), scope_for_own_tasks(user))
    return stmt.order_by(Task.created_at.desc())
