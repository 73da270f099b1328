"""Tests for translating task scopes into SQL."""

from sqlalchemy import select

from app.features.rbac.schemas import TaskScope
from app.features.tasks.models import Task
from app.features.tasks.queries import apply_task_scope, scope_conditions, select_own_tasks, select_visible_tasks


def _sql(stmt) -> str:
    return str(stmt.compile(compile_kwargs={"literal_binds": True}))


def test_scope_conditions_one_per_constraint():
    assert len(scope_conditions(TaskScope(organization_id=1))) == 1
    assert len(scope_conditions(TaskScope(organization_id=1, created_by_user_id=3))) == 2


def test_apply_task_scope():
    sql = _sql(apply_task_scope(select(Task), TaskScope(organization_id=5, created_by_user_id=8)))
    assert "tasks.organization_id = 5" in sql
    assert "tasks.created_by_user_id = 8" in sql
    assert " AND " in sql


def test_visible_tasks_are_organization_wide_for_viewers(techcorp_viewer):
    sql = _sql(select_visible_tasks(techcorp_viewer))
    assert "tasks.organization_id = 1" in sql
    assert "tasks.created_by_user_id" not in sql.split("WHERE", 1)[1]
    assert "ORDER BY tasks.created_at DESC" in sql


def test_own_tasks_for_viewer(techcorp_viewer):
    where = _sql(select_own_tasks(techcorp_viewer)).split("WHERE", 1)[1]
    assert "tasks.organization_id = 1" in where
    assert "tasks.created_by_user_id = 3" in where


def test_own_tasks_for_admin(techcorp_admin):
    where = _sql(select_own_tasks(techcorp_admin)).split("WHERE", 1)[1]
    assert "tasks.organization_id = 1" in where
    assert "created_by_user_id" not in where
