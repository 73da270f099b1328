"""Shared fixtures: two organizations with one user per role."""

import pytest

from app.features.rbac.roles import Role
from app.features.rbac.schemas import RbacTask, RbacUser


@pytest.fixture
def techcorp_owner() -> RbacUser:
    return RbacUser(id=1, email="owner@techcorp.com", role=Role.OWNER, organization_id=1)


@pytest.fixture
def techcorp_admin() -> RbacUser:
    return RbacUser(id=2, email="admin@techcorp.com", role=Role.ADMIN, organization_id=1)


@pytest.fixture
def techcorp_viewer() -> RbacUser:
    return RbacUser(id=3, email="viewer@techcorp.com", role=Role.VIEWER, organization_id=1)


@pytest.fixture
def startup_owner() -> RbacUser:
    return RbacUser(id=4, email="owner@startup.com", role=Role.OWNER, organization_id=2)


@pytest.fixture
def all_techcorp_users(techcorp_owner, techcorp_admin, techcorp_viewer) -> list[RbacUser]:
    return [techcorp_owner, techcorp_admin, techcorp_viewer]


@pytest.fixture
def techcorp_task() -> RbacTask:
    return RbacTask(id=1, created_by_user_id=1, organization_id=1)


@pytest.fixture
def techcorp_task_by_viewer() -> RbacTask:
    return RbacTask(id=2, created_by_user_id=3, organization_id=1)


@pytest.fixture
def startup_task() -> RbacTask:
    return RbacTask(id=3, created_by_user_id=4, organization_id=2)
