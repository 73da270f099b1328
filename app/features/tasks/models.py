"""
Task model.

Only the mapping lives here; sessions and persistence belong to the
surrounding application.
"""
import enum
from sqlalchemy import String, Text, Integer, Enum as SQLEnum, Index
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base, TimestampMixin


class TaskStatus(str, enum.Enum):
    """Workflow status of a task."""
    TODO = "todo"
    DOING = "doing"
    DONE = "done"


class TaskCategory(str, enum.Enum):
    WORK = "work"
    PERSONAL = "personal"


class Task(Base, TimestampMixin):
    """
    Task owned by an organization.

    organization_id is set on creation and never changes; the access policies
    rely on it for tenant isolation.
    """
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[TaskStatus] = mapped_column(SQLEnum(TaskStatus), default=TaskStatus.TODO, nullable=False)
    category: Mapped[TaskCategory] = mapped_column(SQLEnum(TaskCategory), default=TaskCategory.WORK, nullable=False)

    # Tenant and creator (the only fields the access policies read)
    organization_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_by_user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    __table_args__ = (
        Index("ix_tasks_org_creator", "organization_id", "created_by_user_id"),
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title={self.title!r}, org_id={self.organization_id})>"
