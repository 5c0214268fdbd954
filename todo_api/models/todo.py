import enum
from datetime import datetime, UTC
from sqlalchemy import Column, Integer, String, ForeignKey, Text, DateTime, Enum
from sqlalchemy.orm import relationship
from todo_api.database import Base


class TodoStatus(str, enum.Enum):
    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"


class TodoPriority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


def _now():
    return datetime.now(UTC)


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(Enum(TodoStatus, name="todo_status"), nullable=False, default=TodoStatus.TODO)
    priority = Column(Enum(TodoPriority, name="todo_priority"), nullable=False, default=TodoPriority.MEDIUM)
    sort_order = Column(Integer, nullable=False, default=0, index=True)
    assignee_id = Column(Integer, ForeignKey("assignees.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_now)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now)

    assignee = relationship("Assignee", back_populates="todos", lazy="joined")
