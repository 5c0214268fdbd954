from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field, validator
from typing import List, Optional
from todo_api.models.todo import TodoStatus, TodoPriority
from todo_api.schemas.assignee import AssigneeOut


class TodoCreate(BaseModel):
    title: str
    description: Optional[str] = None
    status: Optional[TodoStatus] = None
    priority: Optional[TodoPriority] = None
    assignee_id: Optional[int] = Field(None, alias="assigneeId")

    class Config:
        populate_by_name = True

    @validator("title")
    def title_not_empty(cls, v):
        if not v.strip():
            raise ValueError("title cannot be empty")
        return v.strip()


class TodoUpdate(BaseModel):
    """Partial update; only the fields present in the body are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TodoStatus] = None
    priority: Optional[TodoPriority] = None
    assignee_id: Optional[int] = Field(None, alias="assigneeId")

    class Config:
        populate_by_name = True

    @validator("title")
    def title_not_empty(cls, v):
        if v is None or not v.strip():
            raise ValueError("title cannot be empty")
        return v.strip()

    @validator("status", "priority")
    def not_null(cls, v):
        if v is None:
            raise ValueError("cannot be null")
        return v


class ReorderItem(BaseModel):
    id: int
    sort_order: int = Field(..., alias="sortOrder")

    class Config:
        populate_by_name = True


class ReorderRequest(BaseModel):
    items: List[ReorderItem]


def _wire(name, camel, default=...):
    # read from ORM attributes or camelCase dicts, always written as camelCase
    return Field(default, validation_alias=AliasChoices(name, camel), serialization_alias=camel)


class TodoOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: TodoStatus
    priority: TodoPriority
    sort_order: int = _wire("sort_order", "sortOrder")
    assignee_id: Optional[int] = _wire("assignee_id", "assigneeId", None)
    created_at: Optional[datetime] = _wire("created_at", "createdAt", None)
    updated_at: Optional[datetime] = _wire("updated_at", "updatedAt", None)
    assignee: Optional[AssigneeOut] = None

    class Config:
        from_attributes = True
