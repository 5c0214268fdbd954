"""Payloads for bulk export and import.

Assignee linkage travels by name so an export can be loaded into any store.
"""
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional
from todo_api.models.todo import TodoStatus, TodoPriority


class ExportAssignee(BaseModel):
    name: str
    color: Optional[str] = None


class ExportTodo(BaseModel):
    title: str
    description: Optional[str] = None
    status: TodoStatus = TodoStatus.TODO
    priority: TodoPriority = TodoPriority.MEDIUM
    sort_order: Optional[int] = Field(None, alias="sortOrder")
    assignee_name: Optional[str] = Field(None, alias="assigneeName")

    class Config:
        populate_by_name = True


class ExportPayload(BaseModel):
    exported_at: datetime = Field(..., alias="exportedAt")
    assignees: List[ExportAssignee]
    todos: List[ExportTodo]

    class Config:
        populate_by_name = True


class ImportFullRequest(BaseModel):
    assignees: List[ExportAssignee] = []
    todos: List[ExportTodo] = []


class ImportFullResponse(BaseModel):
    success: bool = True
    assignees: int
    todos: int


class AppendTodo(BaseModel):
    # entries without a title are skipped rather than rejected
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TodoStatus] = None
    priority: Optional[TodoPriority] = None
    assignee_name: Optional[str] = Field(None, alias="assigneeName")

    class Config:
        populate_by_name = True


class ImportAppendRequest(BaseModel):
    todos: List[AppendTodo]


class ImportAppendResponse(BaseModel):
    success: bool = True
    created: int
