from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from todo_api.schemas.todo import TodoCreate, TodoUpdate, TodoOut, ReorderRequest
from todo_api.services import todos as service
from todo_api.database import get_db
from todo_api.utils.auth import get_current_user

router = APIRouter(tags=["todos"], dependencies=[Depends(get_current_user)])

@router.get("/allTodos", response_model=List[TodoOut])
def all_todos(db: Session = Depends(get_db)):
    """All todos with their assignee, in display (sortOrder) order."""
    return service.list_todos(db)

@router.post("/createTodo", response_model=TodoOut)
def create_todo(body: TodoCreate, db: Session = Depends(get_db)):
    return service.create_todo(db, body)

@router.put("/editTodo/{todo_id}", response_model=TodoOut)
def edit_todo(todo_id: int, body: TodoUpdate, db: Session = Depends(get_db)):
    return service.update_todo(db, todo_id, body)

@router.put("/reorderTodos")
def reorder_todos(body: ReorderRequest, db: Session = Depends(get_db)):
    service.reorder_todos(db, body.items)
    return {"success": True}

@router.delete("/deleteTodo/{todo_id}", response_model=TodoOut)
def delete_todo(todo_id: int, db: Session = Depends(get_db)):
    return service.delete_todo(db, todo_id)
