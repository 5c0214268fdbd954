import threading
from typing import Iterable, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from todo_api.errors import NotFound
from todo_api.models.assignee import Assignee
from todo_api.models.todo import Todo, TodoStatus, TodoPriority
from todo_api.schemas.todo import TodoCreate, TodoUpdate, ReorderItem, TodoOut
from todo_api.utils.logger import get_logger

logger = get_logger("todos")

# Serializes sortOrder assignment and assignee references within this process;
# each holder commits before releasing. Re-entrant so nested service calls share it.
write_lock = threading.RLock()


def next_sort_order(db: Session) -> int:
    """Max sortOrder + 1, or 0 for an empty table."""
    current = db.query(func.max(Todo.sort_order)).scalar()
    return 0 if current is None else current + 1


def _resolve_assignee_id(db: Session, assignee_id: Optional[int]) -> Optional[int]:
    # falsy ids (0/null) clear the reference
    if not assignee_id:
        return None
    if db.query(Assignee.id).filter(Assignee.id == assignee_id).first() is None:
        raise NotFound(f"Assignee {assignee_id} not found")
    return assignee_id


def list_todos(db: Session):
    return db.query(Todo).order_by(Todo.sort_order.asc(), Todo.id.asc()).all()


def get_todo(db: Session, todo_id: int) -> Todo:
    todo = db.query(Todo).filter(Todo.id == todo_id).first()
    if not todo:
        raise NotFound(f"Todo {todo_id} not found")
    return todo


def create_todo(db: Session, data: TodoCreate) -> Todo:
    with write_lock:
        sort_order = next_sort_order(db)
        # checked under the lock so a concurrent assignee delete cannot slip in
        assignee_id = _resolve_assignee_id(db, data.assignee_id)
        todo = Todo(
            title=data.title,
            description=data.description,
            status=data.status or TodoStatus.TODO,
            priority=data.priority or TodoPriority.MEDIUM,
            assignee_id=assignee_id,
            sort_order=sort_order,
        )
        db.add(todo)
        db.commit()
    db.refresh(todo)
    logger.info("Created todo id=%s sortOrder=%s", todo.id, todo.sort_order)
    return todo


def update_todo(db: Session, todo_id: int, data: TodoUpdate) -> Todo:
    with write_lock:
        todo = get_todo(db, todo_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if field == "assignee_id":
                value = _resolve_assignee_id(db, value)
            setattr(todo, field, value)
        db.commit()
    db.refresh(todo)
    logger.info("Updated todo id=%s", todo.id)
    return todo


def reorder_todos(db: Session, items: Iterable[ReorderItem]) -> None:
    """Apply every (id, sortOrder) pair or none of them."""
    items = list(items)
    try:
        for item in items:
            todo = db.query(Todo).filter(Todo.id == item.id).first()
            if not todo:
                raise NotFound(f"Todo {item.id} not found")
            todo.sort_order = item.sort_order
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Reordered %d todos", len(items))


def delete_todo(db: Session, todo_id: int) -> TodoOut:
    todo = get_todo(db, todo_id)
    deleted = TodoOut.model_validate(todo)
    db.delete(todo)
    db.commit()
    logger.info("Deleted todo id=%s", todo_id)
    return deleted
