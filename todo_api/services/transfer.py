from datetime import datetime, UTC
from typing import Dict, List, Optional, Tuple
from sqlalchemy.orm import Session
from todo_api.errors import ImportFailed, InvalidInput
from todo_api.models.assignee import Assignee
from todo_api.models.todo import Todo, TodoStatus, TodoPriority
from todo_api.schemas.transfer import (
    AppendTodo, ExportAssignee, ExportPayload, ExportTodo, ImportFullRequest,
)
from todo_api.services.todos import next_sort_order, write_lock
from todo_api.utils.logger import get_logger

logger = get_logger("transfer")


def _resolve(names: Dict[str, int], name: Optional[str]) -> Optional[int]:
    if not name:
        return None
    return names.get(name)


def export_data(db: Session) -> ExportPayload:
    assignees = db.query(Assignee).order_by(Assignee.name.asc()).all()
    todos = db.query(Todo).order_by(Todo.sort_order.asc(), Todo.id.asc()).all()
    payload = ExportPayload(
        exported_at=datetime.now(UTC),
        assignees=[ExportAssignee(name=a.name, color=a.color) for a in assignees],
        todos=[
            ExportTodo(
                title=t.title,
                description=t.description,
                status=t.status,
                priority=t.priority,
                sort_order=t.sort_order,
                assignee_name=t.assignee.name if t.assignee else None,
            )
            for t in todos
        ],
    )
    logger.info("Exported %d assignees and %d todos", len(payload.assignees), len(payload.todos))
    return payload


def import_full(db: Session, payload: ImportFullRequest) -> Tuple[int, int]:
    """Replace every todo and assignee with the payload's contents.

    Runs as one transaction: on any failure nothing is replaced.
    """
    with write_lock:
        try:
            db.query(Todo).delete(synchronize_session=False)
            db.query(Assignee).delete(synchronize_session=False)

            created = [Assignee(name=a.name, color=a.color or None) for a in payload.assignees]
            db.add_all(created)
            db.flush()
            names = {a.name: a.id for a in created}

            for index, item in enumerate(payload.todos):
                db.add(Todo(
                    title=item.title,
                    description=item.description,
                    status=item.status,
                    priority=item.priority,
                    sort_order=item.sort_order if item.sort_order is not None else index,
                    assignee_id=_resolve(names, item.assignee_name),
                ))
            db.commit()
        except Exception as e:
            db.rollback()
            logger.exception("Full import failed")
            raise ImportFailed(f"Import failed: {e}") from e
    logger.info("Imported %d assignees and %d todos", len(created), len(payload.todos))
    return len(created), len(payload.todos)


def import_append(db: Session, todos: List[AppendTodo]) -> int:
    """Append todos after the current last sortOrder; untitled entries are skipped.

    The list check guards direct callers; HTTP bodies are already validated by the schema.
    """
    if not isinstance(todos, list):
        raise InvalidInput("todos must be a list")
    created = 0
    with write_lock:
        order = next_sort_order(db)
        names = {name: id_ for id_, name in db.query(Assignee.id, Assignee.name).all()}
        for item in todos:
            title = (item.title or "").strip()
            if not title:
                continue
            db.add(Todo(
                title=title,
                description=item.description,
                status=item.status or TodoStatus.TODO,
                priority=item.priority or TodoPriority.MEDIUM,
                sort_order=order,
                assignee_id=_resolve(names, item.assignee_name),
            ))
            order += 1
            created += 1
        db.commit()
    logger.info("Appended %d todos", created)
    return created
