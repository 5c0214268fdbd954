from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from todo_api.errors import Conflict, NotFound
from todo_api.models.assignee import Assignee
from todo_api.models.todo import Todo
from todo_api.schemas.assignee import AssigneeCreate, AssigneeUpdate, AssigneeOut
from todo_api.services.todos import write_lock
from todo_api.utils.logger import get_logger

logger = get_logger("assignees")


def list_assignees(db: Session):
    return db.query(Assignee).order_by(Assignee.name.asc()).all()


def get_assignee(db: Session, assignee_id: int) -> Assignee:
    assignee = db.query(Assignee).filter(Assignee.id == assignee_id).first()
    if not assignee:
        raise NotFound(f"Assignee {assignee_id} not found")
    return assignee


def _name_taken(db: Session, name: str, exclude_id=None) -> bool:
    q = db.query(Assignee).filter(Assignee.name == name)
    if exclude_id is not None:
        q = q.filter(Assignee.id != exclude_id)
    return q.first() is not None


def _commit_unique(db: Session, name: str):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict(f"Assignee name already exists: {name}")


def create_assignee(db: Session, data: AssigneeCreate) -> Assignee:
    if _name_taken(db, data.name):
        raise Conflict(f"Assignee name already exists: {data.name}")
    assignee = Assignee(name=data.name, color=data.color or None)
    db.add(assignee)
    _commit_unique(db, data.name)
    db.refresh(assignee)
    logger.info("Created assignee id=%s name=%r", assignee.id, assignee.name)
    return assignee


def update_assignee(db: Session, assignee_id: int, data: AssigneeUpdate) -> Assignee:
    assignee = get_assignee(db, assignee_id)
    if _name_taken(db, data.name, exclude_id=assignee_id):
        raise Conflict(f"Assignee name already exists: {data.name}")
    assignee.name = data.name
    if "color" in data.model_fields_set:
        assignee.color = data.color or None
    _commit_unique(db, data.name)
    db.refresh(assignee)
    logger.info("Updated assignee id=%s", assignee.id)
    return assignee


def delete_assignee(db: Session, assignee_id: int) -> AssigneeOut:
    """Detach the assignee from its todos, then remove it, in one transaction."""
    with write_lock:
        assignee = get_assignee(db, assignee_id)
        deleted = AssigneeOut.model_validate(assignee)
        detached = (
            db.query(Todo)
            .filter(Todo.assignee_id == assignee_id)
            .update({Todo.assignee_id: None}, synchronize_session=False)
        )
        db.delete(assignee)
        db.commit()
    logger.info("Deleted assignee id=%s, detached %d todos", assignee_id, detached)
    return deleted
