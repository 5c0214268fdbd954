"""One-time schema creation and default account seeding."""
from sqlalchemy.orm import Session
from todo_api.config import SEED_USERS
from todo_api.database import Base, engine, SessionLocal
from todo_api.models.user import User
from todo_api.models.assignee import Assignee  # noqa: F401 (registers table)
from todo_api.models.todo import Todo  # noqa: F401 (registers table)
from todo_api.utils.auth import hash_password
from todo_api.utils.logger import get_logger

logger = get_logger("bootstrap")


def seed_users(db: Session, users=None) -> int:
    """Insert the default accounts if, and only if, no user exists yet."""
    if db.query(User).first() is not None:
        return 0
    users = SEED_USERS if users is None else users
    for username, password in users:
        db.add(User(username=username, password_hash=hash_password(password)))
    db.commit()
    logger.info("Seeded %d default users", len(users))
    return len(users)


def init_db():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_users(db)
    finally:
        db.close()
