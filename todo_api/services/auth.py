from sqlalchemy.orm import Session
from todo_api.errors import Unauthenticated
from todo_api.models.user import User
from todo_api.schemas.user import TokenUser
from todo_api.utils.auth import verify_password, create_token, decode_token
from todo_api.utils.logger import get_logger

logger = get_logger("auth")


def login(db: Session, username: str, password: str) -> str:
    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Failed login for username=%r", username)
        raise Unauthenticated("Invalid credentials")
    logger.info("User %s logged in", user.username)
    return create_token({"userId": user.id, "username": user.username})


def verify(token: str) -> TokenUser:
    return decode_token(token)
