from datetime import datetime, timedelta, UTC
from typing import Optional
from fastapi import Header
from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext
from todo_api.config import SECRET_KEY, ALGORITHM
from todo_api.errors import Unauthenticated
from todo_api.schemas.user import TokenUser
from todo_api.utils.logger import get_logger

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

logger = get_logger("auth")


def hash_password(password: str):
    """Hash a password after validating bcrypt's 72-byte limit.

    Raises ValueError if the UTF-8 encoding of the password exceeds 72 bytes.
    """
    if isinstance(password, str):
        b = password.encode("utf-8")
        if len(b) > 72:
            raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
    return pwd_context.hash(password)


def verify_password(plain, hashed):
    """Verify a plaintext password against a hash.

    A ValueError from the hasher (for example plain >72 bytes) counts as a mismatch.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False

def create_token(data: dict):
    data = data.copy()
    # read expiry at call-time so tests (and runtime overrides) that modify
    # todo_api.config.ACCESS_TOKEN_EXPIRE_MINUTES take effect immediately
    import todo_api.config as _cfg
    expire = datetime.now(UTC) + timedelta(minutes=_cfg.ACCESS_TOKEN_EXPIRE_MINUTES)
    data.update({"exp": int(expire.timestamp())})  # RFC 7519 exp is a Unix timestamp
    return jwt.encode(data, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: Optional[str]) -> TokenUser:
    if not token:
        raise Unauthenticated("Missing token")
    try:
        # jwt.decode validates exp automatically
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise Unauthenticated("Token has expired")
    except JWTError:
        raise Unauthenticated("Invalid token")
    user_id = payload.get("userId")
    username = payload.get("username")
    if user_id is None or not username:
        raise Unauthenticated("Invalid token: missing user")
    return TokenUser(user_id=user_id, username=username)


def _extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer ...`` header."""
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return None


def get_current_user(authorization: Optional[str] = Header(None)) -> TokenUser:
    try:
        return decode_token(_extract_token(authorization))
    except Unauthenticated as e:
        logger.warning("Rejected request: %s", e.message)
        raise
