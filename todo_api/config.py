import os
from dotenv import load_dotenv

load_dotenv()

SECRET_KEY = os.environ.get("SECRET_KEY", "CHANGE_ME_TODO_SECRET")
ALGORITHM = os.environ.get("ALGORITHM", "HS256")
# 24h validity window
ACCESS_TOKEN_EXPIRE_MINUTES = float(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

# Default to local SQLite for dev/tests; override via env in Docker/Prod
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./todo.db")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 8080))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]


def _parse_seed_users(raw: str):
    users = []
    for pair in raw.split(","):
        username, sep, password = pair.strip().partition(":")
        if username and sep and password:
            users.append((username, password))
    return users


# Accounts inserted on first startup when the users table is empty
SEED_USERS = _parse_seed_users(os.environ.get("SEED_USERS", "admin:admin123,guest:guest123"))
