import logging
from todo_api.config import LOG_LEVEL

_configured = False


def setup_logging():
    """Attach a single stream handler to the ``todo_api`` logger tree."""
    global _configured
    if _configured:
        return
    logger = logging.getLogger("todo_api")
    logger.setLevel(LOG_LEVEL)
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"todo_api.{name}")
