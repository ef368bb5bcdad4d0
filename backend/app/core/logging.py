"""
Centralized logging configuration for the course chat backend.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ["httpx", "httpcore", "openai", "sqlalchemy.engine", "multipart"]


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure and return the application logger.

    Args:
        level: Log level name for the ``app`` logger (e.g. "INFO", "DEBUG")

    Returns:
        The configured ``app`` logger. Module loggers created with
        ``logging.getLogger(__name__)`` inside the package propagate to it.
    """
    logger = logging.getLogger("app")

    # Only attach a handler once (the lifespan may run several times in tests)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level.upper())
    logger.propagate = False

    for log_name in NOISY_LOGGERS:
        logging.getLogger(log_name).setLevel(logging.WARNING)

    return logger
