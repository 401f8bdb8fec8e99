"""
Centralized logging configuration

Configures one log format for every module, written to stdout and optionally
to a file. Modules keep using `logging.getLogger(__name__)`.
"""
import logging
import sys

from .config import settings

LOG_FORMAT = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s'


def setup_logging(level=None, log_file=None):
    """
    Configure the root logger

    Args:
        level: Log level name (defaults to settings.LOG_LEVEL)
        log_file: Optional file path (defaults to settings.LOG_FILE)
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_file = log_file or settings.LOG_FILE

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    # Reduce verbosity from external libraries
    logging.getLogger("psycopg2").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
