"""Activity logging for password generation.

Writes one line per generated password to a rotating log file.
The generated password itself is never logged.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import LOG_DIR, LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT


# Module-level state
_logging_configured = False

logger = logging.getLogger(__name__)


def ensure_log_directory() -> None:
    """Create the log directory if it doesn't exist.

    On Unix systems, the directory is created with mode 0700 (owner only).
    """
    os.makedirs(LOG_DIR, mode=0o700, exist_ok=True)


def configure_logging() -> bool:
    """Configure standard logging with rotation on first use.

    An unwritable log location leaves logging unconfigured; generation
    carries on without a log file.

    Returns:
        True if the rotating file handler is attached
    """
    global _logging_configured
    if _logging_configured:
        return True

    try:
        ensure_log_directory()
        handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        )
    except OSError:
        return False
    handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(handler)

    _logging_configured = True
    return True


def log_generation_event(
    length: int,
    classes: list[str],
    alphabet_size: int,
    strength: str,
    source: str = "cli"
) -> None:
    """Record a password generation.

    Args:
        length: Generated password length
        classes: Selected character classes (empty when the fallback was used)
        alphabet_size: Number of characters drawn from
        strength: Strength label of the result
        source: Where the request came from ('cli' or 'api')
    """
    logger.info(
        "Password generated - source: %s - length: %d - classes: %s - alphabet: %d - strength: %s",
        source,
        length,
        ",".join(classes) or "default",
        alphabet_size,
        strength,
    )
