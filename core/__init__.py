"""Password Generator Core Package.

Provides the building blocks shared by the CLI and the API:
- config: Centralized configuration constants
- options: Character-class selection
- rng: Linear-congruential pseudo-random source
- activity_log: Rotating-file logging of generation events
"""

# Configuration constants
from core.config import (
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
    UPPERCASE_CHARS,
    LOWERCASE_CHARS,
    NUMBER_CHARS,
    SYMBOL_CHARS,
    DEFAULT_ALPHABET,
    LOG_DIR,
    LOG_FILE,
)

# Data model
from core.options import PasswordOptions

# Random source
from core.rng import LinearCongruentialGenerator

# Logging
from core.activity_log import configure_logging, log_generation_event

__all__ = [
    # Config
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "DEFAULT_PASSWORD_LENGTH",
    "UPPERCASE_CHARS",
    "LOWERCASE_CHARS",
    "NUMBER_CHARS",
    "SYMBOL_CHARS",
    "DEFAULT_ALPHABET",
    "LOG_DIR",
    "LOG_FILE",
    # Options
    "PasswordOptions",
    # RNG
    "LinearCongruentialGenerator",
    # Logging
    "configure_logging",
    "log_generation_event",
]
