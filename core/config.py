"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Nothing here is read from the environment: the generator is configured
interactively and the constants below only describe its fixed behavior.
"""

import os

# Password generation
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
DEFAULT_PASSWORD_LENGTH = 16

# Literal character sets, concatenated in this order when selected
UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
NUMBER_CHARS = "0123456789"
SYMBOL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Used when no character class is selected
DEFAULT_ALPHABET = LOWERCASE_CHARS

# Linear-congruential generator constants (classic ANSI C values)
# NOT cryptographically secure: seeded from the wall clock, period <= 2**31
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31

# Activity log
LOG_DIR = "logs"
LOG_FILE = os.path.join(LOG_DIR, "passgen.log")
LOG_MAX_BYTES = 1024 * 1024  # 1MB
LOG_BACKUP_COUNT = 3

# API
API_VERSION = "1.0.0"
API_RATE_LIMIT = "100/minute"
