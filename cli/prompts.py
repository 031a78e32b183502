"""Shared CLI prompt utilities.

Collects the password length and character-class options interactively.
Invalid input is rejected and asked again, with no retry limit and no way
to cancel. End of input (EOFError) is left to propagate to the caller.
"""

import re
from typing import Optional

from core import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH, PasswordOptions


# Unsigned ASCII decimal, optionally with a leading '+'
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no"}


def parse_length(val: str) -> Optional[int]:
    """Parse a length answer.

    Args:
        val: Raw input line

    Returns:
        Length as integer, or None if not a number in the allowed range
    """
    val = val.strip()
    if not _UNSIGNED_INT.fullmatch(val):
        return None

    length = int(val)
    if MIN_PASSWORD_LENGTH <= length <= MAX_PASSWORD_LENGTH:
        return length
    return None


def parse_yes_no(val: str) -> Optional[bool]:
    """Parse a yes/no answer.

    Returns:
        True for y/yes, False for n/no (any case), None otherwise
    """
    ans = val.strip().lower()
    if ans in YES_ANSWERS:
        return True
    if ans in NO_ANSWERS:
        return False
    return None


def collect_length() -> int:
    """Prompt user until a valid password length is entered.

    Returns:
        Length between MIN_PASSWORD_LENGTH and MAX_PASSWORD_LENGTH inclusive
    """
    while True:
        length = parse_length(
            input(f"Enter password length ({MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH}): ")
        )
        if length is not None:
            return length
        print(f"Please enter a number between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}.")


def collect_yes_no(prompt: str) -> bool:
    """Ask a yes/no question until answered with y, yes, n or no."""
    while True:
        answer = parse_yes_no(input(f"{prompt} "))
        if answer is not None:
            return answer
        print("Please enter 'y' or 'n'.")


def collect_options() -> PasswordOptions:
    """Prompt user to choose character types for password generation.

    Selecting no type at all is accepted; generation then uses lowercase.
    """
    print("\nSelect character types (y/n):")

    return PasswordOptions(
        include_uppercase=collect_yes_no("Include uppercase letters (A-Z)?"),
        include_lowercase=collect_yes_no("Include lowercase letters (a-z)?"),
        include_numbers=collect_yes_no("Include numbers (0-9)?"),
        include_symbols=collect_yes_no("Include symbols (!@#$%^&*)?"),
    )
