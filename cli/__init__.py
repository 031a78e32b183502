"""CLI package for the password generator.

Provides the interactive prompts and the generation flow.
"""

from cli.generator import (
    build_alphabet,
    display_result,
    generate_password,
    generate_password_flow,
)
from cli.prompts import collect_length, collect_options, collect_yes_no

__all__ = [
    "build_alphabet",
    "display_result",
    "generate_password",
    "generate_password_flow",
    "collect_length",
    "collect_options",
    "collect_yes_no",
]
