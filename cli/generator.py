"""Password generation CLI flows.

Builds the alphabet from the selected character classes, draws the password
from a linear-congruential generator and displays it with its strength.

SECURITY: passwords produced here are NOT cryptographically secure. The
generator is seeded from the wall clock and its output can be predicted.
"""

import logging
from typing import Optional

from core import (
    UPPERCASE_CHARS,
    LOWERCASE_CHARS,
    NUMBER_CHARS,
    SYMBOL_CHARS,
    DEFAULT_ALPHABET,
    LinearCongruentialGenerator,
    PasswordOptions,
    log_generation_event,
)
from password_checker import StrengthLabel, calculate_strength

from cli.prompts import collect_length, collect_options


logger = logging.getLogger(__name__)

SEPARATOR = "━" * 26

STRENGTH_ICONS = {
    StrengthLabel.VERY_STRONG: "💪",
    StrengthLabel.STRONG: "🔒",
    StrengthLabel.MEDIUM: "⚠️ ",
    StrengthLabel.WEAK: "❌",
}


def build_alphabet(options: PasswordOptions) -> str:
    """Concatenate the selected character sets.

    Order is always uppercase, lowercase, numbers, symbols. When nothing is
    selected the lowercase set is used instead, silently.

    Args:
        options: Selected character classes

    Returns:
        Non-empty alphabet string
    """
    pools = []
    if options.include_uppercase:
        pools.append(UPPERCASE_CHARS)
    if options.include_lowercase:
        pools.append(LOWERCASE_CHARS)
    if options.include_numbers:
        pools.append(NUMBER_CHARS)
    if options.include_symbols:
        pools.append(SYMBOL_CHARS)

    return ''.join(pools) or DEFAULT_ALPHABET


def generate_password(
    length: int,
    options: PasswordOptions,
    seed: Optional[int] = None,
    rng: Optional[LinearCongruentialGenerator] = None
) -> str:
    """Generate a password of exactly ``length`` characters.

    Each character is ``alphabet[state mod len(alphabet)]`` after one LCG
    step. Length is not range-checked here; zero or less gives "".

    Args:
        length: Password length
        options: Character classes to draw from
        seed: Fixed starting state, for reproducible output
        rng: Generator to draw from; overrides seed

    Returns:
        Generated password string
    """
    alphabet = build_alphabet(options)
    if not options.selected_classes():
        logger.info("No character classes selected, using lowercase fallback")
    if rng is None:
        rng = LinearCongruentialGenerator(seed)

    return ''.join(rng.choice(alphabet) for _ in range(length))


def display_result(password: str, strength: StrengthLabel) -> None:
    """Print the password between separator lines, then its strength."""
    print("\n✨ Your generated password:")
    print(SEPARATOR)
    print(password)
    print(SEPARATOR)
    print(f"\n📊 Password strength: {STRENGTH_ICONS[strength]} {strength}")
    print("(Generated with a time-seeded pseudo-random generator; not suitable for high-value secrets.)")


def generate_password_flow() -> tuple[str, StrengthLabel]:
    """Full interactive flow for generating a password.

    Returns:
        Tuple of (password, strength)
    """
    length = collect_length()
    options = collect_options()

    password = generate_password(length, options)
    strength = calculate_strength(password)

    log_generation_event(
        length=length,
        classes=options.selected_classes(),
        alphabet_size=len(build_alphabet(options)),
        strength=strength.value,
        source="cli",
    )

    display_result(password, strength)
    return password, strength
