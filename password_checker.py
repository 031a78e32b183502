from enum import Enum


class StrengthLabel(str, Enum):
    VERY_STRONG = "Very Strong"
    STRONG = "Strong"
    MEDIUM = "Medium"
    WEAK = "Weak"

    def __str__(self):
        return self.value


def count_character_variety(password):
    # one point per class present: upper, lower, decimal digit, anything else
    checks = [
        any(c.isupper() for c in password),
        any(c.islower() for c in password),
        any(c.isdecimal() for c in password),
        any(not c.isalnum() for c in password),
    ]
    return sum(checks)


def calculate_strength(password):
    length = len(password)
    variety = count_character_variety(password)

    # first match wins
    if length >= 16 and variety == 4:
        return StrengthLabel.VERY_STRONG
    if length >= 12 and variety >= 3:
        return StrengthLabel.STRONG
    if length >= 10 and variety >= 2:
        return StrengthLabel.MEDIUM
    return StrengthLabel.WEAK
