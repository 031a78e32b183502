"""Character-class selection for password generation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordOptions:
    """Which character classes to draw from.

    All flags false is valid: generation then falls back to lowercase.
    """
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    def selected_classes(self) -> list[str]:
        """Names of the selected classes, in alphabet order."""
        flags = [
            ("uppercase", self.include_uppercase),
            ("lowercase", self.include_lowercase),
            ("numbers", self.include_numbers),
            ("symbols", self.include_symbols),
        ]
        return [name for name, selected in flags if selected]
