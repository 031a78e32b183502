"""Tests for password generation."""

import string

import pytest

from cli.generator import build_alphabet, generate_password
from core import (
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    UPPERCASE_CHARS,
    LOWERCASE_CHARS,
    NUMBER_CHARS,
    SYMBOL_CHARS,
    LinearCongruentialGenerator,
    PasswordOptions,
)


NO_CLASSES = PasswordOptions(False, False, False, False)
ALL_CLASSES = PasswordOptions(True, True, True, True)


def all_option_combinations():
    return [
        PasswordOptions(upper, lower, digits, symbols)
        for upper in (True, False)
        for lower in (True, False)
        for digits in (True, False)
        for symbols in (True, False)
    ]


class TestLinearCongruentialGenerator:
    """Test cases for the seeded pseudo-random source."""

    def test_known_sequence_from_zero(self):
        """Seed 0 should follow the classic ANSI C sequence."""
        rng = LinearCongruentialGenerator(seed=0)
        assert [rng.next() for _ in range(4)] == [12345, 1406932606, 654583775, 1449466924]

    def test_state_stays_below_modulus(self):
        """A nanosecond-sized seed should be reduced below 2**31."""
        rng = LinearCongruentialGenerator(seed=1_700_000_000_123_456_789)
        for _ in range(100):
            assert 0 <= rng.next() < 2 ** 31

    def test_default_seed_from_clock(self, monkeypatch):
        """Without a seed the generator should read the nanosecond clock."""
        monkeypatch.setattr("core.rng.time.time_ns", lambda: 42)
        assert LinearCongruentialGenerator().seed == 42

    def test_choice_empty_alphabet(self):
        """Choosing from an empty alphabet should raise."""
        with pytest.raises(ValueError):
            LinearCongruentialGenerator(seed=1).choice("")


class TestBuildAlphabet:
    """Test cases for alphabet composition."""

    def test_all_classes_order(self):
        """Sets should be concatenated uppercase, lowercase, numbers, symbols."""
        assert build_alphabet(ALL_CLASSES) == (
            UPPERCASE_CHARS + LOWERCASE_CHARS + NUMBER_CHARS + SYMBOL_CHARS
        )

    def test_literal_set_sizes(self):
        """Literal sets should have 26, 26, 10 and 26 characters."""
        assert UPPERCASE_CHARS == string.ascii_uppercase
        assert LOWERCASE_CHARS == string.ascii_lowercase
        assert NUMBER_CHARS == string.digits
        assert len(SYMBOL_CHARS) == 26
        assert len(set(SYMBOL_CHARS)) == 26

    def test_no_classes_falls_back_to_lowercase(self):
        """No selected class should give the lowercase set."""
        assert build_alphabet(NO_CLASSES) == LOWERCASE_CHARS

    @pytest.mark.parametrize("options", all_option_combinations())
    def test_alphabet_is_union_of_selected_sets(self, options):
        """Alphabet should be exactly the selected sets, no duplicates added."""
        expected = ""
        if options.include_uppercase:
            expected += UPPERCASE_CHARS
        if options.include_lowercase:
            expected += LOWERCASE_CHARS
        if options.include_numbers:
            expected += NUMBER_CHARS
        if options.include_symbols:
            expected += SYMBOL_CHARS
        expected = expected or LOWERCASE_CHARS

        alphabet = build_alphabet(options)
        assert alphabet == expected
        assert len(alphabet) == len(set(alphabet))


class TestPasswordGenerator:
    """Test cases for password generation."""

    def test_custom_length(self):
        """Password should match requested length."""
        for length in [MIN_PASSWORD_LENGTH, 12, 20, 32, 64, MAX_PASSWORD_LENGTH]:
            password = generate_password(length, ALL_CLASSES)
            assert len(password) == length

    @pytest.mark.parametrize("options", all_option_combinations())
    def test_characters_from_alphabet(self, options):
        """Every character should come from the implied alphabet."""
        alphabet = set(build_alphabet(options))
        password = generate_password(64, options)
        assert set(password) <= alphabet

    def test_fallback_only_lowercase(self):
        """No character classes should produce only lowercase."""
        for length in range(MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH + 1, 15):
            password = generate_password(length, NO_CLASSES)
            assert len(password) == length
            assert all(c in string.ascii_lowercase for c in password)

    def test_only_digits(self):
        """Password with only digits should contain only digits."""
        password = generate_password(12, PasswordOptions(False, False, True, False))
        assert all(c in string.digits for c in password)

    def test_fixed_seed_reproducible(self):
        """Two calls with the same seed should be identical."""
        first = generate_password(32, ALL_CLASSES, seed=123456789)
        second = generate_password(32, ALL_CLASSES, seed=123456789)
        assert first == second

    def test_different_seeds_differ(self):
        """Different seeds should give different passwords."""
        assert generate_password(32, ALL_CLASSES, seed=1) != generate_password(32, ALL_CLASSES, seed=2)

    def test_known_output_for_seed_zero(self):
        """Seed 0 over lowercase should match hand-computed draws."""
        assert generate_password(8, NO_CLASSES, seed=0) == "vobwzqlk"

    def test_injected_rng(self):
        """An injected generator should be used and advanced."""
        rng = LinearCongruentialGenerator(seed=0)
        password = generate_password(4, PasswordOptions(False, True, False, False), rng=rng)
        assert password == "vobw"
        assert rng.seed == 1449466924

    def test_seed_taken_from_clock(self, monkeypatch):
        """Unseeded calls should be reproducible once the clock is pinned."""
        monkeypatch.setattr("core.rng.time.time_ns", lambda: 1_700_000_000_000_000_000)
        assert generate_password(16, ALL_CLASSES) == generate_password(
            16, ALL_CLASSES, seed=1_700_000_000_000_000_000
        )

    def test_zero_length(self):
        """Length is not bounded here; zero gives an empty password."""
        assert generate_password(0, ALL_CLASSES, seed=5) == ""
