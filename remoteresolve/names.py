"""Generation of length-restricted object names."""

from __future__ import annotations

import random

MAX_NAME_LENGTH = 63
RANDOM_LENGTH = 5
MAX_GENERATED_NAME_LENGTH = MAX_NAME_LENGTH - RANDOM_LENGTH - 1

# Characters used for random suffixes; vowels and look-alikes are left out.
_SUFFIX_ALPHABET = "bcdfghjklmnpqrstvwxz2456789"


def _is_alphanumeric(char: str) -> bool:
    return char.isascii() and char.isalnum()


class SimpleNameGenerator:
    """Generates names no longer than a standard object name (63 characters)."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def _random_suffix(self) -> str:
        return "".join(self._rng.choice(_SUFFIX_ALPHABET) for _ in range(RANDOM_LENGTH))

    def restrict_length_with_random_suffix(self, base: str) -> str:
        """Return ``base``, shortened if needed, plus a five-character random suffix."""
        return f"{base[:MAX_GENERATED_NAME_LENGTH]}-{self._random_suffix()}"

    def restrict_length(self, base: str) -> str:
        """Return ``base`` shortened to 63 characters and ending in an alphanumeric.

        Raises ValueError if no alphanumeric character is left to end on.
        """
        trimmed = base[:MAX_NAME_LENGTH]
        while trimmed and not _is_alphanumeric(trimmed[-1]):
            trimmed = trimmed[:-1]
        if not trimmed:
            raise ValueError(f"name {base!r} has no alphanumeric character to end on")
        return trimmed


SIMPLE_NAME_GENERATOR = SimpleNameGenerator()