# securepass/errors.py
"""Exceptions raised by securepass, one type per failure kind."""
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from securepass.charset_utils import CharacterClass

__all__ = [
    "SecurePassError",
    "InvalidLengthError",
    "NoClassSelectedError",
    "InsufficientLengthError",
    "EmptyAlphabetError",
    "EntropySourceError",
]


class SecurePassError(Exception):
    """Base exception for securepass errors."""


class InvalidLengthError(SecurePassError, ValueError):
    """Requested length (or count) is out of range."""


class NoClassSelectedError(SecurePassError, ValueError):
    """No character class enabled for password composition."""

    def __init__(self, message: str = "At least one character class must be enabled.") -> None:
        super().__init__(message)


class InsufficientLengthError(SecurePassError, ValueError):
    """Length too short to fit one character of every enabled class."""

    def __init__(self, length: int, required: int) -> None:
        super().__init__(
            f"Password length ({length}) is too short for {required} required character classes."
        )
        self.length = length
        self.required = required


class EmptyAlphabetError(SecurePassError, ValueError):
    """A supplied or derived alphabet has no characters.

    ``character_class`` is set when a built-in class lost all of its
    characters to the ambiguity filter, and is None for caller alphabets.
    """

    def __init__(self, character_class: Optional["CharacterClass"] = None) -> None:
        if character_class is None:
            message = "Alphabet must contain at least one character."
        else:
            message = (
                f"Character class '{character_class.value}' is empty after removing ambiguous characters."
            )
        super().__init__(message)
        self.character_class = character_class


class EntropySourceError(SecurePassError, RuntimeError):
    """The secure random source could not supply bytes."""
