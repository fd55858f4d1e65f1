# securepass/api.py
"""Public entry points of securepass."""
from __future__ import annotations

from securepass.charset_utils import CharacterClass, filter_ambiguous, is_ambiguous
from securepass.entropy_utils import EntropySource, SystemEntropySource
from securepass.errors import (
    EmptyAlphabetError,
    EntropySourceError,
    InsufficientLengthError,
    InvalidLengthError,
    NoClassSelectedError,
    SecurePassError,
)
from securepass.password_utils import (
    GenerationRequest,
    fill_password,
    generate_many,
    password,
    secure_characters,
    uri_safe_password,
)
from securepass.sampling_utils import UnbiasedSampler, sample_index, secure_shuffle
from securepass.settings import DEFAULT_LENGTH, MAX_LENGTH

__all__ = [
    "CharacterClass",
    "DEFAULT_LENGTH",
    "EmptyAlphabetError",
    "EntropySource",
    "EntropySourceError",
    "GenerationRequest",
    "InsufficientLengthError",
    "InvalidLengthError",
    "MAX_LENGTH",
    "NoClassSelectedError",
    "SecurePassError",
    "SystemEntropySource",
    "UnbiasedSampler",
    "filter_ambiguous",
    "fill_password",
    "generate_many",
    "is_ambiguous",
    "password",
    "sample_index",
    "secure_characters",
    "secure_shuffle",
    "uri_safe_password",
]
