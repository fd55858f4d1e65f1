# securepass/password_utils.py
from __future__ import annotations

import logging
from array import array
from dataclasses import dataclass
from typing import List, Optional, Tuple

from securepass.charset_utils import (
    CharacterClass,
    build_class_alphabets,
    classes_from_flags,
)
from securepass.entropy_utils import EntropySource
from securepass.errors import (
    EmptyAlphabetError,
    InsufficientLengthError,
    InvalidLengthError,
    NoClassSelectedError,
)
from securepass.memory_utils import wipe
from securepass.sampling_utils import UnbiasedSampler, secure_shuffle
from securepass.settings import DEFAULT_LENGTH, MAX_BATCH, MAX_LENGTH

logger = logging.getLogger(__name__)


# =========================
# Request
# =========================
@dataclass(frozen=True)
class GenerationRequest:
    length: int
    classes: Tuple[CharacterClass, ...]
    exclude_ambiguous: bool = False

    @classmethod
    def from_flags(
        cls,
        length: int,
        lower: bool = True,
        upper: bool = True,
        number: bool = True,
        special: bool = True,
        exclude_ambiguous: bool = False,
    ) -> "GenerationRequest":
        return cls(length, classes_from_flags(lower, upper, number, special), exclude_ambiguous)

    def validate(self) -> None:
        if self.length <= 0:
            raise InvalidLengthError(f"Password length must be greater than 0, got {self.length}.")
        if self.length > MAX_LENGTH:
            raise InvalidLengthError(f"Password length must not exceed {MAX_LENGTH}, got {self.length}.")
        if not self.classes:
            raise NoClassSelectedError()
        if self.length < len(set(self.classes)):
            raise InsufficientLengthError(self.length, len(set(self.classes)))


# =========================
# Composition
# =========================
def _compose(
    dest: bytearray,
    request: GenerationRequest,
    source: Optional[EntropySource],
) -> None:
    """
    Fill `dest` (len == request.length) with a password:
    one char per enabled class (fixed order), the rest from the combined
    alphabet, then a full Fisher–Yates shuffle.
    """
    request.validate()
    with build_class_alphabets(request.classes, request.exclude_ambiguous) as alphabets, \
            UnbiasedSampler(source) as sampler:
        k = len(alphabets)
        for pos, (_, alpha) in enumerate(alphabets.groups):
            dest[pos] = sampler.choice(alpha)
        sampler.fill(dest, alphabets.combined, start=k)
        secure_shuffle(dest, sampler)
        logger.debug(
            "Composed password: length=%d classes=%s combined=%d chunks=%d",
            len(dest), [c.value for c in alphabets.classes],
            len(alphabets.combined), sampler.chunks_drawn,
        )


def fill_password(
    dest: bytearray,
    *,
    include_lower: bool = True,
    include_upper: bool = True,
    include_number: bool = True,
    include_special: bool = True,
    exclude_ambiguous: bool = False,
    source: Optional[EntropySource] = None,
) -> bytearray:
    """
    Write an ASCII password of len(dest) bytes into the caller's buffer.
    The caller owns `dest` and is responsible for wiping it; on failure it is
    zeroed here before the error propagates.
    """
    request = GenerationRequest.from_flags(
        len(dest), include_lower, include_upper, include_number, include_special, exclude_ambiguous
    )
    try:
        _compose(dest, request, source)
    except BaseException:
        wipe(dest)
        raise
    return dest


def password(
    length: int = DEFAULT_LENGTH,
    include_lower: bool = True,
    include_upper: bool = True,
    include_number: bool = True,
    include_special: bool = True,
    exclude_ambiguous: bool = False,
    *,
    source: Optional[EntropySource] = None,
) -> str:
    """
    Secure password containing at least one character of every enabled class.

    Raises InvalidLengthError, NoClassSelectedError, InsufficientLengthError,
    EmptyAlphabetError or EntropySourceError.
    """
    request = GenerationRequest.from_flags(
        length, include_lower, include_upper, include_number, include_special, exclude_ambiguous
    )
    request.validate()
    buf = bytearray(request.length)
    try:
        _compose(buf, request, source)
        return buf.decode("ascii")
    finally:
        wipe(buf)


def uri_safe_password(
    length: int = DEFAULT_LENGTH,
    exclude_ambiguous: bool = False,
    *,
    source: Optional[EntropySource] = None,
) -> str:
    """Alphanumeric password (no percent-encoding needed in a URI)."""
    return password(length, True, True, True, False, exclude_ambiguous, source=source)


def generate_many(
    count: int,
    length: int = DEFAULT_LENGTH,
    include_lower: bool = True,
    include_upper: bool = True,
    include_number: bool = True,
    include_special: bool = True,
    exclude_ambiguous: bool = False,
    *,
    source: Optional[EntropySource] = None,
) -> List[str]:
    if count < 1 or count > MAX_BATCH:
        raise InvalidLengthError(f"Quantity must be between 1 and {MAX_BATCH}, got {count}.")
    return [
        password(
            length, include_lower, include_upper, include_number, include_special,
            exclude_ambiguous, source=source,
        )
        for _ in range(count)
    ]


# =========================
# Generic sampling
# =========================
def secure_characters(
    length: int,
    alphabet: str,
    *,
    source: Optional[EntropySource] = None,
) -> str:
    """
    `length` characters, each drawn independently and uniformly from `alphabet`.
    No class guarantee, no shuffle. Duplicate characters in `alphabet` weight
    the draw.
    """
    if not alphabet:
        raise EmptyAlphabetError()
    if length < 0:
        raise InvalidLengthError(f"Length must not be negative, got {length}.")
    if length > MAX_LENGTH:
        raise InvalidLengthError(f"Length must not exceed {MAX_LENGTH}, got {length}.")
    if length == 0:
        return ""

    codes = array("L", (ord(c) for c in alphabet))
    buf = array("L", [0]) * length
    try:
        with UnbiasedSampler(source) as sampler:
            sampler.fill(buf, codes)
        return "".join(map(chr, buf))
    finally:
        wipe(buf)
        wipe(codes)
