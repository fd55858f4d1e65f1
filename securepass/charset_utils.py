# securepass/charset_utils.py
from __future__ import annotations

import enum
import logging
from typing import Iterable, List, Tuple

from securepass.errors import EmptyAlphabetError
from securepass.memory_utils import wipe
from securepass.settings import (
    AMBIGUOUS_CHARACTERS,
    LOWER_CHARS,
    NUMBER_CHARS,
    SPECIAL_JSON_SAFE,
    UPPER_CHARS,
)

logger = logging.getLogger(__name__)


class CharacterClass(enum.Enum):
    """Built-in character classes, declared in composition order."""

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def alphabet(self) -> str:
        return _CLASS_ALPHABETS[self]

    @property
    def filterable(self) -> bool:
        # none of the ambiguous characters is a special character
        return self is not CharacterClass.SPECIAL


_CLASS_ALPHABETS = {
    CharacterClass.LOWER: LOWER_CHARS,
    CharacterClass.UPPER: UPPER_CHARS,
    CharacterClass.DIGIT: NUMBER_CHARS,
    CharacterClass.SPECIAL: SPECIAL_JSON_SAFE,
}

CLASS_ORDER: Tuple[CharacterClass, ...] = tuple(CharacterClass)

# =========================
# Ambiguity table (built once, read-only)
# =========================
AMBIGUOUS = frozenset(AMBIGUOUS_CHARACTERS)
# ASCII membership table: _AMBIGUOUS_ASCII[b] == 1 if byte b is ambiguous
_AMBIGUOUS_ASCII = bytes(1 if chr(b) in AMBIGUOUS else 0 for b in range(128))


def is_ambiguous(ch: str | int) -> bool:
    """True if `ch` (a character or an ASCII code) is visually confusable."""
    if isinstance(ch, int):
        return 0 <= ch < 128 and _AMBIGUOUS_ASCII[ch] == 1
    return ch in AMBIGUOUS


def filter_ambiguous_into(alphabet: bytes | bytearray, out: bytearray) -> int:
    """
    Copy the non-ambiguous bytes of an ASCII `alphabet` into `out`, keeping order.
    `out` must be at least len(alphabet) long; returns how many bytes were written.
    """
    if len(out) < len(alphabet):
        raise ValueError("scratch buffer is smaller than the alphabet")
    n = 0
    for b in alphabet:
        if b < 128 and _AMBIGUOUS_ASCII[b]:
            continue
        out[n] = b
        n += 1
    return n


def filter_ambiguous(alphabet: str) -> str:
    return "".join(c for c in alphabet if c not in AMBIGUOUS)


# =========================
# Alphabet builder
# =========================
class ClassAlphabets:
    """
    Per-class alphabets (bytearrays, fixed class order) and their concatenation.
    Owned by one generation call; wipe() when done.
    """

    __slots__ = ("groups", "combined")

    def __init__(self, groups: List[Tuple[CharacterClass, bytearray]], combined: bytearray) -> None:
        self.groups = groups
        self.combined = combined

    @property
    def classes(self) -> Tuple[CharacterClass, ...]:
        return tuple(cls for cls, _ in self.groups)

    def alphabet_for(self, cls: CharacterClass) -> bytearray:
        for c, alpha in self.groups:
            if c is cls:
                return alpha
        raise KeyError(cls)

    def wipe(self) -> None:
        for _, alpha in self.groups:
            wipe(alpha)
        wipe(self.combined)

    def __enter__(self) -> "ClassAlphabets":
        return self

    def __exit__(self, *exc) -> None:
        self.wipe()

    def __len__(self) -> int:
        return len(self.groups)


def _class_alphabet(cls: CharacterClass, exclude_ambiguous: bool) -> bytearray:
    raw = cls.alphabet.encode("ascii")
    if not (exclude_ambiguous and cls.filterable):
        return bytearray(raw)
    scratch = bytearray(len(raw))
    n = filter_ambiguous_into(raw, scratch)
    if n == 0:
        raise EmptyAlphabetError(cls)
    del scratch[n:]
    return scratch


def build_class_alphabets(classes: Iterable[CharacterClass], exclude_ambiguous: bool = False) -> ClassAlphabets:
    """
    Returns ClassAlphabets for the enabled `classes`:
      - groups: one alphabet per class, in LOWER, UPPER, DIGIT, SPECIAL order
        (filtered when exclude_ambiguous, SPECIAL is never filtered)
      - combined: concatenation of the groups, each class once
    """
    enabled = set(classes)
    groups: List[Tuple[CharacterClass, bytearray]] = []
    try:
        for cls in CLASS_ORDER:
            if cls in enabled:
                groups.append((cls, _class_alphabet(cls, exclude_ambiguous)))
        combined = bytearray(sum(len(a) for _, a in groups))
        pos = 0
        for _, alpha in groups:
            combined[pos:pos + len(alpha)] = alpha
            pos += len(alpha)
    except BaseException:
        for _, alpha in groups:
            wipe(alpha)
        raise

    logger.debug(
        "Built alphabets %s (combined size %d, exclude_ambiguous=%s)",
        [f"{c.value}:{len(a)}" for c, a in groups], len(combined), exclude_ambiguous,
    )
    return ClassAlphabets(groups, combined)


def build_charsets(
    use_lower: bool = True,
    use_upper: bool = True,
    use_digits: bool = True,
    use_special: bool = True,
    exclude_ambiguous: bool = False,
) -> ClassAlphabets:
    return build_class_alphabets(
        classes_from_flags(use_lower, use_upper, use_digits, use_special),
        exclude_ambiguous,
    )


def classes_from_flags(lower: bool, upper: bool, digit: bool, special: bool) -> Tuple[CharacterClass, ...]:
    flags = (lower, upper, digit, special)
    return tuple(cls for cls, on in zip(CLASS_ORDER, flags) if on)
