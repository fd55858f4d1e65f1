# securepass/entropy_utils.py
from __future__ import annotations

import logging
import os
from typing import Protocol, runtime_checkable

from securepass.errors import EntropySourceError

logger = logging.getLogger(__name__)


@runtime_checkable
class EntropySource(Protocol):
    """Anything that can fill a buffer with cryptographically secure bytes."""

    def fill(self, buf: bytearray) -> None:
        ...


class SystemEntropySource:
    """OS CSPRNG (getrandom / CryptGenRandom) via os.urandom."""

    def fill(self, buf: bytearray) -> None:
        n = len(buf)
        if n == 0:
            return
        buf[:] = os.urandom(n)

    def __repr__(self) -> str:
        return "SystemEntropySource()"


# shared, stateless: os.urandom is thread-safe
SYSTEM_SOURCE = SystemEntropySource()


def default_source() -> EntropySource:
    return SYSTEM_SOURCE


def fill_secure(buf: bytearray, source: EntropySource | None = None) -> None:
    """
    Fill `buf` from `source` (default: OS CSPRNG).
    Any failure, including a short or resized fill, surfaces as EntropySourceError.
    Never falls back to a weaker generator.
    """
    src = source if source is not None else SYSTEM_SOURCE
    expected = len(buf)
    try:
        src.fill(buf)
    except EntropySourceError:
        logger.error("Entropy source %r failed to supply %d bytes", src, expected)
        raise
    except Exception as exc:
        logger.error("Entropy source %r failed to supply %d bytes: %s", src, expected, exc)
        raise EntropySourceError(f"Secure random source failed: {exc}") from exc
    if len(buf) != expected:
        logger.error("Entropy source %r returned %d bytes, expected %d", src, len(buf), expected)
        raise EntropySourceError(
            f"Secure random source returned {len(buf)} bytes, expected {expected}."
        )
