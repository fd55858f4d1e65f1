# securepass/sampling_utils.py
from __future__ import annotations

import logging
from typing import MutableSequence, Optional, Sequence, TypeVar

from securepass.entropy_utils import EntropySource, fill_secure
from securepass.memory_utils import wipe
from securepass.settings import ENTROPY_CHUNK_SIZE, WIDE_SAMPLE_BYTES

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnbiasedSampler:
    """
    Uniform indices in [0, n) from a secure byte source, by rejection sampling.

    Entropy is pulled `chunk_size` bytes at a time and consumed across calls;
    rejected bytes are dropped, spent chunks are zeroed before each refill and
    on close(). Use as a context manager so the pool is wiped on every exit path.
    """

    def __init__(self, source: Optional[EntropySource] = None, chunk_size: int = ENTROPY_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self._source = source
        self._pool = bytearray(chunk_size)
        self._pos = chunk_size  # empty until first draw
        self.chunks_drawn = 0

    # ---- entropy pool ----
    def _refill(self) -> None:
        wipe(self._pool)
        fill_secure(self._pool, self._source)
        self._pos = 0
        self.chunks_drawn += 1

    def _next_byte(self) -> int:
        if self._pos >= len(self._pool):
            self._refill()
        b = self._pool[self._pos]
        self._pool[self._pos] = 0
        self._pos += 1
        return b

    def _next_wide(self, width: int) -> int:
        v = 0
        for _ in range(width):
            v = (v << 8) | self._next_byte()
        return v

    # ---- sampling ----
    def index(self, n: int) -> int:
        """Uniform integer in [0, n); n == 1 consumes no entropy."""
        if n < 1:
            raise ValueError(f"sample range must be >= 1, got {n}")
        if n == 1:
            return 0
        if n <= 256:
            limit = (256 // n) * n
            while True:
                b = self._next_byte()
                if b < limit:
                    return b % n
        width = max(WIDE_SAMPLE_BYTES, ((n - 1).bit_length() + 7) // 8)
        limit = ((1 << (8 * width)) // n) * n
        while True:
            v = self._next_wide(width)
            if v < limit:
                return v % n

    def choice(self, alphabet: Sequence[T]) -> T:
        return alphabet[self.index(len(alphabet))]

    def fill(self, dest: MutableSequence, alphabet: Sequence, start: int = 0, stop: Optional[int] = None) -> None:
        """Write an independent uniform pick from `alphabet` into dest[start:stop]."""
        n = len(alphabet)
        if n == 0:
            raise ValueError("cannot sample from an empty alphabet")
        end = len(dest) if stop is None else stop
        for i in range(start, end):
            dest[i] = alphabet[self.index(n)]

    def close(self) -> None:
        wipe(self._pool)
        self._pos = len(self._pool)

    def __enter__(self) -> "UnbiasedSampler":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def sample_index(n: int, source: Optional[EntropySource] = None) -> int:
    """One-off uniform draw in [0, n)."""
    with UnbiasedSampler(source, chunk_size=16) as sampler:
        return sampler.index(n)


def secure_shuffle(buf: MutableSequence, sampler: Optional[UnbiasedSampler] = None) -> None:
    """
    In-place Fisher–Yates: for i = m-1 .. 1 swap buf[i] with buf[index(i + 1)].
    Every permutation is equally likely; the multiset is unchanged.
    """
    if sampler is None:
        with UnbiasedSampler() as own:
            secure_shuffle(buf, own)
        return
    for i in range(len(buf) - 1, 0, -1):
        j = sampler.index(i + 1)
        buf[i], buf[j] = buf[j], buf[i]
