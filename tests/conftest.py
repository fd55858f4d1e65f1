# tests/conftest.py
from __future__ import annotations

import os

import pytest


class SequenceSource:
    """Serves a fixed byte sequence; fails once it runs out."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self.pos = 0
        self.calls = 0

    def fill(self, buf: bytearray) -> None:
        self.calls += 1
        n = len(buf)
        if self.pos + n > len(self.data):
            raise RuntimeError("test entropy exhausted")
        buf[:] = self.data[self.pos:self.pos + n]
        self.pos += n


class CycleSource:
    """Repeats a byte pattern forever."""

    def __init__(self, pattern: bytes) -> None:
        self.pattern = bytes(pattern)
        self.calls = 0

    def fill(self, buf: bytearray) -> None:
        self.calls += 1
        reps = len(buf) // len(self.pattern) + 1
        buf[:] = (self.pattern * reps)[:len(buf)]


class FailingSource:
    """Works for `ok_calls` fills, then raises OSError."""

    def __init__(self, ok_calls: int = 0) -> None:
        self.ok_calls = ok_calls
        self.calls = 0

    def fill(self, buf: bytearray) -> None:
        self.calls += 1
        if self.calls > self.ok_calls:
            raise OSError("entropy device unavailable")
        buf[:] = os.urandom(len(buf))


@pytest.fixture
def zero_source() -> CycleSource:
    return CycleSource(b"\x00")


@pytest.fixture
def failing_source() -> FailingSource:
    return FailingSource()
