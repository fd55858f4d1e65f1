# securepass/memory_utils.py
from __future__ import annotations

from array import array
from typing import MutableSequence, Optional, Union


Wipeable = Union[bytearray, memoryview, array, MutableSequence]


def wipe(buf: Optional[Wipeable]) -> None:
    """
    Overwrite a mutable buffer with zeros in place.
    - bytearray / writable memoryview / array: every element set to 0.
    - list: elements set to 0 then the list is cleared.
    CPython may still hold copies elsewhere (immutable str/bytes can't be wiped),
    so secret material should live in mutable buffers until the last moment.
    """
    if buf is None:
        return
    if isinstance(buf, memoryview):
        if buf.readonly:
            raise TypeError("cannot wipe a read-only memoryview")
        buf.cast("B")[:] = bytes(buf.nbytes)
        return
    if isinstance(buf, bytearray):
        buf[:] = bytes(len(buf))
        return
    if isinstance(buf, array):
        for i in range(len(buf)):
            buf[i] = 0
        return
    for i in range(len(buf)):
        buf[i] = 0
    if isinstance(buf, list):
        buf.clear()


def wipe_all(*bufs: Optional[Wipeable]) -> None:
    for b in bufs:
        wipe(b)


def is_wiped(buf: Wipeable) -> bool:
    return all(x == 0 for x in buf)
