"""Identifier helpers for the hourlog time tracker.

New projects and time entries receive integer ids minted from their
content.  ``cyrb53`` is a fast 53‑bit string hash; it operates on UTF‑16
code units so that ids agree with those minted by the browser version
of the tracker.  ``mint_id`` mixes a timestamp and a random component
into the text so that two records created in the same instant still get
different ids.
"""
from __future__ import annotations

import random
import struct
import time
from typing import Container

MASK32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    """32‑bit wrapping multiplication."""
    return (a * b) & MASK32


def _code_units(text: str) -> tuple[int, ...]:
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def cyrb53(text: str, seed: int = 0) -> int:
    """
    Hash ``text`` into a non‑negative integer below ``2 ** 53``.

    Not a cryptographic hash: distinct strings collide only rarely,
    which is enough for local id minting.
    """
    h1 = (0xDEADBEEF ^ seed) & MASK32
    h2 = (0x41C6CE57 ^ seed) & MASK32
    for ch in _code_units(text):
        h1 = _imul(h1 ^ ch, 2654435761)
        h2 = _imul(h2 ^ ch, 1597334677)

    h1 = _imul(h1 ^ (h1 >> 16), 2246822507)
    h1 ^= _imul(h2 ^ (h2 >> 13), 3266489909)
    h2 = _imul(h2 ^ (h2 >> 16), 2246822507)
    h2 ^= _imul(h1 ^ (h1 >> 13), 3266489909)
    return 4294967296 * (h2 & 0x1FFFFF) + h1


def mint_id(text: str, taken: Container[int] = ()) -> int:
    """Return a fresh id for ``text`` that is not already in ``taken``."""
    while True:
        candidate = cyrb53(f"{text}{time.time_ns()}{random.random()}")
        if candidate not in taken:
            return candidate
