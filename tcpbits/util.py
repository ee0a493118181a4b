"""Timing, random seeding, system-call checks, checksums and hexdumps."""

from __future__ import annotations

import functools
import os
import random
import sys
import time
from typing import TextIO

from tcpbits.errors import UnixError

_MT_STATE_WORDS = 624


@functools.lru_cache(maxsize=None)
def _program_start() -> float:
    return time.monotonic()


def timestamp_ms() -> int:
    """Milliseconds elapsed since the first call."""
    start = _program_start()
    return int((time.monotonic() - start) * 1000)


def system_call(attempt: str, return_value: int, errno_mask: int = 0) -> int:
    """Return `return_value` unless it signals an error that is not masked.

    A negative value is taken as the negated error number.
    """
    if return_value >= 0 or -return_value == errno_mask:
        return return_value
    raise UnixError(attempt, -return_value)


def get_random_generator() -> random.Random:
    """A Mersenne Twister seeded with a full state's worth of entropy."""
    seed = int.from_bytes(os.urandom(_MT_STATE_WORDS * 4), "big")
    return random.Random(seed)


class InternetChecksum:
    """The Internet checksum, computed incrementally over added data."""

    def __init__(self, initial_sum: int = 0) -> None:
        self._sum = initial_sum & 0xFFFF_FFFF
        self._parity = False

    def add(self, data: bytes) -> None:
        """Add bytes to the running sum."""
        for byte in bytes(data):
            self._sum = (self._sum + (byte if self._parity else byte << 8)) & 0xFFFF_FFFF
            self._parity = not self._parity

    def value(self) -> int:
        """The checksum in host byte order."""
        total = self._sum
        while total > 0xFFFF:
            total = (total >> 16) + (total & 0xFFFF)
        return ~total & 0xFFFF


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def format_hexdump(data: bytes, indent: int = 0) -> str:
    """Render bytes as offset, hex pairs and printable characters."""
    data = bytes(data)
    if not data:
        return "     \n\n"
    prefix = " " * indent
    lines = []
    for offset in range(0, len(data), 16):
        chunk = data[offset:offset + 16]
        hex_groups = " ".join(chunk[pos:pos + 2].hex() for pos in range(0, len(chunk), 2))
        missing = 16 - len(chunk)
        padding = " " * (2 * missing + missing // 2 + 4)
        chars = "".join(_printable(b) for b in chunk)
        lines.append(f"{prefix}{offset:08x}:    {hex_groups}{padding}{chars}")
    return "\n".join(lines) + "\n\n"


def hexdump(data: bytes, indent: int = 0, file: TextIO | None = None) -> None:
    """Write a hexdump of `data` to `file` (standard output by default)."""
    out = file if file is not None else sys.stdout
    out.write(format_hexdump(data, indent))
    out.flush()