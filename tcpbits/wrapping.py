"""32-bit wrapping sequence numbers relative to an initial sequence number."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFF_FFFF
_MASK64 = 0xFFFF_FFFF_FFFF_FFFF
_BOUNDARY = 1 << 32


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around, used for TCP seqnos and acknos."""

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        if not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other):
        """Signed offset between two points, or the point `other` steps before this one."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _BOUNDARY if diff >= 1 << 31 else diff
        if isinstance(other, int):
            return WrappingInt32(self.raw_value - other)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a wrapped 32-bit one."""
    return isn + (n & _MASK32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` and is closest to `checkpoint`."""
    n_abs = (n.raw_value - isn.raw_value) & _MASK32
    offset = checkpoint % _BOUNDARY
    start = checkpoint - offset

    if offset == 0 and start >= _BOUNDARY:
        offset += _BOUNDARY
        start -= _BOUNDARY

    if n_abs > offset:
        if start >= _BOUNDARY and (n_abs - offset) >= (_BOUNDARY - n_abs + offset):
            result = start - _BOUNDARY + n_abs
        else:
            result = start + n_abs
    elif (offset - n_abs) <= (n_abs + _BOUNDARY - offset):
        result = start + n_abs
    else:
        result = start + _BOUNDARY + n_abs
    return result & _MASK64