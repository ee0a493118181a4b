"""Parsing and writing integers in network byte order."""

from __future__ import annotations

from enum import Enum


class ParseResult(Enum):
    """Outcome of parsing a datagram, segment, frame or message."""

    NoError = 0
    BadChecksum = 1
    PacketTooShort = 2
    WrongIPVersion = 3
    HeaderTooShort = 4
    TruncatedPacket = 5
    Unsupported = 6


class ParseError(Exception):
    """Raised when parsing fails."""

    def __init__(self, result: ParseResult) -> None:
        super().__init__(as_string(result))
        self.result = result


def as_string(result: ParseResult) -> str:
    """Name of a ParseResult."""
    return result.name


class NetParser:
    """Reads big-endian integers from the front of a byte buffer."""

    def __init__(self, buffer: bytes) -> None:
        self._buffer = memoryview(bytes(buffer))
        self.error = ParseResult.NoError

    @property
    def buffer(self) -> bytes:
        """The bytes not yet consumed."""
        return self._buffer.tobytes()

    def _take(self, size: int) -> memoryview:
        if self.error is not ParseResult.NoError:
            raise ParseError(self.error)
        if size > len(self._buffer):
            self.error = ParseResult.PacketTooShort
            raise ParseError(self.error)
        head, self._buffer = self._buffer[:size], self._buffer[size:]
        return head

    def _parse_int(self, size: int) -> int:
        return int.from_bytes(self._take(size), "big")

    def u32(self) -> int:
        """Parse a 32-bit integer."""
        return self._parse_int(4)

    def u16(self) -> int:
        """Parse a 16-bit integer."""
        return self._parse_int(2)

    def u8(self) -> int:
        """Parse an 8-bit integer."""
        return self._parse_int(1)

    def remove_prefix(self, n: int) -> None:
        """Drop `n` bytes from the front of the buffer."""
        self._take(n)


def _unparse_int(value: int, size: int) -> bytes:
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, "big")


def unparse_u32(value: int) -> bytes:
    """Encode a 32-bit integer in network byte order."""
    return _unparse_int(value, 4)


def unparse_u16(value: int) -> bytes:
    """Encode a 16-bit integer in network byte order."""
    return _unparse_int(value, 2)


def unparse_u8(value: int) -> bytes:
    """Encode an 8-bit integer."""
    return _unparse_int(value, 1)