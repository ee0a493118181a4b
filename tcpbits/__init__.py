"""Wrapping TCP sequence numbers, network byte-order parsing, the Internet checksum and hexdumps."""

__version__ = "0.1.0"
__all__ = ["errors", "parser", "util", "wrapping"]