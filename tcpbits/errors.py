"""Errors raised for failed system calls and missing results."""

from __future__ import annotations

import os
from typing import TypeVar

T = TypeVar("T")


class TaggedError(OSError):
    """An OS error that also records what was being attempted."""

    def __init__(self, attempt: str, error_code: int) -> None:
        super().__init__(error_code, os.strerror(error_code))
        self.attempt = attempt
        self.error_code = error_code

    def __str__(self) -> str:
        return f"{self.attempt}: {self.strerror}"


class UnixError(TaggedError):
    """A tagged error coming from a system call."""

    def __init__(self, attempt: str, error_code: int) -> None:
        super().__init__(attempt, error_code)


def check_system_call(attempt: str, return_value: int) -> int:
    """Return `return_value` if it is non-negative.

    A negative value is taken as the negated error number and raised as UnixError.
    """
    if return_value >= 0:
        return return_value
    raise UnixError(attempt, -return_value)


def notnull(context: str, value: T | None) -> T:
    """Return `value`, or raise RuntimeError if it is None."""
    if value is None:
        raise RuntimeError(f"{context}: returned null pointer")
    return value