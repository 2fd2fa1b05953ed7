"""Exceptions raised by planarrgb."""

from __future__ import annotations


class InvalidBufferLength(ValueError):
    """A buffer's length doesn't match the image dimensions it was given with"""

    length: int
    expected: int

    def __init__(self, length: int, expected: int, what: str = "packed buffer") -> None:
        super().__init__(f"The {what} has {length} bytes but {expected} bytes were expected")
        self.length = length
        self.expected = expected
