"""Exceptions raised while decoding cartridge text."""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for problems found while decoding a section."""


class SectionNotFound(DecodeError):
    """The section header does not occur anywhere in the buffer."""

    def __init__(self, header: str) -> None:
        super().__init__(f"section {header} not found")
        self.header = header


class MalformedLine(DecodeError):
    """A line's shape or token content does not match the section grammar."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class IndexOutOfRange(DecodeError):
    """An ordinal-indexed line addresses a slot that was never allocated."""

    def __init__(self, line: str, index: int, size: int) -> None:
        super().__init__(f"index {index} outside 0..{size - 1}: {line!r}")
        self.line = line
        self.index = index
        self.size = size


__all__ = ["DecodeError", "SectionNotFound", "MalformedLine", "IndexOutOfRange"]
