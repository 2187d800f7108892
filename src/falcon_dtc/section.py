"""Section reader and the codec base classes shared by every section.

A cartridge buffer is a flat run of ``[HEADER]`` blocks.  Each section finds
its own header, walks the lines up to the next header and hands every line to
its dispatcher.  Faults are reported to a sink together with the raw section
text and turned into a ``False`` result so sibling sections keep decoding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Iterator, Sequence, TypeVar

from .errors import DecodeError, IndexOutOfRange, SectionNotFound
from .quantize import NormalizedRecord
from .tokens import format_int, key_tokens, normalize_key, parse_int, split_entry

logger = logging.getLogger(__name__)

HEADER_MARKER = "["

T = TypeVar("T")


def locate(buffer: str, header: str) -> str:
    """Return the text from ``header`` up to the next header or end of input."""

    start = buffer.find(header)
    if start < 0:
        raise SectionNotFound(header)
    lines = buffer[start:].splitlines(keepends=True)
    end = 1
    while end < len(lines) and HEADER_MARKER not in lines[end]:
        end += 1
    return "".join(lines[:end])


def iter_lines(section_text: str) -> Iterator[str]:
    """Yield the non-blank body lines of a located section."""

    lines = iter(section_text.splitlines())
    next(lines, None)
    for line in lines:
        if HEADER_MARKER in line:
            return
        if line.strip():
            yield line


def slot(items: Sequence[T], index: int, line: str) -> T:
    """Return ``items[index]``; indexes outside the pre-sized range are fatal."""

    if not 0 <= index < len(items):
        raise IndexOutOfRange(line, index, len(items))
    return items[index]


@dataclass(frozen=True)
class DecodeFault:
    """What went wrong while decoding one section, with the text involved."""

    section: str
    error: DecodeError
    text: str


FaultSink = Callable[[DecodeFault], None]


def log_fault(fault: DecodeFault) -> None:
    logger.error(
        "Failed to decode %s: %s\nSection text:\n%s",
        fault.section,
        fault.error,
        fault.text,
    )


@dataclass
class Section(NormalizedRecord):
    """Base class for one ``[HEADER]`` block of a cartridge document."""

    header: ClassVar[str] = ""

    include_in_output: bool = field(
        default=True, kw_only=True, compare=False, repr=False
    )

    def decode(self, buffer: str, *, report: FaultSink | None = None) -> bool:
        sink = report or log_fault
        try:
            text = locate(buffer, self.header)
        except SectionNotFound as exc:
            return self.on_missing(exc, buffer, sink)
        try:
            self.begin_decode()
            for line in iter_lines(text):
                self.decode_line(line)
            self.end_decode()
        except DecodeError as exc:
            sink(DecodeFault(self.header, exc, text))
            return False
        return True

    def on_missing(self, exc: SectionNotFound, buffer: str, sink: FaultSink) -> bool:
        sink(DecodeFault(self.header, exc, buffer))
        return False

    def begin_decode(self) -> None:
        """Hook run after the header is found and before the first line."""

    def end_decode(self) -> None:
        """Hook run after the last line was dispatched."""

    def decode_line(self, line: str) -> None:
        raise NotImplementedError

    def encode_lines(self) -> Iterator[str]:
        raise NotImplementedError

    def encode(self) -> str:
        if not self.include_in_output:
            return ""
        return "".join(f"{line}\n" for line in (self.header, *self.encode_lines()))


@dataclass(frozen=True)
class ScalarField:
    """One ``Key=value`` line bound to a record attribute."""

    key: str
    attr: str
    parse: Callable[[str, str], Any] = parse_int
    render: Callable[[Any], str] = format_int


@dataclass
class ScalarSection(Section):
    """Section made of fixed keys, optionally followed by ordinal lines.

    ``scalar_fields`` lists the scalar keys in output order.  Lines whose key is not
    one of them are tokenized and passed to :meth:`decode_entry`, which
    subclasses override to handle indexed keys.
    """

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = ()
    key_delimiters: ClassVar[tuple[str, ...]] = (" ", "_")

    def decode_line(self, line: str) -> None:
        entry = split_entry(line)
        if entry is None:
            return
        key, value = entry
        scalar = self._field_index().get(normalize_key(key))
        if scalar is not None:
            setattr(self, scalar.attr, scalar.parse(value, line))
            return
        tokens = key_tokens(key, self.key_delimiters)
        if tokens:
            self.decode_entry(tokens, value, line)

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        """Handle a line whose key is not a scalar field; ignored by default."""

    def encode_lines(self) -> Iterator[str]:
        yield from self.scalar_lines()

    def scalar_lines(self) -> Iterator[str]:
        for scalar in self.scalar_fields:
            yield f"{scalar.key}={scalar.render(getattr(self, scalar.attr))}"

    @classmethod
    def _field_index(cls) -> dict[str, ScalarField]:
        index = cls.__dict__.get("_scalar_index")
        if index is None:
            index = {normalize_key(scalar.key): scalar for scalar in cls.scalar_fields}
            cls._scalar_index = index
        return index


__all__ = [
    "HEADER_MARKER",
    "locate",
    "iter_lines",
    "slot",
    "DecodeFault",
    "FaultSink",
    "log_fault",
    "Section",
    "ScalarField",
    "ScalarSection",
]
