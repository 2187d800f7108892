"""MFD button map (``[MFD]``) and MFD symbol colors (``[COLORS]``)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List

from .enums import MFDColorOption, MFDColorSetting, MFDMasterMode
from .errors import MalformedLine, SectionNotFound
from .section import FaultSink, ScalarSection, Section, slot
from .tokens import enum_parser, parse_int, split_entry

logger = logging.getLogger(__name__)

MFD_COUNT = 4
BUTTON_SLOTS = ("0", "1", "2", "csel")
SLOT_ATTRS = {"0": "left", "1": "center", "2": "right", "CSEL": "selected"}


@dataclass
class MFDPage:
    """Pages on the three bottom OSBs plus the page selected on entry."""

    left: int = 0
    center: int = 0
    right: int = 0
    selected: int = 0

    def values(self) -> tuple[int, int, int, int]:
        return (self.left, self.center, self.right, self.selected)


@dataclass
class MFDDisplay:
    display_id: int
    pages: List[MFDPage] = field(
        default_factory=lambda: [MFDPage() for _ in MFDMasterMode]
    )

    def page(self, mode: MFDMasterMode) -> MFDPage:
        return self.pages[MFDMasterMode(mode)]

    def encode_page(self, mode: MFDMasterMode) -> Iterator[str]:
        page = self.page(mode)
        for button, value in zip(BUTTON_SLOTS, page.values()):
            yield f"Display{self.display_id}-{int(mode)}-{button}={value}"


@dataclass
class MFD(ScalarSection):
    """Display x master mode x button map.

    Keys look like ``Display2-5-csel``: display ordinal, master-mode ordinal
    and button slot.  Every slot of every page is written, so the section
    always has ``MFD_COUNT * 6 * 4`` lines.
    """

    header: ClassVar[str] = "[MFD]"
    key_delimiters: ClassVar[tuple[str, ...]] = ("-",)

    displays: List[MFDDisplay] = field(
        default_factory=lambda: [MFDDisplay(i) for i in range(MFD_COUNT)]
    )

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        if len(key) != 3 or not key[0].startswith("DISPLAY"):
            return
        attr = SLOT_ATTRS.get(key[2])
        if attr is None:
            return
        display = slot(self.displays, parse_int(key[0][len("DISPLAY"):], line), line)
        page = slot(display.pages, parse_int(key[1], line), line)
        setattr(page, attr, parse_int(value, line))

    def encode_lines(self) -> Iterator[str]:
        for display in self.displays:
            yield from display.encode_page(MFDMasterMode.SJ)
        for display in self.displays:
            for mode in MFDMasterMode:
                if mode is not MFDMasterMode.SJ:
                    yield from display.encode_page(mode)


# Slots not listed here use MFDColorOption.DEFAULT.
DEFAULT_COLORS = {
    MFDColorSetting.DEFAULT: MFDColorOption.RED,
    MFDColorSetting.SOI_BOX: MFDColorOption.RED,
    MFDColorSetting.AIRCRAFT_REF: MFDColorOption.CYAN,
    MFDColorSetting.BULLSEYE: MFDColorOption.YELLOW,
    MFDColorSetting.BULLSEYE_DATA: MFDColorOption.YELLOW,
    MFDColorSetting.NOT_SOI: MFDColorOption.RED,
    MFDColorSetting.FCR_RANGE_TICKS: MFDColorOption.GREEN,
    MFDColorSetting.FCR_BUG: MFDColorOption.GREEN,
    MFDColorSetting.FCR_BUGGED: MFDColorOption.GREEN,
}

_parse_color = enum_parser(MFDColorOption)


def default_colors() -> List[MFDColorOption]:
    return [DEFAULT_COLORS.get(s, MFDColorOption.DEFAULT) for s in MFDColorSetting]


@dataclass
class MFDColors(Section):
    """``ColorConfig=<count> <color> ...`` with one color per symbol slot.

    The section is optional.  When the header is absent the built-in color
    table is loaded and the section is left out of the encoded document.
    """

    header: ClassVar[str] = "[COLORS]"

    colors: List[MFDColorOption] = field(default_factory=default_colors)

    def color(self, setting: MFDColorSetting) -> MFDColorOption:
        return self.colors[MFDColorSetting(setting)]

    def set_color(self, setting: MFDColorSetting, option: MFDColorOption) -> None:
        self.colors[MFDColorSetting(setting)] = MFDColorOption(option)

    def on_missing(self, exc: SectionNotFound, buffer: str, sink: FaultSink) -> bool:
        logger.info("%s absent, using the default color table", self.header)
        self.colors = default_colors()
        self.include_in_output = False
        return True

    def begin_decode(self) -> None:
        self.colors = default_colors()
        self.include_in_output = True

    def decode_line(self, line: str) -> None:
        entry = split_entry(line)
        if entry is None or entry[0].upper() != "COLORCONFIG":
            return
        tokens = entry[1].split()
        if not tokens:
            raise MalformedLine(line, "missing color count")
        count = parse_int(tokens[0], line)
        values = tokens[1:]
        if count != len(values):
            raise MalformedLine(line, f"expected {count} colors, found {len(values)}")
        for index, token in enumerate(values):
            slot(self.colors, index, line)
            self.colors[index] = _parse_color(token, line)

    def encode_lines(self) -> Iterator[str]:
        values = " ".join(str(int(option)) for option in self.colors)
        yield f"ColorConfig={len(self.colors)} {values}"


__all__ = [
    "MFD_COUNT",
    "MFDPage",
    "MFDDisplay",
    "MFD",
    "MFDColors",
    "DEFAULT_COLORS",
    "default_colors",
]
