"""Radio presets (``[Radio]``) and the selected comm/TACAN/ILS state (``[COMMS]``).

Frequencies are held in MHz and quantized on assignment.  On disk UHF and VHF
presets are stored in kHz while ILS values are stored in hundredths of a MHz,
so ``108.15`` is written as ``10815``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator

from .enums import RadioType, TACANBand, TACANMode
from .errors import MalformedLine
from .quantize import (
    NormalizedRecord,
    as_enum,
    as_text,
    bounded,
    clamp,
    quantize_frequency,
)
from .section import ScalarField, ScalarSection, slot
from .tokens import (
    enum_parser,
    format_decimal,
    parse_float,
    parse_int,
    parse_text,
)

UHF_PRESETS = 20
VHF_PRESETS = 20
ILS_PRESETS = 4
TACAN_CHANNELS = (1, 126)
OPEN = "(open)"

# Disk units per MHz for each band.
FREQUENCY_SCALE = {RadioType.UHF: 1000, RadioType.VHF: 1000, RadioType.ILS: 100}

DEFAULT_UHF = {
    2: "DEP Ground",
    3: "DEP Tower",
    4: "DEP Approach",
    6: "Tactical",
    7: "ARR Approach",
    8: "ARR Tower",
    9: "ARR Ground",
    11: "Advisory",
    12: "Intra Flight 1",
}
DEFAULT_VHF = {
    2: "DEP ATIS",
    3: "DEP Tower",
    7: "ARR ATIS",
    8: "ARR Tower",
    11: "ALT Tower",
    14: "UNICOM",
    15: "Flight 1",
}
ADVISORY_UHF = 278.2
ALTERNATE_VHF = 119.5


def encode_frequency(value: float, band: RadioType) -> str:
    return format_decimal(round(value * FREQUENCY_SCALE[band], 1))


def decode_frequency(token: str, band: RadioType, line: str) -> float:
    value = parse_float(token, line) / FREQUENCY_SCALE[band]
    try:
        return quantize_frequency(value, band)
    except ValueError as exc:
        raise MalformedLine(line, str(exc)) from None


@dataclass
class RadioPreset:
    """One numbered preset.  ``preset_id`` is 1-based as written on disk."""

    preset_id: int
    band: RadioType
    frequency: float = 0.0
    comment: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "band":
            value = RadioType(value)
        elif name == "frequency":
            value = quantize_frequency(value, self.band)
        elif name == "comment":
            value = as_text(value)
        super().__setattr__(name, value)
        if name == "band" and "frequency" in self.__dict__:
            # requantize into the new band
            self.frequency = self.frequency

    @property
    def label(self) -> str:
        return f"{self.band.name}_{self.preset_id}"

    def encode(self) -> str:
        return f"{self.label}={encode_frequency(self.frequency, self.band)}"

    def encode_comment(self) -> str:
        return f"{self.band.name}_COMMENT_{self.preset_id}={self.comment}"


def _default_uhf() -> list[RadioPreset]:
    return [
        RadioPreset(
            i,
            RadioType.UHF,
            ADVISORY_UHF if i == 11 else 225.0,
            DEFAULT_UHF.get(i, OPEN),
        )
        for i in range(1, UHF_PRESETS + 1)
    ]


def _default_vhf() -> list[RadioPreset]:
    return [
        RadioPreset(
            i,
            RadioType.VHF,
            ALTERNATE_VHF if i == 13 else 120.0,
            DEFAULT_VHF.get(i, OPEN),
        )
        for i in range(1, VHF_PRESETS + 1)
    ]


def _default_ils() -> list[RadioPreset]:
    return [
        RadioPreset(i, RadioType.ILS, 108.0, f"ILS_{i}")
        for i in range(1, ILS_PRESETS + 1)
    ]


@dataclass
class Radio(ScalarSection):
    """UHF, VHF and ILS preset lists.

    Lines are ``UHF_3=251000`` and ``UHF_COMMENT_3=Tower``.  The key is
    split on ``_``; a two-part key sets a frequency and a three-part key with
    ``COMMENT`` in the middle sets a comment.  The preset number indexes the
    pre-built list and must already exist.
    """

    header: ClassVar[str] = "[Radio]"
    key_delimiters: ClassVar[tuple[str, ...]] = ("_",)

    uhf: list[RadioPreset] = field(default_factory=_default_uhf)
    vhf: list[RadioPreset] = field(default_factory=_default_vhf)
    ils: list[RadioPreset] = field(default_factory=_default_ils)

    def presets(self, band: RadioType) -> list[RadioPreset]:
        return {RadioType.UHF: self.uhf, RadioType.VHF: self.vhf, RadioType.ILS: self.ils}[
            RadioType(band)
        ]

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        band = RadioType.__members__.get(key[0])
        if band is None:
            return
        if len(key) == 2:
            preset = slot(self.presets(band), parse_int(key[1], line) - 1, line)
            preset.frequency = decode_frequency(value, band, line)
        elif len(key) == 3 and key[1] == "COMMENT":
            preset = slot(self.presets(band), parse_int(key[2], line) - 1, line)
            preset.comment = value

    def encode_lines(self) -> Iterator[str]:
        for presets in (self.uhf, self.vhf):
            yield from (preset.encode() for preset in presets)
            yield from (preset.encode_comment() for preset in presets)
        for preset in self.ils:
            yield preset.encode()
            yield preset.encode_comment()


def _ils_course(value: Any) -> float:
    course = round(float(value), 1)
    if course == 0:
        return 0.0
    return clamp(course, 1.0, 360.0)


def _ils_frequency(value: Any) -> float:
    return quantize_frequency(value, RadioType.ILS)


def _parse_ils(token: str, line: str) -> float:
    return decode_frequency(token, RadioType.ILS, line)


def _render_ils(value: float) -> str:
    return encode_frequency(value, RadioType.ILS)


@dataclass
class Comms(ScalarSection):
    """Selected presets plus TACAN and ILS tuning.

    ``Comm1_Comment`` and ``Comm1`` share a prefix; the full key decides
    which attribute is set.  An ILS course of zero means "not set".
    """

    header: ClassVar[str] = "[COMMS]"

    comm1_preset: int = 1
    comm1_comment: str = ""
    comm2_preset: int = 1
    comm2_comment: str = ""
    tacan_channel: int = 1
    tacan_band: TACANBand = TACANBand.Y
    tacan_domain: TACANMode = TACANMode.AA
    ils_frequency: float = 108.0
    ils_course: float = 0.0

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("Comm1", "comm1_preset"),
        ScalarField("Comm1_Comment", "comm1_comment", parse_text, str),
        ScalarField("Comm2", "comm2_preset"),
        ScalarField("Comm2_Comment", "comm2_comment", parse_text, str),
        ScalarField("TACAN Channel", "tacan_channel"),
        ScalarField("TACAN Band", "tacan_band", enum_parser(TACANBand)),
        ScalarField("TACAN Domain", "tacan_domain", enum_parser(TACANMode)),
        ScalarField("ILS Frequency", "ils_frequency", _parse_ils, _render_ils),
        ScalarField("ILS CRS", "ils_course", parse_float, format_decimal),
    )
    normalizers = {
        "comm1_preset": bounded(0, UHF_PRESETS),
        "comm2_preset": bounded(0, VHF_PRESETS),
        "comm1_comment": as_text,
        "comm2_comment": as_text,
        "tacan_channel": bounded(*TACAN_CHANNELS),
        "tacan_band": as_enum(TACANBand),
        "tacan_domain": as_enum(TACANMode),
        "ils_frequency": _ils_frequency,
        "ils_course": _ils_course,
    }


__all__ = [
    "UHF_PRESETS",
    "VHF_PRESETS",
    "ILS_PRESETS",
    "RadioPreset",
    "Radio",
    "Comms",
    "encode_frequency",
]
