"""IFF transponder programming (``[IFF]``) and Link 16 datalink files (``[LINK16]``)."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Iterator, List

from .enums import CardinalDirection, IFFAutoChange, TACANBand
from .errors import MalformedLine
from .quantize import NormalizedRecord, as_enum, bounded, bounded_or_zero
from .section import ScalarField, ScalarSection, slot
from .tokens import (
    enum_name_parser,
    enum_parser,
    format_int,
    format_name,
    parse_flag,
    parse_int,
    parse_text,
    zero_padded,
)

TIME_BLOCKS = 12
POSITION_BLOCKS = 2
FIRST_BLOCK_START = dt.time(7, 0)
BLOCK_STEP = dt.timedelta(minutes=30)

_mode1_code = bounded(0, 63)
_mode3_code = bounded(0, 4095)
_mode4_key = bounded_or_zero(1, 1)


def encode_criteria(start: dt.time) -> str:
    return f"{start.hour}{start.minute:02d}"


def decode_criteria(token: str, line: str) -> dt.time:
    value = parse_int(token, line)
    hour, minute = divmod(value, 100)
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise MalformedLine(line, f"{value} is not a valid HHMM time")
    return dt.time(hour, minute)


@dataclass
class TimeBlock(NormalizedRecord):
    """Codes applied automatically from ``start`` onwards."""

    start: dt.time = FIRST_BLOCK_START
    mode1_code: int = 0
    mode3a_code: int = 0
    mode4_key: int = 0

    normalizers = {
        "mode1_code": _mode1_code,
        "mode3a_code": _mode3_code,
        "mode4_key": _mode4_key,
    }

    def encode(self, block_id: int) -> Iterator[str]:
        yield f"TIME {block_id} Mode1 Code={self.mode1_code}"
        yield f"TIME {block_id} Mode3A Code={self.mode3a_code}"
        yield f"TIME {block_id} Mode4 Key={self.mode4_key}"
        yield f"TIME {block_id} Criteria={encode_criteria(self.start)}"


def _default_time_blocks() -> List[TimeBlock]:
    anchor = dt.datetime.combine(dt.date(2000, 1, 1), FIRST_BLOCK_START)
    return [TimeBlock((anchor + BLOCK_STEP * i).time()) for i in range(TIME_BLOCKS)]


@dataclass
class PositionBlock(NormalizedRecord):
    """Codes applied once the aircraft passes ``waypoint`` heading ``direction``."""

    mode1_code: int = 0
    mode2_code: int = 0
    mode3a_code: int = 0
    mode4_key: int = 0
    modec_code: int = 0
    modes_code: int = 0
    waypoint: int = 0
    direction: CardinalDirection = CardinalDirection.NORTH

    normalizers = {
        "mode1_code": _mode1_code,
        "mode2_code": _mode3_code,
        "mode3a_code": _mode3_code,
        "mode4_key": _mode4_key,
        "direction": as_enum(CardinalDirection),
    }

    # key suffix -> (attribute, parser)
    keys: ClassVar[dict[str, tuple[str, Callable[[str, str], Any]]]] = {
        "MODE1": ("mode1_code", parse_int),
        "MODE2": ("mode2_code", parse_int),
        "MODE3A": ("mode3a_code", parse_int),
        "MODE4": ("mode4_key", parse_int),
        "MODEC": ("modec_code", parse_int),
        "MODES": ("modes_code", parse_int),
        "WAYPOINT": ("waypoint", parse_int),
        "DIRECTION": ("direction", enum_parser(CardinalDirection)),
    }

    def encode(self, block_id: int) -> Iterator[str]:
        yield f"POS {block_id} Mode1={self.mode1_code}"
        yield f"POS {block_id} Mode2={self.mode2_code}"
        yield f"POS {block_id} Mode3A={self.mode3a_code}"
        yield f"POS {block_id} Mode4={self.mode4_key}"
        yield f"POS {block_id} ModeC={self.modec_code}"
        yield f"POS {block_id} ModeS={self.modes_code}"
        yield f"POS {block_id} WayPoint={self.waypoint}"
        yield f"POS {block_id} Direction={int(self.direction)}"


TIME_KEYS = {
    ("MODE1", "CODE"): "mode1_code",
    ("MODE3A", "CODE"): "mode3a_code",
    ("MODE4", "KEY"): "mode4_key",
}


@dataclass
class IFF(ScalarSection):
    """Transponder modes, manual codes and the automatic code schedule."""

    header: ClassVar[str] = "[IFF]"

    mode1_enabled: bool = False
    mode2_enabled: bool = False
    mode3a_enabled: bool = False
    mode4_enabled: bool = False
    modec_enabled: bool = False
    modes_enabled: bool = False
    mode1_code: int = 0
    mode2_code: int = 0
    mode3a_code: int = 0
    mode4_key: int = 0
    auto_change: IFFAutoChange = IFFAutoChange.MAN
    time_blocks: List[TimeBlock] = field(default_factory=_default_time_blocks)
    position_blocks: List[PositionBlock] = field(
        default_factory=lambda: [PositionBlock() for _ in range(POSITION_BLOCKS)]
    )

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("Mode1 On", "mode1_enabled", parse_flag),
        ScalarField("Mode2 On", "mode2_enabled", parse_flag),
        ScalarField("Mode3A On", "mode3a_enabled", parse_flag),
        ScalarField("Mode4 On", "mode4_enabled", parse_flag),
        ScalarField("ModeC On", "modec_enabled", parse_flag),
        ScalarField("ModeS On", "modes_enabled", parse_flag),
        ScalarField("Mode1 Code", "mode1_code"),
        ScalarField("Mode2 Code", "mode2_code"),
        ScalarField("Mode3A Code", "mode3a_code"),
        ScalarField("Mode4 Key", "mode4_key"),
        ScalarField("AutoChange", "auto_change", enum_parser(IFFAutoChange)),
    )
    normalizers = {
        "mode1_enabled": bool,
        "mode2_enabled": bool,
        "mode3a_enabled": bool,
        "mode4_enabled": bool,
        "modec_enabled": bool,
        "modes_enabled": bool,
        "mode1_code": _mode1_code,
        "mode2_code": _mode3_code,
        "mode3a_code": _mode3_code,
        "mode4_key": _mode4_key,
        "auto_change": as_enum(IFFAutoChange),
    }

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        if key[0] == "TIME" and len(key) in (3, 4):
            block = slot(self.time_blocks, parse_int(key[1], line), line)
            if len(key) == 3 and key[2] == "CRITERIA":
                block.start = decode_criteria(value, line)
            elif len(key) == 4 and (key[2], key[3]) in TIME_KEYS:
                setattr(block, TIME_KEYS[key[2], key[3]], parse_int(value, line))
        elif key[0] == "POS" and len(key) == 3:
            block = slot(self.position_blocks, parse_int(key[1], line), line)
            target = PositionBlock.keys.get(key[2])
            if target is not None:
                attr, parse = target
                setattr(block, attr, parse(value, line))

    def encode_lines(self) -> Iterator[str]:
        yield from self.scalar_lines()
        for i, block in enumerate(self.time_blocks):
            yield from block.encode(i)
        for i, block in enumerate(self.position_blocks):
            yield from block.encode(i)


_channel = zero_padded(3)
_stn = zero_padded(5)
_two_digits = zero_padded(2)


def _as_upper(value: Any) -> str:
    return str(value).strip().upper()


# Per-file keys in output order: suffix, attribute, parser, renderer.
LINK16_FIELDS: tuple[ScalarField, ...] = (
    ScalarField("VOICE_GROUP_A_CHANNEL", "voice_group_a_channel", parse_int, _channel),
    ScalarField("VOICE_GROUP_B_CHANNEL", "voice_group_b_channel", parse_int, _channel),
    ScalarField("MISSION_CHANNEL", "mission_channel", parse_int, _channel),
    ScalarField("FIGHTER_CHANNEL", "fighter_channel", parse_int, _channel),
    ScalarField("SPECIAL_CHANNEL", "special_channel", parse_int, _channel),
    ScalarField("CALLSIGN", "callsign", parse_text, str),
    ScalarField("CALLSIGN_NUMBER", "callsign_number", parse_int, _two_digits),
    ScalarField("FLIGHT_LEAD", "flight_lead", parse_flag, format_int),
    ScalarField("EXT_TIME_REFERENCE", "external_time_reference", parse_flag, format_int),
    ScalarField("TACAN_CHANNEL", "tacan_channel", parse_int, _two_digits),
    ScalarField("TACAN_BAND", "tacan_band", enum_name_parser(TACANBand), format_name),
    *(
        ScalarField(f"{group.upper()}_{n}_STN", f"{group}_{n}_stn", parse_int, _stn)
        for group, count in (("flight", 4), ("team", 4), ("donor", 8))
        for n in range(1, count + 1)
    ),
)
_LINK16_INDEX = {scalar.key: scalar for scalar in LINK16_FIELDS}


@dataclass
class Link16File(NormalizedRecord):
    voice_group_a_channel: int = 0
    voice_group_b_channel: int = 0
    mission_channel: int = 0
    fighter_channel: int = 0
    special_channel: int = 0
    callsign: str = ""
    callsign_number: int = 0
    flight_lead: bool = True
    external_time_reference: bool = False
    tacan_channel: int = 0
    tacan_band: TACANBand = TACANBand.X
    flight_1_stn: int = 0
    flight_2_stn: int = 0
    flight_3_stn: int = 0
    flight_4_stn: int = 0
    team_1_stn: int = 0
    team_2_stn: int = 0
    team_3_stn: int = 0
    team_4_stn: int = 0
    donor_1_stn: int = 0
    donor_2_stn: int = 0
    donor_3_stn: int = 0
    donor_4_stn: int = 0
    donor_5_stn: int = 0
    donor_6_stn: int = 0
    donor_7_stn: int = 0
    donor_8_stn: int = 0

    normalizers = {
        "callsign": _as_upper,
        "flight_lead": bool,
        "external_time_reference": bool,
        "tacan_band": as_enum(TACANBand),
    }

    def encode(self, letter: str) -> Iterator[str]:
        for scalar in LINK16_FIELDS:
            yield f"FILE_{letter}_{scalar.key}={scalar.render(getattr(self, scalar.attr))}"


FILE_LETTERS = ("A", "B")


@dataclass
class Link16(ScalarSection):
    """Datalink files ``A`` and ``B``; keys look like ``FILE_A_MISSION_CHANNEL``."""

    header: ClassVar[str] = "[LINK16]"
    key_delimiters: ClassVar[tuple[str, ...]] = ("_",)

    files: List[Link16File] = field(
        default_factory=lambda: [Link16File() for _ in FILE_LETTERS]
    )

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        if key[0] != "FILE" or len(key) < 3:
            return
        scalar = _LINK16_INDEX.get("_".join(key[2:]))
        if scalar is None:
            return
        if len(key[1]) != 1 or not key[1].isalpha():
            raise MalformedLine(line, f"bad datalink file letter {key[1]!r}")
        index = ord(key[1]) - ord("A")
        link_file = slot(self.files, index, line)
        setattr(link_file, scalar.attr, scalar.parse(value, line))

    def encode_lines(self) -> Iterator[str]:
        for letter, link_file in zip(FILE_LETTERS, self.files):
            yield from link_file.encode(letter)


__all__ = [
    "TIME_BLOCKS",
    "POSITION_BLOCKS",
    "TimeBlock",
    "PositionBlock",
    "IFF",
    "Link16File",
    "Link16",
    "encode_criteria",
    "decode_criteria",
]
