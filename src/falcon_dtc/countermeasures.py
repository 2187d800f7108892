"""Countermeasure dispenser programs (``[EWS]``) and HARM threat tables (``[HARM]``)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List

from .enums import HARMMode, HARMSubMode
from .quantize import NormalizedRecord, as_enum, as_text, bounded_or_zero
from .section import ScalarField, ScalarSection, slot
from .tokens import enum_parser, parse_flag, parse_int, zero_padded

EWS_PROGRAMS = 6
MAX_COUNT = 99
MIN_INTERVAL = 20
MAX_INTERVAL = 10000

HARM_TABLES = 3
THREATS_PER_TABLE = 5
MAX_TABLE = 3

_count = bounded_or_zero(1, MAX_COUNT)
_interval = bounded_or_zero(MIN_INTERVAL, MAX_INTERVAL)

# On-disk names of the per-expendable settings, in output order.
PROGRAM_SETTINGS = {
    "BQ": "burst_count",
    "BI": "burst_interval",
    "SQ": "sequence_count",
    "SI": "sequence_interval",
}


@dataclass
class DispenseProgram(NormalizedRecord):
    """Burst/salvo timing for one expendable type.

    Counts below one and intervals below 20 ms collapse to zero (off)
    instead of clamping up to the minimum.
    """

    burst_count: int = 0
    burst_interval: int = 0
    sequence_count: int = 0
    sequence_interval: int = 0

    normalizers = {
        "burst_count": _count,
        "burst_interval": _interval,
        "sequence_count": _count,
        "sequence_interval": _interval,
    }


@dataclass
class EWSProgram(NormalizedRecord):
    chaff: DispenseProgram = field(default_factory=DispenseProgram)
    flare: DispenseProgram = field(default_factory=DispenseProgram)
    comment: str = ""

    normalizers = {"comment": as_text}

    def encode(self, program_id: int) -> Iterator[str]:
        for name, program in (("Chaff", self.chaff), ("Flare", self.flare)):
            for code, attr in PROGRAM_SETTINGS.items():
                yield f"PGM {program_id} {name} {code}={getattr(program, attr)}"


@dataclass
class EWS(ScalarSection):
    """Dispenser switches, bingo levels and the six manual programs.

    Program lines are ``PGM <n> Chaff BQ=<v>`` and ``PGM <n> Comment=<text>``
    with ``n`` a zero-based program index.
    """

    header: ClassVar[str] = "[EWS]"

    request_counter: bool = False
    bingo_notification: bool = False
    feedback: bool = False
    flare_bingo: int = 0
    chaff_bingo: int = 0
    request_jammer: bool = False
    programs: List[EWSProgram] = field(
        default_factory=lambda: [EWSProgram() for _ in range(EWS_PROGRAMS)]
    )

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("Reqctr", "request_counter", parse_flag),
        ScalarField("Bingo", "bingo_notification", parse_flag),
        ScalarField("Fdbk", "feedback", parse_flag),
        ScalarField("Flare Bingo", "flare_bingo"),
        ScalarField("Chaff Bingo", "chaff_bingo"),
        ScalarField("Reqjam", "request_jammer", parse_flag),
    )
    normalizers = {
        "request_counter": bool,
        "bingo_notification": bool,
        "feedback": bool,
        "request_jammer": bool,
        "flare_bingo": _count,
        "chaff_bingo": _count,
    }

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        if key[0] != "PGM" or len(key) < 3:
            return
        program = slot(self.programs, parse_int(key[1], line), line)
        if len(key) == 3 and key[2] == "COMMENT":
            program.comment = value
        elif len(key) == 4 and key[2] in ("CHAFF", "FLARE"):
            attr = PROGRAM_SETTINGS.get(key[3])
            if attr is not None:
                target = program.chaff if key[2] == "CHAFF" else program.flare
                setattr(target, attr, parse_int(value, line))

    def encode_lines(self) -> Iterator[str]:
        scalars = list(self.scalar_lines())
        yield from scalars[:-1]
        for i, program in enumerate(self.programs):
            yield from program.encode(i)
        yield scalars[-1]
        for i, program in enumerate(self.programs):
            yield f"PGM {i} Comment={program.comment}"


def _threat_codes() -> List[int]:
    return [0] * THREATS_PER_TABLE


@dataclass
class HARMTable:
    threats: List[int] = field(default_factory=_threat_codes)


_threat_code = zero_padded(4)


@dataclass
class HARM(ScalarSection):
    """Three threat tables of five emitter codes plus the HARM mode.

    Threat lines are ``THREAT <table> <slot>=0123``.
    """

    header: ClassVar[str] = "[HARM]"

    tables: List[HARMTable] = field(
        default_factory=lambda: [HARMTable() for _ in range(HARM_TABLES)]
    )
    mode: HARMMode = HARMMode.HAS
    sub_mode: HARMSubMode = HARMSubMode.PN
    selected_table: int = 0

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("MODE", "mode", enum_parser(HARMMode)),
        ScalarField("SUBMODE", "sub_mode", enum_parser(HARMSubMode)),
        ScalarField("TER", "selected_table"),
    )
    normalizers = {
        "mode": as_enum(HARMMode),
        "sub_mode": as_enum(HARMSubMode),
        "selected_table": bounded_or_zero(1, MAX_TABLE),
    }

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        if key[0] != "THREAT" or len(key) != 3:
            return
        table = slot(self.tables, parse_int(key[1], line), line)
        index = parse_int(key[2], line)
        slot(table.threats, index, line)
        table.threats[index] = parse_int(value, line)

    def encode_lines(self) -> Iterator[str]:
        for t, table in enumerate(self.tables):
            for k, code in enumerate(table.threats):
                yield f"THREAT {t} {k}={_threat_code(code)}"
        yield from self.scalar_lines()


__all__ = [
    "EWS_PROGRAMS",
    "HARM_TABLES",
    "THREATS_PER_TABLE",
    "DispenseProgram",
    "EWSProgram",
    "EWS",
    "HARMTable",
    "HARM",
]
