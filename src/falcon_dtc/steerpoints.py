"""Steerpoint table: waypoints, pre-planned threats, map lines and weapon targets.

All four record kinds share the ``[STPT]`` section and one ID numbering
scheme.  The keyword before the first underscore decides the category:

``target_5=x, y, z, action[, comment]``
    navigation waypoint
``ppt_2=x, y, radius, 0.000000,comment``
    pre-planned threat circle
``lineSTPT_3=x, y, z``
    map line vertex
``wpntarget_7=x, y, z, action[, comment]``
    weapon target

Each category is kept in its own list.  Decoding clears every list and then
appends records in line order, so decoding the same text twice gives the same
table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List, Optional

from .enums import STPTAirAction
from .errors import MalformedLine
from .geo import GeoPoint
from .quantize import NormalizedRecord, as_enum, as_text
from .section import Section
from .tokens import enum_parser, format_fixed, parse_float, parse_int, tokenize

STPT_DELIMITERS = ("_", "=", ",")
MAX_TOKENS = 7

WAYPOINT_IDS = (*range(0, 24), *range(80, 99))
THREAT_IDS = range(0, 15)
LINE_IDS = range(0, 24)
WEAPON_TARGET_IDS = range(0, 100)
NOT_SET = "Not set"

_parse_action = enum_parser(STPTAirAction)


def _coordinates(point: GeoPoint) -> str:
    return ", ".join(format_fixed(v) for v in (point.x, point.y, point.elevation))


def _point(tokens: List[str], line: str) -> GeoPoint:
    return GeoPoint(
        parse_float(tokens[2], line),
        parse_float(tokens[3], line),
        parse_float(tokens[4], line),
    )


@dataclass
class Waypoint(NormalizedRecord):
    """Navigation steerpoint with an action code and optional comment."""

    steerpoint_id: int
    point: GeoPoint = field(default_factory=GeoPoint)
    action: STPTAirAction = STPTAirAction.PRECISION
    comment: str = ""

    keyword: ClassVar[str] = "target"
    arities: ClassVar[tuple[int, ...]] = (6, 7)
    normalizers = {"action": as_enum(STPTAirAction), "comment": as_text}

    @classmethod
    def from_tokens(cls, tokens: List[str], line: str):
        comment = tokens[6] if len(tokens) == MAX_TOKENS else ""
        return cls(
            parse_int(tokens[1], line),
            _point(tokens, line),
            _parse_action(tokens[5], line),
            comment,
        )

    def encode(self) -> str:
        text = (
            f"{self.keyword}_{self.steerpoint_id}="
            f"{_coordinates(self.point)}, {int(self.action)}"
        )
        if self.comment:
            text += f", {self.comment}"
        return text


@dataclass
class WeaponTarget(Waypoint):
    """Target point handed to weapons; same layout as a waypoint."""

    comment: str = NOT_SET

    keyword: ClassVar[str] = "wpntarget"


@dataclass
class ThreatCircle(NormalizedRecord):
    """Pre-planned threat: centre point, radius in ``point.elevation``."""

    steerpoint_id: int
    point: GeoPoint = field(default_factory=GeoPoint)
    comment: str = ""

    keyword: ClassVar[str] = "ppt"
    arities: ClassVar[tuple[int, ...]] = (6, 7)
    normalizers = {"comment": as_text}

    @property
    def radius(self) -> float:
        return self.point.elevation

    @radius.setter
    def radius(self, value: float) -> None:
        self.point.elevation = value

    @classmethod
    def from_tokens(cls, tokens: List[str], line: str):
        # tokens[5] is a reserved field that is always written as zero
        comment = tokens[6] if len(tokens) == MAX_TOKENS else ""
        return cls(parse_int(tokens[1], line), _point(tokens, line), comment)

    def encode(self) -> str:
        return (
            f"{self.keyword}_{self.steerpoint_id}="
            f"{_coordinates(self.point)}, {format_fixed(0)},{self.comment}"
        )


@dataclass
class LinePoint:
    """Vertex of a map polyline; carries no action or comment."""

    steerpoint_id: int
    point: GeoPoint = field(default_factory=GeoPoint)

    keyword: ClassVar[str] = "lineSTPT"
    arities: ClassVar[tuple[int, ...]] = (5,)

    @classmethod
    def from_tokens(cls, tokens: List[str], line: str):
        return cls(parse_int(tokens[1], line), _point(tokens, line))

    def encode(self) -> str:
        return f"{self.keyword}_{self.steerpoint_id}={_coordinates(self.point)}"


def _default_waypoints() -> List[Waypoint]:
    return [Waypoint(i, comment="" if i < 80 else NOT_SET) for i in WAYPOINT_IDS]


@dataclass
class SteerpointTable(Section):
    header: ClassVar[str] = "[STPT]"

    waypoints: List[Waypoint] = field(default_factory=_default_waypoints)
    threats: List[ThreatCircle] = field(
        default_factory=lambda: [ThreatCircle(i) for i in THREAT_IDS]
    )
    lines: List[LinePoint] = field(
        default_factory=lambda: [LinePoint(i) for i in LINE_IDS]
    )
    weapon_targets: List[WeaponTarget] = field(
        default_factory=lambda: [WeaponTarget(i) for i in WEAPON_TARGET_IDS]
    )

    # Lists in output order, keyed by the uppercased line keyword.
    categories: ClassVar[dict[str, tuple[str, type]]] = {
        "TARGET": ("waypoints", Waypoint),
        "PPT": ("threats", ThreatCircle),
        "LINESTPT": ("lines", LinePoint),
        "WPNTARGET": ("weapon_targets", WeaponTarget),
    }

    def begin_decode(self) -> None:
        for attr, _ in self.categories.values():
            getattr(self, attr).clear()

    def decode_line(self, line: str) -> None:
        tokens = tokenize(line, STPT_DELIMITERS, keep_empty=True, limit=MAX_TOKENS)
        category = self.categories.get(tokens[0].upper())
        if category is None:
            return
        attr, record_cls = category
        if len(tokens) < 2:
            raise MalformedLine(line, "missing steerpoint ordinal")
        parse_int(tokens[1], line)
        if len(tokens) not in record_cls.arities:
            return
        getattr(self, attr).append(record_cls.from_tokens(tokens, line))

    def encode_lines(self) -> Iterator[str]:
        for attr, _ in self.categories.values():
            for record in getattr(self, attr):
                yield record.encode()

    def waypoint(self, steerpoint_id: int) -> Optional[Waypoint]:
        return _find(self.waypoints, steerpoint_id)

    def threat(self, steerpoint_id: int) -> Optional[ThreatCircle]:
        return _find(self.threats, steerpoint_id)

    def line_point(self, steerpoint_id: int) -> Optional[LinePoint]:
        return _find(self.lines, steerpoint_id)

    def weapon_target(self, steerpoint_id: int) -> Optional[WeaponTarget]:
        return _find(self.weapon_targets, steerpoint_id)


def _find(records, steerpoint_id):
    for record in records:
        if record.steerpoint_id == steerpoint_id:
            return record
    return None


__all__ = [
    "STPT_DELIMITERS",
    "NOT_SET",
    "Waypoint",
    "WeaponTarget",
    "ThreatCircle",
    "LinePoint",
    "SteerpointTable",
]
