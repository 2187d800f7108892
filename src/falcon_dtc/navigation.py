"""Navigation sections: offset aimpoints, map overlays and ICP settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Sequence

from .enums import MapViewSettings, MFDMasterMode, NavOffsetMode
from .errors import MalformedLine
from .quantize import NormalizedRecord, as_enum, clamp
from .section import FaultSink, ScalarField, ScalarSection, slot
from .tokens import (
    enum_name_parser,
    enum_parser,
    format_decimal,
    format_fixed,
    parse_flag,
    parse_float,
    parse_int,
)

MAX_STEERPOINT = 99


def _steerpoint(value: Any) -> int:
    return clamp(int(value), 0, MAX_STEERPOINT)


def _bearing(value: Any) -> float:
    return round(float(value) % 360, 1) % 360


def _range(value: Any) -> int:
    return max(0, int(value))


@dataclass
class OffsetProfile(NormalizedRecord):
    """Bearing/range/elevation offset from a steerpoint."""

    steerpoint_id: int = 0
    bearing: float = 0.0
    range: int = 0
    elevation: int = 0

    normalizers = {
        "steerpoint_id": _steerpoint,
        "bearing": _bearing,
        "range": _range,
        "elevation": int,
    }

    def encode(self) -> str:
        return f"{self.bearing:.1f},{self.range},{self.elevation}"

    def assign(self, steerpoint_id: int, fields: Sequence[str], line: str) -> None:
        if len(fields) != 3:
            raise MalformedLine(line, "expected bearing,range,elevation")
        self.steerpoint_id = steerpoint_id
        self.bearing = parse_float(fields[0], line)
        self.range = int(parse_float(fields[1], line))
        self.elevation = parse_int(fields[2], line)


PROFILE_KEYS = {
    "VIP": "vip",
    "VIPPUP": "vip_pup",
    "VRP": "vrp",
    "VRPPUP": "vrp_pup",
}


@dataclass
class NavOffsets(ScalarSection):
    """VIP/VRP offsets and the optional offset aimpoints.

    ``VIP=<stpt>,<bearing>,<range>,<elevation>`` lines are always written.
    Offset aimpoints (``OA1-<stpt>=<bearing>,<range>,<elevation>``) are only
    written once bound to a steerpoint; the first ``OA1``/``OA2`` line read
    belongs to the VIP and the second to the VRP.
    """

    header: ClassVar[str] = "[NAV OFFSETS]"

    mode: NavOffsetMode = NavOffsetMode.NONE
    vip: OffsetProfile = field(default_factory=OffsetProfile)
    vip_pup: OffsetProfile = field(default_factory=OffsetProfile)
    vrp: OffsetProfile = field(default_factory=OffsetProfile)
    vrp_pup: OffsetProfile = field(default_factory=OffsetProfile)
    vip_oa1: OffsetProfile = field(default_factory=OffsetProfile)
    vip_oa2: OffsetProfile = field(default_factory=OffsetProfile)
    vrp_oa1: OffsetProfile = field(default_factory=OffsetProfile)
    vrp_oa2: OffsetProfile = field(default_factory=OffsetProfile)

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField(
            "Modesel",
            "mode",
            enum_name_parser(NavOffsetMode),
            lambda mode: mode.name.lower(),
        ),
    )
    normalizers = {"mode": as_enum(NavOffsetMode)}

    def begin_decode(self) -> None:
        for attr in ("vip_oa1", "vip_oa2", "vrp_oa1", "vrp_oa2"):
            setattr(self, attr, OffsetProfile())

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        fields = [part.strip() for part in value.split(",")]
        if len(key) == 1 and key[0] in PROFILE_KEYS:
            profile = getattr(self, PROFILE_KEYS[key[0]])
            profile.assign(parse_int(fields[0], line), fields[1:], line)
            return
        name, _, stpt = key[0].partition("-")
        if name not in ("OA1", "OA2"):
            return
        vip_oa = getattr(self, f"vip_{name.lower()}")
        target = vip_oa if vip_oa.steerpoint_id == 0 else getattr(self, f"vrp_{name.lower()}")
        target.assign(parse_int(stpt, line), fields, line)

    def encode_lines(self) -> Iterator[str]:
        yield from self.scalar_lines()
        for key, attr in PROFILE_KEYS.items():
            profile = getattr(self, attr)
            yield f"{key}={profile.steerpoint_id},{profile.encode()}"
        for name, profile in (
            ("OA1", self.vip_oa1),
            ("OA2", self.vip_oa2),
            ("OA1", self.vrp_oa1),
            ("OA2", self.vrp_oa2),
        ):
            if profile.steerpoint_id != 0:
                yield f"{name}-{profile.steerpoint_id}={profile.encode()}"


# Ground unit echelons from coarsest to finest; at most one may be shown.
ECHELONS = (
    MapViewSettings.GROUND_DIVISIONS,
    MapViewSettings.GROUND_BRIGADES,
    MapViewSettings.GROUND_BATTALIONS,
)


def _exclusive_echelons(value: Any) -> tuple[bool, ...]:
    enabled = [bool(v) for v in value]
    if len(enabled) != len(MapViewSettings):
        raise ValueError(f"expected {len(MapViewSettings)} map settings")
    shown = [e for e in ECHELONS if enabled[e]]
    for echelon in shown[1:]:
        enabled[echelon] = False
    return tuple(enabled)


@dataclass
class MapOptions(ScalarSection):
    """Map overlay toggles written as ``MapOpt_<n>=0|1``.

    ``enabled`` is an immutable tuple; change it with :meth:`set_enabled`,
    which keeps at most one ground echelon visible.  Assigning a whole tuple
    keeps the coarsest echelon when several are set.
    """

    header: ClassVar[str] = "[MAP_POP]"
    key_delimiters: ClassVar[tuple[str, ...]] = ("_",)

    enabled: tuple[bool, ...] = (False,) * len(MapViewSettings)

    normalizers = {"enabled": _exclusive_echelons}

    def is_enabled(self, setting: MapViewSettings) -> bool:
        return self.enabled[MapViewSettings(setting)]

    def set_enabled(self, setting: MapViewSettings, enabled: bool = True) -> None:
        setting = MapViewSettings(setting)
        values = list(self.enabled)
        values[setting] = bool(enabled)
        if enabled and setting in ECHELONS:
            for echelon in ECHELONS:
                if echelon is not setting:
                    values[echelon] = False
        self.enabled = tuple(values)

    def decode(self, buffer: str, *, report: FaultSink | None = None) -> bool:
        try:
            return super().decode(buffer, report=report)
        finally:
            # staging list only lives for one decode, failed or not
            vars(self).pop("_pending", None)

    def begin_decode(self) -> None:
        self._pending = list(self.enabled)

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        if key[0] != "MAPOPT" or len(key) != 2:
            return
        index = parse_int(key[1], line)
        slot(self._pending, index, line)
        self._pending[index] = parse_flag(value, line)

    def end_decode(self) -> None:
        self.enabled = tuple(self._pending)

    def encode_lines(self) -> Iterator[str]:
        for index, enabled in enumerate(self.enabled):
            yield f"MapOpt_{index}={int(enabled)}"


@dataclass
class ICP(ScalarSection):
    """Up-front controls: master mode, altitude floors, wingspan and bingo."""

    header: ClassVar[str] = "[ICP]"

    master_mode: MFDMasterMode = MFDMasterMode.NAV
    alow_agl: float = 100.0
    alow_msl: float = 10000.0
    alow_tf_advisory: float = 400.0
    manual_wingspan: float = 35.0
    bingo_fuel: float = 2500.0

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("MasterMode", "master_mode", enum_parser(MFDMasterMode)),
        ScalarField("Alow AGL", "alow_agl", parse_float, format_fixed),
        ScalarField("Alow MSL", "alow_msl", parse_float, format_decimal),
        ScalarField("Alow TFAdv", "alow_tf_advisory", parse_float, format_decimal),
        ScalarField("Manual Wingspan", "manual_wingspan", parse_float, format_fixed),
        ScalarField("Bingo_Fuel", "bingo_fuel", parse_float, format_fixed),
    )
    normalizers = {
        "master_mode": as_enum(MFDMasterMode),
        "alow_agl": float,
        "alow_msl": float,
        "alow_tf_advisory": float,
        "manual_wingspan": float,
        "bingo_fuel": float,
    }


__all__ = [
    "OffsetProfile",
    "NavOffsets",
    "ECHELONS",
    "MapOptions",
    "ICP",
]
