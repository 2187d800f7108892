"""Small avionics and cockpit sections.

Most of these are flat ``Key=value`` blocks handled entirely by
:class:`~falcon_dtc.section.ScalarSection`.  The bombing profiles add an
ordinal in the key and the lighting/sensor blocks are open-ended maps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Iterator, List

from .enums import (
    AIM9SearchMode,
    AIM9ThresholdMode,
    AIM120TargetSize,
    CardinalDirection,
    FCRSubmode,
    FuzeMode,
    HUDAltitude,
    HUDDED,
    HUDFPM,
    HUDScales,
    HUDVelocityType,
    MasterArmSetting,
    OTWViewSetting,
)
from .errors import MalformedLine
from .quantize import NormalizedRecord, as_enum, as_text
from .section import ScalarField, ScalarSection, Section, slot
from .tokens import (
    enum_parser,
    format_fixed,
    parse_flag,
    parse_float,
    parse_int,
    parse_text,
    split_entry,
)


@dataclass
class Laser(ScalarSection):
    header: ClassVar[str] = "[Laser]"

    start_time: int = 8
    tgp_code: int = 1520
    lst_code: int = 1520

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("LaserST", "start_time"),
        ScalarField("LaserTGP", "tgp_code"),
        ScalarField("LaserLST", "lst_code"),
    )


@dataclass
class FCCAIM(ScalarSection):
    header: ClassVar[str] = "[FCC_AIM]"

    aim9_search: AIM9SearchMode = AIM9SearchMode.SCAN
    aim9_threshold: AIM9ThresholdMode = AIM9ThresholdMode.TD
    aim120_target_size: AIM120TargetSize = AIM120TargetSize.UNKNOWN

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("AIM-9_Spot/Scan", "aim9_search", enum_parser(AIM9SearchMode)),
        ScalarField("AIM-9_TD/BP", "aim9_threshold", enum_parser(AIM9ThresholdMode)),
        ScalarField(
            "AIM120_TargetSize", "aim120_target_size", enum_parser(AIM120TargetSize)
        ),
    )
    normalizers = {
        "aim9_search": as_enum(AIM9SearchMode),
        "aim9_threshold": as_enum(AIM9ThresholdMode),
        "aim120_target_size": as_enum(AIM120TargetSize),
    }


@dataclass
class FCCAGM(ScalarSection):
    """Maverick auto power-on."""

    header: ClassVar[str] = "[FCC_AGM]"

    auto_power: bool = False
    auto_power_direction: CardinalDirection = CardinalDirection.NORTH
    auto_power_waypoint: int = 0

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("Maverick_AutoPwr", "auto_power", parse_flag),
        ScalarField(
            "Maverick_AutoPwrDir",
            "auto_power_direction",
            enum_parser(CardinalDirection),
        ),
        ScalarField("Maverick_AutoPwrWpt", "auto_power_waypoint"),
    )
    normalizers = {
        "auto_power": bool,
        "auto_power_direction": as_enum(CardinalDirection),
    }


AGB_PROFILES = 2

# Profile key suffixes in output order.
AGB_FIELDS: tuple[ScalarField, ...] = (
    ScalarField("Submode", "submode", enum_parser(FCRSubmode)),
    ScalarField("Fuze", "fuze", enum_parser(FuzeMode)),
    ScalarField("SGL/PAIR", "pair_release", parse_flag),
    ScalarField("Release_Spacing", "spacing"),
    ScalarField("Release_Pulse", "release_pulses"),
    ScalarField("Release_Angle", "release_angle"),
    ScalarField("C1_AD1", "c1_arming_delay1", parse_float, format_fixed),
    ScalarField("C1_AD2", "c1_arming_delay2", parse_float, format_fixed),
    ScalarField("C2_AD", "c2_arming_delay", parse_float, format_fixed),
    ScalarField("C2_BA", "c2_burst_altitude"),
)
_AGB_INDEX = {scalar.key.upper(): scalar for scalar in AGB_FIELDS}


@dataclass
class BombingProfile(NormalizedRecord):
    submode: FCRSubmode = FCRSubmode.CCRP
    fuze: FuzeMode = FuzeMode.NOSE
    pair_release: bool = False
    spacing: int = 210
    release_pulses: int = 1
    release_angle: int = 45
    c1_arming_delay1: float = 400.0
    c1_arming_delay2: float = 600.0
    c2_arming_delay: float = 150.0
    c2_burst_altitude: int = 750

    normalizers = {
        "submode": as_enum(FCRSubmode),
        "fuze": as_enum(FuzeMode),
        "pair_release": bool,
    }

    def encode(self, profile_id: int) -> Iterator[str]:
        for scalar in AGB_FIELDS:
            yield f"Profile{profile_id}_{scalar.key}={scalar.render(getattr(self, scalar.attr))}"


@dataclass
class FCCAGB(ScalarSection):
    """Two air-to-ground bombing profiles, keyed ``Profile<n>_<setting>``.

    Profile numbers on disk start at 1.
    """

    header: ClassVar[str] = "[FCC_AGB]"
    key_delimiters: ClassVar[tuple[str, ...]] = ("_",)

    profiles: List[BombingProfile] = field(
        default_factory=lambda: [BombingProfile() for _ in range(AGB_PROFILES)]
    )

    def decode_entry(self, key: list[str], value: str, line: str) -> None:
        if not key[0].startswith("PROFILE") or len(key) < 2:
            return
        scalar = _AGB_INDEX.get("_".join(key[1:]))
        if scalar is None:
            return
        profile = slot(self.profiles, parse_int(key[0][len("PROFILE"):], line) - 1, line)
        setattr(profile, scalar.attr, scalar.parse(value, line))

    def encode_lines(self) -> Iterator[str]:
        for i, profile in enumerate(self.profiles, start=1):
            yield from profile.encode(i)


@dataclass
class HUD(ScalarSection):
    header: ClassVar[str] = "[Hud]"

    scales: HUDScales = HUDScales.OFF
    brightness: int = 1
    fpm: HUDFPM = HUDFPM.OFF
    velocity: HUDVelocityType = HUDVelocityType.CAS
    altitude: HUDAltitude = HUDAltitude.AUTO
    sym_wheel_position: int = 0
    ded: HUDDED = HUDDED.OFF

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("Scales", "scales", enum_parser(HUDScales)),
        ScalarField("Brightness", "brightness"),
        ScalarField("FPM", "fpm", enum_parser(HUDFPM)),
        ScalarField("Velocity", "velocity", enum_parser(HUDVelocityType)),
        ScalarField("Alt", "altitude", enum_parser(HUDAltitude)),
        ScalarField("SymWheelPos", "sym_wheel_position"),
        ScalarField("DED", "ded", enum_parser(HUDDED)),
    )
    normalizers = {
        "scales": as_enum(HUDScales),
        "fpm": as_enum(HUDFPM),
        "velocity": as_enum(HUDVelocityType),
        "altitude": as_enum(HUDAltitude),
        "ded": as_enum(HUDDED),
    }


@dataclass
class Weapons(ScalarSection):
    header: ClassVar[str] = "[Weapons]"

    master_arm: MasterArmSetting = MasterArmSetting.OFF

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("MasterArm", "master_arm", enum_parser(MasterArmSetting)),
    )
    normalizers = {"master_arm": as_enum(MasterArmSetting)}


@dataclass
class Bullseye(ScalarSection):
    header: ClassVar[str] = "[Bullseye]"

    info_on_mfd: bool = False

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("BullseyeInfoOnMFD", "info_on_mfd", parse_flag),
    )
    normalizers = {"info_on_mfd": bool}


@dataclass
class CockpitView(ScalarSection):
    header: ClassVar[str] = "[Cockpit View]"

    wide_view: bool = False

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("WideView", "wide_view", parse_flag),
    )
    normalizers = {"wide_view": bool}


@dataclass
class OTW(ScalarSection):
    """Out-the-window view selected on entry."""

    header: ClassVar[str] = "[OTW]"

    mode: OTWViewSetting = OTWViewSetting.PIT_3D

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("Mode", "mode", enum_parser(OTWViewSetting)),
    )
    normalizers = {"mode": as_enum(OTWViewSetting)}


@dataclass
class SettingsMap(Section):
    """Open-ended ``KEY=<int>`` block; keys are stored uppercase.

    The map is replaced on every decode.
    """

    settings: Dict[str, int] = field(default_factory=dict)

    def begin_decode(self) -> None:
        self.settings = {}

    def decode_line(self, line: str) -> None:
        entry = split_entry(line)
        if entry is None:
            return
        key, value = entry
        if not key:
            raise MalformedLine(line, "missing setting name")
        self.settings[key.upper()] = parse_int(value, line)

    def encode_lines(self) -> Iterator[str]:
        for key, value in self.settings.items():
            yield f"{key}={value}"


@dataclass
class InternalLighting(SettingsMap):
    header: ClassVar[str] = "[INT_LIGHTING]"


@dataclass
class SensorPower(SettingsMap):
    header: ClassVar[str] = "[SNSR_PWR]"


@dataclass
class MissionName(ScalarSection):
    header: ClassVar[str] = "[MISSION]"

    title: str = ""

    scalar_fields: ClassVar[tuple[ScalarField, ...]] = (
        ScalarField("title", "title", parse_text, str),
    )
    normalizers = {"title": as_text}


__all__ = [
    "Laser",
    "FCCAIM",
    "FCCAGM",
    "AGB_PROFILES",
    "BombingProfile",
    "FCCAGB",
    "HUD",
    "Weapons",
    "Bullseye",
    "CockpitView",
    "OTW",
    "SettingsMap",
    "InternalLighting",
    "SensorPower",
    "MissionName",
]
