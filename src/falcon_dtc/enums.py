"""Enumerated codes stored in cartridge sections.

Members are written to disk by integer value except where a section stores
the member name (``TACANBand`` in the datalink section).
"""

from __future__ import annotations

from enum import IntEnum


class RadioType(IntEnum):
    UHF = 0
    VHF = 1
    ILS = 2


class TACANBand(IntEnum):
    X = 0
    Y = 1


class TACANMode(IntEnum):
    AA = 0
    AG = 1


class STPTAirAction(IntEnum):
    """Action performed at a steerpoint."""

    PRECISION = -1
    NAV = 0
    TAKEOFF = 1
    PUSH = 2
    SPLIT = 3
    REFUEL = 4
    REARM = 5
    PICKUP = 6
    LAND = 7
    HOLD = 8
    CONTACT = 9
    ESCORT = 10
    SWEEP = 11
    CAP = 12
    INTERCEPT = 13
    GRND_ATTACK = 14
    SURFACE_ATTACK = 15
    SEARCH_AND_DESTROY = 16
    STRIKE = 17
    BOMB = 18
    SEAD = 19
    ELINT = 20
    RECON = 21
    RESCUE = 22
    ASW = 23
    FUEL = 24
    AIRDROP = 25
    JAMMING = 26


class MFDMasterMode(IntEnum):
    AA = 0
    AG = 1
    NAV = 2
    MSL = 3
    DGFT = 4
    SJ = 5


class MFDColorOption(IntEnum):
    DEFAULT = -1
    GREEN = 1
    WHITE = 2
    RED = 3
    YELLOW = 4
    CYAN = 5
    MAGENTA = 6
    BLUE = 7
    GREY = 8
    BRIGHT_GREEN = 9
    WHITY_GRAY = 10
    DARK_GRAY = 11
    BLACK = 12
    DARK_GREEN = 13


class MFDColorSetting(IntEnum):
    """Slot index of each symbol in the MFD color table."""

    DEFAULT = 0
    SOI_BOX = 1
    AIRCRAFT_REF = 2
    BULLSEYE = 3
    BULLSEYE_DATA = 4
    STEERPOINT_CURSOR_DATA = 5
    REFERENCE_SYMBOL = 6
    NOT_SOI = 7
    TGT_CLOSURE_RATE = 8
    ANTENNA_AZEL_SCALE = 9
    ANTENNA_AZEL = 10
    FCR_REAQ_IND = 11
    FCR_RANGE_TICKS = 12
    CURSOR = 13
    CURSOR_SCAN_LIMIT_NEGATIVE = 14
    MINMAX_ALT = 15
    FCR_AZIMUTH_SCAN_LIM = 16
    ATTACK_STEERING_CUE = 17
    LINES = 18
    CUSTOM_LINES = 19
    CUR_STPT = 20
    DLZ = 21
    STEER_ERROR_CUE = 22
    UNKNOWN = 23
    EXPAND_BOX = 24
    FCR_BUG = 25
    FCR_BUGGED_FLASH_TAIL = 26
    FCR_BUGGED_TAIL = 27
    FCR_BUGGED = 28
    KILL_X = 29
    FCR_UNK_TRACK_FLASH = 30
    FCR_UNK_TRACK = 31
    DL_TEAM14 = 32
    DL_TEAM58 = 33
    LSDL_LINE = 34
    AIRSPEED_BOX = 35
    AIRSPEED_HDG_BOX = 36
    RADAR_ALT_BOX = 37
    OWNSHIP = 38
    ROUTES = 39
    DATALINK = 40
    MARKPOINT = 41
    SWEEP = 42
    DLP_SCAP = 43
    DLP_MISSILE = 44
    DLP_AZ_LINE = 45
    PREPLAN_INRANGE = 46
    PREPLAN = 47
    HARPOON_PATH = 48
    HARPOON_TEST = 49
    HARM_ALIC_BOX = 50
    HARM_ALIC_BOX_RANGE_LINES = 51
    HARM_DTSB_BOX = 52
    HARM_DTSB_SYMBOL = 53
    HARM_HAD_CURSOR = 54
    HARM_HAD_WEZ = 55
    HARM_HAD_ROUTES = 56
    HARM_HAD_LOCK = 57
    HARM_HAD_EMITTER_BEHIND9 = 58
    HARM_HAD_EMITTER_BEHIND9_TR = 59
    HARM_HAD_EMITTER = 60
    HARM_HAD_EMITTER_LAUNCH = 61
    HARM_HAD_EMITTER_TRACK = 62
    HARM_HAD_EMITTER_RADIATE = 63
    HARM_HAS_EMITTER = 64
    HARM_HANDOFF_EMITTER = 65
    HARM_HANDOFF = 66
    PULLUP_CROSS = 67
    CHECKATTITUDE = 68
    CHECKATTITUDE_TEXT = 69
    TFRLIMITS = 70
    TFRLIMITS_TEXT = 71
    SENSORS_VIDEO = 72
    CUSTOM_LINE1 = 73
    CUSTOM_LINE2 = 74
    CUSTOM_LINE3 = 75
    CUSTOM_LINE4 = 76
    ROUTES_STPT = 77


class FCRSubmode(IntEnum):
    STRF = 0
    EEGS = 1
    SNAP = 2
    LCOS = 3
    SSLC = 4
    SRM = 5
    MRM = 6
    CCIP = 7
    CCRP = 8
    LADD = 9
    DTOS = 10
    EOVIS = 11
    EOPRE = 12
    EOBORE = 13
    IAMVIS = 14
    IAMPRE = 15


class AIM9SearchMode(IntEnum):
    SPOT = 0
    SCAN = 1


class AIM9ThresholdMode(IntEnum):
    BP = 0
    TD = 1


class AIM120TargetSize(IntEnum):
    UNKNOWN = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3


class FuzeMode(IntEnum):
    NOSE = 0
    TAIL = 1
    NSTL = 2


class HARMMode(IntEnum):
    HAS = 0
    POS = 1


class HARMSubMode(IntEnum):
    PN = 0
    EOM = 1
    RUK = 2


class NavOffsetMode(IntEnum):
    NONE = -1
    VRP = 0
    VIP = 1


class IFFAutoChange(IntEnum):
    MAN = 0
    TIM = 1
    POS = 2
    PT = 3


class CardinalDirection(IntEnum):
    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7


class HUDScales(IntEnum):
    OFF = 0
    VAH = 1
    VAHVV = 2


class HUDFPM(IntEnum):
    OFF = 0
    FPM = 1
    ATT = 2


class HUDVelocityType(IntEnum):
    GND = 0
    CAS = 1
    TAS = 2


class HUDDED(IntEnum):
    OFF = 0
    PFL = 1
    DED = 2


class HUDAltitude(IntEnum):
    RADAR = 0
    BARO = 1
    AUTO = 2


class MasterArmSetting(IntEnum):
    OFF = 0
    SIM = 1
    ARM = 2


class OTWViewSetting(IntEnum):
    HUD = 1
    PIT_2D = 2
    PIT_3D = 3
    PADLOCK = 4
    HUD_ONLY = 5
    TARGET = 6
    INCOMING = 7
    FRIENDLY = 8
    CHASE = 9
    ORBIT = 10


class MapViewSettings(IntEnum):
    BULLSEYE = 0
    LABELS = 1
    AIRBASES = 2
    AIR_DEFENSES = 3
    ARMY = 4
    CCC = 5
    POLITICAL = 6
    INFRASTRUCTURE = 7
    LOGISTICS = 8
    WAR_PRODUCTION = 9
    NAV_BEACON = 10
    OTHER_INSTALLATIONS = 11
    UNUSED = 12
    VICTORY_CONDITIONS = 13
    GROUND_DIVISIONS = 14
    GROUND_BRIGADES = 15
    GROUND_BATTALIONS = 16
    GROUND_COMBAT = 17
    GROUND_AIR_DEFENSE = 18
    GROUND_SUPPORT = 19
    SQUADRON = 20
    PACKAGES = 21
    FIGHTER_AIRCRAFT = 22
    ATTACK_AIRCRAFT = 23
    BOMBER_AIRCRAFT = 24
    SUPPORT_AIRCRAFT = 25
    HELICOPTERS = 26
    UNKNOWN_AIRCRAFT = 27
    NAVAL_COMBAT = 28
    NAVAL_SUPPORT = 29
    AIR_DEFENSE_THREATS_HIGH = 30
    AIR_DEFENSE_THREATS_LOW = 31
    RADAR_COVERAGE_HIGH = 32
    RADAR_COVERAGE_LOW = 33


__all__ = [
    "RadioType",
    "TACANBand",
    "TACANMode",
    "STPTAirAction",
    "MFDMasterMode",
    "MFDColorOption",
    "MFDColorSetting",
    "FCRSubmode",
    "AIM9SearchMode",
    "AIM9ThresholdMode",
    "AIM120TargetSize",
    "FuzeMode",
    "HARMMode",
    "HARMSubMode",
    "NavOffsetMode",
    "IFFAutoChange",
    "CardinalDirection",
    "HUDScales",
    "HUDFPM",
    "HUDVelocityType",
    "HUDDED",
    "HUDAltitude",
    "MasterArmSetting",
    "OTWViewSetting",
    "MapViewSettings",
]
