"""
Codec for Falcon BMS data transfer cartridge (DTC) and mission files.

A document is a fixed, ordered list of ``[SECTION]`` blocks.  Each section
decodes itself from the shared text buffer into typed records and encodes
those records back into the same line format.
"""

from .document import DOCUMENT_TYPES, DTC, Document, TEMission, detect_document_type
from .enums import RadioType, STPTAirAction
from .errors import DecodeError, IndexOutOfRange, MalformedLine, SectionNotFound
from .geo import GeoPoint
from .quantize import clamp, clamp_or_zero, quantize_frequency, snap_25khz
from .section import DecodeFault, Section, iter_lines, locate, log_fault
from .steerpoints import LinePoint, SteerpointTable, ThreatCircle, Waypoint, WeaponTarget
from .tokens import tokenize

__all__ = [
    "__version__",
    "Document",
    "DTC",
    "TEMission",
    "DOCUMENT_TYPES",
    "detect_document_type",
    "Section",
    "DecodeFault",
    "locate",
    "iter_lines",
    "log_fault",
    "DecodeError",
    "SectionNotFound",
    "MalformedLine",
    "IndexOutOfRange",
    "tokenize",
    "clamp",
    "clamp_or_zero",
    "snap_25khz",
    "quantize_frequency",
    "RadioType",
    "STPTAirAction",
    "GeoPoint",
    "SteerpointTable",
    "Waypoint",
    "WeaponTarget",
    "ThreatCircle",
    "LinePoint",
]

__version__ = "0.0.1"
