"""Cartridge documents: ordered collections of sections sharing one text buffer."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field, fields
from typing import Dict, Iterator, Type

from .avionics import (
    FCCAGB,
    FCCAGM,
    FCCAIM,
    HUD,
    OTW,
    Bullseye,
    CockpitView,
    InternalLighting,
    Laser,
    MissionName,
    SensorPower,
    Weapons,
)
from .countermeasures import EWS, HARM
from .iff import IFF, Link16
from .mfd import MFD, MFDColors
from .navigation import ICP, MapOptions, NavOffsets
from .radio import Comms, Radio
from .section import FaultSink, Section
from .steerpoints import SteerpointTable

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """Base class; every dataclass field is a :class:`Section`.

    Field order is the on-disk section order.  Sections decode independently
    from the same buffer, so one failing section leaves the others intact.
    """

    def sections(self) -> Iterator[Section]:
        for f in fields(self):
            yield getattr(self, f.name)

    def decode(self, text: str, *, report: FaultSink | None = None) -> bool:
        """Decode every section from ``text``; ``True`` only if all succeed."""

        ok = True
        for section in self.sections():
            ok = section.decode(text, report=report) and ok
        if not ok:
            logger.warning("%s decoded with errors", type(self).__name__)
        return ok

    def encode(self) -> str:
        return "".join(section.encode() for section in self.sections())

    def copy(self):
        return copy.deepcopy(self)

    @classmethod
    def from_text(cls, text: str, *, report: FaultSink | None = None):
        document = cls()
        return document, document.decode(text, report=report)


@dataclass
class DTC(Document):
    """Full data transfer cartridge."""

    ews: EWS = field(default_factory=EWS)
    mfd: MFD = field(default_factory=MFD)
    bullseye: Bullseye = field(default_factory=Bullseye)
    iff: IFF = field(default_factory=IFF)
    harm: HARM = field(default_factory=HARM)
    steerpoints: SteerpointTable = field(default_factory=SteerpointTable)
    radio: Radio = field(default_factory=Radio)
    comms: Comms = field(default_factory=Comms)
    map_options: MapOptions = field(default_factory=MapOptions)
    nav_offsets: NavOffsets = field(default_factory=NavOffsets)
    icp: ICP = field(default_factory=ICP)
    laser: Laser = field(default_factory=Laser)
    fcc_aim: FCCAIM = field(default_factory=FCCAIM)
    fcc_agm: FCCAGM = field(default_factory=FCCAGM)
    fcc_agb: FCCAGB = field(default_factory=FCCAGB)
    hud: HUD = field(default_factory=HUD)
    cockpit_view: CockpitView = field(default_factory=CockpitView)
    otw: OTW = field(default_factory=OTW)
    weapons: Weapons = field(default_factory=Weapons)
    sensor_power: SensorPower = field(default_factory=SensorPower)
    internal_lighting: InternalLighting = field(default_factory=InternalLighting)
    link16: Link16 = field(default_factory=Link16)
    colors: MFDColors = field(default_factory=MFDColors)


@dataclass
class TEMission(Document):
    """Mission file: a title plus the steerpoint table."""

    mission: MissionName = field(default_factory=MissionName)
    steerpoints: SteerpointTable = field(default_factory=SteerpointTable)


DOCUMENT_TYPES: Dict[str, Type[Document]] = {
    "dtc": DTC,
    "mission": TEMission,
}


def detect_document_type(text: str) -> str:
    return "mission" if MissionName.header in text else "dtc"


__all__ = [
    "Document",
    "DTC",
    "TEMission",
    "DOCUMENT_TYPES",
    "detect_document_type",
]
