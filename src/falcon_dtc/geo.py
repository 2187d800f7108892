"""Geo-referenced points carried by steerpoint records."""

from __future__ import annotations

from dataclasses import dataclass

from .quantize import NormalizedRecord, rounded

COORDINATE_PLACES = 6
_HUNDREDTHS_PER_DEGREE = 360000


def format_dms(value: float, positive: str, negative: str) -> str:
    """Render decimal degrees as ``H DD° MM' SS.SS"``."""

    hemisphere = negative if value < 0 else positive
    total = round(abs(value) * _HUNDREDTHS_PER_DEGREE)
    degrees, remainder = divmod(total, _HUNDREDTHS_PER_DEGREE)
    minutes, hundredths = divmod(remainder, 6000)
    return f"{hemisphere} {degrees}° {minutes:02d}' {hundredths / 100:05.2f}\""


@dataclass
class GeoPoint(NormalizedRecord):
    """A location in decimal degrees plus ground elevation.

    ``y`` carries latitude (negative south) and ``x`` longitude (negative
    west).  All three components keep six decimal places, the precision the
    cartridge stores.
    """

    x: float = 0.0
    y: float = 0.0
    elevation: float = 0.0

    normalizers = {
        "x": rounded(COORDINATE_PLACES),
        "y": rounded(COORDINATE_PLACES),
        "elevation": rounded(COORDINATE_PLACES),
    }

    @property
    def latitude(self) -> str:
        return format_dms(self.y, "N", "S")

    @property
    def longitude(self) -> str:
        return format_dms(self.x, "E", "W")


__all__ = ["GeoPoint", "format_dms", "COORDINATE_PLACES"]
