"""Numeric normalization: range clamping and 25 kHz frequency snapping.

Records that need normalized fields subclass :class:`NormalizedRecord` and
list a normalizer per attribute.  The normalizer runs on every assignment,
including the one made by the dataclass ``__init__``, so a record can never
hold an out-of-range value regardless of whether it came from a decoded line
or from a caller.
"""

from __future__ import annotations

import math
from typing import Any, Callable, ClassVar, Mapping

from .enums import RadioType

CHANNEL_STEP_KHZ = 25

UHF_RANGE = (225.0, 399.975)
VHF_FM_RANGE = (30.0, 61.0)
VHF_AM_RANGE = (118.0, 144.0)
ILS_RANGE = (108.0, 117.975)
VHF_AM_FLOOR = 118.0


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def clamp_or_zero(value, lo, hi):
    """Clamp to ``hi`` but collapse anything below ``lo`` to zero."""

    if value < lo:
        return type(value)(0)
    return min(hi, value)


def snap_25khz(mhz: float) -> float:
    """Floor ``mhz`` to the nearest lower 25 kHz channel.

    Values already on a channel boundary are returned unchanged.
    """

    if not math.isfinite(mhz):
        raise ValueError(f"frequency must be finite, got {mhz!r}")
    khz = round(mhz * 1000, 3)
    if not math.isfinite(khz):
        raise ValueError(f"frequency out of range, got {mhz!r}")
    channel = math.floor(khz) // CHANNEL_STEP_KHZ * CHANNEL_STEP_KHZ
    return channel / 1000


def band_range(band: RadioType, snapped: float) -> tuple[float, float]:
    if band is RadioType.UHF:
        return UHF_RANGE
    if band is RadioType.VHF:
        return VHF_FM_RANGE if snapped < VHF_AM_FLOOR else VHF_AM_RANGE
    return ILS_RANGE


def quantize_frequency(value: float, band: RadioType) -> float:
    """Snap ``value`` (MHz) to 25 kHz and clamp it into ``band``.

    Zero means "unset" and bypasses quantization.
    """

    if value == 0:
        return 0.0
    snapped = snap_25khz(float(value))
    lo, hi = band_range(RadioType(band), snapped)
    return clamp(snapped, lo, hi)


def bounded(lo: int, hi: int) -> Callable[[Any], int]:
    def normalize(value: Any) -> int:
        return clamp(int(value), lo, hi)

    return normalize


def bounded_or_zero(lo: int, hi: int) -> Callable[[Any], int]:
    def normalize(value: Any) -> int:
        return clamp_or_zero(int(value), lo, hi)

    return normalize


def rounded(places: int) -> Callable[[Any], float]:
    def normalize(value: Any) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"value must be finite, got {value!r}")
        return round(value, places) + 0.0

    return normalize


def as_enum(enum_cls) -> Callable[[Any], Any]:
    def normalize(value: Any):
        return enum_cls(value)

    return normalize


def as_text(value: Any) -> str:
    return str(value).strip()


class NormalizedRecord:
    """Mixin that passes attribute assignments through ``normalizers``."""

    normalizers: ClassVar[Mapping[str, Callable[[Any], Any]]] = {}

    def __setattr__(self, name: str, value: Any) -> None:
        normalize = self.normalizers.get(name)
        if normalize is not None:
            value = normalize(value)
        super().__setattr__(name, value)


__all__ = [
    "CHANNEL_STEP_KHZ",
    "UHF_RANGE",
    "VHF_FM_RANGE",
    "VHF_AM_RANGE",
    "ILS_RANGE",
    "clamp",
    "clamp_or_zero",
    "snap_25khz",
    "band_range",
    "quantize_frequency",
    "bounded",
    "bounded_or_zero",
    "rounded",
    "as_enum",
    "as_text",
    "NormalizedRecord",
]
