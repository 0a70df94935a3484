"""Conversion between AirPlay volume values and a 0..1 scale."""

from __future__ import annotations

MUTED = -144.0
_RANGE = 30.0


def normalize_volume(volume: float) -> float:
    """Map an AirPlay volume (-144 mute, else -30..0) to 0..1."""
    if volume == MUTED:
        return 0.0
    if volume == 0:
        return 1.0
    return (volume + _RANGE) / _RANGE


def prepare_volume(volume: float) -> float:
    """Map a 0..1 volume to the AirPlay scale (-144 mute, else -30..0)."""
    if volume == 0:
        return MUTED
    if volume == 1:
        return 0.0
    return volume * _RANGE - _RANGE