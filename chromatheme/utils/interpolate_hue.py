"""
Hue arithmetic on the circle.
"""
from __future__ import annotations
from typing import Optional

import numpy as np

from ..types.color_types import HueDirection


def hue_delta(h0: float, h1: float, direction: Optional[HueDirection] = None) -> float:
    """
    Signed angular travel from ``h0`` to ``h1``.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        direction: 'cw' (increasing), 'ccw' (decreasing), 'longest', or
            None / 'shortest' for the short arc

    Returns:
        Degrees to add to ``h0`` to land on ``h1``.
    """
    h0 = h0 % 360.0
    h1 = h1 % 360.0
    if direction == "cw":
        if h1 <= h0:
            h1 += 360.0
    elif direction == "ccw":
        if h1 >= h0:
            h1 -= 360.0
    elif direction in (None, "shortest", "longest"):
        delta = h1 - h0
        if delta > 180.0:
            h1 -= 360.0
        elif delta < -180.0:
            h1 += 360.0
        if direction == "longest" and h1 != h0:
            h1 += -360.0 if h1 > h0 else 360.0
    else:
        raise ValueError(f"Invalid hue direction: {direction}")
    return h1 - h0


def unwrap_hues(hues, direction: Optional[HueDirection] = None) -> np.ndarray:
    """Turn a hue sequence into a continuous one so linear interpolation follows ``direction``."""
    hues = np.asarray(hues, dtype=float)
    if hues.size == 0:
        return hues.copy()
    out = np.empty_like(hues)
    out[0] = hues[0] % 360.0
    for i in range(1, len(hues)):
        out[i] = out[i - 1] + hue_delta(out[i - 1], hues[i], direction)
    return out


def interpolate_hue(h0: float, h1: float, u, direction: Optional[HueDirection] = None) -> np.ndarray:
    """Interpolated hue(s) in [0, 360) for coefficient(s) ``u``."""
    u = np.asarray(u, dtype=float)
    return (h0 + u * hue_delta(h0, h1, direction)) % 360.0


def blend_hue(h0: float, h1: float, weight: float) -> float:
    """Move ``weight`` of the way from ``h0`` toward ``h1`` along the short arc."""
    return float((h0 + weight * hue_delta(h0, h1)) % 360.0)
