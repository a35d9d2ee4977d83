from __future__ import annotations
from typing import Iterable, List, Sequence

import numpy as np

from ..colors import Color, ColorInput, parse_color
from ..conversions import np_convert
from ..types.color_types import canonical_space
from ..utils import unwrap_hues

BEZIER_SPACES = ("rgb", "hsl", "lab", "oklab", "oklch")

# Position of the hue channel in each polar space's record.
HUE_INDEX = {"hsl": 0, "hsv": 0, "hwb": 0, "lch": 2, "oklch": 2}


def check_space(space: str) -> str:
    space = canonical_space(space)
    if space not in BEZIER_SPACES:
        raise ValueError(f"Unsupported interpolation space: {space!r}. Expected one of {BEZIER_SPACES}")
    return space


def to_space_values(colors: Sequence[Color], space: str) -> np.ndarray:
    """(n, c + 1) array of channels in ``space`` plus alpha, hues unwrapped along the short arc."""
    rgb = np.array([c.rgb_float for c in colors], dtype=float)
    values = np_convert(rgb, "rgb", space)
    hue = HUE_INDEX.get(space)
    if hue is not None:
        values[:, hue] = unwrap_hues(values[:, hue])
    alpha = np.array([[c.alpha] for c in colors], dtype=float)
    return np.concatenate([values, alpha], axis=1)


def from_space_values(values: np.ndarray, space: str) -> List[Color]:
    values = np.array(values, dtype=float)
    hue = HUE_INDEX.get(space)
    if hue is not None:
        values[:, hue] %= 360.0
    rgb = np_convert(values[:, :-1], space, "rgb")
    return [Color.from_rgb(r, g, b, a) for (r, g, b), a in zip(rgb, values[:, -1])]


def de_casteljau(points: np.ndarray, t) -> np.ndarray:
    """
    Evaluate the Bézier curve with control ``points`` at parameters ``t``.

    Args:
        points: (n, c) control points
        t: (m,) parameters in [0, 1]

    Returns:
        (m, c) array of curve points.
    """
    points = np.asarray(points, dtype=float)
    t = np.asarray(t, dtype=float)[:, None, None]
    layer = np.broadcast_to(points, (t.shape[0],) + points.shape).copy()
    for _ in range(points.shape[0] - 1):
        layer = (1 - t) * layer[:, :-1] + t * layer[:, 1:]
    return layer[:, 0]


def bezier_colors(colors: Iterable[ColorInput], steps: int, space: str = "rgb") -> List[Color]:
    """
    Sample ``steps`` colors along the Bézier curve whose control points are ``colors``.

    The curve starts on the first color and ends on the last; inner colors
    pull it without being hit. Alpha rides along as an extra channel.

    Args:
        colors: Control colors, at least one
        steps: Number of samples, at least 2
        space: One of rgb, hsl, lab, oklab, oklch; hues follow the short arc

    Returns:
        List of ``steps`` colors.
    """
    controls = [parse_color(c) for c in colors]
    if not controls:
        raise ValueError("bezier_colors needs at least one control color")
    if steps < 2:
        raise ValueError(f"steps must be >= 2, got {steps}")
    space = check_space(space)
    curve = de_casteljau(to_space_values(controls, space), np.linspace(0.0, 1.0, steps))
    return from_space_values(curve, space)


def segment_handles(values: np.ndarray) -> np.ndarray:
    """
    Cubic control points for every segment of a polyline so that the joined
    curve passes through each point with a continuous tangent.

    Args:
        values: (n, c) points, n >= 2

    Returns:
        (n - 1, 4, c) array; segment i runs from ``values[i]`` to ``values[i + 1]``.
    """
    padded = np.concatenate([values[:1], values, values[-1:]], axis=0)
    p0, p1, p2, p3 = padded[:-3], padded[1:-2], padded[2:-1], padded[3:]
    return np.stack([p1, p1 + (p2 - p0) / 6.0, p2 - (p3 - p1) / 6.0, p2], axis=1)


def smooth_segments(colors: Sequence[Color], inserts: int, space: str = "rgb") -> List[List[Color]]:
    """
    Intermediate colors for each pair of neighbouring stops.

    Args:
        colors: Stop colors, at least 2
        inserts: Colors to add strictly inside every segment
        space: Interpolation space, see ``bezier_colors``

    Returns:
        One list of ``inserts`` colors per segment.
    """
    space = check_space(space)
    handles = segment_handles(to_space_values(list(colors), space))
    t = np.arange(1, inserts + 1) / (inserts + 1)
    return [from_space_values(de_casteljau(segment, t), space) for segment in handles]
