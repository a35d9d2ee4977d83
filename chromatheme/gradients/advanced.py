"""
Sampled gradients and helpers that work on lists of colors rather than CSS.
"""
from __future__ import annotations
import math
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from ..analysis import delta_e_2000, delta_e_oklab
from ..colors import Color, ColorInput, parse_color
from .bezier import check_space, to_space_values, from_space_values
from .css import linear_gradient, radial_gradient, conic_gradient
from .stops import normalize_stops

UnitTransform = Callable[[NDArray], NDArray]

EASINGS: Dict[str, UnitTransform] = {
    "linear": lambda t: t,
    "ease-in": lambda t: t * t * t,
    "ease-out": lambda t: 1 - (1 - t) ** 3,
    "ease-in-out": lambda t: np.where(t < 0.5, 4 * t ** 3, 1 - (-2 * t + 2) ** 3 / 2),
    "smoothstep": lambda t: t * t * (3 - 2 * t),
}


def resolve_easing(easing: Union[str, UnitTransform, None]) -> UnitTransform:
    if easing is None:
        return EASINGS["linear"]
    if callable(easing):
        return easing
    try:
        return EASINGS[easing]
    except KeyError:
        raise ValueError(f"Unknown easing: {easing!r}. Expected one of {list(EASINGS)}") from None


def midpoint_transform(midpoint: float) -> UnitTransform:
    """
    Power curve that maps ``midpoint`` to 0.5; 0.5 is linear, smaller values
    reach the halfway color sooner.
    """
    if not 0.0 < midpoint < 1.0:
        raise ValueError(f"midpoint must be inside (0, 1), got {midpoint}")
    if midpoint == 0.5:
        return EASINGS["linear"]
    low = math.log(0.5) / math.log(midpoint)
    high = math.log(0.5) / math.log(1 - midpoint)

    def transform(t: NDArray) -> NDArray:
        t = np.clip(np.asarray(t, dtype=float), 0.0, 1.0)
        before = (t / midpoint) ** low * 0.5
        after = 1 - ((1 - t) / (1 - midpoint)) ** high * 0.5
        return np.where(t < midpoint, before, after)

    return transform


def interpolate_gradient(
    colors: Iterable,
    steps: int,
    space: str = "oklch",
    easing: Union[str, UnitTransform, None] = None,
    midpoints: Optional[Sequence[Optional[float]]] = None,
) -> List[Color]:
    """
    Sample a multi-stop gradient into ``steps`` colors.

    Args:
        colors: Color inputs and/or ``GradientStop`` entries; positions as in CSS
        steps: Number of output colors, at least 2
        space: Interpolation space (rgb, hsl, lab, oklab, oklch); hues take the short arc
        easing: Name from ``EASINGS`` or a unit transform, applied within each segment
        midpoints: Per-segment midpoint (see ``midpoint_transform``), ``None`` entries stay linear

    Returns:
        List of ``steps`` colors; the first and last equal the end stops.
    """
    if steps < 2:
        raise ValueError(f"steps must be >= 2, got {steps}")
    stops = normalize_stops(colors)
    if len(stops) == 1:
        return [stops[0].color] * steps
    ease = resolve_easing(easing)
    segment_count = len(stops) - 1
    midpoints = list(midpoints or [])
    if len(midpoints) > segment_count:
        raise ValueError(f"Got {len(midpoints)} midpoints for {segment_count} segments")
    shapes = [midpoint_transform(m) if m is not None else None for m in midpoints]
    shapes += [None] * (segment_count - len(shapes))

    space = check_space(space)
    values = to_space_values([s.color for s in stops], space)
    positions = np.array([s.position for s in stops])
    t = np.linspace(0.0, 1.0, steps)

    out = np.empty((steps, values.shape[1]))
    for index, position in enumerate(t):
        # Last segment whose start is at or before ``position``.
        seg = int(np.clip(np.searchsorted(positions, position, side="right") - 1, 0, segment_count - 1))
        start, end = positions[seg], positions[seg + 1]
        local = 0.0 if end <= start else (position - start) / (end - start)
        local = float(np.clip(local, 0.0, 1.0))
        if shapes[seg] is not None:
            local = float(shapes[seg](local))
        local = float(ease(np.float64(local)))
        out[index] = values[seg] + (values[seg + 1] - values[seg]) * local
    return from_space_values(out, space)


def sample_gradient(colors: Sequence[ColorInput], count: int) -> List[Color]:
    """``count`` evenly spaced picks from an already sampled gradient (no new colors)."""
    colors = [parse_color(c) for c in colors]
    if count <= 0:
        return []
    if count >= len(colors):
        return colors
    if count == 1:
        return [colors[0]]
    step = (len(colors) - 1) / (count - 1)
    return [colors[int(i * step + 0.5)] for i in range(count)]


def reverse_gradient(colors: Iterable[ColorInput]) -> List[Color]:
    return [parse_color(c) for c in colors][::-1]


def smooth_gradient(colors: Sequence[ColorInput], sigma: float = 1.0) -> List[Color]:
    """Gaussian blur along a sampled gradient, edges clamped. Alpha is kept per color."""
    colors = [parse_color(c) for c in colors]
    if len(colors) < 3:
        return colors
    if sigma <= 0:
        raise ValueError(f"sigma must be positive, got {sigma}")
    radius = int(math.ceil(sigma * 3))
    offsets = np.arange(-radius, radius + 1)
    weights = np.exp(-(offsets ** 2) / (2 * sigma * sigma))
    rgb = np.array([c.rgb_float for c in colors])
    index = np.clip(np.arange(len(colors))[:, None] + offsets[None, :], 0, len(colors) - 1)
    blurred = (rgb[index] * weights[None, :, None]).sum(axis=1) / weights.sum()
    return [Color.from_rgb(r, g, b, c.alpha) for (r, g, b), c in zip(blurred, colors)]


def analyze_gradient(colors: Sequence[ColorInput]) -> Dict[str, Union[bool, float]]:
    """
    Step statistics of a sampled gradient.

    Returns:
        Dict with ``average_step`` (mean OKLab distance between neighbours),
        ``smoothness`` (1 / (1 + std of the steps), 1 is perfectly even),
        ``color_range`` (CIEDE2000 between the ends), ``has_banding`` (a step
        over three times the mean) and ``has_flat_steps`` (a step below 0.005
        in OKLab, i.e. neighbours that look identical).
    """
    colors = [parse_color(c) for c in colors]
    if len(colors) < 2:
        return {
            "average_step": 0.0, "smoothness": 1.0, "color_range": 0.0,
            "has_banding": False, "has_flat_steps": False,
        }
    steps = np.array([delta_e_oklab(a, b) for a, b in zip(colors, colors[1:])])
    average = float(steps.mean())
    return {
        "average_step": average,
        "smoothness": float(1.0 / (1.0 + steps.std())),
        "color_range": delta_e_2000(colors[0], colors[-1]),
        "has_banding": bool(average > 0 and np.any(steps > average * 3)),
        "has_flat_steps": bool(np.any(steps < 0.005)),
    }


def gradient_css_variables(name: str, colors: Sequence[ColorInput], prefix: str = "gradient") -> Dict[str, str]:
    """
    ``--{prefix}-{name}-color-{i}`` for each color plus ``-linear``,
    ``-radial`` and ``-conic`` variables holding the full gradients.
    """
    hexes = [parse_color(c).to_hex() for c in colors]
    variables = {f"--{prefix}-{name}-color-{i}": h for i, h in enumerate(hexes, start=1)}
    variables[f"--{prefix}-{name}-linear"] = linear_gradient(hexes)
    variables[f"--{prefix}-{name}-radial"] = radial_gradient(hexes)
    variables[f"--{prefix}-{name}-conic"] = conic_gradient(hexes)
    return variables
