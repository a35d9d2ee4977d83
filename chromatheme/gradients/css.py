"""
CSS gradient strings: linear, radial and conic.

Stops are placed evenly unless positioned explicitly (see ``normalize_stops``).
Linear and radial stops are emitted in percent, conic stops in degrees.
With ``smoothing`` on, every segment between two stops gets extra colors
taken from a smooth cubic curve through the stops, which hides banding on
wide hue spans.
"""
from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, List, Tuple

from ..types.color_types import GradientKind
from .bezier import smooth_segments
from .stops import GradientStop, normalize_stops

logger = logging.getLogger(__name__)

DEFAULT_SMOOTHING_STEPS = 8
Position = Tuple[str, str]


def _num(value: float) -> str:
    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _prepare(colors: Iterable, smoothing: bool, steps: int, space: str) -> List[GradientStop]:
    stops = normalize_stops(colors)
    if len(stops) == 1:
        return [stops[0], GradientStop(stops[0].color, 1.0)]
    if not smoothing or len(stops) < 2 or steps <= 0:
        return stops
    segments = smooth_segments([s.color for s in stops], steps, space)
    result: List[GradientStop] = []
    for (left, right), inserted in zip(zip(stops, stops[1:]), segments):
        result.append(left)
        for index, color in enumerate(inserted, start=1):
            t = index / (steps + 1)
            result.append(GradientStop(color, left.position + (right.position - left.position) * t))
    result.append(stops[-1])
    logger.debug(
        "Smoothing inserted %d colors across %d segments in %s",
        len(result) - len(stops), len(stops) - 1, space,
    )
    return result


def _stop_list(stops: List[GradientStop], scale: float, unit: str) -> str:
    return ", ".join(f"{s.color.to_rgb_string()} {_num(s.position * scale)}{unit}" for s in stops)


def linear_gradient(
    colors: Iterable,
    *,
    angle: float = 90,
    repeating: bool = False,
    smoothing: bool = False,
    steps: int = DEFAULT_SMOOTHING_STEPS,
    space: str = "rgb",
) -> str:
    """
    ``linear-gradient(...)`` CSS value.

    Args:
        colors: Color inputs and/or ``GradientStop`` entries
        angle: Direction in degrees
        repeating: Emit ``repeating-linear-gradient``
        smoothing: Insert ``steps`` curve colors between neighbouring stops
        steps: Colors inserted per segment when smoothing
        space: Interpolation space for smoothing

    Raises:
        RangeError: On out-of-range or decreasing explicit positions.
    """
    stops = _prepare(colors, smoothing, steps, space)
    prefix = "repeating-linear-gradient" if repeating else "linear-gradient"
    return f"{prefix}({_num(angle)}deg, {_stop_list(stops, 100, '%')})"


def radial_gradient(
    colors: Iterable,
    *,
    shape: str = "circle",
    size: str = "farthest-corner",
    position: Position = ("center", "center"),
    repeating: bool = False,
    smoothing: bool = False,
    steps: int = DEFAULT_SMOOTHING_STEPS,
    space: str = "rgb",
) -> str:
    """``radial-gradient(shape size at x y, ...)`` CSS value."""
    if shape not in ("circle", "ellipse"):
        raise ValueError(f"Invalid radial shape: {shape!r}. Expected 'circle' or 'ellipse'")
    stops = _prepare(colors, smoothing, steps, space)
    prefix = "repeating-radial-gradient" if repeating else "radial-gradient"
    x, y = position
    return f"{prefix}({shape} {size} at {x} {y}, {_stop_list(stops, 100, '%')})"


def conic_gradient(
    colors: Iterable,
    *,
    start_angle: float = 0,
    position: Position = ("center", "center"),
    smoothing: bool = False,
    steps: int = DEFAULT_SMOOTHING_STEPS,
    space: str = "rgb",
) -> str:
    """``conic-gradient(from a at x y, ...)`` CSS value; stop positions in degrees."""
    stops = _prepare(colors, smoothing, steps, space)
    x, y = position
    start = f"from {_num(start_angle)}deg " if start_angle else ""
    return f"conic-gradient({start}at {x} {y}, {_stop_list(stops, 360, 'deg')})"


GRADIENT_BUILDERS: Dict[str, Callable[..., str]] = {
    "linear": linear_gradient,
    "radial": radial_gradient,
    "conic": conic_gradient,
}


def generate_gradient(kind: GradientKind, colors: Iterable, **options) -> str:
    """
    Dispatch to the builder for ``kind``.

    Raises:
        ValueError: If ``kind`` is not linear, radial or conic.
    """
    try:
        builder = GRADIENT_BUILDERS[kind]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown gradient kind: {kind!r}. Expected one of {list(GRADIENT_BUILDERS)}") from None
    return builder(colors, **options)
