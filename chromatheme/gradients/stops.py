"""
Gradient stops and their positions.
"""
from __future__ import annotations
from typing import Iterable, List, NamedTuple, Optional

from ..colors import Color, parse_color
from ..errors import RangeError


class GradientStop(NamedTuple):
    """A color at an optional position in [0, 1]; ``None`` means auto-placed."""
    color: Color
    position: Optional[float] = None


def _as_stop(item) -> GradientStop:
    if isinstance(item, GradientStop):
        return GradientStop(parse_color(item.color), item.position)
    return GradientStop(parse_color(item))


def normalize_stops(stops: Iterable) -> List[GradientStop]:
    """
    Give every stop a position.

    Omitted positions are spread evenly between the nearest fixed neighbours;
    a missing first/last position defaults to 0/1. Equal consecutive
    positions are allowed (hard stops).

    Args:
        stops: Color inputs and/or ``GradientStop`` entries, in order

    Returns:
        List of ``GradientStop`` with float positions.

    Raises:
        ValueError: If no stops are given.
        RangeError: If an explicit position is outside [0, 1] or the explicit
            positions decrease.
    """
    items = [_as_stop(item) for item in stops]
    if not items:
        raise ValueError("A gradient needs at least one color stop")

    positions: List[Optional[float]] = []
    previous = None
    for stop in items:
        position = stop.position
        if position is not None:
            position = float(position)
            if not 0.0 <= position <= 1.0:
                raise RangeError(f"Stop position {position} outside [0, 1]")
            if previous is not None and position < previous:
                raise RangeError(f"Stop positions must not decrease: {previous} then {position}")
            previous = position
        positions.append(position)

    if len(positions) == 1:
        return [GradientStop(items[0].color, positions[0] if positions[0] is not None else 0.0)]
    if positions[0] is None:
        positions[0] = 0.0
    if positions[-1] is None:
        positions[-1] = 1.0

    start = 0
    for index in range(1, len(positions)):
        if positions[index] is None:
            continue
        gap = index - start
        if gap > 1:
            low, high = positions[start], positions[index]
            for offset in range(1, gap):
                positions[start + offset] = low + (high - low) * offset / gap
        start = index

    return [GradientStop(stop.color, position) for stop, position in zip(items, positions)]


def stop_colors(stops: Iterable) -> List[Color]:
    """Colors of ``stops`` without their positions."""
    return [_as_stop(item).color for item in stops]
