"""
Dark-theme scales.

Dark variants are re-derived from the base color on a compressed lightness
curve rather than by inverting the light scale; inverted scales leave the
mid and accent shades too dim against near-black surfaces. Shades that act
as foreground accents are then pushed up until they reach a minimum
contrast against the dark background.
"""
from __future__ import annotations
import logging
from typing import List, Mapping, Optional

import numpy as np

from ..colors import contrast
from ..colors import Color, ColorInput, parse_color
from ..config import (
    DEFAULT_SHADES, GRAY_SHADES, DARK_LIGHTNESS, DARK_GRAY_LIGHTNESS,
    DARK_BACKGROUND, DARK_FOREGROUND_LIGHTNESS, DARK_MIN_CONTRAST,
)
from .scale import Scale
from .shades import ShadesLike, resolve_shades

logger = logging.getLogger(__name__)


def _curve(light_map: Mapping[str, float], dark_map: Mapping[str, float]):
    """(light lightness, dark lightness) knots sorted by light lightness."""
    knots = sorted((light_map[k], dark_map[k]) for k in dark_map if k in light_map)
    knots = [(0.0, 0.0)] + knots + [(100.0, 100.0)]
    xs, ys = zip(*knots)
    return np.array(xs), np.array(ys)


_DEFAULT_LIGHT = {s.name: s.lightness for s in DEFAULT_SHADES}
_GRAY_LIGHT = {s.name: s.lightness for s in GRAY_SHADES}


def dark_lightness_for(light_lightness: float, gray: bool = False) -> float:
    """Map a light-theme target lightness onto the dark-theme curve (piecewise linear)."""
    if gray:
        xs, ys = _curve(_GRAY_LIGHT, DARK_GRAY_LIGHTNESS)
    else:
        xs, ys = _curve(_DEFAULT_LIGHT, DARK_LIGHTNESS)
    return float(np.interp(light_lightness, xs, ys))


def dark_saturation(saturation: float, lightness: float) -> float:
    """Boost light accents, calm down deep surfaces, keep the mid tones."""
    if lightness < 20:
        return max(20.0, saturation * 0.7)
    if lightness > 70:
        return min(100.0, saturation * 1.15)
    if 40 <= lightness <= 60:
        return saturation
    return saturation * 0.95


LIFT_CEILING = 99.0


def _min_foreground_lightness(
    h: float, s: float, background: Color, ratio: float, start: float, ceiling: float = LIFT_CEILING,
) -> Optional[float]:
    """
    Smallest lightness in [``start``, ``ceiling``] (0.5 steps) whose shade
    reaches ``ratio`` against ``background``, or None when none does.
    """
    for lightness in np.arange(start, ceiling + 0.0001, 0.5):
        candidate = Color.from_hsl(h, dark_saturation(s, lightness), lightness)
        if contrast(candidate, background) >= ratio:
            return float(lightness)
    return None


def _lift_foreground(
    targets: List[float],
    h: float,
    s: float,
    background: Color,
    threshold: float,
    ratio: float,
) -> List[float]:
    """
    Raise the foreground band (targets >= ``threshold``) so every member
    reaches ``ratio`` against ``background``. The band is compressed upward
    as a whole and stays below ``LIFT_CEILING``, so the shades keep their
    order and never collapse onto white. Members that cannot reach the
    ratio keep their place in the band and are logged.
    """
    fg = sorted(t for t in targets if t >= threshold)
    if not fg:
        return targets
    low, high = fg[0], fg[-1]
    floor = _min_foreground_lightness(h, s, background, ratio, low)
    if floor is None:
        logger.warning(
            "Dark scale foreground band %.1f..%.1f cannot reach %.1f:1 against %s; left unlifted",
            low, high, ratio, background.to_hex(),
        )
        return targets
    if floor > low and high > low:
        top = min(LIFT_CEILING, max(high, floor + (high - low)))
        mapped = {t: floor + (t - low) * (top - floor) / (high - low) for t in fg}
    else:
        mapped = {t: max(t, floor) for t in fg}

    lifted = {}
    unmet = []
    previous = None
    for index, t in enumerate(fg):
        # leave 0.5 of headroom per remaining member so the band stays strictly increasing
        cap = LIFT_CEILING - 0.5 * (len(fg) - 1 - index)
        value = mapped[t] if previous is None else max(mapped[t], previous + 0.5)
        value = min(value, cap)
        reached = _min_foreground_lightness(h, s, background, ratio, value, cap)
        if reached is None:
            unmet.append(t)
        else:
            value = reached
        lifted[t] = value
        previous = value
    if unmet:
        logger.warning(
            "Dark scale foreground shades at %s miss %.1f:1 against %s",
            ", ".join(f"{t:.1f}" for t in unmet), ratio, background.to_hex(),
        )
    if any(lifted[t] != t for t in fg):
        logger.debug(
            "Dark scale foreground band %.1f..%.1f lifted to %.1f..%.1f for %.1f:1 against %s",
            low, high, lifted[low], lifted[high], ratio, background.to_hex(),
        )
    return [lifted.get(t, t) for t in targets]


def generate_dark_scale(
    base: ColorInput,
    shades: ShadesLike = DEFAULT_SHADES,
    *,
    background: ColorInput = DARK_BACKGROUND,
    min_contrast: float = DARK_MIN_CONTRAST,
    foreground_threshold: float = DARK_FOREGROUND_LIGHTNESS,
) -> Scale:
    """
    Dark-theme counterpart of ``generate_scale``.

    Args:
        base: Any color input
        shades: Light-theme shade config; each target is mapped onto the dark curve
        background: Surface color the foreground shades must stand out from
        min_contrast: Ratio every foreground shade must reach against ``background``
        foreground_threshold: Dark-curve lightness at or above which a shade
            counts as a foreground accent

    Returns:
        Ordered dict of shade name → uppercase ``#RRGGBB``, same keys and order as ``shades``.
    """
    color = parse_color(base)
    bg = parse_color(background)
    config = resolve_shades(shades)
    h, s = color.to_hsl()[:2]

    targets = [dark_lightness_for(shade.lightness) for shade in config]
    targets = _lift_foreground(targets, h, s, bg, foreground_threshold, min_contrast)
    return {
        shade.name: Color.from_hsl(h, dark_saturation(s, lightness), lightness).to_hex(False)
        for shade, lightness in zip(config, targets)
    }


def generate_dark_gray_scale(shades: ShadesLike = GRAY_SHADES, tint_hue: float = 0.0, saturation: float = 0.0) -> Scale:
    """Neutral scale on the dark gray curve; untinted by default."""
    config = resolve_shades(shades)
    result: Scale = {}
    for shade in config:
        lightness = dark_lightness_for(shade.lightness, gray=True)
        result[shade.name] = Color.from_hsl(tint_hue, saturation, lightness).to_hex(False)
    return result
