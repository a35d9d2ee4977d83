"""
Separable blend modes.

Each mode is a function of the normalized base channel ``a`` and overlay
channel ``b`` (both in [0, 1]); it works on floats and numpy arrays alike.
"""
from __future__ import annotations
from typing import Callable, Dict, get_args

import numpy as np

from ..colors import Color, ColorInput, parse_color
from ..types.color_types import BlendMode

BlendFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _safe(x: np.ndarray) -> np.ndarray:
    return np.where(x == 0, 1.0, x)


def _overlay(a, b):
    return np.where(a < 0.5, 2 * a * b, 1 - 2 * (1 - a) * (1 - b))


def _color_dodge(a, b):
    return np.where(b >= 1, 1.0, np.minimum(1.0, a / _safe(1 - b)))


def _color_burn(a, b):
    return np.where(b <= 0, 0.0, np.maximum(0.0, 1 - (1 - a) / _safe(b)))


def _soft_light(a, b):
    return np.where(b < 0.5, a * (1 + b), a + b - a * b)


def _vivid_light(a, b):
    burn = np.where(b == 0, 0.0, np.maximum(0.0, 1 - (1 - a) / _safe(2 * b)))
    dodge = np.where(b == 1, 1.0, np.minimum(1.0, a / _safe(2 * (1 - b))))
    return np.where(b < 0.5, burn, dodge)


def _pin_light(a, b):
    return np.where(b < 0.5, np.minimum(a, 2 * b), np.maximum(a, 2 * (b - 0.5)))


def _reflect(a, b):
    return np.where(b >= 1, 1.0, np.minimum(1.0, a * a / _safe(1 - b)))


BLEND_FUNCTIONS: Dict[str, BlendFunction] = {
    "normal": lambda a, b: b,
    "multiply": lambda a, b: a * b,
    "screen": lambda a, b: 1 - (1 - a) * (1 - b),
    "overlay": _overlay,
    "darken": np.minimum,
    "lighten": np.maximum,
    "color-dodge": _color_dodge,
    "color-burn": _color_burn,
    "hard-light": lambda a, b: _overlay(b, a),
    "soft-light": _soft_light,
    "difference": lambda a, b: np.abs(a - b),
    "exclusion": lambda a, b: a + b - 2 * a * b,
    "linear-burn": lambda a, b: np.maximum(0.0, a + b - 1),
    "linear-dodge": lambda a, b: np.minimum(1.0, a + b),
    "vivid-light": _vivid_light,
    "linear-light": lambda a, b: a + 2 * b - 1,
    "pin-light": _pin_light,
    "hard-mix": lambda a, b: np.where(a + b < 1, 0.0, 1.0),
    "subtract": lambda a, b: np.maximum(0.0, a - b),
    "divide": lambda a, b: np.where(b <= 0, 1.0, np.minimum(1.0, a / _safe(b))),
    "average": lambda a, b: (a + b) / 2,
    "negation": lambda a, b: 1 - np.abs(1 - a - b),
    "reflect": _reflect,
    "glow": lambda a, b: _reflect(b, a),
}

BLEND_MODES = get_args(BlendMode)


def np_blend(base: np.ndarray, overlay: np.ndarray, mode: BlendMode | str = "normal") -> np.ndarray:
    """
    Vectorized blend of normalized RGB arrays.

    Args:
        base: Array of base channels in [0, 1]
        overlay: Array of overlay channels in [0, 1], broadcastable to ``base``
        mode: Blend mode name

    Returns:
        Blended channels clipped to [0, 1].

    Raises:
        ValueError: If ``mode`` is unknown.
    """
    try:
        fn = BLEND_FUNCTIONS[mode]
    except KeyError:
        raise ValueError(f"Unknown blend mode: {mode!r}. Expected one of {list(BLEND_FUNCTIONS)}") from None
    a = np.asarray(base, dtype=float)
    b = np.asarray(overlay, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        out = fn(a, b)
    return np.clip(np.broadcast_to(out, np.broadcast(a, b).shape), 0.0, 1.0)


def blend(base: ColorInput, overlay: ColorInput, mode: BlendMode | str = "normal") -> Color:
    """Blend ``overlay`` onto ``base`` channel-wise; the base alpha is kept."""
    base_c, over_c = parse_color(base), parse_color(overlay)
    a = np.array(base_c.rgb_float) / 255.0
    b = np.array(over_c.rgb_float) / 255.0
    r, g, bl = np_blend(a, b, mode) * 255.0
    return Color.from_rgb(r, g, bl, base_c.alpha)
