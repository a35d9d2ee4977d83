"""Color-vision deficiency simulation."""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

import numpy as np

from ..colors import Color, ColorInput, parse_color
from ..conversions import np_srgb_to_linear, np_linear_to_srgb
from ..types.color_types import VisionDeficiency

CVD_MATRICES: Mapping[str, np.ndarray] = MappingProxyType({
    "protanopia": np.array([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    "deuteranopia": np.array([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    "tritanopia": np.array([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
    "protanomaly": np.array([
        [0.817, 0.183, 0.0],
        [0.333, 0.667, 0.0],
        [0.0, 0.125, 0.875],
    ]),
    "deuteranomaly": np.array([
        [0.8, 0.2, 0.0],
        [0.258, 0.742, 0.0],
        [0.0, 0.142, 0.858],
    ]),
    "tritanomaly": np.array([
        [0.967, 0.033, 0.0],
        [0.0, 0.733, 0.267],
        [0.0, 0.183, 0.817],
    ]),
    "achromatopsia": np.array([
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
    ]),
    "achromatomaly": np.array([
        [0.618, 0.320, 0.062],
        [0.163, 0.775, 0.062],
        [0.163, 0.320, 0.516],
    ]),
})


def _matrix(kind: VisionDeficiency | str) -> np.ndarray:
    try:
        return CVD_MATRICES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown color vision deficiency: {kind!r}. Expected one of {list(CVD_MATRICES)}"
        ) from None


def np_simulate_color_blindness(rgb: np.ndarray, kind: VisionDeficiency | str) -> np.ndarray:
    """
    Vectorized simulation over ``(..., 3)`` sRGB arrays in [0, 255].

    The matrix is applied to linear-light channels; the result is re-encoded
    and clipped to [0, 255].
    """
    matrix = _matrix(kind)
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=float) / 255.0)
    simulated = np.clip(linear @ matrix.T, 0.0, 1.0)
    return np.clip(np_linear_to_srgb(simulated) * 255.0, 0.0, 255.0)


def simulate_color_blindness(color: ColorInput, kind: VisionDeficiency | str) -> Color:
    """How ``color`` appears under the given deficiency; alpha is kept."""
    c = parse_color(color)
    r, g, b = np_simulate_color_blindness(np.array(c.rgb_float), kind)
    return Color.from_rgb(r, g, b, c.alpha)
