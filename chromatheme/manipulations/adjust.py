from __future__ import annotations
import numpy as np
from boundednumbers.functions import clamp, cyclic_wrap_float

from ..colors import Color, ColorInput, parse_color
from ..conversions import np_srgb_to_linear, np_linear_to_srgb

WHITE = Color.from_rgb(255, 255, 255)
BLACK = Color.from_rgb(0, 0, 0)
MID_GRAY = Color.from_rgb(128, 128, 128)

SEPIA_MATRIX = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
])

GRAY_WEIGHTS = np.array([0.299, 0.587, 0.114])


def _channels(color: Color) -> np.ndarray:
    return np.array(color.rgb_float)


def _rebuild(rgb: np.ndarray, alpha: float) -> Color:
    r, g, b = np.clip(rgb, 0.0, 255.0)
    return Color.from_rgb(r, g, b, alpha)


## Mixing

def mix(a: ColorInput, b: ColorInput, amount: float = 0.5) -> Color:
    """
    Linear interpolation between two colors in sRGB.

    Args:
        a: Start color (amount = 0)
        b: End color (amount = 1)
        amount: Weight of ``b``, clamped to [0, 1]
    """
    ca, cb = parse_color(a), parse_color(b)
    t = float(clamp(float(amount), 0.0, 1.0))
    rgb = _channels(ca) + (_channels(cb) - _channels(ca)) * t
    return _rebuild(rgb, ca.alpha + (cb.alpha - ca.alpha) * t)


def tint(color: ColorInput, amount: float = 0.5) -> Color:
    """Mix with white."""
    return mix(color, WHITE, amount)


def shade(color: ColorInput, amount: float = 0.5) -> Color:
    """Mix with black."""
    return mix(color, BLACK, amount)


def tone(color: ColorInput, amount: float = 0.5) -> Color:
    """Mix with mid gray (128, 128, 128)."""
    return mix(color, MID_GRAY, amount)


## Tone curves

def adjust_brightness(color: ColorInput, amount: float) -> Color:
    """Scale sRGB channels by ``1 + amount / 100``; ``amount`` is clamped to [-100, 100]."""
    c = parse_color(color)
    factor = 1 + float(clamp(float(amount), -100.0, 100.0)) / 100
    return _rebuild(_channels(c) * factor, c.alpha)


def adjust_contrast(color: ColorInput, amount: float) -> Color:
    """Stretch sRGB channels about 128 by ``(100 + amount) / 100``."""
    c = parse_color(color)
    factor = (100 + float(clamp(float(amount), -100.0, 100.0))) / 100
    return _rebuild((_channels(c) - 128) * factor + 128, c.alpha)


def gamma_correction(color: ColorInput, gamma: float) -> Color:
    """
    Apply a power curve in linear light: decode sRGB, raise to ``1 / gamma``,
    re-encode. ``gamma > 1`` brightens, ``gamma < 1`` darkens.

    Raises:
        ValueError: If ``gamma`` is not positive.
    """
    if gamma <= 0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    c = parse_color(color)
    linear = np_srgb_to_linear(_channels(c) / 255.0)
    return _rebuild(np_linear_to_srgb(linear ** (1 / gamma)) * 255.0, c.alpha)


## Filters

def grayscale(color: ColorInput) -> Color:
    """Rec. 601 luma."""
    c = parse_color(color)
    gray = float(_channels(c) @ GRAY_WEIGHTS)
    return _rebuild(np.array([gray, gray, gray]), c.alpha)


def sepia(color: ColorInput, amount: float = 1.0) -> Color:
    c = parse_color(color)
    t = float(clamp(float(amount), 0.0, 1.0))
    rgb = _channels(c)
    toned = SEPIA_MATRIX @ rgb
    return _rebuild(rgb * (1 - t) + toned * t, c.alpha)


def negative(color: ColorInput) -> Color:
    c = parse_color(color)
    return _rebuild(255.0 - _channels(c), c.alpha)


def posterize(color: ColorInput, levels: int) -> Color:
    """
    Quantize each channel to ``levels`` evenly spaced values.

    Raises:
        ValueError: If ``levels`` is below 2.
    """
    if levels < 2:
        raise ValueError(f"posterize needs at least 2 levels, got {levels}")
    c = parse_color(color)
    step = 255 / (levels - 1)
    return _rebuild(np.round(_channels(c) / step) * step, c.alpha)


## HSL adjustments

def _hsl_shift(color: ColorInput, dh: float = 0.0, ds: float = 0.0, dl: float = 0.0) -> Color:
    c = parse_color(color)
    h, s, l, a = c.to_hsl()
    return Color.from_hsl(
        cyclic_wrap_float(h + dh, 0.0, 360.0),
        float(clamp(s + ds, 0.0, 100.0)),
        float(clamp(l + dl, 0.0, 100.0)),
        a,
    )


def lighten(color: ColorInput, amount: float = 10) -> Color:
    """Raise HSL lightness by ``amount`` points."""
    return _hsl_shift(color, dl=amount)


def darken(color: ColorInput, amount: float = 10) -> Color:
    return _hsl_shift(color, dl=-amount)


def saturate(color: ColorInput, amount: float = 10) -> Color:
    return _hsl_shift(color, ds=amount)


def desaturate(color: ColorInput, amount: float = 10) -> Color:
    return _hsl_shift(color, ds=-amount)


def rotate_hue(color: ColorInput, degrees: float) -> Color:
    return _hsl_shift(color, dh=degrees)


def set_lightness(color: ColorInput, lightness: float) -> Color:
    c = parse_color(color)
    h, s, _, a = c.to_hsl()
    return Color.from_hsl(h, s, float(clamp(lightness, 0.0, 100.0)), a)


def fade(color: ColorInput, amount: float) -> Color:
    """Reduce opacity by ``amount`` percent of the current alpha."""
    return parse_color(color).fade(amount)
