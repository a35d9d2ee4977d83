"""
Chromatheme Color Space Conversions
===================================

Numerically exact conversions between sRGB and the cylindrical, CIE and
OK perceptual models, with scalar and vectorized (numpy) implementations.

Features
--------
- sRGB ↔ linear-light transfer (IEC 61966-2-1 piecewise gamma)
- RGB ↔ HSL / HSV / HWB
- RGB ↔ XYZ (D65) ↔ CIE Lab ↔ LCh
- RGB ↔ OKLab ↔ OKLCh
- RGB ↔ naive device CMYK
- Floats are kept end to end; rounding is left to output formatting

Conversion Functions
--------------------

Transfer:
    srgb_to_linear(c), linear_to_srgb(c)
    np_srgb_to_linear(c), np_linear_to_srgb(c)

Cylindrical (hue in degrees, other channels in [0, 1]):
    unit_rgb_to_hsl, hsl_to_unit_rgb, unit_rgb_to_hsv, hsv_to_unit_rgb
    hsv_to_hwb, hwb_to_hsv and their np_ counterparts

CIE (vectorized over (..., 3) arrays):
    np_linear_rgb_to_xyz, np_xyz_to_linear_rgb, np_xyz_to_lab, np_lab_to_xyz
    np_to_polar, np_from_polar

OK (vectorized over (..., 3) arrays):
    np_linear_rgb_to_oklab, np_oklab_to_linear_rgb

High-Level API
--------------
    rgb_to_space(rgb, space)
        One RGB triple (0..255) to the record units of ``space``
    space_to_rgb(values, space, clip=True)
        Back to RGB (0..255)
    convert(values, from_space, to_space)
        Between any two spaces
    np_convert(values, from_space, to_space, clip=True)
        Vectorized universal converter

Examples
--------
>>> from chromatheme.conversions import rgb_to_space
>>> rgb_to_space((255, 0, 0), "hsl")
(0.0, 100.0, 50.0)
"""
from .linear import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .hsx import (
    normalize_hue,
    unit_rgb_to_hsl, hsl_to_unit_rgb, unit_rgb_to_hsv, hsv_to_unit_rgb,
    hsv_to_hwb, hwb_to_hsv,
    np_unit_rgb_to_hsl, np_hsl_to_unit_rgb, np_unit_rgb_to_hsv, np_hsv_to_unit_rgb,
    np_hsv_to_hwb, np_hwb_to_hsv,
)
from .cie import (
    D65_WHITE, np_linear_rgb_to_xyz, np_xyz_to_linear_rgb, np_xyz_to_lab, np_lab_to_xyz,
    np_to_polar, np_from_polar,
)
from .oklab import np_linear_rgb_to_oklab, np_oklab_to_linear_rgb
from .cmyk import unit_rgb_to_cmyk, cmyk_to_unit_rgb, np_unit_rgb_to_cmyk, np_cmyk_to_unit_rgb
from .wrapper import (
    CHANNEL_COUNT, rgb_to_space, space_to_rgb, convert, np_convert, in_srgb_gamut,
)

__all__ = [
    "srgb_to_linear", "linear_to_srgb", "np_srgb_to_linear", "np_linear_to_srgb",
    "normalize_hue",
    "unit_rgb_to_hsl", "hsl_to_unit_rgb", "unit_rgb_to_hsv", "hsv_to_unit_rgb",
    "hsv_to_hwb", "hwb_to_hsv",
    "np_unit_rgb_to_hsl", "np_hsl_to_unit_rgb", "np_unit_rgb_to_hsv", "np_hsv_to_unit_rgb",
    "np_hsv_to_hwb", "np_hwb_to_hsv",
    "D65_WHITE", "np_linear_rgb_to_xyz", "np_xyz_to_linear_rgb", "np_xyz_to_lab", "np_lab_to_xyz",
    "np_to_polar", "np_from_polar",
    "np_linear_rgb_to_oklab", "np_oklab_to_linear_rgb",
    "unit_rgb_to_cmyk", "cmyk_to_unit_rgb", "np_unit_rgb_to_cmyk", "np_cmyk_to_unit_rgb",
    "CHANNEL_COUNT", "rgb_to_space", "space_to_rgb", "convert", "np_convert", "in_srgb_gamut",
]
