from __future__ import annotations
import numpy as np
from typing import Callable, Dict, Tuple

from ..errors import ConversionError
from ..types.color_types import ColorSpace, canonical_space
from .linear import np_srgb_to_linear, np_linear_to_srgb
from .hsx import (
    unit_rgb_to_hsl, hsl_to_unit_rgb, unit_rgb_to_hsv, hsv_to_unit_rgb,
    hsv_to_hwb, hwb_to_hsv,
    np_unit_rgb_to_hsl, np_hsl_to_unit_rgb, np_unit_rgb_to_hsv, np_hsv_to_unit_rgb,
    np_hsv_to_hwb, np_hwb_to_hsv,
)
from .cie import (
    np_linear_rgb_to_xyz, np_xyz_to_linear_rgb, np_xyz_to_lab, np_lab_to_xyz,
    np_to_polar, np_from_polar,
)
from .oklab import np_linear_rgb_to_oklab, np_oklab_to_linear_rgb
from .cmyk import unit_rgb_to_cmyk, cmyk_to_unit_rgb, np_unit_rgb_to_cmyk, np_cmyk_to_unit_rgb

Channels = Tuple[float, ...]

# Record units: hue in degrees, HSL/HSV/HWB/CMYK percentages in [0, 100],
# RGB in [0, 255], LAB/LCH lightness in [0, 100], OKLab lightness in [0, 1].
CHANNEL_COUNT: Dict[str, int] = {
    "rgb": 3, "hsl": 3, "hsv": 3, "hwb": 3, "xyz": 3,
    "lab": 3, "lch": 3, "oklab": 3, "oklch": 3, "cmyk": 4,
}


def _pct(h, a, b) -> Channels:
    return h, a * 100, b * 100


def _np_pct(arr: np.ndarray) -> np.ndarray:
    return np.concatenate([arr[..., :1], arr[..., 1:] * 100], axis=-1)


def _np_unpct(arr: np.ndarray) -> np.ndarray:
    return np.concatenate([arr[..., :1], arr[..., 1:] / 100], axis=-1)


# ---------------------------------------------------------------------------
# Vectorized registries: unit sRGB (..., 3) <-> record units (..., n)
# ---------------------------------------------------------------------------
NP_FROM_UNIT_RGB: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "rgb": lambda u: u * 255.0,
    "hsl": lambda u: _np_pct(np_unit_rgb_to_hsl(u[..., 0], u[..., 1], u[..., 2])),
    "hsv": lambda u: _np_pct(np_unit_rgb_to_hsv(u[..., 0], u[..., 1], u[..., 2])),
    "hwb": lambda u: _np_pct(np_hsv_to_hwb(*np.moveaxis(np_unit_rgb_to_hsv(u[..., 0], u[..., 1], u[..., 2]), -1, 0))),
    "xyz": lambda u: np_linear_rgb_to_xyz(np_srgb_to_linear(u)),
    "lab": lambda u: np_xyz_to_lab(np_linear_rgb_to_xyz(np_srgb_to_linear(u))),
    "lch": lambda u: np_to_polar(np_xyz_to_lab(np_linear_rgb_to_xyz(np_srgb_to_linear(u)))),
    "oklab": lambda u: np_linear_rgb_to_oklab(np_srgb_to_linear(u)),
    "oklch": lambda u: np_to_polar(np_linear_rgb_to_oklab(np_srgb_to_linear(u))),
    "cmyk": lambda u: np_unit_rgb_to_cmyk(u) * 100.0,
}

NP_TO_UNIT_RGB: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "rgb": lambda v: v / 255.0,
    "hsl": lambda v: np_hsl_to_unit_rgb(*np.moveaxis(_np_unpct(v), -1, 0)),
    "hsv": lambda v: np_hsv_to_unit_rgb(*np.moveaxis(_np_unpct(v), -1, 0)),
    "hwb": lambda v: np_hsv_to_unit_rgb(*np.moveaxis(np_hwb_to_hsv(*np.moveaxis(_np_unpct(v), -1, 0)), -1, 0)),
    "xyz": lambda v: np_linear_to_srgb(np_xyz_to_linear_rgb(v)),
    "lab": lambda v: np_linear_to_srgb(np_xyz_to_linear_rgb(np_lab_to_xyz(v))),
    "lch": lambda v: np_linear_to_srgb(np_xyz_to_linear_rgb(np_lab_to_xyz(np_from_polar(v)))),
    "oklab": lambda v: np_linear_to_srgb(np_oklab_to_linear_rgb(v)),
    "oklch": lambda v: np_linear_to_srgb(np_oklab_to_linear_rgb(np_from_polar(v))),
    "cmyk": lambda v: np_cmyk_to_unit_rgb(v / 100.0),
}

# Scalar fast paths for the cheap cylindrical models; everything else goes
# through the vectorized registry on a single row.
SCALAR_FROM_UNIT_RGB: Dict[str, Callable[[float, float, float], Channels]] = {
    "rgb": lambda r, g, b: (r * 255.0, g * 255.0, b * 255.0),
    "hsl": lambda r, g, b: _pct(*unit_rgb_to_hsl(r, g, b)),
    "hsv": lambda r, g, b: _pct(*unit_rgb_to_hsv(r, g, b)),
    "hwb": lambda r, g, b: _pct(*hsv_to_hwb(*unit_rgb_to_hsv(r, g, b))),
    "cmyk": lambda r, g, b: tuple(c * 100.0 for c in unit_rgb_to_cmyk(r, g, b)),
}

SCALAR_TO_UNIT_RGB: Dict[str, Callable[..., Channels]] = {
    "rgb": lambda r, g, b: (r / 255.0, g / 255.0, b / 255.0),
    "hsl": lambda h, s, l: hsl_to_unit_rgb(h, s / 100, l / 100),
    "hsv": lambda h, s, v: hsv_to_unit_rgb(h, s / 100, v / 100),
    "hwb": lambda h, w, b: hsv_to_unit_rgb(*hwb_to_hsv(h, w / 100, b / 100)),
    "cmyk": lambda c, m, y, k: cmyk_to_unit_rgb(c / 100, m / 100, y / 100, k / 100),
}


def _check_width(values, space: str) -> None:
    if len(values) != CHANNEL_COUNT[space]:
        raise ConversionError(
            f"{space} expects {CHANNEL_COUNT[space]} channels, got {len(values)}"
        )


def rgb_to_space(rgb: Channels, space: ColorSpace | str) -> Channels:
    """
    Convert one RGB triple (0..255 floats) to the channels of ``space``.

    Args:
        rgb: (r, g, b) in [0, 255], floats kept at full precision
        space: Target space name (aliases and case are normalized)

    Returns:
        Tuple of floats in the record units of the target space.

    Raises:
        ConversionError: If the space is not supported.
    """
    target = canonical_space(space)
    r, g, b = (float(c) / 255.0 for c in rgb)
    if target in SCALAR_FROM_UNIT_RGB:
        return tuple(float(v) for v in SCALAR_FROM_UNIT_RGB[target](r, g, b))
    out = NP_FROM_UNIT_RGB[target](np.array([r, g, b]))
    return tuple(float(v) for v in out)


def space_to_rgb(values: Channels, space: ColorSpace | str, clip: bool = True) -> Channels:
    """
    Convert channels of ``space`` back to RGB floats in [0, 255].

    Out-of-gamut results are clipped unless ``clip`` is False, in which case
    the raw (possibly negative or >255) values are returned for gamut tests.
    """
    source = canonical_space(space)
    _check_width(values, source)
    if source in SCALAR_TO_UNIT_RGB:
        unit = SCALAR_TO_UNIT_RGB[source](*(float(v) for v in values))
    else:
        unit = NP_TO_UNIT_RGB[source](np.array(values, dtype=float))
    rgb = tuple(float(c) * 255.0 for c in unit)
    if clip:
        rgb = tuple(min(255.0, max(0.0, c)) for c in rgb)
    return rgb


def convert(values: Channels, from_space: ColorSpace | str, to_space: ColorSpace | str) -> Channels:
    """Convert a single color between any two supported spaces (via sRGB)."""
    src, dst = canonical_space(from_space), canonical_space(to_space)
    if src == dst:
        _check_width(values, src)
        return tuple(float(v) for v in values)
    return rgb_to_space(space_to_rgb(values, src), dst)


def np_convert(
    values: np.ndarray,
    from_space: ColorSpace | str = "rgb",
    to_space: ColorSpace | str = "rgb",
    clip: bool = True,
) -> np.ndarray:
    """
    Vectorized conversion of ``(..., n)`` arrays between spaces.

    Args:
        values: Array whose last axis holds the channels of ``from_space``
        from_space: Source space
        to_space: Target space
        clip: Clip the intermediate sRGB to [0, 1] (gamut clamp)

    Returns:
        Float array whose last axis holds the channels of ``to_space``.
    """
    src, dst = canonical_space(from_space), canonical_space(to_space)
    arr = np.asarray(values, dtype=float)
    if arr.shape[-1] != CHANNEL_COUNT[src]:
        raise ConversionError(
            f"{src} expects last dimension {CHANNEL_COUNT[src]}, got shape {arr.shape}"
        )
    if src == dst:
        return arr.copy()
    unit = NP_TO_UNIT_RGB[src](arr)
    if clip:
        unit = np.clip(unit, 0.0, 1.0)
    return NP_FROM_UNIT_RGB[dst](unit)


def in_srgb_gamut(values: Channels, space: ColorSpace | str, tolerance: float = 1e-6) -> bool:
    """True if the color lies inside the sRGB cube (within ``tolerance`` in unit RGB)."""
    rgb = space_to_rgb(values, space, clip=False)
    return all(-tolerance <= c / 255.0 <= 1 + tolerance for c in rgb)
