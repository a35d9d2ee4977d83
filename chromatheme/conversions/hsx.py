"""
Cylindrical sRGB models: HSL, HSV and HWB.

Scalar functions work on plain floats; ``np_`` counterparts accept arrays
of any broadcastable shape and return ``(..., 3)`` stacks. Hue is in degrees
[0, 360); every other channel is in [0, 1].
"""
import numpy as np
from numpy import ndarray as NDArray


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


def _hue_from_unit_rgb(r: float, g: float, b: float, cmax: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if cmax == r:
        h = ((g - b) / delta) % 6
    elif cmax == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return normalize_hue(h * 60)


def _np_hue_from_unit_rgb(r: NDArray, g: NDArray, b: NDArray, cmax: NDArray, delta: NDArray) -> NDArray:
    safe = np.where(delta == 0, 1.0, delta)
    h = np.where(
        cmax == r,
        ((g - b) / safe) % 6,
        np.where(cmax == g, (b - r) / safe + 2, (r - g) / safe + 4),
    )
    return np.where(delta == 0, 0.0, (h * 60) % 360)


def _broadcast(*channels):
    arrays = [np.asarray(c, dtype=float) for c in channels]
    shape = np.broadcast(*arrays).shape
    return [np.broadcast_to(a, shape) for a in arrays]


## RGB <-> HSL

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB in [0, 1] to HSL.

    Returns:
        Tuple[float, float, float]: (h degrees, s [0,1], l [0,1])
    """
    cmax, cmin = max(r, g, b), min(r, g, b)
    delta = cmax - cmin
    l = (cmax + cmin) / 2
    if delta == 0:
        s = 0.0
    else:
        s = delta / (1 - abs(2 * l - 1))
    return _hue_from_unit_rgb(r, g, b, cmax, delta), s, l


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: RGB in [0, 1] → (..., 3) HSL."""
    r, g, b = _broadcast(r, g, b)
    cmax = np.maximum.reduce([r, g, b])
    cmin = np.minimum.reduce([r, g, b])
    delta = cmax - cmin
    l = (cmax + cmin) / 2
    denom = 1 - np.abs(2 * l - 1)
    s = np.where(delta == 0, 0.0, delta / np.where(denom == 0, 1.0, denom))
    h = _np_hue_from_unit_rgb(r, g, b, cmax, delta)
    return np.stack([h, s, l], axis=-1)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees (any real, wrapped)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    def channel(n: float) -> float:
        k = (n + h / 30) % 12
        a = s * min(l, 1 - l)
        return l - a * max(-1.0, min(k - 3, 9 - k, 1.0))

    return channel(0), channel(8), channel(4)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: HSL → (..., 3) RGB in [0, 1]."""
    h, s, l = _broadcast(h, s, l)
    h = h % 360
    a = s * np.minimum(l, 1 - l)

    def channel(n):
        k = (n + h / 30) % 12
        return l - a * np.clip(np.minimum(k - 3, 9 - k), -1.0, 1.0)

    return np.stack([channel(0), channel(8), channel(4)], axis=-1)


## RGB <-> HSV

def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB in [0, 1] to HSV (h degrees, s and v in [0, 1])."""
    cmax, cmin = max(r, g, b), min(r, g, b)
    delta = cmax - cmin
    s = 0.0 if cmax == 0 else delta / cmax
    return _hue_from_unit_rgb(r, g, b, cmax, delta), s, cmax


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: RGB in [0, 1] → (..., 3) HSV."""
    r, g, b = _broadcast(r, g, b)
    cmax = np.maximum.reduce([r, g, b])
    cmin = np.minimum.reduce([r, g, b])
    delta = cmax - cmin
    s = np.where(cmax == 0, 0.0, delta / np.where(cmax == 0, 1.0, cmax))
    h = _np_hue_from_unit_rgb(r, g, b, cmax, delta)
    return np.stack([h, s, cmax], axis=-1)


def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV (h degrees, s and v in [0, 1]) to RGB in [0, 1]."""
    h = normalize_hue(h)

    def channel(n: float) -> float:
        k = (n + h / 60) % 6
        return v - v * s * max(0.0, min(k, 4 - k, 1.0))

    return channel(5), channel(3), channel(1)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: HSV → (..., 3) RGB in [0, 1]."""
    h, s, v = _broadcast(h, s, v)
    h = h % 360

    def channel(n):
        k = (n + h / 60) % 6
        return v - v * s * np.clip(np.minimum(k, 4 - k), 0.0, 1.0)

    return np.stack([channel(5), channel(3), channel(1)], axis=-1)


## HSV <-> HWB

def hsv_to_hwb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """HWB shares hue with HSV: whiteness = (1 - s) v, blackness = 1 - v."""
    return h, (1 - s) * v, 1 - v


def hwb_to_hsv(h: float, w: float, b: float) -> tuple[float, float, float]:
    """
    Convert HWB to HSV. When whiteness + blackness >= 1 the color is an
    achromatic gray with value w / (w + b).
    """
    if w + b >= 1:
        return h, 0.0, w / (w + b)
    v = 1 - b
    s = 1 - w / v if v > 0 else 0.0
    return h, s, v


def np_hsv_to_hwb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = _broadcast(h, s, v)
    return np.stack([h, (1 - s) * v, 1 - v], axis=-1)


def np_hwb_to_hsv(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    h, w, b = _broadcast(h, w, b)
    total = w + b
    gray = total >= 1
    v = np.where(gray, w / np.where(total == 0, 1.0, total), 1 - b)
    safe_v = np.where(v == 0, 1.0, v)
    s = np.where(gray | (v == 0), 0.0, 1 - w / safe_v)
    return np.stack([h, s, v], axis=-1)
