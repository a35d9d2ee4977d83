import numpy as np
from numpy import ndarray as NDArray


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """Naive device CMYK: K = 1 - max(r, g, b). All channels in [0, 1]."""
    k = 1 - max(r, g, b)
    if k >= 1:
        return 0.0, 0.0, 0.0, 1.0
    return (1 - r - k) / (1 - k), (1 - g - k) / (1 - k), (1 - b - k) / (1 - k), k


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)


def np_unit_rgb_to_cmyk(rgb: NDArray) -> NDArray:
    """Vectorized: (..., 3) RGB in [0, 1] → (..., 4) CMYK in [0, 1]."""
    rgb = np.asarray(rgb, dtype=float)
    k = 1 - rgb.max(axis=-1)
    denom = np.where(k >= 1, 1.0, 1 - k)[..., None]
    cmy = np.where((k >= 1)[..., None], 0.0, (1 - rgb - k[..., None]) / denom)
    return np.concatenate([cmy, k[..., None]], axis=-1)


def np_cmyk_to_unit_rgb(cmyk: NDArray) -> NDArray:
    cmyk = np.asarray(cmyk, dtype=float)
    return (1 - cmyk[..., :3]) * (1 - cmyk[..., 3:4])
