"""
CIE models: XYZ (D65, Y of white = 100), CIE L*a*b* and its polar form LCh.

All functions here are vectorized over the last axis of ``(..., 3)`` arrays;
scalar callers go through ``conversions.wrapper``.
"""
import numpy as np
from numpy import ndarray as NDArray

D65_WHITE = np.array([95.047, 100.0, 108.883])

RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)

LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27


def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Linear-light RGB in [0, 1] → XYZ scaled so the D65 white has Y = 100."""
    rgb = np.asarray(rgb, dtype=float)
    return rgb @ RGB_TO_XYZ.T * 100.0


def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    """XYZ (Y = 100 scale) → linear-light RGB, unclamped."""
    xyz = np.asarray(xyz, dtype=float)
    return (xyz / 100.0) @ XYZ_TO_RGB.T


def _lab_f(t: NDArray) -> NDArray:
    return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)


def _lab_f_inv(f: NDArray) -> NDArray:
    f3 = f ** 3
    return np.where(f3 > LAB_EPSILON, f3, (116 * f - 16) / LAB_KAPPA)


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """
    XYZ → CIE L*a*b* relative to D65.

    Returns:
        (..., 3) array: L in [0, 100], a and b unbounded (roughly ±128 for sRGB).
    """
    xyz = np.asarray(xyz, dtype=float)
    f = _lab_f(xyz / D65_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    fy = (L + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    # L itself decides the Y branch so that L <= 8 stays linear
    y = np.where(L > LAB_KAPPA * LAB_EPSILON, fy ** 3, L / LAB_KAPPA)
    x = _lab_f_inv(fx)
    z = _lab_f_inv(fz)
    return np.stack([x, y, z], axis=-1) * D65_WHITE


def np_to_polar(lab_like: NDArray) -> NDArray:
    """Rectangular (L, a, b) → polar (L, C, H) with H in degrees [0, 360)."""
    arr = np.asarray(lab_like, dtype=float)
    L, a, b = arr[..., 0], arr[..., 1], arr[..., 2]
    c = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a)) % 360
    return np.stack([L, c, h], axis=-1)


def np_from_polar(lch_like: NDArray) -> NDArray:
    """Polar (L, C, H degrees) → rectangular (L, a, b)."""
    arr = np.asarray(lch_like, dtype=float)
    L, c, h = arr[..., 0], arr[..., 1], np.radians(arr[..., 2])
    return np.stack([L, c * np.cos(h), c * np.sin(h)], axis=-1)
