"""OKLab / OKLCh (Björn Ottosson, 2020) from linear-light sRGB."""
import numpy as np
from numpy import ndarray as NDArray

LINEAR_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)

LMS_TO_LINEAR_RGB = np.linalg.inv(LINEAR_RGB_TO_LMS)


def np_linear_rgb_to_oklab(rgb: NDArray) -> NDArray:
    """Linear-light RGB in [0, 1] → (..., 3) OKLab with L in [0, 1]."""
    rgb = np.asarray(rgb, dtype=float)
    lms = np.cbrt(rgb @ LINEAR_RGB_TO_LMS.T)
    return lms @ LMS_TO_OKLAB.T


def np_oklab_to_linear_rgb(lab: NDArray) -> NDArray:
    """OKLab → linear-light RGB, unclamped (out-of-gamut values survive)."""
    lab = np.asarray(lab, dtype=float)
    lms = (lab @ OKLAB_TO_LMS.T) ** 3
    return lms @ LMS_TO_LINEAR_RGB.T
