"""Perceptual color difference metrics."""
from __future__ import annotations
import math

from ..colors import ColorInput, parse_color


def delta_e_76(a: ColorInput, b: ColorInput) -> float:
    """Euclidean distance in CIE Lab."""
    la, lb = parse_color(a).to_lab(), parse_color(b).to_lab()
    return math.dist(la[:3], lb[:3])


def delta_e_oklab(a: ColorInput, b: ColorInput) -> float:
    """Euclidean distance in OKLab (roughly 0..1; 0.02 is a just-noticeable step)."""
    la, lb = parse_color(a).to_oklab(), parse_color(b).to_oklab()
    return math.dist(la[:3], lb[:3])


def delta_e_2000(a: ColorInput, b: ColorInput, kl: float = 1.0, kc: float = 1.0, kh: float = 1.0) -> float:
    """
    CIEDE2000 color difference.

    Args:
        a, b: Colors to compare
        kl, kc, kh: Parametric weighting factors (1 for graphic arts)

    Returns:
        Non-negative difference; below ~1 is imperceptible.
    """
    L1, a1, b1 = parse_color(a).to_lab()[:3]
    L2, a2, b2 = parse_color(b).to_lab()[:3]

    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    c_bar7 = ((c1 + c2) / 2) ** 7
    g = 0.5 * (1 - math.sqrt(c_bar7 / (c_bar7 + 25 ** 7)))

    a1p, a2p = a1 * (1 + g), a2 * (1 + g)
    c1p, c2p = math.hypot(a1p, b1), math.hypot(a2p, b2)
    h1p = math.degrees(math.atan2(b1, a1p)) % 360 if c1p else 0.0
    h2p = math.degrees(math.atan2(b2, a2p)) % 360 if c2p else 0.0

    dl = L2 - L1
    dc = c2p - c1p
    if c1p * c2p == 0:
        dh = 0.0
    else:
        dh = h2p - h1p
        if dh > 180:
            dh -= 360
        elif dh < -180:
            dh += 360
    dH = 2 * math.sqrt(c1p * c2p) * math.sin(math.radians(dh / 2))

    l_bar = (L1 + L2) / 2
    c_bar_p = (c1p + c2p) / 2
    if c1p * c2p == 0:
        h_bar = h1p + h2p
    elif abs(h1p - h2p) <= 180:
        h_bar = (h1p + h2p) / 2
    elif h1p + h2p < 360:
        h_bar = (h1p + h2p + 360) / 2
    else:
        h_bar = (h1p + h2p - 360) / 2

    t = (1
         - 0.17 * math.cos(math.radians(h_bar - 30))
         + 0.24 * math.cos(math.radians(2 * h_bar))
         + 0.32 * math.cos(math.radians(3 * h_bar + 6))
         - 0.20 * math.cos(math.radians(4 * h_bar - 63)))
    d_theta = 30 * math.exp(-(((h_bar - 275) / 25) ** 2))
    c_bar_p7 = c_bar_p ** 7
    rc = 2 * math.sqrt(c_bar_p7 / (c_bar_p7 + 25 ** 7))
    sl = 1 + (0.015 * (l_bar - 50) ** 2) / math.sqrt(20 + (l_bar - 50) ** 2)
    sc = 1 + 0.045 * c_bar_p
    sh = 1 + 0.015 * c_bar_p * t
    rt = -math.sin(math.radians(2 * d_theta)) * rc

    tl = dl / (kl * sl)
    tc = dc / (kc * sc)
    th = dH / (kh * sh)
    return math.sqrt(tl * tl + tc * tc + th * th + rt * tc * th)
