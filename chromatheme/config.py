"""
Tuned constants used across chromatheme.

Every value here is a preset rather than a derived law. Functions that use
them accept keyword overrides, so callers can substitute their own tables
without touching this module.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class Shade(NamedTuple):
    name: str | int
    lightness: float


ShadeConfig = Tuple[Shade, ...]


def shades_from_pairs(*pairs) -> ShadeConfig:
    return tuple(Shade(name, float(lightness)) for name, lightness in pairs)


# ---------------------------------------------------------------------------
# Shade presets (HSL lightness, visual order light → dark)
# ---------------------------------------------------------------------------
DEFAULT_SHADES = shades_from_pairs(
    ("50", 98), ("100", 95), ("200", 90), ("300", 82), ("400", 71), ("500", 60),
    ("600", 48), ("700", 37), ("800", 27), ("900", 18), ("950", 10), ("1000", 4),
)

TAILWIND_SHADES = shades_from_pairs(
    ("50", 97), ("100", 94), ("200", 86), ("300", 77), ("400", 66), ("500", 55),
    ("600", 45), ("700", 36), ("800", 28), ("900", 21), ("950", 13),
)

TEN_SHADES = shades_from_pairs(
    ("50", 97), ("100", 93), ("200", 85), ("300", 75), ("400", 64),
    ("500", 53), ("600", 43), ("700", 33), ("800", 24), ("900", 15),
)

GRAY_SHADES = shades_from_pairs(
    ("50", 98), ("100", 96), ("150", 93), ("200", 88), ("300", 80), ("400", 71),
    ("500", 60), ("600", 48), ("700", 37), ("800", 27), ("850", 20), ("900", 14),
    ("950", 8), ("1000", 3),
)

MATERIAL_SHADES = shades_from_pairs(
    ("50", 97), ("100", 93), ("200", 85), ("300", 74), ("400", 63), ("500", 52),
    ("600", 42), ("700", 33), ("800", 25), ("900", 17), ("A400", 10), ("A700", 5),
)

ANTD_SHADES = shades_from_pairs(
    (1, 97), (2, 91), (3, 82), (4, 72), (5, 62), (6, 52),
    (7, 42), (8, 32), (9, 22), (10, 13), (11, 7), (12, 3),
)

SHADE_PRESETS: Mapping[str, ShadeConfig] = MappingProxyType({
    "default": DEFAULT_SHADES,
    "tailwind": TAILWIND_SHADES,
    "ten": TEN_SHADES,
    "gray": GRAY_SHADES,
    "material": MATERIAL_SHADES,
    "antd": ANTD_SHADES,
})


# ---------------------------------------------------------------------------
# Natural scale shaping
# ---------------------------------------------------------------------------
HUE_SHIFT_LIGHT = (85.0, 2.0)   # above this lightness, shift hue by +2°
HUE_SHIFT_DARK = (15.0, -2.0)   # below this lightness, shift hue by -2°


# ---------------------------------------------------------------------------
# Gray scales
# ---------------------------------------------------------------------------
GRAY_SATURATION_STEPS = ((90.0, 10.0, 2.0), (70.0, 30.0, 5.0))  # (above, below, saturation)
GRAY_MID_SATURATION = 8.0
DEFAULT_TINT_HUE = 210.0


# ---------------------------------------------------------------------------
# Semantic roles
# ---------------------------------------------------------------------------
class SemanticTarget(NamedTuple):
    hue: float
    weight: float                       # fraction of the way from primary hue to target hue
    saturation_factor: float
    saturation_band: Tuple[float, float]
    lightness: float


SEMANTIC_HUE_TARGETS: Mapping[str, SemanticTarget] = MappingProxyType({
    "success": SemanticTarget(142.0, 0.7, 0.9, (40.0, 70.0), 45.0),
    "warning": SemanticTarget(38.0, 0.8, 1.1, (60.0, 85.0), 50.0),
    "danger": SemanticTarget(4.0, 0.8, 1.0, (55.0, 75.0), 50.0),
    "info": SemanticTarget(210.0, 0.7, 0.85, (40.0, 70.0), 50.0),
})

SECONDARY_ROTATION = 180.0
SECONDARY_SATURATION_FACTOR = 0.7
SECONDARY_LIGHTNESS = 50.0


# ---------------------------------------------------------------------------
# Dark mode
# ---------------------------------------------------------------------------
DARK_LIGHTNESS: Mapping[str, float] = MappingProxyType({
    "50": 90.0, "100": 85.0, "200": 75.0, "300": 65.0, "400": 55.0, "500": 45.0,
    "600": 35.0, "700": 25.0, "800": 18.0, "900": 12.0, "950": 8.0, "1000": 4.0,
})

DARK_GRAY_LIGHTNESS: Mapping[str, float] = MappingProxyType({
    "50": 97.0, "100": 94.0, "150": 90.0, "200": 85.0, "300": 70.0, "400": 58.0,
    "500": 45.0, "600": 32.0, "700": 22.0, "800": 16.0, "850": 12.0, "900": 10.0,
    "950": 7.0, "1000": 4.0,
})

DARK_BACKGROUND = "#121212"
DARK_FOREGROUND_LIGHTNESS = 50.0
DARK_MIN_CONTRAST = 3.0


# ---------------------------------------------------------------------------
# Accessibility
# ---------------------------------------------------------------------------
WCAG_THRESHOLDS: Mapping[Tuple[str, str], float] = MappingProxyType({
    ("AA", "normal"): 4.5,
    ("AA", "large"): 3.0,
    ("AAA", "normal"): 7.0,
    ("AAA", "large"): 4.5,
})

ADJUST_STEP = 5.0
ADJUST_MAX_ATTEMPTS = 20


# ---------------------------------------------------------------------------
# Harmony scoring
# ---------------------------------------------------------------------------
HARMONY_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "color_balance": 0.25,
    "contrast_range": 0.20,
    "saturation": 0.20,
    "lightness": 0.20,
    "hue_relation": 0.15,
})

HARMONIC_INTERVALS: Tuple[float, ...] = (0.0, 30.0, 60.0, 90.0, 120.0, 150.0, 180.0)

# Pairwise contrast window a scheme should span, and the spread (standard
# deviation, HSL percent) of saturation and lightness that scores best.
HARMONY_CONTRAST_WINDOW: Tuple[float, float] = (3.0, 15.0)
HARMONY_SATURATION_SPREAD = 20.0
HARMONY_LIGHTNESS_SPREAD = 17.3

ANALOGOUS_STEP = 30.0
MONOCHROMATIC_STEP = 10.0
