"""
Harmony schemes: hue-rotation patterns around a base color, and a score
for how well a set of colors hangs together.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from itertools import combinations
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

import numpy as np
from boundednumbers.functions import clamp

from ..colors import contrast
from ..colors import Color, ColorInput, parse_color
from ..config import (
    HARMONY_WEIGHTS, HARMONIC_INTERVALS, HARMONY_CONTRAST_WINDOW,
    HARMONY_SATURATION_SPREAD, HARMONY_LIGHTNESS_SPREAD,
    ANALOGOUS_STEP, MONOCHROMATIC_STEP,
)
from ..types.color_types import HarmonyType

# Fixed hue offsets from the base; analogous and monochromatic are built from ``count``.
HUE_PATTERNS: Mapping[str, Tuple[float, ...]] = MappingProxyType({
    "complementary": (0.0, 180.0),
    "triadic": (0.0, 120.0, 240.0),
    "tetradic": (0.0, 90.0, 180.0, 270.0),
    "square": (0.0, 90.0, 180.0, 270.0),
    "split-complementary": (0.0, 150.0, 210.0),
    "compound": (0.0, 30.0, 180.0, 210.0),
})

HARMONY_TYPES: Tuple[str, ...] = (
    "complementary", "analogous", "triadic", "tetradic", "square",
    "split-complementary", "compound", "monochromatic",
)

DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "complementary": "Base and its opposite hue",
    "analogous": "Neighbouring hues on either side of the base",
    "triadic": "Three hues evenly spaced around the wheel",
    "tetradic": "Four hues in two complementary pairs",
    "square": "Four hues evenly spaced around the wheel",
    "split-complementary": "Base and the two hues beside its complement",
    "compound": "Base, its neighbour and the complements of both",
    "monochromatic": "One hue at several lightness and saturation levels",
})

SUGGESTION_THRESHOLD = 0.6
SUGGESTIONS: Mapping[str, str] = MappingProxyType({
    "color_balance": "Adjust hue angles for a more even spread around the wheel",
    "contrast_range": "Vary lightness more to widen the contrast range",
    "saturation": "Bring saturation levels closer together",
    "lightness": "Balance lightness values across the colors",
    "hue_relation": "Move hues toward harmonic intervals (multiples of 30 degrees)",
})


@dataclass(frozen=True)
class ColorScheme:
    """
    A generated harmony.

    Attributes:
        type: Harmony type name
        base: Color the scheme was built from; always ``colors[0]``
        colors: Ordered scheme colors
        score: Harmony score in [0, 1]
        metrics: Per-criterion scores in [0, 1]
        description: One-line description of the pattern
        suggestions: Hints for criteria scoring below 0.6
    """
    type: str
    base: Color
    colors: Tuple[Color, ...]
    score: float
    metrics: Mapping[str, float] = field(default_factory=dict)
    description: str = ""
    suggestions: Tuple[str, ...] = ()

    @property
    def hex_colors(self) -> List[str]:
        return [c.to_hex() for c in self.colors]

    def __len__(self) -> int:
        return len(self.colors)


def _alternating(count: int) -> List[int]:
    """0, 1, -1, 2, -2, ... of length ``count``."""
    out = [0]
    k = 1
    while len(out) < count:
        out.append(k)
        if len(out) < count:
            out.append(-k)
        k += 1
    return out


def _rotations(base: Color, offsets: Iterable[float], variation: float) -> List[Color]:
    h, s, l = base.to_hsl()[:3]
    colors = [base]
    for index, offset in enumerate(list(offsets)[1:], start=1):
        shift = variation / 4 * (1 if index % 2 else -1)
        colors.append(Color.from_hsl(h + offset, s, float(clamp(l + shift, 0.0, 100.0)), base.alpha))
    return colors


def _monochromatic(base: Color, count: int, variation: float) -> List[Color]:
    h, s, l = base.to_hsl()[:3]
    step = MONOCHROMATIC_STEP * (1 + variation / 100)
    colors = [base]
    for k in _alternating(count)[1:]:
        lightness = float(clamp(l + k * step, 0.0, 100.0))
        saturation = float(clamp(s * (1 - abs(k) * 0.1), 0.0, 100.0))
        colors.append(Color.from_hsl(h, saturation, lightness, base.alpha))
    return colors


def scheme_colors(base: ColorInput, type: HarmonyType, count: int = 5, variation: float = 0.0) -> List[Color]:
    """
    Colors for a harmony type, base first.

    Args:
        base: Any color input
        type: One of ``HARMONY_TYPES``
        count: Number of colors for analogous and monochromatic; the fixed
            patterns always give their own count
        variation: 0..100; widens monochromatic steps and alternates the
            lightness of rotated colors by ±variation/4

    Raises:
        ValueError: On an unknown type, ``count`` < 2 or ``variation``
            outside [0, 100].
    """
    color = parse_color(base)
    if count < 2:
        raise ValueError(f"count must be >= 2, got {count}")
    if not 0 <= variation <= 100:
        raise ValueError(f"variation must be in [0, 100], got {variation}")
    if type == "monochromatic":
        return _monochromatic(color, count, variation)
    if type == "analogous":
        return _rotations(color, [k * ANALOGOUS_STEP for k in _alternating(count)], variation)
    try:
        offsets = HUE_PATTERNS[type]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown harmony type: {type!r}. Expected one of {list(HARMONY_TYPES)}") from None
    return _rotations(color, offsets, variation)


# ------------------ SCORING ------------------
def _color_balance(hues: np.ndarray) -> float:
    if len(hues) < 3:
        return 1.0
    ordered = np.sort(hues % 360.0)
    gaps = np.diff(np.append(ordered, ordered[0] + 360.0))
    ideal = 360.0 / len(hues)
    deviation = np.sqrt(np.mean((gaps - ideal) ** 2))
    return max(0.0, 1.0 - deviation / ideal)


def _contrast_range(colors: List[Color]) -> float:
    ratios = [contrast(a, b) for a, b in combinations(colors, 2)]
    low, high = min(ratios), max(ratios)
    ideal_low, ideal_high = HARMONY_CONTRAST_WINDOW
    if low >= ideal_low and high <= ideal_high:
        return 1.0
    penalty = abs(low - ideal_low) + abs(high - ideal_high)
    return max(0.0, 1.0 - penalty * 0.05)


def _spread_score(values: np.ndarray, ideal: float) -> float:
    return float(clamp(1.0 - abs(values.std() - ideal) * 0.02, 0.0, 1.0))


def _hue_relation(hues: np.ndarray) -> float:
    intervals = np.array(HARMONIC_INTERVALS)
    penalty = 0.0
    for a, b in combinations(hues, 2):
        diff = abs(a - b) % 360.0
        diff = min(diff, 360.0 - diff)
        penalty += np.min(np.abs(intervals - diff)) * 0.5
    return float(clamp(1.0 - penalty / 100.0, 0.0, 1.0))


def evaluate_harmony(colors: Iterable[ColorInput]) -> Tuple[float, Dict[str, float]]:
    """
    Score a set of colors.

    Criteria, each in [0, 1]: even hue spread around the wheel
    (``color_balance``), pairwise contrast inside the 3..15 window
    (``contrast_range``), saturation and lightness spread close to a
    moderate target (``saturation``, ``lightness``) and pairwise hue
    distances close to multiples of 30° (``hue_relation``).

    Returns:
        (score, metrics) where score is the ``HARMONY_WEIGHTS`` weighted sum.
    """
    parsed = [parse_color(c) for c in colors]
    if len(parsed) < 2:
        metrics = {name: 1.0 for name in HARMONY_WEIGHTS}
        return 1.0, metrics
    hsl = np.array([c.to_hsl()[:3] for c in parsed])
    metrics = {
        "color_balance": _color_balance(hsl[:, 0]),
        "contrast_range": _contrast_range(parsed),
        "saturation": _spread_score(hsl[:, 1], HARMONY_SATURATION_SPREAD),
        "lightness": _spread_score(hsl[:, 2], HARMONY_LIGHTNESS_SPREAD),
        "hue_relation": _hue_relation(hsl[:, 0]),
    }
    metrics = {name: float(value) for name, value in metrics.items()}
    score = sum(HARMONY_WEIGHTS[name] * value for name, value in metrics.items())
    return float(clamp(score, 0.0, 1.0)), metrics


def suggestions_for(metrics: Mapping[str, float]) -> Tuple[str, ...]:
    return tuple(SUGGESTIONS[name] for name, value in metrics.items() if value < SUGGESTION_THRESHOLD)


def generate_scheme(
    base: ColorInput,
    type: HarmonyType,
    *,
    count: int = 5,
    variation: float = 0.0,
) -> ColorScheme:
    """
    Build and score a harmony scheme.

    Args:
        base: Any color input
        type: complementary, analogous, triadic, tetradic, square,
            split-complementary, compound or monochromatic
        count: Colors for analogous and monochromatic
        variation: See ``scheme_colors``

    Returns:
        A frozen ``ColorScheme`` whose first color is the base.
    """
    color = parse_color(base)
    colors = scheme_colors(color, type, count=count, variation=variation)
    score, metrics = evaluate_harmony(colors)
    return ColorScheme(
        type=type,
        base=color,
        colors=tuple(colors),
        score=score,
        metrics=MappingProxyType(metrics),
        description=DESCRIPTIONS[type],
        suggestions=suggestions_for(metrics),
    )


def generate_all_schemes(base: ColorInput, **options) -> Dict[str, ColorScheme]:
    """Every harmony type for ``base``, in declaration order."""
    return {name: generate_scheme(base, name, **options) for name in HARMONY_TYPES}


def generate_adaptive(base: ColorInput, **options) -> ColorScheme:
    """The scheme with the highest score; ties go to the type declared first."""
    schemes = generate_all_schemes(base, **options)
    return max(schemes.values(), key=lambda scheme: scheme.score)
