"""
WCAG 2.x contrast measurement and contrast-driven color adjustment.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from ..colors import Color, ColorInput, parse_color, contrast, relative_luminance
from ..config import WCAG_THRESHOLDS, ADJUST_STEP, ADJUST_MAX_ATTEMPTS
from ..manipulations import lighten, darken, rotate_hue
from ..types.color_types import WCAGLevel, TextSize

logger = logging.getLogger(__name__)

BLACK = Color.from_rgb(0, 0, 0)
WHITE = Color.from_rgb(255, 255, 255)


def required_ratio(
    level: WCAGLevel = "AA",
    size: TextSize = "normal",
    thresholds: Mapping[Tuple[str, str], float] = WCAG_THRESHOLDS,
) -> float:
    """
    Minimum contrast ratio for a WCAG level and text size.

    Raises:
        ValueError: On an unknown level or size.
    """
    try:
        return thresholds[(level, size)]
    except KeyError:
        raise ValueError(
            f"Unknown WCAG level/size combination: {level!r}/{size!r}. "
            f"Expected level in ('AA', 'AAA') and size in ('normal', 'large')"
        ) from None


def is_compliant(fg: ColorInput, bg: ColorInput, level: WCAGLevel = "AA", size: TextSize = "normal") -> bool:
    return contrast(fg, bg) >= required_ratio(level, size)


@dataclass(frozen=True)
class AdjustmentResult:
    color: Color
    contrast: float
    steps: int
    direction: str
    fallback: bool


def adjust_for_contrast(
    fg: ColorInput,
    bg: ColorInput,
    level: WCAGLevel = "AA",
    size: TextSize = "normal",
    step: float = ADJUST_STEP,
    max_attempts: int = ADJUST_MAX_ATTEMPTS,
) -> AdjustmentResult:
    """
    Search for a foreground that meets the required contrast.

    Lightness moves in ``step`` HSL points toward the pole opposite the
    background (darken on a light background, lighten on a dark one) for up
    to ``max_attempts``, then the other way from the original color for up
    to ``max_attempts`` more. If neither succeeds the result is black or
    white, whichever contrasts more with the background.
    """
    target = required_ratio(level, size)
    fg_c, bg_c = parse_color(fg), parse_color(bg)

    ratio = contrast(fg_c, bg_c)
    if ratio >= target:
        return AdjustmentResult(fg_c, ratio, 0, "none", False)

    light_background = bg_c.lightness > 50
    primary, secondary = (darken, lighten) if light_background else (lighten, darken)

    steps = 0
    for move in (primary, secondary):
        adjusted = fg_c
        for _ in range(max_attempts):
            adjusted = move(adjusted, step)
            steps += 1
            ratio = contrast(adjusted, bg_c)
            if ratio >= target:
                return AdjustmentResult(adjusted, ratio, steps, move.__name__, False)

    black_ratio, white_ratio = contrast(BLACK, bg_c), contrast(WHITE, bg_c)
    chosen = BLACK if black_ratio > white_ratio else WHITE
    logger.debug(
        "No lightness step of %s reached %.2f:1 against %s; falling back to %s",
        fg_c.to_hex(), target, bg_c.to_hex(), chosen.to_hex(),
    )
    return AdjustmentResult(chosen, max(black_ratio, white_ratio), steps, "fallback", True)


def auto_adjust(
    fg: ColorInput,
    bg: ColorInput,
    level: WCAGLevel = "AA",
    size: TextSize = "normal",
) -> Color:
    """Foreground adjusted to meet WCAG ``level`` for ``size`` text; unchanged if it already does."""
    return adjust_for_contrast(fg, bg, level, size).color


def _rating(ratio: float) -> str:
    if ratio >= 7:
        return "AAA"
    if ratio >= 4.5:
        return "AA"
    if ratio >= 3:
        return "AA Large"
    return "Fail"


def accessibility_report(fg: ColorInput, bg: ColorInput) -> Dict[str, object]:
    """Contrast ratio, pass/fail for each level and size, and an overall rating."""
    ratio = contrast(fg, bg)
    return {
        "contrast": ratio,
        "AA": {size: ratio >= WCAG_THRESHOLDS[("AA", size)] for size in ("normal", "large")},
        "AAA": {size: ratio >= WCAG_THRESHOLDS[("AAA", size)] for size in ("normal", "large")},
        "rating": _rating(ratio),
    }


@dataclass(frozen=True)
class PairSuggestion:
    color: Color
    contrast: float
    aa: bool
    aaa: bool


def suggest_accessible_pairs(base: ColorInput, count: int = 5) -> List[PairSuggestion]:
    """
    Candidate foregrounds for ``base`` as a background, best contrast first.

    Candidates are lighter and darker variants of the base, its complement
    and complement variants, and black and white.
    """
    base_c = parse_color(base)
    complement = rotate_hue(base_c, 180)
    candidates = [
        lighten(base_c, 30), darken(base_c, 30),
        lighten(base_c, 50), darken(base_c, 50),
        complement, lighten(complement, 20), darken(complement, 20),
        BLACK, WHITE,
    ]
    seen = set()
    suggestions = []
    for candidate in candidates:
        if candidate in seen:
            continue
        seen.add(candidate)
        ratio = contrast(candidate, base_c)
        suggestions.append(PairSuggestion(
            candidate, ratio,
            ratio >= WCAG_THRESHOLDS[("AA", "normal")],
            ratio >= WCAG_THRESHOLDS[("AAA", "normal")],
        ))
    suggestions.sort(key=lambda s: s.contrast, reverse=True)
    return suggestions[:count]
