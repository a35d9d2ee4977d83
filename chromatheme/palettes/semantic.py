from __future__ import annotations
from typing import Dict, Mapping

from ..colors import Color, ColorInput, parse_color
from ..config import (
    SEMANTIC_HUE_TARGETS, SemanticTarget,
    SECONDARY_ROTATION, SECONDARY_SATURATION_FACTOR, SECONDARY_LIGHTNESS,
)
from ..utils import blend_hue


def semantic_color(primary: ColorInput, target: SemanticTarget) -> Color:
    """
    Rotate the primary hue ``target.weight`` of the way toward ``target.hue``
    along the short arc, scale its saturation into the role's band, and set
    the role's lightness.
    """
    h, s = parse_color(primary).to_hsl()[:2]
    low, high = target.saturation_band
    saturation = min(high, max(low, s * target.saturation_factor))
    return Color.from_hsl(blend_hue(h, target.hue, target.weight), saturation, target.lightness)


def semantic_colors(
    primary: ColorInput,
    targets: Mapping[str, SemanticTarget] = SEMANTIC_HUE_TARGETS,
) -> Dict[str, Color]:
    """Role name → Color for every entry of ``targets`` (success, warning, danger, info)."""
    return {role: semantic_color(primary, target) for role, target in targets.items()}


def secondary_color(primary: ColorInput) -> Color:
    """Complementary role: hue rotated 180°, saturation softened."""
    h, s = parse_color(primary).to_hsl()[:2]
    return Color.from_hsl(
        h + SECONDARY_ROTATION,
        s * SECONDARY_SATURATION_FACTOR,
        SECONDARY_LIGHTNESS,
    )
