from .color_types import (
    ColorSpace, BlendMode, HarmonyType, VisionDeficiency, WCAGLevel, TextSize,
    GradientKind, HueDirection, SPACE_ALIASES, HUE_SPACES, canonical_space,
)
from .format_type import OutputFormat, format_aliases

__all__ = [
    "ColorSpace", "BlendMode", "HarmonyType", "VisionDeficiency", "WCAGLevel", "TextSize",
    "GradientKind", "HueDirection", "SPACE_ALIASES", "HUE_SPACES", "canonical_space",
    "OutputFormat", "format_aliases",
]
