from __future__ import annotations
from typing import Literal, get_args

from ..errors import ConversionError

ColorSpace = Literal["rgb", "hsl", "hsv", "hwb", "lab", "lch", "xyz", "oklab", "oklch", "cmyk"]
HUE_SPACES = {"hsl", "hsv", "hwb", "lch", "oklch"}
HueDirection = Literal["cw", "ccw", "shortest", "longest"]

BlendMode = Literal[
    "normal", "multiply", "screen", "overlay", "darken", "lighten",
    "color-dodge", "color-burn", "hard-light", "soft-light", "difference",
    "exclusion", "linear-burn", "linear-dodge", "vivid-light", "linear-light",
    "pin-light", "hard-mix", "subtract", "divide", "average", "negation",
    "reflect", "glow",
]

HarmonyType = Literal[
    "complementary", "analogous", "triadic", "tetradic", "square",
    "split-complementary", "compound", "monochromatic",
]

VisionDeficiency = Literal[
    "protanopia", "deuteranopia", "tritanopia",
    "protanomaly", "deuteranomaly", "tritanomaly",
    "achromatopsia", "achromatomaly",
]

WCAGLevel = Literal["AA", "AAA"]
TextSize = Literal["normal", "large"]
GradientKind = Literal["linear", "radial", "conic"]

# Accepted spellings for each canonical space; alpha variants collapse onto the base space.
SPACE_ALIASES: dict[str, ColorSpace] = {}
for _space in get_args(ColorSpace):
    SPACE_ALIASES[_space] = _space
    SPACE_ALIASES[_space + "a"] = _space
SPACE_ALIASES.update({"hsb": "hsv", "hsba": "hsv", "ciexyz": "xyz", "cielab": "lab", "cielch": "lch"})


def canonical_space(space: str) -> ColorSpace:
    """
    Resolve a user-supplied space name to its canonical spelling.

    Args:
        space: Space name, case-insensitive (``"RGB"``, ``"hsla"``, ``"OkLch"``).

    Returns:
        The canonical ColorSpace literal.

    Raises:
        ConversionError: If the name is not a supported space.
    """
    key = str(space).strip().lower()
    try:
        return SPACE_ALIASES[key]
    except KeyError:
        raise ConversionError(f"Unsupported color space: {space!r}") from None
