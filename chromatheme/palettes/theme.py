from __future__ import annotations
from typing import Dict, Mapping, Optional

from ..colors import ColorInput, parse_color
from ..config import DEFAULT_SHADES, GRAY_SHADES, SEMANTIC_HUE_TARGETS, SemanticTarget, DARK_BACKGROUND
from .dark import generate_dark_scale, generate_dark_gray_scale
from .scale import Scale, generate_scale, generate_gray_scale, gray_tint_hue
from .semantic import semantic_colors, secondary_color
from .shades import ShadesLike

Theme = Dict[str, Scale]


def generate_natural_theme(
    base: ColorInput,
    *,
    shades: ShadesLike = DEFAULT_SHADES,
    preserve: bool = False,
    include_semantics: bool = True,
    include_gray: bool = True,
    include_secondary: bool = False,
    gray_shades: Optional[ShadesLike] = None,
    targets: Mapping[str, SemanticTarget] = SEMANTIC_HUE_TARGETS,
) -> Theme:
    """
    Light theme: a primary scale plus semantic and gray scales derived from it.

    Returns:
        Dict with ``primary`` and, depending on the flags, ``secondary``,
        ``success``, ``warning``, ``danger``, ``info`` and ``gray`` scales.
    """
    primary = parse_color(base)
    theme: Theme = {"primary": generate_scale(primary, shades, preserve=preserve)}
    if include_secondary:
        theme["secondary"] = generate_scale(secondary_color(primary), shades)
    if include_semantics:
        for role, color in semantic_colors(primary, targets).items():
            theme[role] = generate_scale(color, shades)
    if include_gray:
        theme["gray"] = generate_gray_scale(
            gray_tint_hue(primary),
            gray_shades if gray_shades is not None else GRAY_SHADES,
        )
    return theme


def generate_dark_theme(
    base: ColorInput,
    *,
    shades: ShadesLike = DEFAULT_SHADES,
    background: ColorInput = DARK_BACKGROUND,
    include_semantics: bool = True,
    include_gray: bool = True,
    include_secondary: bool = False,
    gray_shades: Optional[ShadesLike] = None,
    targets: Mapping[str, SemanticTarget] = SEMANTIC_HUE_TARGETS,
) -> Theme:
    """Dark counterpart of ``generate_natural_theme`` with the same keys."""
    primary = parse_color(base)
    theme: Theme = {"primary": generate_dark_scale(primary, shades, background=background)}
    if include_secondary:
        theme["secondary"] = generate_dark_scale(secondary_color(primary), shades, background=background)
    if include_semantics:
        for role, color in semantic_colors(primary, targets).items():
            theme[role] = generate_dark_scale(color, shades, background=background)
    if include_gray:
        theme["gray"] = generate_dark_gray_scale(gray_shades if gray_shades is not None else GRAY_SHADES)
    return theme


def generate_theme_pair(base: ColorInput, **options) -> Dict[str, Theme]:
    """
    Matching light and dark themes, each including the secondary role.

    Keyword options are passed to both generators; ``preserve`` only applies
    to the light theme and ``background`` only to the dark one.
    """
    options.setdefault("include_secondary", True)
    light_options = {k: v for k, v in options.items() if k != "background"}
    dark_options = {k: v for k, v in options.items() if k != "preserve"}
    return {
        "light": generate_natural_theme(base, **light_options),
        "dark": generate_dark_theme(base, **dark_options),
    }
