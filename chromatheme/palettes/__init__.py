from .shades import resolve_shades, validate_shades, natural_saturation_factor, damped_saturation, natural_hue_shift
from .scale import Scale, generate_scale, generate_gray_scale, gray_tint_hue, gray_saturation, generate_palette
from .semantic import semantic_color, semantic_colors, secondary_color
from .dark import generate_dark_scale, generate_dark_gray_scale, dark_lightness_for, dark_saturation
from .theme import Theme, generate_natural_theme, generate_dark_theme, generate_theme_pair
from .css_variables import (
    variable_name, css_variables, semantic_alias_variables, css_variables_block, themed_css_variables,
)

__all__ = [
    "resolve_shades", "validate_shades", "natural_saturation_factor", "damped_saturation", "natural_hue_shift",
    "Scale", "generate_scale", "generate_gray_scale", "gray_tint_hue", "gray_saturation", "generate_palette",
    "semantic_color", "semantic_colors", "secondary_color",
    "generate_dark_scale", "generate_dark_gray_scale", "dark_lightness_for", "dark_saturation",
    "Theme", "generate_natural_theme", "generate_dark_theme", "generate_theme_pair",
    "variable_name", "css_variables", "semantic_alias_variables", "css_variables_block", "themed_css_variables",
]
