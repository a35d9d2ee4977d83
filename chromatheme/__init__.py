"""Chromatheme: color science, shade scales, themes, gradients and accessibility checks."""
import logging

from .errors import ChromathemeError, ParseError, ConversionError, RangeError
from .colors import (
    RGB, HSL, HSV, HWB, XYZ, LAB, LCH, OKLAB, OKLCH, CMYK,
    Color, ColorInput, parse_color, color_convert,
)
from .colors import color_convert as convert
from .conversions import convert as convert_channels, np_convert
from .manipulations import blend, mix, lighten, darken, saturate, desaturate, rotate_hue
from .palettes import (
    generate_scale, generate_gray_scale, generate_palette,
    generate_dark_scale, generate_natural_theme, generate_dark_theme, generate_theme_pair,
    css_variables, css_variables_block,
)
from .gradients import (
    GradientStop, generate_gradient, linear_gradient, radial_gradient, conic_gradient,
    mesh_gradient, MeshGradient, bezier_colors,
)
from .schemes import ColorScheme, generate_scheme, generate_all_schemes, generate_adaptive, evaluate_harmony
from .accessibility import (
    contrast, relative_luminance, is_compliant, auto_adjust, adjust_for_contrast, simulate_color_blindness,
)
from .analysis import delta_e_76, delta_e_oklab, delta_e_2000

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ChromathemeError", "ParseError", "ConversionError", "RangeError",
    "RGB", "HSL", "HSV", "HWB", "XYZ", "LAB", "LCH", "OKLAB", "OKLCH", "CMYK",
    "Color", "ColorInput", "parse_color", "color_convert",
    "convert", "convert_channels", "np_convert",
    "blend", "mix", "lighten", "darken", "saturate", "desaturate", "rotate_hue",
    "generate_scale", "generate_gray_scale", "generate_palette",
    "generate_dark_scale", "generate_natural_theme", "generate_dark_theme", "generate_theme_pair",
    "css_variables", "css_variables_block",
    "GradientStop", "generate_gradient", "linear_gradient", "radial_gradient", "conic_gradient",
    "mesh_gradient", "MeshGradient", "bezier_colors",
    "ColorScheme", "generate_scheme", "generate_all_schemes", "generate_adaptive", "evaluate_harmony",
    "contrast", "relative_luminance", "is_compliant", "auto_adjust", "adjust_for_contrast",
    "simulate_color_blindness",
    "delta_e_76", "delta_e_oklab", "delta_e_2000",
    "__version__",
]
