from .records import RGB, HSL, HSV, HWB, XYZ, LAB, LCH, OKLAB, OKLCH, CMYK, RECORD_TYPES
from .named import NAMED_COLORS, lookup_named
from .parse import resolve_rgba, parse_hex, parse_functional, parse_string
from .color import Color, ColorInput, parse_color, color_convert
from .wcag import relative_luminance, contrast

__all__ = [
    "RGB", "HSL", "HSV", "HWB", "XYZ", "LAB", "LCH", "OKLAB", "OKLCH", "CMYK", "RECORD_TYPES",
    "NAMED_COLORS", "lookup_named",
    "resolve_rgba", "parse_hex", "parse_functional", "parse_string",
    "Color", "ColorInput", "parse_color", "color_convert",
    "relative_luminance", "contrast",
]
