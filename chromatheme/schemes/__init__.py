from .harmony import (
    HUE_PATTERNS, HARMONY_TYPES, ColorScheme, scheme_colors, evaluate_harmony,
    generate_scheme, generate_all_schemes, generate_adaptive,
)

__all__ = [
    "HUE_PATTERNS", "HARMONY_TYPES", "ColorScheme", "scheme_colors", "evaluate_harmony",
    "generate_scheme", "generate_all_schemes", "generate_adaptive",
]
