from .blend import blend, np_blend, BLEND_FUNCTIONS, BLEND_MODES
from .adjust import (
    mix, tint, shade, tone,
    adjust_brightness, adjust_contrast, gamma_correction,
    grayscale, sepia, negative, posterize,
    lighten, darken, saturate, desaturate, rotate_hue, set_lightness, fade,
)

__all__ = [
    "blend", "np_blend", "BLEND_FUNCTIONS", "BLEND_MODES",
    "mix", "tint", "shade", "tone",
    "adjust_brightness", "adjust_contrast", "gamma_correction",
    "grayscale", "sepia", "negative", "posterize",
    "lighten", "darken", "saturate", "desaturate", "rotate_hue", "set_lightness", "fade",
]
