"""WCAG 2.x luminance and contrast ratio between two colors."""
from .color import ColorInput, parse_color


def relative_luminance(color: ColorInput) -> float:
    """``0.2126 R + 0.7152 G + 0.0722 B`` on linearized sRGB channels."""
    return parse_color(color).luminance()


def contrast(a: ColorInput, b: ColorInput) -> float:
    """
    WCAG contrast ratio, symmetric in its arguments.

    Returns:
        ``(L1 + 0.05) / (L2 + 0.05)`` with L1 the lighter luminance, in [1, 21].
    """
    la, lb = relative_luminance(a), relative_luminance(b)
    hi, lo = max(la, lb), min(la, lb)
    return (hi + 0.05) / (lo + 0.05)
