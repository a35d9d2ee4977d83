"""
Shade scales: a base color expanded into an ordered set of lightness steps.
"""
from __future__ import annotations
from typing import Dict, Iterable, Literal, Optional, Union

from ..colors import Color, ColorInput, parse_color
from ..config import (
    DEFAULT_SHADES, GRAY_SHADES, GRAY_SATURATION_STEPS, GRAY_MID_SATURATION, DEFAULT_TINT_HUE,
)
from ..conversions import in_srgb_gamut
from .shades import (
    ShadesLike, DampingCurve, resolve_shades, damped_saturation, natural_hue_shift, closest_shade,
)

Scale = Dict[Union[str, int], str]
ScaleSpace = Literal["hsl", "oklch"]


def _max_in_gamut_chroma(l: float, c: float, h: float, iterations: int = 24) -> float:
    """Largest chroma <= ``c`` that keeps OKLCh (l, c, h) inside sRGB."""
    if in_srgb_gamut((l, c, h), "oklch"):
        return c
    lo, hi = 0.0, c
    for _ in range(iterations):
        mid = (lo + hi) / 2
        if in_srgb_gamut((l, mid, h), "oklch"):
            lo = mid
        else:
            hi = mid
    return lo


def generate_scale(
    base: ColorInput,
    shades: ShadesLike = DEFAULT_SHADES,
    *,
    preserve: bool = False,
    natural: bool = True,
    damping: float = 1.0,
    damping_curve: Optional[DampingCurve] = None,
    space: ScaleSpace = "hsl",
) -> Scale:
    """
    Build a shade scale from ``base``.

    Hue and saturation come from the base color; each shade's lightness comes
    from the config. With ``natural`` on, saturation follows the damping
    curve (scaled by ``damping``) and the hue drifts a couple of degrees at
    the extremes.

    Args:
        base: Any color input
        shades: Shade config or preset name; order is kept in the result
        preserve: Put the exact base hex on the shade closest to its lightness
        natural: Apply saturation damping and extreme-lightness hue shift
        damping: Strength of the damping curve, 0 disables it
        damping_curve: Replacement for the default lightness → factor curve
        space: "hsl" targets HSL lightness; "oklch" targets perceptual
            lightness (config value / 100) and reduces chroma to stay in gamut

    Returns:
        Ordered dict of shade name → uppercase ``#RRGGBB``.

    Raises:
        ParseError: If ``base`` cannot be parsed.
        RangeError: If the config lightness is not strictly monotonic.
    """
    color = parse_color(base)
    config = resolve_shades(shades)
    if space not in ("hsl", "oklch"):
        raise ValueError(f"Unsupported scale space: {space!r}. Expected 'hsl' or 'oklch'")

    if space == "hsl":
        h, s, base_l = color.to_hsl()[:3]
    else:
        ok_l, ok_c, h = color.to_oklch()[:3]
        base_l = ok_l * 100

    scale: Scale = {}
    for shade in config:
        target = shade.lightness
        hue = h + natural_hue_shift(target) if natural else h
        if space == "hsl":
            sat = damped_saturation(s, target, damping, damping_curve) if natural else s
            shade_color = Color.from_hsl(hue, sat, target)
        else:
            factor = damped_saturation(100.0, target, damping, damping_curve) / 100 if natural else 1.0
            l = target / 100
            chroma = _max_in_gamut_chroma(l, ok_c * factor, hue)
            shade_color = Color.from_space("oklch", l, chroma, hue)
        scale[shade.name] = shade_color.to_hex(include_alpha=False)

    if preserve:
        scale[closest_shade(config, base_l).name] = color.to_hex(include_alpha=False)
    return scale


def gray_saturation(lightness: float) -> float:
    """Near-zero saturation: lowest at the extremes, highest in the mid tones."""
    for above, below, saturation in GRAY_SATURATION_STEPS:
        if lightness > above or lightness < below:
            return saturation
    return GRAY_MID_SATURATION


def gray_tint_hue(base: ColorInput) -> float:
    """Cool tint hue for grays that accompany ``base``."""
    h = parse_color(base).hue
    if h < 40 or h >= 160:
        return 200.0
    if h < 100:
        return 220.0
    return 210.0


def generate_gray_scale(tint_hue: float = DEFAULT_TINT_HUE, shades: ShadesLike = GRAY_SHADES) -> Scale:
    """Slightly tinted neutral scale; pure grays read as lifeless next to brand colors."""
    config = resolve_shades(shades)
    return {
        shade.name: Color.from_hsl(tint_hue, gray_saturation(shade.lightness), shade.lightness).to_hex(False)
        for shade in config
    }


def generate_palette(
    colors: Iterable[ColorInput],
    names: Optional[Iterable[str]] = None,
    shades: ShadesLike = DEFAULT_SHADES,
    preserve: bool = False,
) -> Dict[str, Scale]:
    """One scale per input color, named primary, secondary, ... unless ``names`` is given."""
    default_names = ["primary", "secondary", "tertiary", "quaternary", "quinary"]
    names = list(names) if names is not None else default_names
    palette: Dict[str, Scale] = {}
    for index, color in enumerate(colors):
        name = names[index] if index < len(names) else f"color{index + 1}"
        palette[name] = generate_scale(color, shades, preserve=preserve)
    return palette
