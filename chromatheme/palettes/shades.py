from __future__ import annotations
from typing import Callable, Iterable, Mapping, Optional, Union

from ..config import Shade, ShadeConfig, SHADE_PRESETS, HUE_SHIFT_LIGHT, HUE_SHIFT_DARK
from ..errors import RangeError

ShadesLike = Union[str, ShadeConfig, Iterable, Mapping]
DampingCurve = Callable[[float], float]


def resolve_shades(shades: ShadesLike) -> ShadeConfig:
    """
    Normalize a shade configuration.

    Args:
        shades: A preset name ("default", "tailwind", "gray", ...), a mapping
            of name to lightness, or an iterable of ``Shade``/``(name, lightness)``

    Returns:
        Tuple of ``Shade`` entries in the given order.

    Raises:
        ValueError: On an unknown preset name or an empty config.
        RangeError: If lightness values are outside [0, 100] or not strictly
            monotonic in either direction.
    """
    if isinstance(shades, str):
        try:
            config = SHADE_PRESETS[shades.lower()]
        except KeyError:
            raise ValueError(f"Unknown shade preset: {shades!r}. Expected one of {list(SHADE_PRESETS)}") from None
    elif isinstance(shades, Mapping):
        config = tuple(Shade(name, float(lightness)) for name, lightness in shades.items())
    else:
        config = tuple(
            s if isinstance(s, Shade) else Shade(s[0], float(s[1])) for s in shades
        )
    if not config:
        raise ValueError("Shade configuration is empty")
    validate_shades(config)
    return config


def validate_shades(config: ShadeConfig) -> None:
    names = [s.name for s in config]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate shade names in {names}")
    values = [s.lightness for s in config]
    for value in values:
        if not 0 <= value <= 100:
            raise RangeError(f"Shade lightness {value} outside [0, 100]")
    pairs = list(zip(values, values[1:]))
    if pairs and not (all(a > b for a, b in pairs) or all(a < b for a, b in pairs)):
        raise RangeError(f"Shade lightness must be strictly monotonic, got {values}")


def natural_saturation_factor(lightness: float) -> float:
    """
    Saturation multiplier for a target lightness. Near-white shades lose
    most of their chroma, near-black ones a little; mid tones keep it.
    """
    if lightness > 90:
        return 0.3 + (100 - lightness) * 0.07
    if lightness > 70:
        return 0.7 + (90 - lightness) * 0.015
    if lightness < 20:
        return 0.8 + lightness * 0.01
    if lightness < 40:
        return 0.9 + (lightness - 20) * 0.005
    return 1.0


def damped_saturation(
    saturation: float,
    lightness: float,
    damping: float = 1.0,
    curve: Optional[DampingCurve] = None,
) -> float:
    """``damping`` scales the curve's effect: 0 disables it, 1 applies it fully."""
    factor = (curve or natural_saturation_factor)(lightness)
    factor = 1 + (factor - 1) * damping
    return min(100.0, max(0.0, saturation * factor))


def natural_hue_shift(lightness: float) -> float:
    light_at, light_shift = HUE_SHIFT_LIGHT
    dark_at, dark_shift = HUE_SHIFT_DARK
    if lightness > light_at:
        return light_shift
    if lightness < dark_at:
        return dark_shift
    return 0.0


def closest_shade(config: ShadeConfig, lightness: float) -> Shade:
    """First shade whose target is nearest ``lightness``."""
    return min(config, key=lambda s: abs(s.lightness - lightness))
