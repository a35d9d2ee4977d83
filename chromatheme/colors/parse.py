"""
Resolution of every accepted color input to canonical RGBA floats.

Accepted inputs:
    - hex strings with 3, 4, 6 or 8 digits, with or without ``#``
    - CSS named colors and ``transparent``
    - functional notation: rgb(a), hsl(a), hsv(a), hwb, lab, lch, oklab,
      oklch, cmyk, device-cmyk; comma or whitespace separated, optional
      ``/ alpha`` tail
    - channel records (RGB, HSL, ...) and dicts with record keys
    - 3/4-length sequences or arrays, read as RGB(A)
    - objects exposing ``to_hex()``/``hex`` or ``to_rgb()``/``rgb``
"""
from __future__ import annotations
import math
import re
import warnings
from typing import Any, Mapping, Tuple

import numpy as np
from boundednumbers.functions import clamp

from ..errors import ParseError, ConversionError
from ..conversions import space_to_rgb
from .named import lookup_named
from .records import RECORD_TYPES, record_channels, space_of

RGBA = Tuple[float, float, float, float]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]+)$")
_FUNC_RE = re.compile(r"^([a-zA-Z-]+)\s*\((.*)\)$", re.DOTALL)
_NUMBER_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)(%|deg|rad|grad|turn)?$")

_HUE_UNITS = {
    None: 1.0,
    "deg": 1.0,
    "rad": 180.0 / math.pi,
    "grad": 0.9,
    "turn": 360.0,
}

# Dict key sets recognised for each space (alpha is always optional).
_DICT_KEYS = (
    ("rgb", ("r", "g", "b")),
    ("hsl", ("h", "s", "l")),
    ("hsv", ("h", "s", "v")),
    ("hwb", ("h", "w", "b")),
    ("xyz", ("x", "y", "z")),
    ("cmyk", ("c", "m", "y", "k")),
    ("lch", ("l", "c", "h")),
    ("lab", ("l", "a", "b")),
)


def parse_hex(text: str) -> RGBA:
    """
    Parse a hex color string.

    Args:
        text: ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``, case-insensitive

    Returns:
        (r, g, b, alpha) with channels in [0, 255] and alpha in [0, 1]

    Raises:
        ParseError: On bad length or non-hex characters.
    """
    match = _HEX_RE.match(text.strip())
    if not match:
        raise ParseError(text, "not a hex color")
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        raise ParseError(text, f"hex colors need 3, 4, 6 or 8 digits, got {len(match.group(1))}")
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return float(r), float(g), float(b), alpha


def _number(token: str, source: str) -> tuple[float, str | None]:
    if token.lower() == "none":
        return 0.0, None
    match = _NUMBER_RE.match(token)
    if not match:
        raise ParseError(source, f"invalid component {token!r}")
    return float(match.group(1)), match.group(2)


def _hue(token: str, source: str) -> float:
    value, unit = _number(token, source)
    if unit == "%":
        raise ParseError(source, "hue cannot be a percentage")
    return value * _HUE_UNITS[unit]


def _percent_or_number(token: str, source: str, percent_scale: float, number_scale: float = 1.0) -> float:
    value, unit = _number(token, source)
    if unit == "%":
        return value * percent_scale
    if unit is not None:
        raise ParseError(source, f"unexpected unit in {token!r}")
    return value * number_scale


def _alpha(token: str, source: str) -> float:
    return _percent_or_number(token, source, 0.01)


def _split_args(body: str, source: str) -> tuple[list[str], str | None]:
    body = body.strip()
    alpha = None
    if "/" in body:
        body, alpha = (part.strip() for part in body.split("/", 1))
        if not alpha:
            raise ParseError(source, "empty alpha after '/'")
    if "," in body:
        parts = [p.strip() for p in body.split(",")]
        if not all(parts):
            raise ParseError(source, "empty component between commas")
    else:
        parts = body.split()
    if not parts:
        raise ParseError(source, "no components")
    return parts, alpha


def _functional_channels(name: str, parts: list[str], source: str) -> tuple[str, tuple]:
    """Map a CSS function's arguments to (space, channels in record units)."""
    if name in ("rgb", "rgba"):
        return "rgb", tuple(_percent_or_number(p, source, 2.55) for p in parts)
    if name in ("hsl", "hsla", "hsv", "hsva", "hsb", "hsba", "hwb"):
        space = {"hsla": "hsl", "hsva": "hsv", "hsb": "hsv", "hsba": "hsv"}.get(name, name)
        return space, (_hue(parts[0], source),) + tuple(
            _percent_or_number(p, source, 1.0) for p in parts[1:]
        )
    if name == "lab":
        return "lab", (
            _percent_or_number(parts[0], source, 1.0),
            *(_percent_or_number(p, source, 1.25) for p in parts[1:]),
        )
    if name == "lch":
        return "lch", (
            _percent_or_number(parts[0], source, 1.0),
            _percent_or_number(parts[1], source, 1.5),
            *(_hue(p, source) for p in parts[2:]),
        )
    if name == "oklab":
        return "oklab", (
            _percent_or_number(parts[0], source, 0.01),
            *(_percent_or_number(p, source, 0.004) for p in parts[1:]),
        )
    if name == "oklch":
        return "oklch", (
            _percent_or_number(parts[0], source, 0.01),
            _percent_or_number(parts[1], source, 0.004),
            *(_hue(p, source) for p in parts[2:]),
        )
    if name == "cmyk":
        return "cmyk", tuple(_percent_or_number(p, source, 1.0) for p in parts)
    if name == "device-cmyk":
        return "cmyk", tuple(_percent_or_number(p, source, 1.0, 100.0) for p in parts)
    raise ParseError(source, f"unknown color function {name!r}")


def parse_functional(text: str) -> RGBA:
    """Parse CSS functional notation such as ``rgb(24 144 255 / 50%)``."""
    match = _FUNC_RE.match(text.strip())
    if not match:
        raise ParseError(text, "not a functional color")
    name = match.group(1).lower()
    parts, alpha_token = _split_args(match.group(2), text)
    width = 4 if name in ("cmyk", "device-cmyk") else 3
    if len(parts) == width + 1 and alpha_token is None:
        # legacy comma syntax: rgba(r, g, b, a)
        alpha_token = parts.pop()
    if len(parts) != width:
        raise ParseError(text, f"{name}() expects {width} components, got {len(parts)}")
    space, channels = _functional_channels(name, parts, text)
    alpha = _alpha(alpha_token, text) if alpha_token is not None else 1.0
    if space == "rgb":
        return _finish(channels, alpha, text)
    return _from_space(space, channels, alpha, text)


def parse_string(text: str) -> RGBA:
    """Parse any supported color string."""
    stripped = text.strip()
    if not stripped:
        raise ParseError(text, "empty string")
    lowered = stripped.lower()
    if lowered == "transparent":
        return 0.0, 0.0, 0.0, 0.0
    named = lookup_named(lowered)
    if named is not None:
        return parse_hex(named)
    if "(" in stripped:
        return parse_functional(stripped)
    return parse_hex(stripped)


def _check_numbers(values, source) -> tuple:
    out = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, float, np.integer, np.floating)):
            raise ParseError(source, f"component {v!r} is not a number")
        v = float(v)
        if math.isnan(v) or math.isinf(v):
            raise ParseError(source, "components must be finite")
        out.append(v)
    return tuple(out)


def _finish(rgb, alpha, source) -> RGBA:
    """Clamp RGB channels to [0, 255] and alpha to [0, 1], warning on overflow."""
    rgb = _check_numbers(rgb, source)
    (alpha,) = _check_numbers((alpha,), source)
    if any(c < 0 or c > 255 for c in rgb) or not 0 <= alpha <= 1:
        warnings.warn(f"Color components of {source!r} out of range were clamped", stacklevel=4)
    r, g, b = (float(clamp(c, 0.0, 255.0)) for c in rgb)
    return r, g, b, float(clamp(alpha, 0.0, 1.0))


def _from_space(space: str, channels, alpha, source) -> RGBA:
    channels = _check_numbers(channels, source)
    (alpha,) = _check_numbers((alpha,), source)
    try:
        r, g, b = space_to_rgb(channels, space)
    except ConversionError as exc:
        raise ParseError(source, str(exc)) from exc
    return r, g, b, float(clamp(alpha, 0.0, 1.0))


def parse_mapping(value: Mapping[str, Any]) -> RGBA:
    keys = {str(k).lower(): v for k, v in value.items()}
    alpha = keys.get("alpha", 1.0)
    explicit = keys.get("space") or keys.get("mode")
    if explicit is not None:
        record_type = RECORD_TYPES.get(str(explicit).lower())
        if record_type is None:
            raise ParseError(value, f"unknown space {explicit!r}")
        fields = [f for f in record_type._fields if f != "alpha"]
        try:
            channels = tuple(keys[f] for f in fields)
        except KeyError as exc:
            raise ParseError(value, f"missing channel {exc.args[0]!r}") from None
        return _from_space(str(explicit).lower(), channels, alpha, value)
    for space, fields in _DICT_KEYS:
        if all(f in keys for f in fields):
            if space == "rgb" and "alpha" not in keys and "a" in keys:
                alpha = keys["a"]
            channels = tuple(keys[f] for f in fields)
            if space == "rgb":
                return _finish(channels, alpha, value)
            return _from_space(space, channels, alpha, value)
    raise ParseError(value, "dict keys do not match any color space")


def resolve_rgba(value: Any) -> RGBA:
    """
    Resolve any supported color input to ``(r, g, b, alpha)`` floats.

    Raises:
        ParseError: If the input is malformed or of an unsupported type.
    """
    if isinstance(value, str):
        return parse_string(value)
    rgba = getattr(value, "_rgba", None)
    if rgba is not None:
        return rgba
    space = space_of(value)
    if space is not None:
        if space == "rgb":
            return _finish(record_channels(value), value.alpha, value)
        return _from_space(space, record_channels(value), value.alpha, value)
    if isinstance(value, Mapping):
        return parse_mapping(value)
    if isinstance(value, (tuple, list, np.ndarray)):
        seq = list(np.asarray(value, dtype=object).ravel()) if isinstance(value, np.ndarray) else list(value)
        if len(seq) == 3:
            return _finish(seq, 1.0, value)
        if len(seq) == 4:
            return _finish(seq[:3], seq[3], value)
        raise ParseError(value, f"expected 3 or 4 components, got {len(seq)}")
    for attr in ("to_hex", "hex", "to_rgb", "rgb"):
        member = getattr(value, attr, None)
        if member is None:
            continue
        resolved = member() if callable(member) else member
        if resolved is value:
            break
        return resolve_rgba(resolved)
    raise ParseError(value, f"unsupported input type {type(value).__name__}")
