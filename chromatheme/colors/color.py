from __future__ import annotations
import random
from typing import Any, Dict, Tuple, Union

from boundednumbers.functions import clamp

from ..conversions import rgb_to_space, space_to_rgb, srgb_to_linear, CHANNEL_COUNT
from ..errors import ConversionError
from ..types.color_types import ColorSpace, canonical_space
from ..types.format_type import OutputFormat, format_aliases
from .parse import resolve_rgba
from .records import RECORD_TYPES, RGB, HSL, HSV, HWB, XYZ, LAB, LCH, OKLAB, OKLCH, CMYK


def _round_channel(value: float) -> int:
    """Half-up rounding for non-negative channel values."""
    return int(value + 0.5)


def _fmt(value: float, digits: int = 2) -> str:
    """Shortest decimal rendering: 12.0 -> '12', 0.5 -> '0.5'."""
    text = f"{round(value, digits):.{digits}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


class Color:
    """
    Immutable sRGB color with alpha.

    Channels are stored as floats in [0, 255] so that chained conversions do
    not accumulate rounding; the integer accessors, hex and CSS strings round
    on the way out. Equality and hashing use the rounded channels and alpha
    rounded to three decimals.
    """
    __slots__ = ('_rgba', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, value: Any = "#000000", alpha: float | None = None) -> None:
        r, g, b, a = resolve_rgba(value)
        if alpha is not None:
            a = float(clamp(float(alpha), 0.0, 1.0))
        self._rgba = (r, g, b, a)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_rgba(cls, r: float, g: float, b: float, alpha: float = 1.0) -> "Color":
        """Build from trusted floats, clamping into range without re-parsing."""
        obj = object.__new__(cls)
        object.__setattr__(obj, '_rgba', (
            float(clamp(float(r), 0.0, 255.0)),
            float(clamp(float(g), 0.0, 255.0)),
            float(clamp(float(b), 0.0, 255.0)),
            float(clamp(float(alpha), 0.0, 1.0)),
        ))
        object.__setattr__(obj, '_is_frozen', True)
        return obj

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> "Color":
        return cls._from_rgba(r, g, b, alpha)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: float = 1.0) -> "Color":
        return cls.from_space("hsl", h, s, l, alpha=alpha)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, alpha: float = 1.0) -> "Color":
        return cls.from_space("hsv", h, s, v, alpha=alpha)

    @classmethod
    def from_space(cls, space: ColorSpace | str, *channels: float, alpha: float = 1.0) -> "Color":
        """
        Build a color from channels expressed in ``space`` record units.
        Out-of-gamut values are clamped to the sRGB cube.
        """
        r, g, b = space_to_rgb(channels, space)
        return cls._from_rgba(r, g, b, alpha)

    @classmethod
    def from_record(cls, record: tuple) -> "Color":
        return cls(record)

    @classmethod
    def random(cls, seed: int | None = None) -> "Color":
        rng = random.Random(seed)
        return cls._from_rgba(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgba(self) -> Tuple[float, float, float, float]:
        """Full-precision (r, g, b, alpha)."""
        return self._rgba

    @property
    def rgb_float(self) -> Tuple[float, float, float]:
        return self._rgba[:3]

    @property
    def red(self) -> int:
        return _round_channel(self._rgba[0])

    @property
    def green(self) -> int:
        return _round_channel(self._rgba[1])

    @property
    def blue(self) -> int:
        return _round_channel(self._rgba[2])

    @property
    def alpha(self) -> float:
        return self._rgba[3]

    @property
    def hue(self) -> float:
        return self.to_hsl().h

    @property
    def saturation(self) -> float:
        return self.to_hsl().s

    @property
    def lightness(self) -> float:
        return self.to_hsl().l

    @property
    def brightness(self) -> float:
        return self.to_hsv().v

    # ------------------ CONVERSIONS ------------------
    def to(self, space: ColorSpace | str) -> tuple:
        """
        Channels of this color in ``space`` as the matching record type.

        Raises:
            ConversionError: If ``space`` is not supported.
        """
        target = canonical_space(space)
        if target == "rgb":
            return self.to_rgb()
        channels = rgb_to_space(self._rgba[:3], target)
        return RECORD_TYPES[target](*channels, alpha=self.alpha)

    def to_rgb(self) -> RGB:
        """Rounded integer channels."""
        return RGB(self.red, self.green, self.blue, self.alpha)

    def to_hsl(self) -> HSL:
        return self.to("hsl")

    def to_hsv(self) -> HSV:
        return self.to("hsv")

    def to_hwb(self) -> HWB:
        return self.to("hwb")

    def to_xyz(self) -> XYZ:
        return self.to("xyz")

    def to_lab(self) -> LAB:
        return self.to("lab")

    def to_lch(self) -> LCH:
        return self.to("lch")

    def to_oklab(self) -> OKLAB:
        return self.to("oklab")

    def to_oklch(self) -> OKLCH:
        return self.to("oklch")

    def to_cmyk(self) -> CMYK:
        return self.to("cmyk")

    # ------------------ FORMATTING ------------------
    def to_hex(self, include_alpha: bool | None = None) -> str:
        """
        Uppercase hex. ``include_alpha=None`` appends the alpha byte only when
        the color is not fully opaque.
        """
        text = f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        if include_alpha is None:
            include_alpha = self.alpha < 1.0
        if include_alpha:
            text += f"{_round_channel(self.alpha * 255):02X}"
        return text

    @property
    def hex(self) -> str:
        return self.to_hex(include_alpha=False)

    def to_rgb_string(self) -> str:
        if self.alpha < 1.0:
            return f"rgba({self.red}, {self.green}, {self.blue}, {_fmt(self.alpha, 3)})"
        return f"rgb({self.red}, {self.green}, {self.blue})"

    def to_hsl_string(self) -> str:
        h, s, l, a = self.to_hsl()
        body = f"{round(h) % 360}, {round(s)}%, {round(l)}%"
        if a < 1.0:
            return f"hsla({body}, {_fmt(a, 3)})"
        return f"hsl({body})"

    def to_string(self, fmt: Union[OutputFormat, str] = OutputFormat.HEX) -> str:
        """
        Render in a CSS-style notation.

        Args:
            fmt: One of hex, hexa, rgb, hsl, hsv, hwb, lab, lch, oklab, oklch, cmyk

        Raises:
            ConversionError: On an unknown format.
        """
        key = str(fmt.value if isinstance(fmt, OutputFormat) else fmt).lower()
        try:
            fmt = format_aliases.get(key) or OutputFormat(key)
        except ValueError:
            raise ConversionError(f"Unknown output format: {key!r}") from None
        if fmt == OutputFormat.HEX:
            return self.to_hex()
        if fmt == OutputFormat.HEXA:
            return self.to_hex(include_alpha=True)
        if fmt == OutputFormat.RGB:
            return self.to_rgb_string()
        if fmt == OutputFormat.HSL:
            return self.to_hsl_string()
        record = self.to(fmt.value)
        channels = record[:CHANNEL_COUNT[fmt.value]]
        digits = 4 if fmt in (OutputFormat.OKLAB, OutputFormat.OKLCH) else 2
        if fmt in (OutputFormat.HSV, OutputFormat.HWB):
            parts = [_fmt(channels[0])] + [f"{_fmt(c)}%" for c in channels[1:]]
        elif fmt == OutputFormat.CMYK:
            parts = [f"{_fmt(c)}%" for c in channels]
        else:
            parts = [_fmt(c, digits) for c in channels]
        tail = f" / {_fmt(self.alpha, 3)}" if self.alpha < 1.0 else ""
        return f"{fmt.value}({' '.join(parts)}{tail})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hex": self.to_hex(),
            "rgb": self.to_rgb()._asdict(),
            "hsl": self.to_hsl()._asdict(),
            "alpha": self.alpha,
        }

    # ------------------ MEASUREMENT ------------------
    def luminance(self) -> float:
        """WCAG relative luminance on linearized channels, in [0, 1]."""
        r, g, b = (srgb_to_linear(c / 255.0) for c in self._rgba[:3])
        return 0.2126 * r + 0.7152 * g + 0.0722 * b

    def contrast(self, other: Any) -> float:
        from .wcag import contrast
        return contrast(self, other)

    def is_light(self) -> bool:
        return self.luminance() > 0.5

    def is_dark(self) -> bool:
        return not self.is_light()

    def distance(self, other: Any) -> float:
        """Euclidean distance in RGB space."""
        o = Color(other)._rgba
        return sum((a - b) ** 2 for a, b in zip(self._rgba[:3], o[:3])) ** 0.5

    def equals(self, other: Any) -> bool:
        return self == Color(other)

    # ------------------ MANIPULATION SHORTCUTS ------------------
    def with_alpha(self, alpha: float) -> "Color":
        return Color._from_rgba(*self._rgba[:3], alpha)

    def fade(self, amount: float) -> "Color":
        """Reduce opacity by ``amount`` percent of the current alpha."""
        return self.with_alpha(self.alpha * (1 - amount / 100))

    def lighten(self, amount: float = 10) -> "Color":
        from ..manipulations import lighten
        return lighten(self, amount)

    def darken(self, amount: float = 10) -> "Color":
        from ..manipulations import darken
        return darken(self, amount)

    def saturate(self, amount: float = 10) -> "Color":
        from ..manipulations import saturate
        return saturate(self, amount)

    def desaturate(self, amount: float = 10) -> "Color":
        from ..manipulations import desaturate
        return desaturate(self, amount)

    def rotate(self, degrees: float) -> "Color":
        from ..manipulations import rotate_hue
        return rotate_hue(self, degrees)

    def grayscale(self) -> "Color":
        from ..manipulations import grayscale
        return grayscale(self)

    def invert(self) -> "Color":
        from ..manipulations import negative
        return negative(self)

    def mix(self, other: Any, amount: float = 0.5) -> "Color":
        from ..manipulations import mix
        return mix(self, other, amount)

    def blend(self, other: Any, mode: str = "normal") -> "Color":
        from ..manipulations import blend
        return blend(self, other, mode)

    # ------------------ DUNDER ------------------
    def _key(self):
        return (self.red, self.green, self.blue, round(self.alpha, 3))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Color({self.to_hex()!r})"

    def __str__(self) -> str:
        return self.to_hex()


ColorInput = Union[str, Color, tuple, list, dict, Any]


def parse_color(value: ColorInput) -> Color:
    """
    Resolve any supported input to a Color.

    Raises:
        ParseError: If the input is malformed or unrecognised.
    """
    if isinstance(value, Color):
        return value
    return Color(value)


def color_convert(value: ColorInput, space: ColorSpace | str) -> tuple:
    """Convert any input to the record type of ``space``."""
    return parse_color(value).to(space)
