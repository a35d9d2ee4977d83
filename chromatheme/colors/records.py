"""Plain channel records for every supported color space."""
from __future__ import annotations
from typing import Dict, NamedTuple, Type


class RGB(NamedTuple):
    r: float
    g: float
    b: float
    alpha: float = 1.0


class HSL(NamedTuple):
    h: float
    s: float
    l: float
    alpha: float = 1.0


class HSV(NamedTuple):
    h: float
    s: float
    v: float
    alpha: float = 1.0


class HWB(NamedTuple):
    h: float
    w: float
    b: float
    alpha: float = 1.0


class XYZ(NamedTuple):
    x: float
    y: float
    z: float
    alpha: float = 1.0


class LAB(NamedTuple):
    l: float
    a: float
    b: float
    alpha: float = 1.0


class LCH(NamedTuple):
    l: float
    c: float
    h: float
    alpha: float = 1.0


class OKLAB(NamedTuple):
    l: float
    a: float
    b: float
    alpha: float = 1.0


class OKLCH(NamedTuple):
    l: float
    c: float
    h: float
    alpha: float = 1.0


class CMYK(NamedTuple):
    c: float
    m: float
    y: float
    k: float
    alpha: float = 1.0


RECORD_TYPES: Dict[str, Type[tuple]] = {
    "rgb": RGB, "hsl": HSL, "hsv": HSV, "hwb": HWB, "xyz": XYZ,
    "lab": LAB, "lch": LCH, "oklab": OKLAB, "oklch": OKLCH, "cmyk": CMYK,
}

RECORD_SPACES: Dict[Type[tuple], str] = {cls: space for space, cls in RECORD_TYPES.items()}


def record_channels(record: tuple) -> tuple:
    """Channel values of a record without its alpha."""
    return tuple(record)[:-1]


def space_of(record) -> str | None:
    return RECORD_SPACES.get(type(record))
