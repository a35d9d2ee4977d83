# No dependencies
from enum import Enum


class OutputFormat(str, Enum):
    HEX = "hex"
    HEXA = "hexa"
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    CMYK = "cmyk"


format_aliases = {
    "rgba": OutputFormat.RGB,
    "hsla": OutputFormat.HSL,
    "hex8": OutputFormat.HEXA,
}
