"""Shared reference values for the test suite."""

# hex -> (r, g, b, alpha)
samples_hex_rgba = {
    "#1890ff": (24, 144, 255, 1.0),
    "#1890FF": (24, 144, 255, 1.0),
    "1890ff": (24, 144, 255, 1.0),
    "#fff": (255, 255, 255, 1.0),
    "#000000": (0, 0, 0, 1.0),
    "#f0f": (255, 0, 255, 1.0),
    "#f0f8": (255, 0, 255, 0x88 / 255),
    "#FF573380": (255, 87, 51, 0x80 / 255),
}

# rgb -> hsl (h in degrees, s and l in percent)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (255, 255, 0): (60.0, 100.0, 50.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 128, 0): (30.12, 100.0, 50.0),
}

# rgb -> hsv
samples_rgb_hsv = {
    (255, 0, 0): (0.0, 100.0, 100.0),
    (0, 128, 0): (120.0, 100.0, 50.2),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

# rgb -> CIE Lab (D65)
samples_rgb_lab = {
    (255, 255, 255): (100.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 0): (53.24, 80.09, 67.20),
    (0, 0, 255): (32.30, 79.19, -107.86),
}

# rgb -> OKLab
samples_rgb_oklab = {
    (255, 255, 255): (1.0, 0.0, 0.0),
    (255, 0, 0): (0.6280, 0.2249, 0.1258),
    (0, 0, 255): (0.4520, -0.0325, -0.3115),
}

# rgb -> cmyk (percent)
samples_rgb_cmyk = {
    (255, 0, 0): (0.0, 100.0, 100.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0, 100.0),
    (255, 255, 255): (0.0, 0.0, 0.0, 0.0),
    (128, 64, 0): (0.0, 50.0, 100.0, 49.8),
}

# Colors used for round trips through every space
round_trip_colors = [
    "#1890FF", "#FF5733", "#2ECC71", "#8E44AD", "#F1C40F",
    "#000000", "#FFFFFF", "#808080", "#123456", "#FEDCBA",
    "#00FFFF", "#FF00FF", "#010203", "#FAFAFA",
]

all_spaces = ["rgb", "hsl", "hsv", "hwb", "xyz", "lab", "lch", "oklab", "oklch", "cmyk"]

vision_types = [
    "protanopia", "deuteranopia", "tritanopia",
    "protanomaly", "deuteranomaly", "tritanomaly",
    "achromatopsia", "achromatomaly",
]

ten_shades = [
    ("50", 95.0), ("100", 90.0), ("200", 80.0), ("300", 70.0), ("400", 60.0),
    ("500", 50.0), ("600", 40.0), ("700", 30.0), ("800", 20.0), ("900", 10.0),
]
