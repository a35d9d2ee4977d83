"""Basic chromatheme usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromatheme import (
    Color,
    parse_color,
    convert,
    generate_scale,
    generate_theme_pair,
    css_variables_block,
    linear_gradient,
    mesh_gradient,
    generate_adaptive,
    contrast,
    auto_adjust,
    simulate_color_blindness,
)


def demonstrate_colors() -> None:
    # Parse any notation and convert between spaces.
    accent = parse_color("rgb(255 128 64)")
    print("Hex:", accent.to_hex())
    print("OKLCh:", accent.to_oklch())
    print("As LAB record:", convert(accent, "lab"))
    print("As CSS:", accent.to_string("oklch"))


def demonstrate_palettes() -> None:
    # Shade scale for a brand color, then a light/dark theme pair as CSS variables.
    print("Tailwind scale:", generate_scale("#1890ff", "tailwind"))
    pair = generate_theme_pair("#1890ff")
    print(css_variables_block(pair["dark"], prefix="app", selector=".dark"))


def demonstrate_gradients() -> None:
    # Smoothed CSS gradient in Lab and a small rasterized mesh.
    print(linear_gradient(["#ff0000", "#0000ff"], angle=45, smoothing=True, steps=3, space="lab"))
    mesh = mesh_gradient([["red", "yellow"], ["blue", "white"]], resolution=4)
    print("Mesh raster shape:", mesh.rasterize().shape)


def demonstrate_accessibility() -> None:
    fg, bg = Color("#c8c8c8"), Color("#ffffff")
    print("Contrast:", round(contrast(fg, bg), 2))
    fixed = auto_adjust(fg, bg, "AA", "normal")
    print("Adjusted:", fixed.to_hex(), round(contrast(fixed, bg), 2))
    print("Deuteranopia:", simulate_color_blindness("#ff0000", "deuteranopia").to_hex())
    scheme = generate_adaptive("#1890ff")
    print("Best harmony:", scheme.type, round(scheme.score, 3), scheme.hex_colors)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_palettes()
    demonstrate_gradients()
    demonstrate_accessibility()
