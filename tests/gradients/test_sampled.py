import numpy as np
import pytest

from chromatheme.colors import Color
from chromatheme.gradients import (
    GradientStop, bezier_colors, de_casteljau, interpolate_gradient, midpoint_transform, resolve_easing,
    sample_gradient, reverse_gradient, smooth_gradient, analyze_gradient, gradient_css_variables,
)


def _close(a, b, tol=1):
    return all(abs(x - y) <= tol for x, y in zip(a.to_rgb()[:3], b.to_rgb()[:3]))


def test_de_casteljau_line_and_quadratic():
    line = de_casteljau(np.array([[0.0], [10.0]]), [0.0, 0.5, 1.0])
    assert np.allclose(line[:, 0], [0.0, 5.0, 10.0])
    quad = de_casteljau(np.array([[0.0], [10.0], [0.0]]), [0.5])
    assert np.allclose(quad[:, 0], [5.0])


def test_bezier_hits_end_controls():
    colors = bezier_colors(["#FF0000", "#00FF00", "#0000FF"], 7)
    assert len(colors) == 7
    assert colors[0] == Color("#FF0000")
    assert colors[-1] == Color("#0000FF")
    assert colors[3].green > 100


def test_bezier_perceptual_space_ends():
    colors = bezier_colors(["#1890FF", "#FF5733"], 5, space="oklch")
    assert _close(colors[0], Color("#1890FF"))
    assert _close(colors[-1], Color("#FF5733"))


def test_bezier_rejects_bad_arguments():
    with pytest.raises(ValueError):
        bezier_colors([], 5)
    with pytest.raises(ValueError):
        bezier_colors(["red", "blue"], 1)
    with pytest.raises(ValueError):
        bezier_colors(["red", "blue"], 5, space="cmyk")


def test_interpolate_gradient_rgb():
    colors = interpolate_gradient(["#000000", "#FFFFFF"], 3, space="rgb")
    assert colors == [Color("#000000"), Color("#808080"), Color("#FFFFFF")]


def test_interpolate_gradient_respects_positions():
    colors = interpolate_gradient(["#000000", GradientStop("#FFFFFF", 0.5), "#FFFFFF"], 5, space="rgb")
    assert colors[2] == Color("#FFFFFF")
    assert colors[1] == Color("#808080")


def test_interpolate_gradient_easing_and_midpoints():
    eased = interpolate_gradient(["#000000", "#FFFFFF"], 3, space="rgb", easing="ease-in")
    assert eased[1] == Color.from_rgb(255 * 0.125, 255 * 0.125, 255 * 0.125)
    shifted = interpolate_gradient(["#000000", "#FFFFFF"], 5, space="rgb", midpoints=[0.25])
    assert shifted[1] == Color("#808080")
    with pytest.raises(ValueError):
        interpolate_gradient(["#000000", "#FFFFFF"], 5, midpoints=[0.5, 0.5])
    with pytest.raises(ValueError):
        interpolate_gradient(["#000000", "#FFFFFF"], 5, easing="bounce")


def test_interpolate_gradient_hue_takes_short_arc():
    colors = interpolate_gradient(["hsl(350, 100%, 50%)", "hsl(10, 100%, 50%)"], 3, space="hsl")
    assert colors[1].hue < 1 or colors[1].hue > 359


def test_midpoint_transform():
    shape = midpoint_transform(0.25)
    assert float(shape(0.25)) == pytest.approx(0.5)
    assert float(shape(0.0)) == pytest.approx(0.0)
    assert float(shape(1.0)) == pytest.approx(1.0)
    assert resolve_easing(None)(0.3) == 0.3
    with pytest.raises(ValueError):
        midpoint_transform(1.0)


def test_sample_and_reverse():
    colors = interpolate_gradient(["#000000", "#FFFFFF"], 9, space="rgb")
    picked = sample_gradient(colors, 3)
    assert picked == [colors[0], colors[4], colors[8]]
    assert sample_gradient(colors, 20) == colors
    assert reverse_gradient(colors)[0] == Color("#FFFFFF")


def test_smooth_gradient():
    flat = ["#1890FF"] * 6
    assert smooth_gradient(flat) == [Color("#1890FF")] * 6
    bumpy = ["#000000", "#FFFFFF", "#000000", "#FFFFFF", "#000000"]
    smoothed = smooth_gradient(bumpy, sigma=1.0)
    assert len(smoothed) == 5
    assert smoothed[1].red < 255 and smoothed[2].red > 0
    with pytest.raises(ValueError):
        smooth_gradient(bumpy, sigma=0)


def test_analyze_gradient():
    even = analyze_gradient(interpolate_gradient(["#000000", "#FFFFFF"], 11, space="oklab"))
    assert not even["has_banding"]
    assert not even["has_flat_steps"]
    assert even["smoothness"] > 0.95
    assert even["color_range"] > 90
    flat = analyze_gradient(["#FF0000", "#FF0000", "#0000FF"])
    assert flat["has_flat_steps"]
    assert analyze_gradient(["#FF0000"])["average_step"] == 0.0


def test_gradient_css_variables():
    variables = gradient_css_variables("brand", ["#FF0000", "#0000FF"])
    assert variables["--gradient-brand-color-1"] == "#FF0000"
    assert variables["--gradient-brand-color-2"] == "#0000FF"
    assert variables["--gradient-brand-linear"].startswith("linear-gradient(")
    assert variables["--gradient-brand-radial"].startswith("radial-gradient(")
    assert variables["--gradient-brand-conic"].startswith("conic-gradient(")
