import pytest

from chromatheme.colors import Color
from chromatheme.errors import RangeError
from chromatheme.gradients import (
    GradientStop, normalize_stops, linear_gradient, radial_gradient, conic_gradient, generate_gradient,
)


def test_normalize_spreads_missing_positions_evenly():
    stops = normalize_stops(["red", "green", "blue", "white", "black"])
    assert [s.position for s in stops] == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert stops[0].color == Color("#FF0000")


def test_normalize_fills_between_fixed_neighbours():
    stops = normalize_stops(["red", GradientStop("blue", 0.2), "green", "white", GradientStop("black", 0.8)])
    positions = [s.position for s in stops]
    assert positions == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8])


def test_normalize_single_and_hard_stops():
    assert normalize_stops(["red"])[0].position == 0.0
    stops = normalize_stops(["red", GradientStop("blue", 0.5), GradientStop("green", 0.5), "white"])
    assert [s.position for s in stops] == [0.0, 0.5, 0.5, 1.0]


def test_normalize_rejects_bad_positions():
    with pytest.raises(RangeError):
        normalize_stops([GradientStop("red", 0.6), GradientStop("blue", 0.3)])
    with pytest.raises(RangeError):
        normalize_stops([GradientStop("red", -0.1), "blue"])
    with pytest.raises(RangeError):
        normalize_stops(["red", GradientStop("blue", 1.5)])
    with pytest.raises(ValueError):
        normalize_stops([])


def test_linear_gradient_format():
    assert linear_gradient(["#FF0000", "#0000FF"]) == (
        "linear-gradient(90deg, rgb(255, 0, 0) 0%, rgb(0, 0, 255) 100%)"
    )
    assert linear_gradient(["red", "lime", "blue"], angle=45) == (
        "linear-gradient(45deg, rgb(255, 0, 0) 0%, rgb(0, 255, 0) 50%, rgb(0, 0, 255) 100%)"
    )
    assert linear_gradient(["red", "blue"], repeating=True).startswith("repeating-linear-gradient(90deg, ")


def test_single_color_emits_two_stops():
    assert linear_gradient(["#FF0000"]) == (
        "linear-gradient(90deg, rgb(255, 0, 0) 0%, rgb(255, 0, 0) 100%)"
    )
    assert conic_gradient(["red"]).endswith("rgb(255, 0, 0) 0deg, rgb(255, 0, 0) 360deg)")
    assert radial_gradient(["red"], smoothing=True).count("rgb(255, 0, 0)") == 2


def test_translucent_stops_use_rgba():
    text = linear_gradient([Color("#FF0000", alpha=0.5), "blue"])
    assert "rgba(255, 0, 0, 0.5) 0%" in text


def test_radial_gradient_format():
    assert radial_gradient(["red", "blue"]) == (
        "radial-gradient(circle farthest-corner at center center, rgb(255, 0, 0) 0%, rgb(0, 0, 255) 100%)"
    )
    text = radial_gradient(["red", "blue"], shape="ellipse", size="closest-side", position=("left", "top"))
    assert text.startswith("radial-gradient(ellipse closest-side at left top, ")
    with pytest.raises(ValueError):
        radial_gradient(["red", "blue"], shape="square")


def test_conic_gradient_format():
    assert conic_gradient(["red", "blue"]) == (
        "conic-gradient(at center center, rgb(255, 0, 0) 0deg, rgb(0, 0, 255) 360deg)"
    )
    assert conic_gradient(["red", "blue"], start_angle=45).startswith("conic-gradient(from 45deg at center center, ")


def test_smoothing_inserts_colors_and_keeps_ends():
    text = linear_gradient(["#FF0000", "#0000FF"], smoothing=True, steps=3)
    parts = text[len("linear-gradient(90deg, "):-1].split(", rgb")
    assert len(parts) == 5
    assert text.count("%") == 5
    assert "rgb(255, 0, 0) 0%" in text
    assert "rgb(0, 0, 255) 100%" in text
    assert " 25%" in text and " 50%" in text and " 75%" in text


def test_generate_gradient_dispatch():
    assert generate_gradient("linear", ["red", "blue"]) == linear_gradient(["red", "blue"])
    assert generate_gradient("conic", ["red", "blue"], start_angle=90) == conic_gradient(["red", "blue"], start_angle=90)
    with pytest.raises(ValueError):
        generate_gradient("diamond", ["red", "blue"])


def test_bad_explicit_position_propagates():
    with pytest.raises(RangeError):
        linear_gradient(["red", GradientStop("blue", 2.0)])
