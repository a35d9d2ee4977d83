import numpy as np
import pytest

from chromatheme.colors import Color
from chromatheme.accessibility import CVD_MATRICES, simulate_color_blindness, np_simulate_color_blindness
from tests.samples import vision_types, round_trip_colors


def test_every_type_has_a_matrix():
    assert set(CVD_MATRICES) == set(vision_types)


@pytest.mark.parametrize("kind", vision_types)
def test_matrix_rows_preserve_channel_energy(kind):
    matrix = CVD_MATRICES[kind]
    assert matrix.shape == (3, 3)
    for row in matrix.sum(axis=1):
        assert 0.95 <= row <= 1.05


@pytest.mark.parametrize("kind", vision_types)
def test_black_and_white_survive(kind):
    assert simulate_color_blindness("#000000", kind) == Color("#000000")
    white = simulate_color_blindness("#FFFFFF", kind)
    assert min(white.red, white.green, white.blue) >= 254


def test_achromatopsia_is_gray():
    for text in round_trip_colors:
        c = simulate_color_blindness(text, "achromatopsia")
        assert c.red == c.green == c.blue


def test_protanopia_confuses_red_and_green():
    red = simulate_color_blindness("#FF0000", "protanopia")
    green = simulate_color_blindness("#00FF00", "protanopia")
    assert abs(red.red - red.green) < 20
    assert abs(green.red - green.green) < 20


def test_alpha_is_kept():
    assert simulate_color_blindness(Color("#1890FF", alpha=0.3), "deuteranopia").alpha == pytest.approx(0.3)


def test_vectorized_matches_scalar():
    rgb = np.array([Color(text).rgb_float for text in round_trip_colors]).reshape(2, 7, 3)
    out = np_simulate_color_blindness(rgb, "tritanomaly")
    assert out.shape == rgb.shape
    assert out.min() >= 0 and out.max() <= 255
    flat = out.reshape(-1, 3)
    for text, row in zip(round_trip_colors, flat):
        expected = simulate_color_blindness(text, "tritanomaly")
        assert np.allclose(row, expected.rgb_float)


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        simulate_color_blindness("#FF0000", "tetrachromacy")
