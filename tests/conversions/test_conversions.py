import numpy as np
import pytest

from chromatheme.conversions import (
    srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb,
    unit_rgb_to_hsl, hsl_to_unit_rgb, unit_rgb_to_hsv, hsv_to_unit_rgb,
    rgb_to_space, space_to_rgb, convert, np_convert, in_srgb_gamut, CHANNEL_COUNT,
)
from chromatheme.errors import ConversionError
from tests.samples import (
    samples_rgb_hsl, samples_rgb_hsv, samples_rgb_lab, samples_rgb_oklab, samples_rgb_cmyk,
    round_trip_colors, all_spaces,
)

hsl_tolerance = 0.05
lab_tolerance = 0.05
oklab_tolerance = 1e-3
rgb_tolerance = 1e-6


def test_linear_transfer_threshold():
    assert srgb_to_linear(0.0) == 0.0
    assert abs(srgb_to_linear(1.0) - 1.0) < rgb_tolerance
    assert abs(srgb_to_linear(0.04045) - 0.04045 / 12.92) < rgb_tolerance
    assert abs(linear_to_srgb(0.0031308) - 0.0031308 * 12.92) < rgb_tolerance
    assert abs(srgb_to_linear(0.5) - 0.21404) < 1e-4


def test_linear_transfer_round_trip_numpy():
    values = np.linspace(0.0, 1.0, 101)
    assert np.allclose(np_linear_to_srgb(np_srgb_to_linear(values)), values, atol=1e-9)


def test_rgb_to_hsl_samples():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = rgb_to_space(rgb, "hsl")
        assert abs(h - h_exp) < hsl_tolerance, rgb
        assert abs(s - s_exp) < hsl_tolerance, rgb
        assert abs(l - l_exp) < hsl_tolerance, rgb


def test_rgb_to_hsv_samples():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = rgb_to_space(rgb, "hsv")
        assert abs(h - h_exp) < hsl_tolerance
        assert abs(s - s_exp) < hsl_tolerance
        assert abs(v - v_exp) < hsl_tolerance


def test_unit_hsl_hsv_scalar_round_trip():
    for r, g, b in [(0.1, 0.5, 0.9), (0.9, 0.1, 0.4), (0.3, 0.3, 0.3)]:
        assert np.allclose(hsl_to_unit_rgb(*unit_rgb_to_hsl(r, g, b)), (r, g, b), atol=1e-9)
        assert np.allclose(hsv_to_unit_rgb(*unit_rgb_to_hsv(r, g, b)), (r, g, b), atol=1e-9)


def test_rgb_to_lab_samples():
    for rgb, expected in samples_rgb_lab.items():
        assert np.allclose(rgb_to_space(rgb, "lab"), expected, atol=lab_tolerance), rgb


def test_rgb_to_oklab_samples():
    for rgb, expected in samples_rgb_oklab.items():
        assert np.allclose(rgb_to_space(rgb, "oklab"), expected, atol=oklab_tolerance), rgb


def test_rgb_to_cmyk_samples():
    for rgb, expected in samples_rgb_cmyk.items():
        assert np.allclose(rgb_to_space(rgb, "cmyk"), expected, atol=0.05), rgb


def test_xyz_white_point_is_d65():
    x, y, z = rgb_to_space((255, 255, 255), "xyz")
    assert abs(x - 95.047) < 0.05
    assert abs(y - 100.0) < 0.05
    assert abs(z - 108.883) < 0.05


def test_lch_is_polar_lab():
    l, a, b = rgb_to_space((255, 0, 0), "lab")
    l2, c, h = rgb_to_space((255, 0, 0), "lch")
    assert abs(l - l2) < 1e-9
    assert abs(c - np.hypot(a, b)) < 1e-9
    assert abs(h - np.degrees(np.arctan2(b, a)) % 360) < 1e-9


def test_every_space_round_trips_within_one_unit():
    from chromatheme.colors import parse_color
    for text in round_trip_colors:
        rgb = parse_color(text).rgb_float
        for space in all_spaces:
            back = space_to_rgb(rgb_to_space(rgb, space), space)
            assert np.allclose(back, rgb, atol=1.0), (text, space)


def test_convert_between_spaces():
    h, s, v = convert((0.0, 100.0, 50.0), "hsl", "hsv")
    assert abs(h) < 1e-9 and abs(s - 100.0) < 1e-9 and abs(v - 100.0) < 1e-9
    assert convert((1, 2, 3), "rgb", "RGBA") == (1.0, 2.0, 3.0)


def test_convert_rejects_unknown_space_and_bad_width():
    with pytest.raises(ConversionError):
        convert((1, 2, 3), "rgb", "yuv")
    with pytest.raises(ConversionError):
        space_to_rgb((1, 2), "rgb")
    assert issubclass(ConversionError, ValueError)


def test_np_convert_matches_scalar_path():
    rgb = np.array([[24, 144, 255], [255, 87, 51], [0, 0, 0], [255, 255, 255]], dtype=float)
    for space in all_spaces:
        vectorized = np_convert(rgb, "rgb", space)
        assert vectorized.shape == (4, CHANNEL_COUNT[space])
        for row, expected in zip(vectorized, rgb):
            assert np.allclose(row, rgb_to_space(expected, space), atol=1e-6), space


def test_np_convert_image_shape_round_trip():
    rng = np.random.default_rng(0)
    image = rng.uniform(0, 255, size=(4, 5, 3))
    for space in ("hsl", "xyz", "lab", "lch", "oklab", "oklch"):
        back = np_convert(np_convert(image, "rgb", space), space, "rgb")
        assert np.allclose(back, image, atol=1e-6)


def test_np_convert_width_check():
    with pytest.raises(ConversionError):
        np_convert(np.zeros((2, 4)), "rgb", "hsl")


def test_in_srgb_gamut():
    assert in_srgb_gamut((0.5, 0.0, 0.0), "oklch")
    assert not in_srgb_gamut((0.7, 0.4, 150.0), "oklch")
    assert in_srgb_gamut((128, 128, 128), "rgb")


def test_inverse_matrices_are_exact():
    from chromatheme.conversions import cie, oklab

    identity = np.eye(3)
    assert np.allclose(cie.XYZ_TO_RGB @ cie.RGB_TO_XYZ, identity, atol=1e-12)
    assert np.allclose(oklab.OKLAB_TO_LMS @ oklab.LMS_TO_OKLAB, identity, atol=1e-12)
    assert np.allclose(oklab.LMS_TO_LINEAR_RGB @ oklab.LINEAR_RGB_TO_LMS, identity, atol=1e-12)
