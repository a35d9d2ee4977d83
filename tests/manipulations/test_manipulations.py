import numpy as np
import pytest

from chromatheme.colors import Color
from chromatheme.manipulations import (
    blend, np_blend, BLEND_MODES, BLEND_FUNCTIONS,
    mix, tint, shade, tone, adjust_brightness, adjust_contrast, gamma_correction,
    grayscale, sepia, negative, posterize,
    lighten, darken, saturate, desaturate, rotate_hue, set_lightness, fade,
)
from tests.samples import round_trip_colors


def test_every_declared_mode_has_a_function():
    assert len(BLEND_MODES) == 24
    assert set(BLEND_MODES) == set(BLEND_FUNCTIONS)


def test_blend_identities():
    white, black = Color("#FFFFFF"), Color("#000000")
    for text in round_trip_colors:
        c = Color(text)
        assert blend(white, c, "multiply") == c
        assert blend(c, white, "multiply") == c
        assert blend(black, c, "screen") == c
        assert blend(c, black, "screen") == c
        assert blend(c, c, "normal") == c


def test_blend_results_stay_in_range():
    rng = np.random.default_rng(1)
    base = rng.uniform(0, 1, size=(50, 3))
    overlay = rng.uniform(0, 1, size=(50, 3))
    edge = np.array([[0.0, 1.0, 0.5]])
    for mode in BLEND_MODES:
        for a, b in ((base, overlay), (edge, edge[:, ::-1])):
            out = np_blend(a, b, mode)
            assert np.all(np.isfinite(out)), mode
            assert out.min() >= 0.0 and out.max() <= 1.0, mode


def test_blend_known_values():
    assert blend("#808080", "#808080", "difference") == Color("#000000")
    assert blend("#FF0000", "#0000FF", "lighten") == Color("#FF00FF")
    assert blend("#FF0000", "#0000FF", "average") == Color.from_rgb(127.5, 0, 127.5)


def test_blend_keeps_base_alpha():
    assert blend(Color("#FF0000", alpha=0.4), "#00FF00", "screen").alpha == pytest.approx(0.4)


def test_unknown_blend_mode_raises():
    with pytest.raises(ValueError):
        blend("#FFFFFF", "#000000", "sparkle")


def test_mix_endpoints_and_midpoint():
    assert mix("#FF0000", "#0000FF", 0.0) == Color("#FF0000")
    assert mix("#FF0000", "#0000FF", 1.0) == Color("#0000FF")
    assert mix("#000000", "#FFFFFF", 0.5) == Color("#808080")
    assert mix("#000000", "#FFFFFF", 5.0) == Color("#FFFFFF")


def test_mix_interpolates_alpha():
    out = mix(Color("#000000", alpha=0.0), Color("#000000", alpha=1.0), 0.25)
    assert out.alpha == pytest.approx(0.25)


def test_tint_shade_tone():
    assert tint("#000000", 1.0) == Color("#FFFFFF")
    assert shade("#FFFFFF", 1.0) == Color("#000000")
    assert tone("#FFFFFF", 1.0) == Color("#808080")


def test_brightness_and_contrast():
    assert adjust_brightness("#808080", 100) == Color("#FFFFFF")
    assert adjust_brightness("#808080", -100) == Color("#000000")
    assert adjust_contrast("#808080", 50) == Color("#808080")
    assert adjust_contrast("#C0C0C0", -100) == Color("#808080")


def test_gamma_correction():
    assert gamma_correction("#808080", 1.0) == Color("#808080")
    assert gamma_correction("#808080", 2.2).lightness > Color("#808080").lightness
    assert gamma_correction("#808080", 0.5).lightness < Color("#808080").lightness
    with pytest.raises(ValueError):
        gamma_correction("#808080", 0)


def test_filters():
    gray = grayscale("#1890FF")
    assert gray.red == gray.green == gray.blue
    assert negative("#000000") == Color("#FFFFFF")
    assert negative(negative("#1890FF")) == Color("#1890FF")
    assert sepia("#1890FF", 0.0) == Color("#1890FF")
    toned = sepia("#FFFFFF")
    assert toned.red >= toned.green >= toned.blue
    assert posterize("#1890FF", 2) == Color("#00FFFF")
    with pytest.raises(ValueError):
        posterize("#1890FF", 1)


def test_hsl_adjustments_clamp_and_wrap():
    assert lighten("#1890FF", 100) == Color("#FFFFFF")
    assert darken("#1890FF", 100) == Color("#000000")
    assert desaturate("#FF0000", 100).saturation < 1
    assert saturate("#BF4040", 100).saturation > 99
    assert abs(rotate_hue("#FF0000", 480).hue - 120) < 0.5
    assert abs(rotate_hue("#FF0000", -90).hue - 270) < 0.5
    assert abs(set_lightness("#FF0000", 25).lightness - 25) < 0.5
    assert fade("#FF0000", 25).alpha == pytest.approx(0.75)


def test_manipulations_keep_alpha():
    translucent = Color("#1890FF", alpha=0.3)
    for fn in (grayscale, negative, lambda c: lighten(c, 10), lambda c: rotate_hue(c, 30)):
        assert fn(translucent).alpha == pytest.approx(0.3)


def test_rotate_hue_full_turn_is_identity():
    for degrees in (360, -360, 720):
        assert rotate_hue("#1890FF", degrees) == Color("#1890FF")
