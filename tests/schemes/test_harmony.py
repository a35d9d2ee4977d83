import pytest

from chromatheme.colors import Color
from chromatheme.schemes import (
    ColorScheme, HARMONY_TYPES, HUE_PATTERNS, generate_scheme, generate_all_schemes, generate_adaptive,
    evaluate_harmony, scheme_colors,
)

base = "#1890FF"


def _hue_offset(color, origin):
    return (color.hue - origin.hue) % 360


@pytest.mark.parametrize("kind", sorted(HUE_PATTERNS))
def test_fixed_patterns_rotate_hue(kind):
    scheme = generate_scheme(base, kind)
    origin = Color(base)
    assert scheme.colors[0] == origin
    assert scheme.base == origin
    assert len(scheme) == len(HUE_PATTERNS[kind])
    for color, offset in zip(scheme.colors, HUE_PATTERNS[kind]):
        delta = abs(_hue_offset(color, origin) - offset)
        assert min(delta, 360 - delta) < 1.5, (kind, offset)


def test_complementary_of_red():
    scheme = generate_scheme("#FF0000", "complementary")
    assert scheme.hex_colors == ["#FF0000", "#00FFFF"]


def test_analogous_count_and_steps():
    scheme = generate_scheme(base, "analogous", count=5)
    origin = Color(base)
    offsets = sorted(((c.hue - origin.hue + 180) % 360) - 180 for c in scheme.colors)
    assert offsets == pytest.approx([-60, -30, 0, 30, 60], abs=1.5)


def test_monochromatic_keeps_hue():
    scheme = generate_scheme("#BF4040", "monochromatic", count=4)
    assert len(scheme) == 4
    for color in scheme.colors[1:]:
        assert abs(color.hue - 0) < 1.5 or abs(color.hue - 360) < 1.5
    assert len({c.to_hex() for c in scheme.colors}) == 4


def test_variation_shifts_lightness():
    plain = scheme_colors(base, "triadic")
    varied = scheme_colors(base, "triadic", variation=40)
    assert varied[0] == plain[0]
    assert varied[1].lightness > plain[1].lightness
    assert varied[2].lightness < plain[2].lightness


def test_scores_are_bounded():
    for kind, scheme in generate_all_schemes(base).items():
        assert isinstance(scheme, ColorScheme)
        assert scheme.type == kind
        assert 0.0 <= scheme.score <= 1.0
        assert set(scheme.metrics) == {"color_balance", "contrast_range", "saturation", "lightness", "hue_relation"}
        assert all(0.0 <= value <= 1.0 for value in scheme.metrics.values())
        assert scheme.description


def test_all_schemes_in_declaration_order():
    assert list(generate_all_schemes(base)) == list(HARMONY_TYPES)


def test_adaptive_picks_best_score():
    best = generate_adaptive(base)
    assert best.score == max(s.score for s in generate_all_schemes(base).values())


def test_evaluate_harmony_edge_cases():
    score, metrics = evaluate_harmony([base])
    assert score == 1.0
    assert all(value == 1.0 for value in metrics.values())
    score, _ = evaluate_harmony(["#FF0000", "#00FF00", "#0000FF"])
    assert 0.0 <= score <= 1.0


def test_suggestions_follow_low_metrics():
    for scheme in generate_all_schemes("#808080").values():
        low = [name for name, value in scheme.metrics.items() if value < 0.6]
        assert len(scheme.suggestions) == len(low)


def test_scheme_is_frozen():
    scheme = generate_scheme(base, "triadic")
    with pytest.raises(AttributeError):
        scheme.score = 0.0


def test_invalid_arguments_raise():
    with pytest.raises(ValueError):
        generate_scheme(base, "pentadic")
    with pytest.raises(ValueError):
        generate_scheme(base, "analogous", count=1)
    with pytest.raises(ValueError):
        generate_scheme(base, "triadic", variation=150)
