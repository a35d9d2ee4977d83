import pytest

from chromatheme.colors import Color
from chromatheme.accessibility import (
    relative_luminance, contrast, required_ratio, is_compliant,
    adjust_for_contrast, auto_adjust, accessibility_report, suggest_accessible_pairs,
)
from tests.samples import round_trip_colors


def test_luminance_extremes():
    assert relative_luminance("#000000") == 0.0
    assert relative_luminance("#FFFFFF") == pytest.approx(1.0)
    assert relative_luminance("#808080") == pytest.approx(0.2159, abs=1e-3)


def test_black_on_white_is_21():
    assert contrast(Color.from_rgb(0, 0, 0), Color.from_rgb(255, 255, 255)) == pytest.approx(21.0)
    assert contrast("#1890ff", "#1890ff") == pytest.approx(1.0)


def test_contrast_is_symmetric():
    for a in round_trip_colors:
        for b in round_trip_colors:
            assert contrast(a, b) == contrast(b, a)


def test_thresholds():
    assert required_ratio("AA", "normal") == 4.5
    assert required_ratio("AA", "large") == 3.0
    assert required_ratio("AAA", "normal") == 7.0
    assert required_ratio("AAA", "large") == 4.5
    with pytest.raises(ValueError):
        required_ratio("A", "normal")
    with pytest.raises(ValueError):
        is_compliant("#000", "#fff", "AA", "huge")


def test_is_compliant():
    # #767676 is the lightest gray that passes AA on white
    assert is_compliant("#767676", "#FFFFFF")
    assert not is_compliant("#777777", "#FFFFFF")
    assert is_compliant("#777777", "#FFFFFF", "AA", "large")
    assert not is_compliant("#767676", "#FFFFFF", "AAA")


def test_auto_adjust_light_gray_on_white():
    fg, bg = Color.from_rgb(200, 200, 200), Color.from_rgb(255, 255, 255)
    result = adjust_for_contrast(fg, bg, "AA", "normal")
    assert result.contrast >= 4.5
    assert contrast(result.color, bg) >= 4.5
    assert result.steps <= 40 or result.fallback
    assert result.direction == "darken"
    assert not result.fallback
    assert auto_adjust(fg, bg, "AA", "normal") == result.color


def test_auto_adjust_leaves_compliant_colors_alone():
    fg = Color("#222222")
    result = adjust_for_contrast(fg, "#FFFFFF")
    assert result.color == fg
    assert result.steps == 0
    assert auto_adjust(fg, "#FFFFFF", "AAA") == fg


def test_auto_adjust_lightens_on_dark_background():
    fg = Color("#333333")
    adjusted = auto_adjust(fg, "#000000")
    assert adjusted.lightness > fg.lightness
    assert contrast(adjusted, "#000000") >= 4.5


def test_auto_adjust_falls_back_to_black_or_white():
    # Neither pole reaches 7:1 against a mid gray, so both searches run out
    result = adjust_for_contrast("#777777", "#777777", "AAA", "normal")
    assert result.fallback
    assert result.steps == 40
    assert result.color == Color("#000000")
    assert result.contrast == pytest.approx(contrast("#000000", "#777777"))


def test_accessibility_report():
    report = accessibility_report("#000000", "#FFFFFF")
    assert report["contrast"] == pytest.approx(21.0)
    assert report["AA"] == {"normal": True, "large": True}
    assert report["AAA"] == {"normal": True, "large": True}
    assert report["rating"] == "AAA"
    assert accessibility_report("#777777", "#FFFFFF")["rating"] == "AA Large"
    assert accessibility_report("#EEEEEE", "#FFFFFF")["rating"] == "Fail"


def test_suggest_accessible_pairs_sorted_by_contrast():
    suggestions = suggest_accessible_pairs("#1890FF", count=4)
    assert len(suggestions) == 4
    ratios = [s.contrast for s in suggestions]
    assert ratios == sorted(ratios, reverse=True)
    assert len({s.color for s in suggestions}) == 4
    for s in suggestions:
        assert s.aa == (s.contrast >= 4.5)
        assert s.aaa == (s.contrast >= 7.0)
