import ast
import logging
from pathlib import Path

import pytest

import chromatheme
from chromatheme import (
    Color, RGB, LAB, ParseError, ConversionError, RangeError,
    parse_color, convert, generate_scale, generate_natural_theme, generate_gradient,
    generate_scheme, contrast, is_compliant, auto_adjust, simulate_color_blindness,
)
from tests.samples import ten_shades


def test_public_names_resolve():
    for name in chromatheme.__all__:
        assert hasattr(chromatheme, name), name


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("chromatheme").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_parse_reference_color():
    assert parse_color("#1890ff").to_rgb() == RGB(24, 144, 255, 1.0)
    with pytest.raises(ParseError):
        parse_color("#1890f")


def test_convert_returns_record():
    lab = convert("#FFFFFF", "lab")
    assert isinstance(lab, LAB)
    assert lab.l == pytest.approx(100.0, abs=0.01)
    with pytest.raises(ConversionError):
        convert("#FFFFFF", "ycbcr")


def test_scale_of_ten_shades_orders_lightness():
    scale = generate_scale("#1890ff", ten_shades)
    assert len(scale) == 10
    lightness = [Color(v).lightness for v in scale.values()]
    # the config runs light to dark, so lightness strictly increases from the dark end
    reversed_lightness = lightness[::-1]
    assert all(a < b for a, b in zip(reversed_lightness, reversed_lightness[1:]))

    dark_to_light = generate_scale("#1890ff", ten_shades[::-1])
    forward = [Color(v).lightness for v in dark_to_light.values()]
    assert all(a < b for a, b in zip(forward, forward[1:]))


def test_natural_theme_roles():
    theme = generate_natural_theme("#1890ff")
    assert list(theme) == ["primary", "success", "warning", "danger", "info", "gray"]


def test_generate_gradient_kinds():
    assert generate_gradient("linear", ["red", "blue"]).startswith("linear-gradient(")
    assert generate_gradient("radial", ["red", "blue"]).startswith("radial-gradient(")
    assert generate_gradient("conic", ["red", "blue"]).startswith("conic-gradient(")
    with pytest.raises(RangeError):
        generate_gradient("linear", ["red", chromatheme.GradientStop(Color("blue"), 1.5)])


def test_scheme_and_accessibility_surface():
    scheme = generate_scheme("#1890ff", "triadic")
    assert scheme.base == scheme.colors[0]
    assert 0.0 <= scheme.score <= 1.0

    black, white = Color.from_rgb(0, 0, 0), Color.from_rgb(255, 255, 255)
    assert contrast(black, white) == pytest.approx(21.0)
    assert is_compliant(black, white, "AAA", "normal")
    adjusted = auto_adjust(Color.from_rgb(200, 200, 200), white, "AA", "normal")
    assert contrast(adjusted, white) >= 4.5
    assert simulate_color_blindness(white, "achromatopsia").to_hex() == "#FFFFFF"


@pytest.mark.parametrize("package", ["palettes", "gradients", "schemes", "accessibility"])
def test_downstream_packages_do_not_import_each_other(package):
    siblings = {"palettes", "gradients", "schemes", "accessibility"} - {package}
    root = Path(chromatheme.__file__).parent / package
    for path in root.glob("*.py"):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom) and node.level == 2 and node.module:
                assert node.module.split(".")[0] not in siblings, (path.name, node.module)
