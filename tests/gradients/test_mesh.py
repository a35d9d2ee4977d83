import numpy as np
import pytest

from chromatheme.colors import Color
from chromatheme.gradients import MeshGradient, mesh_gradient, smoothstep

grid = [["#FF0000", "#00FF00"], ["#0000FF", "#FFFFFF"]]


def test_corners_match_controls():
    pixels = mesh_gradient(grid).rasterize(5, 4)
    assert pixels.shape == (4, 5, 4)
    assert pixels.dtype == np.uint8
    assert tuple(pixels[0, 0]) == (255, 0, 0, 255)
    assert tuple(pixels[0, -1]) == (0, 255, 0, 255)
    assert tuple(pixels[-1, 0]) == (0, 0, 255, 255)
    assert tuple(pixels[-1, -1]) == (255, 255, 255, 255)


def test_corners_match_in_perceptual_space():
    pixels = mesh_gradient(grid, space="oklab").rasterize(3, 3)
    assert np.all(np.abs(pixels[0, 0].astype(int) - [255, 0, 0, 255]) <= 1)
    assert np.all(np.abs(pixels[-1, -1].astype(int) - [255, 255, 255, 255]) <= 1)


def test_default_resolution_and_shape():
    mesh = mesh_gradient([["red", "lime", "blue"], ["black", "white", "gray"]], resolution=(8, 6))
    assert mesh.shape == (2, 3)
    assert mesh.rasterize().shape == (6, 8, 4)


def test_center_is_bilinear_average():
    mesh = mesh_gradient([["#000000", "#000000"], ["#FFFFFF", "#FFFFFF"]], smoothness=0.0)
    middle = mesh.color_at(0.5, 0.5)
    assert abs(middle.red - 128) <= 1
    assert mesh.color_at(0, 0) == Color("#000000")
    assert mesh.color_at(1, 1) == Color("#FFFFFF")


def test_css_fallback_has_one_layer_per_cell():
    mesh = mesh_gradient([["red", "lime", "blue"], ["black", "white", "gray"]])
    assert mesh.css.count("linear-gradient(135deg") == 2
    assert mesh.css.startswith("linear-gradient(135deg, rgb(255, 0, 0) 0%, rgb(255, 255, 255) 100%)")


def test_invalid_meshes_raise():
    with pytest.raises(ValueError):
        mesh_gradient([["red", "blue"]])
    with pytest.raises(ValueError):
        mesh_gradient([["red", "blue"], ["green"]])
    with pytest.raises(ValueError):
        mesh_gradient(grid, space="hsl")
    with pytest.raises(ValueError):
        mesh_gradient(grid, smoothness=1.5)
    with pytest.raises(ValueError):
        mesh_gradient(grid).rasterize(0, 4)


def test_mesh_is_immutable():
    mesh = MeshGradient(grid)
    with pytest.raises(AttributeError):
        mesh.space = "lab"
    assert repr(mesh) == "MeshGradient(2x2, space='rgb', smoothness=0.5)"


def test_to_image():
    image = mesh_gradient(grid).to_image(4, 3)
    assert image.size == (4, 3)
    assert image.mode == "RGBA"


def test_smoothstep_endpoints():
    t = np.array([0.0, 0.5, 1.0])
    assert np.allclose(smoothstep(t, 1.0), [0.0, 0.5, 1.0])
    assert np.allclose(smoothstep(np.array([0.25]), 0.0), [0.25])
