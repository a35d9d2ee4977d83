"""
Mesh gradients: a rectangular grid of control colors rendered by bilinear
interpolation inside each cell.
"""
from __future__ import annotations
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from ..colors import Color, ColorInput, parse_color
from ..conversions import np_convert
from ..types.color_types import canonical_space

MESH_SPACES = ("rgb", "lab", "oklab")


def smoothstep(t: np.ndarray, amount: float = 1.0) -> np.ndarray:
    """Blend ``t`` toward ``3t² - 2t³`` by ``amount`` (0 = linear)."""
    eased = t * t * (3.0 - 2.0 * t)
    return (1.0 - amount) * t + amount * eased


class MeshGradient:
    """
    Grid of control colors, row-major, top row first.

    Attributes:
        grid: Tuple of rows of ``Color``
        resolution: Default (width, height) for ``rasterize``
        smoothness: 0..1 easing of the cell-local coordinates
        space: Interpolation space (rgb, lab or oklab)
    """
    __slots__ = ('grid', 'resolution', 'smoothness', 'space', '_values', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        grid: Sequence[Sequence[ColorInput]],
        resolution: Union[int, Tuple[int, int]] = 256,
        smoothness: float = 0.5,
        space: str = "rgb",
    ) -> None:
        rows = tuple(tuple(parse_color(c) for c in row) for row in grid)
        if len(rows) < 2 or any(len(row) < 2 for row in rows):
            raise ValueError("Mesh gradient needs at least a 2x2 grid of colors")
        if len({len(row) for row in rows}) != 1:
            raise ValueError(f"Mesh rows must have equal length, got {[len(row) for row in rows]}")
        space = canonical_space(space)
        if space not in MESH_SPACES:
            raise ValueError(f"Unsupported mesh space: {space!r}. Expected one of {MESH_SPACES}")
        if not 0.0 <= smoothness <= 1.0:
            raise ValueError(f"smoothness must be in [0, 1], got {smoothness}")
        if isinstance(resolution, int):
            resolution = (resolution, resolution)

        rgb = np.array([[c.rgb_float for c in row] for row in rows], dtype=float)
        alpha = np.array([[[c.alpha] for c in row] for row in rows], dtype=float)
        self.grid = rows
        self.resolution = (int(resolution[0]), int(resolution[1]))
        self.smoothness = float(smoothness)
        self.space = space
        self._values = np.concatenate([np_convert(rgb, "rgb", space), alpha], axis=-1)
        super().__setattr__('_is_frozen', True)

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, columns) of the control grid."""
        return len(self.grid), len(self.grid[0])

    @property
    def css(self) -> str:
        """CSS fallback: one diagonal ``linear-gradient`` per cell, top-left to bottom-right."""
        layers = []
        for top, bottom in zip(self.grid, self.grid[1:]):
            for tl, br in zip(top, bottom[1:]):
                layers.append(f"linear-gradient(135deg, {tl.to_rgb_string()} 0%, {br.to_rgb_string()} 100%)")
        return ", ".join(layers)

    def rasterize(self, width: Optional[int] = None, height: Optional[int] = None) -> np.ndarray:
        """
        Render the mesh.

        Args:
            width: Output columns, defaults to ``resolution[0]``
            height: Output rows, defaults to ``resolution[1]``

        Returns:
            (height, width, 4) uint8 RGBA array. Corner pixels equal the
            corner controls.
        """
        width = self.resolution[0] if width is None else int(width)
        height = self.resolution[1] if height is None else int(height)
        if width < 1 or height < 1:
            raise ValueError(f"Raster size must be positive, got {width}x{height}")
        rows, cols = self.shape

        gx = np.linspace(0.0, cols - 1, width) if width > 1 else np.zeros(1)
        gy = np.linspace(0.0, rows - 1, height) if height > 1 else np.zeros(1)
        ix = np.minimum(np.floor(gx).astype(int), cols - 2)
        iy = np.minimum(np.floor(gy).astype(int), rows - 2)
        fx = smoothstep(gx - ix, self.smoothness)
        fy = smoothstep(gy - iy, self.smoothness)

        xx, yy = np.meshgrid(fx, fy)
        cx, cy = np.meshgrid(ix, iy)
        v = self._values
        tl, tr = v[cy, cx], v[cy, cx + 1]
        bl, br = v[cy + 1, cx], v[cy + 1, cx + 1]
        xx, yy = xx[:, :, None], yy[:, :, None]
        values = (
            (1 - xx) * (1 - yy) * tl
            + xx * (1 - yy) * tr
            + (1 - xx) * yy * bl
            + xx * yy * br
        )

        rgb = np_convert(values[..., :3], self.space, "rgb")
        rgba = np.concatenate([rgb, values[..., 3:] * 255.0], axis=-1)
        return np.clip(np.floor(rgba + 0.5), 0, 255).astype(np.uint8)

    def color_at(self, x: float, y: float) -> Color:
        """Interpolated color at unit coordinates (x, y), (0, 0) being the top-left control."""
        rows, cols = self.shape
        gx = min(max(float(x), 0.0), 1.0) * (cols - 1)
        gy = min(max(float(y), 0.0), 1.0) * (rows - 1)
        ix, iy = min(int(gx), cols - 2), min(int(gy), rows - 2)
        fx = float(smoothstep(np.float64(gx - ix), self.smoothness))
        fy = float(smoothstep(np.float64(gy - iy), self.smoothness))
        v = self._values
        value = (
            (1 - fx) * (1 - fy) * v[iy, ix] + fx * (1 - fy) * v[iy, ix + 1]
            + (1 - fx) * fy * v[iy + 1, ix] + fx * fy * v[iy + 1, ix + 1]
        )
        r, g, b = np_convert(value[:3], self.space, "rgb")
        return Color.from_rgb(r, g, b, value[3])

    def to_image(self, width: Optional[int] = None, height: Optional[int] = None):
        """Rasterize into a Pillow RGBA image."""
        from PIL import Image
        return Image.fromarray(self.rasterize(width, height))

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"MeshGradient({rows}x{cols}, space={self.space!r}, smoothness={self.smoothness})"


def mesh_gradient(
    grid: Sequence[Sequence[ColorInput]],
    *,
    resolution: Union[int, Tuple[int, int]] = 256,
    smoothness: float = 0.5,
    space: str = "rgb",
) -> MeshGradient:
    """Build a ``MeshGradient``; see the class for the grid rules."""
    return MeshGradient(grid, resolution=resolution, smoothness=smoothness, space=space)
