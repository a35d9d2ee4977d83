from .stops import GradientStop, normalize_stops, stop_colors
from .bezier import BEZIER_SPACES, de_casteljau, bezier_colors, smooth_segments
from .css import (
    linear_gradient, radial_gradient, conic_gradient, generate_gradient, GRADIENT_BUILDERS,
)
from .mesh import MeshGradient, mesh_gradient, smoothstep
from .advanced import (
    EASINGS, resolve_easing, midpoint_transform, interpolate_gradient, sample_gradient, reverse_gradient,
    smooth_gradient, analyze_gradient, gradient_css_variables,
)

__all__ = [
    "GradientStop", "normalize_stops", "stop_colors",
    "BEZIER_SPACES", "de_casteljau", "bezier_colors", "smooth_segments",
    "linear_gradient", "radial_gradient", "conic_gradient", "generate_gradient", "GRADIENT_BUILDERS",
    "MeshGradient", "mesh_gradient", "smoothstep",
    "EASINGS", "resolve_easing", "midpoint_transform", "interpolate_gradient", "sample_gradient", "reverse_gradient",
    "smooth_gradient", "analyze_gradient", "gradient_css_variables",
]
