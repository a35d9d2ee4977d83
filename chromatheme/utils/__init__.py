from .interpolate_hue import hue_delta, unwrap_hues, interpolate_hue, blend_hue
from .cache import memoize

__all__ = ["hue_delta", "unwrap_hues", "interpolate_hue", "blend_hue", "memoize"]
