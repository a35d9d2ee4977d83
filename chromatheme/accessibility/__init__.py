from .contrast import (
    relative_luminance, contrast, required_ratio, is_compliant,
    AdjustmentResult, adjust_for_contrast, auto_adjust,
    accessibility_report, PairSuggestion, suggest_accessible_pairs,
)
from .vision import CVD_MATRICES, simulate_color_blindness, np_simulate_color_blindness

__all__ = [
    "relative_luminance", "contrast", "required_ratio", "is_compliant",
    "AdjustmentResult", "adjust_for_contrast", "auto_adjust",
    "accessibility_report", "PairSuggestion", "suggest_accessible_pairs",
    "CVD_MATRICES", "simulate_color_blindness", "np_simulate_color_blindness",
]
