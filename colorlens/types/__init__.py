"""Shared value types and policy tables."""

from .color_types import RGB, HSL, CMYK, ColorSpace, COLOR_SPACES, element_to_array
from .constants import (
    LUMINANCE_WEIGHTS,
    LUMA_WEIGHTS,
    SRGB_LINEAR_THRESHOLD,
    SOLVER_ITERATIONS,
    SOLVER_TOLERANCE,
    IDEAL_CONTRAST_LUMINANCE,
)
from .wcag_level import WCAGLevel, WCAG_THRESHOLDS

__all__ = [
    "RGB",
    "HSL",
    "CMYK",
    "ColorSpace",
    "COLOR_SPACES",
    "element_to_array",
    "LUMINANCE_WEIGHTS",
    "LUMA_WEIGHTS",
    "SRGB_LINEAR_THRESHOLD",
    "SOLVER_ITERATIONS",
    "SOLVER_TOLERANCE",
    "IDEAL_CONTRAST_LUMINANCE",
    "WCAGLevel",
    "WCAG_THRESHOLDS",
]
