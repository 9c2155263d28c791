"""
Accessibility metrics: WCAG relative luminance and contrast, BT.601 grayscale
and the inverse lightness search.
"""

from .luminance import relative_luminance, np_relative_luminance, srgb_to_linear, contrast_ratio
from .grayscale import to_grayscale
from .wcag import WCAGResult, ContrastCheck, wcag_compliance, meets, contrast_report
from .solver import (
    IdealContrast,
    lightness_for_luminance,
    luminance_at,
    ideal_contrast_color,
    find_non_monotonic,
)

__all__ = [
    "relative_luminance",
    "np_relative_luminance",
    "srgb_to_linear",
    "contrast_ratio",
    "to_grayscale",
    "WCAGResult",
    "ContrastCheck",
    "wcag_compliance",
    "meets",
    "contrast_report",
    "IdealContrast",
    "lightness_for_luminance",
    "luminance_at",
    "ideal_contrast_color",
    "find_non_monotonic",
]
