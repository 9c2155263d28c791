"""
Colorlens - Color Conversion and Accessibility Analysis
=======================================================

Converts single colors between hex, RGB, HSL and CMYK, computes WCAG relative
luminance and contrast ratios, and solves for the HSL lightness that reaches
a target luminance.

Key Features
------------
- Hex / RGB / HSL / CMYK conversions through an RGB pivot
- WCAG 2.x relative luminance, contrast ratio and AA / AAA classification
- BT.601 grayscale
- Lightness search for a target luminance, and the "ideal contrast" color
  that contrasts equally with white and black
- Catalog of the 140 standard named colors with web-safe / basic / extended
  flags and CGA palette correspondence
- Immutable ``Color`` value objects

Quick Start
-----------
>>> from colorlens import Color, analyze, ideal_contrast_color
>>>
>>> accent = Color.from_hex("#FF217A")
>>> round(accent.contrast("#FFFFFF"), 2)
3.65
>>>
>>> report = analyze("CornflowerBlue")
>>> report.summary()["rgb"]
'rgb(100, 149, 237)'
>>>
>>> ideal_contrast_color(210).hex
'#0073E6'

Modules
-------
- conversions: hex / RGB / HSL / CMYK conversion functions
- accessibility: luminance, contrast, WCAG levels, grayscale, lightness solver
- catalog: standard named colors and filtering
- colors: the ``Color`` value object
- analysis: one-call derivation of every value for a color
- formatting: display strings
"""

import logging

from .exceptions import ColorLensError, InvalidFormat, UnsupportedColorSpace, UnknownColorName
from .types import RGB, HSL, CMYK, WCAGLevel, WCAG_THRESHOLDS, IDEAL_CONTRAST_LUMINANCE
from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    convert,
)
from .accessibility import (
    relative_luminance,
    contrast_ratio,
    wcag_compliance,
    contrast_report,
    to_grayscale,
    lightness_for_luminance,
    ideal_contrast_color,
    find_non_monotonic,
    WCAGResult,
    ContrastCheck,
    IdealContrast,
)
from .catalog import CATALOG, CatalogFilter, NamedColorCatalog, NamedColorEntry, LegacyPaletteMapping, filter_colors
from .colors import Color
from .analysis import ColorAnalysis, analyze
from .formatting import format_rgb, format_hsl, format_cmyk, format_ratio, format_luminance

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ColorLensError",
    "InvalidFormat",
    "UnsupportedColorSpace",
    "UnknownColorName",

    # Value types
    "RGB",
    "HSL",
    "CMYK",
    "Color",

    # Conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "convert",

    # Accessibility
    "relative_luminance",
    "contrast_ratio",
    "wcag_compliance",
    "contrast_report",
    "to_grayscale",
    "lightness_for_luminance",
    "ideal_contrast_color",
    "find_non_monotonic",
    "WCAGLevel",
    "WCAG_THRESHOLDS",
    "IDEAL_CONTRAST_LUMINANCE",
    "WCAGResult",
    "ContrastCheck",
    "IdealContrast",

    # Catalog
    "CATALOG",
    "CatalogFilter",
    "NamedColorCatalog",
    "NamedColorEntry",
    "LegacyPaletteMapping",
    "filter_colors",

    # Analysis and display
    "ColorAnalysis",
    "analyze",
    "format_rgb",
    "format_hsl",
    "format_cmyk",
    "format_ratio",
    "format_luminance",

    # Version
    "__version__",
]
