import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import element_to_array
from ..types.constants import (
    CONTRAST_FLARE,
    LUMINANCE_WEIGHTS,
    SRGB_GAMMA,
    SRGB_LINEAR_DIVISOR,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    SRGB_SCALE,
)


def srgb_to_linear(channel: float) -> float:
    """Linearize one sRGB channel given in [0, 255]."""
    c = channel / 255
    if c <= SRGB_LINEAR_THRESHOLD:
        return c / SRGB_LINEAR_DIVISOR
    return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def relative_luminance(r: float, g: float, b: float) -> float:
    """
    WCAG 2.x relative luminance of an RGB color.

    Returns a value in [0, 1] for channels in [0, 255]; 0 for black, 1 for white.
    """
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * srgb_to_linear(r) + wg * srgb_to_linear(g) + wb * srgb_to_linear(b)


def np_relative_luminance(rgb: NDArray) -> NDArray:
    """
    Vectorized: relative luminance of an array of RGB colors.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]

    Returns:
        array of shape (...)
    """
    c = element_to_array(rgb) / 255
    # clip the base so negative inputs do not produce NaN in the unused branch
    curved = (np.clip(c, SRGB_LINEAR_THRESHOLD, None) + SRGB_OFFSET) / SRGB_SCALE
    linear = np.where(c <= SRGB_LINEAR_THRESHOLD, c / SRGB_LINEAR_DIVISOR, curved ** SRGB_GAMMA)
    return linear @ np.asarray(LUMINANCE_WEIGHTS)


def contrast_ratio(l1: float, l2: float) -> float:
    """
    WCAG contrast ratio between two relative luminances.

    Symmetric in its arguments; 1 for identical luminances, 21 for black/white.
    """
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + CONTRAST_FLARE) / (darker + CONTRAST_FLARE)
