from __future__ import annotations
from typing import Literal, NamedTuple, Sequence, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ColorSpace = Literal["hex", "rgb", "hsl", "cmyk"]
COLOR_SPACES = ("hex", "rgb", "hsl", "cmyk")


class RGB(NamedTuple):
    """Red, green and blue channels, nominally in [0, 255] (real-valued)."""
    r: float
    g: float
    b: float


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in [0, 100]."""
    h: float
    s: float
    l: float


class CMYK(NamedTuple):
    """Cyan, magenta, yellow and key channels in [0, 100]."""
    c: float
    m: float
    y: float
    k: float


ColorElement = Union[RGB, HSL, CMYK, Sequence[Scalar]]


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)
