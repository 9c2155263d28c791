import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


## HSL to RGB conversions

def hue_to_channel(p: float, q: float, phase: float) -> float:
    """
    Evaluate one RGB channel of the HSL model.

    ``phase`` is wrapped into [0, 1) and the channel follows a trapezoid over
    the period: ramp up from ``p`` to ``q`` in the first sixth, hold ``q``
    until one half, ramp back down to ``p`` until two thirds, then hold ``p``.
    """
    t = phase % 1.0
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, normalized modulo 360
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        RGB: real-valued channels in [0, 255]
    """
    h = normalize_hue(h) / 360
    s = s / 100
    l = l / 100

    if s == 0:
        # achromatic
        return RGB(l * 255, l * 255, l * 255)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    r = hue_to_channel(p, q, h + 1 / 3)
    g = hue_to_channel(p, q, h)
    b = hue_to_channel(p, q, h - 1 / 3)
    return RGB(r * 255, g * 255, b * 255)


def np_hue_to_channel(p: NDArray, q: NDArray, phase: NDArray) -> NDArray:
    """Vectorized ``hue_to_channel``."""
    t = np.mod(phase, 1.0)
    rising = p + (q - p) * 6 * t
    falling = p + (q - p) * (2 / 3 - t) * 6
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [rising, q, falling],
        default=p,
    )


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np.mod(np.asarray(h, dtype=float), 360) / 360
    s = np.asarray(s, dtype=float) / 100
    l = np.asarray(l, dtype=float) / 100

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = np_hue_to_channel(p, q, h + 1 / 3)
    g = np_hue_to_channel(p, q, h)
    b = np_hue_to_channel(p, q, h - 1 / 3)

    achromatic = s == 0
    r = np.where(achromatic, l, r)
    g = np.where(achromatic, l, g)
    b = np.where(achromatic, l, b)

    return np.stack([r, g, b], axis=-1) * 255


## CMYK to RGB conversions

def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK percentages to real-valued RGB channels."""
    c, m, y, k = c / 100, m / 100, y / 100, k / 100
    return RGB(
        255 * (1 - c) * (1 - k),
        255 * (1 - m) * (1 - k),
        255 * (1 - y) * (1 - k),
    )
