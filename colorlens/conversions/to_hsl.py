from enum import Enum

from ..types.color_types import HSL


class MaxChannel(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


def dominant_channel(r: float, g: float, b: float) -> MaxChannel:
    """Return which channel holds the maximum; ties go to red, then green."""
    max_c = max(r, g, b)
    if max_c == r:
        return MaxChannel.RED
    if max_c == g:
        return MaxChannel.GREEN
    return MaxChannel.BLUE


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert RGB channels in [0, 255] to HSL.

    Uses the min/max-channel algorithm. Achromatic input (all channels equal)
    yields hue 0 and saturation 0.

    Returns:
        HSL: hue in [0, 360), saturation and lightness in [0, 100]
    """
    r, g, b = r / 255, g / 255, b / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return HSL(0.0, 0.0, lightness * 100)

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    channel = dominant_channel(r, g, b)
    if channel is MaxChannel.RED:
        sextant = (g - b) / delta + (6 if g < b else 0)
    elif channel is MaxChannel.GREEN:
        sextant = (b - r) / delta + 2
    else:
        sextant = (r - g) / delta + 4

    # rounding in the red-max wrap can land exactly on 360
    return HSL((sextant / 6 * 360) % 360, saturation * 100, lightness * 100)
