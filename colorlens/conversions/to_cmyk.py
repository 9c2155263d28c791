from ..types.color_types import CMYK


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """
    Convert RGB channels in [0, 255] to CMYK percentages.

    Pure black short-circuits to ``CMYK(0, 0, 0, 100)``.
    """
    r, g, b = r / 255, g / 255, b / 255
    k = 1 - max(r, g, b)
    if k == 1:
        return CMYK(0.0, 0.0, 0.0, 100.0)

    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return CMYK(c * 100, m * 100, y * 100, k * 100)
