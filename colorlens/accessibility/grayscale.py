from ..types.color_types import RGB
from ..types.constants import LUMA_WEIGHTS


def to_grayscale(r: float, g: float, b: float) -> RGB:
    """
    Grayscale equivalent of an RGB color using BT.601 luma weights.

    All three returned channels are equal to the luma. These are broadcast
    weights, not the WCAG luminance weights.
    """
    wr, wg, wb = LUMA_WEIGHTS
    luma = wr * r + wg * g + wb * b
    return RGB(luma, luma, luma)
