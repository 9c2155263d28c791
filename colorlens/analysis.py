from __future__ import annotations

from typing import List, NamedTuple, Sequence, Union

from .accessibility.wcag import ContrastCheck, contrast_report
from .colors.color import Color
from .formatting import format_cmyk, format_hsl, format_luminance, format_rgb
from .types.color_types import RGB, HSL, CMYK


class ColorAnalysis(NamedTuple):
    """Every derived value for one color."""

    hex: str
    rgb: RGB
    hsl: HSL
    cmyk: CMYK
    luminance: float
    contrast: List[ContrastCheck]
    grayscale: Color

    def summary(self) -> dict:
        """Display strings keyed by field, rounded the way a color panel shows them."""
        return {
            "hex": self.hex,
            "rgb": format_rgb(self.rgb),
            "hsl": format_hsl(self.hsl),
            "cmyk": format_cmyk(self.cmyk),
            "luminance": format_luminance(self.luminance),
            "grayscale": self.grayscale.hex,
        }


def analyze(color: Union[Color, str, Sequence[float]]) -> ColorAnalysis:
    """
    Derive every representation and accessibility metric of a color.

    Args:
        color: a ``Color``, a hex string, a catalog name or an RGB triple

    Raises:
        InvalidFormat: if a string is neither valid hex nor a known name.
    """
    c = Color.parse(color)
    return ColorAnalysis(
        hex=c.hex,
        rgb=c.rgb,
        hsl=c.hsl,
        cmyk=c.cmyk,
        luminance=c.luminance,
        contrast=contrast_report(*c.rgb),
        grayscale=c.grayscale(),
    )
