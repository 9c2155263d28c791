from __future__ import annotations

from typing import List, NamedTuple

from ..conversions.hex import rgb_to_hex
from ..types.constants import BLACK_LUMINANCE, WHITE_LUMINANCE
from ..types.wcag_level import WCAGLevel, WCAG_THRESHOLDS
from .luminance import contrast_ratio, relative_luminance

WHITE_HEX = "#FFFFFF"
BLACK_HEX = "#000000"


class WCAGResult(NamedTuple):
    aa_large: bool
    aa_normal: bool
    aaa: bool

    def passes(self, level: WCAGLevel) -> bool:
        return {
            WCAGLevel.AA_LARGE: self.aa_large,
            WCAGLevel.AA: self.aa_normal,
            WCAGLevel.AAA: self.aaa,
        }[WCAGLevel(level)]


class ContrastCheck(NamedTuple):
    label: str
    foreground: str
    background: str
    ratio: float
    result: WCAGResult


def meets(ratio: float, level: WCAGLevel) -> bool:
    """True if ``ratio`` reaches the minimum for ``level`` (inclusive)."""
    return ratio >= WCAG_THRESHOLDS[WCAGLevel(level)]


def wcag_compliance(ratio: float) -> WCAGResult:
    """Classify a contrast ratio against the AA-large, AA and AAA thresholds."""
    return WCAGResult(
        aa_large=meets(ratio, WCAGLevel.AA_LARGE),
        aa_normal=meets(ratio, WCAGLevel.AA),
        aaa=meets(ratio, WCAGLevel.AAA),
    )


def _check(label: str, foreground: str, background: str, ratio: float) -> ContrastCheck:
    return ContrastCheck(label, foreground, background, ratio, wcag_compliance(ratio))


def contrast_report(r: float, g: float, b: float) -> List[ContrastCheck]:
    """
    Contrast of a color against pure white and pure black, in both roles.

    Returns four checks in a fixed order: color on white, color on black,
    white on color, black on color.
    """
    hex_color = rgb_to_hex(r, g, b)
    luminance = relative_luminance(r, g, b)
    on_white = contrast_ratio(luminance, WHITE_LUMINANCE)
    on_black = contrast_ratio(luminance, BLACK_LUMINANCE)

    return [
        _check("Color on White", hex_color, WHITE_HEX, on_white),
        _check("Color on Black", hex_color, BLACK_HEX, on_black),
        _check("White on Color", WHITE_HEX, hex_color, contrast_ratio(WHITE_LUMINANCE, luminance)),
        _check("Black on Color", BLACK_HEX, hex_color, contrast_ratio(BLACK_LUMINANCE, luminance)),
    ]
