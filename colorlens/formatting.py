"""Display strings for colors and metrics. Rounding here is presentation only."""

from typing import Sequence

from .conversions.hex import round_half_up


def format_rgb(rgb: Sequence[float]) -> str:
    r, g, b = (round_half_up(c) for c in rgb)
    return f"rgb({r}, {g}, {b})"


def format_hsl(hsl: Sequence[float], precision: int = 1) -> str:
    h, s, l = hsl
    return f"hsl({h:.{precision}f}, {s:.{precision}f}%, {l:.{precision}f}%)"


def format_cmyk(cmyk: Sequence[float], precision: int = 1) -> str:
    c, m, y, k = cmyk
    return f"cmyk({c:.{precision}f}%, {m:.{precision}f}%, {y:.{precision}f}%, {k:.{precision}f}%)"


def format_ratio(ratio: float, precision: int = 2) -> str:
    return f"{ratio:.{precision}f}:1"


def format_luminance(luminance: float, precision: int = 10) -> str:
    return f"{luminance:.{precision}f}"
