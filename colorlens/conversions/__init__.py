"""
Colorlens Color Space Conversions
=================================

Scalar conversions between the hex, RGB, HSL and CMYK encodings of a single
color, plus the vectorized HSL to RGB path used by the solver diagnostics.

RGB is the pivot: each space converts to and from RGB, and ``convert`` chains
those two steps rather than carrying a formula for every pair of spaces.

Conversion Functions
-------------------

Hex:
    hex_to_rgb(hex_str)
        Parse ``#RGB`` / ``#RRGGBB`` (``#`` optional, any case)
    rgb_to_hex(r, g, b)
        Uppercase ``#RRGGBB``, channels rounded half-up
    normalize_hex(hex_str)
        Canonical ``#RRGGBB`` form of any accepted input

RGB <-> HSL:
    rgb_to_hsl(r, g, b)
    hsl_to_rgb(h, s, l)
    hue_to_channel(p, q, phase)
        Periodic helper evaluating one channel of the HSL model
    np_hsl_to_rgb(h, s, l)
        Vectorized HSL to RGB

RGB <-> CMYK:
    rgb_to_cmyk(r, g, b)
    cmyk_to_rgb(c, m, y, k)

High-Level API
-------------
    convert(color, from_space, to_space)
        Universal converter over "hex", "rgb", "hsl", "cmyk"

Ranges
------
RGB channels are in [0, 255], hue in degrees, everything else in [0, 100].
Out-of-range numbers are not clamped; they flow through the formulas as-is.
Hue is the one exception and is taken modulo 360 by ``hsl_to_rgb``.

Examples
--------
>>> from colorlens.conversions import hex_to_rgb, rgb_to_hsl, convert
>>> hex_to_rgb("#FF217A")
RGB(r=255, g=33, b=122)
>>> [round(v, 1) for v in convert("#FF217A", "hex", "cmyk")]
[0.0, 87.1, 52.2, 0.0]
"""

from .hex import hex_to_rgb, rgb_to_hex, normalize_hex, round_half_up
from .to_hsl import rgb_to_hsl, MaxChannel, dominant_channel
from .to_rgb import hsl_to_rgb, hue_to_channel, cmyk_to_rgb, np_hsl_to_rgb, normalize_hue
from .to_cmyk import rgb_to_cmyk
from .wrapper import convert, to_rgb, TO_RGB, FROM_RGB

__all__ = [
    # Hex
    'hex_to_rgb',
    'rgb_to_hex',
    'normalize_hex',
    'round_half_up',

    # RGB <-> HSL
    'rgb_to_hsl',
    'hsl_to_rgb',
    'hue_to_channel',
    'np_hsl_to_rgb',
    'normalize_hue',
    'MaxChannel',
    'dominant_channel',

    # RGB <-> CMYK
    'rgb_to_cmyk',
    'cmyk_to_rgb',

    # High-level API
    'convert',
    'to_rgb',
    'TO_RGB',
    'FROM_RGB',
]
