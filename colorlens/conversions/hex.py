import math
import re

from ..exceptions import InvalidFormat
from ..types.color_types import RGB

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with .5 going up (not to even)."""
    return math.floor(x + 0.5)


def normalize_hex(hex_str: str) -> str:
    """
    Return the canonical ``#RRGGBB`` form of a hex color.

    Accepts an optional leading ``#`` and either 3 or 6 hex digits in any case.
    The 3-digit shorthand is expanded by duplicating each digit.

    Raises:
        InvalidFormat: if the digits are not exactly 3 or 6 hex characters.
    """
    if not isinstance(hex_str, str):
        raise InvalidFormat(hex_str, "expected a string")
    digits = hex_str[1:] if hex_str.startswith("#") else hex_str
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidFormat(hex_str)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return "#" + digits.upper()


def hex_to_rgb(hex_str: str) -> RGB:
    """
    Parse a hex color into integer RGB channels.

    >>> hex_to_rgb("#FF217A")
    RGB(r=255, g=33, b=122)
    >>> hex_to_rgb("0af")
    RGB(r=0, g=170, b=255)
    """
    digits = normalize_hex(hex_str)[1:]
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Format RGB channels as an uppercase ``#RRGGBB`` string.

    Channels are rounded half-up and zero-padded to two digits. Values outside
    [0, 255] are not clamped, so they produce malformed output (e.g. ``-5``
    formats as ``-5`` and 256 as ``100``).
    """
    return "#" + "".join(f"{round_half_up(x):02X}" for x in (r, g, b))
