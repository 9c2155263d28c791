import logging
from typing import Callable, Dict, Union

from ..exceptions import UnsupportedColorSpace
from ..types.color_types import RGB, HSL, CMYK, COLOR_SPACES, ColorElement, ColorSpace
from .hex import hex_to_rgb, rgb_to_hex
from .to_cmyk import rgb_to_cmyk
from .to_hsl import rgb_to_hsl
from .to_rgb import hsl_to_rgb, cmyk_to_rgb

logger = logging.getLogger(__name__)

ColorInput = Union[str, ColorElement]
ColorOutput = Union[str, RGB, HSL, CMYK]

# Every space converts through RGB, so each space needs exactly one entry per table
TO_RGB: Dict[str, Callable[[ColorInput], RGB]] = {
    "hex": lambda color: hex_to_rgb(color),
    "rgb": lambda color: RGB(*color),
    "hsl": lambda color: hsl_to_rgb(*color),
    "cmyk": lambda color: cmyk_to_rgb(*color),
}

FROM_RGB: Dict[str, Callable[[RGB], ColorOutput]] = {
    "hex": lambda rgb: rgb_to_hex(*rgb),
    "rgb": lambda rgb: rgb,
    "hsl": lambda rgb: rgb_to_hsl(*rgb),
    "cmyk": lambda rgb: rgb_to_cmyk(*rgb),
}

_TUPLE_TYPES = {"rgb": RGB, "hsl": HSL, "cmyk": CMYK}


def _check_space(space: str) -> str:
    if not isinstance(space, str) or space.lower() not in COLOR_SPACES:
        raise UnsupportedColorSpace(space)
    return space.lower()


def to_rgb(color: ColorInput, from_space: ColorSpace) -> RGB:
    """Normalize a color given in ``from_space`` to the RGB pivot."""
    return TO_RGB[_check_space(from_space)](color)


def convert(color: ColorInput, from_space: ColorSpace, to_space: ColorSpace) -> ColorOutput:
    """
    Convert a single color between hex, RGB, HSL and CMYK.

    All conversions pass through RGB. Converting a space to itself returns the
    input (as the named tuple type for that space, hex strings unchanged).

    Raises:
        UnsupportedColorSpace: if either space is unknown.
        InvalidFormat: if a hex input cannot be parsed.
    """
    fs = _check_space(from_space)
    ts = _check_space(to_space)

    if fs == ts:
        if fs == "hex":
            return color  # type: ignore[return-value]
        return _TUPLE_TYPES[fs](*color)

    logger.debug("Converting %r: %s -> rgb -> %s", color, fs, ts)
    rgb = TO_RGB[fs](color)
    return FROM_RGB[ts](rgb)
