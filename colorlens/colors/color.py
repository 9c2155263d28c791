from __future__ import annotations
from typing import Sequence, Union

from ..accessibility.grayscale import to_grayscale
from ..accessibility.luminance import contrast_ratio, relative_luminance
from ..catalog.catalog import CATALOG
from ..conversions.hex import hex_to_rgb, rgb_to_hex
from ..conversions.to_cmyk import rgb_to_cmyk
from ..conversions.to_hsl import rgb_to_hsl
from ..conversions.to_rgb import cmyk_to_rgb, hsl_to_rgb
from ..conversions.wrapper import convert, ColorOutput
from ..exceptions import InvalidFormat
from ..types.color_types import RGB, HSL, CMYK, ColorSpace


class Color:
    """
    A single color, stored as a real-valued RGB triple.

    Every other representation is derived from RGB on access. Channels are
    not clamped, so out-of-range input propagates into derived values.
    Instances are immutable and hashable.
    """

    __slots__ = ('_rgb', '_is_frozen')  # no instance dict, so no new attributes

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, rgb: Sequence[float]) -> None:
        if isinstance(rgb, Color):
            rgb = rgb.rgb
        if len(rgb) != 3:
            raise ValueError(f"Color expects 3 RGB channels, got {len(rgb)}")
        self._rgb = RGB(*(float(c) for c in rgb))

        # freeze instance, no more writes allowed
        object.__setattr__(self, '_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_hex(cls, hex_str: str) -> Color:
        return cls(hex_to_rgb(hex_str))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        return cls(hsl_to_rgb(h, s, l))

    @classmethod
    def from_cmyk(cls, c: float, m: float, y: float, k: float) -> Color:
        return cls(cmyk_to_rgb(c, m, y, k))

    @classmethod
    def from_name(cls, name: str) -> Color:
        return cls.from_hex(CATALOG.get(name).hex)

    @classmethod
    def parse(cls, value: Union[str, Sequence[float], Color]) -> Color:
        """
        Build a color from a hex string, a catalog name, an RGB triple or
        another ``Color``.

        Raises:
            InvalidFormat: if a string is neither valid hex nor a known name.
        """
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            return cls(value)
        try:
            return cls.from_hex(value)
        except InvalidFormat:
            if value in CATALOG:
                return cls.from_name(value)
            raise

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgb(self) -> RGB:
        return self._rgb

    @property
    def hex(self) -> str:
        return rgb_to_hex(*self._rgb)

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(*self._rgb)

    @property
    def cmyk(self) -> CMYK:
        return rgb_to_cmyk(*self._rgb)

    @property
    def luminance(self) -> float:
        """WCAG relative luminance."""
        return relative_luminance(*self._rgb)

    @property
    def name(self) -> str | None:
        """Name of the first catalog entry with exactly this hex value, if any."""
        hex_value = self.hex
        for entry in CATALOG:
            if entry.hex == hex_value:
                return entry.name
        return None

    # ------------------ DERIVED COLORS ------------------
    def grayscale(self) -> Color:
        return Color(to_grayscale(*self._rgb))

    def contrast(self, other: Union[Color, str, Sequence[float]]) -> float:
        """WCAG contrast ratio against another color."""
        return contrast_ratio(self.luminance, Color.parse(other).luminance)

    def convert(self, to_space: ColorSpace) -> ColorOutput:
        return convert(self._rgb, "rgb", to_space)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __repr__(self) -> str:
        r, g, b = self._rgb
        return f"Color(rgb=({r:g}, {g:g}, {b:g}), hex={self.hex!r})"

