from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..conversions.hex import hex_to_rgb
from ..conversions.to_cmyk import rgb_to_cmyk
from ..conversions.to_hsl import rgb_to_hsl
from ..types.color_types import RGB, HSL, CMYK


@dataclass(frozen=True)
class LegacyPaletteMapping:
    """Correspondence to an entry of the 16-color CGA palette."""

    index: str  # palette index as shipped, e.g. "11"
    name: str  # palette name, e.g. "Cyan"
    alias: Optional[str] = None  # alternate palette name, e.g. "Aqua"


@dataclass(frozen=True)
class NamedColorEntry:
    """A standard named color. Only the hex value is stored."""

    name: str
    hex: str
    web_safe: bool
    basic: bool
    extended: bool
    legacy: Optional[LegacyPaletteMapping] = None

    @property
    def has_legacy_mapping(self) -> bool:
        return self.legacy is not None

    @property
    def rgb(self) -> RGB:
        return hex_to_rgb(self.hex)

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(*self.rgb)

    @property
    def cmyk(self) -> CMYK:
        return rgb_to_cmyk(*self.rgb)

    @classmethod
    def from_row(cls, row: tuple) -> NamedColorEntry:
        name, hex_value, web_safe, basic, extended, legacy = row
        return cls(
            name=name,
            hex=hex_value,
            web_safe=web_safe,
            basic=basic,
            extended=extended,
            legacy=LegacyPaletteMapping(*legacy) if legacy is not None else None,
        )
