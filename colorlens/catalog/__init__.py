"""Catalog of the 140 standard HTML/CSS named colors."""

from .entries import NamedColorEntry, LegacyPaletteMapping
from .catalog import NamedColorCatalog, CatalogFilter, filter_colors, CATALOG

__all__ = [
    "NamedColorEntry",
    "LegacyPaletteMapping",
    "NamedColorCatalog",
    "CatalogFilter",
    "filter_colors",
    "CATALOG",
]
