import dataclasses

import pytest

from colorlens.catalog import (
    CatalogFilter,
    LegacyPaletteMapping,
    NamedColorCatalog,
    NamedColorEntry,
    filter_colors,
)
from colorlens.conversions import normalize_hex
from colorlens.exceptions import UnknownColorName


def names(entries):
    return [entry.name for entry in entries]


def test_catalog_size_and_order(catalog):
    all_names = names(catalog.all())
    assert len(catalog) == 140
    assert all_names == sorted(all_names, key=str.lower)
    assert all_names[0] == "AliceBlue"
    assert all_names[-1] == "YellowGreen"


def test_every_hex_is_canonical(catalog):
    for entry in catalog:
        assert entry.hex == normalize_hex(entry.hex)
        assert len(entry.hex) == 7


def test_every_entry_is_extended(catalog):
    assert all(entry.extended for entry in catalog)


def test_empty_filter_returns_everything(catalog):
    assert catalog.filter() == catalog.all()
    assert catalog.filter(CatalogFilter()) == catalog.all()
    assert catalog.filter(name="", web_safe="") == catalog.all()


def test_filter_web_safe(catalog):
    safe = catalog.filter(web_safe=True)
    unsafe = catalog.filter(web_safe=False)
    assert len(safe) == 18
    assert len(unsafe) == 122
    assert names(catalog.filter(web_safe="yes")) == names(safe)
    assert names(catalog.filter(web_safe="no")) == names(unsafe)


def test_filter_name_substring(catalog):
    blues = catalog.filter(name="blue")
    assert len(blues) == 20
    assert all("blue" in entry.name.lower() for entry in blues)
    assert len(catalog.filter(name="DARK")) == 17


def test_filter_combines_with_and(catalog):
    result = catalog.filter(name="blue", basic=True)
    assert names(result) == ["Blue"]


def test_filter_legacy_index_is_substring(catalog):
    result = catalog.filter(legacy_index="1")
    assert names(result) == [
        "Aqua", "Cyan", "Fuchsia", "Lime", "Magenta", "Maroon",
        "Navy", "Red", "Silver", "White", "Yellow",
    ]


def test_filter_legacy_alias_and_name(catalog):
    assert names(catalog.filter(legacy_alias="aqua")) == ["Aqua", "Cyan"]
    assert names(catalog.filter(legacy_name="gray")) == ["Gray"]


def test_legacy_constraint_excludes_unmapped(catalog):
    mapped = [entry for entry in catalog if entry.has_legacy_mapping]
    assert len(mapped) == 18
    assert len(catalog.filter(legacy_name="a")) < len(catalog)
    for entry in catalog.filter(legacy_name="a"):
        assert entry.has_legacy_mapping


def test_filter_accepts_criteria_object(catalog):
    criteria = CatalogFilter(name="green", web_safe=True)
    assert catalog.filter(criteria) == filter_colors(catalog, criteria)
    assert names(catalog.filter(criteria)) == ["Green"]


def test_filter_rejects_criteria_and_keywords(catalog):
    with pytest.raises(TypeError):
        catalog.filter(CatalogFilter(name="red"), basic=True)


def test_filter_is_idempotent(catalog):
    criteria = CatalogFilter(name="light")
    once = filter_colors(catalog, criteria)
    assert filter_colors(once, criteria) == once


def test_get_is_case_insensitive(catalog):
    entry = catalog.get("cornflowerblue")
    assert entry.name == "CornflowerBlue"
    assert entry.rgb == (100, 149, 237)
    assert "CORNFLOWERBLUE" in catalog
    assert "NotAColor" not in catalog


def test_get_unknown_name(catalog):
    with pytest.raises(UnknownColorName) as exc:
        catalog.get("Blurple")
    assert isinstance(exc.value, KeyError)
    assert "Blurple" in str(exc.value)


def test_entry_derived_values(catalog):
    aqua = catalog.get("Aqua")
    assert aqua.legacy == LegacyPaletteMapping("11", "Cyan", "Aqua")
    assert aqua.hsl == pytest.approx((180, 100, 50))
    assert aqua.cmyk == pytest.approx((100, 0, 0, 0))


def test_entries_are_immutable(catalog):
    entry = catalog.get("Red")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.hex = "#000000"
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.legacy.index = "0"


def test_duplicate_names_rejected():
    red = NamedColorEntry("Red", "#FF0000", True, True, True)
    with pytest.raises(ValueError):
        NamedColorCatalog([red, NamedColorEntry("RED", "#FF0000", True, True, True)])


def test_repr(catalog):
    assert repr(catalog) == "NamedColorCatalog(140 entries)"
