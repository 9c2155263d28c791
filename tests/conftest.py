import pytest

from colorlens.catalog import CATALOG


@pytest.fixture
def catalog():
    return CATALOG


@pytest.fixture
def rgb_grid():
    """Integer RGB triples on a coarse lattice that includes both 0 and 255."""
    levels = list(range(0, 256, 51)) + [1, 33, 128, 254]
    return [(r, g, b) for r in levels for g in levels for b in levels]
