from colorlens.conversions import rgb_to_cmyk
from colorlens.samples import samples_rgb_cmyk


def test_rgb_to_cmyk():
    for (r, g, b), (c_exp, m_exp, y_exp, k_exp) in samples_rgb_cmyk.items():
        c, m, y, k = rgb_to_cmyk(r, g, b)

        assert abs(c - c_exp) < 0.02
        assert abs(m - m_exp) < 0.02
        assert abs(y - y_exp) < 0.02
        assert abs(k - k_exp) < 0.02


def test_pure_black_is_exact():
    assert rgb_to_cmyk(0, 0, 0) == (0.0, 0.0, 0.0, 100.0)


def test_channels_in_range(rgb_grid):
    for rgb in rgb_grid:
        for channel in rgb_to_cmyk(*rgb):
            assert -1e-9 <= channel <= 100 + 1e-9
