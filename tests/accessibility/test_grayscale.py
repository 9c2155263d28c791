import pytest

from colorlens.accessibility import to_grayscale, relative_luminance


def test_grayscale_uses_bt601_weights():
    assert to_grayscale(255, 0, 0) == pytest.approx((76.245, 76.245, 76.245))
    assert to_grayscale(0, 255, 0) == pytest.approx((149.685,) * 3)
    assert to_grayscale(0, 0, 255) == pytest.approx((29.07,) * 3)


def test_grayscale_channels_are_equal():
    r, g, b = to_grayscale(255, 33, 122)
    assert r == g == b
    assert r == pytest.approx(109.524)


def test_grayscale_is_idempotent(rgb_grid):
    for rgb in rgb_grid:
        once = to_grayscale(*rgb)
        twice = to_grayscale(*once)
        assert twice == pytest.approx(once, abs=1e-9)


def test_grayscale_of_gray_is_unchanged():
    assert to_grayscale(128, 128, 128) == pytest.approx((128, 128, 128))


def test_luma_is_not_wcag_luminance():
    # BT.601 weighs red at 0.299, WCAG at 0.2126
    gray = to_grayscale(255, 0, 0)[0] / 255
    assert gray == pytest.approx(0.299)
    assert relative_luminance(255, 0, 0) != pytest.approx(gray)
