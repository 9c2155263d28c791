from colorlens.formatting import (
    format_rgb,
    format_hsl,
    format_cmyk,
    format_ratio,
    format_luminance,
)


def test_format_rgb_rounds_half_up():
    assert format_rgb((254.5, 0.4, 10.5)) == "rgb(255, 0, 11)"
    assert format_rgb((0, 0, 0)) == "rgb(0, 0, 0)"


def test_format_hsl():
    assert format_hsl((210, 100, 45.1)) == "hsl(210.0, 100.0%, 45.1%)"
    assert format_hsl((210, 100, 45.1), precision=0) == "hsl(210, 100%, 45%)"


def test_format_cmyk():
    assert format_cmyk((0, 87.06, 52.16, 0)) == "cmyk(0.0%, 87.1%, 52.2%, 0.0%)"


def test_format_ratio():
    assert format_ratio(21) == "21.00:1"
    assert format_ratio(4.5826) == "4.58:1"


def test_format_luminance():
    assert format_luminance(0.1791287847) == "0.1791287847"
    assert format_luminance(1) == "1.0000000000"
