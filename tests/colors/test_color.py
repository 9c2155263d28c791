import pytest

from colorlens.colors import Color
from colorlens.exceptions import InvalidFormat, UnknownColorName, UnsupportedColorSpace
from colorlens.samples.colors import samples_rgb_hex, samples_rgb_hsl


def test_from_hex_and_back():
    for rgb, hex_value in samples_rgb_hex.items():
        color = Color.from_hex(hex_value)
        assert color.rgb == rgb
        assert color.hex == hex_value


def test_from_hsl():
    for rgb, hsl in samples_rgb_hsl.items():
        color = Color.from_hsl(*hsl)
        assert color.rgb == pytest.approx(rgb, abs=0.1)


def test_from_cmyk():
    assert Color.from_cmyk(0, 100, 100, 0) == Color((255, 0, 0))
    assert Color.from_cmyk(0, 0, 0, 100) == Color((0, 0, 0))


def test_from_name():
    assert Color.from_name("cornflowerblue").hex == "#6495ED"
    with pytest.raises(UnknownColorName):
        Color.from_name("Blurple")


def test_parse():
    red = Color((255, 0, 0))
    assert Color.parse(red) is red
    assert Color.parse("#F00") == red
    assert Color.parse("red") == red
    assert Color.parse((255, 0, 0)) == red
    with pytest.raises(InvalidFormat):
        Color.parse("not a color")


def test_requires_three_channels():
    with pytest.raises(ValueError):
        Color((1, 2))


def test_color_is_immutable():
    color = Color((10, 20, 30))
    with pytest.raises(AttributeError):
        color._rgb = (0, 0, 0)
    with pytest.raises(AttributeError):
        color.extra = 1


def test_equality_and_hash():
    a = Color.from_hex("#FF217A")
    b = Color((255, 33, 122))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Color((255, 33, 123))


def test_derived_properties():
    accent = Color.from_hex("#FF217A")
    assert accent.hsl == pytest.approx((335.95, 100, 56.47), abs=0.01)
    assert accent.cmyk == pytest.approx((0, 87.06, 52.16, 0), abs=0.01)
    assert accent.luminance == pytest.approx(0.23753, abs=2e-4)


def test_grayscale():
    gray = Color.from_hex("#FF217A").grayscale()
    r, g, b = gray.rgb
    assert r == g == b
    assert gray.hex == "#6E6E6E"


def test_contrast():
    assert Color.from_name("black").contrast("white") == pytest.approx(21)
    accent = Color.from_hex("#FF217A")
    assert accent.contrast("#FFF") == pytest.approx(3.652, abs=2e-3)
    assert accent.contrast((0, 0, 0)) == pytest.approx(5.751, abs=3e-3)


def test_name_lookup():
    assert Color.from_hex("#00FFFF").name == "Aqua"
    assert Color.from_name("Cyan").name == "Aqua"
    assert Color.from_hex("#FF217A").name is None


def test_convert():
    color = Color((255, 0, 0))
    assert color.convert("hex") == "#FF0000"
    assert color.convert("hsl") == pytest.approx((0, 100, 50))
    with pytest.raises(UnsupportedColorSpace):
        color.convert("lab")


def test_out_of_range_propagates():
    color = Color((300, -20, 0))
    assert color.rgb == (300.0, -20.0, 0.0)


def test_repr():
    assert repr(Color((255, 33, 122))) == "Color(rgb=(255, 33, 122), hex='#FF217A')"
