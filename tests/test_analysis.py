import pytest

from colorlens import analyze, Color, InvalidFormat


def test_analyze_accent():
    result = analyze("#FF217A")
    assert result.hex == "#FF217A"
    assert result.rgb == (255, 33, 122)
    assert result.grayscale.hex == "#6E6E6E"
    assert result.grayscale.rgb == pytest.approx((109.524,) * 3, abs=1e-3)
    assert [check.label for check in result.contrast] == [
        "Color on White",
        "Color on Black",
        "White on Color",
        "Black on Color",
    ]


def test_summary_strings():
    summary = analyze("#FF217A").summary()
    assert summary["hex"] == "#FF217A"
    assert summary["rgb"] == "rgb(255, 33, 122)"
    assert summary["hsl"] == "hsl(335.9, 100.0%, 56.5%)"
    assert summary["cmyk"] == "cmyk(0.0%, 87.1%, 52.2%, 0.0%)"
    assert summary["grayscale"] == "#6E6E6E"
    assert summary["luminance"].startswith("0.2375")


def test_analyze_accepts_names_and_triples():
    assert analyze("CornflowerBlue").summary()["rgb"] == "rgb(100, 149, 237)"
    assert analyze((0, 0, 0)).hex == "#000000"
    assert analyze(Color((255, 255, 255))).luminance == pytest.approx(1.0)


def test_analyze_rejects_garbage():
    with pytest.raises(InvalidFormat):
        analyze("#12345")
