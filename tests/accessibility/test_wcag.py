import pytest

from colorlens.accessibility import wcag_compliance, meets, contrast_report, WCAGResult
from colorlens.types import WCAGLevel, WCAG_THRESHOLDS


def test_thresholds():
    assert WCAG_THRESHOLDS[WCAGLevel.AA_LARGE] == 3.0
    assert WCAG_THRESHOLDS[WCAGLevel.AA] == 4.5
    assert WCAG_THRESHOLDS[WCAGLevel.AAA] == 7.0


def test_aa_boundary_is_inclusive():
    assert wcag_compliance(4.5).aa_normal is True
    assert wcag_compliance(4.499999).aa_normal is False


@pytest.mark.parametrize(
    "ratio, expected",
    [
        (1.0, (False, False, False)),
        (2.99, (False, False, False)),
        (3.0, (True, False, False)),
        (4.5, (True, True, False)),
        (6.999, (True, True, False)),
        (7.0, (True, True, True)),
        (21.0, (True, True, True)),
    ],
)
def test_wcag_compliance(ratio, expected):
    assert wcag_compliance(ratio) == WCAGResult(*expected)


def test_passes_by_level():
    result = wcag_compliance(5.0)
    assert result.passes(WCAGLevel.AA_LARGE)
    assert result.passes(WCAGLevel.AA)
    assert not result.passes(WCAGLevel.AAA)
    assert result.passes("aa")


def test_meets_accepts_level_values():
    assert meets(7.0, "aaa")
    assert not meets(6.9, WCAGLevel.AAA)
    with pytest.raises(ValueError):
        meets(7.0, "a")


def test_contrast_report_order_and_colors():
    report = contrast_report(255, 33, 122)
    assert [check.label for check in report] == [
        "Color on White",
        "Color on Black",
        "White on Color",
        "Black on Color",
    ]
    assert (report[0].foreground, report[0].background) == ("#FF217A", "#FFFFFF")
    assert (report[1].foreground, report[1].background) == ("#FF217A", "#000000")
    assert (report[2].foreground, report[2].background) == ("#FFFFFF", "#FF217A")
    assert (report[3].foreground, report[3].background) == ("#000000", "#FF217A")


def test_contrast_report_ratios():
    on_white, on_black, white_on, black_on = contrast_report(255, 33, 122)

    assert on_white.ratio == pytest.approx(3.652, abs=2e-3)
    assert on_black.ratio == pytest.approx(5.751, abs=3e-3)
    assert white_on.ratio == on_white.ratio
    assert black_on.ratio == on_black.ratio

    assert on_white.result == WCAGResult(aa_large=True, aa_normal=False, aaa=False)
    assert on_black.result == WCAGResult(aa_large=True, aa_normal=True, aaa=False)


def test_contrast_report_black():
    on_white, on_black, _, _ = contrast_report(0, 0, 0)
    assert on_white.ratio == pytest.approx(21.0)
    assert on_black.ratio == 1.0
    assert on_white.result.aaa
    assert not on_black.result.aa_large
