from enum import Enum


class WCAGLevel(str, Enum):
    AA_LARGE = "aa_large"
    AA = "aa"
    AAA = "aaa"


# Minimum contrast ratio (inclusive) for each conformance level
WCAG_THRESHOLDS = {
    WCAGLevel.AA_LARGE: 3.0,
    WCAGLevel.AA: 4.5,
    WCAGLevel.AAA: 7.0,
}
