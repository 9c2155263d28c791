"""Basic colorlens usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from colorlens import (
    CATALOG,
    Color,
    analyze,
    convert,
    format_ratio,
    ideal_contrast_color,
)


def demonstrate_colors() -> None:
    # Construct a color and read it back in every space.
    accent = Color.from_hex("#FF217A")
    print("RGB:", accent.rgb)
    print("HSL:", accent.hsl)
    print("CMYK:", accent.cmyk)

    converted = convert((10, 20, 30, 40), "cmyk", "hex")
    print("CMYK -> hex:", converted)

    print("Grayscale:", accent.grayscale().hex)


def demonstrate_accessibility() -> None:
    # Contrast against white and black, in both roles.
    for check in analyze("#FF217A").contrast:
        levels = [name for name, ok in check.result._asdict().items() if ok]
        print(f"{check.label:15} {format_ratio(check.ratio)}  passes: {', '.join(levels) or 'none'}")

    # The color of a hue that reads equally well on white and on black.
    ideal = ideal_contrast_color(210)
    print("Ideal contrast for hue 210:", ideal.hex, format_ratio(ideal.contrast_on_white))


def demonstrate_catalog() -> None:
    # Filter the named colors the way a lookup table would.
    for entry in CATALOG.filter(legacy_alias="aqua"):
        print(entry.name, entry.hex, entry.legacy)

    summary = analyze("CornflowerBlue").summary()
    print("CornflowerBlue:", summary["rgb"], summary["hsl"])


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_accessibility()
    demonstrate_catalog()
