"""Array-friendly luminance utilities in colorlens.

Run with:
    python examples/array_operations.py
"""
import numpy as np

from colorlens.accessibility import find_non_monotonic, np_relative_luminance
from colorlens.conversions import np_hsl_to_rgb
from colorlens.types import IDEAL_CONTRAST_LUMINANCE


def demonstrate_arrays() -> None:
    # Luminance of every lightness step for a full hue wheel at 100% saturation.
    hues = np.arange(0, 360, 30, dtype=float)
    lightness = np.linspace(0, 100, 11)
    hh, ll = np.meshgrid(hues, lightness, indexing="ij")
    rgb = np_hsl_to_rgb(hh, np.full_like(hh, 100.0), ll)
    lum = np_relative_luminance(rgb)
    print("Luminance grid shape:", lum.shape)

    # Coarse estimate of where each hue crosses the equal-contrast luminance.
    crossing = np.argmax(lum >= IDEAL_CONTRAST_LUMINANCE, axis=1)
    for hue, idx in zip(hues, crossing):
        print(f"hue {hue:5.1f}: crosses near L={lightness[idx]:.0f}")

    # The lightness search relies on luminance rising with lightness.
    bad = find_non_monotonic(range(0, 360, 5), [0, 25, 50, 75, 100])
    print("Non-monotonic hue/saturation pairs:", bad)


if __name__ == "__main__":
    demonstrate_arrays()
