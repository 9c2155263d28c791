"""
Inverse luminance search: find the HSL lightness that produces a target
relative luminance for a fixed hue and saturation.

The search assumes luminance never decreases as lightness increases.
``find_non_monotonic`` scans a hue/saturation grid for places where that
assumption fails.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Tuple

import numpy as np

from ..conversions.hex import rgb_to_hex
from ..conversions.to_cmyk import rgb_to_cmyk
from ..conversions.to_rgb import hsl_to_rgb, np_hsl_to_rgb
from ..types.color_types import RGB, CMYK
from ..types.constants import (
    BLACK_LUMINANCE,
    IDEAL_CONTRAST_LUMINANCE,
    SOLVER_ITERATIONS,
    SOLVER_TOLERANCE,
    WHITE_LUMINANCE,
)
from .luminance import contrast_ratio, np_relative_luminance, relative_luminance

logger = logging.getLogger(__name__)


class IdealContrast(NamedTuple):
    hue: float
    saturation: float
    lightness: float
    rgb: RGB
    hex: str
    cmyk: CMYK
    luminance: float
    contrast_on_white: float
    contrast_on_black: float


def luminance_at(hue: float, saturation: float, lightness: float) -> float:
    return relative_luminance(*hsl_to_rgb(hue, saturation, lightness))


def lightness_for_luminance(
    hue: float,
    saturation: float,
    target_luminance: float,
    iterations: int = SOLVER_ITERATIONS,
    tolerance: float = SOLVER_TOLERANCE,
) -> float:
    """
    Binary-search the lightness in [0, 100] whose luminance is closest to
    ``target_luminance``.

    Each step evaluates the midpoint of the current interval. The midpoint
    closest to the target seen so far is returned, not the final midpoint.
    Stops early once a midpoint is within ``tolerance``; otherwise runs exactly
    ``iterations`` evaluations. Never fails: a target outside the reachable
    range returns the lightness nearest to it among the sampled midpoints.
    """
    low, high = 0.0, 100.0
    best = 50.0
    best_diff = float("inf")
    evaluations = 0

    for _ in range(iterations):
        evaluations += 1
        mid = (low + high) / 2
        luminance = luminance_at(hue, saturation, mid)
        diff = abs(luminance - target_luminance)

        if diff < best_diff:
            best_diff = diff
            best = mid

        if luminance < target_luminance:
            low = mid
        else:
            high = mid

        if diff < tolerance:
            break

    logger.debug(
        "lightness search h=%s s=%s target=%s -> l=%s (diff=%.3g, %d evaluations)",
        hue, saturation, target_luminance, best, best_diff, evaluations,
    )
    return best


def ideal_contrast_color(hue: float, saturation: float = 100.0) -> IdealContrast:
    """
    The color of the given hue and saturation whose contrast against white
    equals its contrast against black.
    """
    lightness = lightness_for_luminance(hue, saturation, IDEAL_CONTRAST_LUMINANCE)
    rgb = hsl_to_rgb(hue, saturation, lightness)
    luminance = relative_luminance(*rgb)
    return IdealContrast(
        hue=hue,
        saturation=saturation,
        lightness=lightness,
        rgb=rgb,
        hex=rgb_to_hex(*rgb),
        cmyk=rgb_to_cmyk(*rgb),
        luminance=luminance,
        contrast_on_white=contrast_ratio(WHITE_LUMINANCE, luminance),
        contrast_on_black=contrast_ratio(luminance, BLACK_LUMINANCE),
    )


def find_non_monotonic(
    hues: Iterable[float],
    saturations: Iterable[float],
    steps: int = 101,
    atol: float = 1e-12,
) -> List[Tuple[float, float]]:
    """
    Return the (hue, saturation) pairs where luminance drops anywhere as
    lightness rises over ``steps`` evenly spaced samples in [0, 100].

    Drops smaller than ``atol`` are treated as floating-point noise.
    """
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps}")

    h = np.asarray(list(hues), dtype=float)
    s = np.asarray(list(saturations), dtype=float)
    l = np.linspace(0.0, 100.0, steps)

    # grid shape (hues, saturations, lightness)
    hh, ss, ll = np.meshgrid(h, s, l, indexing="ij")
    lum = np_relative_luminance(np_hsl_to_rgb(hh, ss, ll))
    drops = np.any(np.diff(lum, axis=-1) < -atol, axis=-1)

    found = [(float(h[i]), float(s[j])) for i, j in zip(*np.nonzero(drops))]
    if found:
        logger.debug("non-monotonic luminance at %d of %d hue/saturation pairs", len(found), drops.size)
    return found
