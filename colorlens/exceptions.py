"""Exceptions raised by colorlens.

Every error is an input-validation failure detected synchronously; nothing in
the library retries or raises for environmental reasons.
"""


class ColorLensError(Exception):
    """Base exception for all colorlens errors."""


class InvalidFormat(ColorLensError, ValueError):
    """A color string is not 3 or 6 hex digits after an optional leading ``#``."""

    def __init__(self, value, reason: str = "expected 3 or 6 hex digits"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid hex color {value!r}: {reason}")


class UnsupportedColorSpace(ColorLensError, ValueError):
    """A conversion was requested to or from an unknown color space."""

    def __init__(self, space):
        self.space = space
        super().__init__(f"Unsupported color space: {space!r}")


class UnknownColorName(ColorLensError, KeyError):
    """A named-color lookup found no catalog entry."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown color name: {self.name!r}"
