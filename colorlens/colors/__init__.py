"""
Colorlens Color Objects
=======================

``Color`` is an immutable value object whose canonical state is an RGB
triple. Construct it from any supported representation and read the others
back as properties.

>>> from colorlens.colors import Color
>>> accent = Color.from_hex("#FF217A")
>>> accent.rgb
RGB(r=255.0, g=33.0, b=122.0)
>>> accent.grayscale().hex
'#6E6E6E'
"""

from .color import Color

__all__ = ['Color']
