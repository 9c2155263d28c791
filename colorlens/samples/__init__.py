from .colors import samples_rgb_hex, samples_rgb_hsl, samples_rgb_cmyk, samples_hex_short

__all__ = ['samples_rgb_hex', 'samples_rgb_hsl', 'samples_rgb_cmyk', 'samples_hex_short']
