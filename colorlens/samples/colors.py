# Reference values for well-known colors, keyed by integer RGB.
# HSL and CMYK are rounded to two decimals.

# RED / GREEN / BLUE
RED_RGB = (255, 0, 0)
GREEN_RGB = (0, 255, 0)
BLUE_RGB = (0, 0, 255)

# YELLOW / CYAN / MAGENTA
YELLOW_RGB = (255, 255, 0)
CYAN_RGB = (0, 255, 255)
MAGENTA_RGB = (255, 0, 255)

# WHITE / BLACK / GRAY
WHITE_RGB = (255, 255, 255)
BLACK_RGB = (0, 0, 0)
GRAY_RGB = (128, 128, 128)

# Others
MAROON_RGB = (128, 0, 0)
ACCENT_RGB = (255, 33, 122)  # #FF217A
CORNFLOWER_RGB = (100, 149, 237)

samples_rgb_hex = {
    RED_RGB: "#FF0000",
    GREEN_RGB: "#00FF00",
    BLUE_RGB: "#0000FF",
    YELLOW_RGB: "#FFFF00",
    CYAN_RGB: "#00FFFF",
    MAGENTA_RGB: "#FF00FF",
    WHITE_RGB: "#FFFFFF",
    BLACK_RGB: "#000000",
    GRAY_RGB: "#808080",
    MAROON_RGB: "#800000",
    ACCENT_RGB: "#FF217A",
    CORNFLOWER_RGB: "#6495ED",
}

samples_rgb_hsl = {
    RED_RGB: (0.0, 100.0, 50.0),
    GREEN_RGB: (120.0, 100.0, 50.0),
    BLUE_RGB: (240.0, 100.0, 50.0),
    YELLOW_RGB: (60.0, 100.0, 50.0),
    CYAN_RGB: (180.0, 100.0, 50.0),
    MAGENTA_RGB: (300.0, 100.0, 50.0),
    WHITE_RGB: (0.0, 0.0, 100.0),
    BLACK_RGB: (0.0, 0.0, 0.0),
    GRAY_RGB: (0.0, 0.0, 50.20),
    MAROON_RGB: (0.0, 100.0, 25.10),
    ACCENT_RGB: (335.95, 100.0, 56.47),
    CORNFLOWER_RGB: (218.54, 79.19, 66.08),
}

samples_rgb_cmyk = {
    RED_RGB: (0.0, 100.0, 100.0, 0.0),
    GREEN_RGB: (100.0, 0.0, 100.0, 0.0),
    BLUE_RGB: (100.0, 100.0, 0.0, 0.0),
    YELLOW_RGB: (0.0, 0.0, 100.0, 0.0),
    CYAN_RGB: (100.0, 0.0, 0.0, 0.0),
    MAGENTA_RGB: (0.0, 100.0, 0.0, 0.0),
    WHITE_RGB: (0.0, 0.0, 0.0, 0.0),
    BLACK_RGB: (0.0, 0.0, 0.0, 100.0),
    GRAY_RGB: (0.0, 0.0, 0.0, 49.80),
    MAROON_RGB: (0.0, 100.0, 100.0, 49.80),
    ACCENT_RGB: (0.0, 87.06, 52.16, 0.0),
    CORNFLOWER_RGB: (57.81, 37.13, 0.0, 7.06),
}

# Shorthand inputs and their expansion
samples_hex_short = {
    "#FFF": (255, 255, 255),
    "#000": (0, 0, 0),
    "#f00": (255, 0, 0),
    "0af": (0, 170, 255),
    "#AbC": (170, 187, 204),
}
