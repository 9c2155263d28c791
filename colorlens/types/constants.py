# No dependencies

# WCAG 2.x relative luminance (sRGB primaries)
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)
SRGB_LINEAR_THRESHOLD = 0.03928
SRGB_LINEAR_DIVISOR = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055

# ITU-R BT.601 luma, used only for grayscale
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

# Offset added to both luminances in the contrast ratio
CONTRAST_FLARE = 0.05

SOLVER_ITERATIONS = 50
SOLVER_TOLERANCE = 1e-7

# Luminance giving the same contrast ratio against white and against black:
# (1 + 0.05) / (L + 0.05) == (L + 0.05) / 0.05
IDEAL_CONTRAST_LUMINANCE = 0.1791287847

WHITE_LUMINANCE = 1.0
BLACK_LUMINANCE = 0.0
