# No dependencies

# Significant digits kept when serializing numbers
DEFAULT_PRECISION = 5

DEFAULT_ALPHA = 1.0
ALPHA_RANGE = (0.0, 1.0)

# Below these a polar color is treated as achromatic and its hue reported as none
LCH_ACHROMATIC_CHROMA = 0.0015
OKLCH_ACHROMATIC_CHROMA = 0.000004
HSL_ACHROMATIC_EPSILON = 1e-9

HUE_360 = 360
