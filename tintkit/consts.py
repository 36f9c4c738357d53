# No dependencies
RGB_UNIT_MAX = 255.0
HUE_MAX = 360.0
PERCENT_MAX = 100.0
RATIO_MAX = 1.0

DEFAULT_APPROX_EQ_PRECISION = 1e-6

# Two decimals for alpha in CSS strings
ALPHA_DECIMALS = 2
