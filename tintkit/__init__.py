"""
tintkit - RGB and HSL color conversion and manipulation
=======================================================

Represent colors as RGB or HSL values, convert between them, parse and
format CSS-style color strings, and apply perceptual transforms.

Key Features
------------
- RGB (0-255) and HSL (hue 0-360, saturation/lightness 0-100) value types
- Optional alpha channel (0-1) that passes through conversions untouched
- Channels normalized on every write: hue wraps, everything else clamps
- Scalar and vectorized (numpy) RGB <-> HSL conversions
- In-place transforms: lighten, saturate, adjust_hue, grayscale, invert
- Hex and CSS string parsing and formatting

Quick Start
-----------
>>> from tintkit import Rgb, Hsl, SaturationInSpace
>>>
>>> rgb = Rgb((30, 108, 77))
>>> rgb.lighten(20)
>>> rgb.to_css_string()
'rgb(52,188,134)'
>>>
>>> hsl = Hsl.from_str("hsl(200,100%,30%)")
>>> Rgb(hsl).to_hex_string()
'#006699'
>>>
>>> rgb.saturate(SaturationInSpace.hsl(-10))

Modules
-------
- colors: Rgb, Hsl, transforms and arithmetic
- conversions: RGB <-> HSL, hex and inversion functions
- normalizers: per-channel domain normalization
- parsing: CSS string parsing and formatting
"""

from .colors import (
    ApproxEq,
    ColorBase,
    ColorTransform,
    WithAlpha,
    Rgb,
    Hsl,
    color_convert,
    add,
    subtract,
)
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    hex_num_to_rgb,
    rgb_to_hex,
    rgb_invert,
    invert_hue,
)
from .normalizers import (
    bound_ratio,
    normalize_hue,
    normalize_opt_ratio,
    normalize_percent,
    normalize_ratio,
    normalize_rgb_unit,
)
from .types import ColorSpace, GrayScaleMethod, SaturationInSpace, SaturationSpace
from .errors import ParseError

__version__ = "0.1.0"

__all__ = [
    # Color classes
    "ColorBase",
    "Rgb",
    "Hsl",

    # Capabilities
    "ApproxEq",
    "ColorTransform",
    "WithAlpha",

    # Tags
    "ColorSpace",
    "GrayScaleMethod",
    "SaturationInSpace",
    "SaturationSpace",

    # Conversions
    "color_convert",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "hex_num_to_rgb",
    "rgb_to_hex",
    "rgb_invert",
    "invert_hue",

    # Normalizers
    "bound_ratio",
    "normalize_hue",
    "normalize_opt_ratio",
    "normalize_percent",
    "normalize_ratio",
    "normalize_rgb_unit",

    # Arithmetic
    "add",
    "subtract",

    # Errors
    "ParseError",

    # Version
    "__version__",
]
