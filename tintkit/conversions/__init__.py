"""
tintkit Color Space Conversions
===============================

Scalar and vectorized (numpy) conversions between RGB and HSL, plus hex
packing and inversion helpers.

Ranges
------
- RGB channels: [0, 255]
- Hue: [0, 360)
- Saturation, lightness: [0, 100]

Conversion Functions
--------------------
RGB → HSL:
    rgb_to_hsl((r, g, b))
        Scalar conversion
    np_rgb_to_hsl(r, g, b)
        Vectorized conversion, returns shape (..., 3)

HSL → RGB:
    hsl_to_rgb((h, s, l))
        Scalar conversion
    np_hsl_to_rgb(h, s, l)
        Vectorized conversion, returns shape (..., 3)

Hex:
    hex_num_to_rgb(0xffcc00), rgb_to_hex((r, g, b)), rgb_to_hex_num((r, g, b)),
    hex_str_to_rgb("#ffcc00")

Inversion:
    rgb_invert((r, g, b)), invert_hue(h)

Examples
--------
>>> from tintkit.conversions import rgb_to_hsl, hsl_to_rgb
>>> h, s, l = rgb_to_hsl((30.0, 108.0, 77.0))
>>> r, g, b = hsl_to_rgb((h, s, l))
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb, hsl_to_ratio
from .hex import hex_num_to_rgb, rgb_to_hex, rgb_to_hex_num, hex_str_to_rgb
from .invert import rgb_invert, invert_hue
from .numbers import as_rounded_rgb_tuple, as_rounded_hsl_tuple, round_ratio, round_half_up

__all__ = [
    # RGB ↔ HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'hsl_to_ratio',

    # Hex
    'hex_num_to_rgb',
    'rgb_to_hex',
    'rgb_to_hex_num',
    'hex_str_to_rgb',

    # Inversion
    'rgb_invert',
    'invert_hue',

    # Rounding
    'as_rounded_rgb_tuple',
    'as_rounded_hsl_tuple',
    'round_ratio',
    'round_half_up',
]
