"""
tintkit Color Classes
=====================

Mutable RGB and HSL value types sharing one base class.

Features
--------
- Channels normalized on construction and on every setter
- Optional alpha, kept apart from the channel math
- Conversion between spaces through the conversion engine, never cached
- In-place transforms (lighten, saturate, adjust_hue, grayscale, invert)
- Tolerance-based comparison, also across spaces

Usage
-----
>>> from tintkit.colors import Rgb, Hsl
>>> rgb = Rgb((30, 108, 77))
>>> hsl = rgb.to_hsl()
>>> hsl.set_lightness(hsl.get_lightness() + 20)
>>> Rgb(hsl).to_css_string()
'rgb(52,188,134)'
>>> rgba = Rgb((255, 128, 0, 0.5))
>>> list(rgba)
[255.0, 128.0, 0.0, 0.5]

Color Classes
-------------
    - Rgb: r, g, b in [0, 255]
    - Hsl: h in [0, 360), s and l in [0, 100]
"""

from .color_base import ApproxEq, ColorBase, WithAlpha
from .transform import ColorTransform
from .rgb import Rgb
from .hsl import Hsl
from .color import color_convert, get_color_class, space_to_class
from .arithmetic import add, subtract
from .grayscale import rgb_grayscale

__all__ = [
    'ApproxEq',
    'ColorBase',
    'ColorTransform',
    'WithAlpha',
    'Rgb',
    'Hsl',
    'color_convert',
    'get_color_class',
    'space_to_class',
    'add',
    'subtract',
    'rgb_grayscale',
]
