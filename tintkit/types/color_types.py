from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple, Union

Scalar = Union[int, float]
ColorTuple = Tuple[float, float, float]
ColorTupleA = Tuple[float, float, float, float]
OptAlpha = Optional[float]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"


def as_color_space(color_space: ColorSpace | str) -> ColorSpace:
    """Resolve a ColorSpace member or a case-insensitive name such as ``"HSL"``."""
    if isinstance(color_space, ColorSpace):
        return color_space
    try:
        return ColorSpace(color_space.lower())
    except ValueError:
        raise ValueError(f"Unsupported color space: {color_space!r}") from None
