from __future__ import annotations
from typing import Callable, Dict, Tuple

from ..conversions import hsl_to_rgb, rgb_to_hsl
from ..types.color_types import ColorSpace, ColorTuple, as_color_space
from .color_base import ColorBase
from .hsl import Hsl
from .rgb import Rgb

space_to_class: Dict[ColorSpace, type[ColorBase]] = {
    ColorSpace.RGB: Rgb,
    ColorSpace.HSL: Hsl,
}

CONVERTERS: Dict[Tuple[ColorSpace, ColorSpace], Callable[[ColorTuple], ColorTuple]] = {
    (ColorSpace.RGB, ColorSpace.HSL): rgb_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_rgb,
}


def get_color_class(color_space: ColorSpace | str) -> type[ColorBase]:
    color_class = space_to_class.get(as_color_space(color_space))
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | str | None = None) -> ColorBase:
    """
    Convert this color to another color space.

    The result is a new, independent instance. Alpha is carried over
    unchanged; it takes no part in the channel math.

    Args:
        to_space: Target color space ("rgb" or "hsl"). Defaults to the current one.

    Returns:
        New ColorBase instance in the target space
    """
    to_space = as_color_space(to_space or self.mode)
    cls = get_color_class(to_space)
    if to_space == self.mode:
        return self.copy()
    result = CONVERTERS[(self.mode, to_space)](self.to_tuple())
    return cls._build(result, self._alpha)


ColorBase.convert = color_convert
