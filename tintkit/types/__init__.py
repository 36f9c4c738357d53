from .color_types import ColorSpace, ColorTuple, ColorTupleA, OptAlpha, Scalar, as_color_space
from .transform_types import GrayScaleMethod, SaturationInSpace, SaturationSpace

__all__ = [
    "ColorSpace",
    "as_color_space",
    "ColorTuple",
    "ColorTupleA",
    "OptAlpha",
    "Scalar",
    "GrayScaleMethod",
    "SaturationInSpace",
    "SaturationSpace",
]
