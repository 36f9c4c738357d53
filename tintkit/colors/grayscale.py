from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Dict, Optional, Union

from ..types.transform_types import GrayScaleMethod

if TYPE_CHECKING:
    from .rgb import Rgb


def _average_prominent(r: float, g: float, b: float) -> float:
    return (max(r, g, b) + min(r, g, b)) / 2.0


def _average(r: float, g: float, b: float) -> float:
    return (r + g + b) / 3.0


def _rec_601(r: float, g: float, b: float) -> float:
    return 0.299 * r + 0.587 * g + 0.114 * b


def _rec_709(r: float, g: float, b: float) -> float:
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


GRAYSCALE_FUNCTIONS: Dict[GrayScaleMethod, Callable[[float, float, float], float]] = {
    GrayScaleMethod.AVERAGE_PROMINENT: _average_prominent,
    GrayScaleMethod.AVERAGE: _average,
    GrayScaleMethod.REC_601: _rec_601,
    GrayScaleMethod.REC_709: _rec_709,
}


def rgb_grayscale(rgb: "Rgb", method: Optional[Union[GrayScaleMethod, str]] = None) -> None:
    """Replace all three channels of ``rgb`` with a single gray level."""
    fn = GRAYSCALE_FUNCTIONS[GrayScaleMethod.from_value(method)]
    gray = fn(*rgb.to_tuple())
    rgb._apply_tuple((gray, gray, gray))
