import math
from typing import Tuple

from ..consts import ALPHA_DECIMALS
from ..types.color_types import ColorTuple


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def as_rounded_rgb_tuple(t: ColorTuple) -> Tuple[int, int, int]:
    r, g, b = t
    return round_half_up(r), round_half_up(g), round_half_up(b)


def as_rounded_hsl_tuple(t: ColorTuple) -> Tuple[int, int, int]:
    h, s, l = t
    return round_half_up(h), round_half_up(s), round_half_up(l)


def round_ratio(r: float) -> float:
    scale = 10 ** ALPHA_DECIMALS
    return round_half_up(r * scale) / scale
