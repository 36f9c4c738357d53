from ..consts import HUE_MAX, RGB_UNIT_MAX
from ..types.color_types import ColorTuple

HALF_TURN = HUE_MAX / 2


def rgb_invert(rgb: ColorTuple) -> ColorTuple:
    r, g, b = rgb
    return RGB_UNIT_MAX - r, RGB_UNIT_MAX - g, RGB_UNIT_MAX - b


def invert_hue(hue: float) -> float:
    return (hue + HALF_TURN) % HUE_MAX
