import numpy as np
from numpy import ndarray as NDArray

from ..consts import HUE_MAX, PERCENT_MAX, RGB_UNIT_MAX
from ..normalizers import bound_ratio
from ..types.color_types import ColorTuple

ONE_THIRD = 1.0 / 3.0
TWO_THIRD = 2.0 / 3.0


def hsl_to_ratio(hsl: ColorTuple) -> ColorTuple:
    h, s, l = hsl
    return h / HUE_MAX, s / PERCENT_MAX, l / PERCENT_MAX


def _calc_rgb_unit(unit: float, temp1: float, temp2: float) -> float:
    # Branch order and strict comparisons keep sextant edges continuous
    if 6.0 * unit < 1.0:
        result = temp2 + (temp1 - temp2) * 6.0 * unit
    elif 2.0 * unit < 1.0:
        result = temp1
    elif 3.0 * unit < 2.0:
        result = temp2 + (temp1 - temp2) * (TWO_THIRD - unit) * 6.0
    else:
        result = temp2
    return result * RGB_UNIT_MAX

## HSL to RGB conversions

def hsl_to_rgb(hsl: ColorTuple) -> ColorTuple:
    """
    Convert HSL to RGB.

    Args:
        hsl: (h, s, l) with hue in degrees [0, 360), saturation and lightness in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255]
    """
    h, s, l = hsl_to_ratio(hsl)

    if s == 0.0:
        unit = RGB_UNIT_MAX * l
        return unit, unit, unit

    temp1 = l * (1.0 + s) if l < 0.5 else l + s - l * s
    temp2 = 2.0 * l - temp1

    r = _calc_rgb_unit(bound_ratio(h + ONE_THIRD), temp1, temp2)
    g = _calc_rgb_unit(bound_ratio(h), temp1, temp2)
    b = _calc_rgb_unit(bound_ratio(h - ONE_THIRD), temp1, temp2)
    return r, g, b


def _np_calc_rgb_unit(unit: NDArray, temp1: NDArray, temp2: NDArray) -> NDArray:
    result = np.select(
        [6.0 * unit < 1.0, 2.0 * unit < 1.0, 3.0 * unit < 2.0],
        [
            temp2 + (temp1 - temp2) * 6.0 * unit,
            temp1,
            temp2 + (temp1 - temp2) * (TWO_THIRD - unit) * 6.0,
        ],
        default=temp2,
    )
    return result * RGB_UNIT_MAX


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np.asarray(h, dtype=float) / HUE_MAX
    s = np.asarray(s, dtype=float) / PERCENT_MAX
    l = np.asarray(l, dtype=float) / PERCENT_MAX

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    temp1 = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    temp2 = 2.0 * l - temp1

    r = _np_calc_rgb_unit(bound_ratio(h + ONE_THIRD), temp1, temp2)
    g = _np_calc_rgb_unit(bound_ratio(h), temp1, temp2)
    b = _np_calc_rgb_unit(bound_ratio(h - ONE_THIRD), temp1, temp2)

    # Achromatic
    gray = s == 0.0
    unit = RGB_UNIT_MAX * l
    r = np.where(gray, unit, r)
    g = np.where(gray, unit, g)
    b = np.where(gray, unit, b)

    return np.stack([r, g, b], axis=-1)
