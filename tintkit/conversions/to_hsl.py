import numpy as np
from numpy import ndarray as NDArray

from ..consts import PERCENT_MAX, RGB_UNIT_MAX, DEFAULT_APPROX_EQ_PRECISION
from ..normalizers import normalize_hue, normalize_percent
from ..types.color_types import ColorTuple
from ..utils.approx import approx_def

HUE_SEXTANT = 60.0

## RGB to HSL conversions

def rgb_to_hsl(rgb: ColorTuple) -> ColorTuple:
    """
    Convert RGB to HSL.

    Args:
        rgb: (r, g, b) with channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r, g, b = (c / RGB_UNIT_MAX for c in rgb)
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    lightness = (max_c + min_c) / 2.0

    # Achromatic: hue is undefined, report 0
    if approx_def(max_c, min_c):
        return 0.0, 0.0, normalize_percent(lightness * PERCENT_MAX)

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2.0 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if r == max_c:
        hue = (g - b) / delta + (6.0 if g < b else 0.0)
    elif g == max_c:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0

    return (
        normalize_hue(hue * HUE_SEXTANT),
        normalize_percent(saturation * PERCENT_MAX),
        normalize_percent(lightness * PERCENT_MAX),
    )


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r = np.asarray(r, dtype=float) / RGB_UNIT_MAX
    g = np.asarray(g, dtype=float) / RGB_UNIT_MAX
    b = np.asarray(b, dtype=float) / RGB_UNIT_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    chroma = np.abs(delta) >= DEFAULT_APPROX_EQ_PRECISION
    safe_delta = np.where(chroma, delta, 1.0)

    # Saturation
    saturation = np.zeros(out_shape)
    denom = np.where(lightness > 0.5, 2.0 - max_c - min_c, max_c + min_c)
    saturation[chroma] = delta[chroma] / denom[chroma]

    # Hue, red checked first, then green, blue last
    mask_r = chroma & (max_c == r)
    mask_g = chroma & ~mask_r & (max_c == g)
    mask_b = chroma & ~mask_r & ~mask_g

    hue = np.zeros(out_shape)
    hue[mask_r] = (g[mask_r] - b[mask_r]) / safe_delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6.0, 0.0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / safe_delta[mask_g] + 2.0
    hue[mask_b] = (r[mask_b] - g[mask_b]) / safe_delta[mask_b] + 4.0

    hue = normalize_hue(hue * HUE_SEXTANT)
    saturation = np.clip(saturation * PERCENT_MAX, 0.0, PERCENT_MAX)
    lightness = np.clip(lightness * PERCENT_MAX, 0.0, PERCENT_MAX)

    return np.stack([hue, saturation, lightness], axis=-1)
