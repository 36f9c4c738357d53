"""
Channel normalizers.

Every channel stored in a color value passes through one of these. They are
total: any real input maps to a value inside the channel's domain. Hue is
circular and wraps; everything else clamps at the boundaries.
"""

from typing import Optional

from boundednumbers import clamp

from ..consts import HUE_MAX, PERCENT_MAX, RATIO_MAX, RGB_UNIT_MAX


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_MAX
    # Float modulo of a tiny negative rounds up to the modulus itself.
    # Also called on numpy arrays, so no branching.
    return h - HUE_MAX * (h >= HUE_MAX)


def normalize_percent(p: float) -> float:
    """Clamp a percentage to [0, 100]."""
    return float(clamp(p, 0.0, PERCENT_MAX))


def normalize_ratio(a: float) -> float:
    """Clamp a ratio (alpha, unit channel) to [0, 1]."""
    return float(clamp(a, 0.0, RATIO_MAX))


def normalize_rgb_unit(c: float) -> float:
    """Clamp an RGB channel to [0, 255]."""
    return float(clamp(c, 0.0, RGB_UNIT_MAX))


def normalize_opt_ratio(a: Optional[float]) -> Optional[float]:
    if a is None:
        return None
    return normalize_ratio(a)


def bound_ratio(r: float) -> float:
    """Wrap a fraction of a full turn into [0, 1)."""
    r = r % RATIO_MAX
    return r - RATIO_MAX * (r >= RATIO_MAX)
