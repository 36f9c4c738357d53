from .color_normalizer import (
    bound_ratio,
    normalize_hue,
    normalize_opt_ratio,
    normalize_percent,
    normalize_ratio,
    normalize_rgb_unit,
)

__all__ = [
    "bound_ratio",
    "normalize_hue",
    "normalize_opt_ratio",
    "normalize_percent",
    "normalize_ratio",
    "normalize_rgb_unit",
]
