from .approx import approx, approx_def, approx_hue, approx_tuple, approx_tuple_def

__all__ = ["approx", "approx_def", "approx_hue", "approx_tuple", "approx_tuple_def"]
