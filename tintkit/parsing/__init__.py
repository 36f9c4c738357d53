from .css import hsl_from_str, rgb_from_str, tuple_to_string

__all__ = ["hsl_from_str", "rgb_from_str", "tuple_to_string"]
