import re
from typing import Tuple

from ..errors import ParseError
from ..types.color_types import ColorTuple
from .numbers import round_half_up

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def hex_num_to_rgb(num: int) -> ColorTuple:
    """Unpack a 24-bit integer into (r, g, b) byte values."""
    r = float((num >> 16) & 0xFF)
    g = float((num >> 8) & 0xFF)
    b = float(num & 0xFF)
    return r, g, b


def _to_hex(n: float) -> str:
    return f"{round_half_up(n):02x}"


def rgb_to_hex(rgb: ColorTuple) -> Tuple[str, str, str]:
    """Render each channel as two lowercase, zero-padded hex digits."""
    r, g, b = rgb
    return _to_hex(r), _to_hex(g), _to_hex(b)


def rgb_to_hex_num(rgb: ColorTuple) -> int:
    r, g, b = (round_half_up(c) for c in rgb)
    return r << 16 | g << 8 | b


def hex_str_to_rgb(s: str) -> ColorTuple:
    """
    Parse ``#rrggbb``, ``rrggbb``, ``#rgb`` or ``rgb`` into (r, g, b).

    Raises:
        ParseError: if the string is not a hex color
    """
    match = HEX_PATTERN.match(s.strip())
    if match is None:
        raise ParseError(s, "not a hex color")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return hex_num_to_rgb(int(digits, 16))
