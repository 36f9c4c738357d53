"""
CSS-style color strings.

Formatting
----------
>>> tuple_to_string((52.2, 187.8, 134.0), "rgb")
'rgb(52,188,134)'
>>> tuple_to_string((200.0, 100.0, 30.0, 0.5), "hsl")
'hsla(200,100%,30%,0.5)'

Parsing
-------
``rgb_from_str`` and ``hsl_from_str`` return ``(tuple, alpha)`` where alpha is
None unless the string carried one. Values are returned as written; the color
classes clamp or wrap them, and a UserWarning is emitted for any value that
will be clamped.
"""

import math
import re
import warnings
from typing import List, Sequence, Tuple

from ..consts import PERCENT_MAX, RATIO_MAX, RGB_UNIT_MAX
from ..conversions.hex import hex_str_to_rgb
from ..conversions.numbers import round_half_up, round_ratio
from ..errors import ParseError
from ..types.color_types import ColorTuple, OptAlpha

FUNC_PATTERN = re.compile(r"^\s*([a-z]+)\s*\((.*)\)\s*$", re.IGNORECASE)


def _format_number(value: float) -> str:
    return f"{value:g}"


def tuple_to_string(t: Sequence[float], prefix: str) -> str:
    """
    Render a 3-tuple (or 4-tuple with alpha) as a CSS color function.

    Args:
        t: (c0, c1, c2) or (c0, c1, c2, alpha)
        prefix: "rgb" or "hsl"
    """
    is_hsl = prefix == "hsl"
    parts: List[str] = []
    for i, value in enumerate(t[:3]):
        part = str(round_half_up(value))
        if is_hsl and i > 0:
            part += "%"
        parts.append(part)
    if len(t) > 3:
        parts.append(_format_number(round_ratio(t[3])))
        prefix += "a"
    return f"{prefix}({','.join(parts)})"


def _parse_number(token: str, source: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise ParseError(source, f"invalid number {token!r}") from None
    if not math.isfinite(value):
        raise ParseError(source, f"invalid number {token!r}")
    return value


def _check_range(name: str, value: float, low: float, high: float, source: str, notes: List[str]) -> None:
    if not low <= value <= high:
        notes.append(f"{name} value {value:g} in {source!r} is outside [{low:g}, {high:g}] and will be clamped")


def _split_function(s: str, kind: str) -> Tuple[List[str], bool]:
    """Return the argument tokens and whether the ``a`` (alpha) form was used."""
    match = FUNC_PATTERN.match(s)
    if match is None:
        raise ParseError(s, f"expected {kind}(...) or {kind}a(...)")
    name = match.group(1).lower()
    if name not in (kind, kind + "a"):
        raise ParseError(s, f"unexpected color function {name!r}")
    with_alpha = name.endswith("a")
    tokens = [tok.strip() for tok in match.group(2).split(",")]
    expected = 4 if with_alpha else 3
    if len(tokens) != expected:
        raise ParseError(s, f"{name} takes {expected} values, got {len(tokens)}")
    return tokens, with_alpha


def _parse_alpha(tokens: List[str], with_alpha: bool, source: str, notes: List[str]) -> OptAlpha:
    if not with_alpha:
        return None
    alpha = _parse_number(tokens[3], source)
    _check_range("alpha", alpha, 0.0, RATIO_MAX, source, notes)
    return alpha


def rgb_from_str(s: str, stacklevel: int = 2) -> Tuple[ColorTuple, OptAlpha]:
    """
    Parse ``rgb(r,g,b)``, ``rgba(r,g,b,a)`` or a hex string.

    Args:
        s: the color string
        stacklevel: passed to ``warnings.warn`` for out-of-range values

    Raises:
        ParseError: on malformed input
    """
    text = s.strip()
    if "(" not in text:
        return hex_str_to_rgb(text), None

    tokens, with_alpha = _split_function(text, "rgb")
    notes: List[str] = []
    channels = []
    for name, token in zip(("red", "green", "blue"), tokens[:3]):
        value = _parse_number(token, s)
        _check_range(name, value, 0.0, RGB_UNIT_MAX, s, notes)
        channels.append(value)
    r, g, b = channels
    alpha = _parse_alpha(tokens, with_alpha, s, notes)
    for note in notes:
        warnings.warn(note, UserWarning, stacklevel=stacklevel)
    return (r, g, b), alpha


def hsl_from_str(s: str, stacklevel: int = 2) -> Tuple[ColorTuple, OptAlpha]:
    """
    Parse ``hsl(h,s%,l%)`` or ``hsla(h,s%,l%,a)``. The ``%`` signs are optional.

    Raises:
        ParseError: on malformed input
    """
    tokens, with_alpha = _split_function(s, "hsl")
    notes: List[str] = []
    h = _parse_number(tokens[0], s)
    percents: List[float] = []
    for name, token in zip(("saturation", "lightness"), tokens[1:3]):
        value = _parse_number(token[:-1] if token.endswith("%") else token, s)
        _check_range(name, value, 0.0, PERCENT_MAX, s, notes)
        percents.append(value)
    sat, light = percents
    alpha = _parse_alpha(tokens, with_alpha, s, notes)
    for note in notes:
        warnings.warn(note, UserWarning, stacklevel=stacklevel)
    return (h, sat, light), alpha
