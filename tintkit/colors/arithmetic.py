"""
Channelwise addition and subtraction of colors.

Plain functions instead of operator overloads. The result lives in the first
operand's space; the second operand is converted when needed. Hue wraps,
every other channel clamps, through the normal constructor path.
"""

from __future__ import annotations
from typing import Sequence, TypeVar

import numpy as np

from ..normalizers import normalize_opt_ratio
from ..types.color_types import ColorTuple, OptAlpha
from .color_base import ColorBase

C = TypeVar("C", bound=ColorBase)


def add_sub_tuples(t1: Sequence[float], t2: Sequence[float], is_add: bool) -> ColorTuple:
    op = np.add if is_add else np.subtract
    result = op(np.asarray(t1, dtype=float), np.asarray(t2, dtype=float))
    return tuple(float(v) for v in result)  # type: ignore[return-value]


def add_sub_alpha(a1: OptAlpha, a2: OptAlpha, is_add: bool) -> OptAlpha:
    """Combine alphas: both set -> sum/difference, one set -> that one, none -> None."""
    if a1 is not None and a2 is not None:
        return a1 + a2 if is_add else a1 - a2
    return a1 if a1 is not None else a2


def _add_sub(c1: C, c2: ColorBase, is_add: bool) -> C:
    if c2.mode != c1.mode:
        c2 = c2.convert(c1.mode)
    t = add_sub_tuples(c1.to_tuple(), c2.to_tuple(), is_add)
    a = normalize_opt_ratio(add_sub_alpha(c1._alpha, c2._alpha, is_add))
    return c1.__class__._build(t, a)


def add(c1: C, c2: ColorBase) -> C:
    return _add_sub(c1, c2, True)


def subtract(c1: C, c2: ColorBase) -> C:
    return _add_sub(c1, c2, False)
