from typing import Sequence

from ..consts import DEFAULT_APPROX_EQ_PRECISION, HUE_MAX


def approx(x: float, y: float, precision: float) -> bool:
    return abs(x - y) < precision


def approx_def(x: float, y: float) -> bool:
    return approx(x, y, DEFAULT_APPROX_EQ_PRECISION)


def approx_tuple(t1: Sequence[float], t2: Sequence[float], precision: float) -> bool:
    """Compare two tuples channel by channel. Tuples of different length never match."""
    if len(t1) != len(t2):
        return False
    return all(approx(a, b, precision) for a, b in zip(t1, t2))


def approx_tuple_def(t1: Sequence[float], t2: Sequence[float]) -> bool:
    return approx_tuple(t1, t2, DEFAULT_APPROX_EQ_PRECISION)


def approx_hue(h1: float, h2: float, precision: float) -> bool:
    """Compare two hues by the shorter way around the circle."""
    d = abs(h1 - h2) % HUE_MAX
    return min(d, HUE_MAX - d) < precision
