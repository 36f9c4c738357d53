from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class SaturationSpace(str, Enum):
    HSL = "hsl"
    HSV = "hsv"


@dataclass(frozen=True)
class SaturationInSpace:
    """
    A saturation amount tagged with the color space it is expressed in.

    Build it with ``SaturationInSpace.hsl(10)`` or ``SaturationInSpace.hsv(10)``.
    Amounts are signed percentages.
    """

    space: SaturationSpace
    amount: float

    @classmethod
    def hsl(cls, amount: float) -> "SaturationInSpace":
        return cls(SaturationSpace.HSL, amount)

    @classmethod
    def hsv(cls, amount: float) -> "SaturationInSpace":
        return cls(SaturationSpace.HSV, amount)


class GrayScaleMethod(str, Enum):
    AVERAGE_PROMINENT = "average_prominent"
    AVERAGE = "average"
    REC_601 = "rec601"
    REC_709 = "rec709"

    @classmethod
    def from_value(cls, method: "GrayScaleMethod | str | None") -> "GrayScaleMethod":
        """Resolve a method given as a member, its value, or None (the default)."""
        if method is None:
            return cls.AVERAGE_PROMINENT
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).lower())
        except ValueError:
            raise ValueError(f"Invalid grayscale method: {method!r}") from None
