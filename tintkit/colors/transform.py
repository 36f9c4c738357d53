from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Union

from ..types.transform_types import GrayScaleMethod, SaturationInSpace, SaturationSpace

GrayScaleInput = Optional[Union[GrayScaleMethod, str]]


def hsl_saturation_amount(sat: SaturationInSpace) -> float:
    """
    Return the HSL saturation delta carried by ``sat``.

    Raises:
        NotImplementedError: for HSV saturation, which has no implementation
        TypeError: if ``sat`` is not a SaturationInSpace
    """
    if not isinstance(sat, SaturationInSpace):
        raise TypeError(f"saturate expects a SaturationInSpace, got {type(sat).__name__}")
    if sat.space is SaturationSpace.HSV:
        raise NotImplementedError(f"Saturation in HSV space is not implemented (amount={sat.amount})")
    return sat.amount


class ColorTransform(ABC):
    """
    In-place perceptual transforms.

    Each mutating method returns None and never touches alpha. The ``*ed``
    variants apply the same transform to a copy and return it.
    """

    @abstractmethod
    def lighten(self, amt: float) -> None:
        """Add ``amt`` (signed percent) to HSL lightness."""

    @abstractmethod
    def saturate(self, sat: SaturationInSpace) -> None:
        """Add a signed saturation amount in the tagged space."""

    @abstractmethod
    def adjust_hue(self, hue: float) -> None:
        """Rotate hue by ``hue`` degrees."""

    @abstractmethod
    def grayscale(self, method: GrayScaleInput = None) -> None:
        """Turn the color into a neutral gray."""

    @abstractmethod
    def invert(self) -> None:
        """Invert the color."""

    def grayscale_simple(self) -> None:
        self.grayscale(GrayScaleMethod.AVERAGE_PROMINENT)

    def lightened(self, amt: float):
        color = self.copy()  # type: ignore[attr-defined]
        color.lighten(amt)
        return color

    def saturated(self, sat: SaturationInSpace):
        color = self.copy()  # type: ignore[attr-defined]
        color.saturate(sat)
        return color

    def hue_adjusted(self, hue: float):
        color = self.copy()  # type: ignore[attr-defined]
        color.adjust_hue(hue)
        return color

    def grayed(self, method: GrayScaleInput = None):
        color = self.copy()  # type: ignore[attr-defined]
        color.grayscale(method)
        return color

    def inverted(self):
        color = self.copy()  # type: ignore[attr-defined]
        color.invert()
        return color
