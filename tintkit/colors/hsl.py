from __future__ import annotations
from typing import ClassVar, Tuple

from ..consts import PERCENT_MAX
from ..conversions import invert_hue
from ..normalizers import normalize_hue, normalize_percent
from ..parsing import hsl_from_str
from ..types.color_types import ColorSpace, ColorTuple
from ..types.transform_types import SaturationInSpace
from .color_base import ColorBase, channel_property
from .transform import ColorTransform, GrayScaleInput, hsl_saturation_amount


class Hsl(ColorBase, ColorTransform):
    """
    The HSL (hue, saturation, lightness) color model.

    Ranges:
        h (hue): 0.0 - 360.0 (wraps)
        s (saturation): 0.0 - 100.0 (clamped)
        l (lightness): 0.0 - 100.0 (clamped)
        a (alpha): 0.0 - 1.0 (clamped, optional)
    """

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.HSL
    null_value:   ClassVar[ColorTuple] = (0.0, 0.0, 0.0)
    normalizers:  ClassVar[Tuple] = (normalize_hue, normalize_percent, normalize_percent)
    css_prefix:   ClassVar[str] = "hsl"
    hue_index:    ClassVar[int] = 0
    parser = staticmethod(hsl_from_str)

    hue = channel_property(0, "Hue in degrees, wrapped into [0, 360).")
    saturation = channel_property(1, "Saturation, 0-100.")
    lightness = channel_property(2, "Lightness, 0-100.")

    def to_rgb(self):
        return self.convert(ColorSpace.RGB)

    def get_hue(self) -> float:
        return self._get_channel(0)

    def get_saturation(self) -> float:
        return self._get_channel(1)

    def get_lightness(self) -> float:
        return self._get_channel(2)

    def set_hue(self, val: float) -> None:
        self._set_channel(0, val)

    def set_saturation(self, val: float) -> None:
        self._set_channel(1, val)

    def set_lightness(self, val: float) -> None:
        self._set_channel(2, val)

    # ------------------ TRANSFORMS ------------------
    def lighten(self, amt: float) -> None:
        self.set_lightness(self.get_lightness() + amt)

    def saturate(self, sat: SaturationInSpace) -> None:
        self.set_saturation(self.get_saturation() + hsl_saturation_amount(sat))

    def adjust_hue(self, hue: float) -> None:
        self.set_hue(self.get_hue() + hue)

    def grayscale(self, method: GrayScaleInput = None) -> None:
        rgb = self.to_rgb()
        rgb.grayscale(method)
        self._apply_tuple(rgb.to_hsl().to_tuple())

    def invert(self) -> None:
        # Same result as inverting the RGB channels: hue turns half way,
        # lightness mirrors, saturation is unchanged.
        self.set_hue(invert_hue(self.get_hue()))
        self.set_lightness(PERCENT_MAX - self.get_lightness())
