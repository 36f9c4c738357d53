from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions import hex_num_to_rgb, hex_str_to_rgb, rgb_invert, rgb_to_hex, rgb_to_hex_num
from ..normalizers import normalize_rgb_unit
from ..parsing import rgb_from_str
from ..types.color_types import ColorSpace, ColorTuple
from ..types.transform_types import SaturationInSpace
from .color_base import ColorBase, channel_property
from .grayscale import rgb_grayscale
from .transform import ColorTransform, GrayScaleInput, hsl_saturation_amount


class Rgb(ColorBase, ColorTransform):
    """
    An RGB color.

    Ranges:
        r, g, b: 0.0 - 255.0 (clamped)
        a (alpha): 0.0 - 1.0 (clamped, optional)
    """

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.RGB
    null_value:   ClassVar[ColorTuple] = (0.0, 0.0, 0.0)
    normalizers:  ClassVar[Tuple] = (normalize_rgb_unit, normalize_rgb_unit, normalize_rgb_unit)
    css_prefix:   ClassVar[str] = "rgb"
    parser = staticmethod(rgb_from_str)

    red = channel_property(0, "Red channel, 0-255.")
    green = channel_property(1, "Green channel, 0-255.")
    blue = channel_property(2, "Blue channel, 0-255.")

    @classmethod
    def from_hex(cls, num: int) -> "Rgb":
        """Build from a packed 24-bit integer such as ``0xffcc00``."""
        return cls(hex_num_to_rgb(num))

    @classmethod
    def from_hex_str(cls, s: str) -> "Rgb":
        return cls(hex_str_to_rgb(s))

    def to_hex_string(self) -> str:
        return "#" + "".join(rgb_to_hex(self._value))

    def to_hex_num(self) -> int:
        return rgb_to_hex_num(self._value)

    def to_hsl(self):
        return self.convert(ColorSpace.HSL)

    def get_red(self) -> float:
        return self._get_channel(0)

    def get_green(self) -> float:
        return self._get_channel(1)

    def get_blue(self) -> float:
        return self._get_channel(2)

    def set_red(self, val: float) -> None:
        self._set_channel(0, val)

    def set_green(self, val: float) -> None:
        self._set_channel(1, val)

    def set_blue(self, val: float) -> None:
        self._set_channel(2, val)

    # ------------------ TRANSFORMS ------------------
    def lighten(self, amt: float) -> None:
        """
        Lighten or darken the color; ``amt`` is a signed percent.

        >>> rgb = Rgb((30.0, 108.0, 77.0))
        >>> rgb.lighten(20.0)
        >>> rgb.to_css_string()
        'rgb(52,188,134)'
        """
        hsl = self.to_hsl()
        hsl.lighten(amt)
        self._apply_tuple(hsl.to_rgb().to_tuple())

    def saturate(self, sat: SaturationInSpace) -> None:
        amt = hsl_saturation_amount(sat)
        hsl = self.to_hsl()
        hsl.set_saturation(hsl.get_saturation() + amt)
        self._apply_tuple(hsl.to_rgb().to_tuple())

    def adjust_hue(self, hue: float) -> None:
        hsl = self.to_hsl()
        hsl.adjust_hue(hue)
        self._apply_tuple(hsl.to_rgb().to_tuple())

    def grayscale(self, method: GrayScaleInput = None) -> None:
        rgb_grayscale(self, method)

    def invert(self) -> None:
        self._apply_tuple(rgb_invert(self._value))
