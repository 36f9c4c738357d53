"""Basic tintkit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from tintkit import (
    GrayScaleMethod,
    Hsl,
    ParseError,
    Rgb,
    SaturationInSpace,
    add,
    np_rgb_to_hsl,
)
import numpy as np


def demonstrate_colors() -> None:
    # Construct colors and convert between spaces.
    accent = Rgb((30, 108, 77))
    print("RGB:", accent.to_css_string(), accent.to_hex_string())

    hsl = accent.to_hsl()
    print("RGB -> HSL:", hsl.to_css_string())

    translucent = Hsl.from_str("hsla(200,100%,30%,0.5)")
    print("HSLA -> RGBA:", translucent.to_rgb().to_css_string())


def demonstrate_transforms() -> None:
    color = Rgb.from_hex(0x1E6C4D)
    color.lighten(20)
    print("Lightened:", color.to_css_string())

    color.saturate(SaturationInSpace.hsl(-30))
    print("Desaturated:", color.to_css_string())

    color.adjust_hue(180)
    print("Hue rotated:", color.to_css_string())

    print("Rec. 709 gray:", color.grayed(GrayScaleMethod.REC_709).to_css_string())
    print("Inverted:", color.inverted().to_css_string())

    try:
        color.saturate(SaturationInSpace.hsv(10))
    except NotImplementedError as exc:
        print("HSV saturation:", exc)


def demonstrate_arrays_and_parsing() -> None:
    pixels = np.array([[255, 0, 0], [0, 102, 153], [128, 128, 128]])
    print("Vectorized RGB -> HSL:\n", np_rgb_to_hsl(pixels[..., 0], pixels[..., 1], pixels[..., 2]))

    print("Sum:", add(Rgb((200, 10, 10, 0.3)), Rgb((100, 10, 10))).to_css_string())

    try:
        Rgb.from_str("rgb(1,2)")
    except ParseError as exc:
        print("Parse failure:", exc)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_transforms()
    demonstrate_arrays_and_parsing()
