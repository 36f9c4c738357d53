# RGB (0-255) -> HSL (hue degrees, saturation %, lightness %)
samples_rgb_hsl = {
    (255.0, 0.0, 0.0): (0.0, 100.0, 50.0),
    (0.0, 255.0, 0.0): (120.0, 100.0, 50.0),
    (0.0, 0.0, 255.0): (240.0, 100.0, 50.0),
    (255.0, 255.0, 0.0): (60.0, 100.0, 50.0),
    (0.0, 255.0, 255.0): (180.0, 100.0, 50.0),
    (255.0, 0.0, 255.0): (300.0, 100.0, 50.0),
    (255.0, 0.0, 128.0): (329.88, 100.0, 50.0),
    (0.0, 102.0, 153.0): (200.0, 100.0, 30.0),
    (217.0, 181.0, 38.0): (47.93, 70.2, 50.0),
    (30.0, 108.0, 77.0): (156.15, 56.52, 27.06),
}

# Achromatic colors: hue and saturation are both 0
samples_rgb_gray = {
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (128.0, 128.0, 128.0): (0.0, 0.0, 50.2),
    (255.0, 255.0, 255.0): (0.0, 0.0, 100.0),
}

# HSL -> RGB, expected within 0.5 channel units
samples_hsl_rgb = {
    (200.0, 100.0, 30.0): (0.0, 102.0, 153.0),
    (192.0, 67.0, 28.0): (24.0, 100.0, 119.0),
    (48.0, 70.0, 50.0): (217.0, 181.0, 38.0),
    (359.0, 33.0, 77.0): (216.0, 177.0, 178.0),
    (0.0, 0.0, 50.0): (127.5, 127.5, 127.5),
}
