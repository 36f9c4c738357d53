import numpy as np

from tintkit.conversions import hsl_to_rgb, rgb_to_hsl, np_hsl_to_rgb, np_rgb_to_hsl
from ..samples import samples_rgb_hsl, samples_rgb_gray

rgb_tolerance = 0.5


def test_round_trip_rgb_hsl():
    for rgb in list(samples_rgb_hsl) + list(samples_rgb_gray):
        r, g, b = rgb
        r_out, g_out, b_out = hsl_to_rgb(rgb_to_hsl(rgb))

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

def test_round_trip_rgb_hsl_random():
    rng = np.random.default_rng(2024)
    for rgb in rng.uniform(0, 255, size=(500, 3)):
        out = hsl_to_rgb(rgb_to_hsl(tuple(rgb)))
        assert np.allclose(out, rgb, atol=rgb_tolerance)

def test_round_trip_rgb_hsl_numpy():
    rng = np.random.default_rng(5)
    the_matrix = rng.uniform(0, 255, size=(8, 8, 3))
    hsl = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    rgb = np_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])

    assert rgb.shape == the_matrix.shape
    assert np.allclose(rgb, the_matrix, atol=rgb_tolerance)
