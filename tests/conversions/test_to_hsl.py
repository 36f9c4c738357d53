import numpy as np

from tintkit.conversions import rgb_to_hsl, np_rgb_to_hsl
from ..samples import samples_rgb_hsl, samples_rgb_gray


def test_rgb_to_hsl():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = rgb_to_hsl(rgb)

        assert abs(h - h_exp) < 1/2
        assert abs(s - s_exp) < 1/2
        assert abs(l - l_exp) < 1/2

def test_rgb_to_hsl_achromatic():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_gray.items():
        h, s, l = rgb_to_hsl(rgb)

        assert h == 0
        assert s == 0
        assert abs(l - l_exp) < 0.01

def test_rgb_to_hsl_red_branch_wraps_negative_hue():
    # Red is max and green < blue: hue lands in the last sextant
    h, s, l = rgb_to_hsl((255.0, 0.0, 128.0))
    assert 300 < h < 360

def test_rgb_to_hsl_output_in_range():
    rng = np.random.default_rng(7)
    for rgb in rng.uniform(0, 255, size=(200, 3)):
        h, s, l = rgb_to_hsl(tuple(rgb))
        assert 0 <= h < 360
        assert 0 <= s <= 100
        assert 0 <= l <= 100

def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert hsl.shape == the_matrix.shape
    assert np.allclose(hsl, expected, atol=1/2)

def test_rgb_to_hsl_numpy_matches_scalar():
    rng = np.random.default_rng(11)
    the_matrix = rng.uniform(0, 255, size=(100, 3))
    the_matrix[:10, 1] = the_matrix[:10, 0]  # ties between red and green
    the_matrix[10:20] = the_matrix[10:20, :1]  # grays

    hsl = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    expected = np.array([rgb_to_hsl(tuple(rgb)) for rgb in the_matrix])
    assert np.allclose(hsl, expected, atol=1e-9)
