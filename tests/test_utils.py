from tintkit.utils import approx, approx_def, approx_hue, approx_tuple, approx_tuple_def


def test_approx():
    assert approx(1.0, 1.05, 0.1)
    assert not approx(1.0, 1.2, 0.1)

def test_approx_def():
    assert approx_def(0.5, 0.5 + 1e-9)
    assert not approx_def(0.5, 0.51)

def test_approx_tuple():
    assert approx_tuple((1.0, 2.0, 3.0), (1.1, 2.1, 2.9), 0.2)
    assert not approx_tuple((1.0, 2.0, 3.0), (1.0, 2.0, 3.5), 0.2)

def test_approx_tuple_length_mismatch():
    assert not approx_tuple_def((1.0, 2.0, 3.0), (1.0, 2.0, 3.0, 1.0))

def test_approx_hue():
    assert approx_hue(359.9999999, 1e-7, 1e-6)
    assert approx_hue(10.0, 10.5, 1.0)
    assert not approx_hue(0.0, 180.0, 1.0)
    assert not approx_hue(359.0, 1.0, 1.0)
