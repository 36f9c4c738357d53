from tintkit.conversions import invert_hue, rgb_invert


def test_rgb_invert():
    assert rgb_invert((30.0, 108.0, 77.0)) == (225.0, 147.0, 178.0)
    assert rgb_invert((0.0, 0.0, 0.0)) == (255.0, 255.0, 255.0)

def test_rgb_invert_involution():
    t = (30.0, 108.0, 77.0)
    assert rgb_invert(rgb_invert(t)) == t

def test_invert_hue():
    assert invert_hue(0.0) == 180.0
    assert invert_hue(200.0) == 20.0
    assert invert_hue(180.0) == 0.0

def test_invert_hue_involution():
    for h in (0.0, 10.5, 179.0, 180.0, 359.5):
        assert abs(invert_hue(invert_hue(h)) - h) < 1e-9
