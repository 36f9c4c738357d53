from tintkit.conversions import as_rounded_hsl_tuple, as_rounded_rgb_tuple, round_ratio
from tintkit.conversions.numbers import round_half_up


def test_round_half_up_goes_away_from_zero():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -3
    assert round_half_up(2.4999) == 2

def test_as_rounded_rgb_tuple():
    assert as_rounded_rgb_tuple((52.4, 187.5, 133.6)) == (52, 188, 134)

def test_as_rounded_hsl_tuple():
    assert as_rounded_hsl_tuple((199.5, 100.0, 29.9)) == (200, 100, 30)

def test_round_ratio():
    assert round_ratio(0.5) == 0.5
    assert round_ratio(0.333) == 0.33
    assert round_ratio(1.0) == 1.0
