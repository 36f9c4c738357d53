import pytest

from tintkit.conversions import hex_num_to_rgb, hex_str_to_rgb, rgb_to_hex, rgb_to_hex_num
from tintkit.errors import ParseError


def test_hex_num_to_rgb():
    assert hex_num_to_rgb(0xFFCC00) == (255.0, 204.0, 0.0)
    assert hex_num_to_rgb(0x000000) == (0.0, 0.0, 0.0)
    assert hex_num_to_rgb(0x1E6C4D) == (30.0, 108.0, 77.0)

def test_rgb_to_hex_is_lowercase_and_padded():
    assert rgb_to_hex((255.0, 204.0, 0.0)) == ("ff", "cc", "00")
    assert rgb_to_hex((1.0, 10.0, 171.0)) == ("01", "0a", "ab")

def test_rgb_to_hex_rounds_channels():
    assert rgb_to_hex((52.2, 187.8, 0.5)) == ("34", "bc", "01")

def test_rgb_to_hex_num():
    assert rgb_to_hex_num((255.0, 204.0, 0.0)) == 0xFFCC00
    assert rgb_to_hex_num(hex_num_to_rgb(0x123456)) == 0x123456

@pytest.mark.parametrize("text", ["#ffcc00", "ffcc00", "#FFCC00", "#fc0", "fc0", "  #ffcc00 "])
def test_hex_str_to_rgb(text):
    assert hex_str_to_rgb(text) == (255.0, 204.0, 0.0)

@pytest.mark.parametrize("text", ["", "#", "#12345", "#1234567", "#ggg000", "ffcc00ff"])
def test_hex_str_to_rgb_rejects(text):
    with pytest.raises(ParseError):
        hex_str_to_rgb(text)
