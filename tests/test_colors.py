import pytest
import numpy as np
from shapeforge import parse_color, ColorFormatError


def test_six_digit():
    assert np.allclose(parse_color('#ff0000'), [1, 0, 0, 1])

def test_short_form_expands():
    assert np.allclose(parse_color('#f0a'), parse_color('#ff00aa'))

def test_eight_digit_alpha():
    rgba = parse_color('#00ff0080')
    assert np.allclose(rgba, [0, 1, 0, 128 / 255])

def test_case_insensitive():
    assert np.allclose(parse_color('#ABCDEF'), parse_color('#abcdef'))

@pytest.mark.parametrize("color, reason", [
    ('ff0000', 'prefix'),
    (None, 'prefix'),
    ('#ff00', 'length'),
    ('#', 'length'),
    ('#ff00000', 'length'),
    ('#gg0000', 'digits'),
    ('#12345z', 'digits'),
])
def test_malformed_colors(color, reason):
    with pytest.raises(ColorFormatError) as exc:
        parse_color(color)
    assert exc.value.reason == reason
    assert repr(color) in str(exc.value)

def test_color_error_is_value_error():
    with pytest.raises(ValueError):
        parse_color('red')
