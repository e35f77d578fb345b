import pytest
from shapeforge import circle, round, onion, outline, outline_n, Modifier


def test_round():
    assert round(circle(10), 4).to_glsl() == "(sd_circle(p, 10.0) - 4.0)"

def test_onion():
    assert onion(circle(10), 4).to_glsl() == "(abs(sd_circle(p, 10.0)) - 4.0)"

def test_outline_is_onion():
    assert outline is onion

def test_outline_n_nests_shells():
    expr = outline_n(circle(10), 1, 3).to_glsl()
    assert expr == "(abs((abs((abs(sd_circle(p, 10.0)) - 1.0)) - 1.0)) - 1.0)"

def test_outline_n_zero_is_identity():
    c = circle(10)
    assert outline_n(c, 1, 0) is c

def test_fluent_modifiers():
    assert circle(10).round(2).to_glsl() == round(circle(10), 2).to_glsl()
    assert circle(10).onion(2).to_glsl() == onion(circle(10), 2).to_glsl()

def test_unknown_modifier_raises():
    m = Modifier(circle(1), 'blur', 1.0)
    with pytest.raises(ValueError, match="blur"):
        m.to_glsl()
    with pytest.raises(ValueError, match="blur"):
        m.estimate_bounds()
