import pytest
import numpy as np
from shapeforge import *
from shapeforge.api.fills import GLOW_INTENSITY_SCALE


def test_solid_pack():
    packed = solid('#ff0000').pack()
    assert packed.fill_type == 0
    assert packed.color_a.dtype == np.float32
    assert np.allclose(packed.color_a, [1, 0, 0, 1])
    assert np.allclose(packed.color_b, [0, 0, 0, 0])
    assert packed.fill_param == 0.0
    assert packed.gradient_scale is None and packed.palette is None

def test_outline_pack():
    packed = outline_fill('#00ff00', 2.5).pack()
    assert packed.fill_type == 1
    assert packed.fill_param == pytest.approx(2.5)

def test_solid_outline_pack():
    packed = solid_outline('#000000', '#ffffff', 3).pack()
    assert packed.fill_type == 2
    assert np.allclose(packed.color_a, [0, 0, 0, 1])
    assert np.allclose(packed.color_b, [1, 1, 1, 1])
    assert packed.fill_param == pytest.approx(3)

def test_gradient_pack():
    packed = gradient('#ff0000', '#0000ff', angle=90, scale=2.0).pack()
    assert packed.fill_type == 3
    assert packed.fill_param == pytest.approx(np.pi / 2, rel=1e-6)
    assert packed.gradient_scale == pytest.approx(2.0)

def test_gradient_defaults():
    g = gradient('#ff0000', '#0000ff')
    assert g.angle == 0 and g.scale == 1.0
    assert g.pack().gradient_scale == pytest.approx(1.0)

def test_glow_pack():
    packed = glow('#00ffcc', spread=10).pack()
    assert packed.fill_type == 4
    assert packed.fill_param == pytest.approx(GLOW_INTENSITY_SCALE / 10)

def test_glow_default_spread():
    assert glow('#ffffff').spread == 20

@pytest.mark.parametrize("spread", [0, -5])
def test_glow_spread_must_be_positive(spread):
    with pytest.raises(ValueError):
        glow('#ffffff', spread).pack()

def test_cosine_palette_pack():
    packed = cosine_palette((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1, 1, 1), (0.0, 0.33, 0.67)).pack()
    assert packed.fill_type == 5
    assert np.allclose(packed.color_a, [1, 1, 1, 1])
    assert packed.palette.shape == (12,)
    assert np.allclose(packed.palette, [0.5, 0.5, 0.5, 0.5, 0.5, 0.5, 1, 1, 1, 0.0, 0.33, 0.67])

def test_cosine_palette_needs_rgb_coefficients():
    with pytest.raises(ValueError):
        cosine_palette((0.5, 0.5), (0.5, 0.5, 0.5), (1, 1, 1), (0, 0, 0))

def test_every_color_is_validated():
    with pytest.raises(ColorFormatError) as exc:
        gradient('#ff0000', '#0000f').validate()
    assert exc.value.reason == 'length'
    with pytest.raises(ColorFormatError):
        solid_outline('#ffffff', 'black', 1).pack()

def test_compile_fill_rejects_unknown_objects():
    with pytest.raises(TypeError):
        compile_fill('#ff0000')

def test_solid_glsl():
    expr = solid('#ff0000').to_glsl()
    assert expr == "(d < 0.0 ? vec4(1.0, 0.0, 0.0, 1.0) : vec4(0.0))"

def test_outline_glsl():
    assert "abs(d) < 2.0" in outline_fill('#ffffff', 2).to_glsl()

def test_glow_glsl_fades_with_spread():
    expr = glow('#ffffff', 8).to_glsl()
    assert "8.0 / (max(d, 0.0) + 8.0)" in expr

def test_gradient_glsl_mixes_colors():
    expr = gradient('#ff0000', '#0000ff').to_glsl()
    assert expr.startswith("(d < 0.0 ? mix(vec4(1.0, 0.0, 0.0, 1.0), vec4(0.0, 0.0, 1.0, 1.0), ")

def test_base_fill_is_abstract():
    with pytest.raises(TypeError):
        SdfFill()
