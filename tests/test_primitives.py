import pytest
import numpy as np
from shapeforge.api.primitives import *
from shapeforge.api.core import compile_to_shader_source


def test_circle_glsl():
    assert circle(10).to_glsl() == "sd_circle(p, 10.0)"

def test_integer_params_are_emitted_as_floats():
    assert "sd_ring(p, 20.0, 3.0)" == ring(20, 3).to_glsl()

def test_half_size_primitives_take_vec2():
    assert box(5, 3).to_glsl() == "sd_box(p, vec2(5.0, 3.0))"
    assert ellipse(8, 4).to_glsl() == "sd_ellipse(p, vec2(8.0, 4.0))"
    assert cross(10, 2).to_glsl() == "sd_cross(p, vec2(10.0, 2.0), 0.0)"

def test_rounded_box_uniform_radius():
    b = rounded_box(5, 3, 1)
    assert b.to_glsl() == "sd_rounded_box(p, vec2(5.0, 3.0), vec4(1.0, 1.0, 1.0, 1.0))"

def test_rounded_box_per_corner_radii():
    b = rounded_box(5, 3, (1, 2, 3, 4))
    assert b.to_glsl() == "sd_rounded_box(p, vec2(5.0, 3.0), vec4(1.0, 2.0, 3.0, 4.0))"

def test_rounded_box_rejects_wrong_radius_count():
    with pytest.raises(ValueError):
        rounded_box(5, 3, (1, 2, 3))

def test_vertex_primitives_emit_points():
    t = triangle((0, 10), (-10, -5), (10, -5))
    assert t.to_glsl() == "sd_triangle(p, vec2(0.0, 10.0), vec2(-10.0, -5.0), vec2(10.0, -5.0))"
    s = segment((0, 0), (3, 4))
    assert s.to_glsl() == "sd_segment(p, vec2(0.0, 0.0), vec2(3.0, 4.0))"

def test_bad_point_shape():
    with pytest.raises(ValueError):
        segment((0, 0, 0), (1, 1))

@pytest.mark.parametrize("shape, call", [
    (egg(10, 3), "sd_egg(p, 10.0, 3.0)"),
    (heart(10), "sd_heart(p, 10.0)"),
    (moon(5, 10, 8), "sd_moon(p, 5.0, 10.0, 8.0)"),
    (star(10, 5, 0.5), "sd_star(p, 10.0, 5.0, 0.5)"),
    (hexagon(10), "sd_hexagon(p, 10.0)"),
    (pentagon(10), "sd_pentagon(p, 10.0)"),
    (octagon(10), "sd_octagon(p, 10.0)"),
    (star5(10, 0.4), "sd_star5(p, 10.0, 0.4)"),
    (vesica(10, 6), "sd_vesica(p, 10.0, 6.0)"),
    (arc(1.5, 10, 2), "sd_arc(p, 1.5, 10.0, 2.0)"),
    (pie(0.8, 10), "sd_pie(p, 0.8, 10.0)"),
    (rounded_x(10, 2), "sd_rounded_x(p, 10.0, 2.0)"),
])
def test_parameter_primitives(shape, call):
    assert compile_to_shader_source(shape) == call

def test_every_kind_has_a_factory_case():
    assert len(PRIMITIVE_KINDS) == 20

def test_unknown_kind_raises():
    blob = Primitive('blob', [1.0])
    with pytest.raises(ValueError, match="blob"):
        blob.to_glsl()
    with pytest.raises(ValueError, match="blob"):
        blob.estimate_bounds()

def test_primitive_is_immutable():
    c = circle(10)
    with pytest.raises(AttributeError):
        c.kind = 'box'
    with pytest.raises(AttributeError):
        del c.params
    assert isinstance(c.params, tuple)

def test_points_are_read_only():
    t = triangle((0, 1), (1, 0), (0, 0))
    with pytest.raises(ValueError):
        t.points[0][0] = 5.0

def test_compile_rejects_non_nodes():
    with pytest.raises(TypeError):
        compile_to_shader_source("circle")

@pytest.mark.parametrize("radius, call", [
    (10, "sd_circle(p, 10.0)"),
    (1e16, "sd_circle(p, 1.0e+16)"),
    (0.00001, "sd_circle(p, 1.0e-05)"),
    (1.5e20, "sd_circle(p, 1.5e+20)"),
])
def test_literals_always_carry_a_decimal_point(radius, call):
    assert circle(radius).to_glsl() == call

def test_leaf_nodes_have_no_child():
    assert not hasattr(circle(1), 'child')
