from .core import compile_to_shader_source
from .fills import SdfFill, solid
from .loader import get_glsl_definitions, required_functions
from .utils import _glsl_format


def assemble_fragment_shader(shape, fill: SdfFill = None) -> str:
    """
    Builds a self-contained GLSL 330 fragment shader drawing one shape.

    The vertex stage is expected to pass the fragment's position relative to
    the entity origin as `v_local`. Only the helper functions the compiled
    expression calls are included.

    Args:
        shape (SDFNode): The shape tree to draw.
        fill (SdfFill, optional): How to color the shape. Defaults to solid white.

    Returns:
        str: The complete fragment shader source.
    """
    if fill is None:
        fill = solid('#ffffff')
    if not isinstance(fill, SdfFill):
        raise TypeError(f"Unknown SDF fill: {fill!r}")
    fill.validate()

    expr = compile_to_shader_source(shape)
    helpers = get_glsl_definitions(required_functions(expr))

    return f"""#version 330 core
in vec2 v_local;
uniform float u_bounds = {_glsl_format(max(shape.estimate_bounds(), 1e-6))};
uniform float u_opacity = 1.0;
out vec4 f_color;

{helpers}

float scene_distance(vec2 p) {{
    return {expr};
}}

void main() {{
    vec2 p = v_local;
    float d = scene_distance(p);
    vec4 color = {fill.to_glsl()};
    f_color = vec4(color.rgb, color.a * u_opacity);
}}
"""
