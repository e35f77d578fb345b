from .api.core import SDFNode, compile_to_shader_source
from .api.utils import ColorFormatError, parse_color
from .api.primitives import (
    circle, box, rounded_box, ellipse, triangle, segment,
    egg, heart, moon, star, hexagon, pentagon, octagon,
    star5, cross, ring, vesica, arc, pie, rounded_x,
    Primitive
)
from .api.operations import union, intersect, subtract, smooth_union, smooth_subtract, BoolOp
from .api.transforms import offset, rotate, scale, mirror_x, repeat, repeat_bounded, Transform
from .api.shaping import round, onion, outline, outline_n, Modifier
from .api.fills import (
    solid, outline_fill, solid_outline, gradient, glow, cosine_palette,
    compile_fill, SdfFill, PackedFill
)
from .api.boundary import RenderBoundary, CommandQueue, SdfDrawCommand
from .api.registry import SdfRegistry, SdfEntity, LAYERS
from .api.io import assemble_fragment_shader
