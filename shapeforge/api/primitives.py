import numpy as np
from .core import SDFNode, COORD
from .utils import _glsl_format, _vec2

# 10% margin applied wherever a primitive's extent is known exactly.
BOUNDS_MARGIN = 1.1
# The heart overshoots its size parameter by up to half again.
HEART_MARGIN = 1.5


def _params_call(func_name):
    def emit(node, coord):
        args = ", ".join(_glsl_format(v) for v in node.params)
        return f"{func_name}({coord}, {args})"
    return emit

def _points_call(func_name):
    def emit(node, coord):
        args = ", ".join(_glsl_format(pt) for pt in node.points)
        return f"{func_name}({coord}, {args})"
    return emit

def _half_size_call(func_name):
    def emit(node, coord):
        w, h = node.params[:2]
        rest = "".join(f", {_glsl_format(v)}" for v in node.params[2:])
        return f"{func_name}({coord}, {_glsl_format((w, h))}{rest})"
    return emit

def _rounded_box_call(node, coord):
    p = node.params
    return f"sd_rounded_box({coord}, {_glsl_format(p[:2])}, {_glsl_format(p[2:6])})"


# kind -> GLSL call emitter
_GLSL_EMITTERS = {
    'circle': _params_call('sd_circle'),
    'box': _half_size_call('sd_box'),
    'rounded_box': _rounded_box_call,
    'ellipse': _half_size_call('sd_ellipse'),
    'triangle': _points_call('sd_triangle'),
    'segment': _points_call('sd_segment'),
    'egg': _params_call('sd_egg'),
    'heart': _params_call('sd_heart'),
    'moon': _params_call('sd_moon'),
    'star': _params_call('sd_star'),
    'hexagon': _params_call('sd_hexagon'),
    'pentagon': _params_call('sd_pentagon'),
    'octagon': _params_call('sd_octagon'),
    'star5': _params_call('sd_star5'),
    'cross': _half_size_call('sd_cross'),
    'ring': _params_call('sd_ring'),
    'vesica': _params_call('sd_vesica'),
    'arc': _params_call('sd_arc'),
    'pie': _params_call('sd_pie'),
    'rounded_x': _params_call('sd_rounded_x'),
}


def _farthest_vertex(node):
    return float(np.max(np.linalg.norm(np.asarray(node.points), axis=1))) * BOUNDS_MARGIN

def _circumradius(sides):
    # Regular polygon helpers take the apothem; corners sit further out.
    return lambda n: n.params[0] / np.cos(np.pi / sides) * BOUNDS_MARGIN

# kind -> half-extent estimator
_BOUNDS = {
    'circle': lambda n: n.params[0] * BOUNDS_MARGIN,
    'box': lambda n: max(n.params[0], n.params[1]) * BOUNDS_MARGIN,
    'rounded_box': lambda n: max(n.params[0], n.params[1]) * BOUNDS_MARGIN,
    'ellipse': lambda n: max(n.params[0], n.params[1]) * BOUNDS_MARGIN,
    'triangle': _farthest_vertex,
    'segment': _farthest_vertex,
    'egg': lambda n: (n.params[0] + n.params[1]) * BOUNDS_MARGIN,
    'heart': lambda n: n.params[0] * HEART_MARGIN,
    'moon': lambda n: max(n.params[1], n.params[2]) * BOUNDS_MARGIN,
    'star': lambda n: n.params[0] * BOUNDS_MARGIN,
    'hexagon': _circumradius(6),
    'pentagon': _circumradius(5),
    'octagon': _circumradius(8),
    'cross': lambda n: max(n.params[0], n.params[1]) * BOUNDS_MARGIN,
    'ring': lambda n: (n.params[0] + n.params[1]) * BOUNDS_MARGIN,
    'star5': lambda n: n.params[0] * BOUNDS_MARGIN,
    'vesica': lambda n: n.params[0] * BOUNDS_MARGIN,
    # outer edge sits at radius + thickness
    'arc': lambda n: (n.params[1] + n.params[2]) * BOUNDS_MARGIN,
    'pie': lambda n: n.params[1] * BOUNDS_MARGIN,
    'rounded_x': lambda n: (n.params[0] + n.params[1]) * BOUNDS_MARGIN,
}

PRIMITIVE_KINDS = frozenset(_GLSL_EMITTERS)


class Primitive(SDFNode):
    """A single geometric shape, evaluated by one `sd_<kind>` helper call."""
    def __init__(self, kind: str, params=(), points=None):
        super().__init__()
        self.kind = kind
        self.params = tuple(float(v) for v in params)
        self.points = None if points is None else tuple(_vec2(pt, 'point') for pt in points)
        self._freeze()

    def __repr__(self):
        if self.points is not None:
            pts = ", ".join(f"({pt[0]:g}, {pt[1]:g})" for pt in self.points)
            return f"Primitive({self.kind!r}, points=[{pts}])"
        return f"Primitive({self.kind!r}, {list(self.params)})"

    def to_glsl(self, coord: str = COORD) -> str:
        emitter = _GLSL_EMITTERS.get(self.kind)
        if emitter is None:
            raise ValueError(f"Unknown SDF primitive kind: {self.kind!r}")
        return emitter(self, coord)

    def estimate_bounds(self) -> float:
        estimator = _BOUNDS.get(self.kind)
        if estimator is None:
            raise ValueError(f"Unknown SDF primitive kind: {self.kind!r}")
        return float(estimator(self))


# --- Factories ---

def circle(radius: float) -> SDFNode:
    """
    Creates a circle centered at the origin.

    Args:
        radius (float): The circle radius.
    """
    return Primitive('circle', [radius])

def box(width: float, height: float) -> SDFNode:
    """
    Creates an axis-aligned box centered at the origin.

    Args:
        width (float): Half-width of the box.
        height (float): Half-height of the box.
    """
    return Primitive('box', [width, height])

def rounded_box(width: float, height: float, radius) -> SDFNode:
    """
    Creates a box with rounded corners.

    Args:
        width (float): Half-width of the box.
        height (float): Half-height of the box.
        radius (float or tuple): A uniform corner radius, or per-corner radii
                                 ordered (top_left, top_right, bottom_right, bottom_left).
    """
    if np.ndim(radius) == 0:
        radii = (radius, radius, radius, radius)
    else:
        radii = tuple(radius)
        if len(radii) != 4:
            raise ValueError("rounded_box() takes a single radius or exactly 4 corner radii.")
    return Primitive('rounded_box', [width, height, *radii])

def ellipse(width: float, height: float) -> SDFNode:
    """
    Creates an axis-aligned ellipse.

    Args:
        width (float): Semi-axis along X.
        height (float): Semi-axis along Y.
    """
    return Primitive('ellipse', [width, height])

def triangle(p0, p1, p2) -> SDFNode:
    """
    Creates a triangle from three (x, y) vertices.
    """
    return Primitive('triangle', points=[p0, p1, p2])

def segment(start, end) -> SDFNode:
    """
    Creates a zero-width line segment between two (x, y) points. Combine it
    with `round()` to give it thickness.
    """
    return Primitive('segment', points=[start, end])

def egg(ra: float, rb: float) -> SDFNode:
    """
    Creates an egg shape.

    Args:
        ra (float): The main radius.
        rb (float): The bulge of the narrow end.
    """
    return Primitive('egg', [ra, rb])

def heart(size: float) -> SDFNode:
    return Primitive('heart', [size])

def moon(d: float, ra: float, rb: float) -> SDFNode:
    """
    Creates a crescent moon.

    Args:
        d (float): Distance between the two circle centers.
        ra (float): Radius of the outer circle.
        rb (float): Radius of the inner (cut) circle.
    """
    return Primitive('moon', [d, ra, rb])

def star(radius: float, points: int, inner_ratio: float) -> SDFNode:
    """
    Creates an n-pointed star.

    Args:
        radius (float): Outer radius, measured to the tips.
        points (int): Number of tips.
        inner_ratio (float): Inner valley radius as a fraction of `radius`.
    """
    return Primitive('star', [radius, points, inner_ratio])

def hexagon(radius: float) -> SDFNode:
    return Primitive('hexagon', [radius])

def pentagon(radius: float) -> SDFNode:
    return Primitive('pentagon', [radius])

def octagon(radius: float) -> SDFNode:
    return Primitive('octagon', [radius])

def star5(radius: float, inner_factor: float) -> SDFNode:
    """
    Creates a regular five-pointed star.

    Args:
        radius (float): Outer radius.
        inner_factor (float): How deep the valleys between tips are cut (0-1).
    """
    return Primitive('star5', [radius, inner_factor])

def cross(width: float, height: float, radius: float = 0.0) -> SDFNode:
    """
    Creates a plus-shaped cross.

    Args:
        width (float): Half-length of each arm.
        height (float): Half-thickness of each arm.
        radius (float, optional): Corner rounding. Defaults to 0.0.
    """
    return Primitive('cross', [width, height, radius])

def ring(radius: float, width: float) -> SDFNode:
    """
    Creates an annulus.

    Args:
        radius (float): Radius of the ring's center line.
        width (float): Distance from the center line to either edge.
    """
    return Primitive('ring', [radius, width])

def vesica(radius: float, distance: float) -> SDFNode:
    """
    Creates a vesica (the lens where two circles overlap).

    Args:
        radius (float): Radius of both circles.
        distance (float): Half the distance between the circle centers.
    """
    return Primitive('vesica', [radius, distance])

def arc(aperture: float, radius: float, thickness: float) -> SDFNode:
    """
    Creates a circular arc stroke, symmetric about the Y axis.

    Args:
        aperture (float): Half the arc's opening angle, in radians.
        radius (float): Radius of the arc's center line.
        thickness (float): Stroke half-thickness.
    """
    return Primitive('arc', [aperture, radius, thickness])

def pie(aperture: float, radius: float) -> SDFNode:
    """
    Creates a pie slice, symmetric about the Y axis.

    Args:
        aperture (float): Half the slice's opening angle, in radians.
        radius (float): The slice radius.
    """
    return Primitive('pie', [aperture, radius])

def rounded_x(width: float, radius: float) -> SDFNode:
    """
    Creates a diagonal X with rounded strokes.

    Args:
        width (float): Length of each stroke from the center.
        radius (float): Stroke radius.
    """
    return Primitive('rounded_x', [width, radius])
