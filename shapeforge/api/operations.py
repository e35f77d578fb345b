from functools import reduce
from .core import SDFNode, COORD
from .utils import _glsl_format

SMOOTH_OPS = frozenset({'smooth_union', 'smooth_subtract'})

# op -> fold step combining the running expression `a` with the next child `b`
_FOLDS = {
    'union': lambda a, b, k: f"min({a}, {b})",
    'intersect': lambda a, b, k: f"max({a}, {b})",
    'subtract': lambda a, b, k: f"max(-({b}), {a})",
    'smooth_union': lambda a, b, k: f"op_smooth_union({a}, {b}, {k})",
    'smooth_subtract': lambda a, b, k: f"op_smooth_subtract({a}, {b}, {k})",
}

BOOL_OPS = frozenset(_FOLDS)


class BoolOp(SDFNode):
    """
    Combines two or more child shapes.

    For 'subtract' and 'smooth_subtract' the first child is the base and
    every following child is a cutout, applied in order.
    """
    def __init__(self, op: str, children, blend: float = None):
        super().__init__()
        children = tuple(children)
        if len(children) < 2:
            raise ValueError(f"A '{op}' operation requires at least 2 shapes, got {len(children)}.")
        for c in children:
            if not isinstance(c, SDFNode):
                raise TypeError(f"Expected SDFNode children, got {type(c).__name__}.")
        if op in SMOOTH_OPS:
            if blend is None:
                raise ValueError(f"A '{op}' operation requires a blend factor.")
            if not blend > 0:
                raise ValueError(f"A '{op}' blend factor must be positive, got {blend!r}.")
        self.op = op
        self.children = children
        self.blend = None if blend is None else float(blend)
        self._freeze()

    def __repr__(self):
        blend = f", blend={self.blend:g}" if self.blend is not None else ""
        return f"BoolOp({self.op!r}, {list(self.children)}{blend})"

    def to_glsl(self, coord: str = COORD) -> str:
        fold = _FOLDS.get(self.op)
        if fold is None:
            raise ValueError(f"Unknown SDF operation: {self.op!r}")
        k = _glsl_format(self.blend) if self.op in SMOOTH_OPS else None
        child_exprs = [c.to_glsl(coord) for c in self.children]
        return reduce(lambda a, b: fold(a, b, k), child_exprs)

    def estimate_bounds(self) -> float:
        if self.op not in BOOL_OPS:
            raise ValueError(f"Unknown SDF operation: {self.op!r}")
        # Cutting material away never grows the base shape.
        if self.op == 'subtract':
            return self.children[0].estimate_bounds()
        widest = max(c.estimate_bounds() for c in self.children)
        if self.op in SMOOTH_OPS:
            widest += self.blend
        return widest


def union(*shapes: SDFNode) -> SDFNode:
    """
    Combines shapes with a union (minimum distance).

    Args:
        *shapes (SDFNode): Two or more shapes.
    """
    if len(shapes) < 2:
        raise ValueError("union() requires at least 2 shapes.")
    return BoolOp('union', shapes)

def intersect(*shapes: SDFNode) -> SDFNode:
    """
    Keeps only the region common to all shapes (maximum distance).

    Args:
        *shapes (SDFNode): Two or more shapes.
    """
    if len(shapes) < 2:
        raise ValueError("intersect() requires at least 2 shapes.")
    return BoolOp('intersect', shapes)

def subtract(base: SDFNode, *cutouts: SDFNode) -> SDFNode:
    """
    Cuts one or more shapes out of a base shape.

    Args:
        base (SDFNode): The shape to cut from.
        *cutouts (SDFNode): One or more shapes to remove, applied in order.
    """
    if len(cutouts) < 1:
        raise ValueError("subtract() requires at least 1 cutout shape.")
    return BoolOp('subtract', (base,) + cutouts)

def smooth_union(blend: float, *shapes: SDFNode) -> SDFNode:
    """
    Unions shapes with a rounded fillet where they meet.

    Args:
        blend (float): The blend radius. Larger values give a softer seam.
        *shapes (SDFNode): Two or more shapes.
    """
    if len(shapes) < 2:
        raise ValueError("smooth_union() requires at least 2 shapes.")
    return BoolOp('smooth_union', shapes, blend=blend)

def smooth_subtract(blend: float, base: SDFNode, *cutouts: SDFNode) -> SDFNode:
    """
    Subtracts cutouts from a base with a rounded fillet along the cut.

    Args:
        blend (float): The blend radius.
        base (SDFNode): The shape to cut from.
        *cutouts (SDFNode): One or more shapes to remove.
    """
    if len(cutouts) < 1:
        raise ValueError("smooth_subtract() requires at least 1 cutout shape.")
    return BoolOp('smooth_subtract', (base,) + cutouts, blend=blend)
