import numpy as np
from .core import SDFNode, COORD
from .utils import _glsl_format, _vec2

# Infinite repetition has no finite extent; the child bounds are capped at this multiple.
REPEAT_BOUNDS_FACTOR = 3.0


class Transform(SDFNode):
    """
    Repositions a child shape. Any combination of the optional fields may be
    set on a single node; they all apply to the same child.

    Args:
        child (SDFNode): The shape to transform.
        offset (tuple, optional): Translation (x, y).
        rotation (float, optional): Rotation angle in radians.
        scale_factor (float, optional): Uniform scale factor.
        mirror (bool, optional): Mirror the shape across the Y axis (x -> |x|).
        repeat_spacing (tuple, optional): Infinite grid repetition spacing (x, y).
    """
    def __init__(self, child: SDFNode, offset=None, rotation: float = None, scale_factor: float = None,
                 mirror: bool = False, repeat_spacing=None):
        super().__init__()
        if not isinstance(child, SDFNode):
            raise TypeError(f"Expected an SDFNode child, got {type(child).__name__}.")
        self.child = child
        self.offset = None if offset is None else _vec2(offset, 'offset')
        self.rotation = None if rotation is None else float(rotation)
        self.scale_factor = None if scale_factor is None else float(scale_factor)
        self.mirror = bool(mirror)
        self.repeat_spacing = None if repeat_spacing is None else _vec2(repeat_spacing, 'repeat_spacing')
        self._freeze()

    def __repr__(self):
        fields = []
        if self.mirror: fields.append("mirror=True")
        if self.repeat_spacing is not None: fields.append(f"repeat_spacing={tuple(self.repeat_spacing.tolist())}")
        if self.rotation is not None: fields.append(f"rotation={self.rotation:g}")
        if self.scale_factor is not None: fields.append(f"scale_factor={self.scale_factor:g}")
        if self.offset is not None: fields.append(f"offset={tuple(self.offset.tolist())}")
        return f"Transform({self.child!r}, {', '.join(fields)})"

    def to_glsl(self, coord: str = COORD) -> str:
        child_expr = self.child.to_glsl(build_coord_expr(self, coord))
        # Dividing the coordinate shrinks distances by the same factor.
        if self.scale_factor is not None:
            return f"({child_expr} * {_glsl_format(self.scale_factor)})"
        return child_expr

    def estimate_bounds(self) -> float:
        bounds = self.child.estimate_bounds()
        if self.offset is not None:
            bounds += float(np.sqrt(self.offset @ self.offset))
        if self.scale_factor is not None:
            bounds *= self.scale_factor
        if self.repeat_spacing is not None:
            bounds *= REPEAT_BOUNDS_FACTOR
        return bounds


def build_coord_expr(node: Transform, coord: str) -> str:
    """
    Rewrites `coord` into the child's local space.

    Fields are applied in a fixed order: mirror, repeat, rotation, scale,
    then offset. Unset fields are skipped.
    """
    if node.mirror:
        coord = f"op_symmetry_x({coord})"
    if node.repeat_spacing is not None:
        coord = f"op_repeat({coord}, {_glsl_format(node.repeat_spacing)})"
    if node.rotation is not None:
        coord = f"rotate_rad({coord}, {_glsl_format(node.rotation)})"
    if node.scale_factor is not None:
        coord = f"({coord} / {_glsl_format(node.scale_factor)})"
    if node.offset is not None:
        coord = f"({coord} - {_glsl_format(node.offset)})"
    return coord


def offset(shape: SDFNode, offset) -> SDFNode:
    """
    Moves a shape by an (x, y) vector. Positive Y moves the shape up.
    """
    return Transform(shape, offset=offset)

def rotate(shape: SDFNode, degrees: float) -> SDFNode:
    """
    Rotates a shape about its origin.

    Args:
        shape (SDFNode): The shape to rotate.
        degrees (float): The rotation angle in degrees. Stored in radians.
    """
    return Transform(shape, rotation=np.radians(degrees))

def scale(shape: SDFNode, factor: float) -> SDFNode:
    """
    Uniformly scales a shape. The distance field stays metric.

    Args:
        shape (SDFNode): The shape to scale.
        factor (float): Scale factor (>1 grows, <1 shrinks).
    """
    return Transform(shape, scale_factor=factor)

def mirror_x(shape: SDFNode) -> SDFNode:
    """Makes a shape left-right symmetric by mirroring its +X half."""
    return Transform(shape, mirror=True)

def repeat(shape: SDFNode, spacing) -> SDFNode:
    """
    Repeats a shape infinitely on a 2D grid.

    Args:
        shape (SDFNode): The shape to repeat.
        spacing (tuple): Grid cell size (x, y).
    """
    return Transform(shape, repeat_spacing=spacing)

def repeat_bounded(shape: SDFNode, spacing_x: float, spacing_y: float, count_x: int, count_y: int) -> SDFNode:
    """
    Repeats a shape on a grid clipped to a rectangular region.

    Args:
        shape (SDFNode): The shape to repeat.
        spacing_x (float): Horizontal spacing between copies.
        spacing_y (float): Vertical spacing between copies.
        count_x (int): Number of columns.
        count_y (int): Number of rows.
    """
    from .operations import intersect
    from .primitives import box
    tiled = repeat(shape, (spacing_x, spacing_y))
    return intersect(tiled, box(spacing_x * count_x / 2.0, spacing_y * count_y / 2.0))
