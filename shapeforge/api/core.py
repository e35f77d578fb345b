from abc import ABC, abstractmethod

# The symbolic input coordinate every compiled expression is written against.
COORD = "p"


class SDFNode(ABC):
    """
    Abstract base class for all nodes of a 2D SDF shape tree.

    Nodes are immutable: every attribute is set in `__init__`, after which
    the node is frozen and any further assignment raises AttributeError.
    """

    def _freeze(self):
        object.__setattr__(self, '_frozen', True)

    def __setattr__(self, name, value):
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{type(self).__name__} nodes are immutable; cannot set '{name}'.")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{type(self).__name__} nodes are immutable; cannot delete '{name}'.")
        super().__delattr__(name)

    @abstractmethod
    def to_glsl(self, coord: str = COORD) -> str:
        """
        Returns a GLSL expression computing the signed distance to this
        shape, evaluated at the symbolic 2D coordinate `coord`.
        """
        raise NotImplementedError

    @abstractmethod
    def estimate_bounds(self) -> float:
        """
        Returns a conservative half-extent of the shape, measured from its
        local origin. It may overestimate but never underestimates.
        """
        raise NotImplementedError

    def export_shader(self, path: str, fill=None):
        """
        Exports a self-contained GLSL fragment shader for this shape.

        Args:
            path (str): The file path to write (e.g., 'shape.frag').
            fill (SdfFill, optional): How to color the shape. Defaults to a
                                      solid white fill.
        """
        from .io import assemble_fragment_shader
        shader_code = assemble_fragment_shader(self, fill)
        with open(path, 'w') as f:
            f.write(shader_code)
        print(f"SUCCESS: Shader exported to '{path}'.")

    # --- Boolean Operations ---
    def union(self, *others) -> 'SDFNode':
        """Creates the union of this shape and one or more others."""
        from .operations import union
        return union(self, *others)

    def intersect(self, *others) -> 'SDFNode':
        """Creates the intersection of this shape and one or more others."""
        from .operations import intersect
        return intersect(self, *others)

    def subtract(self, *cutouts) -> 'SDFNode':
        """Cuts one or more shapes out of this one."""
        from .operations import subtract
        return subtract(self, *cutouts)

    def smooth_union(self, *others, blend: float) -> 'SDFNode':
        from .operations import smooth_union
        return smooth_union(blend, self, *others)

    def smooth_subtract(self, *cutouts, blend: float) -> 'SDFNode':
        from .operations import smooth_subtract
        return smooth_subtract(blend, self, *cutouts)

    def __or__(self, other): return self.union(other)
    def __and__(self, other): return self.intersect(other)
    def __sub__(self, other): return self.subtract(other)

    # --- Transformations ---
    def translate(self, offset) -> 'SDFNode':
        from .transforms import offset as offset_func
        return offset_func(self, offset)

    def rotate(self, degrees: float) -> 'SDFNode':
        from .transforms import rotate
        return rotate(self, degrees)

    def scale(self, factor: float) -> 'SDFNode':
        from .transforms import scale
        return scale(self, factor)

    def mirror_x(self) -> 'SDFNode':
        from .transforms import mirror_x
        return mirror_x(self)

    def repeat(self, spacing) -> 'SDFNode':
        from .transforms import repeat
        return repeat(self, spacing)

    # --- Modifiers ---
    def round(self, radius: float) -> 'SDFNode':
        from .shaping import round as round_func
        return round_func(self, radius)

    def onion(self, thickness: float) -> 'SDFNode':
        from .shaping import onion
        return onion(self, thickness)


def compile_to_shader_source(node: SDFNode) -> str:
    """
    Compiles a shape tree into a single GLSL distance expression.

    The expression reads the 2D input coordinate from a variable named `p`.

    Example:
        >>> compile_to_shader_source(circle(10))
        'sd_circle(p, 10.0)'
        >>> compile_to_shader_source(offset(circle(10), (20, 30)))
        'sd_circle((p - vec2(20.0, 30.0)), 10.0)'
    """
    if not isinstance(node, SDFNode):
        raise TypeError(f"Expected an SDFNode, got {type(node).__name__}.")
    return node.to_glsl(COORD)