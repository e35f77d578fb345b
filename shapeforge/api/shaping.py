from .core import SDFNode, COORD
from .utils import _glsl_format

MODIFIER_KINDS = frozenset({'round', 'onion'})


class Modifier(SDFNode):
    """Adjusts the distance returned by a child shape."""
    def __init__(self, child: SDFNode, kind: str, amount: float):
        super().__init__()
        if not isinstance(child, SDFNode):
            raise TypeError(f"Expected an SDFNode child, got {type(child).__name__}.")
        self.child = child
        self.kind = kind
        self.amount = float(amount)
        self._freeze()

    def __repr__(self):
        return f"Modifier({self.child!r}, {self.kind!r}, {self.amount:g})"

    def to_glsl(self, coord: str = COORD) -> str:
        child_expr = self.child.to_glsl(coord)
        amount = _glsl_format(self.amount)
        if self.kind == 'round':
            return f"({child_expr} - {amount})"
        if self.kind == 'onion':
            return f"(abs({child_expr}) - {amount})"
        raise ValueError(f"Unknown SDF modifier: {self.kind!r}")

    def estimate_bounds(self) -> float:
        if self.kind not in MODIFIER_KINDS:
            raise ValueError(f"Unknown SDF modifier: {self.kind!r}")
        # Both modifiers push the boundary outward by at most `amount`.
        return self.child.estimate_bounds() + self.amount


def round(shape: SDFNode, radius: float) -> SDFNode:
    """
    Rounds a shape by growing its boundary outward.

    Args:
        shape (SDFNode): The shape to round.
        radius (float): The rounding radius.
    """
    return Modifier(shape, 'round', radius)

def onion(shape: SDFNode, thickness: float) -> SDFNode:
    """
    Hollows a shape into a shell straddling its original boundary.

    Args:
        shape (SDFNode): The shape to hollow.
        thickness (float): Half-thickness of the shell.
    """
    return Modifier(shape, 'onion', thickness)

outline = onion

def outline_n(shape: SDFNode, thickness: float, count: int) -> SDFNode:
    """
    Nests `count` onion layers, producing concentric outlines.

    Args:
        shape (SDFNode): The base shape.
        thickness (float): Thickness of each ring.
        count (int): Number of nested outlines.
    """
    result = shape
    for _ in range(count):
        result = onion(result, thickness)
    return result
