from abc import ABC, abstractmethod
import numpy as np
from .utils import _glsl_format, parse_color

# Glow intensity handed to the renderer is this constant divided by the spread.
GLOW_INTENSITY_SCALE = 30.0

# Fill discriminants understood by the render boundary.
FILL_SOLID = 0
FILL_OUTLINE = 1
FILL_SOLID_OUTLINE = 2
FILL_GRADIENT = 3
FILL_GLOW = 4
FILL_COSINE_PALETTE = 5

_WHITE = (1.0, 1.0, 1.0, 1.0)
_CLEAR = (0.0, 0.0, 0.0, 0.0)
_TRANSPARENT = "vec4(0.0)"


class PackedFill:
    """
    The fill as the render boundary consumes it.

    `gradient_scale` and `palette` are only set for gradient and cosine
    palette fills; they travel in a secondary call issued right after the
    entity's draw call.
    """
    def __init__(self, fill_type: int, color_a=_WHITE, color_b=_CLEAR, fill_param: float = 0.0,
                 gradient_scale: float = None, palette=None):
        self.fill_type = fill_type
        self.color_a = np.asarray(color_a, dtype=np.float32)
        self.color_b = np.asarray(color_b, dtype=np.float32)
        self.fill_param = np.float32(fill_param)
        self.gradient_scale = None if gradient_scale is None else np.float32(gradient_scale)
        self.palette = None if palette is None else np.asarray(palette, dtype=np.float32).reshape(12)

    def __repr__(self):
        return (f"PackedFill(fill_type={self.fill_type}, color_a={self.color_a.tolist()}, "
                f"color_b={self.color_b.tolist()}, fill_param={float(self.fill_param):g})")


class SdfFill(ABC):
    """Base class for the rules mapping a signed distance to a color."""
    type = None

    def colors(self) -> list:
        """Returns every hex color string embedded in the fill."""
        return []

    def validate(self):
        """Parses every embedded color; raises ColorFormatError on the first bad one."""
        for color in self.colors():
            parse_color(color)

    @abstractmethod
    def to_glsl(self) -> str:
        """
        Returns a GLSL expression producing the output `vec4` color from the
        distance `d` and the local coordinate `p`. Fills that scale with the
        entity read its bounding radius from `u_bounds`.
        """
        raise NotImplementedError

    @abstractmethod
    def pack(self) -> PackedFill:
        raise NotImplementedError

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class SolidFill(SdfFill):
    type = 'solid'
    def __init__(self, color: str):
        self.color = color
    def colors(self): return [self.color]
    def to_glsl(self) -> str:
        rgba = _glsl_format(parse_color(self.color))
        return f"(d < 0.0 ? {rgba} : {_TRANSPARENT})"
    def pack(self) -> PackedFill:
        self.validate()
        return PackedFill(FILL_SOLID, parse_color(self.color))


class OutlineFill(SdfFill):
    type = 'outline'
    def __init__(self, color: str, thickness: float):
        self.color = color
        self.thickness = thickness
    def colors(self): return [self.color]
    def to_glsl(self) -> str:
        rgba = _glsl_format(parse_color(self.color))
        return f"(abs(d) < {_glsl_format(self.thickness)} ? {rgba} : {_TRANSPARENT})"
    def pack(self) -> PackedFill:
        self.validate()
        return PackedFill(FILL_OUTLINE, parse_color(self.color), fill_param=self.thickness)


class SolidOutlineFill(SdfFill):
    type = 'solid_outline'
    def __init__(self, fill_color: str, outline_color: str, thickness: float):
        self.fill_color = fill_color
        self.outline_color = outline_color
        self.thickness = thickness
    def colors(self): return [self.fill_color, self.outline_color]
    def to_glsl(self) -> str:
        inner = _glsl_format(parse_color(self.fill_color))
        edge = _glsl_format(parse_color(self.outline_color))
        t = _glsl_format(self.thickness)
        return f"(d < 0.0 ? {inner} : (d < {t} ? {edge} : {_TRANSPARENT}))"
    def pack(self) -> PackedFill:
        self.validate()
        return PackedFill(FILL_SOLID_OUTLINE, parse_color(self.fill_color), parse_color(self.outline_color),
                          fill_param=self.thickness)


class GradientFill(SdfFill):
    """
    A linear gradient across the shape. An angle of 0 runs left to right,
    90 runs bottom to top. A scale above 1 squeezes the gradient into a
    smaller region.
    """
    type = 'gradient'
    def __init__(self, start: str, end: str, angle: float = 0.0, scale: float = 1.0):
        self.start = start
        self.end = end
        self.angle = angle
        self.scale = scale

    @property
    def angle_radians(self) -> float:
        return float(np.radians(self.angle))

    def colors(self): return [self.start, self.end]
    def to_glsl(self) -> str:
        a = _glsl_format(parse_color(self.start))
        b = _glsl_format(parse_color(self.end))
        rad = _glsl_format(self.angle_radians)
        t = (f"clamp(dot(p / u_bounds, vec2(cos({rad}), sin({rad}))) * {_glsl_format(self.scale)} * 0.5 + 0.5, "
             f"0.0, 1.0)")
        return f"(d < 0.0 ? mix({a}, {b}, {t}) : {_TRANSPARENT})"
    def pack(self) -> PackedFill:
        self.validate()
        return PackedFill(FILL_GRADIENT, parse_color(self.start), parse_color(self.end),
                          fill_param=self.angle_radians, gradient_scale=self.scale)


class GlowFill(SdfFill):
    """Solid inside the shape, fading out over `spread` units beyond its edge."""
    type = 'glow'
    def __init__(self, color: str, spread: float = 20.0):
        self.color = color
        self.spread = spread
    def colors(self): return [self.color]
    def validate(self):
        super().validate()
        if not isinstance(self.spread, (int, float, np.number)) or not self.spread > 0:
            raise ValueError(f"Glow spread must be a positive number, got {self.spread!r}.")
    def to_glsl(self) -> str:
        r, g, b, a = (_glsl_format(c) for c in parse_color(self.color))
        s = _glsl_format(self.spread)
        return f"vec4({r}, {g}, {b}, {a} * clamp({s} / (max(d, 0.0) + {s}), 0.0, 1.0))"
    def pack(self) -> PackedFill:
        self.validate()
        return PackedFill(FILL_GLOW, parse_color(self.color), fill_param=GLOW_INTENSITY_SCALE / self.spread)


class CosinePaletteFill(SdfFill):
    """
    Colors the shape with `a + b * cos(2*pi * (c*t + d))`, where t follows the
    signed distance. Each coefficient is an RGB 3-vector.
    """
    type = 'cosine_palette'
    def __init__(self, a, b, c, d):
        self.a, self.b, self.c, self.d = (tuple(float(v) for v in vec) for vec in (a, b, c, d))
        for name, vec in zip('abcd', (self.a, self.b, self.c, self.d)):
            if len(vec) != 3:
                raise ValueError(f"Cosine palette coefficient '{name}' must have 3 components, got {len(vec)}.")
    def to_glsl(self) -> str:
        a, b, c, d = (_glsl_format(v) for v in (self.a, self.b, self.c, self.d))
        return f"(d < 0.0 ? vec4({a} + {b} * cos(6.28318 * ({c} * (d / u_bounds) + {d})), 1.0) : {_TRANSPARENT})"
    def pack(self) -> PackedFill:
        self.validate()
        return PackedFill(FILL_COSINE_PALETTE, palette=self.a + self.b + self.c + self.d)


def compile_fill(fill: SdfFill) -> PackedFill:
    """Validates a fill and packs it for the render boundary."""
    if not isinstance(fill, SdfFill):
        raise TypeError(f"Unknown SDF fill: {fill!r}")
    return fill.pack()


# --- Factories ---

def solid(color: str) -> SdfFill:
    """
    Creates a solid color fill.

    Args:
        color (str): Hex color string (e.g., '#ff0000').
    """
    return SolidFill(color)

def outline_fill(color: str, thickness: float) -> SdfFill:
    """
    Draws only a band of the given thickness around the shape's edge.
    """
    return OutlineFill(color, thickness)

def solid_outline(fill_color: str, outline_color: str, thickness: float) -> SdfFill:
    """
    Fills the shape and strokes its edge.

    Args:
        fill_color (str): Interior hex color.
        outline_color (str): Stroke hex color.
        thickness (float): Stroke thickness.
    """
    return SolidOutlineFill(fill_color, outline_color, thickness)

def gradient(start: str, end: str, angle: float = 0.0, scale: float = 1.0) -> SdfFill:
    """
    Creates a linear gradient fill.

    Args:
        start (str): Start hex color.
        end (str): End hex color.
        angle (float, optional): Direction in degrees. Defaults to 0 (left to right).
        scale (float, optional): Gradient mapping scale. Defaults to 1.0.
    """
    return GradientFill(start, end, angle, scale)

def glow(color: str, spread: float = 20.0) -> SdfFill:
    """
    Creates a glow fill. Entities using it get `2 * spread` of extra bounds
    so the halo is not clipped.

    Args:
        color (str): Hex color string.
        spread (float, optional): Glow falloff distance. Defaults to 20.
    """
    return GlowFill(color, spread)

def cosine_palette(a, b, c, d) -> SdfFill:
    """
    Creates a cosine palette fill.

    Example:
        >>> rainbow = cosine_palette((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1, 1, 1), (0.0, 0.33, 0.67))
    """
    return CosinePaletteFill(a, b, c, d)
