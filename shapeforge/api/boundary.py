from abc import ABC, abstractmethod
import numpy as np


class RenderBoundary(ABC):
    """
    The renderer's side of the draw protocol.

    Every entity produces exactly one `draw_sdf` call per flush. Gradient and
    cosine palette fills follow it immediately with a secondary call that
    refers to the command just issued.
    """

    @abstractmethod
    def draw_sdf(self, expr: str, fill_type: int, color_a, color_b, fill_param: float,
                 position, bounds: float, layer: int, rotation: float, scale: float, opacity: float):
        raise NotImplementedError

    @abstractmethod
    def set_gradient_scale(self, scale: float):
        raise NotImplementedError

    @abstractmethod
    def set_palette(self, a0, a1, a2, b0, b1, b2, c0, c1, c2, d0, d1, d2):
        raise NotImplementedError


class SdfDrawCommand:
    """A single queued draw. `palette` holds the 12 cosine coefficients when set."""
    def __init__(self, expr, fill_type, color_a, color_b, fill_param, position, bounds,
                 layer, rotation, scale, opacity):
        self.expr = expr
        self.fill_type = int(fill_type)
        self.color_a = np.array(color_a, dtype=np.float32)
        self.color_b = np.array(color_b, dtype=np.float32)
        self.fill_param = float(fill_param)
        self.position = np.array(position, dtype=float)
        self.bounds = float(bounds)
        self.layer = int(layer)
        self.rotation = float(rotation)
        self.scale = float(scale)
        self.opacity = float(opacity)
        self.gradient_scale = 1.0
        self.palette = None

    def __repr__(self):
        return (f"SdfDrawCommand(expr={self.expr!r}, fill_type={self.fill_type}, "
                f"layer={self.layer}, bounds={self.bounds:g})")


class CommandQueue(RenderBoundary):
    """
    Collects draw commands in issue order for a renderer to consume.

    Secondary calls patch the most recently queued command; one arriving
    with nothing queued is ignored.
    """
    def __init__(self):
        self.commands = []

    def draw_sdf(self, expr, fill_type, color_a, color_b, fill_param, position, bounds,
                 layer, rotation, scale, opacity):
        self.commands.append(SdfDrawCommand(
            expr, fill_type, color_a, color_b, fill_param, position, bounds,
            layer, rotation, scale, opacity
        ))

    def set_gradient_scale(self, scale):
        if self.commands:
            self.commands[-1].gradient_scale = float(scale)

    def set_palette(self, *coefficients):
        if len(coefficients) != 12:
            raise ValueError(f"set_palette() expects 12 coefficients, got {len(coefficients)}.")
        if self.commands:
            self.commands[-1].palette = np.array(coefficients, dtype=np.float32)

    def drain(self) -> list:
        """Returns the queued commands and empties the queue."""
        commands, self.commands = self.commands, []
        return commands

    def __len__(self):
        return len(self.commands)
