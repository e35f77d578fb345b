import sys
from contextlib import contextmanager
import numpy as np

from .core import SDFNode, compile_to_shader_source
from .fills import GlowFill, compile_fill
from .utils import _vec2

# Extra bounds given to glow entities, in multiples of the glow spread.
GLOW_PADDING_FACTOR = 2.0

# Conventional layer values. Lower layers draw first; draw order within a
# layer is left to the renderer.
LAYERS = {
    'BACKGROUND': 0,
    'GROUND': 10,
    'ENTITIES': 20,
    'FOREGROUND': 30,
    'UI': 40,
}


class SdfEntity:
    """A registered, renderable shape instance. Created only by SdfRegistry."""
    def __init__(self, entity_id, shape, fill, packed, expr, position, layer, bounds, rotation, scale, opacity):
        self.id = entity_id
        self.shape = shape
        self.fill = fill
        self.packed = packed
        self.expr = expr
        self.position = position
        self.layer = layer
        self.bounds = bounds
        self.rotation = rotation
        self.scale = scale
        self.opacity = opacity

    def __repr__(self):
        return f"SdfEntity(id={self.id!r}, expr={self.expr!r}, layer={self.layer}, bounds={self.bounds:g})"


class SdfRegistry:
    """
    Owns the renderable entities of one frame and sends them to a render
    boundary on flush.

    The expected per-frame sequence is `clear()`, any number of
    `create_entity()` calls, then `flush()`. The registry never clears itself;
    `frame()` wraps that sequence in a context manager.

    Args:
        boundary (RenderBoundary, optional): Receiver of the draw calls.
                                             Without one, `flush()` does nothing.

    Example:
        >>> queue = CommandQueue()
        >>> registry = SdfRegistry(queue)
        >>> with registry.frame():
        ...     registry.create_entity(circle(10), glow('#00ffcc'), position=(100, 50))
    """
    def __init__(self, boundary=None):
        self.boundary = boundary
        self._entities = {}
        self._next_id = 1

    def create_entity(self, shape: SDFNode, fill, position=(0.0, 0.0), layer: int = 0,
                      bounds: float = None, rotation: float = 0.0, scale: float = 1.0,
                      opacity: float = 1.0) -> str:
        """
        Compiles a shape and fill into a new entity.

        Args:
            shape (SDFNode): The shape tree.
            fill (SdfFill): How the shape is colored.
            position (tuple, optional): World position. Defaults to (0, 0).
            layer (int, optional): Draw layer, see LAYERS. Defaults to 0.
            bounds (float, optional): Explicit bounding radius. Estimated from
                                      the shape when omitted.
            rotation (float, optional): Entity rotation in degrees. Defaults to 0.
            scale (float, optional): Entity scale. Defaults to 1.
            opacity (float, optional): Entity opacity. Defaults to 1.

        Returns:
            str: The new entity id, e.g. 'sdf_1'.

        Raises:
            ColorFormatError: If the fill holds a malformed color.
            ValueError: If the shape tree holds an unknown kind.
        """
        packed = compile_fill(fill)
        expr = compile_to_shader_source(shape)
        effective_bounds = float(bounds) if bounds is not None else shape.estimate_bounds()
        if isinstance(fill, GlowFill):
            effective_bounds += fill.spread * GLOW_PADDING_FACTOR

        entity_id = f"sdf_{self._next_id}"
        self._entities[entity_id] = SdfEntity(
            entity_id, shape, fill, packed, expr,
            position=_vec2(position, 'position'),
            layer=int(layer),
            bounds=effective_bounds,
            rotation=float(np.radians(rotation)),
            scale=float(scale),
            opacity=float(opacity),
        )
        self._next_id += 1
        return entity_id

    def get(self, entity_id: str):
        return self._entities.get(entity_id)

    @property
    def count(self) -> int:
        return len(self._entities)

    def __len__(self):
        return len(self._entities)

    def __iter__(self):
        return iter(list(self._entities.values()))

    def __contains__(self, entity_id):
        return entity_id in self._entities

    def clear(self):
        """Drops every entity and restarts ids at 'sdf_1'."""
        self._entities.clear()
        self._next_id = 1

    def flush(self, verbose: bool = False):
        """
        Sends every entity to the boundary in insertion order.

        Each entity produces one `draw_sdf` call, followed directly by its
        `set_gradient_scale` or `set_palette` call when the fill needs one.
        The registry itself is left untouched.
        """
        if self.boundary is None:
            if verbose:
                print("WARNING: No render boundary attached; flush skipped.", file=sys.stderr)
            return

        for entity in self._entities.values():
            packed = entity.packed
            self.boundary.draw_sdf(
                entity.expr, packed.fill_type, packed.color_a, packed.color_b, packed.fill_param,
                entity.position, entity.bounds, entity.layer, entity.rotation, entity.scale, entity.opacity
            )
            if packed.gradient_scale is not None:
                self.boundary.set_gradient_scale(packed.gradient_scale)
            if packed.palette is not None:
                self.boundary.set_palette(*packed.palette)

        if verbose:
            print(f"INFO: Flushed {len(self._entities)} SDF entities.")

    @contextmanager
    def frame(self):
        """Clears the registry, yields it, and flushes it if the block exits cleanly."""
        self.clear()
        yield self
        self.flush()
