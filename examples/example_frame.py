from shapeforge import *

def main():
    """
    Demonstrates building a small 2D scene and flushing it as draw commands.

    This example shows how to:
    - Compose primitives with boolean operators and transforms.
    - Register entities with different fills and layers.
    - Run one frame against an in-process CommandQueue.
    """

    # --- 1. Build the shapes ---
    hull = smooth_union(3, ellipse(14, 8), circle(6).translate((0, 6)))
    ship = hull - circle(2).translate((0, 6))
    stars = repeat(star5(2, 0.5), (40, 40))

    # --- 2. Register one frame of entities ---
    queue = CommandQueue()
    registry = SdfRegistry(queue)
    with registry.frame():
        registry.create_entity(stars, solid('#ffffff80'), layer=LAYERS['BACKGROUND'], bounds=400)
        registry.create_entity(ship, gradient('#3a7bd5', '#00d2ff', angle=90),
                               position=(160, 120), layer=LAYERS['ENTITIES'], rotation=15)
        registry.create_entity(circle(4), glow('#ffcc00', spread=12),
                               position=(160, 100), layer=LAYERS['FOREGROUND'])

    # --- 3. Inspect what the renderer receives ---
    for command in queue.drain():
        print(command)

    return ship

if __name__ == '__main__':
    model = main()
    if model:
        model.export_shader('ship.frag', fill=solid('#00d2ff'))
