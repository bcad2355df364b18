"""Example: fill a rectangle with IH41 tiles after bending one edge."""

from isotile import EdgeShape, create_tiling

tiling = create_tiling(41)
print(f"{tiling.descriptor.name}: {tiling.num_parameters()} parameter(s), {tiling.num_aspects()} aspect(s)")

for slot in range(tiling.num_edge_shapes()):
    shape = tiling.get_edge_shape_class(slot)
    if shape is EdgeShape.J:
        tiling.set_edge_shape(slot, [(0.3, 0.15), (0.7, -0.15)])
    elif shape in (EdgeShape.S, EdgeShape.U):
        tiling.set_edge_shape(slot, [(0.3, 0.15)])

outline = tiling.tile_shape()
print(f"Tile outline has {len(outline)} points")

for tile in tiling.fill_region_bounds(0.0, 0.0, 3.0, 2.0):
    x, y = tile.transform.apply((0.0, 0.0))
    colour = tiling.get_colour(tile.t1, tile.t2, tile.aspect)
    print(f"  ({tile.t1:+d}, {tile.t2:+d}) aspect {tile.aspect} colour {colour} at ({x:.3f}, {y:.3f})")
