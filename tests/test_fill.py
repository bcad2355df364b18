import itertools
import math

import numpy as np
import pytest

from isotile import (
    TILING_TYPES,
    AffineTransform,
    DegenerateTransformError,
    EdgeShape,
    EngineConfig,
    create_tiling,
    get_engine_config,
    set_engine_config,
    translation,
)
from isotile.fill import RegionFiller
from polygon_helpers import dist_to_segment, is_simple_polygon, point_in_polygon, polygon_area

BENT_CONTROL_POINTS = {
    EdgeShape.I: [],
    EdgeShape.J: [(0.3, 0.12), (0.6, -0.08)],
    EdgeShape.S: [(0.3, 0.12)],
    EdgeShape.U: [(0.3, 0.12)],
}


def _placed_polygons(tiling, tiles):
    verts = tiling.vertices()
    return [tile.transform.apply_many(verts) for tile in tiles]


def _grid(xmin, ymin, xmax, ymax, steps):
    xs = np.linspace(xmin, xmax, steps)
    ys = np.linspace(ymin, ymax, steps)
    return [(float(x), float(y)) for x, y in itertools.product(xs, ys)]


def _near_boundary(point, polygon, tol):
    n = len(polygon)
    return any(dist_to_segment(point, polygon[i], polygon[(i + 1) % n]) < tol for i in range(n))


def _bend_all_slots(tiling):
    for slot in range(tiling.num_edge_shapes()):
        tiling.set_edge_shape(slot, BENT_CONTROL_POINTS[tiling.get_edge_shape_class(slot)])


def _assert_outlines_cover_cell_sized_region(tiling):
    outline = tiling.tile_shape()
    assert is_simple_polygon(outline)
    t1 = tiling.translation_vector1()
    size = math.hypot(t1[0], t1[1])
    region = (0.13, 0.17, 0.13 + size * 2 / 3, 0.17 + size * 2 / 3)
    polygons = [tile.transform.apply_many(outline) for tile in tiling.fill_region_bounds(*region)]
    for point in _grid(*region, steps=7):
        if any(_near_boundary(point, poly, 1e-6 * size) for poly in polygons):
            continue
        hits = sum(1 for poly in polygons if point_in_polygon(point, poly))
        assert hits == 1, f"point {point} covered {hits} times"


@pytest.mark.parametrize("type_id", TILING_TYPES)
def test_fill_covers_region(type_id):
    tiling = create_tiling(type_id)
    region = (-0.3, 0.2, 1.9, 1.6)
    polygons = _placed_polygons(tiling, tiling.fill_region_bounds(*region))
    for point in _grid(*region, steps=6):
        hits = [poly for poly in polygons if point_in_polygon(point, poly)]
        if any(_near_boundary(point, poly, 1e-6) for poly in polygons):
            continue
        assert len(hits) == 1, f"point {point} covered {len(hits)} times"


def test_fill_includes_every_aspect_and_reports_second_copies():
    tiling = create_tiling(77)
    tiles = list(tiling.fill_region_bounds(0.0, 0.0, 1.0, 1.0))
    aspects = {tile.aspect for tile in tiles}
    assert aspects == set(range(12))
    for tile in tiles:
        assert tile.is_second_copy == (tile.aspect != 0)
        t1, t2 = tiling.translation_vector1(), tiling.translation_vector2()
        expected = translation(
            tile.t1 * t1[0] + tile.t2 * t2[0], tile.t1 * t1[1] + tile.t2 * t2[1]
        ) @ tiling.aspect_transform(tile.aspect)
        assert tile.transform.is_close(expected)


def test_fill_is_lazy_and_restartable():
    tiling = create_tiling(41)
    gen = tiling.fill_region_bounds(0.0, 0.0, 2.0, 2.0)
    first = next(gen)
    again = next(tiling.fill_region_bounds(0.0, 0.0, 2.0, 2.0))
    assert first == again
    assert len(list(tiling.fill_region_bounds(0.0, 0.0, 2.0, 2.0))) == len(
        list(tiling.fill_region_bounds(0.0, 0.0, 2.0, 2.0))
    )


def test_quad_fill_matches_rotated_region():
    tiling = create_tiling(1)
    corners = [(0.0, 0.0), (1.0, 1.0), (0.0, 2.0), (-1.0, 1.0)]
    polygons = _placed_polygons(tiling, tiling.fill_region_quad(*corners))
    for point in [(0.0, 0.5), (0.0, 1.0), (0.5, 1.0), (-0.5, 1.0), (0.0, 1.5)]:
        assert any(point_in_polygon(point, poly) for poly in polygons)


def test_curved_edges_widen_the_margin():
    tiling = create_tiling(41)
    tiling.set_edge_shape(0, BENT_CONTROL_POINTS[EdgeShape.J])
    outline = tiling.tile_shape()
    tiles = list(tiling.fill_region_bounds(0.0, 0.0, 1.0, 1.0))
    placed = [tile.transform.apply_many(outline) for tile in tiles]
    for point in _grid(0.05, 0.05, 0.95, 0.95, steps=5):
        assert any(point_in_polygon(point, poly) for poly in placed)


def test_empty_rectangle_raises():
    tiling = create_tiling(41)
    with pytest.raises(ValueError):
        tiling.fill_region_bounds(1.0, 0.0, 0.0, 1.0)


def test_degenerate_lattice_raises():
    filler = RegionFiller((1.0, 0.0), (2.0, 0.0), [AffineTransform()], [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)])
    with pytest.raises(DegenerateTransformError):
        list(filler.fill_bounds(0.0, 0.0, 1.0, 1.0))


def test_fill_margin_comes_from_config():
    tiling = create_tiling(41)
    baseline = len(list(tiling.fill_region_bounds(0.0, 0.0, 1.0, 1.0)))
    original = get_engine_config()
    try:
        set_engine_config(EngineConfig(fill_margin=3.0))
        widened = len(list(tiling.fill_region_bounds(0.0, 0.0, 1.0, 1.0)))
    finally:
        set_engine_config(original)
    assert widened > baseline


@pytest.mark.parametrize("type_id", TILING_TYPES)
def test_bent_edges_still_tile_the_plane(type_id):
    tiling = create_tiling(type_id)
    _bend_all_slots(tiling)
    _assert_outlines_cover_cell_sized_region(tiling)


@pytest.mark.parametrize("type_id", TILING_TYPES)
def test_perturbed_parameters_keep_a_valid_tiling(type_id):
    tiling = create_tiling(type_id)
    params = [p + (0.05 if i % 2 == 0 else -0.05) for i, p in enumerate(tiling.get_parameters())]
    tiling.set_parameters(params)
    _bend_all_slots(tiling)

    vertices = tiling.vertices()
    assert is_simple_polygon(vertices)
    (t1x, t1y), (t2x, t2y) = tiling.translation_vector1(), tiling.translation_vector2()
    cell = abs(t1x * t2y - t1y * t2x)
    assert abs(polygon_area(vertices)) * tiling.num_aspects() == pytest.approx(cell, rel=1e-9)
    _assert_outlines_cover_cell_sized_region(tiling)
