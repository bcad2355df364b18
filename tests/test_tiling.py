import math

import pytest

from isotile import (
    EdgeShape,
    InvalidEdgeSlotError,
    ParameterCountMismatchError,
    UnknownTilingTypeError,
    create_tiling,
    match_segment,
)


def test_create_tiling_uses_defaults():
    tiling = create_tiling(1)
    desc = tiling.descriptor
    assert tiling.type_id == 1
    assert tiling.num_parameters() == 4
    assert tiling.get_parameters() == desc.default_parameters
    assert tiling.num_edge_shapes() == 3
    assert [tiling.get_edge_shape_class(i) for i in range(3)] == [EdgeShape.J] * 3


def test_set_parameters_is_idempotent():
    tiling = create_tiling(1)
    params = [0.6, 0.1, 1.1, 0.3]
    tiling.set_parameters(params)
    first = (tiling.vertices(), tiling.translation_vector1(), tiling.translation_vector2(), tiling.tile_shape())
    tiling.set_parameters(params)
    second = (tiling.vertices(), tiling.translation_vector1(), tiling.translation_vector2(), tiling.tile_shape())
    assert first == second
    assert tiling.get_parameters() == tuple(params)


def test_parameters_move_vertices():
    tiling = create_tiling(41)
    before = tiling.vertices()
    tiling.set_parameters([0.2, 1.3])
    assert tiling.vertices() != before


def test_parameter_count_mismatch():
    tiling = create_tiling(41)
    with pytest.raises(ParameterCountMismatchError) as excinfo:
        tiling.set_parameters([0.1, 0.2, 0.3])
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 3
    with pytest.raises(ValueError):
        tiling.set_parameters([])
    assert tiling.get_parameters() == tiling.descriptor.default_parameters


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "0.5", None])
def test_parameters_must_be_finite_numbers(bad):
    tiling = create_tiling(41)
    with pytest.raises(ValueError):
        tiling.set_parameters([bad, 1.0])


def test_zero_parameter_type_accepts_empty_vector():
    tiling = create_tiling(77)
    assert tiling.num_parameters() == 0
    tiling.set_parameters([])
    assert tiling.get_parameters() == ()
    assert tiling.num_aspects() == 12


def test_set_type_resets_state():
    tiling = create_tiling(41)
    tiling.set_parameters([0.2, 1.3])
    tiling.set_edge_shape(0, [(0.2, 0.1), (0.8, -0.1)])
    tiling.set_type(7)
    assert tiling.type_id == 7
    assert tiling.get_parameters() == tiling.descriptor.default_parameters
    tiling.set_type(41)
    assert tiling.get_edge_shape(0) == ((1.0 / 3.0, 0.0), (2.0 / 3.0, 0.0))


def test_set_type_rejects_unknown_id_without_changing_state():
    tiling = create_tiling(41)
    with pytest.raises(UnknownTilingTypeError):
        tiling.set_type(19)
    assert tiling.type_id == 41


def test_get_vertex_and_aspect_bounds():
    tiling = create_tiling(45)
    assert tiling.get_vertex(0) == tiling.vertices()[0]
    with pytest.raises(IndexError):
        tiling.aspect_transform(tiling.num_aspects())


@pytest.mark.parametrize("type_id", [1, 7, 41, 45, 68, 91, 93])
def test_parts_follow_polygon_edges(type_id):
    tiling = create_tiling(type_id)
    desc = tiling.descriptor
    verts = tiling.vertices()
    n = len(verts)
    parts = list(tiling.parts())
    assert [p.edge_index for p in parts] == list(range(n))
    seen = set()
    for part in parts:
        i = part.edge_index
        assert part.edge_slot_id == desc.edge_shape_ids[i]
        assert part.shape_class is desc.edge_shapes[part.edge_slot_id]
        assert part.is_second_copy == (part.edge_slot_id in seen)
        seen.add(part.edge_slot_id)
        a, b = verts[i], verts[(i + 1) % n]
        ends = {part.transform.apply((0.0, 0.0)), part.transform.apply((1.0, 0.0))}
        if part.reversed:
            start, end = part.transform.apply((1.0, 0.0)), part.transform.apply((0.0, 0.0))
        else:
            start, end = part.transform.apply((0.0, 0.0)), part.transform.apply((1.0, 0.0))
        assert start == pytest.approx(a)
        assert end == pytest.approx(b)
        assert len(ends) == 2
    assert list(tiling.shape()) == parts


def test_straight_tile_shape_matches_vertices():
    for type_id in (1, 7, 41, 93):
        tiling = create_tiling(type_id)
        outline = tiling.tile_shape()
        verts = tiling.vertices()
        # Straight defaults put interior points on the edges.
        for v in verts:
            assert any(math.hypot(v[0] - p[0], v[1] - p[1]) < 1e-9 for p in outline)


def test_edge_slot_errors():
    tiling = create_tiling(41)
    with pytest.raises(InvalidEdgeSlotError):
        tiling.set_edge_shape(2, [(0.3, 0.1), (0.6, 0.1)])
    with pytest.raises(IndexError):
        tiling.get_edge_shape(-1)
    with pytest.raises(InvalidEdgeSlotError):
        tiling.get_edge_shape_class(5)


def test_edge_transform_is_frame_with_orientation():
    tiling = create_tiling(7)
    verts = tiling.vertices()
    for part in tiling.parts():
        i = part.edge_index
        frame = match_segment(verts[i], verts[(i + 1) % len(verts)])
        orientation = tiling.descriptor.edge_orientations[i]
        assert part.transform.is_close(frame @ orientation.transform)
        assert part.reversed == orientation.reversed
