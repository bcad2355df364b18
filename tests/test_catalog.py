import json

import pytest

from isotile import (
    NUM_TYPES,
    TILING_TYPES,
    EdgeShape,
    UnknownTilingTypeError,
    create_tiling,
    describe_tiling_type,
    get_tiling_type,
    iter_tiling_types,
    next_tiling_type,
    previous_tiling_type,
)
from polygon_helpers import is_simple_polygon, polygon_area

UNPOPULATED = (19, 35, 48, 60, 63, 65, 70, 75, 80, 87, 89, 92)


def test_catalog_has_81_types():
    assert NUM_TYPES == 81
    assert TILING_TYPES == tuple(i for i in range(1, 94) if i not in UNPOPULATED)
    assert [d.type_id for d in iter_tiling_types()] == list(TILING_TYPES)


@pytest.mark.parametrize("type_id", UNPOPULATED + (0, 94, -1, 1000))
def test_unknown_ids_raise(type_id):
    with pytest.raises(UnknownTilingTypeError):
        get_tiling_type(type_id)
    with pytest.raises(LookupError):
        create_tiling(type_id)


@pytest.mark.parametrize("type_id", [True, 1.0, "1", None])
def test_non_integer_ids_raise(type_id):
    with pytest.raises(UnknownTilingTypeError):
        get_tiling_type(type_id)


def test_descriptors_are_shared_and_read_only():
    desc = get_tiling_type(41)
    assert get_tiling_type(41) is desc
    assert desc.name == "IH41"
    with pytest.raises(ValueError):
        desc.vertex_coefficients[0, 0] = 5.0
    with pytest.raises(AttributeError):
        desc.num_aspects = 3


def test_next_and_previous_skip_gaps_and_stop_at_the_ends():
    assert next_tiling_type(18) == 20
    assert previous_tiling_type(20) == 18
    assert next_tiling_type(91) == 93
    assert next_tiling_type(93) == 93
    assert previous_tiling_type(2) == 1
    assert previous_tiling_type(1) == 1
    with pytest.raises(UnknownTilingTypeError):
        next_tiling_type(19)


@pytest.mark.parametrize("type_id", TILING_TYPES)
def test_descriptor_is_consistent(type_id):
    desc = get_tiling_type(type_id)
    assert 3 <= desc.num_vertices <= 6
    assert 0 <= desc.num_parameters <= 6
    assert 1 <= desc.num_aspects <= 12
    assert len(desc.edge_shape_ids) == desc.num_vertices
    assert len(desc.edge_orientations) == desc.num_vertices
    assert set(desc.edge_shape_ids) == set(range(desc.num_edge_shapes))
    assert all(isinstance(shape, EdgeShape) for shape in desc.edge_shapes)
    assert len(desc.default_parameters) == desc.num_parameters
    assert all(0.0 < p < 1.0 for p in desc.default_parameters)
    assert len(desc.initial_colours) == desc.num_aspects
    assert len(desc.colouring) == 19
    assert desc.num_colours in (2, 3)
    assert all(0 <= c < desc.num_colours for c in desc.initial_colours)
    assert all(c == 0 for c in desc.colouring[desc.num_aspects : 12])
    p1, p2 = desc.colour_permutations
    assert sorted(p1) == [0, 1, 2]
    assert sorted(p2) == [0, 1, 2]


@pytest.mark.parametrize("type_id", TILING_TYPES)
def test_default_prototile_is_simple_and_counter_clockwise(type_id):
    tiling = create_tiling(type_id)
    vertices = tiling.vertices()
    assert len(vertices) == tiling.descriptor.num_vertices
    assert is_simple_polygon(vertices)
    assert polygon_area(vertices) > 0


@pytest.mark.parametrize("type_id", TILING_TYPES)
def test_aspects_fill_one_lattice_cell(type_id):
    tiling = create_tiling(type_id)
    (t1x, t1y), (t2x, t2y) = tiling.translation_vector1(), tiling.translation_vector2()
    cell = abs(t1x * t2y - t1y * t2x)
    assert polygon_area(tiling.vertices()) * tiling.num_aspects() == pytest.approx(cell, rel=1e-9)


def test_first_aspect_is_identity():
    for desc in iter_tiling_types():
        tiling = create_tiling(desc.type_id)
        assert tiling.aspect_transform(0).as_tuple() == pytest.approx((1.0, 0.0, 0.0, 0.0, 1.0, 0.0))


def test_describe_is_json_friendly():
    summary = describe_tiling_type(77)
    assert summary["name"] == "IH77"
    assert summary["num_aspects"] == 12
    assert summary["edge_shapes"] == ["I", "I", "I"]
    assert summary["colouring"]["num_colours"] == 2
    assert json.loads(json.dumps(summary)) == summary


def test_table_entries_keep_their_published_values():
    desc = get_tiling_type(1)
    assert desc.default_parameters == (0.12239750492, 0.5, 0.143395479017, 0.625)
    assert desc.edge_shape_ids == (0, 1, 2, 0, 1, 2)
    assert [o.name for o in desc.edge_orientations] == [
        "IDENTITY", "IDENTITY", "IDENTITY", "ROTATE", "ROTATE", "ROTATE",
    ]
    assert desc.colouring == (0,) * 12 + (1, 2, 0, 2, 0, 1, 3)
    assert desc.initial_colours == (0,)
    assert desc.colour_permutations == ((1, 2, 0), (2, 0, 1))
    assert desc.vertex_coefficients.shape == (12, 5)
    assert desc.aspect_coefficients.shape == (6, 5)

    desc = get_tiling_type(77)
    assert desc.num_parameters == 0
    assert desc.vertex_coefficients.shape == (6, 1)
    assert desc.aspect_coefficients.shape == (72, 1)



def test_ids_follow_the_ih_numbering():
    # IH2 is the pg hexagon, IH4 the p2 hexagon.
    glide = create_tiling(2).aspect_transform(1)
    half_turn = create_tiling(4).aspect_transform(1)
    assert glide.determinant == pytest.approx(-1.0)
    assert (half_turn.a, half_turn.e) == pytest.approx((-1.0, -1.0))
    assert half_turn.determinant == pytest.approx(1.0)
