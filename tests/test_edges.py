import pytest

from isotile import EdgeShape, EdgeShapeArityError, InvalidEdgeSlotError, create_tiling, edge_curve
from isotile.edges import EdgeShapeModel, default_edge_shape


def _contains(points, target, tol=1e-12):
    return any(abs(p[0] - target[0]) <= tol and abs(p[1] - target[1]) <= tol for p in points)


def test_mirror_symmetric_curve_reflects_control_point():
    curve = edge_curve(EdgeShape.U, [(0.3, 0.2)])
    assert curve[0] == (0.0, 0.0)
    assert curve[-1] == (1.0, 0.0)
    assert _contains(curve, (0.3, 0.2))
    assert curve[2] == pytest.approx((0.7, 0.2))


def test_half_turn_symmetric_curve_rotates_control_point():
    curve = edge_curve(EdgeShape.S, [(0.3, 0.2)])
    assert _contains(curve, (0.3, 0.2))
    assert curve[2] == pytest.approx((0.7, -0.2))


def test_generic_and_identity_curves():
    assert edge_curve(EdgeShape.I, []) == [(0.0, 0.0), (1.0, 0.0)]
    assert edge_curve(EdgeShape.J, [(0.2, 0.1), (0.5, -0.3)]) == [
        (0.0, 0.0),
        (0.2, 0.1),
        (0.5, -0.3),
        (1.0, 0.0),
    ]


def test_defaults_are_straight():
    assert default_edge_shape(EdgeShape.I) == ()
    assert default_edge_shape(EdgeShape.J) == ((1.0 / 3.0, 0.0), (2.0 / 3.0, 0.0))
    assert default_edge_shape(EdgeShape.S) == ((0.25, 0.0),)
    assert default_edge_shape(EdgeShape.U) == ((0.25, 0.0),)


def test_aliases_and_arity():
    assert EdgeShape.GENERIC is EdgeShape.J
    assert EdgeShape.MIRROR_SYMMETRIC is EdgeShape.U
    assert [s.arity for s in EdgeShape] == [0, 2, 1, 1]


def test_model_validates_slot_and_arity():
    model = EdgeShapeModel([EdgeShape.J, EdgeShape.U, EdgeShape.I])
    assert model.num_slots == 3
    with pytest.raises(EdgeShapeArityError):
        model.set(0, [(0.5, 0.5)])
    with pytest.raises(EdgeShapeArityError):
        model.set(2, [(0.5, 0.5)])
    with pytest.raises(InvalidEdgeSlotError):
        model.set(3, [])
    with pytest.raises(InvalidEdgeSlotError):
        model.get(True)
    with pytest.raises(ValueError):
        model.set(1, [(float("nan"), 0.0)])
    model.set(1, [(0.4, 0.1)])
    assert model.get(1) == ((0.4, 0.1),)
    model.reset()
    assert model.get(1) == ((0.25, 0.0),)


def test_set_edge_shape_changes_outline():
    tiling = create_tiling(66)
    u_slot = [i for i in range(tiling.num_edge_shapes()) if tiling.get_edge_shape_class(i) is EdgeShape.U][0]
    straight = tiling.tile_shape()
    tiling.set_edge_shape(u_slot, [(0.3, 0.2)])
    bent = tiling.tile_shape()
    assert len(bent) == len(straight)
    assert bent != straight
    assert tiling.edge_curve(u_slot)[1:3] == [(0.3, 0.2), pytest.approx((0.7, 0.2))]

    # Every edge using the slot carries the bent curve.
    for part in tiling.parts():
        if part.edge_slot_id != u_slot:
            continue
        peak = part.transform.apply((0.3, 0.2))
        assert _contains(bent, peak, tol=1e-9)

    tiling.reset_edge_shapes()
    assert tiling.tile_shape() == straight


def test_outline_point_count():
    tiling = create_tiling(1)
    # Three J slots on six edges: start point plus two interior points each.
    assert len(tiling.tile_shape()) == 18
    tiling = create_tiling(93)
    assert len(tiling.tile_shape()) == 3
