import math

import numpy as np
import pytest

from isotile import (
    IDENTITY,
    AffineTransform,
    DegenerateTransformError,
    compose_affine,
    invert_affine,
    match_segment,
    translation,
)


def test_compose_applies_right_operand_first():
    scale = AffineTransform(2.0, 0.0, 0.0, 0.0, 2.0, 0.0)
    shift = translation(1.0, -1.0)
    combined = compose_affine(shift, scale)
    assert combined.apply((1.0, 1.0)) == pytest.approx((3.0, 1.0))
    assert (scale @ shift).apply((1.0, 1.0)) == pytest.approx((4.0, 0.0))


@pytest.mark.parametrize(
    "coeffs",
    [
        (1.0, 0.0, 0.0, 0.0, 1.0, 0.0),
        (2.0, 1.0, -3.0, 0.5, 4.0, 7.0),
        (0.0, -1.0, 1.0, 1.0, 0.0, 0.0),
        (-1.0, 0.0, 1.0, 0.0, 1.0, 0.0),
        (0.3, -0.8, 2.5, 1.7, 0.1, -4.2),
    ],
)
def test_inverse_composes_to_identity(coeffs):
    t = AffineTransform.from_sequence(coeffs)
    assert compose_affine(invert_affine(t), t).is_close(IDENTITY)
    assert compose_affine(t, invert_affine(t)).is_close(IDENTITY)


def test_invert_rejects_singular_matrix():
    with pytest.raises(DegenerateTransformError):
        invert_affine(AffineTransform(1.0, 2.0, 0.0, 2.0, 4.0, 1.0))
    with pytest.raises(ValueError):
        invert_affine(AffineTransform(0.0, 0.0, 0.0, 0.0, 0.0, 0.0))


@pytest.mark.parametrize(
    "p, q",
    [((0.0, 0.0), (1.0, 0.0)), ((2.0, 3.0), (-1.0, 5.0)), ((0.5, -0.25), (0.5, 4.0))],
)
def test_match_segment_maps_unit_segment(p, q):
    t = match_segment(p, q)
    assert t.apply((0.0, 0.0)) == pytest.approx(p)
    assert t.apply((1.0, 0.0)) == pytest.approx(q)
    assert t.determinant > 0
    length = math.hypot(q[0] - p[0], q[1] - p[1])
    assert t.determinant == pytest.approx(length * length)


def test_match_segment_rejects_coincident_points():
    with pytest.raises(DegenerateTransformError):
        match_segment((1.0, 1.0), (1.0, 1.0))
    with pytest.raises(DegenerateTransformError):
        match_segment((0.0, 0.0), (math.inf, 0.0))


def test_match_segment_accepts_very_short_segments():
    p, q = (0.0, 0.0), (1e-9, -2e-9)
    t = match_segment(p, q)
    assert t.apply((0.0, 0.0)) == pytest.approx(p, abs=1e-15)
    assert t.apply((1.0, 0.0)) == pytest.approx(q, abs=1e-15)
    assert t.determinant == pytest.approx(5e-18)


def test_apply_many_matches_apply():
    t = AffineTransform(0.0, -1.0, 2.0, 1.0, 0.0, -1.0)
    pts = [(0.0, 0.0), (1.0, 2.0), (-3.0, 0.5)]
    out = t.apply_many(pts)
    assert out.shape == (3, 2)
    for row, p in zip(out, pts):
        assert tuple(row) == pytest.approx(t.apply(p))


def test_matrix_round_trip():
    t = AffineTransform(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert np.allclose(t.matrix[2], [0.0, 0.0, 1.0])
    assert AffineTransform.from_matrix(t.matrix) == t
    assert t.as_tuple() == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    with pytest.raises(ValueError):
        AffineTransform.from_sequence([1.0, 2.0])
