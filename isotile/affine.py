"""Two-dimensional affine transforms stored as row-major 2x3 matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

from .config import get_engine_config
from .errors import DegenerateTransformError

Point = Tuple[float, float]


@dataclass(frozen=True)
class AffineTransform:
    """Affine map ``(x, y) -> (a*x + b*y + c, d*x + e*y + f)``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "AffineTransform":
        if len(values) != 6:
            raise ValueError(f"affine transform needs 6 coefficients, got {len(values)}")
        return cls(*(float(v) for v in values))

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "AffineTransform":
        m = np.asarray(matrix, dtype=float)
        return cls(*(float(v) for v in m[:2, :3].ravel()))

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    @property
    def matrix(self) -> np.ndarray:
        """Augmented 3x3 form."""
        return np.array(
            [[self.a, self.b, self.c], [self.d, self.e, self.f], [0.0, 0.0, 1.0]],
            dtype=float,
        )

    @property
    def determinant(self) -> float:
        return self.a * self.e - self.b * self.d

    def apply(self, point: Sequence[float]) -> Point:
        x, y = float(point[0]), float(point[1])
        return (self.a * x + self.b * y + self.c, self.d * x + self.e * y + self.f)

    def apply_many(self, points: Iterable[Sequence[float]]) -> np.ndarray:
        pts = np.asarray(list(points), dtype=float).reshape(-1, 2)
        linear = np.array([[self.a, self.b], [self.d, self.e]])
        return pts @ linear.T + np.array([self.c, self.f])

    def is_close(self, other: "AffineTransform", tol: float = 1e-9) -> bool:
        return all(abs(x - y) <= tol for x, y in zip(self.as_tuple(), other.as_tuple()))

    def __matmul__(self, other: "AffineTransform") -> "AffineTransform":
        return compose_affine(self, other)


IDENTITY = AffineTransform()


def translation(dx: float, dy: float) -> AffineTransform:
    return AffineTransform(1.0, 0.0, float(dx), 0.0, 1.0, float(dy))


def compose_affine(first: AffineTransform, second: AffineTransform) -> AffineTransform:
    """Return the transform that applies ``second`` and then ``first``."""
    return AffineTransform.from_matrix(first.matrix @ second.matrix)


def invert_affine(transform: AffineTransform) -> AffineTransform:
    det = transform.determinant
    if not math.isfinite(det) or abs(det) <= get_engine_config().degenerate_tolerance:
        raise DegenerateTransformError(f"cannot invert affine transform with determinant {det!r}")
    a, b, c, d, e, f = transform.as_tuple()
    return AffineTransform(
        e / det,
        -b / det,
        (b * f - c * e) / det,
        -d / det,
        a / det,
        (c * d - a * f) / det,
    )


def match_segment(p: Sequence[float], q: Sequence[float]) -> AffineTransform:
    """Return the similarity taking ``(0, 0)`` to ``p`` and ``(1, 0)`` to ``q``.

    The unit y-axis is carried to the left-hand normal of ``p -> q``, so the map
    preserves orientation.
    """
    px, py = float(p[0]), float(p[1])
    qx, qy = float(q[0]), float(q[1])
    dx, dy = qx - px, qy - py
    if (dx == 0.0 and dy == 0.0) or not (math.isfinite(dx) and math.isfinite(dy)):
        raise DegenerateTransformError(f"cannot match the degenerate segment {p!r} -> {q!r}")
    return AffineTransform(dx, -dy, px, dy, dx, py)
