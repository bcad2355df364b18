"""Prototile geometry: coefficient evaluation and the outline diameter."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
from scipy.spatial.distance import pdist

from .affine import AffineTransform
from .model import Point, TilingTypeDescriptor


def evaluate_rows(coefficients: np.ndarray, parameters: Sequence[float]) -> np.ndarray:
    """Evaluate rows ``(c0..cn-1, k)`` against ``parameters``."""
    augmented = np.append(np.asarray(parameters, dtype=float), 1.0)
    return coefficients @ augmented


def compute_vertices(descriptor: TilingTypeDescriptor, parameters: Sequence[float]) -> List[Point]:
    flat = evaluate_rows(descriptor.vertex_coefficients, parameters)
    return [(float(x), float(y)) for x, y in flat.reshape(-1, 2)]


def compute_translations(
    descriptor: TilingTypeDescriptor, parameters: Sequence[float]
) -> Tuple[Point, Point]:
    t1x, t1y, t2x, t2y = (float(v) for v in evaluate_rows(descriptor.translation_coefficients, parameters))
    return (t1x, t1y), (t2x, t2y)


def compute_aspects(
    descriptor: TilingTypeDescriptor, parameters: Sequence[float]
) -> List[AffineTransform]:
    flat = evaluate_rows(descriptor.aspect_coefficients, parameters)
    return [AffineTransform.from_sequence(row) for row in flat.reshape(-1, 6)]


def diameter(points: Sequence[Sequence[float]]) -> float:
    """Largest pairwise distance within ``points``."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(pts) < 2:
        return 0.0
    return float(pdist(pts).max())
