"""Editable edge shapes and the boundary rebuild."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Dict, Iterable, List, Sequence, Tuple

from .errors import EdgeShapeArityError, InvalidEdgeSlotError
from .model import EdgePart, EdgeShape, Point

logger = logging.getLogger(__name__)

_DEFAULT_POINTS: Dict[EdgeShape, Tuple[Point, ...]] = {
    EdgeShape.I: (),
    EdgeShape.J: ((1.0 / 3.0, 0.0), (2.0 / 3.0, 0.0)),
    EdgeShape.S: ((0.25, 0.0),),
    EdgeShape.U: ((0.25, 0.0),),
}


def default_edge_shape(shape: EdgeShape) -> Tuple[Point, ...]:
    """Straight-edge control points for ``shape``."""
    return _DEFAULT_POINTS[shape]


def edge_curve(shape: EdgeShape, points: Sequence[Point]) -> List[Point]:
    """Full curve from ``(0, 0)`` to ``(1, 0)`` in the edge's canonical frame.

    Symmetric classes store the first interior point only; the second one is
    derived: a half-turn about ``(0.5, 0)`` for ``S`` and a reflection across
    ``x = 0.5`` for ``U``.
    """
    pts = [(float(x), float(y)) for x, y in points]
    if shape is EdgeShape.S:
        (px, py), = pts
        pts = [(px, py), (1.0 - px, -py)]
    elif shape is EdgeShape.U:
        (px, py), = pts
        pts = [(px, py), (1.0 - px, py)]
    return [(0.0, 0.0), *pts, (1.0, 0.0)]


class EdgeShapeModel:
    """Per-slot interior control points for one tiling type."""

    def __init__(self, shapes: Sequence[EdgeShape]):
        self._shapes: Tuple[EdgeShape, ...] = tuple(shapes)
        self._points: List[Tuple[Point, ...]] = []
        self.reset()

    @property
    def num_slots(self) -> int:
        return len(self._shapes)

    def reset(self) -> None:
        self._points = [default_edge_shape(shape) for shape in self._shapes]

    def _check_slot(self, slot: int) -> int:
        if isinstance(slot, bool) or not isinstance(slot, numbers.Integral) or not 0 <= slot < len(self._shapes):
            raise InvalidEdgeSlotError(slot, len(self._shapes))
        return int(slot)

    def shape_class(self, slot: int) -> EdgeShape:
        return self._shapes[self._check_slot(slot)]

    def get(self, slot: int) -> Tuple[Point, ...]:
        return self._points[self._check_slot(slot)]

    def set(self, slot: int, points: Iterable[Sequence[float]]) -> None:
        shape = self.shape_class(slot)
        cleaned: List[Point] = []
        for point in points:
            if len(point) != 2:
                raise ValueError(f"control point must have two coordinates, got {point!r}")
            x, y = float(point[0]), float(point[1])
            if not (math.isfinite(x) and math.isfinite(y)):
                raise ValueError(f"control point must be finite, got {point!r}")
            cleaned.append((x, y))
        if len(cleaned) != shape.arity:
            raise EdgeShapeArityError(
                f"slot {slot} has class {shape.value} and takes {shape.arity} control points, got {len(cleaned)}"
            )
        self._points[int(slot)] = tuple(cleaned)
        logger.debug("Edge slot %d (%s) set to %s", slot, shape.value, cleaned)

    def curve(self, slot: int) -> List[Point]:
        return edge_curve(self.shape_class(slot), self._points[int(slot)])

    def build_boundary(self, parts: Iterable[EdgePart]) -> List[Point]:
        """Walk ``parts`` in winding order and emit the closed tile outline.

        Each edge contributes its start point and interior points; the end
        point is the next edge's start.
        """
        outline: List[Point] = []
        for part in parts:
            curve = self.curve(part.edge_slot_id)
            if part.reversed:
                curve = curve[::-1]
            outline.extend(part.transform.apply(p) for p in curve[:-1])
        return outline
