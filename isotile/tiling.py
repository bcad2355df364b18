"""Live isohedral tiling instances."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Iterator, List, Optional, Sequence, Tuple

from .affine import AffineTransform, match_segment
from .catalog import get_tiling_type
from .colouring import Colouring, MinColouring
from .config import get_engine_config
from .edges import EdgeShapeModel
from .errors import ParameterCountMismatchError
from .fill import RegionFiller
from .geometry import compute_aspects, compute_translations, compute_vertices
from .logging_utils import apply_debug_logging
from .model import EdgePart, EdgeShape, Point, TileInstanceRef, TilingTypeDescriptor

logger = logging.getLogger(__name__)


class IsohedralTiling:
    """One tiling type with its current parameters and edge shapes.

    Every mutator recomputes the derived geometry before returning, so the
    query methods are plain lookups.
    """

    def __init__(self, type_id: int):
        self._descriptor: TilingTypeDescriptor
        self._parameters: Tuple[float, ...] = ()
        self._edges: EdgeShapeModel
        self._vertices: List[Point] = []
        self._t1: Point = (0.0, 0.0)
        self._t2: Point = (0.0, 0.0)
        self._aspects: List[AffineTransform] = []
        self._parts: List[EdgePart] = []
        self._outline: List[Point] = []
        self._filler: Optional[RegionFiller] = None
        self._colouring: Optional[Colouring] = None
        self.set_type(type_id)

    def __repr__(self) -> str:
        return f"IsohedralTiling({self._descriptor.name}, parameters={list(self._parameters)})"

    # ------------------------------------------------------------------
    # type and parameters

    @property
    def descriptor(self) -> TilingTypeDescriptor:
        return self._descriptor

    @property
    def type_id(self) -> int:
        return self._descriptor.type_id

    def set_type(self, type_id: int) -> None:
        """Switch to ``type_id``, restoring default parameters and straight edges."""
        descriptor = get_tiling_type(type_id)
        self._descriptor = descriptor
        self._parameters = descriptor.default_parameters
        self._edges = EdgeShapeModel(descriptor.edge_shapes)
        self._colouring = MinColouring(self, get_engine_config().default_palette)
        logger.debug("Tiling switched to %s", descriptor.name)
        self._recompute()

    def num_parameters(self) -> int:
        return self._descriptor.num_parameters

    def get_parameters(self) -> Tuple[float, ...]:
        return self._parameters

    def set_parameters(self, parameters: Sequence[float]) -> None:
        values = list(parameters)
        expected = self._descriptor.num_parameters
        if len(values) != expected:
            raise ParameterCountMismatchError(expected, len(values))
        cleaned = []
        for value in values:
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise ValueError(f"tiling parameters must be finite numbers, got {value!r}")
            cleaned.append(float(value))
        self._parameters = tuple(cleaned)
        logger.debug("%s parameters set to %s", self._descriptor.name, cleaned)
        self._recompute()

    # ------------------------------------------------------------------
    # derived geometry

    def _recompute(self) -> None:
        descriptor = self._descriptor
        self._vertices = compute_vertices(descriptor, self._parameters)
        self._t1, self._t2 = compute_translations(descriptor, self._parameters)
        self._aspects = compute_aspects(descriptor, self._parameters)
        self._parts = self._build_parts()
        self._rebuild_shape()

    def _build_parts(self) -> List[EdgePart]:
        descriptor = self._descriptor
        n = descriptor.num_vertices
        seen = set()
        parts = []
        for index in range(n):
            slot = descriptor.edge_shape_ids[index]
            orientation = descriptor.edge_orientations[index]
            frame = match_segment(self._vertices[index], self._vertices[(index + 1) % n])
            parts.append(
                EdgePart(
                    edge_index=index,
                    edge_slot_id=slot,
                    transform=frame @ orientation.transform,
                    shape_class=descriptor.edge_shapes[slot],
                    reversed=orientation.reversed,
                    is_second_copy=slot in seen,
                )
            )
            seen.add(slot)
        return parts

    def _rebuild_shape(self) -> None:
        self._outline = self._edges.build_boundary(self._parts)
        self._filler = RegionFiller(self._t1, self._t2, self._aspects, self._outline)

    def vertices(self) -> List[Point]:
        return list(self._vertices)

    def get_vertex(self, index: int) -> Point:
        return self._vertices[index]

    def translation_vector1(self) -> Point:
        return self._t1

    def translation_vector2(self) -> Point:
        return self._t2

    def num_aspects(self) -> int:
        return self._descriptor.num_aspects

    def aspect_transform(self, index: int) -> AffineTransform:
        if not 0 <= index < len(self._aspects):
            raise IndexError(f"aspect {index} out of range [0, {len(self._aspects)})")
        return self._aspects[index]

    # ------------------------------------------------------------------
    # edge shapes

    def num_edge_shapes(self) -> int:
        return self._descriptor.num_edge_shapes

    def get_edge_shape_class(self, slot: int) -> EdgeShape:
        return self._edges.shape_class(slot)

    def get_edge_shape(self, slot: int) -> Tuple[Point, ...]:
        return self._edges.get(slot)

    def set_edge_shape(self, slot: int, points: Sequence[Sequence[float]]) -> None:
        self._edges.set(slot, points)
        self._rebuild_shape()

    def reset_edge_shapes(self) -> None:
        self._edges.reset()
        logger.debug("%s edge shapes reset", self._descriptor.name)
        self._rebuild_shape()

    def edge_curve(self, slot: int) -> List[Point]:
        """Full curve of ``slot`` in its canonical frame, endpoints included."""
        return self._edges.curve(slot)

    def parts(self) -> Iterator[EdgePart]:
        """One record per polygon edge, in winding order."""
        return iter(self._parts)

    def shape(self) -> Iterator[EdgePart]:
        return self.parts()

    def tile_shape(self) -> List[Point]:
        """Closed boundary polygon of the prototile, edge curves included."""
        return list(self._outline)

    # ------------------------------------------------------------------
    # filling and colouring

    def fill_region_bounds(self, xmin: float, ymin: float, xmax: float, ymax: float) -> Iterator[TileInstanceRef]:
        assert self._filler is not None
        return self._filler.fill_bounds(xmin, ymin, xmax, ymax)

    def fill_region_quad(
        self,
        p0: Sequence[float],
        p1: Sequence[float],
        p2: Sequence[float],
        p3: Sequence[float],
    ) -> Iterator[TileInstanceRef]:
        assert self._filler is not None
        return self._filler.fill_quad([p0, p1, p2, p3])

    def get_colour(self, t1: int, t2: int, aspect: int) -> int:
        assert self._colouring is not None
        return self._colouring.get_colour(t1, t2, aspect)


def create_tiling(type_id: int) -> IsohedralTiling:
    """Return a tiling of ``type_id`` at its default parameters."""
    return IsohedralTiling(type_id)


apply_debug_logging(globals(), logger=logger)
