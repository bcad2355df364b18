"""Process-wide catalog of the 81 isohedral tiling types."""

from __future__ import annotations

import logging
import numbers
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Sequence, Tuple

import numpy as np

from .data import TILING_TYPE_DATA, TILING_TYPE_IDS
from .errors import UnknownTilingTypeError
from .model import EdgeOrientation, EdgeShape, TilingTypeDescriptor

logger = logging.getLogger(__name__)

COLOURING_SLOTS = 19


def _frozen_rows(flat: Sequence[float], rows: int, width: int, name: str, type_id: int) -> np.ndarray:
    arr = np.array(flat, dtype=float)
    if arr.shape != (rows * width,):
        raise ValueError(f"IH{type_id}: {name} needs {rows * width} coefficients, got {arr.size}")
    arr = arr.reshape(rows, width)
    arr.setflags(write=False)
    return arr


def _build_descriptor(type_id: int, raw: Mapping[str, Any]) -> TilingTypeDescriptor:
    num_parameters = int(raw["num_params"])
    num_vertices = int(raw["num_vertices"])
    num_aspects = int(raw["num_aspects"])
    width = num_parameters + 1

    vertex_coefficients = _frozen_rows(raw["vertex_coeffs"], 2 * num_vertices, width, "vertex", type_id)
    translation_coefficients = _frozen_rows(raw["translation_coeffs"], 4, width, "translation", type_id)
    aspect_coefficients = _frozen_rows(raw["aspect_coeffs"], 6 * num_aspects, width, "aspect", type_id)

    edge_shapes = tuple(EdgeShape(code) for code in raw["edge_shapes"])
    edge_shape_ids = tuple(int(i) for i in raw["edge_shape_ids"])
    if len(edge_shapes) != int(raw["num_edge_shapes"]):
        raise ValueError(f"IH{type_id}: edge shape count mismatch")
    if len(edge_shape_ids) != num_vertices or any(not 0 <= i < len(edge_shapes) for i in edge_shape_ids):
        raise ValueError(f"IH{type_id}: malformed edge shape ids {edge_shape_ids}")

    flags = tuple(bool(f) for f in raw["edge_orientations"])
    if len(flags) != 2 * num_vertices:
        raise ValueError(f"IH{type_id}: expected {2 * num_vertices} edge orientation flags")
    edge_orientations = tuple(EdgeOrientation(flags[i : i + 2]) for i in range(0, len(flags), 2))

    default_parameters = tuple(float(v) for v in raw["default_params"])
    if len(default_parameters) != num_parameters:
        raise ValueError(f"IH{type_id}: expected {num_parameters} default parameters")

    colouring = tuple(int(c) for c in raw["coloring"])
    if len(colouring) != COLOURING_SLOTS:
        raise ValueError(f"IH{type_id}: colouring must have {COLOURING_SLOTS} entries")

    return TilingTypeDescriptor(
        type_id=type_id,
        num_parameters=num_parameters,
        num_aspects=num_aspects,
        num_vertices=num_vertices,
        num_edge_shapes=len(edge_shapes),
        edge_shapes=edge_shapes,
        edge_shape_ids=edge_shape_ids,
        edge_orientations=edge_orientations,
        default_parameters=default_parameters,
        vertex_coefficients=vertex_coefficients,
        translation_coefficients=translation_coefficients,
        aspect_coefficients=aspect_coefficients,
        colouring=colouring,
    )


def _coerce_type_id(type_id: object) -> int:
    if isinstance(type_id, bool) or not isinstance(type_id, numbers.Integral):
        raise UnknownTilingTypeError(type_id)
    return int(type_id)


class TilingTypeCatalog:
    """Immutable lookup table of tiling type descriptors keyed by IH number."""

    def __init__(self, data: Mapping[int, Mapping[str, Any]], type_ids: Sequence[int] = TILING_TYPE_IDS):
        if set(type_ids) != set(data):
            raise ValueError("tiling type id list does not match the table entries")
        descriptors: Dict[int, TilingTypeDescriptor] = {}
        for type_id in type_ids:
            descriptors[type_id] = _build_descriptor(type_id, data[type_id])
        self._descriptors = MappingProxyType(descriptors)
        self.type_ids: Tuple[int, ...] = tuple(descriptors)
        logger.debug("Loaded %d isohedral tiling types", len(self.type_ids))

    def __len__(self) -> int:
        return len(self.type_ids)

    def __contains__(self, type_id: object) -> bool:
        try:
            return _coerce_type_id(type_id) in self._descriptors
        except UnknownTilingTypeError:
            return False

    def __iter__(self) -> Iterator[TilingTypeDescriptor]:
        return iter(self._descriptors.values())

    def get(self, type_id: object) -> TilingTypeDescriptor:
        key = _coerce_type_id(type_id)
        try:
            return self._descriptors[key]
        except KeyError:
            raise UnknownTilingTypeError(type_id) from None

    def index_of(self, type_id: object) -> int:
        return self.type_ids.index(self.get(type_id).type_id)

    def next_type(self, type_id: object) -> int:
        """Following IH number; the last type maps to itself."""
        index = min(self.index_of(type_id) + 1, len(self.type_ids) - 1)
        return self.type_ids[index]

    def previous_type(self, type_id: object) -> int:
        """Preceding IH number; the first type maps to itself."""
        return self.type_ids[max(self.index_of(type_id) - 1, 0)]


CATALOG = TilingTypeCatalog(TILING_TYPE_DATA)
TILING_TYPES: Tuple[int, ...] = CATALOG.type_ids
NUM_TYPES = len(TILING_TYPES)


def get_tiling_type(type_id: object) -> TilingTypeDescriptor:
    return CATALOG.get(type_id)


def iter_tiling_types() -> Iterator[TilingTypeDescriptor]:
    return iter(CATALOG)


def next_tiling_type(type_id: object) -> int:
    return CATALOG.next_type(type_id)


def previous_tiling_type(type_id: object) -> int:
    return CATALOG.previous_type(type_id)


def describe_tiling_type(type_id: object) -> Dict[str, Any]:
    """Return a JSON-friendly summary of one type."""
    desc = CATALOG.get(type_id)
    p1, p2 = desc.colour_permutations
    return {
        "type_id": desc.type_id,
        "name": desc.name,
        "num_vertices": desc.num_vertices,
        "num_parameters": desc.num_parameters,
        "num_aspects": desc.num_aspects,
        "num_edge_shapes": desc.num_edge_shapes,
        "edge_shapes": [shape.value for shape in desc.edge_shapes],
        "edge_shape_ids": list(desc.edge_shape_ids),
        "default_parameters": list(desc.default_parameters),
        "colouring": {
            "initial": list(desc.initial_colours),
            "p1": list(p1),
            "p2": list(p2),
            "num_colours": desc.num_colours,
        },
    }
