"""Core data structures shared by the catalog and tiling instances."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

from .affine import AffineTransform

Point = Tuple[float, float]


class EdgeShape(Enum):
    """Symmetry class of one prototile edge."""

    I = "I"
    J = "J"
    S = "S"
    U = "U"

    IDENTITY = "I"
    GENERIC = "J"
    HALF_TURN_SYMMETRIC = "S"
    MIRROR_SYMMETRIC = "U"

    @property
    def arity(self) -> int:
        """Number of interior control points stored for the class."""
        return _ARITY[self.value]


_ARITY = {"I": 0, "J": 2, "S": 1, "U": 1}


class EdgeOrientation(Enum):
    """Isometry of the unit segment placing a slot curve on a polygon edge."""

    IDENTITY = (False, False)
    ROTATE = (False, True)
    FLIP = (True, False)
    ROTATE_FLIP = (True, True)

    @property
    def flip(self) -> bool:
        return self.value[0]

    @property
    def rotate(self) -> bool:
        return self.value[1]

    @property
    def reversed(self) -> bool:
        """Whether the curve is traversed from ``(1, 0)`` back to ``(0, 0)``."""
        return self.flip != self.rotate

    @property
    def transform(self) -> AffineTransform:
        return _ORIENTATION_TRANSFORMS[self.value]


_ORIENTATION_TRANSFORMS = {
    (False, False): AffineTransform(1.0, 0.0, 0.0, 0.0, 1.0, 0.0),
    (False, True): AffineTransform(-1.0, 0.0, 1.0, 0.0, -1.0, 0.0),
    (True, False): AffineTransform(-1.0, 0.0, 1.0, 0.0, 1.0, 0.0),
    (True, True): AffineTransform(1.0, 0.0, 0.0, 0.0, -1.0, 0.0),
}


@dataclass(frozen=True, eq=False)
class TilingTypeDescriptor:
    """Immutable structural description of one isohedral tiling type."""

    type_id: int
    num_parameters: int
    num_aspects: int
    num_vertices: int
    num_edge_shapes: int
    edge_shapes: Tuple[EdgeShape, ...]
    edge_shape_ids: Tuple[int, ...]
    edge_orientations: Tuple[EdgeOrientation, ...]
    default_parameters: Tuple[float, ...]
    vertex_coefficients: np.ndarray
    translation_coefficients: np.ndarray
    aspect_coefficients: np.ndarray
    colouring: Tuple[int, ...]

    @property
    def name(self) -> str:
        return f"IH{self.type_id:02d}"

    @property
    def initial_colours(self) -> Tuple[int, ...]:
        return self.colouring[: self.num_aspects]

    @property
    def colour_permutations(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """Permutations applied per step along T1 and along T2."""
        return self.colouring[12:15], self.colouring[15:18]

    @property
    def num_colours(self) -> int:
        return self.colouring[18]


@dataclass(frozen=True)
class TileInstanceRef:
    """One placed copy of the prototile produced by a region fill."""

    transform: AffineTransform
    t1: int
    t2: int
    aspect: int
    is_second_copy: bool


@dataclass(frozen=True)
class EdgePart:
    """One boundary edge instance of the prototile, in winding order."""

    edge_index: int
    edge_slot_id: int
    transform: AffineTransform
    shape_class: EdgeShape
    reversed: bool
    is_second_copy: bool
