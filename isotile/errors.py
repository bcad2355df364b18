"""Error kinds raised by the tiling engine."""

from __future__ import annotations


class TilingError(Exception):
    """Base class for every error raised by :mod:`isotile`."""


class UnknownTilingTypeError(TilingError, LookupError):
    """Raised when a type id is not one of the 81 populated IH numbers."""

    def __init__(self, type_id: object) -> None:
        super().__init__(f"unknown isohedral tiling type {type_id!r}")
        self.type_id = type_id


class ParameterCountMismatchError(TilingError, ValueError):
    """Raised when a parameter vector has the wrong length for its type."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected {expected} parameters, got {actual}")
        self.expected = expected
        self.actual = actual


class DegenerateTransformError(TilingError, ValueError):
    """Raised when an affine map cannot be inverted or constructed."""


class InvalidEdgeSlotError(TilingError, IndexError):
    """Raised for an edge-shape slot index outside the current type's range."""

    def __init__(self, slot: object, num_slots: int) -> None:
        super().__init__(f"edge shape slot {slot!r} out of range [0, {num_slots})")
        self.slot = slot
        self.num_slots = num_slots


class EdgeShapeArityError(TilingError, ValueError):
    """Raised when a slot receives the wrong number of control points."""


class MalformedPermutationError(TilingError, ValueError):
    """Raised when a colouring permutation is not a bijection on its indices."""
