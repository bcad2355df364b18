"""Plain-data snapshots of a tiling that survive a JSON round trip."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from .model import Point
from .tiling import IsohedralTiling, create_tiling


@dataclass(frozen=True)
class TilingDocument:
    """Everything needed to rebuild an :class:`IsohedralTiling`.

    ``edge_shapes`` holds the interior control points of every slot, in slot
    order.
    """

    type_id: int
    parameters: Tuple[float, ...]
    edge_shapes: Tuple[Tuple[Point, ...], ...] = field(default_factory=tuple)

    @classmethod
    def from_tiling(cls, tiling: IsohedralTiling) -> "TilingDocument":
        return cls(
            type_id=tiling.type_id,
            parameters=tuple(tiling.get_parameters()),
            edge_shapes=tuple(tiling.get_edge_shape(slot) for slot in range(tiling.num_edge_shapes())),
        )

    def to_tiling(self) -> IsohedralTiling:
        """Build a live tiling; invalid contents raise the engine's own errors."""
        tiling = create_tiling(self.type_id)
        tiling.set_parameters(self.parameters)
        if self.edge_shapes and len(self.edge_shapes) != tiling.num_edge_shapes():
            raise ValueError(
                f"document lists {len(self.edge_shapes)} edge shapes but "
                f"{tiling.descriptor.name} has {tiling.num_edge_shapes()}"
            )
        for slot, points in enumerate(self.edge_shapes):
            tiling.set_edge_shape(slot, points)
        return tiling

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type_id": self.type_id,
            "parameters": list(self.parameters),
            "edge_shapes": [[list(point) for point in points] for points in self.edge_shapes],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TilingDocument":
        try:
            type_id = data["type_id"]
            parameters = data["parameters"]
        except KeyError as exc:
            raise ValueError(f"tiling document is missing {exc.args[0]!r}") from None
        edge_shapes = tuple(
            tuple((float(x), float(y)) for x, y in points) for points in data.get("edge_shapes", ())
        )
        return cls(
            type_id=type_id,
            parameters=tuple(float(v) for v in parameters),
            edge_shapes=edge_shapes,
        )

    def dumps(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def loads(cls, text: str) -> "TilingDocument":
        return cls.from_dict(json.loads(text))
