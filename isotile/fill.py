"""Enumerate the tile instances that may overlap a query region."""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .affine import AffineTransform, invert_affine, translation
from .config import get_engine_config
from .geometry import diameter
from .model import Point, TileInstanceRef

logger = logging.getLogger(__name__)


class RegionFiller:
    """Lattice and aspect data needed to cover regions with tiles.

    Instances are immutable snapshots; every fill call returns a fresh
    generator.
    """

    def __init__(
        self,
        t1: Point,
        t2: Point,
        aspects: Sequence[AffineTransform],
        outline: Sequence[Point],
    ):
        self.t1 = (float(t1[0]), float(t1[1]))
        self.t2 = (float(t2[0]), float(t2[1]))
        self.aspects: Tuple[AffineTransform, ...] = tuple(aspects)
        footprint = [(0.0, 0.0)]
        for aspect in self.aspects:
            footprint.extend(map(tuple, aspect.apply_many(outline)))
        # Any tile touching a point x has its lattice origin within this
        # distance of x.
        self.reach = diameter(footprint)

    def _lattice_inverse(self) -> AffineTransform:
        basis = AffineTransform(self.t1[0], self.t2[0], 0.0, self.t1[1], self.t2[1], 0.0)
        return invert_affine(basis)

    def lattice_box(self, corners: Sequence[Sequence[float]]) -> Tuple[int, int, int, int]:
        """Integer ``(t1min, t1max, t2min, t2max)`` covering ``corners`` plus the margin."""
        inverse = self._lattice_inverse()
        coords = inverse.apply_many(corners)
        rows = np.array([[inverse.a, inverse.b], [inverse.d, inverse.e]])
        pad = self.reach * np.linalg.norm(rows, axis=1) + get_engine_config().fill_margin
        lo = coords.min(axis=0) - pad
        hi = coords.max(axis=0) + pad
        return (
            int(math.floor(lo[0])),
            int(math.ceil(hi[0])),
            int(math.floor(lo[1])),
            int(math.ceil(hi[1])),
        )

    def _iterate(self, box: Tuple[int, int, int, int]) -> Iterator[TileInstanceRef]:
        i0, i1, j0, j1 = box
        for i in range(i0, i1 + 1):
            for j in range(j0, j1 + 1):
                shift = translation(
                    i * self.t1[0] + j * self.t2[0],
                    i * self.t1[1] + j * self.t2[1],
                )
                for index, aspect in enumerate(self.aspects):
                    yield TileInstanceRef(
                        transform=shift @ aspect,
                        t1=i,
                        t2=j,
                        aspect=index,
                        is_second_copy=index != 0,
                    )

    def fill_quad(self, corners: Sequence[Sequence[float]]) -> Iterator[TileInstanceRef]:
        pts: List[Point] = [(float(p[0]), float(p[1])) for p in corners]
        if len(pts) != 4:
            raise ValueError(f"a quad region needs four corners, got {len(pts)}")
        box = self.lattice_box(pts)
        logger.debug("Filling region %s with lattice box %s", pts, box)
        return self._iterate(box)

    def fill_bounds(self, xmin: float, ymin: float, xmax: float, ymax: float) -> Iterator[TileInstanceRef]:
        if xmin > xmax or ymin > ymax:
            raise ValueError(f"empty region ({xmin}, {ymin}) - ({xmax}, {ymax})")
        return self.fill_quad([(xmin, ymin), (xmax, ymin), (xmax, ymax), (xmin, ymax)])
