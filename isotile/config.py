"""Configuration helpers for engine components."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple


@dataclass
class EngineConfig:
    """Numeric knobs shared by every :class:`~isotile.tiling.IsohedralTiling`."""

    # Determinants at or below this magnitude count as singular.
    degenerate_tolerance: float = 1e-12
    # Extra lattice cells added on every side of a region fill.
    fill_margin: float = 1.0
    default_palette: Tuple[int, ...] = (0, 1, 2)


_ENGINE_CONFIG = EngineConfig()


def get_engine_config() -> EngineConfig:
    return copy.deepcopy(_ENGINE_CONFIG)


def set_engine_config(config: EngineConfig) -> None:
    global _ENGINE_CONFIG
    _ENGINE_CONFIG = copy.deepcopy(config)
