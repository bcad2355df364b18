from .affine import (
    IDENTITY,
    AffineTransform,
    compose_affine,
    invert_affine,
    match_segment,
    translation,
)
from .catalog import (
    NUM_TYPES,
    TILING_TYPES,
    TilingTypeCatalog,
    describe_tiling_type,
    get_tiling_type,
    iter_tiling_types,
    next_tiling_type,
    previous_tiling_type,
)
from .colouring import Colouring, MinColouring, Permutation, UniformColouring
from .config import EngineConfig, get_engine_config, set_engine_config
from .document import TilingDocument
from .edges import edge_curve
from .errors import (
    DegenerateTransformError,
    EdgeShapeArityError,
    InvalidEdgeSlotError,
    MalformedPermutationError,
    ParameterCountMismatchError,
    TilingError,
    UnknownTilingTypeError,
)
from .model import EdgeOrientation, EdgePart, EdgeShape, TileInstanceRef, TilingTypeDescriptor
from .tiling import IsohedralTiling, create_tiling

__all__ = [
    'IDENTITY',
    'AffineTransform',
    'compose_affine',
    'invert_affine',
    'match_segment',
    'translation',
    'NUM_TYPES',
    'TILING_TYPES',
    'TilingTypeCatalog',
    'describe_tiling_type',
    'get_tiling_type',
    'iter_tiling_types',
    'next_tiling_type',
    'previous_tiling_type',
    'Colouring',
    'MinColouring',
    'Permutation',
    'UniformColouring',
    'EngineConfig',
    'get_engine_config',
    'set_engine_config',
    'TilingDocument',
    'edge_curve',
    'DegenerateTransformError',
    'EdgeShapeArityError',
    'InvalidEdgeSlotError',
    'MalformedPermutationError',
    'ParameterCountMismatchError',
    'TilingError',
    'UnknownTilingTypeError',
    'EdgeOrientation',
    'EdgePart',
    'EdgeShape',
    'TileInstanceRef',
    'TilingTypeDescriptor',
    'IsohedralTiling',
    'create_tiling',
]
