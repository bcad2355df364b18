import json

import pytest

from isotile import (
    EdgeShapeArityError,
    ParameterCountMismatchError,
    TilingDocument,
    UnknownTilingTypeError,
    create_tiling,
)


def _bent_tiling():
    tiling = create_tiling(7)
    tiling.set_parameters([0.1, 0.3])
    for slot in range(tiling.num_edge_shapes()):
        arity = tiling.get_edge_shape_class(slot).arity
        tiling.set_edge_shape(slot, [(0.2 + 0.3 * i, 0.1) for i in range(arity)])
    return tiling


def test_document_rebuilds_the_same_tiling():
    tiling = _bent_tiling()
    doc = TilingDocument.from_tiling(tiling)
    restored = TilingDocument.loads(doc.dumps()).to_tiling()
    assert restored.type_id == 7
    assert restored.get_parameters() == tiling.get_parameters()
    assert restored.tile_shape() == tiling.tile_shape()


def test_to_dict_is_plain_json():
    doc = TilingDocument.from_tiling(_bent_tiling())
    data = json.loads(doc.dumps())
    assert data["type_id"] == 7
    assert data["parameters"] == [0.1, 0.3]
    assert len(data["edge_shapes"]) == 3
    assert TilingDocument.from_dict(data) == doc


def test_document_without_edge_shapes_uses_defaults():
    tiling = TilingDocument(type_id=41, parameters=(0.0, 1.0)).to_tiling()
    assert tiling.get_edge_shape(0) == ((1.0 / 3.0, 0.0), (2.0 / 3.0, 0.0))


def test_invalid_documents_raise_engine_errors():
    with pytest.raises(UnknownTilingTypeError):
        TilingDocument.loads('{"type_id": 19, "parameters": []}').to_tiling()
    with pytest.raises(ParameterCountMismatchError):
        TilingDocument(type_id=41, parameters=(1.0,)).to_tiling()
    with pytest.raises(EdgeShapeArityError):
        TilingDocument(type_id=41, parameters=(0.0, 1.0), edge_shapes=(((0.5, 0.1),), ())).to_tiling()
    with pytest.raises(ValueError):
        TilingDocument(type_id=41, parameters=(0.0, 1.0), edge_shapes=((),)).to_tiling()
    with pytest.raises(ValueError):
        TilingDocument.from_dict({"parameters": []})
