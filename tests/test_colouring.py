from collections import defaultdict

import pytest

from isotile import (
    TILING_TYPES,
    Colouring,
    MalformedPermutationError,
    MinColouring,
    Permutation,
    UniformColouring,
    create_tiling,
)


def test_rank_of_common_permutations():
    assert Permutation.rank([0, 1, 2]) == 1
    assert Permutation.rank([1, 0, 2]) == 2
    assert Permutation.rank([1, 2, 0]) == 3
    assert Permutation.rank([1, 0, 3, 4, 2]) == 6


def test_power_and_multiply():
    p = (1, 2, 0)
    assert Permutation.power(p, 0) == (0, 1, 2)
    assert Permutation.power(p, 1) == p
    assert Permutation.power(p, 2) == (2, 0, 1)
    assert Permutation.power(p, 3) == (0, 1, 2)
    assert Permutation.multiply(p, p) == Permutation.power(p, 2)
    assert Permutation.multiply([1, 0, 2], [0, 2, 1]) == (2, 0, 1)
    with pytest.raises(ValueError):
        Permutation.multiply([0, 1], [0, 1, 2])
    with pytest.raises(ValueError):
        Permutation.power(p, -1)


def test_evaluate_applies_exactly_n_times():
    p = [1, 2, 0]
    assert Permutation.evaluate(p, 0, 0) == 0
    assert Permutation.evaluate(p, 0, 1) == 1
    assert Permutation.evaluate(p, 0, 5) == 2


@pytest.mark.parametrize("bad", [[0, 0, 1], [1, 2, 3], [], [0, 1.5, 2], [-1, 0, 1]])
def test_malformed_permutations_raise(bad):
    with pytest.raises(MalformedPermutationError):
        Permutation.rank(bad)
    with pytest.raises(MalformedPermutationError):
        Colouring([0, 1, 2], [0], bad, [0, 1, 2])


def test_colouring_validates_initial_and_palette():
    with pytest.raises(MalformedPermutationError):
        Colouring([0, 1, 2], [3], [0, 1, 2], [0, 1, 2])
    with pytest.raises(ValueError):
        Colouring(["red"], [0], [1, 0], [0, 1])


def test_get_colour_formula():
    c = Colouring(["a", "b", "c"], [0, 2], [1, 2, 0], [0, 2, 1])
    assert c.periods == (3, 2)
    assert c.get_colour(0, 0, 0) == "a"
    assert c.get_colour(0, 0, 1) == "c"
    assert c.get_colour(1, 0, 0) == "b"
    assert c.get_colour(1, 1, 0) == "c"
    assert c.get_colour(-1, 0, 0) == "c"
    with pytest.raises(IndexError):
        c.get_colour(0, 0, 2)


@pytest.mark.parametrize("type_id", TILING_TYPES)
def test_colour_is_periodic(type_id):
    tiling = create_tiling(type_id)
    r1, r2 = (Permutation.rank(p) for p in tiling.descriptor.colour_permutations)
    for aspect in range(tiling.num_aspects()):
        for t1 in range(-2, 3):
            for t2 in range(-2, 3):
                colour = tiling.get_colour(t1, t2, aspect)
                assert 0 <= colour < tiling.descriptor.num_colours
                assert tiling.get_colour(t1 + r1, t2, aspect) == colour
                assert tiling.get_colour(t1, t2 + r2, aspect) == colour


@pytest.mark.parametrize("type_id", TILING_TYPES)
def test_neighbouring_tiles_differ_in_colour(type_id):
    tiling = create_tiling(type_id)
    verts = tiling.vertices()
    n = len(verts)
    owners = defaultdict(set)
    for tile in tiling.fill_region_bounds(0.0, 0.0, 1.5, 1.5):
        placed = tile.transform.apply_many(verts)
        for i in range(n):
            mx, my = (placed[i] + placed[(i + 1) % n]) / 2.0
            owners[(round(mx * 1e5), round(my * 1e5))].add((tile.t1, tile.t2, tile.aspect))
    shared = [tiles for tiles in owners.values() if len(tiles) == 2]
    assert shared
    for a, b in shared:
        assert tiling.get_colour(*a) != tiling.get_colour(*b)


def test_uniform_and_min_colouring():
    tiling = create_tiling(45)
    uniform = UniformColouring(tiling, "grey")
    assert {uniform.get_colour(t1, 0, a) for t1 in range(3) for a in range(tiling.num_aspects())} == {"grey"}
    palette = ["red", "green", "blue"]
    minimal = MinColouring(tiling, palette)
    assert minimal.get_colour(0, 0, 0) == palette[tiling.get_colour(0, 0, 0)]
    assert minimal.get_colour(1, 2, 1) == palette[tiling.get_colour(1, 2, 1)]
