"""Permutation-based colour assignment for tile instances."""

from __future__ import annotations

import logging
import numbers
from typing import TYPE_CHECKING, Any, List, Sequence, Tuple

from .errors import MalformedPermutationError

if TYPE_CHECKING:  # pragma: no cover
    from .tiling import IsohedralTiling

logger = logging.getLogger(__name__)

Perm = Tuple[int, ...]


class Permutation:
    """Helpers for permutations stored as index arrays ``p[i]``."""

    @staticmethod
    def validate(p: Sequence[int]) -> Perm:
        """Return ``p`` as a tuple, or raise unless it is a bijection on ``range(len(p))``."""
        raw = tuple(p)
        n = len(raw)
        if n == 0:
            raise MalformedPermutationError("permutation must not be empty")
        for value in raw:
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise MalformedPermutationError(f"permutation entries must be integers, got {value!r}")
        values = tuple(int(v) for v in raw)
        if sorted(values) != list(range(n)):
            raise MalformedPermutationError(f"{list(values)} is not a permutation of 0..{n - 1}")
        return values

    @staticmethod
    def identity(n: int) -> Perm:
        return tuple(range(n))

    @staticmethod
    def multiply(p1: Sequence[int], p2: Sequence[int]) -> Perm:
        """Return ``i -> p2[p1[i]]``."""
        a = Permutation.validate(p1)
        b = Permutation.validate(p2)
        if len(a) != len(b):
            raise ValueError(f"cannot multiply permutations of sizes {len(a)} and {len(b)}")
        return tuple(b[x] for x in a)

    @staticmethod
    def power(p: Sequence[int], n: int) -> Perm:
        """Compose ``p`` with itself ``n`` times; ``n == 0`` gives the identity."""
        if n < 0:
            raise ValueError(f"permutation exponent must be non-negative, got {n}")
        base = Permutation.validate(p)
        result = Permutation.identity(len(base))
        for _ in range(n):
            result = tuple(base[x] for x in result)
        return result

    @staticmethod
    def rank(p: Sequence[int]) -> int:
        """Smallest positive ``k`` with ``p^k`` equal to the identity."""
        base = Permutation.validate(p)
        identity = Permutation.identity(len(base))
        product = base
        rank = 1
        while product != identity:
            product = tuple(base[x] for x in product)
            rank += 1
        return rank

    @staticmethod
    def evaluate(p: Sequence[int], start: int, num_times: int) -> int:
        """Apply ``p`` to ``start`` exactly ``num_times`` times."""
        base = Permutation.validate(p)
        if not 0 <= start < len(base):
            raise ValueError(f"start index {start} outside permutation domain of size {len(base)}")
        value = start
        for _ in range(num_times):
            value = base[value]
        return value


class Colouring:
    """Colour classes that cycle under the lattice translations."""

    def __init__(
        self,
        palette: Sequence[Any],
        initial: Sequence[int],
        p1: Sequence[int],
        p2: Sequence[int],
    ):
        self.p1 = Permutation.validate(p1)
        self.p2 = Permutation.validate(p2)
        if len(self.p1) != len(self.p2):
            raise MalformedPermutationError(
                f"colouring permutations differ in size ({len(self.p1)} and {len(self.p2)})"
            )
        size = len(self.p1)
        for colour in initial:
            if isinstance(colour, bool) or not isinstance(colour, numbers.Integral) or not 0 <= colour < size:
                raise MalformedPermutationError(f"initial colour {colour!r} outside 0..{size - 1}")
        self.initial: Tuple[int, ...] = tuple(int(c) for c in initial)
        self.palette: List[Any] = list(palette)
        if len(self.palette) < size:
            raise ValueError(f"palette needs at least {size} entries, got {len(self.palette)}")
        self.p1rank = Permutation.rank(self.p1)
        self.p2rank = Permutation.rank(self.p2)
        logger.debug("Colouring with %d classes repeats every %d x %d cells", size, self.p1rank, self.p2rank)

    @property
    def periods(self) -> Tuple[int, int]:
        return self.p1rank, self.p2rank

    def colour_index(self, t1: int, t2: int, aspect: int) -> int:
        if not 0 <= aspect < len(self.initial):
            raise IndexError(f"aspect {aspect} out of range [0, {len(self.initial)})")
        c = self.initial[aspect]
        for _ in range(t1 % self.p1rank):
            c = self.p1[c]
        for _ in range(t2 % self.p2rank):
            c = self.p2[c]
        return c

    def get_colour(self, t1: int, t2: int, aspect: int) -> Any:
        return self.palette[self.colour_index(t1, t2, aspect)]


class UniformColouring(Colouring):
    """Every tile receives the same colour."""

    def __init__(self, tiling: "IsohedralTiling", colour: Any):
        super().__init__([colour], [0] * tiling.num_aspects(), [0], [0])


class MinColouring(Colouring):
    """The type's own colouring; tiles sharing an edge never share a colour."""

    def __init__(self, tiling: "IsohedralTiling", palette: Sequence[Any]):
        descriptor = tiling.descriptor
        p1, p2 = descriptor.colour_permutations
        super().__init__(palette, descriptor.initial_colours, p1, p2)
