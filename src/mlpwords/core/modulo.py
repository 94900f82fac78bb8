"""Modular index arithmetic over cyclic words.

All results lie in ``[0, modulus)``. Python integers are immutable, so
incrementing an index is written ``i = indexer.next(i)``.
"""

from mlpwords.exceptions import EmptyWordError


class CyclicIndexer:
    """Index arithmetic modulo the length of a cyclic word.

    Example:
        >>> mc = CyclicIndexer(5)
        >>> mc.next(4)
        0
        >>> mc.advance(3, 4)
        2
        >>> mc.distance(4, 1)
        2
    """

    __slots__ = ("modulus",)

    def __init__(self, modulus: int) -> None:
        """Initialize the indexer.

        Args:
            modulus: Length of the cyclic word (must be positive)

        Raises:
            EmptyWordError: If modulus is not positive
        """
        if modulus <= 0:
            raise EmptyWordError(f"Cyclic indexer needs a positive modulus, got {modulus}")
        self.modulus = modulus

    def next(self, i: int) -> int:
        """Index following ``i``."""
        i += 1
        return 0 if i == self.modulus else i

    def previous(self, i: int) -> int:
        """Index preceding ``i``."""
        return self.modulus - 1 if i == 0 else i - 1

    def cast(self, k: int) -> int:
        """Reduce any integer to an index."""
        return k % self.modulus

    def advance(self, i: int, k: int) -> int:
        """Index ``k`` steps after ``i``."""
        return (i + k) % self.modulus

    def distance(self, i: int, j: int) -> int:
        """Number of forward steps from ``i`` to ``j``."""
        return j - i if j >= i else j + self.modulus - i
