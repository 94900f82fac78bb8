"""Ordered alphabet with a mutable rank permutation.

The alphabet holds ``size`` consecutive letters starting at ``first``.
Its order maps each letter to a rank; reordering operations rewrite the
rank table in place and always keep it a permutation of
``range(size)``.

An alphabet is mutated by MLP edge extraction, so one instance must not
be shared between contours decomposed concurrently. ``copy()`` gives an
independent instance.
"""

from collections.abc import Sequence

from mlpwords.exceptions import InvalidAlphabetError, LetterOutOfRangeError

_MAX_CODE_POINT = 0x10FFFF


class OrderedAlphabet:
    """Finite alphabet a0 < a1 < ... < a(n-1) with a reorderable order.

    Attributes:
        first: First letter of the alphabet
        size: Number of letters

    Example:
        >>> alphabet = OrderedAlphabet("a", 4)
        >>> alphabet.current_ordering()
        'abcd'
        >>> alphabet.rotate_left()
        >>> alphabet.current_ordering()
        'bcda'
    """

    __slots__ = ("first", "size", "_first_code", "_order")

    def __init__(self, first: str, size: int, order: Sequence[int] | None = None) -> None:
        """Initialize the alphabet.

        Args:
            first: First letter (a single character)
            size: Number of consecutive letters (at least 1)
            order: Rank of each letter, indexed by ``letter - first``
                (None = identity)

        Raises:
            InvalidAlphabetError: If the letters or the order are invalid
        """
        if len(first) != 1:
            raise InvalidAlphabetError(f"first letter must be a single character, got {first!r}")
        if size < 1:
            raise InvalidAlphabetError(f"size must be >= 1, got {size}")
        if ord(first) + size - 1 > _MAX_CODE_POINT:
            raise InvalidAlphabetError(f"{size} letters from {first!r} exceed the character range")

        self.first = first
        self.size = size
        self._first_code = ord(first)
        self._order: list[int] = list(range(size))
        if order is not None:
            self.set_order(order)

    @classmethod
    def identity(cls, first: str, size: int) -> "OrderedAlphabet":
        """Alphabet whose ranks follow the character codes."""
        return cls(first, size)

    @classmethod
    def from_ordering(cls, ordering: str) -> "OrderedAlphabet":
        """Build an alphabet from its serialized ordering.

        Args:
            ordering: Letters listed from rank 0 upward, e.g. "3012"

        Returns:
            Alphabet whose ``current_ordering()`` equals ``ordering``

        Raises:
            InvalidAlphabetError: If the letters are not a set of
                consecutive characters
        """
        if not ordering:
            raise InvalidAlphabetError("ordering must not be empty")
        codes = [ord(c) for c in ordering]
        low = min(codes)
        if sorted(codes) != list(range(low, low + len(codes))):
            raise InvalidAlphabetError(
                f"ordering {ordering!r} must list consecutive letters exactly once"
            )
        order = [0] * len(codes)
        for rank, code in enumerate(codes):
            order[code - low] = rank
        return cls(chr(low), len(codes), order)

    # ------------------------------------------------------------------
    # Rank lookup and comparisons

    def _index(self, letter: str) -> int:
        idx = ord(letter) - self._first_code
        if not 0 <= idx < self.size:
            raise LetterOutOfRangeError(letter, self.first, self.size)
        return idx

    def rank(self, letter: str) -> int:
        """Rank of ``letter`` in the current order."""
        return self._order[self._index(letter)]

    def letter(self, rank: int) -> str:
        """Letter currently holding ``rank``."""
        if not 0 <= rank < self.size:
            raise InvalidAlphabetError(f"rank {rank} outside [0, {self.size})")
        return chr(self._first_code + self._order.index(rank))

    def less_or_equal(self, a: str, b: str) -> bool:
        return self.rank(a) <= self.rank(b)

    def less_than(self, a: str, b: str) -> bool:
        return self.rank(a) < self.rank(b)

    def equal(self, a: str, b: str) -> bool:
        """Letter identity (not rank equality)."""
        return a == b

    # ------------------------------------------------------------------
    # Ordering state

    @property
    def order(self) -> tuple[int, ...]:
        """Snapshot of the rank table, indexed by ``letter - first``."""
        return tuple(self._order)

    def set_order(self, order: Sequence[int]) -> None:
        """Replace the rank table.

        Raises:
            InvalidAlphabetError: If ``order`` is not a permutation of
                ``range(size)``
        """
        if len(order) != self.size or sorted(order) != list(range(self.size)):
            raise InvalidAlphabetError(
                f"order {list(order)} is not a permutation of range({self.size})"
            )
        self._order[:] = order

    def current_ordering(self) -> str:
        """Letters listed from rank 0 upward."""
        table = [""] * self.size
        for idx, rank in enumerate(self._order):
            table[rank] = chr(self._first_code + idx)
        return "".join(table)

    def display(self) -> str:
        return f"[OrderedAlphabet] {self.current_ordering()}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"OrderedAlphabet.from_ordering({self.current_ordering()!r})"

    def is_valid(self) -> bool:
        """Check that the rank table is a permutation."""
        return sorted(self._order) == list(range(self.size))

    def copy(self) -> "OrderedAlphabet":
        """Independent alphabet with the same letters and order."""
        return OrderedAlphabet(self.first, self.size, self._order)

    # ------------------------------------------------------------------
    # Reordering

    def rotate_left(self) -> None:
        """Shift a0 < a1 < ... < an to a1 < ... < an < a0."""
        n = self.size
        order = self._order
        for idx in range(n):
            rank = order[idx]
            order[idx] = n - 1 if rank == 0 else rank - 1

    def rotate_right(self) -> None:
        """Shift a0 < a1 < ... < an to an < a0 < ... < an-1."""
        n = self.size
        order = self._order
        for idx in range(n):
            rank = order[idx] + 1
            order[idx] = 0 if rank == n else rank

    def reverse_order(self) -> None:
        """Reverse a0 < a1 < ... < an to an < ... < a1 < a0."""
        n = self.size
        order = self._order
        for idx in range(n):
            order[idx] = n - 1 - order[idx]

    def reverse_around_rank12(self) -> None:
        """Reverse a0 < a1 < ... < an to a3 < a2 < a1 < a0 < an < ... < a4.

        Ranks 1 and 2 swap places. Applying it twice restores the order.
        """
        n = self.size
        order = self._order
        for idx in range(n):
            order[idx] = (n + 3 - order[idx]) % n
