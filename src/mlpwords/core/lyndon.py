"""First Lyndon factor extraction (Duval's algorithm).

The factorizer compares letters through an ``OrderedAlphabet``, so the
same word factorizes differently as the alphabet is reordered.
"""

from collections.abc import Sequence

from mlpwords.core.alphabet import OrderedAlphabet
from mlpwords.core.modulo import CyclicIndexer
from mlpwords.domain import LyndonFactor
from mlpwords.exceptions import InvalidRangeError


def check_range(word: Sequence[str], start: int, end: int) -> None:
    """Validate a linear scan range ``[start, end)`` of ``word``.

    Raises:
        InvalidRangeError: If the range is empty or not inside the word
    """
    if not 0 <= start < end <= len(word):
        raise InvalidRangeError(start, end, len(word))


class LyndonFactorizer:
    """Extracts the first Lyndon factor of a word under an alphabet order.

    Example:
        >>> factorizer = LyndonFactorizer(OrderedAlphabet("a", 2))
        >>> factorizer.first_factor("abab")
        LyndonFactor(length=2, count=2)
    """

    def __init__(self, alphabet: OrderedAlphabet) -> None:
        self.alphabet = alphabet

    def first_factor(
        self, word: Sequence[str], start: int = 0, end: int | None = None
    ) -> LyndonFactor:
        """First Lyndon factor of ``word[start:end]``.

        ``word[start:start + length * count]`` is ``count`` copies of the
        Lyndon word ``word[start:start + length]``.

        Args:
            word: The word to scan
            start: Index of the first letter
            end: Index after the last letter (None = end of word)

        Returns:
            LyndonFactor with the factor length and repetition count

        Raises:
            InvalidRangeError: If ``[start, end)`` is empty or out of bounds
        """
        if end is None:
            end = len(word)
        check_range(word, start, end)

        alphabet = self.alphabet
        i = start
        j = start + 1
        while j < end and alphabet.less_or_equal(word[i], word[j]):
            if alphabet.equal(word[i], word[j]):
                i += 1
            else:
                i = start
            j += 1

        length = j - i
        return LyndonFactor(length=length, count=(j - start) // length)

    def first_factor_mod(
        self, word: Sequence[str], start: int, end: int | None = None
    ) -> LyndonFactor:
        """First Lyndon factor of the cyclic word ``word`` read from ``start``.

        The scan stops before ``end``; when ``end == start`` (the default)
        it may run a full revolution, in which case the whole word is one
        factor or a power of one.

        Args:
            word: The cyclic word to scan (non-empty)
            start: Index of the first letter
            end: Index where the scan must stop (None = start)

        Returns:
            LyndonFactor with the factor length and repetition count

        Raises:
            EmptyWordError: If the word is empty
        """
        mc = CyclicIndexer(len(word))
        start = mc.cast(start)
        end = start if end is None else mc.cast(end)

        alphabet = self.alphabet
        i = start
        j = mc.next(start)
        while j != end and alphabet.less_or_equal(word[i], word[j]):
            if alphabet.equal(word[i], word[j]):
                i = mc.next(i)
            else:
                i = start
            j = mc.next(j)

        return LyndonFactor(*cyclic_factor_size(mc, start, i, j))


def cyclic_factor_size(mc: CyclicIndexer, start: int, i: int, j: int) -> tuple[int, int]:
    """Factor length and count once a cyclic scan stopped at cursors ``i``, ``j``.

    A zero distance stands for a full revolution of the word.
    """
    length = mc.distance(i, j) or mc.modulus
    scanned = mc.distance(start, j) or mc.modulus
    return length, scanned // length
