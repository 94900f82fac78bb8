"""Christoffel word validation during Lyndon factorization (Duval++).

Duval's algorithm is extended with a pair of counters ``(p, q)`` that
walk the Stern-Brocot tree. Each accepted mismatch replaces the pair by
its mediant refinement ``(q, 2q - p)``, so the first Lyndon factor is
extracted and certified as a Christoffel word in the same scan.

The alphabet takes the form a0 < a1 < a2 < ... and the scanned word
must start with a1 or a2. See Provencal and Lachaud, "Two linear-time
algorithms for computing the minimum length polygon of a digital
contour", 2009.
"""

from collections.abc import Sequence

from mlpwords.core.alphabet import OrderedAlphabet
from mlpwords.core.lyndon import check_range, cyclic_factor_size
from mlpwords.core.modulo import CyclicIndexer
from mlpwords.domain import ChristoffelFactor
from mlpwords.exceptions import ChristoffelPreconditionError


class ChristoffelValidator:
    """Extracts a first Lyndon factor and tells whether it is a Christoffel word."""

    def __init__(self, alphabet: OrderedAlphabet) -> None:
        self.alphabet = alphabet

    def _check_start(self, word: Sequence[str], start: int) -> None:
        rank = self.alphabet.rank(word[start])
        if rank not in (1, 2):
            raise ChristoffelPreconditionError(word[start], rank, start)

    def duval_pp(
        self, word: Sequence[str], start: int = 0, end: int | None = None
    ) -> ChristoffelFactor:
        """Duval++ over ``word[start:end]``.

        Args:
            word: Word starting with a1 or a2 at ``start``
            start: Index of the first letter
            end: Index after the last letter (None = end of word)

        Returns:
            ChristoffelFactor. On rejection, ``length`` is the position of
            the offending letter and ``count`` is 0.

        Raises:
            InvalidRangeError: If ``[start, end)`` is empty or out of bounds
            ChristoffelPreconditionError: If ``word[start]`` is not a1 or a2
        """
        if end is None:
            end = len(word)
        check_range(word, start, end)
        self._check_start(word, start)

        alphabet = self.alphabet
        i = start
        j = start + 1
        p = 1
        q = 2
        while j < end and alphabet.less_or_equal(word[i], word[j]):
            if alphabet.equal(word[i], word[j]):
                if j + 1 == start + q:
                    q += p
                i += 1
            else:
                if j + 1 != start + q or alphabet.rank(word[j]) != 2:
                    return ChristoffelFactor(length=j, count=0, is_christoffel=False)
                p, q = q, 2 * q - p
                i = start
            j += 1

        length = j - i
        return ChristoffelFactor(length=length, count=(j - start) // length, is_christoffel=True)

    def duval_pp_mod(
        self, word: Sequence[str], start: int, end: int | None = None
    ) -> ChristoffelFactor:
        """Duval++ over the cyclic word ``word`` read from ``start``.

        With ``end == start`` (the default) the scan may cover the whole
        word once.

        Args:
            word: Cyclic word starting with a1 or a2 at ``start``
            start: Index of the first letter
            end: Index where the scan must stop (None = start)

        Returns:
            ChristoffelFactor. On rejection, ``length`` is the position of
            the offending letter and ``count`` is 0.

        Raises:
            EmptyWordError: If the word is empty
            ChristoffelPreconditionError: If ``word[start]`` is not a1 or a2
        """
        mc = CyclicIndexer(len(word))
        start = mc.cast(start)
        end = start if end is None else mc.cast(end)
        self._check_start(word, start)

        alphabet = self.alphabet
        i = start
        j = mc.next(start)
        p = 1
        q = 2
        while j != end and alphabet.less_or_equal(word[i], word[j]):
            if alphabet.equal(word[i], word[j]):
                if j == mc.advance(start, q - 1):
                    q += p
                i = mc.next(i)
            else:
                if j != mc.advance(start, q - 1) or alphabet.rank(word[j]) != 2:
                    return ChristoffelFactor(length=j, count=0, is_christoffel=False)
                p, q = q, 2 * q - p
                i = start
            j = mc.next(j)

        length, count = cyclic_factor_size(mc, start, i, j)
        return ChristoffelFactor(length=length, count=count, is_christoffel=True)
