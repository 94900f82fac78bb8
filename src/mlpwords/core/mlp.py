"""Minimal-length polygon (MLP) edge extraction from cyclic contour words.

Each call to ``MLPEdgeExtractor.next_edge`` reads one MLP edge from the
current position of a cyclic chain-code word. The alphabet ranks 0, 1
and 2 name the letters a0, a1 and a2 of the current quadrant. Three
cases are distinguished:

- Convexity change: Duval++ rejects the word. The starting letter is
  relabeled a2, ranks 1 and 2 are swapped and the scan is retried from
  the same position.
- Quadrant change: the factor is a run of a1 only. The alphabet is
  rotated right and the run becomes the edge.
- Standard run: the factor is a power of a Christoffel word and forms
  the edge.

Relabeled letters are restored before ``next_edge`` returns. Alphabet
reorderings persist: they carry the quadrant and convexity state to the
next edge.
"""

import logging
from contextlib import ExitStack

from mlpwords.core.alphabet import OrderedAlphabet
from mlpwords.core.christoffel import ChristoffelValidator
from mlpwords.core.modulo import CyclicIndexer
from mlpwords.domain import ChainCodeWord, ChristoffelFactor, EdgeCase, EdgeCursor, MLPEdge
from mlpwords.exceptions import (
    ConvexityRecursionError,
    EmptyWordError,
    MlpWordsError,
    UnclosedDecompositionError,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONVEXITY_DEPTH = 4


class MLPEdgeExtractor:
    """Extracts MLP edges one at a time, reordering its alphabet as it goes.

    Example:
        extractor = MLPEdgeExtractor(OrderedAlphabet.from_ordering("3012"))
        edges = extractor.decompose("00332211")
        assert [e.length for e in edges] == [2, 2, 2, 2]
    """

    def __init__(
        self,
        alphabet: OrderedAlphabet,
        max_convexity_depth: int = DEFAULT_MAX_CONVEXITY_DEPTH,
    ) -> None:
        """Initialize the extractor.

        Args:
            alphabet: Alphabet owned by this decomposition (mutated in place)
            max_convexity_depth: Consecutive convexity changes allowed at
                one position before giving up
        """
        self.alphabet = alphabet
        self.validator = ChristoffelValidator(alphabet)
        self.max_convexity_depth = max_convexity_depth

    def classify(self, word: ChainCodeWord, start: int, factor: ChristoffelFactor) -> EdgeCase:
        """Case that a Duval++ result at ``start`` falls into."""
        if not factor.is_christoffel:
            return EdgeCase.CONVEXITY_CHANGE
        if factor.length == 1 and self.alphabet.rank(word[start]) == 1:
            return EdgeCase.QUADRANT_CHANGE
        return EdgeCase.STANDARD_RUN

    def next_edge(self, word: ChainCodeWord, cursor: EdgeCursor) -> MLPEdge:
        """Extract the MLP edge starting at ``cursor.position``.

        The cursor position moves past the edge and its convexity flag
        is flipped once per convexity change. If extraction fails, the
        word, the alphabet and the cursor are left as they were.

        Args:
            word: Cyclic contour word
            cursor: Caller-owned position and convexity flag (updated)

        Returns:
            The extracted edge, with letter counts labeled by the
            alphabet in force after extraction

        Raises:
            EmptyWordError: If the word is empty
            ChristoffelPreconditionError: If the starting letter is not a1 or a2
            ConvexityRecursionError: If more than ``max_convexity_depth``
                convexity changes happen at the same position
        """
        mc = CyclicIndexer(len(word))
        start = mc.cast(cursor.position)
        saved_order = self.alphabet.order
        saved_convex = cursor.convex
        flips = 0

        with ExitStack() as patches:
            try:
                while True:
                    factor = self.validator.duval_pp_mod(word, start, start)
                    case = self.classify(word, start, factor)
                    if case is not EdgeCase.CONVEXITY_CHANGE:
                        break
                    if flips == self.max_convexity_depth:
                        raise ConvexityRecursionError(start, self.max_convexity_depth)
                    logger.debug(
                        "Convexity change at %d (mismatch at %d), ordering %s",
                        start, factor.length, self.alphabet.current_ordering()
                    )
                    patches.enter_context(word.patched(start, self.alphabet.letter(2)))
                    self.alphabet.reverse_around_rank12()
                    cursor.convex = not cursor.convex
                    flips += 1
            except MlpWordsError:
                self.alphabet.set_order(saved_order)
                cursor.convex = saved_convex
                raise

            if case is EdgeCase.QUADRANT_CHANGE:
                logger.debug(
                    "Quadrant change at %d, ordering %s",
                    start, self.alphabet.current_ordering()
                )
                self.alphabet.rotate_right()
                edge = MLPEdge(
                    length=factor.count,
                    nb_a1=0,
                    nb_a2=factor.count - 1,
                    case=case,
                    convexity_changes=flips,
                )
            else:
                a2 = self.alphabet.letter(2)
                nb_a2 = 0
                k = start
                for _ in range(factor.length):
                    if word[k] == a2:
                        nb_a2 += 1
                    k = mc.next(k)
                edge = MLPEdge(
                    length=factor.length * factor.count,
                    nb_a1=(factor.length - nb_a2) * factor.count,
                    nb_a2=nb_a2 * factor.count,
                    case=case,
                    convexity_changes=flips,
                )

        cursor.position = mc.advance(start, edge.length)
        return edge

    def decompose(
        self, word: ChainCodeWord | str, start: int = 0, convex: bool = True
    ) -> list[MLPEdge]:
        """Decompose a whole cyclic contour word into MLP edges.

        Calls ``next_edge`` from ``start`` until the edges cover the
        word exactly once.

        Args:
            word: Cyclic contour word (a str is copied into a buffer)
            start: Position where the first edge starts
            convex: Initial convexity flag

        Returns:
            Edges in contour order; their lengths add up to ``len(word)``

        Raises:
            EmptyWordError: If the word is empty
            UnclosedDecompositionError: If the last edge runs past the start
        """
        if isinstance(word, str):
            word = ChainCodeWord(word)
        m = len(word)
        if m == 0:
            raise EmptyWordError()

        cursor = EdgeCursor(position=start % m, convex=convex)
        edges: list[MLPEdge] = []
        consumed = 0
        while consumed < m:
            edge = self.next_edge(word, cursor)
            edges.append(edge)
            consumed += edge.length

        if consumed != m:
            raise UnclosedDecompositionError(consumed, m)
        return edges
