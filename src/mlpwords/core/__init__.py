"""Core word algorithms for mlpwords.

This module contains the combinatorics-on-words algorithms:

- Modular index arithmetic over cyclic words
- Ordered alphabets with in-place reordering
- First Lyndon factor extraction (linear and cyclic)
- Christoffel word validation with Duval++ (linear and cyclic)
- MLP edge extraction from cyclic contour words

Algorithm classes hold a reference to an OrderedAlphabet and compare
letters through its current order. MLP extraction reorders the
alphabet, so each contour needs its own alphabet instance.

Key classes:
- CyclicIndexer: Index arithmetic modulo a word length
- OrderedAlphabet: Alphabet with a mutable rank permutation
- LyndonFactorizer: First Lyndon factor of a word
- ChristoffelValidator: Duval++ factorization and certification
- MLPEdgeExtractor: MLP edges of a contour word
- ContourDecomposer: Settings-driven batch decomposition
"""

from mlpwords.core.alphabet import OrderedAlphabet
from mlpwords.core.christoffel import ChristoffelValidator
from mlpwords.core.decomposer import (
    ContourDecomposer,
    ContourDecomposition,
    align_alphabet,
    alphabet_for_contour,
    build_alphabet,
    decompose_chain,
)
from mlpwords.core.lyndon import LyndonFactorizer
from mlpwords.core.mlp import MLPEdgeExtractor
from mlpwords.core.modulo import CyclicIndexer

__all__ = [
    "ChristoffelValidator",
    "ContourDecomposer",
    "ContourDecomposition",
    "CyclicIndexer",
    "LyndonFactorizer",
    "MLPEdgeExtractor",
    "OrderedAlphabet",
    "align_alphabet",
    "alphabet_for_contour",
    "build_alphabet",
    "decompose_chain",
]
