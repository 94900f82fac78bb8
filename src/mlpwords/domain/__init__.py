"""Domain models for mlpwords.

This module contains the value types exchanged by the word algorithms:
factor descriptors, MLP edges, the mutable word buffer and Freeman
chains. Result types are frozen dataclasses; the word buffer and the
edge cursor are mutable by design of the edge extraction.

Key classes:
- LyndonFactor: (length, count) descriptor of a first Lyndon factor
- ChristoffelFactor: Lyndon factor plus Christoffel certificate
- MLPEdge: One extracted minimal-length polygon edge
- EdgeCursor: Caller-owned position and convexity flag
- ChainCodeWord: Word buffer supporting scoped single-letter patches
- FreemanChain: Contour read from a chain code file
"""

from mlpwords.domain.chain import FREEMAN_STEPS, FreemanChain
from mlpwords.domain.edge import EdgeCase, EdgeCursor, MLPEdge
from mlpwords.domain.factor import ChristoffelFactor, LyndonFactor
from mlpwords.domain.word import ChainCodeWord

__all__: list[str] = [
    # Enums
    "EdgeCase",
    # Core types
    "ChainCodeWord",
    "ChristoffelFactor",
    "EdgeCursor",
    "FREEMAN_STEPS",
    "FreemanChain",
    "LyndonFactor",
    "MLPEdge",
]
