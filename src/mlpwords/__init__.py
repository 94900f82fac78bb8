"""mlpwords - Ordered-alphabet word factorization for digital contours.

mlpwords maintains a dynamically reorderable finite alphabet and runs
combinatorics-on-words algorithms over chain codes drawn from it: Lyndon
factorization, Christoffel word validation (Duval++), and extraction of
minimal-length polygon (MLP) edges from cyclic contour words.

Example:
    $ mlpwords decompose 0101030332322121 --ordering 3012

This prints one (length, a1 count, a2 count) row per MLP edge.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
