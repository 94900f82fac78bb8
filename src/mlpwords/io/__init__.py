"""Chain code I/O layer for mlpwords.

This module reads contour chain codes from text files and converts
them to domain models.

Key classes:
- ChainCodeReader: Load Freeman chain codes from a file
"""

from mlpwords.io.reader import ChainCodeReader, parse_chain_line

__all__ = [
    "ChainCodeReader",
    "parse_chain_line",
]
