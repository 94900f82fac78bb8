"""Factor descriptors returned by the factorization algorithms."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LyndonFactor:
    """First Lyndon factor found from a starting position.

    Attributes:
        length: Length of the primitive repeating block
        count: Number of full repetitions of the block from the start
    """

    length: int
    count: int

    @property
    def span(self) -> int:
        """Number of letters covered by all repetitions."""
        return self.length * self.count

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"length": self.length, "count": self.count}


@dataclass(frozen=True, slots=True)
class ChristoffelFactor:
    """Duval++ result: a Lyndon factor plus a Christoffel certificate.

    When ``is_christoffel`` is False the scan stopped on a letter that
    breaks the Christoffel pattern; ``length`` then holds the position of
    that letter in the word and ``count`` is 0.

    Attributes:
        length: Length of the primitive factor, or the mismatch position
        count: Number of repetitions (0 for non-Christoffel words)
        is_christoffel: True if the factor is a Christoffel word
    """

    length: int
    count: int
    is_christoffel: bool

    @property
    def span(self) -> int:
        """Number of letters covered by all repetitions."""
        return self.length * self.count

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "length": self.length,
            "count": self.count,
            "is_christoffel": self.is_christoffel,
        }
