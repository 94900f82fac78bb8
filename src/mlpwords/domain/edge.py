"""MLP edge types produced by contour word decomposition."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class EdgeCase(Enum):
    """Structural case met while extracting an MLP edge.

    - CONVEXITY_CHANGE: Duval++ rejected the word, alphabet flipped and retried
    - QUADRANT_CHANGE: the edge is a run of the rank-1 letter only
    - STANDARD_RUN: the edge is a power of a Christoffel word
    """

    CONVEXITY_CHANGE = "convexity_change"
    QUADRANT_CHANGE = "quadrant_change"
    STANDARD_RUN = "standard_run"


@dataclass(frozen=True, slots=True)
class MLPEdge:
    """One edge of the minimal-length polygon.

    Letter counts refer to the alphabet labeling in force after the
    edge was extracted.

    Attributes:
        length: Number of contour letters spanned by the edge
        nb_a1: Number of rank-1 letters in the edge
        nb_a2: Number of rank-2 letters in the edge
        case: Case that produced the edge (never CONVEXITY_CHANGE)
        convexity_changes: Convexity changes crossed before the edge was found
    """

    length: int
    nb_a1: int
    nb_a2: int
    case: EdgeCase = EdgeCase.STANDARD_RUN
    convexity_changes: int = 0

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to the (length, nb_a1, nb_a2) triple."""
        return (self.length, self.nb_a1, self.nb_a2)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "length": self.length,
            "nb_a1": self.nb_a1,
            "nb_a2": self.nb_a2,
            "case": self.case.value,
            "convexity_changes": self.convexity_changes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MLPEdge":
        """Deserialize from dictionary."""
        return cls(
            length=data["length"],
            nb_a1=data["nb_a1"],
            nb_a2=data["nb_a2"],
            case=EdgeCase(data["case"]),
            convexity_changes=data.get("convexity_changes", 0),
        )


@dataclass
class EdgeCursor:
    """Caller-owned position and convexity flag of a decomposition.

    Both fields are updated in place by each edge extraction.

    Attributes:
        position: Index in the cyclic word where the next edge starts
        convex: Flipped once for every convexity change crossed
    """

    position: int = 0
    convex: bool = True
