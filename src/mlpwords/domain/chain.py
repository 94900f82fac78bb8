"""Freeman chain codes as read from contour files."""

from dataclasses import dataclass
from typing import Any

# Unit steps for letters '0' (east), '1' (north), '2' (west), '3' (south)
FREEMAN_STEPS: dict[str, tuple[int, int]] = {
    "0": (1, 0),
    "1": (0, 1),
    "2": (-1, 0),
    "3": (0, -1),
}


@dataclass(frozen=True, slots=True)
class FreemanChain:
    """A 4-connected digital contour encoded as a Freeman chain code.

    Attributes:
        x0: X coordinate of the starting point
        y0: Y coordinate of the starting point
        code: Sequence of letters '0'-'3', one per unit step
        name: Label used in logs and reports
    """

    x0: int
    y0: int
    code: str
    name: str = ""

    def __len__(self) -> int:
        return len(self.code)

    def displacement(self) -> tuple[int, int]:
        """Net (dx, dy) displacement after following every step."""
        dx = 0
        dy = 0
        for letter in self.code:
            step_x, step_y = FREEMAN_STEPS[letter]
            dx += step_x
            dy += step_y
        return (dx, dy)

    def is_closed(self) -> bool:
        """Check whether the chain comes back to its starting point."""
        return len(self.code) > 0 and self.displacement() == (0, 0)

    def points(self) -> list[tuple[int, int]]:
        """List the visited points, starting point included, endpoint excluded."""
        x, y = self.x0, self.y0
        result = []
        for letter in self.code:
            result.append((x, y))
            step_x, step_y = FREEMAN_STEPS[letter]
            x += step_x
            y += step_y
        return result

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x0": self.x0, "y0": self.y0, "code": self.code, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FreemanChain":
        """Deserialize from dictionary."""
        return cls(
            x0=data["x0"],
            y0=data["y0"],
            code=data["code"],
            name=data.get("name", ""),
        )
