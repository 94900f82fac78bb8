"""Chain code reader for contour files.

A chain file holds one contour per line::

    # x0 y0 code
    0 0 00332211
    5 3 0101030332322121

Blank lines and lines starting with ``#`` are ignored. Codes use the
Freeman letters '0' (east), '1' (north), '2' (west) and '3' (south).
"""

from collections.abc import Iterator
from pathlib import Path

from mlpwords.domain.chain import FREEMAN_STEPS, FreemanChain
from mlpwords.exceptions import ChainFileError


def parse_chain_line(line: str, name: str = "") -> FreemanChain:
    """Parse one ``x0 y0 code`` record.

    Args:
        line: Record text, without comment marker
        name: Label given to the chain

    Returns:
        Parsed FreemanChain

    Raises:
        ValueError: If the record is malformed
    """
    fields = line.split()
    if len(fields) != 3:
        raise ValueError(f"expected 'x0 y0 code', got {len(fields)} fields")

    x0, y0, code = fields
    invalid = sorted(set(code) - set(FREEMAN_STEPS))
    if invalid:
        raise ValueError(f"invalid Freeman letters {''.join(invalid)!r}")

    return FreemanChain(x0=int(x0), y0=int(y0), code=code, name=name)


class ChainCodeReader:
    """Loads Freeman chain codes from a text file.

    Example:
        reader = ChainCodeReader(Path("shapes.chain"))
        for chain in reader.iter_chains():
            print(chain.name, len(chain))
    """

    def __init__(self, chain_path: Path) -> None:
        """Initialize the reader.

        Args:
            chain_path: Path to the chain file
        """
        self._chain_path = chain_path

    def iter_chains(self) -> Iterator[FreemanChain]:
        """Iterate over the contours of the file.

        Chains are named ``<file stem>:<line number>``.

        Yields:
            One FreemanChain per record

        Raises:
            ChainFileError: If the file is missing or a record is malformed
        """
        path = self._chain_path
        if not path.exists():
            raise ChainFileError(str(path), "file not found")

        with path.open(encoding="utf-8") as f:
            for lineno, raw in enumerate(f, start=1):
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                try:
                    yield parse_chain_line(line, name=f"{path.stem}:{lineno}")
                except ValueError as e:
                    raise ChainFileError(str(path), str(e), line=lineno) from e

    def read(self) -> list[FreemanChain]:
        """Read all contours of the file."""
        return list(self.iter_chains())
