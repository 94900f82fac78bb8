"""Mutable chain-code word buffer."""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager


class ChainCodeWord:
    """A word over an alphabet, stored as a mutable buffer of letters.

    Edge extraction relabels one letter at a time while it retries a
    scan. ``patched`` scopes such a relabeling so the original letter is
    put back on every exit path.

    Example:
        word = ChainCodeWord("00112233")
        with word.patched(2, "2"):
            assert str(word) == "00212233"
        assert str(word) == "00112233"
    """

    __slots__ = ("_letters",)

    def __init__(self, letters: Iterable[str] = "") -> None:
        self._letters: list[str] = list(letters)

    def __len__(self) -> int:
        return len(self._letters)

    def __getitem__(self, index: int) -> str:
        return self._letters[index]

    def __setitem__(self, index: int, letter: str) -> None:
        self._letters[index] = letter

    def __iter__(self) -> Iterator[str]:
        return iter(self._letters)

    def __str__(self) -> str:
        return "".join(self._letters)

    def __repr__(self) -> str:
        return f"ChainCodeWord({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ChainCodeWord):
            return self._letters == other._letters
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @contextmanager
    def patched(self, index: int, letter: str) -> Iterator["ChainCodeWord"]:
        """Temporarily replace the letter at ``index``.

        Args:
            index: Position to relabel
            letter: Letter to place there while the context is active

        Yields:
            This word, with the substitution applied
        """
        saved = self._letters[index]
        self._letters[index] = letter
        try:
            yield self
        finally:
            self._letters[index] = saved
