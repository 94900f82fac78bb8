"""Exception hierarchy for mlpwords."""


class MlpWordsError(Exception):
    """Base exception for all mlpwords errors."""

    pass


class ContractError(MlpWordsError):
    """A precondition of the word algorithms was violated.

    These signal misuse or a malformed chain code, never an expected
    runtime condition.
    """

    pass


class InvalidAlphabetError(ContractError):
    """Alphabet cannot be built or its order is not a permutation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid alphabet: {reason}")


class LetterOutOfRangeError(ContractError):
    """Letter does not belong to the alphabet."""

    def __init__(self, letter: str, first: str, size: int) -> None:
        self.letter = letter
        self.first = first
        self.size = size
        last = chr(ord(first) + size - 1)
        super().__init__(f"Letter {letter!r} is outside the alphabet [{first!r}, {last!r}]")


class EmptyWordError(ContractError):
    """Cyclic operation requested on an empty word."""

    def __init__(self, message: str = "Cyclic operations need a non-empty word") -> None:
        super().__init__(message)


class InvalidRangeError(ContractError):
    """Linear scan bounds are not a valid non-empty range of the word."""

    def __init__(self, start: int, end: int, length: int) -> None:
        self.start = start
        self.end = end
        self.length = length
        super().__init__(f"Invalid range [{start}, {end}) for a word of length {length}")


class ChristoffelPreconditionError(ContractError):
    """Duval++ must start on a letter of rank 1 or 2."""

    def __init__(self, letter: str, rank: int, position: int) -> None:
        self.letter = letter
        self.rank = rank
        self.position = position
        super().__init__(
            f"Duval++ needs a letter of rank 1 or 2 at position {position}, "
            f"got {letter!r} of rank {rank}"
        )


class DecompositionError(MlpWordsError):
    """Errors raised while decomposing a contour into MLP edges."""

    pass


class ConvexityRecursionError(DecompositionError):
    """Too many consecutive convexity changes at one position."""

    def __init__(self, position: int, max_depth: int) -> None:
        self.position = position
        self.max_depth = max_depth
        super().__init__(
            f"More than {max_depth} consecutive convexity changes at position {position}"
        )


class UnclosedDecompositionError(DecompositionError):
    """Extracted edges do not add up to the contour length."""

    def __init__(self, consumed: int, length: int) -> None:
        self.consumed = consumed
        self.length = length
        super().__init__(
            f"Edges cover {consumed} letters but the contour has {length}"
        )


class ChainFileError(MlpWordsError):
    """Error reading a chain code file."""

    def __init__(self, path: str, reason: str, line: int | None = None) -> None:
        self.path = path
        self.reason = reason
        self.line = line
        where = f"{path}:{line}" if line is not None else path
        super().__init__(f"Cannot read chain file '{where}': {reason}")
