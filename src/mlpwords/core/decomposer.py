"""Batch orchestration of contour decompositions.

Every contour gets its own alphabet built from the settings, since edge
extraction reorders the alphabet it works with. Contours of a batch are
decomposed in parallel worker processes.

Key components:
- decompose_chain: Top-level picklable function for parallel execution
- ContourDecomposer: Main orchestrator class
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mlpwords.config import (
    AlphabetConfig,
    ExtractionConfig,
    MlpWordsSettings,
    get_default_settings,
)
from mlpwords.core.alphabet import OrderedAlphabet
from mlpwords.core.mlp import MLPEdgeExtractor
from mlpwords.domain import EdgeCase, FreemanChain, MLPEdge
from mlpwords.io import ChainCodeReader
from mlpwords.utils import DecompositionLogger, DecompositionStats, configure_logging


def build_alphabet(config: AlphabetConfig) -> OrderedAlphabet:
    """Create a fresh alphabet from its configuration.

    Args:
        config: Alphabet settings; ``ordering`` overrides ``first``/``size``

    Returns:
        New OrderedAlphabet instance
    """
    if config.ordering:
        return OrderedAlphabet.from_ordering(config.ordering)
    return OrderedAlphabet.identity(config.first, config.size)


def align_alphabet(alphabet: OrderedAlphabet, letter: str) -> OrderedAlphabet:
    """Rotate ``alphabet`` right until ``letter`` has rank 1.

    A clockwise Freeman contour read from ``letter`` then starts on a1
    of its first quadrant. Single-letter alphabets are left unchanged.
    """
    if alphabet.size > 1:
        for _ in range((1 - alphabet.rank(letter)) % alphabet.size):
            alphabet.rotate_right()
    return alphabet


def alphabet_for_contour(config: AlphabetConfig, code: str, start: int = 0) -> OrderedAlphabet:
    """Create the alphabet used to decompose ``code`` from ``start``.

    An explicit ``ordering`` is used as given. Otherwise the identity
    alphabet is aligned on the starting letter.

    Raises:
        LetterOutOfRangeError: If the starting letter is not in the alphabet
    """
    alphabet = build_alphabet(config)
    if config.ordering or not code:
        return alphabet
    return align_alphabet(alphabet, code[start % len(code)])


@dataclass
class ContourDecomposition:
    """MLP edges of one contour.

    Attributes:
        chain: The decomposed contour
        edges: Extracted edges in contour order
        final_ordering: Alphabet ordering after the last edge
        duration_ms: Time spent decomposing
    """

    chain: FreemanChain
    edges: list[MLPEdge] = field(default_factory=list)
    final_ordering: str = ""
    duration_ms: float = 0.0

    @property
    def convexity_changes(self) -> int:
        return sum(edge.convexity_changes for edge in self.edges)

    @property
    def quadrant_changes(self) -> int:
        return sum(1 for edge in self.edges if edge.case is EdgeCase.QUADRANT_CHANGE)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "chain": self.chain.to_dict(),
            "edges": [edge.to_dict() for edge in self.edges],
            "final_ordering": self.final_ordering,
            "duration_ms": self.duration_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContourDecomposition":
        """Deserialize from dictionary."""
        return cls(
            chain=FreemanChain.from_dict(data["chain"]),
            edges=[MLPEdge.from_dict(e) for e in data["edges"]],
            final_ordering=data["final_ordering"],
            duration_ms=data.get("duration_ms", 0.0),
        )


def decompose_chain(
    chain_dict: dict[str, Any],
    alphabet_dict: dict[str, Any],
    extraction_dict: dict[str, Any],
) -> dict[str, Any]:
    """Decompose a single contour into MLP edges.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Builds its own alphabet so that no ordering
    state is shared between contours.

    Args:
        chain_dict: Serialized chain (from FreemanChain.to_dict())
        alphabet_dict: Serialized alphabet configuration
        extraction_dict: Serialized extraction configuration

    Returns:
        Dictionary containing either:
        - Success: ContourDecomposition.to_dict()
        - Error: {"error": str, "error_type": str, "name": str, "traceback": str,
          "duration_ms": float}
    """
    start_time = time.time()

    try:
        chain = FreemanChain.from_dict(chain_dict)
        extraction = ExtractionConfig(**extraction_dict)
        alphabet = alphabet_for_contour(
            AlphabetConfig(**alphabet_dict), chain.code, extraction.start
        )

        extractor = MLPEdgeExtractor(
            alphabet, max_convexity_depth=extraction.max_convexity_depth
        )
        edges = extractor.decompose(chain.code, start=extraction.start)

        duration_ms = (time.time() - start_time) * 1000
        return ContourDecomposition(
            chain=chain,
            edges=edges,
            final_ordering=alphabet.current_ordering(),
            duration_ms=duration_ms,
        ).to_dict()

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "name": chain_dict.get("name", "unknown"),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class ContourDecomposer:
    """Orchestrates decomposition of contours into MLP edges.

    Example:
        decomposer = ContourDecomposer()
        result = decomposer.decompose(FreemanChain(0, 0, "00332211"))
        stats, results = decomposer.process(Path("shapes.chain"), max_workers=4)
    """

    def __init__(self, config: MlpWordsSettings | None = None, quiet: bool = False) -> None:
        """Initialize the decomposer with configuration.

        Args:
            config: Settings for alphabets, extraction, processing and logging
                (None = default settings)
            quiet: Suppress console logging
        """
        if config is None:
            config = get_default_settings()
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.decomposition_logger = DecompositionLogger(self.logger)

    def decompose(self, chain: FreemanChain) -> ContourDecomposition:
        """Decompose one contour in the current process.

        Args:
            chain: Contour to decompose

        Returns:
            The contour's MLP edges

        Raises:
            MlpWordsError: If the chain code cannot be decomposed
        """
        start_time = time.time()
        try:
            alphabet = alphabet_for_contour(
                self.config.alphabet, chain.code, self.config.extraction.start
            )
            self.decomposition_logger.log_contour_start(
                chain.name, len(chain), alphabet.current_ordering()
            )
            extractor = MLPEdgeExtractor(
                alphabet, max_convexity_depth=self.config.extraction.max_convexity_depth
            )
            edges = extractor.decompose(chain.code, start=self.config.extraction.start)
        except Exception as e:
            self.decomposition_logger.log_contour_error(chain.name, e, traceback.format_exc())
            raise

        result = ContourDecomposition(
            chain=chain,
            edges=edges,
            final_ordering=alphabet.current_ordering(),
            duration_ms=(time.time() - start_time) * 1000,
        )
        self.decomposition_logger.log_contour_complete(
            chain.name,
            edges=len(edges),
            convexity_changes=result.convexity_changes,
            quadrant_changes=result.quadrant_changes,
            duration_ms=result.duration_ms,
        )
        return result

    def process(
        self,
        chain_path: Path,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> tuple[DecompositionStats, list[ContourDecomposition]]:
        """Decompose every contour of a chain file in parallel.

        Args:
            chain_path: Path to a chain code file
            max_workers: Maximum worker processes (None = config value)
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            Statistics and the successful decompositions in file order

        Raises:
            ChainFileError: If the chain file cannot be read
        """
        stats = self.decomposition_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        chains = ChainCodeReader(chain_path).read()
        self.logger.info(
            "Starting decomposition",
            input=str(chain_path),
            contours=len(chains),
            max_workers=max_workers,
        )

        results = self._decompose_parallel(chains, max_workers, progress_callback)

        stats.end_time = time.time()
        self.logger.info(
            "Decomposition complete",
            processed=stats.processed_count,
            errors=stats.error_count,
            edges=stats.edges_emitted,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats, results

    def _decompose_parallel(
        self,
        chains: list[FreemanChain],
        max_workers: int | None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> list[ContourDecomposition]:
        """Decompose chains using ProcessPoolExecutor.

        Args:
            chains: Contours to decompose
            max_workers: Maximum worker processes
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            Successful decompositions, ordered as ``chains``
        """
        if not chains:
            self.logger.info("No contours to decompose")
            return []

        alphabet_dict = self.config.alphabet.model_dump()
        extraction_dict = self.config.extraction.model_dump()

        results: dict[int, ContourDecomposition] = {}
        total = len(chains)
        completed = 0

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            pending = {
                executor.submit(
                    decompose_chain, chain.to_dict(), alphabet_dict, extraction_dict
                ): idx
                for idx, chain in enumerate(chains)
            }

            try:
                for future in as_completed(pending):
                    idx = pending[future]
                    name = chains[idx].name
                    success = False

                    try:
                        result = future.result()

                        if "error" in result:
                            self.decomposition_logger.log_contour_error(
                                name,
                                Exception(f"{result['error_type']}: {result['error']}"),
                                traceback=result.get("traceback"),
                            )
                        else:
                            success = True
                            decomposition = ContourDecomposition.from_dict(result)
                            results[idx] = decomposition
                            self.decomposition_logger.log_contour_complete(
                                name,
                                edges=len(decomposition.edges),
                                convexity_changes=decomposition.convexity_changes,
                                quadrant_changes=decomposition.quadrant_changes,
                                duration_ms=decomposition.duration_ms,
                            )

                    except Exception as e:
                        # Executor-level error
                        self.decomposition_logger.log_contour_error(
                            name, e, traceback=traceback.format_exc()
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return [results[idx] for idx in sorted(results)]
