"""Tests for batch decomposition orchestration."""

import pytest

from mlpwords.config import (
    AlphabetConfig,
    ExtractionConfig,
    LoggingConfig,
    MlpWordsSettings,
    ProcessingConfig,
    get_default_settings,
)
from mlpwords.core.alphabet import OrderedAlphabet
from mlpwords.core.decomposer import (
    ContourDecomposer,
    ContourDecomposition,
    align_alphabet,
    alphabet_for_contour,
    build_alphabet,
    decompose_chain,
)
from mlpwords.domain import EdgeCase, FreemanChain, MLPEdge
from mlpwords.exceptions import ChristoffelPreconditionError, LetterOutOfRangeError


@pytest.fixture
def settings(tmp_path) -> MlpWordsSettings:
    """Settings for clockwise Freeman contours starting on an east step."""
    return MlpWordsSettings(
        alphabet=AlphabetConfig(ordering="3012"),
        processing=ProcessingConfig(max_workers=1),
        logging=LoggingConfig(log_file=tmp_path / "mlpwords.log"),
    )


@pytest.fixture
def diamond() -> FreemanChain:
    return FreemanChain(0, 0, "0101030332322121", name="diamond")


class TestBuildAlphabet:
    """Tests for build_alphabet function."""

    def test_identity_default(self):
        alphabet = build_alphabet(AlphabetConfig())
        assert alphabet.current_ordering() == "0123"

    def test_custom_letters(self):
        alphabet = build_alphabet(AlphabetConfig(first="a", size=3))
        assert alphabet.current_ordering() == "abc"

    def test_ordering_overrides_letters(self):
        alphabet = build_alphabet(AlphabetConfig(first="a", size=3, ordering="3012"))
        assert alphabet.current_ordering() == "3012"

    def test_fresh_instance_each_call(self):
        config = AlphabetConfig(ordering="3012")
        first = build_alphabet(config)
        first.rotate_right()
        assert build_alphabet(config).current_ordering() == "3012"


class TestAlphabetForContour:
    """Tests for aligning the default alphabet on a contour's first letter."""

    def test_rotates_start_letter_to_rank_1(self):
        alphabet = align_alphabet(OrderedAlphabet.identity("0", 4), "0")
        assert alphabet.current_ordering() == "3012"
        assert alphabet.rank("0") == 1

    def test_aligned_alphabet_is_unchanged(self):
        alphabet = align_alphabet(OrderedAlphabet.identity("0", 4), "1")
        assert alphabet.current_ordering() == "0123"

    def test_rotates_past_wraparound(self):
        alphabet = align_alphabet(OrderedAlphabet.identity("0", 4), "3")
        assert alphabet.current_ordering() == "2301"

    def test_single_letter_alphabet(self):
        alphabet = align_alphabet(OrderedAlphabet.identity("a", 1), "a")
        assert alphabet.current_ordering() == "a"

    @pytest.mark.parametrize("start", [2, 10])
    def test_uses_letter_at_start(self, start):
        alphabet = alphabet_for_contour(AlphabetConfig(), "00332211", start)
        assert alphabet.current_ordering() == "2301"

    def test_explicit_ordering_is_kept(self):
        alphabet = alphabet_for_contour(AlphabetConfig(ordering="0123"), "00332211")
        assert alphabet.current_ordering() == "0123"

    def test_empty_code(self):
        assert alphabet_for_contour(AlphabetConfig(), "").current_ordering() == "0123"

    def test_letter_outside_alphabet(self):
        with pytest.raises(LetterOutOfRangeError):
            alphabet_for_contour(AlphabetConfig(), "x0")


class TestDecomposeChain:
    """Tests for decompose_chain function."""

    def test_success(self, diamond):
        result = decompose_chain(
            diamond.to_dict(),
            AlphabetConfig(ordering="3012").model_dump(),
            ExtractionConfig().model_dump(),
        )

        assert "error" not in result
        decomposition = ContourDecomposition.from_dict(result)
        assert decomposition.chain == diamond
        assert sum(e.length for e in decomposition.edges) == 16
        assert decomposition.final_ordering == "3012"
        assert decomposition.quadrant_changes == 4
        assert decomposition.convexity_changes == 0

    def test_default_alphabet_is_aligned_on_start(self):
        result = decompose_chain(
            FreemanChain(0, 0, "00332211", name="square").to_dict(),
            AlphabetConfig().model_dump(),
            ExtractionConfig().model_dump(),
        )

        assert "error" not in result
        decomposition = ContourDecomposition.from_dict(result)
        assert [e.to_tuple() for e in decomposition.edges] == [(2, 0, 1)] * 4
        assert decomposition.final_ordering == "3012"

    def test_error_is_returned_not_raised(self):
        result = decompose_chain(
            FreemanChain(0, 0, "00332211", name="square").to_dict(),
            AlphabetConfig(ordering="0123").model_dump(),
            ExtractionConfig().model_dump(),
        )

        assert result["error_type"] == "ChristoffelPreconditionError"
        assert result["name"] == "square"
        assert "traceback" in result


class TestContourDecomposition:
    """Tests for ContourDecomposition class."""

    def test_counts(self):
        decomposition = ContourDecomposition(
            chain=FreemanChain(0, 0, "0011"),
            edges=[
                MLPEdge(2, 1, 1, EdgeCase.STANDARD_RUN, convexity_changes=1),
                MLPEdge(2, 0, 1, EdgeCase.QUADRANT_CHANGE),
            ],
        )
        assert decomposition.convexity_changes == 1
        assert decomposition.quadrant_changes == 1

    def test_serialization(self, diamond):
        d1 = ContourDecomposition(
            chain=diamond,
            edges=[MLPEdge(4, 2, 2)],
            final_ordering="3012",
            duration_ms=1.5,
        )
        d2 = ContourDecomposition.from_dict(d1.to_dict())
        assert d2 == d1


class TestContourDecomposer:
    """Tests for ContourDecomposer class."""

    def test_decompose(self, settings, diamond):
        decomposer = ContourDecomposer(settings, quiet=True)

        result = decomposer.decompose(diamond)

        assert len(result.edges) == 8
        assert result.final_ordering == "3012"
        stats = decomposer.decomposition_logger.stats
        assert stats.processed_count == 1
        assert stats.edges_emitted == 8
        assert stats.quadrant_changes == 4

    def test_decompose_error_is_logged_and_raised(self, tmp_path):
        settings = MlpWordsSettings(
            alphabet=AlphabetConfig(ordering="0123"),
            logging=LoggingConfig(log_file=tmp_path / "log.txt"),
        )
        decomposer = ContourDecomposer(settings, quiet=True)

        with pytest.raises(ChristoffelPreconditionError):
            decomposer.decompose(FreemanChain(0, 0, "00332211", name="square"))

        stats = decomposer.decomposition_logger.stats
        assert stats.error_count == 1
        assert stats.errors[0][0] == "square"

    def test_each_contour_gets_a_fresh_alphabet(self, settings, diamond):
        decomposer = ContourDecomposer(settings, quiet=True)
        shifted = FreemanChain(0, 0, "00332211", name="square")

        first = decomposer.decompose(shifted)
        second = decomposer.decompose(diamond)

        assert first.final_ordering == "3012"
        assert second.edges[0].to_tuple() == (4, 2, 2)

    def test_process_file(self, settings, tmp_path):
        path = tmp_path / "shapes.chain"
        path.write_text("0 0 00332211\n0 0 0101030332322121\n0 0 3\n")
        progress: list[tuple[int, int, str, bool]] = []

        decomposer = ContourDecomposer(settings, quiet=True)
        stats, results = decomposer.process(
            path, progress_callback=lambda *args: progress.append(args)
        )

        assert [r.chain.code for r in results] == ["00332211", "0101030332322121"]
        assert [len(r.edges) for r in results] == [4, 8]
        assert stats.processed_count == 2
        assert stats.error_count == 1
        assert stats.edges_emitted == 12
        assert len(progress) == 3
        assert sorted(p[0] for p in progress) == [1, 2, 3]
        assert sum(1 for p in progress if not p[3]) == 1
        assert stats.duration_seconds >= 0.0

    def test_default_settings(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        decomposer = ContourDecomposer(quiet=True)
        result = decomposer.decompose(FreemanChain(0, 0, "00332211", name="square"))

        assert decomposer.config == get_default_settings()
        assert [e.to_tuple() for e in result.edges] == [(2, 0, 1)] * 4
        assert list(tmp_path.glob("mlpwords_*.log"))
