"""CLI application entry point for mlpwords.

This module provides the main CLI interface using Typer.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from mlpwords import __version__
from mlpwords.cli.output import (
    console,
    create_progress,
    print_christoffel_factor,
    print_edges,
    print_error,
    print_header,
    print_lyndon_factor,
    print_ordering,
    print_step,
    print_success,
)
from mlpwords.config import (
    AlphabetConfig,
    ExtractionConfig,
    LoggingConfig,
    MlpWordsSettings,
    ProcessingConfig,
)
from mlpwords.core import (
    ChristoffelValidator,
    ContourDecomposer,
    LyndonFactorizer,
    MLPEdgeExtractor,
    OrderedAlphabet,
    alphabet_for_contour,
)
from mlpwords.exceptions import MlpWordsError

# Create the Typer app
app = typer.Typer(
    name="mlpwords",
    help="Factorize words over ordered alphabets and extract MLP edges from chain codes.",
    add_completion=False,
    no_args_is_help=True,
)


class ReorderOp(str, Enum):
    """In-place reordering operations of an alphabet."""

    ROTATE_LEFT = "rotate-left"
    ROTATE_RIGHT = "rotate-right"
    REVERSE = "reverse"
    REVERSE_12 = "reverse-12"


_REORDER_METHODS = {
    ReorderOp.ROTATE_LEFT: OrderedAlphabet.rotate_left,
    ReorderOp.ROTATE_RIGHT: OrderedAlphabet.rotate_right,
    ReorderOp.REVERSE: OrderedAlphabet.reverse_order,
    ReorderOp.REVERSE_12: OrderedAlphabet.reverse_around_rank12,
}

OrderingOption = Annotated[
    str | None,
    typer.Option(
        "--ordering",
        "-a",
        help="Alphabet ordering, lowest rank first (default: letters in code order)",
    ),
]
StartOption = Annotated[
    int,
    typer.Option("--start", "-s", help="Starting position in the word", min=0),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print machine-readable JSON"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]mlpwords[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Ordered-alphabet word factorization for digital contours."""


def _alphabet_for(word: str, ordering: str | None) -> OrderedAlphabet:
    """Alphabet given on the command line, or the letter range of the word."""
    if ordering:
        return OrderedAlphabet.from_ordering(ordering)
    if not word:
        raise typer.BadParameter("word must not be empty")
    low, high = min(word), max(word)
    return OrderedAlphabet.identity(low, ord(high) - ord(low) + 1)


def _fail(error: MlpWordsError) -> NoReturn:
    print_error(str(error))
    raise typer.Exit(code=1)


@app.command()
def ordering(
    letters: Annotated[
        str,
        typer.Argument(help="Initial ordering, lowest rank first (e.g. abcd)"),
    ],
    ops: Annotated[
        list[ReorderOp] | None,
        typer.Option(
            "--op",
            help="Reordering to apply, repeatable and applied in order",
        ),
    ] = None,
) -> None:
    """Show an alphabet ordering after a sequence of reorderings.

    Example:
        mlpwords ordering abcd --op rotate-left --op reverse
    """
    try:
        alphabet = OrderedAlphabet.from_ordering(letters)
    except MlpWordsError as e:
        _fail(e)

    print_ordering(alphabet.current_ordering(), label="start   ")
    for op in ops or []:
        _REORDER_METHODS[op](alphabet)
        print_ordering(alphabet.current_ordering(), label=f"{op.value:<8}")


@app.command()
def factor(
    word: Annotated[str, typer.Argument(help="Word to factorize")],
    ordering_: OrderingOption = None,
    start: StartOption = 0,
    end: Annotated[
        int | None,
        typer.Option("--end", "-e", help="Position after the scanned range", min=0),
    ] = None,
    cyclic: Annotated[
        bool,
        typer.Option("--cyclic", "-c", help="Read the word as a cyclic word"),
    ] = False,
    as_json: JsonOption = False,
) -> None:
    """Find the first Lyndon factor of a word."""
    try:
        factorizer = LyndonFactorizer(_alphabet_for(word, ordering_))
        if cyclic:
            result = factorizer.first_factor_mod(word, start, end)
        else:
            result = factorizer.first_factor(word, start, end)
    except MlpWordsError as e:
        _fail(e)

    if as_json:
        typer.echo(json.dumps(result.to_dict()))
        return
    print_ordering(factorizer.alphabet.current_ordering())
    print_lyndon_factor(word, start, result)


@app.command()
def christoffel(
    word: Annotated[str, typer.Argument(help="Word starting with a1 or a2")],
    ordering_: OrderingOption = None,
    start: StartOption = 0,
    end: Annotated[
        int | None,
        typer.Option("--end", "-e", help="Position after the scanned range", min=0),
    ] = None,
    cyclic: Annotated[
        bool,
        typer.Option("--cyclic", "-c", help="Read the word as a cyclic word"),
    ] = False,
    as_json: JsonOption = False,
) -> None:
    """Extract a first Lyndon factor and check whether it is a Christoffel word."""
    try:
        validator = ChristoffelValidator(_alphabet_for(word, ordering_))
        if cyclic:
            result = validator.duval_pp_mod(word, start, end)
        else:
            result = validator.duval_pp(word, start, end)
    except MlpWordsError as e:
        _fail(e)

    if as_json:
        typer.echo(json.dumps(result.to_dict()))
        return
    print_ordering(validator.alphabet.current_ordering())
    print_christoffel_factor(word, start, result)


@app.command()
def decompose(
    word: Annotated[
        str | None,
        typer.Argument(help="Cyclic chain code (omit when using --file)", show_default=False),
    ] = None,
    chain_file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Chain file with one 'x0 y0 code' contour per line"),
    ] = None,
    ordering_: OrderingOption = None,
    start: StartOption = 0,
    max_depth: Annotated[
        int,
        typer.Option(
            "--max-depth",
            help="Consecutive convexity changes allowed at one position",
            min=0,
            max=64,
        ),
    ] = 4,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-j", help="Number of parallel workers (default: auto)", min=1),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    as_json: JsonOption = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Decompose cyclic chain codes into minimal-length polygon edges.

    Example:
        mlpwords decompose 0101030332322121
    """
    if (word is None) == (chain_file is None):
        print_error("Provide either a chain code or --file, not both")
        raise typer.Exit(code=1)

    settings = MlpWordsSettings(
        alphabet=AlphabetConfig(ordering=ordering_),
        extraction=ExtractionConfig(max_convexity_depth=max_depth, start=start),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    if word is not None:
        _decompose_word(word, settings, as_json)
    else:
        _decompose_file(chain_file, settings, as_json, quiet)


def _decompose_word(word: str, settings: MlpWordsSettings, as_json: bool) -> None:
    """Decompose a chain code given on the command line.

    Args:
        word: Cyclic chain code
        settings: Alphabet and extraction settings
        as_json: Print JSON instead of a table
    """
    try:
        alphabet = alphabet_for_contour(settings.alphabet, word, settings.extraction.start)
        initial_ordering = alphabet.current_ordering()
        extractor = MLPEdgeExtractor(
            alphabet, max_convexity_depth=settings.extraction.max_convexity_depth
        )
        edges = extractor.decompose(word, start=settings.extraction.start)
    except MlpWordsError as e:
        _fail(e)

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "word": word,
                    "edges": [edge.to_dict() for edge in edges],
                    "final_ordering": alphabet.current_ordering(),
                }
            )
        )
        return

    print_ordering(initial_ordering, label="start")
    print_edges(edges)
    print_ordering(alphabet.current_ordering(), label="end  ")


def _decompose_file(
    chain_file: Path, settings: MlpWordsSettings, as_json: bool, quiet: bool
) -> None:
    """Decompose every contour of a chain file.

    Args:
        chain_file: Path to chain file
        settings: Decomposition settings
        as_json: Print JSON instead of tables
        quiet: Suppress progress output
    """
    show = not (quiet or as_json)
    if show:
        print_header(__version__)
        print_step(f"Decomposing {chain_file}")

    try:
        decomposer = ContourDecomposer(settings, quiet=quiet or as_json)
        if show:
            with create_progress() as progress:
                task_id = progress.add_task("Decomposing", total=None)

                def update_progress(completed: int, total: int, *_: object) -> None:
                    progress.update(task_id, completed=completed, total=total)

                stats, results = decomposer.process(
                    chain_file, progress_callback=update_progress
                )
        else:
            stats, results = decomposer.process(chain_file)
    except MlpWordsError as e:
        _fail(e)
    except KeyboardInterrupt:
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

    if as_json:
        typer.echo(json.dumps([result.to_dict() for result in results]))
    elif not quiet:
        for result in results:
            print_edges(result.edges, title=result.chain.name)
        print_success(
            total_time_s=stats.duration_seconds,
            processed=stats.processed_count,
            edges=stats.edges_emitted,
            errors=stats.error_count,
            avg_time_ms=stats.avg_contour_time_ms,
        )

    if stats.error_count:
        for name, error in stats.errors:
            print_error(f"{name}: {error}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
