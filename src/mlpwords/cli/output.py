"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from mlpwords.domain import ChristoffelFactor, LyndonFactor, MLPEdge

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for contour decomposition.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]mlpwords[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_ordering(ordering: str, label: str = "Ordering") -> None:
    """Print an alphabet ordering as a chain of comparisons."""
    console.print(f"  {label}  [bold]{' < '.join(ordering)}[/bold]")


def _highlight(word: str, start: int, span: int) -> Text:
    """Word text with the cyclic range [start, start + span) emphasized."""
    marked = {(start + k) % len(word) for k in range(min(span, len(word)))}
    text = Text("  ")
    for idx, letter in enumerate(word):
        text.append(letter, style="bold green" if idx in marked else "dim")
    return text


def print_lyndon_factor(word: str, start: int, factor: LyndonFactor) -> None:
    """Print a first Lyndon factor and its repetitions.

    Args:
        word: Scanned word
        start: Position where the scan started
        factor: Factorization result
    """
    console.print(_highlight(word, start, factor.span))
    console.print(
        f"  length {factor.length} {SYM_DOT} {factor.count} "
        f"{'repetition' if factor.count == 1 else 'repetitions'}"
    )


def print_christoffel_factor(word: str, start: int, factor: ChristoffelFactor) -> None:
    """Print a Duval++ result.

    Args:
        word: Scanned word
        start: Position where the scan started
        factor: Duval++ result
    """
    if factor.is_christoffel:
        console.print(_highlight(word, start, factor.span))
        console.print(
            f"  [green]{SYM_OK} Christoffel[/green] {SYM_DOT} length {factor.length} "
            f"{SYM_DOT} {factor.count} repetitions"
        )
    else:
        console.print(
            f"  [red]{SYM_ERR} Not Christoffel[/red] {SYM_DOT} "
            f"mismatch at position {factor.length}"
        )


def print_edges(edges: list[MLPEdge], title: str | None = None) -> None:
    """Print MLP edges as a table.

    Args:
        edges: Edges in contour order
        title: Optional table title
    """
    table = Table(title=title, show_edge=False, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("length", justify="right")
    table.add_column("a1", justify="right")
    table.add_column("a2", justify="right")
    table.add_column("case")
    table.add_column("flips", justify="right")

    for idx, edge in enumerate(edges):
        table.add_row(
            str(idx),
            str(edge.length),
            str(edge.nb_a1),
            str(edge.nb_a2),
            edge.case.value,
            str(edge.convexity_changes),
        )
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    total_time_s: float,
    processed: int,
    edges: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total processing time in seconds
        processed: Number of contours decomposed
        edges: Total number of edges extracted
        errors: Number of contours that failed
        avg_time_ms: Average time per contour in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} contours {SYM_DOT} {edges} edges {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )
    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per contour")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
