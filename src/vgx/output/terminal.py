"""Rich terminal reporter — summary, per-file table, confidence pills."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from vgx.detection.models import Result, ScanResult

_LEVEL_STYLE = {
    "very_high": "bold white on red",
    "high": "bold white on dark_orange",
    "medium": "bold black on yellow",
    "low": "bold black on bright_cyan",
    "very_low": "bold black on green",
}

_PATH_WIDTH = 45


def _level_pill(level: str) -> Text:
    return Text(f" {level.replace('_', ' ').upper()} ", style=_LEVEL_STYLE.get(level, ""))


def _short_path(path: str) -> str:
    if len(path) <= _PATH_WIDTH:
        return path
    return "..." + path[len(path) - _PATH_WIDTH + 3:]


def _percent(fraction: float) -> str:
    return f"{fraction * 100:.0f}%"


def render(
    scan: ScanResult,
    *,
    show_patterns: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print detection results to the terminal using Rich."""
    console = console or Console()

    console.print()
    console.rule("[bold]VGX AI Code Detection[/bold]")
    _print_summary(console, scan)

    if scan.results:
        console.print()
        table = Table(
            title="Files",
            show_lines=False,
            title_style="bold",
            border_style="dim",
        )
        table.add_column("", justify="center", width=3)
        table.add_column("File", style="magenta")
        table.add_column("AI", justify="right", style="bold")
        table.add_column("Level", justify="center", width=13)
        table.add_column("Style", justify="right", style="dim")
        table.add_column("Patterns", justify="right", style="dim")

        # Display order only; scan.results keeps walk order.
        for result in scan.sorted_results():
            table.add_row(
                "🤖" if result.is_ai_generated else "✓",
                Text(_short_path(result.file_path)),
                _percent(result.ai_confidence),
                _level_pill(result.confidence_level),
                _percent(result.style_score),
                _percent(result.pattern_score),
            )
        console.print(table)

        if show_patterns:
            for result in scan.sorted_results():
                _print_patterns(console, result)

    console.print()
    if scan.ai_detected > 0:
        console.print(
            f"[bold red]🤖 {scan.ai_detected} file(s) detected as AI-generated[/bold red]"
        )
    else:
        console.print("[bold green]✅ No AI-generated code detected[/bold green]")


def _print_summary(console: Console, scan: ScanResult) -> None:
    console.print()
    console.print(f"[dim]Files scanned:[/dim]     {scan.files_scanned}")
    console.print(f"[dim]AI-generated:[/dim]      {scan.ai_detected}")
    console.print(f"[dim]Human-written:[/dim]     {scan.human_written}")
    console.print(f"[dim]AI percentage:[/dim]     {scan.ai_percentage:.1f}%")
    console.print(f"[dim]Max AI confidence:[/dim] {_percent(scan.max_ai_confidence)}")


def _print_patterns(console: Console, result: Result) -> None:
    if not result.patterns:
        return
    console.print()
    console.print(Text(result.file_path, style="bold magenta"))
    for match in result.patterns:
        lines = (
            f"{match.line_start}"
            if match.line_start == match.line_end
            else f"{match.line_start}-{match.line_end}"
        )
        console.print(
            f"  [cyan]{match.name}[/cyan] [green]L{lines}[/green] "
            f"[dim](+{match.confidence:.2f})[/dim] ",
            Text(match.snippet.replace("\n", "⏎ ")),
        )
