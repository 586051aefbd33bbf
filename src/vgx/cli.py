"""vgx CLI — Typer application with detect, patterns, and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from vgx import __version__

app = typer.Typer(
    name="vgx",
    help="Detect AI-generated source code.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _setup_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=debug)],
        force=True,
    )


def _load_config(config: Optional[str]):
    """Load config from the working directory (or *config*), exit 2 on failure."""
    from vgx.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── detect ────────────────────────────────────────────────────────────────────


@app.command()
def detect(
    path: Path = typer.Argument(Path("."), help="File or directory to analyze"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: text | json"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", help="AI detection threshold, percent 0-100 (default 70)"
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .vgx.toml"),
    show_patterns: bool = typer.Option(False, "--patterns", help="List matched patterns per file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Detect AI-generated code in a file or directory."""
    from vgx.detection.detector import DetectError, Detector, DetectorConfig
    from vgx.output import json_report, terminal
    from vgx.patterns.catalog import build_catalog

    _setup_logging(verbose, debug)
    cfg = _load_config(config)

    # --- CLI overrides ---
    if format:
        if format not in ("text", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if threshold is not None:
        if not 0 <= threshold <= 100:
            console.print(f"[bold red]Invalid threshold:[/bold red] {threshold} (expected 0-100)")
            raise typer.Exit(code=2)
        cfg.detect.threshold = threshold
    if show_patterns:
        cfg.output.show_patterns = True

    catalog = build_catalog(cfg, Path.cwd())
    detector = Detector(DetectorConfig.from_config(cfg), catalog)

    if verbose or debug:
        console.print(f"[dim]Patterns loaded: {catalog.active_count}[/dim]")
        console.print(f"[dim]Threshold: {cfg.detect.threshold:g}%[/dim]")

    if cfg.output.format == "text" and path.is_dir():
        console.print(f"Scanning {escape(str(path))} for AI-generated code...")

    try:
        result = detector.scan_path(path)
    except DetectError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    report_text: Optional[str] = None
    if cfg.output.format == "json":
        report_text = json_report.render(result)
        print(report_text)
    else:
        terminal.render(result, show_patterns=cfg.output.show_patterns)

    if output:
        Path(output).write_text(report_text or json_report.render(result), encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")


# ── patterns ──────────────────────────────────────────────────────────────────


@app.command()
def patterns(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .vgx.toml"),
) -> None:
    """List the active generator-pattern catalog."""
    from vgx.patterns.catalog import build_catalog

    _setup_logging(False, False)
    cfg = _load_config(config)
    catalog = build_catalog(cfg, Path.cwd())

    out = Console()
    table = Table(title="Active patterns", title_style="bold", border_style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Language", style="magenta")
    table.add_column("Weight", justify="right", style="green")
    table.add_column("Description")
    for entry in catalog.patterns:
        table.add_row(entry.name, entry.language, f"{entry.weight:.2f}", entry.description)
    out.print(table)
    out.print(f"{catalog.active_count} active, {len(catalog.rejected)} rejected")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .vgx.toml in the current directory."""
    from vgx.config.defaults import DEFAULT_TOML
    from vgx.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"vgx {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """vgx — Detect AI-generated source code."""
