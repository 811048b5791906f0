"""
Command-line interface for gitward
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .config import ConfigError, WardConfig, load_config
from .git import (
    GitError, HookStatus, get_staged_content, get_staged_files, install_hook,
)
from .report.console import ConsoleReporter
from .report.json_reporter import JSONReporter
from .rules.engine import ScanEngine
from .rules.models import ScanResult

# Initialize typer app
app = typer.Typer(
    name="ward",
    help="Local-first git guard that blocks secrets before they are committed",
    add_completion=False
)

console = Console()
# Diagnostics stay off stdout so --format json output parses
err_console = Console(stderr=True)
logger = logging.getLogger("gitward")

OUTPUT_FORMATS = ("console", "json")


def setup_logging(verbose: bool = False) -> None:
    """Route gitward log records through rich on stderr"""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def version_callback(value: bool):
    if value:
        typer.echo(f"ward version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit"
    )
):
    """Local-first git guard that blocks secrets before they are committed"""
    pass


@app.command()
def init(
    root: str = typer.Option(".", "--root", help="Repository root"),
):
    """Initialize Ward in the current repository"""
    console.print("[blue]Initializing Ward...[/blue]")

    try:
        status = install_hook(root)
    except OSError as e:
        console.print(f"[red]Error: failed to install hook: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if status == HookStatus.NOT_A_REPOSITORY:
        console.print("[red]Error: Not a git repository. Run 'git init' first.[/red]")
        raise typer.Exit(1)
    elif status == HookStatus.ALREADY_INSTALLED:
        console.print("[yellow]ℹ Ward hook already exists.[/yellow]")
    else:
        console.print("[green]✓ Ward pre-commit hook installed successfully.[/green]")


@app.command()
def scan(
    root: str = typer.Option(".", "--root", help="Repository root"),
    output_format: str = typer.Option(
        "console", "--format", "-f",
        help="Output format: console, json"
    ),
    output_file: Optional[str] = typer.Option(
        None, "--output", "-o",
        help="Write JSON results to this file instead of stdout"
    ),
    workers: int = typer.Option(
        1, "--workers", "-w", min=1,
        help="Number of files scanned in parallel"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show debug logging"
    ),
    color: bool = typer.Option(
        True, "--color/--no-color",
        help="Enable/disable colored output"
    )
):
    """Scan staged files for secrets"""
    setup_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Invalid format: {output_format}. Use: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(2)

    try:
        # 1. Load config
        config = _resolve_config(root)

        # 2. Get staged files
        files = get_staged_files(root)
        if not files:
            logger.debug("Nothing staged, skipping scan")
            raise typer.Exit(0)

        # 3. Scan
        engine = ScanEngine(config)
        logger.debug("Engine statistics: %s", engine.get_statistics())
        results = _scan_staged(engine, files, root, workers)

    except typer.Exit:
        raise
    except GitError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    # 4. Report
    blocked = any(result.findings for result in results)

    if output_format == "json":
        reporter = JSONReporter(pretty=True)
        if output_file:
            reporter.export_results(results, output_file)
            err_console.print(f"Results exported to {escape(output_file)}")
        else:
            typer.echo(reporter.format_results_string(results))
    else:
        reporter = ConsoleReporter(use_colors=color)
        if blocked:
            reporter.print_findings(results)
        else:
            reporter.print_no_findings()
        reporter.print_errors(results)
        if verbose:
            reporter.print_summary(results)
            reporter.print_performance_stats(results)

    raise typer.Exit(1 if blocked else 0)


@app.command("check-updates")
def check_updates():
    """Check for updates"""
    console.print(f"You are running the latest version of Ward ({__version__}).")


def _resolve_config(root: str) -> WardConfig:
    """Load config, falling back to defaults when the file is unusable"""
    try:
        return load_config(root)
    except ConfigError as e:
        err_console.print(f"[yellow]Warning: Failed to load config: {escape(str(e))}[/yellow]")
        return WardConfig.default()


def _scan_staged(engine: ScanEngine, files: List[Path], root: str,
                 workers: int) -> List[ScanResult]:
    """Read staged content for each file and scan it, keeping file order"""
    slots: List[Optional[ScanResult]] = []
    items: List[Tuple[Path, str]] = []

    for file_path in files:
        try:
            content = get_staged_content(file_path, root)
        except GitError as e:
            logger.debug("Skipping %s: %s", file_path, e)
            slots.append(ScanResult(file_path=file_path.as_posix(), errors=[str(e)]))
            continue
        slots.append(None)
        items.append((file_path, content))

    scanned = iter(engine.scan_many(items, max_workers=workers))
    return [slot if slot is not None else next(scanned) for slot in slots]


if __name__ == "__main__":
    app()
