"""
Console reporter for terminal output with colors and formatting
"""

from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from ..rules.models import ScanResult, Finding, Severity

REDACTED = "[REDACTED]"
MASK_VISIBLE_CHARS = 4


def mask_snippet(snippet: str, visible_chars: int = MASK_VISIBLE_CHARS) -> str:
    """Show only the first and last characters of a snippet"""
    if len(snippet) <= visible_chars * 2:
        return REDACTED
    return f"{snippet[:visible_chars]}...{snippet[-visible_chars:]}"


class ConsoleReporter:
    """Rich console reporter for scan results"""

    def __init__(self, use_colors: bool = True, quiet: bool = False,
                 console: Optional[Console] = None):
        if console is None:
            console = Console(force_terminal=use_colors, no_color=not use_colors)
        self.console = console
        self.quiet = quiet

        # Severity colors
        self.severity_colors = {
            Severity.LOW: "blue",
            Severity.MEDIUM: "yellow",
            Severity.HIGH: "red",
            Severity.CRITICAL: "bold red"
        }

    def print_summary(self, results: List[ScanResult]) -> None:
        """Print summary of scan results"""
        if self.quiet:
            return

        total_findings = sum(len(result.findings) for result in results)

        # Count findings by severity
        severity_counts = {severity: 0 for severity in Severity}
        for result in results:
            for finding in result.findings:
                severity_counts[finding.severity] += 1

        table = Table(title="Scan Summary", box=box.ROUNDED)
        table.add_column("Metric", style="bold")
        table.add_column("Count", justify="right")

        table.add_row("Files Scanned", str(len(results)))
        table.add_row("Total Findings", str(total_findings))

        for severity in [Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW]:
            count = severity_counts[severity]
            if count > 0:
                table.add_row(
                    severity.value.title(),
                    Text(str(count), style=self.severity_colors[severity])
                )

        self.console.print(table)

    def print_findings(self, results: List[ScanResult]) -> None:
        """Print every finding with a masked snippet, then the blocking banner"""
        self.console.print("\n[bold red]Ward detected sensitive data in your commit:[/bold red]")

        for result in results:
            for finding in result.findings:
                self._print_finding(finding)

        self.console.print(
            "\n[red]Commit blocked. Remove the secrets or use "
            "'git commit --no-verify' to bypass.[/red]"
        )

    def _print_finding(self, finding: Finding) -> None:
        """Print a single finding"""
        color = self.severity_colors[finding.severity]
        location = Text()
        location.append("  ✖ ", style="red")
        location.append(f"{finding.file_path}:")
        location.append(str(finding.line), style="cyan")
        location.append(": ")
        location.append(finding.rule, style=color)

        self.console.print(location)
        self.console.print(Text(f"    Code: {mask_snippet(finding.snippet)}", style="dim"))

    def print_errors(self, results: List[ScanResult]) -> None:
        """Print per-file scan errors if any"""
        errors = []
        for result in results:
            if result.errors:
                errors.extend([(result.file_path, error) for error in result.errors])

        if not errors:
            return

        self.console.print(f"\n[bold yellow]Scan Errors ({len(errors)})[/bold yellow]")
        for file_path, error in errors:
            self.console.print(Text(f"   {file_path}: {error}"))

    def print_no_findings(self) -> None:
        """Print message when nothing was found"""
        if not self.quiet:
            self.console.print("[green]✓ Ward scan clean[/green]")

    def print_performance_stats(self, results: List[ScanResult]) -> None:
        """Print performance statistics"""
        if self.quiet or not results:
            return

        total_time = sum(result.scan_time_ms for result in results)
        avg_time = total_time / len(results)

        self.console.print(
            f"[dim]Scanned {len(results)} files in {total_time:.1f}ms "
            f"(avg: {avg_time:.1f}ms/file)[/dim]"
        )
