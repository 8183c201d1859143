"""
Console reporter for validation results.

Formats validation results using Rich.
"""

from rich.console import Console
from rich.table import Table

from rideshare.validation.core import ValidationResult


class ConsoleReporter:
    """Formats and displays validation results to the console."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def print_results(self, results: list[ValidationResult]) -> None:
        """
        Print validation results as a table, a summary and error details.

        Args:
            results: List of validation results to display.
        """
        table = Table(title="Data Validation Results", show_header=True)
        table.add_column("Dataset", style="cyan", no_wrap=True)
        table.add_column("File", style="dim")
        table.add_column("Schema", justify="center")
        table.add_column("Entities", justify="center")
        table.add_column("Rows", justify="right")

        for result in results:
            table.add_row(
                result.dataset_name,
                str(result.file_path),
                self._format_check(result.exists, result.schema_valid),
                self._format_check(result.exists, result.entities_valid),
                str(result.row_count) if result.row_count is not None else "-",
            )

        self.console.print(table)
        self._print_summary(results)
        self._print_detailed_errors(results)

    def _format_check(self, exists: bool, valid: bool | None) -> str:
        if not exists:
            return "[yellow]Missing[/yellow]"
        if valid is None:
            return "[yellow]Skipped[/yellow]"
        if valid:
            return "[green]Pass[/green]"
        return "[red]Fail[/red]"

    def _print_summary(self, results: list[ValidationResult]) -> None:
        passed = sum(1 for r in results if r.passed)
        missing = sum(1 for r in results if not r.exists)
        failed = len(results) - passed - missing

        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Total datasets: {len(results)}")
        self.console.print(f"  [green]Passed: {passed}[/green]")
        self.console.print(f"  [red]Failed: {failed}[/red]")
        self.console.print(f"  [yellow]Missing: {missing}[/yellow]")

    def _print_detailed_errors(self, results: list[ValidationResult]) -> None:
        failed = [r for r in results if r.exists and not r.passed]
        if not failed:
            return

        self.console.print()
        self.console.print("[bold red]Validation Errors:[/bold red]")
        for result in failed:
            self.console.print()
            self.console.print(f"[bold]{result.dataset_name}[/bold] ({result.file_path}):")
            for line in (result.error_message or "").splitlines():
                self.console.print(f"  {line}", markup=False)
