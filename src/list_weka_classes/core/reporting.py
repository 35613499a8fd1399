"""Output formatters for listing results."""

import click
from rich.console import Console
from rich.table import Table

from .models import ListingResult, OutputFormat


class TextReporter:
    """Plain output: one name per line, no summary."""

    def report(self, result: ListingResult) -> None:
        """
        Print each name on its own line.

        Args:
            result: Listing result to report
        """
        for name in result.names:
            click.echo(name)


class JsonReporter:
    """JSON output for programmatic consumption."""

    def report(self, result: ListingResult) -> None:
        click.echo(result.model_dump_json(indent=2))


class TableReporter:
    """Human-readable table using rich library."""

    def __init__(self, console: Console | None = None):
        """Initialize table reporter with optional console."""
        self.console = console or Console()

    def report(self, result: ListingResult) -> None:
        """
        Print names with their metadata.

        Args:
            result: Listing result to report
        """
        if result.lists_superclasses:
            kind = "Resource types" if result.resources else "Superclasses"
            table = Table(title=kind)
            table.add_column("Name", style="bold")
            for name in result.names:
                table.add_row(name)
        else:
            table = Table(title=result.super_class)
            table.add_column("Class", style="bold")
            table.add_column("Metadata")
            for name in result.names:
                table.add_row(name, result.metadata(name) or "")

        self.console.print(table)
        self.console.print(f"{len(result.names)} entries")


REPORTERS = {
    OutputFormat.TEXT: TextReporter,
    OutputFormat.JSON: JsonReporter,
    OutputFormat.TABLE: TableReporter,
}
