"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Status messages go to stderr so that converted JSON written to stdout can
be piped into other tools. Supports verbosity levels and --no-color flag.
Message text is escaped, so paths and error text are never read as markup.
"""

from rich.console import Console
from rich.markup import escape

from .models import ConversionSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console for status messages (stderr)
        data_console: Rich Console for converted output (stdout)

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Conversion completed")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
        )
        self.data_console = Console(
            no_color=True,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green.

        Args:
            message: Success message to display
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red.

        Args:
            message: Error message to display
        """
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow.

        Args:
            message: Warning message to display
        """
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1).

        Args:
            message: Info message to display
        """
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2).

        Args:
            message: Debug message to display
        """
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def print_data(self, text: str) -> None:
        """Write converted output to stdout without markup or wrapping.

        Args:
            text: Serialized output to write
        """
        self.data_console.out(text, highlight=False)

    def print_summary(self, summary: ConversionSummary) -> None:
        """Display conversion summary (only if verbosity >= 1).

        Args:
            summary: Counts for the converted tree
        """
        if self.verbosity < 1:
            return

        self.console.print("\n[bold]Conversion Summary:[/bold]")
        self.console.print(f"  [green]■[/green] Elements: {summary.element_count}")
        self.console.print(f"  [blue]¶[/blue] Text nodes: {summary.text_count}")
        if summary.skipped_count > 0:
            self.console.print(f"  [yellow]⊘[/yellow] Skipped nodes: {summary.skipped_count}")
        self.console.print(f"  [dim]↓[/dim] Max depth: {summary.max_depth}")
