"""Output helpers for the CLI."""

from rich.console import Console
from rich.markup import escape

from ..diagnostic import DiagnosticResult

console = Console(soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_diagnostic(version_string: str, result: DiagnosticResult) -> None:
    """Render a diagnostic for humans.

    Args:
        version_string: The checked version string.
        result: The diagnostic to render.
    """
    if result.error is not None:
        print_error(f"{version_string}: {result.reason} ({result.error.__name__})")
    elif result.fix:
        print_warning(f"{version_string}: version could not be verified")
    else:
        print_success(f"{version_string}: supported")

    if result.fix:
        console.print(f"  Fix: {escape(result.fix)}")
    if result.doc:
        console.print(f"  [dim]Documentation: {escape(result.doc)}[/dim]")
