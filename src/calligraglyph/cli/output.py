"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, warning, and summary messages.
"""


from rich.console import Console
from rich.markup import escape
from rich.text import Text

from calligraglyph.exceptions import SchemaViolation

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Calligraglyph[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_glyph_info(glyph_id: str, strokes: int, ordered: int, document_order: bool) -> None:
    """Print glyph summary.

    Args:
        glyph_id: Glyph identifier
        strokes: Number of strokes in the record
        ordered: Number of strokes with order metadata
        document_order: Whether the order fell back to document order
    """
    line = Text("  ")
    line.append(glyph_id, style="bold")
    console.print(line)
    if document_order:
        order_note = "document order"
    else:
        order_note = f"{ordered} with order metadata"
    console.print(f"  {strokes} strokes {SYM_DOT} {order_note}")


def print_warning(message: str) -> None:
    """Print a recoverable-condition warning.

    Args:
        message: Warning text
    """
    line = Text(f"  {SYM_WARN} ", style="yellow")
    line.append(message)
    console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_path: str, strokes: int, total_time_s: float, warnings: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        strokes: Number of strokes written
        total_time_s: Total conversion time in seconds
        warnings: Number of warnings raised during conversion
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  Wrote ")
    line.append(output_path, style="bold")
    line.append(f" ({strokes} strokes)")
    console.print(line)

    warning_style = "yellow" if warnings > 0 else "green"
    console.print(f"  [{warning_style}]{warnings} warnings[/{warning_style}]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(Text(f"  {details}"))


def print_violations(violations: list[SchemaViolation]) -> None:
    """Print every schema violation of a rejected record.

    Args:
        violations: Violations reported by the validator
    """
    for violation in violations:
        line = Text("  ")
        line.append(violation.path, style="bold")
        line.append(f" {SYM_DOT} {violation.reason}")
        console.print(line)
    console.print("  No output file created")
