"""Rich console rendering of verification summaries."""

from decimal import Decimal

from rich.console import Console
from rich.table import Table
from rich.text import Text

from arclength.domain import VerificationSummary

SYM_OK = "✓"
SYM_ERR = "✗"

# Decimal fields shown per check, in display order
_DETAIL_FIELDS = (
    "arc_length",
    "quadrature_length",
    "total_length",
    "target_length",
    "error",
    "difference",
    "max_gap",
)


def _format_decimal(value: Decimal, digits: int) -> str:
    return f"{value:.{digits}e}" if value != 0 else "0"


def build_summary_table(summary: VerificationSummary, digits: int = 12) -> Table:
    """Build a rich Table with one row per check.

    Args:
        summary: Result of verify_all
        digits: Significant digits shown for Decimal values

    Returns:
        Table with status, key values and error count per check
    """
    table = Table(title="Arc length verification", show_lines=False)
    table.add_column("Check", style="bold")
    table.add_column("Status")
    table.add_column("Details")
    table.add_column("Errors", justify="right")

    for name, report in summary.results.items():
        valid = getattr(report, "valid", False)
        status = Text(SYM_OK, style="green") if valid else Text(SYM_ERR, style="red")

        details = []
        for field_name in _DETAIL_FIELDS:
            value = getattr(report, field_name, None)
            if isinstance(value, Decimal):
                details.append(f"{field_name}={_format_decimal(value, digits)}")

        table.add_row(
            name,
            status,
            ", ".join(details),
            str(len(getattr(report, "errors", []))),
        )

    return table


def render_verification_summary(
    summary: VerificationSummary,
    console: Console | None = None,
    digits: int = 12,
) -> None:
    """Print a verification summary, followed by any error messages.

    Args:
        summary: Result of verify_all
        console: Target console (a fresh stdout console when None)
        digits: Significant digits shown for Decimal values
    """
    console = console or Console()
    console.print(build_summary_table(summary, digits))

    if summary.valid:
        console.print(f"[green]{SYM_OK}[/green] All checks passed")
        return

    for error in summary.errors:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(error)
        console.print(line)
