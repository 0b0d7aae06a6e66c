"""
Console rendering of analysis results.
"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import AnalysisResult
from .report import rating_band
from .utils import truncate_text

console = Console()

BAND_STYLES = {
    "high": "green",
    "good": "blue",
    "moderate": "yellow",
    "low": "red",
}

UTILITY_STYLES = {
    "High": "green",
    "Medium": "blue",
    "Low": "dim",
}


def _rating(rating: int) -> str:
    style = BAND_STYLES[rating_band(rating)]
    return f"[{style}]{rating}/100[/{style}]"


def display_result(result: AnalysisResult, topic: str, out: Console = console) -> None:
    """Print deep analysis, summary table and synthesis matrix."""
    out.print()
    out.print("=" * 78, style="bold blue")
    out.print("  LITERATURE REVIEW RESULTS", style="bold white")
    out.print("=" * 78, style="bold blue")
    out.print()
    out.print(f"  Topic:    [bold]{escape(truncate_text(topic, 70))}[/bold]")
    out.print(f"  Articles: {len(result.individual_analyses)}")

    out.print()
    out.print("-" * 78)
    out.print("  DEEP ANALYSIS", style="bold")
    out.print("-" * 78)
    out.print()

    for item in result.individual_analyses:
        body = (
            f"[dim]{escape(item.authors)} ({escape(item.year)})[/dim]\n\n"
            f"[bold]Methodological Summary[/bold]\n{escape(item.methodological_summary)}\n\n"
            f"[bold]Key Contributions[/bold]\n{escape(item.key_contributions)}\n\n"
            f"[bold]Rating Justification[/bold]\n{escape(item.rating_justification)}\n\n"
            f"[bold]Thesis Integration[/bold]\n{escape(item.thesis_integration)}"
        )
        out.print(Panel(
            body,
            title=f"[bold]{escape(item.title)}[/bold]",
            subtitle=_rating(item.relevance_rating),
            box=box.ROUNDED,
        ))

    out.print()
    out.print("-" * 78)
    out.print("  SUMMARY TABLE", style="bold")
    out.print("-" * 78)
    out.print()

    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Article", style="bold")
    table.add_column("Rating", justify="right")
    table.add_column("Core Conclusion")
    table.add_column("Utility")
    for row in result.summary_table:
        style = UTILITY_STYLES[row.utility]
        table.add_row(
            escape(row.article),
            _rating(row.rating),
            escape(row.core_conclusion),
            f"[{style}]{row.utility}[/{style}]",
        )
    out.print(table)

    out.print()
    out.print("-" * 78)
    out.print("  SYNTHESIS MATRIX", style="bold")
    out.print("-" * 78)

    matrix = result.synthesis_matrix
    for heading, items in (
        ("Common Themes", matrix.common_themes),
        ("Divergent Results", matrix.divergent_results),
        ("Research Gaps", matrix.research_gaps),
    ):
        out.print()
        out.print(f"  [bold cyan]{heading}[/bold cyan]")
        if not items:
            out.print("    [dim]None identified[/dim]")
        for entry in items:
            out.print(f"    - {escape(entry)}")
    out.print()
