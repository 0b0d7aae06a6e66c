"""
Export an analysis result to markdown and Excel.
"""

from datetime import date
from pathlib import Path
from typing import Optional

import pandas as pd

from .models import AnalysisResult


def rating_band(rating: int) -> str:
    """Bucket a 0-100 relevance rating for display."""
    if rating >= 85:
        return "high"
    if rating >= 60:
        return "good"
    if rating >= 30:
        return "moderate"
    return "low"


def escape_table_cell(text: str) -> str:
    """Make text safe for a single markdown table cell."""
    return text.replace("|", "\\|").replace("\r\n", " ").replace("\n", " ")


def report_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"ScholarSync_Report_{today.isoformat()}.md"


def generate_markdown_report(
    result: AnalysisResult,
    topic: str,
    output_path: Optional[Path] = None,
    generated: Optional[date] = None
) -> str:
    """
    Render the review as a markdown report.

    Sections follow the order a reader needs them: summary table,
    synthesis matrix, then the deep per-article analysis.
    """
    generated = generated or date.today()
    lines = []

    lines.append("# Systematic Literature Review Report")
    lines.append("")
    lines.append(f"**Research Topic:** {topic}")
    lines.append(f"**Date:** {generated.isoformat()}")
    lines.append(f"**Articles analysed:** {len(result.individual_analyses)}")
    lines.append("")
    lines.append("---")
    lines.append("")

    lines.append("## 1. Summary Overview")
    lines.append("")
    lines.append("| Article | Rating | Core Conclusion | Utility |")
    lines.append("| :--- | :--- | :--- | :--- |")
    for row in result.summary_table:
        lines.append(
            f"| {escape_table_cell(row.article)} | {row.rating} "
            f"| {escape_table_cell(row.core_conclusion)} | {row.utility} |"
        )
    lines.append("")
    lines.append("---")
    lines.append("")

    matrix = result.synthesis_matrix
    lines.append("## 2. Synthesis Matrix")
    lines.append("")
    for heading, items in (
        ("Common Themes", matrix.common_themes),
        ("Divergent Results", matrix.divergent_results),
        ("Research Gaps", matrix.research_gaps),
    ):
        lines.append(f"### {heading}")
        for item in items:
            lines.append(f"- {item}")
        lines.append("")
    lines.append("---")
    lines.append("")

    lines.append("## 3. Deep Individual Analysis")
    lines.append("")
    for item in result.individual_analyses:
        lines.append(f"### {item.title}")
        lines.append(f"**Authors:** {item.authors} | **Year:** {item.year}")
        lines.append(f"**Relevance:** {item.relevance_rating}/100")
        lines.append("")
        lines.append(f"**Methodological Summary:**\n{item.methodological_summary}")
        lines.append("")
        lines.append(f"**Key Contributions:**\n{item.key_contributions}")
        lines.append("")
        lines.append(f"**Rating Justification:**\n{item.rating_justification}")
        lines.append("")
        lines.append(f"**Thesis Integration:**\n{item.thesis_integration}")
        lines.append("")
        lines.append("---")
        lines.append("")

    content = "\n".join(lines)

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

    return content


def generate_excel_summary(result: AnalysisResult, output_path: Path) -> None:
    """
    Write the summary table and per-article analyses as two Excel sheets.
    """
    summary_rows = [
        {
            "Article": row.article,
            "Rating": row.rating,
            "Core Conclusion": row.core_conclusion,
            "Utility": row.utility,
        }
        for row in result.summary_table
    ]

    analysis_rows = [
        {
            "Title": item.title,
            "Authors": item.authors,
            "Year": item.year,
            "Relevance": item.relevance_rating,
            "Band": rating_band(item.relevance_rating),
            "Rating Justification": item.rating_justification,
            "Methodological Summary": item.methodological_summary,
            "Key Contributions": item.key_contributions,
            "Thesis Integration": item.thesis_integration,
        }
        for item in result.individual_analyses
    ]

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        pd.DataFrame(summary_rows, columns=["Article", "Rating", "Core Conclusion", "Utility"]).to_excel(
            writer, sheet_name="Summary", index=False
        )
        pd.DataFrame(analysis_rows).to_excel(writer, sheet_name="Analyses", index=False)
