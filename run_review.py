#!/usr/bin/env python3
"""
ScholarSync Literature Review

Usage:
    python run_review.py --topic "..." --pdfs input/pdfs            # Analyse a folder
    python run_review.py --topic "..." --pdfs a.pdf b.pdf --excel   # Also write Excel
    python run_review.py --topic "..." --pdfs input/pdfs --quiet    # Report only
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml
from rich.logging import RichHandler
from rich.markup import escape

from scholarsync.client import StructuredAnalysisClient
from scholarsync.config import load_settings
from scholarsync.display import console, display_result
from scholarsync.errors import AnalysisError
from scholarsync.ingest import collect_documents
from scholarsync.prompts import TOPIC_PLACEHOLDER
from scholarsync.report import generate_excel_summary, generate_markdown_report, report_filename
from scholarsync.utils import format_file_size, safe_filename


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )


def main():
    parser = argparse.ArgumentParser(description="ScholarSync Literature Review")
    parser.add_argument("--topic", type=str, required=True,
                        help="Research topic to evaluate the articles against")
    parser.add_argument("--pdfs", type=Path, nargs="+", default=[Path("input/pdfs")],
                        help="PDF files and/or folders containing PDFs")
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML settings file (default: config/settings.yaml)")
    parser.add_argument("--output", type=Path, default=Path("output"),
                        help="Folder for the generated report")
    parser.add_argument("--excel", action="store_true",
                        help="Also write an Excel workbook of the results")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Skip printing results to the console")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args()

    configure_logging(args.verbose)

    topic = args.topic.strip()
    if not topic:
        console.print("[red]ERROR: Please enter a research topic.[/red]")
        return 1

    if TOPIC_PLACEHOLDER in topic:
        console.print(f"[red]ERROR: The topic must not contain {TOPIC_PLACEHOLDER}.[/red]")
        return 1

    # ===========================================================================
    # LOAD DOCUMENTS
    # ===========================================================================

    documents, skipped = collect_documents(args.pdfs)

    for name, reason in skipped:
        console.print(f"  [yellow][SKIPPED][/yellow] {name}: {reason}")

    if not documents:
        console.print("[red]ERROR: Please provide at least one PDF article.[/red]")
        return 1

    total_size = sum(len(doc.data) for doc in documents)
    console.print(f"\n  Reading {len(documents)} article(s) ({format_file_size(total_size)})")
    for doc in documents:
        console.print(f"    - {doc.name}")

    # ===========================================================================
    # ANALYSE
    # ===========================================================================

    try:
        settings = load_settings(args.config)
        client = StructuredAnalysisClient(settings=settings)
        with console.status("Analyzing literature..."):
            result = asyncio.run(client.analyze(topic, documents))
    except AnalysisError as e:
        console.print(f"\n[red]ERROR: {escape(e.message)}[/red]")
        console.print("  Fix the problem above and re-run the analysis.")
        return 1
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"\n[red]ERROR: {escape(str(e))}[/red]")
        console.print("  Fix the problem above and re-run the analysis.")
        return 1

    if not args.quiet:
        display_result(result, topic)

    # ===========================================================================
    # EXPORT
    # ===========================================================================

    md_path = args.output / report_filename()
    generate_markdown_report(result, topic, output_path=md_path)
    console.print(f"  -> {md_path}")

    if args.excel:
        xlsx_path = args.output / f"{safe_filename(topic)}_summary.xlsx"
        generate_excel_summary(result, xlsx_path)
        console.print(f"  -> {xlsx_path}")

    console.print("\n  [OK] Analysis complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
