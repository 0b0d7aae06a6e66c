"""
Shared utilities for the literature review analysis client.
"""

import os
import re
from pathlib import Path
from typing import Optional

PLACEHOLDER_API_KEY = "your_gemini_api_key_here"

MIN_PDF_BYTES = 1024
MAX_PDF_BYTES = 100 * 1024 * 1024


def safe_filename(text: str, max_length: int = 50) -> str:
    """
    Convert text to a safe filename.

    Args:
        text: The text to convert
        max_length: Maximum length of the filename

    Returns:
        A safe filename string
    """
    # Anything outside word chars, dots, dashes and spaces becomes "_"
    safe = re.sub(r"[^\w.\- ]", "_", text)
    # Spaces and underscore runs collapse to one underscore
    safe = re.sub(r"[ _]+", "_", safe)
    return safe[:max_length].rstrip("_") if len(safe) > max_length else safe


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate text to a maximum length, adding suffix if truncated."""
    # Suffix counts toward max_length
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format."""
    # Binary units, one decimal place
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


def get_api_key(env_var: str = "GEMINI_API_KEY") -> Optional[str]:
    """
    Get API key from environment variable.

    Blank values and the unedited ``.env`` placeholder count as missing.

    Args:
        env_var: Name of the environment variable

    Returns:
        API key string or None if not found
    """
    value = os.getenv(env_var)
    if not value or not value.strip() or value.strip() == PLACEHOLDER_API_KEY:
        return None
    return value.strip()


def validate_pdf_file(pdf_path: Path) -> tuple[bool, str]:
    """
    Validate that a file is a PDF.

    Args:
        pdf_path: Path to the file

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not pdf_path.exists():
        return False, f"File not found: {pdf_path}"

    if not pdf_path.is_file():
        return False, f"Not a file: {pdf_path}"

    if pdf_path.suffix.lower() != ".pdf":
        return False, f"Not a PDF file: {pdf_path}"

    size = pdf_path.stat().st_size
    if size < MIN_PDF_BYTES:
        return False, f"File too small (may be empty): {pdf_path}"
    if size > MAX_PDF_BYTES:
        return False, f"File too large (>100MB): {pdf_path}"

    # Check PDF magic bytes
    try:
        with open(pdf_path, "rb") as f:
            header = f.read(5)
            if header != b"%PDF-":
                return False, f"Invalid PDF header: {pdf_path}"
    except OSError as e:
        return False, f"Error reading file: {e}"

    return True, ""
