"""
Turn PDF files and data URLs into document payloads for analysis.
No LLM calls - pure structural transformation.
"""

import base64
import binascii
import re
from pathlib import Path
from typing import Iterable, Optional

from .models import DocumentPayload
from .utils import validate_pdf_file

PDF_MIME_TYPE = "application/pdf"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?:;[^,;]+)*;base64,(?P<data>.*)$", re.DOTALL)


def decode_data_url(data_url: str, name: Optional[str] = None) -> DocumentPayload:
    """
    Decode a base64 data URL into a DocumentPayload.

    'data:application/pdf;base64,JVBERi0x...' -> DocumentPayload(application/pdf, b'%PDF-1...')
    """
    match = _DATA_URL_RE.match(data_url.strip())
    if not match:
        raise ValueError("Not a base64 data URL")

    try:
        data = base64.b64decode(match.group("data"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e

    if not data:
        raise ValueError("Data URL has an empty payload")

    return DocumentPayload(mime_type=match.group("mime"), data=data, name=name)


def load_document(pdf_path: Path) -> DocumentPayload:
    """Read and validate a single PDF from disk."""
    is_valid, error = validate_pdf_file(pdf_path)
    if not is_valid:
        raise ValueError(error)
    return DocumentPayload(
        mime_type=PDF_MIME_TYPE,
        data=pdf_path.read_bytes(),
        name=pdf_path.name,
    )


def collect_documents(paths: Iterable[Path]) -> tuple[list, list]:
    """
    Load every PDF from a mix of files and folders.

    Folders contribute their *.pdf files in name order. Files that fail
    validation are skipped rather than aborting the batch.

    Returns:
        Tuple of (documents, skipped) where skipped holds (name, reason) pairs
    """
    documents = []
    skipped = []

    for path in paths:
        candidates = sorted(path.glob("*.pdf")) if path.is_dir() else [path]
        for pdf_path in candidates:
            try:
                documents.append(load_document(pdf_path))
            except ValueError as e:
                skipped.append((pdf_path.name, str(e)))

    return documents, skipped
