"""
ScholarSync Literature Review Analysis

Submits a research topic and a batch of PDFs to Gemini and returns a
structured literature review: per-article analysis, summary table and
cross-article synthesis.
"""

from .client import StructuredAnalysisClient
from .errors import (
    AnalysisError,
    ConfigurationError,
    EmptyResponseError,
    SchemaViolationError,
    TransientServiceError,
    UnclassifiedServiceError,
)
from .models import AnalysisResult, ArticleAnalysis, DocumentPayload, SummaryRow, SynthesisMatrix

__version__ = "1.0.0"

__all__ = [
    "StructuredAnalysisClient",
    "AnalysisError",
    "ConfigurationError",
    "EmptyResponseError",
    "SchemaViolationError",
    "TransientServiceError",
    "UnclassifiedServiceError",
    "AnalysisResult",
    "ArticleAnalysis",
    "DocumentPayload",
    "SummaryRow",
    "SynthesisMatrix",
]
