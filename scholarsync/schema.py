"""
Response contract attached to every analysis request.
"""

from google.genai import types

REQUIRED_TOP_LEVEL_KEYS = ["individualAnalyses", "summaryTable", "synthesisMatrix"]

ARTICLE_FIELDS = [
    "title",
    "authors",
    "year",
    "relevanceRating",
    "ratingJustification",
    "methodologicalSummary",
    "keyContributions",
    "thesisIntegration",
]

SUMMARY_FIELDS = ["article", "rating", "coreConclusion", "utility"]

SYNTHESIS_FIELDS = ["commonThemes", "divergentResults", "researchGaps"]

UTILITY_LEVELS = ["Low", "Medium", "High"]


def _string() -> types.Schema:
    return types.Schema(type=types.Type.STRING)


def _rating() -> types.Schema:
    return types.Schema(type=types.Type.INTEGER, minimum=0, maximum=100)


def _string_list() -> types.Schema:
    return types.Schema(type=types.Type.ARRAY, items=_string())


def build_response_schema() -> types.Schema:
    """Build the structured-output schema for an AnalysisResult payload."""
    article = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "title": _string(),
            "authors": _string(),
            "year": _string(),
            "relevanceRating": _rating(),
            "ratingJustification": _string(),
            "methodologicalSummary": _string(),
            "keyContributions": _string(),
            "thesisIntegration": _string(),
        },
        required=ARTICLE_FIELDS,
        property_ordering=ARTICLE_FIELDS,
    )

    summary_row = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "article": _string(),
            "rating": _rating(),
            "coreConclusion": _string(),
            "utility": types.Schema(
                type=types.Type.STRING, format="enum", enum=UTILITY_LEVELS
            ),
        },
        required=SUMMARY_FIELDS,
        property_ordering=SUMMARY_FIELDS,
    )

    synthesis = types.Schema(
        type=types.Type.OBJECT,
        properties={name: _string_list() for name in SYNTHESIS_FIELDS},
        required=SYNTHESIS_FIELDS,
        property_ordering=SYNTHESIS_FIELDS,
    )

    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "individualAnalyses": types.Schema(type=types.Type.ARRAY, items=article),
            "summaryTable": types.Schema(type=types.Type.ARRAY, items=summary_row),
            "synthesisMatrix": synthesis,
        },
        required=REQUIRED_TOP_LEVEL_KEYS,
        property_ordering=REQUIRED_TOP_LEVEL_KEYS,
    )


RESPONSE_SCHEMA = build_response_schema()
