"""
Data model for analysis requests and structured review results.

Results are validated strictly: ratings must be real integers in [0, 100]
and utility must be one of the three exact labels. Field names are
snake_case in Python and camelCase on the wire.
"""

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Rating = Annotated[int, Field(ge=0, le=100, strict=True)]
Utility = Literal["Low", "Medium", "High"]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        frozen=True,
    )


class DocumentPayload(BaseModel):
    """A single binary document sent alongside the instructions."""

    model_config = ConfigDict(frozen=True)

    mime_type: str = Field(..., min_length=1)
    data: bytes
    name: Optional[str] = None

    def __repr__(self) -> str:
        label = self.name or "document"
        return f"DocumentPayload({label!r}, {self.mime_type}, {len(self.data)} bytes)"


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic: str
    documents: tuple[DocumentPayload, ...]


class ArticleAnalysis(_WireModel):
    title: str
    authors: str
    year: str
    relevance_rating: Rating
    rating_justification: str
    methodological_summary: str
    key_contributions: str
    thesis_integration: str


class SummaryRow(_WireModel):
    article: str
    rating: Rating
    core_conclusion: str
    utility: Utility


class SynthesisMatrix(_WireModel):
    common_themes: list[str]
    divergent_results: list[str]
    research_gaps: list[str]


class AnalysisResult(_WireModel):
    """Validated literature review returned by the analysis service."""

    individual_analyses: list[ArticleAnalysis]
    summary_table: list[SummaryRow]
    synthesis_matrix: SynthesisMatrix

    def to_payload(self) -> dict:
        """Dump back to the camelCase shape the service returned."""
        return self.model_dump(mode="python", by_alias=True)
