"""Shared fixtures: a scripted stand-in for the Gemini SDK client."""
from __future__ import annotations

import copy
import json
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest
from google.genai import errors as genai_errors

WELL_FORMED_PAYLOAD: Dict[str, Any] = {
    "individualAnalyses": [
        {
            "title": "Generative AI in Introductory Programming Courses",
            "authors": "Lee, K.; Ortiz, M.",
            "year": "2024",
            "relevanceRating": 92,
            "ratingJustification": "Directly studies LLM tutors in CS1.",
            "methodologicalSummary": "Mixed-methods study across four universities.",
            "keyContributions": "Shows gains in debugging confidence.",
            "thesisIntegration": "Anchor the pedagogy chapter on this study.",
        },
        {
            "title": "Screen Time and Attention in Adolescents",
            "authors": "Nakamura, T.",
            "year": "2021",
            "relevanceRating": 12,
            "ratingJustification": "Tangential to CS education.",
            "methodologicalSummary": "Cross-sectional survey (n = 1,204).",
            "keyContributions": "Associates heavy use with attention lapses.",
            "thesisIntegration": "Cite only as background.",
        },
    ],
    "summaryTable": [
        {
            "article": "Generative AI in Introductory Programming Courses",
            "rating": 92,
            "coreConclusion": "LLM tutors improve novice debugging.",
            "utility": "High",
        },
        {
            "article": "Screen Time and Attention in Adolescents",
            "rating": 12,
            "coreConclusion": "Heavy use correlates with attention lapses.",
            "utility": "Low",
        },
    ],
    "synthesisMatrix": {
        "commonThemes": ["Technology mediates learner attention"],
        "divergentResults": ["Opposite effect directions on engagement"],
        "researchGaps": ["No longitudinal studies of LLM tutoring"],
    },
}


def api_error(code: int, status: str, message: str = "upstream failure") -> genai_errors.APIError:
    error_cls = genai_errors.ServerError if code >= 500 else genai_errors.ClientError
    return error_cls(code, {"error": {"code": code, "message": message, "status": status}})


def quota_error() -> genai_errors.APIError:
    return api_error(429, "RESOURCE_EXHAUSTED", "Resource has been exhausted")


def overload_error() -> genai_errors.APIError:
    return api_error(503, "UNAVAILABLE", "The model is overloaded")


def auth_error() -> genai_errors.APIError:
    return api_error(401, "UNAUTHENTICATED", "API key not valid")


class _FakeModels:
    def __init__(self, outcomes: List[Any]) -> None:
        self._outcomes = list(outcomes)
        self.calls: List[Dict[str, Any]] = []

    async def generate_content(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if not self._outcomes:
            raise AssertionError("generate_content called more times than scripted")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return SimpleNamespace(text=outcome)


class FakeGenAIClient:
    """Mimics ``genai.Client().aio.models`` and replays scripted outcomes."""

    def __init__(self, *outcomes: Any) -> None:
        self.models = _FakeModels(list(outcomes))
        self.aio = SimpleNamespace(models=self.models)

    @property
    def calls(self) -> List[Dict[str, Any]]:
        return self.models.calls


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def payload() -> Dict[str, Any]:
    return copy.deepcopy(WELL_FORMED_PAYLOAD)


@pytest.fixture
def payload_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def pdf_bytes() -> bytes:
    return b"%PDF-1.7\n" + b"0" * 2048 + b"\n%%EOF"
