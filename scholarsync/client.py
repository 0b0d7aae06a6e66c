"""
Analyse a batch of PDFs against a research topic with Gemini.
Handles request assembly, structured output, and retries.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence, Union

from google import genai
from google.genai import types
from pydantic import ValidationError

from .config import AnalysisSettings
from .errors import (
    AnalysisError,
    ConfigurationError,
    EmptyResponseError,
    SchemaViolationError,
    UnclassifiedServiceError,
    classify_error,
)
from .models import AnalysisRequest, AnalysisResult, DocumentPayload
from .prompts import render_prompt
from .retry import AttemptState
from .schema import RESPONSE_SCHEMA
from .utils import get_api_key

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[Any]]
DocumentLike = Union[DocumentPayload, tuple]


def build_request(topic: str, documents: Sequence[DocumentLike]) -> AnalysisRequest:
    """
    Freeze caller input into an AnalysisRequest.

    Documents may be DocumentPayload instances or (mime_type, bytes) pairs.
    """
    payloads = []
    for doc in documents:
        if isinstance(doc, DocumentPayload):
            payloads.append(doc)
        else:
            mime_type, data = doc
            payloads.append(DocumentPayload(mime_type=mime_type, data=data))
    return AnalysisRequest(topic=topic, documents=tuple(payloads))


def build_contents(request: AnalysisRequest) -> types.Content:
    """Instruction text first, then one inline part per document, in order."""
    parts = [types.Part.from_text(text=render_prompt(request.topic))]
    for doc in request.documents:
        parts.append(types.Part.from_bytes(data=doc.data, mime_type=doc.mime_type))
    return types.Content(role="user", parts=parts)


def parse_response(response: Any) -> AnalysisResult:
    """
    Validate a service response into an AnalysisResult.

    Raises:
        EmptyResponseError: No text payload in the response
        SchemaViolationError: Payload is not valid JSON or breaks the contract
    """
    text = getattr(response, "text", None)
    if not text or not text.strip():
        raise EmptyResponseError("No response generated")

    try:
        return AnalysisResult.model_validate_json(text)
    except ValidationError as e:
        raise SchemaViolationError(
            f"Response does not match the analysis schema ({e.error_count()} errors)",
            details=e.errors(include_url=False),
            cause=e,
        ) from e


class StructuredAnalysisClient:
    """
    Literature review client using Gemini structured output.

    Each call to analyze() is independent: the only state it keeps is its
    own attempt counter, so concurrent calls are safe.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        settings: Optional[AnalysisSettings] = None,
        client: Any = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        self.settings = settings or AnalysisSettings()
        self.retry_policy = self.settings.retry_policy()
        self._sleep = sleep

        if client is None:
            api_key = api_key or get_api_key(self.settings.api_key_env)
            if not api_key:
                raise ConfigurationError(
                    f"{self.settings.api_key_env} not found or not configured"
                )
            client = genai.Client(api_key=api_key)
        self.client = client

    @property
    def model_name(self) -> str:
        return self.settings.model_name

    def generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=self.settings.temperature,
            response_mime_type="application/json",
            response_schema=RESPONSE_SCHEMA,
            thinking_config=types.ThinkingConfig(
                thinking_budget=self.settings.thinking_budget
            ),
        )

    async def analyze(
        self, topic: str, documents: Sequence[DocumentLike]
    ) -> AnalysisResult:
        """
        Analyse documents against a topic and return the validated review.

        Args:
            topic: Research topic, already trimmed by the caller
            documents: Ordered documents to analyse

        Returns:
            AnalysisResult parsed from the service's structured payload

        Raises:
            TransientServiceError: Quota or overload persisted past the retry budget
            EmptyResponseError: The service returned no payload
            SchemaViolationError: The payload broke the response contract
            UnclassifiedServiceError: Any other service failure; the original
                SDK exception is kept on ``.cause`` and ``__cause__``
        """
        request = build_request(topic, documents)
        contents = build_contents(request)
        config = self.generation_config()

        logger.info(
            "Analysing %d document(s) with %s", len(request.documents), self.model_name
        )

        attempt = 1
        state = AttemptState.ATTEMPTING
        while state is AttemptState.ATTEMPTING:
            try:
                response = await self.client.aio.models.generate_content(
                    model=self.model_name,
                    contents=contents,
                    config=config,
                )
            except Exception as exc:
                error = classify_error(exc)
                state = self.retry_policy.next_state(error, attempt)
                if state is AttemptState.RETRY_WAIT:
                    delay = self.retry_policy.delay_for(attempt)
                    logger.warning(
                        "Attempt %d/%d failed: %s. Waiting %gs before retry...",
                        attempt, self.retry_policy.max_attempts, error.message, delay,
                    )
                    await self._sleep(delay)
                    attempt += 1
                    state = AttemptState.ATTEMPTING
                    continue

                self._log_failure(error, attempt)
                if error is exc:
                    raise
                raise error from exc

            try:
                result = parse_response(response)
            except AnalysisError as error:
                self._log_failure(error, attempt)
                raise

            state = AttemptState.SUCCESS
            logger.info(
                "Analysis complete after %d attempt(s): %d article(s)",
                attempt, len(result.individual_analyses),
            )
            return result

    def _log_failure(self, error: AnalysisError, attempt: int) -> None:
        if isinstance(error, UnclassifiedServiceError):
            logger.error(
                "Analysis failed on attempt %d: %s", attempt, error.message,
                exc_info=error.cause,
            )
        else:
            logger.error(
                "Analysis failed on attempt %d (%s): %s",
                attempt, type(error).__name__, error.message,
            )
