"""
Error kinds raised by the analysis client.

Every failure from the generation service is normalized by
``classify_error`` before the retry loop looks at it, so retry decisions
never depend on SDK exception types or message text.
"""

from typing import Optional

from google.genai import errors as genai_errors

QUOTA_STATUS_CODES = {429}
OVERLOAD_STATUS_CODES = {503}
QUOTA_STATUSES = {"RESOURCE_EXHAUSTED"}
OVERLOAD_STATUSES = {"UNAVAILABLE"}


class AnalysisError(Exception):
    """Base class for all analysis failures surfaced to callers."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause


class ConfigurationError(AnalysisError):
    """Required service credential is missing."""


class TransientServiceError(AnalysisError):
    """Quota exhaustion or upstream overload; eligible for retry."""

    def __init__(
        self,
        message: str,
        reason: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, status_code=status_code, cause=cause)
        self.reason = reason


class EmptyResponseError(AnalysisError):
    """The service call succeeded but returned no payload."""


class SchemaViolationError(AnalysisError):
    """The payload does not parse into the declared result structure."""

    def __init__(self, message: str, details: Optional[list] = None, cause: Optional[BaseException] = None):
        super().__init__(message, cause=cause)
        self.details = details or []


class UnclassifiedServiceError(AnalysisError):
    """Any other transport or service failure."""


def _transient_reason(code: Optional[int], status: Optional[str]) -> Optional[str]:
    status = (status or "").upper()
    if code in QUOTA_STATUS_CODES or status in QUOTA_STATUSES:
        return "quota"
    if code in OVERLOAD_STATUS_CODES or status in OVERLOAD_STATUSES:
        return "overload"
    return None


def classify_error(exc: BaseException) -> AnalysisError:
    """
    Map any exception raised by a service call into one of the error kinds.

    Args:
        exc: Exception raised while calling the generation service

    Returns:
        The matching AnalysisError; instances of AnalysisError are
        returned unchanged
    """
    if isinstance(exc, AnalysisError):
        return exc

    if isinstance(exc, genai_errors.APIError):
        code = getattr(exc, "code", None)
        status = getattr(exc, "status", None)
        message = getattr(exc, "message", None) or str(exc)

        reason = _transient_reason(code, status)
        if reason == "quota":
            return TransientServiceError(
                f"Quota exhausted ({code}): {message}",
                reason=reason, status_code=code, cause=exc,
            )
        if reason == "overload":
            return TransientServiceError(
                f"Service overloaded ({code}): {message}",
                reason=reason, status_code=code, cause=exc,
            )
        return UnclassifiedServiceError(
            f"Service error ({code} {status}): {message}",
            status_code=code, cause=exc,
        )

    return UnclassifiedServiceError(
        f"{type(exc).__name__}: {exc}", cause=exc,
    )
