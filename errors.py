"""Error taxonomy for the translation gateway.

Every failure of a translation request is one of the classes below. The
``message`` is what the caller sees; upstream details are only logged.
All kinds are terminal for the request and none are retried.
"""
from typing import Optional


class TranslationError(Exception):
    """Base class for classified translation failures."""

    kind = "translation_failed"
    message = "Translation failed"
    # Every kind is reported as 500 to stay compatible with existing clients
    status_code = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class MissingParameters(TranslationError):
    kind = "missing_parameters"
    message = "Missing required parameters"


class MissingConfiguration(TranslationError):
    kind = "missing_configuration"
    message = "LOVABLE_API_KEY not configured"


class RateLimited(TranslationError):
    kind = "rate_limited"
    message = "Rate limit exceeded. Please try again in a moment."


class QuotaExhausted(TranslationError):
    kind = "quota_exhausted"
    message = "AI credits exhausted. Please add credits to continue."


class UpstreamFailure(TranslationError):
    kind = "upstream_failure"
    message = "Failed to translate code"


class EmptyResult(TranslationError):
    kind = "empty_result"
    message = "No translation received"
