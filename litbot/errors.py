"""Relay error taxonomy.

Every failure the relay can report is a ``RelayError``. Each subclass fixes the
user-facing message and the HTTP status the API layer answers with, so the
route only has to let them propagate.
"""


class RelayError(Exception):
    """Base class for failures rendered as ``{"error": message}``.

    Attributes:
        message: user-facing text placed in the JSON ``error`` field.
        status_code: HTTP status returned to the caller.
    """

    message = "Internal server error"
    status_code = 500

    def __init__(self, detail: str | None = None):
        # detail is for logs only; the wire message never changes
        self.detail = detail
        super().__init__(detail or self.message)


class MissingMessageError(RelayError):
    """Request body carried no usable ``message``."""

    message = "Message is required"
    status_code = 400


class ServiceUnavailableError(RelayError):
    """No upstream credential configured."""

    message = "AI service unavailable"


class RateLimitError(RelayError):
    """Upstream answered 429. Backoff is left to the caller."""

    message = "Rate limit exceeded"
    status_code = 429


class UpstreamError(RelayError):
    """Upstream answered with any other non-success status."""

    message = "Failed to get AI response"


class EmptyResponseError(RelayError):
    """Upstream succeeded but ``choices[0].message.content`` was missing."""

    message = "No response from AI"


class InternalRelayError(RelayError):
    """Anything unexpected: bad JSON, network failure, timeout."""
