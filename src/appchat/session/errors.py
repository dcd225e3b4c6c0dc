"""Failure normalization for assistant requests.

A request can fail in three shapes: the transport raises, the endpoint
answers with a structured ``{"error": ...}`` body, or it answers with a
bare non-success status. Each shape is classified into one variant and
mapped to a single human-readable reason by ``failure_reason``.
"""

from dataclasses import dataclass

from ..transport.models import TransportResponse

GENERIC_FAILURE = "Failed to send message"
INVALID_RESPONSE = "Invalid response from assistant endpoint"
ERROR_REPLY_TEMPLATE = "Sorry, I encountered an error: {reason}. Please try again."


@dataclass(frozen=True)
class Thrown:
    """The request raised before producing a response."""

    reason: str | None = None


@dataclass(frozen=True)
class StructuredError:
    """The endpoint returned a non-success status with an error message."""

    reason: str


@dataclass(frozen=True)
class StatusOnly:
    """The endpoint returned a non-success status without a usable message."""

    status_code: int


Failure = Thrown | StructuredError | StatusOnly


def failure_reason(failure: Failure) -> str:
    """Map a failure to the reason shown to the user. Never empty."""
    if isinstance(failure, StructuredError):
        return failure.reason
    if isinstance(failure, StatusOnly):
        return f"Request failed with status {failure.status_code}"
    if failure.reason and failure.reason.strip():
        return failure.reason
    return GENERIC_FAILURE


def classify_response(response: TransportResponse) -> Failure:
    """Classify a non-success response.

    Args:
        response: Response whose status is not a success

    Returns:
        StructuredError if the body carries a non-blank ``error`` string,
        otherwise StatusOnly
    """
    body = response.body
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error.strip():
            return StructuredError(reason=error)
    return StatusOnly(status_code=response.status_code)


def classify_exception(exc: BaseException) -> Failure:
    """Classify an exception raised while sending."""
    return Thrown(reason=str(exc) or None)


def error_reply(reason: str) -> str:
    """Render the assistant message shown in place of a reply."""
    return ERROR_REPLY_TEMPLATE.format(reason=reason)
