"""Unit tests for failure normalization."""
from hypothesis import given
from hypothesis import strategies as st

from appchat.session import (
    StatusOnly,
    StructuredError,
    Thrown,
    classify_exception,
    classify_response,
    error_reply,
    failure_reason,
)
from appchat.session.errors import GENERIC_FAILURE
from appchat.transport import TransportResponse


class TestFailureReason:
    """Tests for failure_reason."""

    def test_structured_error_uses_message(self):
        assert failure_reason(StructuredError(reason="Rate limit exceeded")) == "Rate limit exceeded"

    def test_status_only_mentions_code(self):
        assert failure_reason(StatusOnly(status_code=503)) == "Request failed with status 503"

    def test_thrown_uses_message(self):
        assert failure_reason(Thrown(reason="timeout")) == "timeout"

    def test_thrown_without_message_falls_back(self):
        assert failure_reason(Thrown()) == GENERIC_FAILURE
        assert failure_reason(Thrown(reason="")) == GENERIC_FAILURE
        assert failure_reason(Thrown(reason="   ")) == GENERIC_FAILURE

    @given(st.one_of(
        st.builds(Thrown, reason=st.one_of(st.none(), st.text())),
        st.builds(StructuredError, reason=st.text(min_size=1)),
        st.builds(StatusOnly, status_code=st.integers(min_value=100, max_value=599)),
    ))
    def test_reason_never_blank(self, failure):
        """Property test: every failure maps to a non-empty reason."""
        assert failure_reason(failure)


class TestClassifyResponse:
    """Tests for classify_response."""

    def test_error_body(self):
        response = TransportResponse(status_code=429, body={"error": "Rate limit exceeded. Please try again in a moment."})
        assert classify_response(response) == StructuredError(
            reason="Rate limit exceeded. Please try again in a moment."
        )

    def test_empty_error_falls_back_to_status(self):
        response = TransportResponse(status_code=500, body={"error": ""})
        assert classify_response(response) == StatusOnly(status_code=500)

    def test_blank_error_falls_back_to_status(self):
        response = TransportResponse(status_code=500, body={"error": " \n\t "})
        assert classify_response(response) == StatusOnly(status_code=500)

    def test_non_string_error_falls_back_to_status(self):
        response = TransportResponse(status_code=500, body={"error": {"code": 1}})
        assert classify_response(response) == StatusOnly(status_code=500)

    def test_missing_body(self):
        response = TransportResponse(status_code=502, body=None)
        assert classify_response(response) == StatusOnly(status_code=502)

    def test_list_body(self):
        response = TransportResponse(status_code=400, body=["unexpected"])
        assert classify_response(response) == StatusOnly(status_code=400)


class TestClassifyException:
    """Tests for classify_exception."""

    def test_message_kept(self):
        assert classify_exception(TimeoutError("timeout")) == Thrown(reason="timeout")

    def test_empty_message(self):
        assert classify_exception(RuntimeError()) == Thrown(reason=None)


def test_error_reply_wording():
    """Test the fixed wording of the error reply."""
    assert error_reply("timeout") == "Sorry, I encountered an error: timeout. Please try again."
