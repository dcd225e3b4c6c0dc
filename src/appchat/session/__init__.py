"""Chat session module for appchat.

Keeps conversation history and request state for one chat surface.
"""

from .ids import generate_id
from .models import (
    CLAUDE,
    DEFAULT_PROVIDER,
    DEFAULT_SUGGESTIONS,
    GEMINI,
    AppContext,
    Message,
    ProviderId,
    QueryRequest,
    QueryResult,
    Role,
    SessionState,
    Suggestion,
    TokenUsage,
)
from .store import MessageStore
from .errors import (
    StatusOnly,
    StructuredError,
    Thrown,
    classify_exception,
    classify_response,
    error_reply,
    failure_reason,
)
from .controller import ChatSession
from .factory import create_chat_session

__all__ = [
    "generate_id",
    "AppContext",
    "Message",
    "ProviderId",
    "QueryRequest",
    "QueryResult",
    "Role",
    "SessionState",
    "Suggestion",
    "TokenUsage",
    "CLAUDE",
    "GEMINI",
    "DEFAULT_PROVIDER",
    "DEFAULT_SUGGESTIONS",
    "MessageStore",
    "Thrown",
    "StructuredError",
    "StatusOnly",
    "classify_exception",
    "classify_response",
    "error_reply",
    "failure_reason",
    "ChatSession",
    "create_chat_session",
]
