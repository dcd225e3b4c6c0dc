"""
Appchat: session core for an assistant chat surface.

Keeps conversation history, drives one request per message against a
remote assistant endpoint, and folds success and failure into a single
session state.
"""

__version__ = "0.1.0"

from .session import (
    AppContext,
    ChatSession,
    Message,
    QueryResult,
    Role,
    SessionState,
    create_chat_session,
)
from .transport import HttpTransport, TransportAdapter, TransportResponse, create_transport

__all__ = [
    "AppContext",
    "ChatSession",
    "Message",
    "QueryResult",
    "Role",
    "SessionState",
    "create_chat_session",
    "HttpTransport",
    "TransportAdapter",
    "TransportResponse",
    "create_transport",
]
