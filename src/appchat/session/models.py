"""Data models for chat sessions.

These models define messages, session snapshots and the query payloads
exchanged with the assistant endpoint, independent of how they are
transported or rendered.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, NewType

from pydantic import BaseModel, ConfigDict, Field

# Open set of assistant backends. Never validated against a fixed list.
ProviderId = NewType("ProviderId", str)

CLAUDE = ProviderId("claude")
GEMINI = ProviderId("gemini")
DEFAULT_PROVIDER = CLAUDE


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Role(str, Enum):
    """Role of a message sender."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique message identifier")
    role: Role = Field(description="Who sent the message")
    content: str = Field(min_length=1, description="Message text")
    timestamp: datetime = Field(default_factory=utcnow)
    provider: str = Field(description="Provider active when the message was created or answered")


class AppContext(BaseModel):
    """Application record passed along with a query.

    The well-known fields mirror what the assistant endpoint understands.
    Any other keys are kept as-is so callers can send richer records.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    product: str
    description: str | None = None
    category: str | None = None
    subject: str | None = None
    audience: list[str] | None = None
    website: str | None = None
    sso_enabled: bool | None = Field(default=None, alias="ssoEnabled")
    mobile_app: bool | None = Field(default=None, alias="mobileApp")
    division: str | None = None
    grade_levels: str | None = Field(default=None, alias="gradeLevels")

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire aliases, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class QueryRequest(BaseModel):
    """Request sent to the assistant endpoint."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(description="User query text")
    apps_data: list[Any] | None = Field(
        default=None,
        description="Optional application context; AppContext items are re-serialized, anything else is sent unchanged"
    )
    provider: str = Field(description="Requested assistant backend")

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for the endpoint."""
        payload: dict[str, Any] = {"query": self.query, "provider": self.provider}
        if self.apps_data is not None:
            payload["appsData"] = [
                app.to_payload() if isinstance(app, AppContext) else app
                for app in self.apps_data
            ]
        return payload


class TokenUsage(BaseModel):
    """Token counts reported by the endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    input_tokens: int = Field(default=0, alias="inputTokens")
    output_tokens: int = Field(default=0, alias="outputTokens")


class QueryResult(BaseModel):
    """Successful response from the assistant endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    response: str = Field(min_length=1, description="Assistant reply text")
    provider: str | None = Field(
        default=None,
        description="Provider that actually answered (may differ from the one requested)"
    )
    model: str | None = Field(default=None, description="Model that generated the reply")
    usage: TokenUsage | None = None


class SessionState(BaseModel):
    """Read-only snapshot of a chat session."""

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()
    is_loading: bool = False
    error: str | None = None
    provider: str = DEFAULT_PROVIDER


class Suggestion(BaseModel):
    """A starter prompt offered when the conversation is empty."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    category: str | None = None


DEFAULT_SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion(id="1", text="What tools are available for elementary math?", category="discovery"),
    Suggestion(id="2", text="Find apps with SSO for middle school", category="discovery"),
    Suggestion(id="3", text="What alternatives are there to Kahoot?", category="alternatives"),
    Suggestion(id="4", text="Recommend a tool for student portfolios", category="recommendation"),
)
