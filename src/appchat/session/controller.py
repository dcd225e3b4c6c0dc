"""Chat session controller.

Owns one conversation: the message history, the loading flag, the last
error and the selected provider. All state changes go through the four
operations below, and every change is published to subscribers as a
fresh ``SessionState`` snapshot.

Concurrency: sessions are driven from a single asyncio event loop.
``submit_message`` suspends only while the transport is sending; every
other operation is synchronous. Overlapping submissions are not
serialized. Each one runs as its own coroutine, assistant replies are
appended in settlement order, and whichever request settles last decides
the final ``is_loading`` value. In-flight requests are never cancelled.
"""

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import (
    INVALID_RESPONSE,
    Failure,
    Thrown,
    classify_exception,
    classify_response,
    error_reply,
    failure_reason,
)
from .models import (
    DEFAULT_PROVIDER,
    AppContext,
    Message,
    QueryRequest,
    QueryResult,
    Role,
    SessionState,
)
from .store import MessageStore

if TYPE_CHECKING:
    from ..transport.base import TransportAdapter
    from ..transport.models import TransportResponse

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


class ChatSession:
    """Request/response chat session against an assistant endpoint."""

    def __init__(self, transport: "TransportAdapter", provider: str = DEFAULT_PROVIDER) -> None:
        """Create an empty session.

        Args:
            transport: Adapter used to reach the assistant endpoint
            provider: Initially selected provider
        """
        self._transport = transport
        self._store = MessageStore()
        self._is_loading = False
        self._error: str | None = None
        self._provider = provider
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SessionState:
        """Snapshot of the current session state."""
        return SessionState(
            messages=self._store.snapshot(),
            is_loading=self._is_loading,
            error=self._error,
            provider=self._provider,
        )

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._store.snapshot()

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def store(self) -> MessageStore:
        return self._store

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with a snapshot after every change.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def submit_message(
        self,
        content: str,
        apps_data: Sequence[AppContext | Any] | None = None,
    ) -> QueryResult | None:
        """Send a user message and record the assistant's reply.

        Blank input is ignored. Otherwise exactly one user message is
        appended immediately and exactly one assistant message once the
        request settles. Failures are reported through the appended
        message and ``error``; they are never raised.

        Args:
            content: Message text (trimmed before use)
            apps_data: Optional application context passed through to the endpoint

        Returns:
            The endpoint's result on success, None on failure or blank input
        """
        text = content.strip()
        if not text:
            return None

        provider = self._provider
        self._store.add(Role.USER, text, provider)
        self._is_loading = True
        self._error = None
        self._notify()

        logger.debug("Dispatching query to provider %s (%d chars)", provider, len(text))

        outcome: QueryResult | Failure
        try:
            request = QueryRequest(
                query=text,
                apps_data=list(apps_data) if apps_data is not None else None,
                provider=provider,
            )
            response = await self._transport.send(request)
            outcome = self._interpret(response)
        except Exception as e:
            outcome = classify_exception(e)

        if isinstance(outcome, QueryResult):
            answered_by = outcome.provider or provider
            self._store.add(Role.ASSISTANT, outcome.response, answered_by)
            self._is_loading = False
            logger.debug("Query settled successfully (provider %s)", answered_by)
            self._notify()
            return outcome

        reason = failure_reason(outcome)
        logger.warning("Assistant request failed: %s", reason)
        self._store.add(Role.ASSISTANT, error_reply(reason), provider)
        self._is_loading = False
        self._error = reason
        self._notify()
        return None

    def clear_messages(self) -> None:
        """Drop the history and the last error. Loading flag and provider are kept."""
        self._store.clear()
        self._error = None
        self._notify()

    def set_provider(self, provider: str) -> None:
        """Select the provider for future messages."""
        self._provider = provider
        self._notify()

    def clear_error(self) -> None:
        """Forget the last error."""
        self._error = None
        self._notify()

    def _interpret(self, response: "TransportResponse") -> QueryResult | Failure:
        if not response.ok:
            return classify_response(response)
        try:
            return QueryResult.model_validate(response.body)
        except ValidationError:
            logger.debug("Unparseable success body: %r", response.body)
            return Thrown(reason=INVALID_RESPONSE)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Session listener %r failed", listener)
