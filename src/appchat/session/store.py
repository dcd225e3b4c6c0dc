"""Append-only message store for a chat session."""

from collections.abc import Iterator

from .ids import generate_id
from .models import Message, Role, utcnow


class MessageStore:
    """Insertion-ordered sequence of chat messages.

    Messages can only be added at the end or dropped all at once.
    Timestamps never go backwards: if the clock steps back, a new
    message reuses the previous message's timestamp.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def add(self, role: Role, content: str, provider: str) -> Message:
        """Create a message and append it.

        Args:
            role: Sender role
            content: Message text (must be non-empty)
            provider: Provider to tag the message with

        Returns:
            The stored message
        """
        timestamp = utcnow()
        last = self.last
        if last is not None and timestamp < last.timestamp:
            timestamp = last.timestamp

        message = Message(
            id=generate_id(),
            role=role,
            content=content,
            timestamp=timestamp,
            provider=provider,
        )
        self._messages.append(message)
        return message

    def clear(self) -> None:
        """Drop all messages."""
        self._messages = []

    @property
    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def snapshot(self) -> tuple[Message, ...]:
        """Return the current messages as an immutable tuple."""
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)
