"""Factory for creating chat sessions."""

from typing import TYPE_CHECKING, Any

from .controller import ChatSession
from .models import DEFAULT_PROVIDER

if TYPE_CHECKING:
    from ..transport.base import TransportAdapter


def create_chat_session(
    provider: str = DEFAULT_PROVIDER,
    transport: "TransportAdapter | None" = None,
    **transport_config: Any
) -> ChatSession:
    """Create a chat session.

    Args:
        provider: Initially selected provider
        transport: Adapter to use; an HTTP transport is created when omitted
        **transport_config: Passed to the HTTP transport (endpoint, timeout, headers)

    Returns:
        Empty ChatSession

    Raises:
        TypeError: If transport_config is given together with a transport
    """
    if transport is None:
        from ..transport import create_transport
        transport = create_transport("http", **transport_config)
    elif transport_config:
        raise TypeError("transport_config cannot be combined with an explicit transport")

    return ChatSession(transport, provider=provider)
