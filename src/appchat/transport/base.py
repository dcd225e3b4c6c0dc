from abc import ABC, abstractmethod
from typing import Any

from ..session.models import QueryRequest
from .models import TransportResponse


class TransportAdapter(ABC):
    """Abstract base class for assistant endpoint transports.

    This module hides the design decision of how a query reaches the
    assistant endpoint. Implementations must:
    - Deliver the request payload to the endpoint exactly once (no retries)
    - Return non-success statuses as a TransportResponse, not raise
    - Raise only for transport-level failures (connection errors, etc.)

    Supports async context manager protocol for proper resource cleanup:
        async with transport:
            response = await transport.send(request)
    """

    @abstractmethod
    async def send(self, request: QueryRequest) -> TransportResponse:
        """Send a query to the assistant endpoint.

        Args:
            request: Query text, optional app context and provider

        Returns:
            TransportResponse with the status code and decoded body

        Raises:
            Exception: Transport-level errors (connection refused, timeout, ...)
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "TransportAdapter":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
