from typing import Any

from .base import TransportAdapter
from .http import HttpTransport


def create_transport(kind: str = "http", **config: Any) -> TransportAdapter:
    """Create a transport adapter instance.

    Args:
        kind: Transport type (only 'http' is built in)
        **config: Transport-specific configuration
            For HTTP:
                - endpoint: str (default: 'http://localhost:3000/api/ai')
                - timeout: float | None (default: None, no deadline)
                - headers: dict[str, str] | None
                - client: httpx.AsyncClient | None

    Returns:
        Initialized transport adapter

    Raises:
        ValueError: If transport type is not supported
    """
    if kind.lower() == "http":
        return HttpTransport(**config)

    raise ValueError(
        f"Unsupported transport: {kind}. "
        f"Supported transports: 'http'"
    )
