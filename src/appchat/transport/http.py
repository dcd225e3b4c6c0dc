"""HTTP transport for the assistant endpoint.

Uses httpx for async requests.
Reference: https://www.python-httpx.org/async/
"""

import logging
from typing import Any

import httpx

from ..session.models import QueryRequest
from .base import TransportAdapter
from .models import TransportResponse

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://localhost:3000/api/ai"


class HttpTransport(TransportAdapter):
    """POSTs queries as JSON to a fixed endpoint.

    Hidden design decisions:
    - HTTP client setup and connection reuse
    - JSON encoding of the request and lenient decoding of the reply
    - Timeout policy (none by default: a request runs until it settles)
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize HTTP transport.

        Args:
            endpoint: URL of the assistant endpoint
            timeout: Request timeout in seconds (None disables it)
            headers: Extra headers sent with every request
            client: Pre-built client to use instead of creating one
        """
        self._endpoint = endpoint
        self._headers = {"Content-Type": "application/json", **(headers or {})}
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def send(self, request: QueryRequest) -> TransportResponse:
        """POST the query and wrap the reply.

        Args:
            request: Query to send

        Returns:
            TransportResponse; body is None when the reply is not valid JSON

        Raises:
            httpx.HTTPError: On connection-level failures
        """
        response = await self._client.post(
            self._endpoint,
            json=request.to_payload(),
            headers=self._headers,
        )

        body: Any
        try:
            body = response.json()
        except ValueError:
            logger.debug("Non-JSON reply from %s (status %d)", self._endpoint, response.status_code)
            body = None

        return TransportResponse(status_code=response.status_code, body=body)

    async def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
