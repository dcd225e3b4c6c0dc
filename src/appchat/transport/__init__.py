from .base import TransportAdapter
from .factory import create_transport
from .http import DEFAULT_ENDPOINT, HttpTransport
from .models import TransportResponse

__all__ = [
    "TransportAdapter",
    "TransportResponse",
    "create_transport",
    "HttpTransport",
    "DEFAULT_ENDPOINT",
]
