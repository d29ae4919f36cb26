"""Transport implementations exposed to users."""

from .base import HttpMethod, Transport, TransportResponse
from .http import DEFAULT_TIMEOUT, HttpTransport

__all__ = [
    "DEFAULT_TIMEOUT",
    "HttpMethod",
    "HttpTransport",
    "Transport",
    "TransportResponse",
]
