"""Custom exceptions raised by the GoCD Python client."""

from __future__ import annotations

from typing import Any


class GoCDError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConfigurationError(GoCDError):
    """Raised when the server address or environment settings are unusable."""


class NetworkError(GoCDError):
    """Raised when the server cannot be reached or the request times out."""


class StatusError(GoCDError):
    """Raised when the server answers with a status outside 2xx."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        body: str | None = None,
        *,
        context: Any | None = None,
    ) -> None:
        message = f"{status_code} {reason}"
        if body is not None:
            message += f": '{body}'"
        super().__init__(message, context=context)
        self.status_code = status_code
        self.reason = reason
        self.body = body


class MissingETagError(GoCDError):
    """Raised when an ETag is required but absent."""


class SerializationError(GoCDError):
    """Raised when a payload cannot be encoded as JSON."""


class BodyReadError(GoCDError):
    """Raised when the response body cannot be read completely."""


class DeserializeError(GoCDError):
    """Raised when a response body is not valid JSON of the expected shape."""


__all__ = [
    "BodyReadError",
    "ConfigurationError",
    "DeserializeError",
    "GoCDError",
    "MissingETagError",
    "NetworkError",
    "SerializationError",
    "StatusError",
]
