"""HTTP transport built on top of httpx."""

from __future__ import annotations

from typing import Mapping

import httpx

from ..errors import ConfigurationError, NetworkError
from ..logger import BoundLogger, create_logger
from .base import HttpMethod, TransportResponse

DEFAULT_TIMEOUT = 60.0


class HttpTransport:
    """Sends single requests and always drains and releases the response."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout))
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("http")

    @property
    def timeout(self) -> float:
        return self._timeout

    def set_debug(self, enabled: bool = True) -> None:
        self._logger.set_debug(enabled)

    def send(
        self,
        method: HttpMethod,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> TransportResponse:
        try:
            request = self._client.build_request(method, url, headers=headers, content=content)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"failed to create request object, url: {url}: '{exc}'") from exc

        self._logger.debug("HTTP %s %s bytes=%d", method, url, len(content or b""))
        try:
            response = self._client.send(request, stream=True)
        except httpx.UnsupportedProtocol as exc:
            raise ConfigurationError(f"failed to create request object, url: {url}: '{exc}'") from exc
        except httpx.TimeoutException as exc:
            raise NetworkError(f"request failed, url: {url}: timeout after {self._timeout}s") from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"request failed, url: {url}: '{exc}'") from exc

        try:
            body: bytes | None = None
            read_error: Exception | None = None
            try:
                body = response.read()
            except (httpx.StreamError, httpx.RequestError) as exc:
                # Read timeouts included: the status line has already arrived.
                read_error = exc

            self._logger.debug(
                "HTTP <- %s status=%s bytes=%d",
                url,
                response.status_code,
                len(body or b""),
            )
            return TransportResponse(
                status=response.status_code,
                reason=httpx.codes.get_reason_phrase(response.status_code) or response.reason_phrase,
                body=body,
                headers=dict(response.headers.items()),
                read_error=read_error,
            )
        finally:
            response.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["DEFAULT_TIMEOUT", "HttpTransport"]
