"""Typed REST operations over a single GoCD server.

Every operation follows the same path: build the request, decorate it with
the active authentication strategy, send it, classify the status and decode
the JSON body into the type requested by the caller. Failures raise one of
the exceptions in :mod:`gocd_client.errors`; nothing is retried.
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

import httpx

from .auth import AuthKind, AuthManager
from .codec import decode_body, decode_delete_message, encode_payload
from .constants import CONTENT_TYPE_JSON
from .errors import (
    BodyReadError,
    ConfigurationError,
    DeserializeError,
    GoCDError,
    MissingETagError,
    SerializationError,
    StatusError,
)
from .logger import BoundLogger, LogLevel, create_logger
from .transport import DEFAULT_TIMEOUT, HttpMethod, HttpTransport, Transport, TransportResponse
from .types import Tagged

T = TypeVar("T")
R = TypeVar("R")


class RestClient:
    """Owns the server address, the HTTP transport and the auth strategy.

    Configure authentication before sharing an instance between threads;
    setters are lock-protected, but a request already in flight keeps the
    credentials it was built with.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        logger: Any | None = None,
        log_level: LogLevel = "info",
        debug: bool = False,
    ) -> None:
        try:
            httpx.URL(base_url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise ConfigurationError(f"failed to parse '{base_url}' to url: '{exc}'") from exc

        self.base_url = base_url.rstrip("/")
        self._logger = create_logger(logger=logger, level=log_level)
        if debug:
            self._logger.set_debug()
        self._transport = transport or HttpTransport(timeout=timeout, logger=self._logger)
        self._auth = AuthManager(self._logger)

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        self.close()

    @property
    def auth_kind(self) -> AuthKind:
        return self._auth.kind

    @property
    def debug(self) -> bool:
        return self._logger.level == "debug"

    def set_basic_auth(self, username: str, password: str) -> None:
        self._auth.set_basic_auth(username, password)

    def set_access_token(self, token: str) -> None:
        self._auth.set_access_token(token)

    def clear_auth(self) -> None:
        self._auth.clear()

    def set_debug(self, enabled: bool = True) -> None:
        self._logger.set_debug(enabled)
        self._auth.set_debug(enabled)
        if isinstance(self._transport, HttpTransport):
            self._transport.set_debug(enabled)

    def close(self) -> None:
        self._transport.close()

    def url_for(self, endpoint: str) -> str:
        return self.base_url + endpoint

    def fetch(self, endpoint: str, accept: str, result_type: type[T], *, module: str = "client") -> T:
        """GET ``endpoint`` and decode the body as ``result_type``."""
        logger = self._request_logger("GET", endpoint, module)
        body, _ = self._call("GET", endpoint, accept, logger)
        return self._decode(body, result_type, logger)

    def fetch_with_etag(
        self,
        endpoint: str,
        accept: str,
        result_type: type[T],
        *,
        module: str = "client",
    ) -> Tagged[T]:
        """GET ``endpoint`` and return the decoded body with its ETag.

        A successful response without an ``ETag`` header is an error: the
        caller would have nothing to send as ``If-Match`` on the update.
        """
        logger = self._request_logger("GET", endpoint, module)
        body, response = self._call("GET", endpoint, accept, logger)
        value = self._decode(body, result_type, logger)
        etag = response.headers.get("etag", "")
        if not etag:
            logger.error("missing or empty ETag header")
            raise MissingETagError("missing or empty ETag header", context=self.url_for(endpoint))
        return Tagged(value=value, etag=etag)

    def replace(
        self,
        payload: Any,
        etag: str,
        endpoint: str,
        accept: str,
        result_type: type[R],
        *,
        module: str = "client",
    ) -> R:
        """PUT ``payload`` guarded by ``If-Match: etag``.

        A stale tag comes back from the server as ``412 Precondition Failed``
        and is raised as a plain :class:`StatusError`; fetch again to retry.
        """
        logger = self._request_logger("PUT", endpoint, module)
        if not etag:
            logger.error("refusing to send PUT without an ETag")
            raise MissingETagError("an ETag is required to replace a resource", context=self.url_for(endpoint))
        content = self._encode(payload, logger)
        body, _ = self._call(
            "PUT",
            endpoint,
            accept,
            logger,
            content=content,
            extra_headers={"Content-Type": CONTENT_TYPE_JSON, "If-Match": etag},
        )
        return self._decode(body, result_type, logger)

    def create(
        self,
        payload: Any,
        endpoint: str,
        accept: str,
        result_type: type[R],
        *,
        module: str = "client",
    ) -> R:
        """POST ``payload`` and decode the created resource."""
        logger = self._request_logger("POST", endpoint, module)
        content = self._encode(payload, logger)
        body, _ = self._call(
            "POST",
            endpoint,
            accept,
            logger,
            content=content,
            extra_headers={"Content-Type": CONTENT_TYPE_JSON},
        )
        return self._decode(body, result_type, logger)

    def delete(self, endpoint: str, accept: str, *, module: str = "client") -> str:
        """DELETE ``endpoint`` and return the server's ``message``."""
        logger = self._request_logger("DELETE", endpoint, module)
        body, _ = self._call("DELETE", endpoint, accept, logger)
        try:
            return decode_delete_message(body)
        except DeserializeError as exc:
            logger.error("%s", exc)
            raise

    def _call(
        self,
        method: HttpMethod,
        endpoint: str,
        accept: str,
        logger: BoundLogger,
        *,
        content: bytes | None = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> tuple[bytes, TransportResponse]:
        url = self.url_for(endpoint)

        headers = {"Accept": accept}
        if extra_headers:
            headers.update(extra_headers)
        headers = self._auth.add_http_headers(headers)

        try:
            response = self._transport.send(method, url, headers=headers, content=content)
        except GoCDError as exc:
            logger.error("%s", exc)
            raise

        if not response.ok:
            error = StatusError(response.status, response.reason, response.text(), context=url)
            logger.error("%s", error)
            raise error

        logger.info("%d %s", response.status, response.reason)
        if response.read_error is not None or response.body is None:
            message = f"failed to read response body: '{response.read_error}'"
            logger.error(message)
            raise BodyReadError(message, context=url) from response.read_error
        return response.body, response

    def _encode(self, payload: Any, logger: BoundLogger) -> bytes:
        try:
            return encode_payload(payload)
        except SerializationError as exc:
            logger.error("%s", exc)
            raise

    def _decode(self, body: bytes, result_type: type[T], logger: BoundLogger) -> T:
        try:
            return decode_body(body, result_type)
        except DeserializeError as exc:
            logger.error("%s", exc)
            raise

    def _request_logger(self, method: HttpMethod, endpoint: str, module: str) -> BoundLogger:
        return self._logger.bind(module=module.upper(), method=method, url=self.url_for(endpoint))


__all__ = ["RestClient"]
