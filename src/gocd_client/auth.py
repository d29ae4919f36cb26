"""Authentication strategies for the Python client."""

from __future__ import annotations

import base64
import threading
from dataclasses import dataclass, field
from typing import Literal, Mapping, Union

from .logger import BoundLogger

AuthKind = Literal["none", "basic", "token"]


@dataclass(frozen=True)
class NoAuth:
    kind: AuthKind = field(default="none", init=False)

    def apply(self, headers: dict[str, str]) -> dict[str, str]:
        return headers


@dataclass(frozen=True)
class BasicAuth:
    username: str
    password: str = field(repr=False)
    kind: AuthKind = field(default="basic", init=False)

    def apply(self, headers: dict[str, str]) -> dict[str, str]:
        credentials = f"{self.username}:{self.password}".encode("utf-8")
        headers["Authorization"] = "Basic " + base64.b64encode(credentials).decode("ascii")
        return headers


@dataclass(frozen=True)
class BearerToken:
    token: str = field(repr=False)
    kind: AuthKind = field(default="token", init=False)

    def apply(self, headers: dict[str, str]) -> dict[str, str]:
        headers["Authorization"] = f"Bearer {self.token}"
        return headers


AuthStrategy = Union[NoAuth, BasicAuth, BearerToken]


class AuthManager:
    """Holds the active strategy and decorates outgoing request headers.

    Strategies are immutable and swapped as a whole under a lock, so a
    request built concurrently with a setter sees either the old or the new
    credentials, never a mix of both.
    """

    def __init__(self, logger: BoundLogger, strategy: AuthStrategy | None = None) -> None:
        self._logger = logger.child("auth")
        self._lock = threading.Lock()
        self._strategy: AuthStrategy = strategy or NoAuth()

    @property
    def strategy(self) -> AuthStrategy:
        with self._lock:
            return self._strategy

    @property
    def kind(self) -> AuthKind:
        return self.strategy.kind

    def set_basic_auth(self, username: str, password: str) -> None:
        self._swap(BasicAuth(username, password))

    def set_access_token(self, token: str) -> None:
        self._swap(BearerToken(token))

    def clear(self) -> None:
        self._swap(NoAuth())

    def set_debug(self, enabled: bool = True) -> None:
        self._logger.set_debug(enabled)

    def add_http_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        merged = dict(headers or {})
        return self.strategy.apply(merged)

    def _swap(self, strategy: AuthStrategy) -> None:
        with self._lock:
            self._strategy = strategy
        self._logger.debug("Authentication strategy set to %s", strategy.kind)


__all__ = ["AuthKind", "AuthManager", "AuthStrategy", "BasicAuth", "BearerToken", "NoAuth"]
