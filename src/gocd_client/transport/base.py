"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, Protocol, runtime_checkable


HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass
class TransportResponse:
    status: int
    reason: str
    body: bytes | None
    headers: Mapping[str, str]
    # Set when the status line arrived but the body could not be read in full.
    read_error: Exception | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        # Header names are stored lowercased whatever the transport hands in.
        self.headers = {key.lower(): value for key, value in self.headers.items()}

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str | None:
        if self.body is None:
            return None
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class Transport(Protocol):
    def send(
        self,
        method: HttpMethod,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> TransportResponse: ...

    def close(self) -> None: ...


__all__ = ["HttpMethod", "Transport", "TransportResponse"]
