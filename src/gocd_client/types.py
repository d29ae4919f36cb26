"""Shared typing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Tagged(Generic[T]):
    """A decoded resource together with the ETag it was served with."""

    value: T
    etag: str


__all__ = ["Tagged"]
