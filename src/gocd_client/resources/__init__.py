"""Endpoint helpers for individual GoCD resource families."""

from . import packages, users, version

__all__ = ["packages", "users", "version"]
