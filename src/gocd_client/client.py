"""High-level client mirroring the GoCD REST API resources."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigurationError
from .logger import LogLevel
from .models import AllPackages, CurrentUser, Package, Version
from .resources import packages, users, version
from .rest import RestClient
from .transport import DEFAULT_TIMEOUT, Transport
from .types import Tagged

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ClientOptions:
    base_url: str
    username: str | None = None
    password: str | None = None
    access_token: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False
    transport: Transport | None = None
    logger: object | None = None
    log_level: LogLevel = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientOptions":
        """Build options from ``GOCD_*`` environment variables."""
        env = os.environ if environ is None else environ
        base_url = env.get("GOCD_SERVER_URL")
        if not base_url:
            raise ConfigurationError("GOCD_SERVER_URL is not set")
        raw_timeout = env.get("GOCD_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(f"GOCD_TIMEOUT must be a number of seconds, got '{raw_timeout}'") from exc
        return cls(
            base_url=base_url,
            username=env.get("GOCD_USERNAME") or None,
            password=env.get("GOCD_PASSWORD") or None,
            access_token=env.get("GOCD_ACCESS_TOKEN") or None,
            timeout=timeout,
            debug=env.get("GOCD_DEBUG", "").strip().lower() in _TRUTHY,
        )


class GoCDClient:
    """Primary entry point for interacting with a GoCD server."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
        debug: bool = False,
    ) -> None:
        self._rest = RestClient(
            base_url,
            timeout=timeout,
            transport=transport,
            logger=logger,
            log_level=log_level,
            debug=debug,
        )

    @classmethod
    def from_options(cls, options: ClientOptions) -> "GoCDClient":
        client = cls(
            options.base_url,
            timeout=options.timeout,
            transport=options.transport,
            logger=options.logger,
            log_level=options.log_level,
            debug=options.debug,
        )
        if options.access_token:
            client.set_access_token(options.access_token)
        elif options.username:
            client.set_basic_auth(options.username, options.password or "")
        return client

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GoCDClient":
        return cls.from_options(ClientOptions.from_env(environ))

    def __enter__(self) -> "GoCDClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        self.close()

    @property
    def rest(self) -> RestClient:
        return self._rest

    @property
    def base_url(self) -> str:
        return self._rest.base_url

    def set_debug(self, enabled: bool = True) -> None:
        self._rest.set_debug(enabled)

    def set_basic_auth(self, username: str, password: str) -> None:
        self._rest.set_basic_auth(username, password)

    def set_access_token(self, token: str) -> None:
        self._rest.set_access_token(token)

    def get_version(self) -> Version:
        return version.get_version(self._rest)

    def get_current_user(self) -> CurrentUser:
        return users.get_current_user(self._rest)

    def get_all_packages(self) -> AllPackages:
        return packages.get_all_packages(self._rest)

    def get_package(self, package_id: str) -> Package:
        return packages.get_package(self._rest, package_id)

    def get_package_with_etag(self, package_id: str) -> Tagged[Package]:
        return packages.get_package_with_etag(self._rest, package_id)

    def create_package(self, package: Package) -> Package:
        return packages.create_package(self._rest, package)

    def update_package(self, package: Package, etag: str) -> Package:
        return packages.update_package(self._rest, package, etag)

    def delete_package(self, package_id: str) -> str:
        return packages.delete_package(self._rest, package_id)

    def close(self) -> None:
        self._rest.close()


__all__ = ["ClientOptions", "GoCDClient"]
