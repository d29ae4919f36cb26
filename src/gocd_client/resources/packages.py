"""Package definitions under ``/api/admin/packages``."""

from __future__ import annotations

from urllib.parse import quote

from ..constants import ACCEPT_V2
from ..models import AllPackages, Package
from ..rest import RestClient
from ..types import Tagged

ENDPOINT = "/api/admin/packages"
MODULE = "packages"


def _package_endpoint(package_id: str) -> str:
    return f"{ENDPOINT}/{quote(package_id, safe='')}"


def get_all_packages(client: RestClient) -> AllPackages:
    return client.fetch(ENDPOINT, ACCEPT_V2, AllPackages, module=MODULE)


def get_package(client: RestClient, package_id: str) -> Package:
    return client.fetch(_package_endpoint(package_id), ACCEPT_V2, Package, module=MODULE)


def get_package_with_etag(client: RestClient, package_id: str) -> Tagged[Package]:
    return client.fetch_with_etag(_package_endpoint(package_id), ACCEPT_V2, Package, module=MODULE)


def create_package(client: RestClient, package: Package) -> Package:
    return client.create(package, ENDPOINT, ACCEPT_V2, Package, module=MODULE)


def update_package(client: RestClient, package: Package, etag: str) -> Package:
    """Replace ``package`` using the ETag from a previous fetch."""
    return client.replace(package, etag, _package_endpoint(package.id), ACCEPT_V2, Package, module=MODULE)


def delete_package(client: RestClient, package_id: str) -> str:
    return client.delete(_package_endpoint(package_id), ACCEPT_V2, module=MODULE)
