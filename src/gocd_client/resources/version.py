"""Server version endpoint."""

from __future__ import annotations

from ..constants import ACCEPT_V1
from ..models import Version
from ..rest import RestClient

ENDPOINT = "/api/version"


def get_version(client: RestClient) -> Version:
    return client.fetch(ENDPOINT, ACCEPT_V1, Version, module="version")
