"""Current user endpoint."""

from __future__ import annotations

from ..constants import ACCEPT_V1
from ..models import CurrentUser
from ..rest import RestClient

ENDPOINT = "/api/current_user"


def get_current_user(client: RestClient) -> CurrentUser:
    return client.fetch(ENDPOINT, ACCEPT_V1, CurrentUser, module="authentication")
