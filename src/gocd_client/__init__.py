"""Public surface for the GoCD Python client."""

from .auth import BasicAuth, BearerToken, NoAuth
from .client import ClientOptions, GoCDClient
from .constants import ACCEPT_V1, ACCEPT_V2
from .errors import (
    BodyReadError,
    ConfigurationError,
    DeserializeError,
    GoCDError,
    MissingETagError,
    NetworkError,
    SerializationError,
    StatusError,
)
from .models import AllPackages, CurrentUser, Package, PackageRepo, Property, Version
from .rest import RestClient
from .transport import HttpTransport
from .types import Tagged
from .version import __version__

__all__ = [
    "__version__",
    "ACCEPT_V1",
    "ACCEPT_V2",
    "AllPackages",
    "BasicAuth",
    "BearerToken",
    "BodyReadError",
    "ClientOptions",
    "ConfigurationError",
    "CurrentUser",
    "DeserializeError",
    "GoCDClient",
    "GoCDError",
    "HttpTransport",
    "MissingETagError",
    "NetworkError",
    "NoAuth",
    "Package",
    "PackageRepo",
    "Property",
    "RestClient",
    "SerializationError",
    "StatusError",
    "Tagged",
    "Version",
]
