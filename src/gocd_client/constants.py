"""GoCD media types used for API version negotiation."""

ACCEPT_V1 = "application/vnd.go.cd.v1+json"
ACCEPT_V2 = "application/vnd.go.cd.v2+json"

CONTENT_TYPE_JSON = "application/json"

__all__ = ["ACCEPT_V1", "ACCEPT_V2", "CONTENT_TYPE_JSON"]
