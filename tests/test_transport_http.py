import time

import httpx
import pytest

from gocd_client import ACCEPT_V1, BodyReadError, NetworkError, RestClient, StatusError, Version
from gocd_client.transport import HttpTransport

TRUNCATED_OK = (
    b"HTTP/1.1 200 OK\r\n"
    b"Content-Type: application/json\r\n"
    b"Content-Length: 100\r\n"
    b"\r\n"
)

TRUNCATED_ERROR = (
    b"HTTP/1.1 500 Internal Server Error\r\n"
    b"Content-Length: 100\r\n"
    b"\r\n"
    b"partial"
)

COMPLETE_OK = (
    b"HTTP/1.1 200 OK\r\n"
    b"Content-Type: application/json\r\n"
    b'ETag: "123456"\r\n'
    b"Content-Length: 22\r\n"
    b"Connection: close\r\n"
    b"\r\n"
    b'{"version": "16.6.0"}\n'
)


def test_truncated_body_is_body_read_error(raw_server) -> None:
    server = raw_server(TRUNCATED_OK)
    with RestClient(server.url, timeout=5.0) as rest:
        with pytest.raises(BodyReadError):
            rest.fetch("/api/version", ACCEPT_V1, Version)


def test_truncated_error_body_is_still_status_error(raw_server) -> None:
    server = raw_server(TRUNCATED_ERROR)
    with RestClient(server.url, timeout=5.0) as rest:
        with pytest.raises(StatusError) as excinfo:
            rest.fetch("/api/version", ACCEPT_V1, Version)

    assert excinfo.value.status_code == 500
    assert excinfo.value.body is None
    assert str(excinfo.value) == "500 Internal Server Error"


def test_stalled_error_body_is_status_error(raw_server) -> None:
    server = raw_server(TRUNCATED_ERROR, hold=True)
    with RestClient(server.url, timeout=0.5) as rest:
        started = time.monotonic()
        with pytest.raises(StatusError) as excinfo:
            rest.fetch("/api/version", ACCEPT_V1, Version)

    assert time.monotonic() - started < 4.0
    assert excinfo.value.status_code == 500
    assert excinfo.value.body is None
    assert str(excinfo.value) == "500 Internal Server Error"


def test_stalled_success_body_is_body_read_error(raw_server) -> None:
    server = raw_server(TRUNCATED_OK + b'{"version": ', hold=True)
    with RestClient(server.url, timeout=0.5) as rest:
        with pytest.raises(BodyReadError) as excinfo:
            rest.fetch("/api/version", ACCEPT_V1, Version)

    assert isinstance(excinfo.value.__cause__, httpx.ReadTimeout)


def test_request_exceeding_timeout_is_network_error(raw_server) -> None:
    server = raw_server(None)
    with RestClient(server.url, timeout=0.3) as rest:
        started = time.monotonic()
        with pytest.raises(NetworkError):
            rest.fetch("/api/version", ACCEPT_V1, Version)
        with pytest.raises(NetworkError):
            rest.fetch_with_etag("/api/version", ACCEPT_V1, Version)

    assert time.monotonic() - started < 4.0


def test_complete_response_over_socket(raw_server) -> None:
    server = raw_server(COMPLETE_OK)
    with RestClient(server.url, timeout=5.0) as rest:
        tagged = rest.fetch_with_etag("/api/version", ACCEPT_V1, Version)

    assert tagged.value.version == "16.6.0"
    assert tagged.etag == '"123456"'


def test_refused_connection_is_network_error(raw_server) -> None:
    server = raw_server(None)
    url = server.url
    server.close()
    with RestClient(url, timeout=1.0) as rest:
        with pytest.raises(NetworkError):
            rest.fetch("/api/version", ACCEPT_V1, Version)


def test_default_timeout_is_one_minute() -> None:
    transport = HttpTransport()
    try:
        assert transport.timeout == 60.0
    finally:
        transport.close()


def test_injected_client_is_not_closed_by_transport() -> None:
    client = httpx.Client()
    transport = HttpTransport(client=client)
    transport.close()
    assert client.is_closed is False
    client.close()
