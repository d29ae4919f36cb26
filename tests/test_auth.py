import base64
import threading

from gocd_client.auth import AuthManager, BasicAuth, BearerToken, NoAuth
from gocd_client.logger import create_logger


def test_new_manager_has_no_auth() -> None:
    manager = AuthManager(create_logger())
    assert isinstance(manager.strategy, NoAuth)
    assert manager.add_http_headers({"Accept": "x"}) == {"Accept": "x"}


def test_basic_auth_sets_authorization_header() -> None:
    manager = AuthManager(create_logger())
    manager.set_basic_auth("test", "1234")
    headers = manager.add_http_headers()
    expected = "Basic " + base64.b64encode(b"test:1234").decode("ascii")
    assert headers["Authorization"] == expected


def test_access_token_sets_bearer_header() -> None:
    manager = AuthManager(create_logger())
    manager.set_access_token("1234")
    assert manager.add_http_headers()["Authorization"] == "Bearer 1234"


def test_switching_strategy_leaves_no_previous_secret() -> None:
    manager = AuthManager(create_logger())
    manager.set_basic_auth("user", "pass")
    manager.set_access_token("token")
    strategy = manager.strategy
    assert isinstance(strategy, BearerToken)
    assert not hasattr(strategy, "password")

    manager.set_basic_auth("user", "pass")
    strategy = manager.strategy
    assert isinstance(strategy, BasicAuth)
    assert not hasattr(strategy, "token")

    manager.clear()
    assert manager.kind == "none"


def test_secrets_are_hidden_from_repr() -> None:
    assert "pass" not in repr(BasicAuth("user", "pass"))
    assert "secret" not in repr(BearerToken("secret"))


def test_add_http_headers_does_not_mutate_input() -> None:
    manager = AuthManager(create_logger())
    manager.set_access_token("token")
    original = {"Accept": "x"}
    manager.add_http_headers(original)
    assert original == {"Accept": "x"}


def test_concurrent_switching_never_mixes_credentials() -> None:
    manager = AuthManager(create_logger())
    stop = threading.Event()
    seen: set[str] = set()

    def flip() -> None:
        while not stop.is_set():
            manager.set_basic_auth("user", "pass")
            manager.set_access_token("token")

    worker = threading.Thread(target=flip)
    worker.start()
    try:
        for _ in range(2000):
            seen.add(manager.add_http_headers().get("Authorization", ""))
    finally:
        stop.set()
        worker.join()

    basic = "Basic " + base64.b64encode(b"user:pass").decode("ascii")
    assert seen <= {"", basic, "Bearer token"}
