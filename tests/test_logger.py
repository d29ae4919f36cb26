import logging

import pytest

from gocd_client.logger import BoundLogger, create_logger


def test_bound_fields_render_in_fixed_order(caplog: pytest.LogCaptureFixture) -> None:
    logger = create_logger(logger=logging.getLogger("gocd.tests.logger"), module="packages")
    bound = logger.bind(url="https://ci/go/api/admin/packages", method="GET")

    with caplog.at_level(logging.INFO, logger="gocd.tests.logger"):
        bound.info("%d %s", 200, "OK")

    assert caplog.records[-1].getMessage() == "[PACKAGES] [GET] [https://ci/go/api/admin/packages] 200 OK"


def test_debug_is_filtered_until_enabled(caplog: pytest.LogCaptureFixture) -> None:
    logger = BoundLogger(logging.getLogger("gocd.tests.debug"))

    with caplog.at_level(logging.DEBUG, logger="gocd.tests.debug"):
        logger.debug("hidden")
        logger.set_debug()
        logger.debug("shown")

    messages = [record.getMessage() for record in caplog.records]
    assert not any("hidden" in message for message in messages)
    assert any(message.startswith("[test_logger.py:") and message.endswith("shown") for message in messages)


def test_bind_does_not_change_parent() -> None:
    logger = create_logger(module="client")
    logger.bind(method="GET")
    assert logger.fields == {"MODULE": "CLIENT"}


def test_disabling_debug_restores_configured_level() -> None:
    logger = create_logger(level="warn")
    child = logger.child("auth")

    logger.set_debug()
    assert logger.level == "debug"
    logger.set_debug(False)
    assert logger.level == "warn"

    child.set_debug()
    child.set_debug(False)
    assert child.level == "warn"
