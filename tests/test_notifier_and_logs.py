import logging

from ddns_dashboard.logs import LogPanelHandler, configure_logging
from ddns_dashboard.models import Client, Equipment
from ddns_dashboard.notifier import Notifier

CLIENT = Client(id="1", name="Acme", ddns_link="acme.ddns.net", equipment=Equipment.UNIFI)


def test_notifier_sends_when_enabled(fake_notification):
    assert Notifier(enabled=True, timeout=3).client_added(CLIENT) is True
    call = fake_notification.calls[0]
    assert call["title"] == "Client Added"
    assert "acme.ddns.net" in call["message"]
    assert call["timeout"] == 3


def test_notifier_is_silent_when_disabled(fake_notification):
    assert Notifier(enabled=False).client_removed(CLIENT) is False
    assert fake_notification.calls == []


def test_notifier_swallows_missing_backend(fake_notification, caplog):
    fake_notification.error = NotImplementedError()
    with caplog.at_level(logging.WARNING, logger="ddns_dashboard.notifier"):
        assert Notifier().client_updated(CLIENT) is False
    assert "not supported" in caplog.text


def test_notifier_swallows_backend_errors(fake_notification):
    fake_notification.error = RuntimeError("dbus down")
    assert Notifier().notify("t", "m") is False


def test_log_panel_handler_forwards_formatted_lines():
    lines = []
    logger = logging.getLogger("ddns_dashboard.test_panel")
    handler = LogPanelHandler(lines.append)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        logger.info("Added client %s", "Acme")
    finally:
        logger.removeHandler(handler)

    assert len(lines) == 1
    assert lines[0].endswith("Added client Acme\n")
    assert "INFO ddns_dashboard.test_panel" in lines[0]


def test_configure_logging_installs_console_handler_once():
    logger = configure_logging(logging.DEBUG)
    count = len(logger.handlers)
    assert configure_logging(logging.DEBUG) is logger
    assert len(logger.handlers) == count
    assert logger.level == logging.DEBUG
