import logging

from splitledger.core import logger as logger_module
from splitledger.core.config import Settings


def test_get_logger_namespaces_under_package():
    assert logger_module.get_logger("splitledger.core.balances").name == "splitledger.core.balances"
    assert logger_module.get_logger("scripts").name == "splitledger.scripts"


def test_configure_logging_installs_one_handler():
    root = logger_module.configure_logging("debug")
    handlers = list(root.handlers)

    again = logger_module.configure_logging("warning")

    assert again is root
    assert again.handlers == handlers
    assert again.level == logging.WARNING


def test_settings_defaults(monkeypatch):
    for key in ("SETTLE_EPSILON", "DISPLAY_PLACES", "SORT_BY_MAGNITUDE", "DEFAULT_CURRENCY"):
        monkeypatch.delenv(key, raising=False)

    s = Settings(_env_file=None)
    assert s.SETTLE_EPSILON == 0.0001
    assert s.DISPLAY_PLACES == 2
    assert s.SORT_BY_MAGNITUDE is False
    assert s.DEFAULT_CURRENCY == "INR"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SETTLE_EPSILON", "0.005")
    monkeypatch.setenv("SORT_BY_MAGNITUDE", "true")

    s = Settings(_env_file=None)
    assert s.SETTLE_EPSILON == 0.005
    assert s.SORT_BY_MAGNITUDE is True
