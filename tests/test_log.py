"""
Tests for the logging helpers.
"""
import logging

import pytest
from PySide6.QtCore import QtMsgType, qInstallMessageHandler

import lienzo.utils.log as lz_log


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, logging.INFO),
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("10", 10),
        ("verbose", logging.INFO),
    ],
)
def test_resolve_log_level(value, expected):
    assert lz_log.resolve_log_level(value) == expected


def test_qt_messages_go_to_qt_logger(caplog):
    with caplog.at_level(logging.DEBUG, logger=lz_log.QT_LOGGER_NAME):
        lz_log._qt_message_handler(QtMsgType.QtWarningMsg, None, "fuente no encontrada")
        lz_log._qt_message_handler(QtMsgType.QtDebugMsg, None, "detalle")
    levels = [(r.name, r.levelno, r.getMessage()) for r in caplog.records]
    assert (lz_log.QT_LOGGER_NAME, logging.WARNING, "fuente no encontrada") in levels
    assert (lz_log.QT_LOGGER_NAME, logging.DEBUG, "detalle") in levels


@pytest.fixture
def fresh_root(monkeypatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(lz_log, "_LOGGER_CONFIGURED", False)
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    qInstallMessageHandler(None)


def test_setup_logging_uses_env_level_and_file(fresh_root, tmp_path, monkeypatch):
    monkeypatch.setenv(lz_log.ENV_LOG_LEVEL, "debug")
    before = len(fresh_root.handlers)
    lz_log.setup_logging(tmp_path / "logs")
    assert fresh_root.level == logging.DEBUG
    assert (tmp_path / "logs" / lz_log.LOG_FILE_NAME).exists()
    assert len(fresh_root.handlers) == before + 2

    lz_log.setup_logging(tmp_path / "logs")
    assert len(fresh_root.handlers) == before + 2
