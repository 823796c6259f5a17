# File: lienzo/utils/log.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-02
# Purpose: Logging del editor: consola + logs/lienzo.log, nivel por entorno y mensajes de Qt.
# Notes: LIENZO_LOG_LEVEL manda sobre el nivel pasado por código. Sin handlers duplicados.
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

ENV_LOG_LEVEL = "LIENZO_LOG_LEVEL"
LOG_FILE_NAME = "lienzo.log"
QT_LOGGER_NAME = "lienzo.qt"

_LOGGER_CONFIGURED = False

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def resolve_log_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Nombre ("debug", "WARNING") o número; cualquier otra cosa -> `default`."""
    if value is None or not str(value).strip():
        return default
    s = str(value).strip()
    if s.isdigit():
        return int(s)
    level = logging.getLevelName(s.upper())
    return level if isinstance(level, int) else default


def setup_logging(log_dir: str | os.PathLike = "logs", level: int = logging.INFO) -> None:
    """Consola + archivo `logs/lienzo.log` sobre el logger raíz.

    Si no se puede abrir el archivo queda solo la consola (con un warning).
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    level = resolve_log_level(os.environ.get(ENV_LOG_LEVEL), level)
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    try:
        d = Path(log_dir)
        d.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(d / LOG_FILE_NAME, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)
    except OSError as e:
        logging.getLogger(__name__).warning("No se pudo abrir %s en %s: %s", LOG_FILE_NAME, log_dir, e)

    install_qt_message_handler()
    _LOGGER_CONFIGURED = True


def _qt_message_handler(mode, context, message) -> None:
    logging.getLogger(QT_LOGGER_NAME).log(_QT_LEVELS.get(mode, logging.WARNING), "%s", message)


def install_qt_message_handler():
    """Redirige qDebug/qWarning/... de Qt al logger `lienzo.qt`. Devuelve el handler anterior."""
    return qInstallMessageHandler(_qt_message_handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
