# File: lienzo/app.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-09
# Purpose: Entry-point de la aplicación.
# Notes: Configuración inválida = salida con código 2 (falla al arrancar, no en runtime).
from __future__ import annotations

import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from lienzo.core.settings import EditorSettings, apply_project_settings
from lienzo.core.version import APP_VERSION
from lienzo.ui.main_window import MainWindow
from lienzo.utils.errors import LienzoConfigError
from lienzo.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def main() -> int:
    setup_logging()
    # Project-level defaults (repo-local): lienzo_settings.json
    apply_project_settings(logger=log, prefer_env=True)
    try:
        settings = EditorSettings.from_env()
    except LienzoConfigError as e:
        log.error("Configuración inválida: %s", e)
        return 2

    app = QApplication(sys.argv)
    w = MainWindow(settings)
    w.show()
    # Iniciar cuando el layout ya asentó (el contenedor tiene tamaño real).
    QTimer.singleShot(0, w.start_editor)
    log.info("Lienzo iniciado (v%s)", APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
