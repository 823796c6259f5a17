"""Lienzo - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(core, UI, settings) and must not have side effects.
"""

APP_NAME = "Lienzo"
APP_SHORT = "LZ"

APP_VERSION = "0.1.0"

# Defaults (px de documento)
# NOTE: keep these stable; changing impacts new sessions.
DEFAULT_WORKSPACE_WIDTH = 900.0
# Solo si el contenedor todavía no tiene alto al iniciar la sesión.
DEFAULT_WORKSPACE_HEIGHT = 800.0

# Fracción del contenedor que ocupa el workspace tras el ajuste.
DEFAULT_MARGIN_RATIO = 0.9
# Ventana de quietud para coalescer notificaciones de resize.
DEFAULT_RESIZE_DEBOUNCE_MS = 20

DEFAULT_FULL_OPACITY = 1.0
DEFAULT_DIMMED_OPACITY = 0.5
