# File: lienzo/core/settings.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-03
# Purpose: Configuración del editor (ajuste de viewport, debounce, feedback) + lienzo_settings.json.
# Notes: No depende de Qt. Valores inválidos fallan al construir (LienzoConfigError).
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from lienzo.core.version import (
    DEFAULT_DIMMED_OPACITY,
    DEFAULT_FULL_OPACITY,
    DEFAULT_MARGIN_RATIO,
    DEFAULT_RESIZE_DEBOUNCE_MS,
    DEFAULT_WORKSPACE_WIDTH,
)
from lienzo.utils.errors import LienzoConfigError

log = logging.getLogger(__name__)

ENV_MARGIN_RATIO = "LIENZO_MARGIN_RATIO"
ENV_DEBOUNCE_MS = "LIENZO_RESIZE_DEBOUNCE_MS"
ENV_DIMMED_OPACITY = "LIENZO_DIMMED_OPACITY"
ENV_WORKSPACE_W = "LIENZO_WORKSPACE_W"
ENV_WORKSPACE_H = "LIENZO_WORKSPACE_H"
ENV_CLIP = "LIENZO_CLIP_TO_WORKSPACE"


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Defaults reproducibles por proyecto sin tocar el código.
# Archivo esperado: lienzo_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "lienzo_settings.json"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca lienzo_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    return data if isinstance(data, dict) else {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


# (clave JSON, env var, tipos aceptados)
_PROJECT_KEYS = (
    ("editor.viewport.margin_ratio", ENV_MARGIN_RATIO, (int, float)),
    ("editor.viewport.resize_debounce_ms", ENV_DEBOUNCE_MS, (int,)),
    ("editor.feedback.dimmed_opacity", ENV_DIMMED_OPACITY, (int, float)),
    ("editor.workspace.width", ENV_WORKSPACE_W, (int, float)),
    ("editor.workspace.height", ENV_WORKSPACE_H, (int, float)),
    ("editor.workspace.clip", ENV_CLIP, (bool,)),
)


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga lienzo_settings.json (si existe) y lo exporta como variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa (ganan los overrides manuales).
    - Si `prefer_env=False`, el JSON pisa la env var.

    Solo se filtra por tipo: el rango lo valida EditorSettings al construirse,
    así un valor absurdo en el JSON falla en el arranque y no en silencio.

    Devuelve un dict con los valores *aplicados desde JSON* (útil para logging/debug).
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        if isinstance(value, bool):
            value = "1" if value else "0"
        os.environ[key] = str(value)

    for path, env_key, types in _PROJECT_KEYS:
        value = _deep_get(data, path)
        if value is None:
            continue
        # bool es subclase de int: no aceptarlo como número.
        if isinstance(value, bool) and bool not in types:
            continue
        if not isinstance(value, types):
            _log.warning("Project settings: %s ignorado (tipo %s)", path, type(value).__name__)
            continue
        applied[path] = value
        _set_env(env_key, value)

    if applied:
        _log.info("Project settings aplicados: %s", applied)
    return applied


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.environ.get(name, "")
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return float(str(raw).strip())
    except ValueError:
        raise LienzoConfigError(f"{name}: se esperaba un número, llegó {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if raw is None or str(raw).strip() == "":
        return int(default)
    try:
        return int(str(raw).strip())
    except ValueError:
        raise LienzoConfigError(f"{name}: se esperaba un entero, llegó {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or str(raw).strip() == "":
        return bool(default)
    s = str(raw).strip().lower()
    if s in ("1", "true", "yes", "y", "on"):
        return True
    if s in ("0", "false", "no", "n", "off"):
        return False
    raise LienzoConfigError(f"{name}: se esperaba un booleano, llegó {raw!r}")


@dataclass(frozen=True)
class EditorSettings:
    """Configuración del núcleo del editor.

    - margin_ratio: fracción (0, 1] del contenedor que ocupa el workspace.
      Más chico = más borde visible.
    - debounce_window_ms: quietud (ms) antes de recalcular tras un resize.
      0 desactiva el coalescing (recalcula en cada notificación).
    - dimmed_opacity / full_opacity: feedback visual de objetos inválidos / válidos.
    - workspace_width / workspace_height: tamaño intrínseco del workspace.
      Sin alto, se toma el alto del contenedor al iniciar la sesión.
    - clip_to_workspace: tapa lo que queda fuera del workspace al dibujar.
    """

    margin_ratio: float = DEFAULT_MARGIN_RATIO
    debounce_window_ms: int = DEFAULT_RESIZE_DEBOUNCE_MS
    dimmed_opacity: float = DEFAULT_DIMMED_OPACITY
    full_opacity: float = DEFAULT_FULL_OPACITY
    workspace_width: float = DEFAULT_WORKSPACE_WIDTH
    workspace_height: Optional[float] = None
    clip_to_workspace: bool = True

    def __post_init__(self) -> None:
        if not 0.0 < float(self.margin_ratio) <= 1.0:
            raise LienzoConfigError(f"margin_ratio fuera de (0, 1]: {self.margin_ratio!r}")
        if isinstance(self.debounce_window_ms, bool) or not isinstance(self.debounce_window_ms, int):
            raise LienzoConfigError(f"debounce_window_ms debe ser entero: {self.debounce_window_ms!r}")
        if self.debounce_window_ms < 0:
            raise LienzoConfigError(f"debounce_window_ms negativo: {self.debounce_window_ms!r}")
        if not 0.0 <= float(self.dimmed_opacity) <= 1.0:
            raise LienzoConfigError(f"dimmed_opacity fuera de [0, 1]: {self.dimmed_opacity!r}")
        if not 0.0 < float(self.full_opacity) <= 1.0:
            raise LienzoConfigError(f"full_opacity fuera de (0, 1]: {self.full_opacity!r}")
        if float(self.dimmed_opacity) > float(self.full_opacity):
            raise LienzoConfigError("dimmed_opacity no puede superar a full_opacity")
        if not float(self.workspace_width) > 0.0:
            raise LienzoConfigError(f"workspace_width debe ser positivo: {self.workspace_width!r}")
        if self.workspace_height is not None and not float(self.workspace_height) > 0.0:
            raise LienzoConfigError(f"workspace_height debe ser positivo: {self.workspace_height!r}")

    @classmethod
    def from_env(cls) -> "EditorSettings":
        """Construye la configuración desde env vars (inyectadas por lienzo_settings.json)."""
        return cls(
            margin_ratio=float(_env_float(ENV_MARGIN_RATIO, DEFAULT_MARGIN_RATIO)),
            debounce_window_ms=_env_int(ENV_DEBOUNCE_MS, DEFAULT_RESIZE_DEBOUNCE_MS),
            dimmed_opacity=float(_env_float(ENV_DIMMED_OPACITY, DEFAULT_DIMMED_OPACITY)),
            workspace_width=float(_env_float(ENV_WORKSPACE_W, DEFAULT_WORKSPACE_WIDTH)),
            workspace_height=_env_float(ENV_WORKSPACE_H, None),
            clip_to_workspace=_env_bool(ENV_CLIP, True),
        )
