"""
Tests for EditorSettings validation, env loading and lienzo_settings.json.
"""
import json
import os

import pytest

from lienzo.core.settings import (
    ENV_CLIP,
    ENV_DEBOUNCE_MS,
    ENV_MARGIN_RATIO,
    ENV_WORKSPACE_H,
    EditorSettings,
    apply_project_settings,
    find_project_settings_path,
)
from lienzo.utils.errors import LienzoConfigError


class TestValidation:

    def test_defaults_are_valid(self):
        s = EditorSettings()
        assert s.margin_ratio == pytest.approx(0.9)
        assert s.debounce_window_ms == 20
        assert s.workspace_height is None

    @pytest.mark.parametrize("ratio", [0.0, -0.1, 1.01])
    def test_margin_ratio_outside_range_fails_fast(self, ratio):
        with pytest.raises(LienzoConfigError):
            EditorSettings(margin_ratio=ratio)

    def test_margin_ratio_of_one_is_accepted(self):
        assert EditorSettings(margin_ratio=1.0).margin_ratio == 1.0

    def test_negative_debounce_fails_fast(self):
        with pytest.raises(LienzoConfigError):
            EditorSettings(debounce_window_ms=-1)

    def test_non_integer_debounce_fails_fast(self):
        with pytest.raises(LienzoConfigError):
            EditorSettings(debounce_window_ms=12.5)

    def test_zero_debounce_is_accepted(self):
        assert EditorSettings(debounce_window_ms=0).debounce_window_ms == 0

    def test_dimmed_above_full_fails(self):
        with pytest.raises(LienzoConfigError):
            EditorSettings(dimmed_opacity=0.8, full_opacity=0.6)

    @pytest.mark.parametrize("field,value", [("workspace_width", 0), ("workspace_height", -1)])
    def test_workspace_size_must_be_positive(self, field, value):
        with pytest.raises(LienzoConfigError):
            EditorSettings(**{field: value})


class TestFromEnv:

    def test_reads_overrides(self, monkeypatch):
        monkeypatch.setenv(ENV_MARGIN_RATIO, "0.75")
        monkeypatch.setenv(ENV_DEBOUNCE_MS, "0")
        monkeypatch.setenv(ENV_WORKSPACE_H, "600")
        monkeypatch.setenv(ENV_CLIP, "off")
        s = EditorSettings.from_env()
        assert s.margin_ratio == pytest.approx(0.75)
        assert s.debounce_window_ms == 0
        assert s.workspace_height == pytest.approx(600.0)
        assert s.clip_to_workspace is False

    def test_unparsable_value_fails_fast(self, monkeypatch):
        monkeypatch.setenv(ENV_MARGIN_RATIO, "mucho")
        with pytest.raises(LienzoConfigError):
            EditorSettings.from_env()

    def test_out_of_range_value_fails_fast(self, monkeypatch):
        monkeypatch.setenv(ENV_DEBOUNCE_MS, "-20")
        with pytest.raises(LienzoConfigError):
            EditorSettings.from_env()


class TestProjectSettings:

    def _write(self, path, data):
        (path / "lienzo_settings.json").write_text(json.dumps(data), encoding="utf-8")

    def test_found_from_subdirectory(self, tmp_path):
        self._write(tmp_path, {})
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)
        assert find_project_settings_path(sub) == (tmp_path / "lienzo_settings.json").resolve()

    def test_exports_env_vars(self, tmp_path):
        self._write(tmp_path, {
            "editor": {
                "viewport": {"margin_ratio": 0.8, "resize_debounce_ms": 40},
                "workspace": {"clip": False},
            }
        })
        applied = apply_project_settings(tmp_path)
        assert applied["editor.viewport.margin_ratio"] == 0.8
        assert os.environ[ENV_MARGIN_RATIO] == "0.8"
        assert os.environ[ENV_DEBOUNCE_MS] == "40"
        assert os.environ[ENV_CLIP] == "0"
        s = EditorSettings.from_env()
        assert s.margin_ratio == pytest.approx(0.8)
        assert s.debounce_window_ms == 40
        assert s.clip_to_workspace is False

    def test_existing_env_wins_by_default(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_MARGIN_RATIO, "0.6")
        self._write(tmp_path, {"editor": {"viewport": {"margin_ratio": 0.8}}})
        apply_project_settings(tmp_path)
        assert os.environ[ENV_MARGIN_RATIO] == "0.6"
        apply_project_settings(tmp_path, prefer_env=False)
        assert os.environ[ENV_MARGIN_RATIO] == "0.8"

    def test_wrong_types_are_ignored(self, tmp_path):
        self._write(tmp_path, {"editor": {"viewport": {"margin_ratio": "0.8", "resize_debounce_ms": True}}})
        assert apply_project_settings(tmp_path) == {}
        assert ENV_MARGIN_RATIO not in os.environ

    def test_invalid_json_is_tolerated(self, tmp_path):
        (tmp_path / "lienzo_settings.json").write_text("{no es json", encoding="utf-8")
        assert apply_project_settings(tmp_path) == {}
