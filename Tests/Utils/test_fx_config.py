"""
Tests for configuration loading and the settings consumed by the engine.
"""

import pytest
from loguru import logger
from rich.color import Color

from termfx import config as fx_config
from termfx.config import (
    DEFAULT_CONFIG,
    deep_merge_dicts,
    get_default_color_space,
    get_default_interpolation,
    get_fx_setting,
    load_settings,
)
from termfx.Effects import fx
from termfx.Effects.color_space import ColorSpace
from termfx.Effects.duration import Duration
from termfx.Effects.effect_manager import EffectManager
from termfx.Effects.fx_errors import UnknownNameError
from termfx.Effects.interpolation import Interpolation
from termfx.logging_config import LOG_LEVEL_ENV_VAR, configure_logging, get_log_level
from termfx.Utils.cell_buffer import CellBuffer


RED = Color.from_rgb(255, 0, 0)


class TestDeepMerge:

    def test_nested_values_merge(self):
        base = {"a": {"x": 1, "y": 2}, "b": 3}
        merged = deep_merge_dicts(base, {"a": {"y": 20}, "c": 4})
        assert merged == {"a": {"x": 1, "y": 20}, "b": 3, "c": 4}

    def test_base_is_not_mutated(self):
        base = {"a": {"x": 1}}
        deep_merge_dicts(base, {"a": {"x": 2}})
        assert base == {"a": {"x": 1}}


class TestLoadSettings:
    """Defaults, packaged file and user overrides."""

    def test_defaults(self):
        settings = load_settings()
        assert settings["effects"]["default_color_space"] == "hsl"
        assert settings["manager"]["max_delta_ms"] == 0
        assert get_fx_setting("canvas", "fps", 30, int) == 30
        assert get_default_color_space() is ColorSpace.HSL
        assert get_default_interpolation() is Interpolation.LINEAR

    def test_settings_are_cached(self):
        assert load_settings() is load_settings()
        assert load_settings(force_reload=True) is not None

    def test_user_config_overrides_and_keeps_other_defaults(self, user_config):
        user_config('[effects]\ndefault_color_space = "rgb"\ndefault_interpolation = "QuadOut"\n')
        assert get_default_color_space() is ColorSpace.RGB
        assert get_default_interpolation() is Interpolation.QUAD_OUT
        assert get_fx_setting("canvas", "fps", 0, int) == DEFAULT_CONFIG["canvas"]["fps"]

    def test_malformed_file_falls_back_to_defaults(self, user_config):
        messages = []
        handler_id = logger.add(lambda m: messages.append(m.record), level="ERROR")
        try:
            settings = user_config("[effects\nbroken = ")
        finally:
            logger.remove(handler_id)
        assert settings["effects"]["default_color_space"] == "hsl"
        assert any("Error decoding" in record["message"] for record in messages)

    def test_bad_typed_value_uses_default(self, user_config):
        user_config('[manager]\nmax_delta_ms = "soon"\n')
        assert get_fx_setting("manager", "max_delta_ms", 0, int) == 0

    def test_bool_conversion(self, user_config):
        user_config('[logging]\nconsole = "yes"\n')
        assert get_fx_setting("logging", "console", False, bool) is True

    def test_missing_section(self):
        assert get_fx_setting("nope", "key", "fallback") == "fallback"

    def test_env_var_selects_file(self, isolated_temp_dir, monkeypatch):
        path = isolated_temp_dir / "custom.toml"
        path.write_text('[canvas]\nfps = 12\n')
        monkeypatch.setenv(fx_config.CONFIG_PATH_ENV_VAR, str(path))
        load_settings(force_reload=True)
        assert get_fx_setting("canvas", "fps", 30, int) == 12


class TestConfigDrivesEngine:
    """Settings picked up by effects and the manager."""

    def test_effect_default_color_space(self, user_config):
        user_config('[effects]\ndefault_color_space = "hsv"\n')
        assert fx.paint_fg(RED, 10).color_space is ColorSpace.HSV

    def test_unknown_color_space_in_config(self, user_config):
        user_config('[effects]\ndefault_color_space = "cmyk"\n')
        with pytest.raises(UnknownNameError):
            fx.paint_fg(RED, 10)

    def test_manager_max_delta(self, user_config):
        user_config('[manager]\nmax_delta_ms = 40\n')
        manager = EffectManager()
        effect = fx.paint_fg(RED, 100)
        manager.add_effect(effect)
        manager.process_effects(500, CellBuffer(2, 1))
        assert effect.timer.elapsed == Duration(40)


class TestConfigureLogging:
    """Tests for loguru sink setup."""

    def test_file_sink_from_config(self, user_config, isolated_temp_dir, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        log_path = isolated_temp_dir / "termfx.log"
        user_config(f'[logging]\nlevel = "DEBUG"\nfile = "{log_path.as_posix()}"\n')
        try:
            configure_logging()
            logger.debug("frame delta clamped")
        finally:
            logger.remove()
        text = log_path.read_text()
        assert "termfx logging configured: level=DEBUG" in text
        assert "frame delta clamped" in text

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")
        assert get_log_level() == "warning"
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR)
        assert get_log_level() == "INFO"
