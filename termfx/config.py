# termfx/config.py
# Description: Configuration management for the termfx effects engine.
#
# Imports
import copy
import os
import sys
import threading
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Paths to the configuration files ---
APP_COMPONENT_ROOT = Path(__file__).resolve().parent
PACKAGED_CONFIG_PATH = APP_COMPONENT_ROOT / "Config_Files" / "config.toml"
DEFAULT_USER_CONFIG_PATH = Path.home() / ".config" / "termfx" / "config.toml"
CONFIG_PATH_ENV_VAR = "TERMFX_CONFIG"

# Defaults used when no file provides a value
DEFAULT_CONFIG: Dict[str, Any] = {
    "effects": {
        "default_color_space": "hsl",
        "default_interpolation": "linear",
    },
    "manager": {
        "max_delta_ms": 0,
    },
    "canvas": {
        "fps": 30,
    },
    "logging": {
        "level": "INFO",
        "console": False,
        "file": "",
    },
}


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _get_typed_value(data_dict: Dict, key: str, default: Any, target_type: type = str) -> Any:
    """Helper to get value from dict and cast to type, with logging for type errors."""
    value = data_dict.get(key, default)
    if value is default and default is not None:  # if value is the default, it's already typed
        return value
    if value is None:  # If key is missing and default is None
        return None

    try:
        if target_type == bool:
            if isinstance(value, bool):
                return value
            return str(value).lower() in ['true', '1', 't', 'y', 'yes']
        return target_type(value)
    except (ValueError, TypeError) as e:
        logger.warning(f"Config key '{key}' has value '{value}' which could not be converted to {target_type}. Using default: '{default}'. Error: {e}")
        return default


def _load_toml_file(path: Path, label: str) -> Dict[str, Any]:
    """Read one TOML file, logging (not raising) when it is missing or malformed."""
    if not path.exists():
        logger.debug(f"{label} TOML config file not found at {path}. Skipping.")
        return {}
    try:
        with open(path, "rb") as f:  # Use "rb" for tomllib.load
            data = tomllib.load(f)
        logger.debug(f"Loaded {label} TOML config from: {path}")
        return data
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error decoding {label} TOML config file {path}: {e}. Ignoring it.")
    except OSError as e:
        logger.error(f"Could not read {label} TOML config file {path}: {e}. Ignoring it.")
    return {}


def get_user_config_path() -> Path:
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_USER_CONFIG_PATH


# Global cache for load_settings to avoid redundant file I/O
_SETTINGS_CACHE: Optional[Dict[str, Any]] = None
_SETTINGS_CACHE_LOCK = threading.Lock()


def load_settings(force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads all settings into a dictionary.

    Order of precedence (later wins): in-code DEFAULT_CONFIG, the packaged
    Config_Files/config.toml, then the user's config file
    (~/.config/termfx/config.toml, or the path in $TERMFX_CONFIG).

    Args:
        force_reload: If True, bypasses the cache and reloads from disk.

    Returns:
        Dictionary containing all configuration settings.
    """
    global _SETTINGS_CACHE

    with _SETTINGS_CACHE_LOCK:
        if _SETTINGS_CACHE is not None and not force_reload:
            return _SETTINGS_CACHE

        settings = copy.deepcopy(DEFAULT_CONFIG)
        settings = deep_merge_dicts(settings, _load_toml_file(PACKAGED_CONFIG_PATH, "packaged"))
        settings = deep_merge_dicts(settings, _load_toml_file(get_user_config_path(), "user"))
        _SETTINGS_CACHE = settings
        logger.debug(f"termfx settings loaded: sections={sorted(settings.keys())}")
        return settings


def get_fx_setting(section: str, key: str, default: Any = None, target_type: type = str) -> Any:
    """Typed accessor for a single setting, e.g. get_fx_setting("canvas", "fps", 30, int)."""
    section_data = load_settings().get(section, {})
    if not isinstance(section_data, dict):
        logger.warning(f"Config section '{section}' is not a table; using default for '{key}'")
        return default
    return _get_typed_value(section_data, key, default, target_type)


def get_default_color_space():
    """The configured default ColorSpace (HSL unless overridden)."""
    from .Effects.color_space import ColorSpace
    return ColorSpace.from_name(get_fx_setting("effects", "default_color_space", "hsl"))


def get_default_interpolation():
    """The configured default Interpolation (Linear unless overridden)."""
    from .Effects.interpolation import Interpolation
    return Interpolation.from_name(get_fx_setting("effects", "default_interpolation", "linear"))

#
# End of config.py
#######################################################################################################################
