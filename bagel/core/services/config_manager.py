"""
config_manager.py
-----------------
JSON configuration loader for game settings.

Features:
- Resolves bare filenames against the bundled config directory
- Recursively merges overrides onto defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

from bagel.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

CONFIG_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    ".",
    CONFIG_ROOT,
]

DEFAULT_GAME_CONFIG = {
    "window": {
        "title": "",
        "width": 800,
        "height": 600,
    },
    "timing": {
        "target_fps": 60,
    },
}


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Filename or path (.json extension optional)
        default_dict: Default fallback config
        strict: If True, raise exception on missing or malformed file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"top-level JSON value must be an object, got {type(data).__name__}")
        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, ValueError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def load_game_config(filename="game.json", strict=False):
    """Load window/timing settings merged over DEFAULT_GAME_CONFIG."""
    return load_config(filename, DEFAULT_GAME_CONFIG, strict=strict)


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Return the first existing candidate path, or the filename unchanged."""
    if os.path.isabs(filename):
        return filename

    candidates = [filename]
    if not filename.endswith(".json"):
        candidates.append(filename + ".json")

    for directory in SEARCH_DIRS:
        for name in candidates:
            path = os.path.join(directory, name)
            if os.path.isfile(path):
                return path

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
