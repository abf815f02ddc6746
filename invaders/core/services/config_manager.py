"""
config_manager.py
-----------------
JSON configuration loader for game settings.

Features:
- Looks up bare filenames in the package config directory, then the
  working directory
- Recursively merges loaded values onto defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json

from invaders.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_ROOT = os.path.join(PACKAGE_ROOT, "config")

SEARCH_DIRS = [
    DATA_ROOT,
    ".",
]

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Filename or path to a .json file
        default_dict: Default fallback config
        strict: If True, raise on missing or malformed file

    Returns:
        dict: Defaults with the file's values merged on top
    """
    if default_dict is None:
        default_dict = {}

    if os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        data = _load_json(path)
    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or invalid: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    return _merge_dicts(default_dict, data)


def build_file_index():
    """Scan config directories and cache JSON file paths. First match wins."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for file in sorted(os.listdir(directory)):
            if file.endswith(".json") and file not in _FILE_INDEX:
                _FILE_INDEX[file] = os.path.join(directory, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def rebuild_file_index():
    """Clear and rebuild index."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Look a bare filename up in the index, adding .json if missing."""
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    key = filename + ".json"
    if key in _FILE_INDEX:
        return _FILE_INDEX[key]

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise json.JSONDecodeError("Top-level value must be an object", "", 0)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts into a new dict. Ignores '_notes' keys."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
