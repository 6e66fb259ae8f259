"""Configuration management for cmdhelp.

Three-layer config resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .cmdhelp.json in the current directory or a parent
  3. Global config — ~/.cmdhelp/config.json (or the --config PATH file)

Recognised keys: ``summary`` and ``compact`` (booleans) and ``width``
(positive integer column count).
"""

import json
import os
from pathlib import Path

from cmdhelp.lib.log_lib import get_output
from cmdhelp.output import print_warn


CONFIG_KEYS = ("summary", "compact", "width")
PROJECT_CONFIG_NAME = ".cmdhelp.json"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.cmdhelp/)."""
    return Path.home() / ".cmdhelp"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .cmdhelp.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning an empty dict on error.

    A missing file is normal and only logged; a malformed one is warned about.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        get_output().emit(2, "  [config] no config at {path}",
                          channel='config', path=path)
        return {}
    except json.JSONDecodeError as e:
        print_warn(f"ignoring malformed config {path}: {e}")
        return {}
    if not isinstance(data, dict):
        print_warn(f"ignoring config {path}: expected a JSON object")
        return {}
    return data


def load_global_config(path=None):
    """Load the global config file, or ``path`` when given."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .cmdhelp.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


def _coerce(key, value):
    """Normalise a config value; returns None when it is unusable.

    ``width`` must be a positive integer (or a numeric string); the other
    keys must be JSON booleans.
    """
    if key == "width":
        if isinstance(value, bool):
            return None
        try:
            value = int(value)
        except (TypeError, ValueError):
            return None
        return value if value > 0 else None
    return value if isinstance(value, bool) else None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args, keys=CONFIG_KEYS, start_dir=None):
    """Resolve render settings using three-layer precedence.

    For each key checks, in order: the argparse namespace (None means
    unset), the project .cmdhelp.json, the global config. Unset booleans
    resolve to False and an unset width to None (auto-detect).

    Returns a dict with resolved values.
    """
    out = get_output()
    project_cfg, project_path = load_project_config(start_dir)
    global_cfg = load_global_config(getattr(args, "config", None))

    resolved = {}
    for key in keys:
        for source, layer in (("cli", vars(args)),
                              (str(project_path), project_cfg),
                              ("global", global_cfg)):
            value = layer.get(key)
            if value is None:
                continue
            coerced = _coerce(key, value)
            if coerced is None:
                print_warn(f"ignoring invalid {key}={value!r} (from {source})")
                continue
            value = coerced
            out.emit(2, "  [config] {key}={val} (from {src})",
                     channel='config', key=key, val=value, src=source)
            resolved[key] = value
            break
        else:
            resolved[key] = None if key == "width" else False
    return resolved
