"""Bootstrap configuration. Zero imports from the data layer.

Stores settings that must be known before the database is opened
(the database path and the log level). Config lives in
~/.budget_tracker/config.json.
"""
import json
import logging
import os
from pathlib import Path

from utils.constants import DB_FILE, DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".budget_tracker"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config(path: Path | None = None) -> dict:
    """Returns {} on missing or corrupt file, never raises."""
    path = path or CONFIG_FILE
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable config file %s", path)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict, path: Path | None = None) -> None:
    """Creates the config folder if needed; atomic write via .tmp + os.replace()."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, path)
    except OSError:
        logger.exception("Could not save config to %s", path)
        tmp.unlink(missing_ok=True)
        raise


def get_db_path(path: Path | None = None) -> str:
    """Return config["db_path"], falling back to the default file in CWD."""
    return load_config(path).get("db_path") or DB_FILE


def set_db_path(db_path: str | None, path: Path | None = None) -> None:
    config = load_config(path)
    if db_path is None:
        config.pop("db_path", None)
    else:
        config["db_path"] = db_path
    save_config(config, path)


def get_log_level(path: Path | None = None) -> str:
    return str(load_config(path).get("log_level") or DEFAULT_LOG_LEVEL).upper()
