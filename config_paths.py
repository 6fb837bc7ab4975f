import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tiview")
LOG_PATH = os.path.join(CONFIG_DIR, "tiview.log")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
TERM_DEFAULT = None
TERMINFO_DIRS_DEFAULT = []
LOG_LEVEL_DEFAULT = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def load_config():
    cfg = {
        "TERM": TERM_DEFAULT,
        "TERMINFO_DIRS": list(TERMINFO_DIRS_DEFAULT),
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg

    if not isinstance(data, dict):
        return cfg

    term = data.get("term")
    if isinstance(term, str) and term.strip():
        cfg["TERM"] = term.strip()

    dirs = data.get("terminfo_dirs")
    if isinstance(dirs, list):
        cfg["TERMINFO_DIRS"] = [
            os.path.expanduser(d) for d in dirs if isinstance(d, str) and d
        ]

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
