import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tuiwin")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
ESCDELAY_DEFAULT = 25
LOG_PATH_DEFAULT = None
LOG_LEVEL_DEFAULT = "WARNING"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def load_config():
    cfg = {
        "ESCDELAY": ESCDELAY_DEFAULT,
        "LOG_PATH": LOG_PATH_DEFAULT,
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

    escdelay = data.get("escdelay")
    if isinstance(escdelay, int) and not isinstance(escdelay, bool) and escdelay >= 0:
        cfg["ESCDELAY"] = escdelay

    log_path = data.get("log_path")
    if isinstance(log_path, str) and log_path.strip():
        cfg["LOG_PATH"] = os.path.expanduser(log_path.strip())

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
