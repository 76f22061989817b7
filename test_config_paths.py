import json
import tempfile
from pathlib import Path

import config_paths


def _load_with(cfg_path: Path):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_path.parent)
        config_paths.CONFIG_JSON = str(cfg_path)
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(Path(tmp) / "tuiwin" / "config.json")
        assert cfg == {"ESCDELAY": 25, "LOG_PATH": None, "LOG_LEVEL": "WARNING"}


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(
            json.dumps({"escdelay": 100, "log_path": "/tmp/tuiwin.log", "log_level": "debug"})
        )
        cfg = _load_with(cfg_path)
        assert cfg["ESCDELAY"] == 100
        assert cfg["LOG_PATH"] == "/tmp/tuiwin.log"
        assert cfg["LOG_LEVEL"] == "DEBUG"


def test_load_config_ignores_bad_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(json.dumps({"escdelay": "fast", "log_path": 3, "log_level": "LOUD"}))
        cfg = _load_with(cfg_path)
        assert cfg == {"ESCDELAY": 25, "LOG_PATH": None, "LOG_LEVEL": "WARNING"}


def test_load_config_survives_malformed_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text("{not json")
        assert _load_with(cfg_path)["ESCDELAY"] == 25
