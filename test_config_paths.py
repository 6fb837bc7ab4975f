import json
import tempfile
from pathlib import Path

import config_paths


def _with_config_dir(cfg_dir, fn):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_dir)
        config_paths.CONFIG_JSON = str(cfg_dir / "config.json")
        return fn()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "tiview"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg = _with_config_dir(cfg_dir, config_paths.load_config)
        assert cfg["TERM"] is None
        assert cfg["TERMINFO_DIRS"] == []
        assert cfg["LOG_LEVEL"] == "WARNING"


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "tiview"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(
            json.dumps(
                {
                    "term": "vt100",
                    "terminfo_dirs": ["/opt/terminfo", 5, ""],
                    "log_level": "debug",
                }
            )
        )
        cfg = _with_config_dir(cfg_dir, config_paths.load_config)
        assert cfg["TERM"] == "vt100"
        assert cfg["TERMINFO_DIRS"] == ["/opt/terminfo"]
        assert cfg["LOG_LEVEL"] == "DEBUG"


def test_load_config_ignores_invalid_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "tiview"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text(
            json.dumps({"term": 3, "terminfo_dirs": "nope", "log_level": "loud"})
        )
        cfg = _with_config_dir(cfg_dir, config_paths.load_config)
        assert cfg["TERM"] is None
        assert cfg["TERMINFO_DIRS"] == []
        assert cfg["LOG_LEVEL"] == "WARNING"


def test_load_config_survives_broken_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "tiview"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        (cfg_dir / "config.json").write_text("{not json")
        cfg = _with_config_dir(cfg_dir, config_paths.load_config)
        assert cfg["TERM"] is None
