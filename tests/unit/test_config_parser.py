"""Unit tests for config_parser.py."""

import json

import pytest

from number_pipeline.arg_parser import get_config_filepath
from number_pipeline.config_parser import LogDemoConfig


def test_packaged_log_demo_config():
    demo_config = LogDemoConfig(get_config_filepath("log_demo.json"))
    assert demo_config.log_file == "app.log"
    assert demo_config.default_sink == "console"


def test_log_demo_config_from_file(tmp_path):
    config_file = tmp_path / "log_demo.json"
    config_file.write_text(json.dumps({"log_file": "other.log", "default_sink": "file"}))

    demo_config = LogDemoConfig(config_file)
    assert demo_config.log_file == "other.log"
    assert demo_config.default_sink == "file"


def test_log_demo_config_missing_key(tmp_path):
    config_file = tmp_path / "log_demo.json"
    config_file.write_text(json.dumps({"log_file": "other.log"}))

    with pytest.raises(KeyError) as excinfo:
        LogDemoConfig(config_file)
    assert "default_sink" in str(excinfo.value)


def test_log_demo_config_invalid_json(tmp_path):
    config_file = tmp_path / "log_demo.json"
    config_file.write_text("{not json")

    with pytest.raises(json.JSONDecodeError):
        LogDemoConfig(config_file)
