import logging

import pytest

from config import ConfigError, load_config


def test_load_config_defaults(monkeypatch):
  monkeypatch.delenv("MAGNET_LOG_LEVEL", raising=False)
  monkeypatch.delenv("MAGNET_OUTPUT_FORMAT", raising=False)

  config = load_config()

  assert config.logging.level == logging.WARNING
  assert config.output_format == "text"


def test_load_config_reads_environment(monkeypatch):
  monkeypatch.setenv("MAGNET_LOG_LEVEL", "debug")
  monkeypatch.setenv("MAGNET_OUTPUT_FORMAT", "JSON")

  config = load_config()

  assert config.logging.level == logging.DEBUG
  assert config.output_format == "json"


def test_load_config_accepts_explicit_mapping():
  config = load_config({"MAGNET_LOG_LEVEL": "INFO"})

  assert config.logging.level == logging.INFO
  assert config.output_format == "text"


def test_load_config_rejects_bad_log_level(monkeypatch):
  monkeypatch.setenv("MAGNET_LOG_LEVEL", "chatty")

  with pytest.raises(ConfigError) as excinfo:
    load_config()

  assert "chatty" in str(excinfo.value)


def test_load_config_rejects_bad_output_format(monkeypatch):
  monkeypatch.setenv("MAGNET_LOG_LEVEL", "WARNING")
  monkeypatch.setenv("MAGNET_OUTPUT_FORMAT", "yaml")

  with pytest.raises(ConfigError) as excinfo:
    load_config()

  assert "text, json" in str(excinfo.value)
