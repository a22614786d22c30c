from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import structlog
from pydantic import ValidationError

from stringset import loads
from stringset.config import AppConfig, LoggingSettings, get_settings
from stringset.logger import configure_logging, get_logger


def _write_yaml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ---- YAML + env ----
def test_defaults_without_file(tmp_path: Path) -> None:
    cfg = AppConfig.from_yaml(tmp_path / "missing.yaml")
    assert cfg.logging.level == "INFO"
    assert cfg.logging.json_output is False


def test_yaml_values(tmp_path: Path) -> None:
    cfg = AppConfig.from_yaml(
        _write_yaml(tmp_path / "stringset.yaml", "logging:\n  level: debug\n  json_output: true\n")
    )
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.level_no == logging.DEBUG
    assert cfg.logging.json_output is True


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRINGSET_LOG_LEVEL", "warning")
    monkeypatch.setenv("STRINGSET_LOG_JSON", "yes")
    cfg = AppConfig.from_yaml(_write_yaml(tmp_path / "stringset.yaml", "logging:\n  level: DEBUG\n"))
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.json_output is True


def test_yaml_root_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="mapping"):
        AppConfig.from_yaml(_write_yaml(tmp_path / "stringset.yaml", "- a\n- b\n"))


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValidationError):
        LoggingSettings(level="loud")


def test_get_settings_is_cached(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write_yaml(tmp_path / "stringset.yaml", "logging:\n  level: ERROR\n")
    assert get_settings() is get_settings()
    assert get_settings().logging.level == "ERROR"


# ---- logging ----
def test_configure_logging_json(capsys: pytest.CaptureFixture[str]) -> None:
    run_id = configure_logging(LoggingSettings(level="DEBUG", json_output=True))
    assert run_id

    with pytest.raises(ValueError):
        loads("[1]")

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    record = json.loads(lines[-1])
    assert record["event"] == "stringset.parse_failed"
    assert record["logger_name"] == "stringset.codec"
    assert record["level"] == "debug"
    assert record["run_id"] == run_id


def test_configure_logging_filters_by_level(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(LoggingSettings(level="INFO", json_output=True))
    log = get_logger("test")
    log.debug("hidden")
    log.info("shown", answer=42)

    out = capsys.readouterr().out
    assert "hidden" not in out
    record = json.loads(out.strip().splitlines()[-1])
    assert record["event"] == "shown"
    assert record["logger_name"] == "test"
    assert record["answer"] == 42


def test_configure_logging_from_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STRINGSET_LOG_LEVEL", "ERROR")
    configure_logging()
    get_logger("test").warning("quiet")
    assert "quiet" not in capsys.readouterr().out
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
