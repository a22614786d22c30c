from __future__ import annotations

import logging
import os
from functools import cache
from pathlib import Path
from typing import ClassVar

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseModel):
    level: str = Field(default="INFO")
    json_output: bool = Field(default=False)  # JSONRenderer instead of ConsoleRenderer

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def level_no(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


class AppConfig(BaseSettings):
    """
    Package settings.

    Source of truth:
      1) YAML file (structured config)
      2) STRINGSET_* env overrides, merged explicitly in from_yaml().
    """

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="",  # no automatic prefixing
        extra="ignore",
        case_sensitive=False,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # ---------- YAML loader with explicit env merge ----------
    @classmethod
    def from_yaml(cls, path: Path | None = None) -> AppConfig:
        """
        Load config from YAML, then overlay env.
        Search order if path is not provided:
          ./stringset.yaml
        """
        candidates: list[Path] = [path] if path is not None else [Path("stringset.yaml")]

        raw: dict[str, object] = {}
        for p in candidates:
            if p.exists():
                loaded = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
                if not isinstance(loaded, dict):
                    raise ValueError(f"YAML at {p} must define a mapping at the root")
                raw = loaded
                break

        section = raw.get("logging") or {}
        if not isinstance(section, dict):
            raise ValueError("'logging' must be a mapping")
        log_cfg: dict[str, object] = dict(section)

        level = os.getenv("STRINGSET_LOG_LEVEL")
        if level:
            log_cfg["level"] = level

        json_raw = os.getenv("STRINGSET_LOG_JSON")
        if json_raw:
            log_cfg["json_output"] = json_raw.strip().lower() in {"1", "true", "yes", "on"}

        return cls.model_validate({**raw, "logging": log_cfg})


@cache
def get_settings() -> AppConfig:
    return AppConfig.from_yaml()


__all__ = ["AppConfig", "LoggingSettings", "get_settings"]
