"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class OutputConfig:
    hints: bool = True
    trailing_newline: bool = False


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class Config:
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Config:
        """Load config from YAML file, falling back to defaults."""
        if path is None:
            # Search current dir, then home dir
            candidates = [
                Path.cwd() / "mdreader.yaml",
                Path.home() / ".config" / "mdreader" / "config.yaml",
            ]
            for candidate in candidates:
                if candidate.exists():
                    path = candidate
                    break

        if path is not None and path.exists():
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Config file must contain a mapping: {path}")
            return cls._from_dict(data)

        return cls()

    @classmethod
    def _from_dict(cls, data: dict) -> Config:
        cfg = cls()

        if "output" in data:
            out = _section(data, "output")
            cfg.output = OutputConfig(
                hints=_flag(out, "hints", cfg.output.hints),
                trailing_newline=_flag(
                    out, "trailing_newline", cfg.output.trailing_newline
                ),
            )

        if "logging" in data:
            lg = _section(data, "logging")
            level = str(lg.get("level", cfg.logging.level)).upper()
            if level not in LOG_LEVELS:
                raise ValueError(
                    f"Unknown log level: '{level}'. "
                    f"Valid levels: {', '.join(LOG_LEVELS)}"
                )
            cfg.logging = LoggingConfig(level=level)

        return cfg


def _section(data: dict, name: str) -> dict:
    section = data[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section must be a mapping")
    return section


def _flag(section: dict, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value
