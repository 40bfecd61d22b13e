# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argstream engine settings.

Settings can come from a TOML or YAML file and from environment variables:

    # argstream.toml
    threshold = 2
    help_text = "usage: op [--version] <command>"
    usage_line = 0

Environment Variables:
    ARGSTREAM_CONFIG: Path to a configuration file.
    ARGSTREAM_THRESHOLD: Overrides `threshold`.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argstream.arg import Flag
from argstream.cli import Cli
from argstream.exceptions import ConfigError
from argstream.help import Help
from argstream.logger import logger


class CliConfig(BaseModel):
    """Settings used to build a `Cli` and its `Help`."""

    threshold: int = Field(default=0, ge=0)
    help_text: str = ""
    help_flag: str = "help"
    help_switch: str | None = "h"
    usage_line: int | None = Field(default=None, ge=0)
    help_enabled: bool = True
    log_mode: Literal["cli", "json"] | None = None

    @field_validator("help_switch")
    @classmethod
    def validate_help_switch(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("help_switch must be a single character.")
        return value

    @field_validator("help_flag")
    @classmethod
    def validate_help_flag(cls, value: str) -> str:
        if not value or value.startswith("-"):
            raise ValueError("help_flag must be a non-empty name without leading dashes.")
        return value

    def to_help(self) -> Help | None:
        """Build the `Help` collaborator, or None when help is disabled."""
        if not self.help_enabled:
            return None
        return Help(
            text=self.help_text,
            flag=Flag(self.help_flag, self.help_switch),
            usage_line=self.usage_line,
        )

    def build_cli(self, args: list[str]) -> Cli:
        """Lex `args` into a new `Cli` using these settings."""
        return Cli.from_args(args, threshold=self.threshold)


def find_config() -> Path | None:
    candidates = [
        Path(os.environ.get("ARGSTREAM_CONFIG", "argstream.toml")),
        Path.cwd() / "argstream.toml",
        Path.cwd() / "argstream.yaml",
        Path.cwd() / ".argstream.toml",
        Path.cwd() / ".argstream.yaml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def _read_raw(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix == ".toml":
                raw = toml.load(config_file)
            elif suffix in (".yaml", ".yml"):
                raw = yaml.safe_load(config_file) or {}
            else:
                raise ConfigError(f"Unsupported config file type: '{path.suffix}'")
    except (OSError, toml.TomlDecodeError, yaml.YAMLError) as error:
        raise ConfigError(f"Could not read config file '{path}': {error}") from error
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping at the top level")
    return raw


def load_config(path: str | Path | None = None) -> CliConfig:
    """
    Load engine settings from a file and the environment.

    Args:
        path (str | Path | None): Config file to read. If None, `find_config()` is
            consulted and defaults are used when nothing is found.

    Returns:
        CliConfig: The validated settings.

    Raises:
        ConfigError: If the file cannot be read or its contents are invalid.
    """
    config_path = Path(path) if path is not None else find_config()
    raw: dict[str, Any] = {}
    if config_path is not None:
        raw = _read_raw(config_path)
        logger.debug("Loaded config from '%s'.", config_path)

    env_threshold = os.environ.get("ARGSTREAM_THRESHOLD")
    if env_threshold is not None:
        raw["threshold"] = env_threshold

    try:
        return CliConfig(**raw)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration: {error}") from error
