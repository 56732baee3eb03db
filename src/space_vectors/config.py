"""YAML configuration for the calculator front end."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from space_vectors.errors import ConfigError


class CalculatorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    prompt: str = "> "
    exit_commands: list[str] = Field(default_factory=lambda: ["quit", "exit"])
    max_fraction_digits: int = Field(default=3, ge=0, le=15)
    grouping: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("exit_commands")
    @classmethod
    def _non_empty_commands(cls, value: list[str]) -> list[str]:
        commands = [c.strip() for c in value if c.strip()]
        if not commands:
            raise ValueError("exit_commands must name at least one command")
        return commands


def _read_source_text(source: str | Path) -> str:
    """Read configuration from a path or treat input as raw YAML text."""
    if isinstance(source, Path):
        try:
            return source.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}") from e
    return source


def load_config(source: str | Path) -> CalculatorConfig:
    """Load a calculator configuration.

    Args:
        source: YAML string or path to a YAML file. An empty document gives
            the defaults.

    Raises:
        ConfigError: On YAML syntax errors or schema violations.
    """
    yml = YAML(typ="safe")
    yml.allow_duplicate_keys = False
    try:
        data = yml.load(_read_source_text(source))
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML value must be a mapping")

    try:
        return CalculatorConfig(**data)
    except PydanticValidationError as e:
        raise ConfigError(f"Config validation failed:\n{e}") from e
