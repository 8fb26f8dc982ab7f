# Igor Org Tooling — (c) 2025 — MIT Licensed
"""config.py
Configuration loader for Igor.

Igor reads a single user config file holding GitHub credentials, display limits
and console colors. The historical location is `~/.igorrc` (JSON); YAML and TOML
files are accepted as well.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from igor.exceptions import ConfigError
from igor.logger import logger


class GithubConfig(BaseModel):
    """Credentials and target organization for the GitHub API."""

    token: str
    username: str
    org: str = ""
    api_url: str = "https://api.github.com"

    model_config = ConfigDict(extra="ignore")


class IgorConfig(BaseModel):
    """User configuration for Igor."""

    github: GithubConfig | None = None
    max_repos_to_show: int = Field(default=10, alias="maxReposToShow")
    colors: dict[str, str] = Field(default_factory=dict)
    log_level: str | None = Field(default=None, alias="logLevel")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def find_igor_config() -> Path | None:
    candidates = [
        Path.cwd() / "igor.yaml",
        Path.cwd() / "igor.toml",
        Path(os.environ.get("IGOR_CONFIG", "igor.yaml")),
        Path.home() / ".igorrc",
        Path.home() / ".config" / "igor" / "igor.yaml",
        Path.home() / ".config" / "igor" / "igor.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def _read_raw_config(path: Path) -> Any:
    text = path.read_text(encoding="UTF-8")
    if path.suffix == ".toml":
        return toml.loads(text)
    # The .igorrc file is JSON, which yaml.safe_load reads as well.
    return yaml.safe_load(text)


def load_config(path: Path | str | None) -> IgorConfig | None:
    """
    Load and validate the Igor config file.

    Args:
        path (Path | str | None): Location of the config file.

    Returns:
        IgorConfig | None: The parsed config, or None if no file exists at `path`.

    Raises:
        ConfigError: If the file cannot be parsed or does not validate.
    """
    if path is None:
        logger.error("No config file found.")
        return None
    config_path = Path(path)
    if not config_path.is_file():
        logger.error("No config file found at path: %s", config_path)
        return None

    try:
        raw = _read_raw_config(config_path)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(
            f"error parsing config at path: {config_path}\n{error}"
        ) from error

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"config at path {config_path} must be a mapping")

    try:
        config = IgorConfig.model_validate(raw)
    except PydanticValidationError as error:
        raise ConfigError(f"invalid config at path: {config_path}\n{error}") from error

    logger.debug("Loaded config from %s", config_path)
    return config
