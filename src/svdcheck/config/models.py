# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration models and validation for svdcheck.

Configuration is read from TOML and validated with the pydantic
:class:`ConfigModel`, then converted into the :class:`Config` dataclass used at
runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from svdcheck.exceptions import SvdcheckValidationError
from svdcheck.github.client import DEFAULT_TIMEOUT_SECONDS
from svdcheck.tool_cache import SVDCONV_VERSION
from svdcheck.upload import DEFAULT_CHECK_NAME

CONFIG_VERSION: Final[int] = 0


class ConfigValidationError(SvdcheckValidationError):
    """Raised when configuration data contains invalid values."""


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid svdcheck configuration in {path}: {error}")


class ConfigModel(BaseModel):
    """Pydantic model for validating svdcheck configuration from TOML.

    Attributes:
        config_version: Schema version, must equal ``CONFIG_VERSION``.
        check_name: Name of the GitHub check run.
        executable: Explicit SVDConv binary; skips the tool cache when set.
        svdconv_version: SVDConv version fetched into the tool cache.
        cache_dir: Tool cache root, relative paths resolve against the config file.
        timeout_seconds: Timeout applied to each GitHub API request.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    config_version: int = CONFIG_VERSION
    check_name: str = DEFAULT_CHECK_NAME
    executable: Path | None = None
    svdconv_version: str = SVDCONV_VERSION
    cache_dir: Path | None = None
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @field_validator("check_name", "svdconv_version", mode="before")
    @classmethod
    def _strip_required(cls, value: object) -> object:
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                msg = "must not be empty"
                raise ValueError(msg)
            return stripped
        return value


@dataclass(slots=True)
class Config:
    check_name: str = DEFAULT_CHECK_NAME
    executable: Path | None = None
    svdconv_version: str = SVDCONV_VERSION
    cache_dir: Path | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def _resolved_path(base_dir: Path, value: Path | None) -> Path | None:
    if value is None:
        return None
    return value if value.is_absolute() else (base_dir / value).resolve()


def config_from_model(model: ConfigModel, *, base_dir: Path) -> Config:
    """Convert a validated model into runtime configuration.

    Raises:
        UnsupportedConfigVersionError: If the model declares another schema version.
    """
    if model.config_version != CONFIG_VERSION:
        raise UnsupportedConfigVersionError(model.config_version, CONFIG_VERSION)
    return Config(
        check_name=model.check_name,
        executable=_resolved_path(base_dir, model.executable),
        svdconv_version=model.svdconv_version,
        cache_dir=_resolved_path(base_dir, model.cache_dir),
        timeout_seconds=model.timeout_seconds,
    )


__all__ = [
    "CONFIG_VERSION",
    "Config",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "UnsupportedConfigVersionError",
    "config_from_model",
]
