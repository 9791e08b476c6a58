# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration loading for svdcheck."""

from __future__ import annotations

from .loader import CONFIG_FILENAMES, load_config
from .models import (
    CONFIG_VERSION,
    Config,
    ConfigModel,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
    config_from_model,
)

__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_VERSION",
    "Config",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "UnsupportedConfigVersionError",
    "config_from_model",
    "load_config",
]
