# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration discovery and loading for svdcheck."""

from __future__ import annotations

import tomllib as toml
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from .models import (
    Config,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    config_from_model,
)

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("svdcheck.toml", ".svdcheck.toml", "pyproject.toml")


def _read_table(path: Path) -> dict[str, object] | None:
    try:
        raw_map: dict[str, object] = toml.loads(path.read_text(encoding="utf-8"))
    except (OSError, toml.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc
    tool_obj = raw_map.get("tool")
    if isinstance(tool_obj, dict):
        section = cast("dict[str, object]", tool_obj).get("svdcheck")
        if isinstance(section, dict):
            return cast("dict[str, object]", section)
    if path.name == "pyproject.toml":
        return None
    return raw_map


def load_config(explicit_path: Path | None = None, *, root: Path | None = None) -> Config:
    """Load svdcheck configuration from a TOML file or use defaults.

    Without ``explicit_path`` the first of ``svdcheck.toml``, ``.svdcheck.toml``
    and a ``[tool.svdcheck]`` table in ``pyproject.toml`` found under ``root``
    (default: the working directory) wins.

    Raises:
        ConfigReadError: If a configuration file cannot be read or parsed.
        InvalidConfigFileError: If a configuration file fails validation.
        UnsupportedConfigVersionError: If ``config_version`` is not supported.
    """
    base = root if root is not None else Path.cwd()
    search_order = [explicit_path] if explicit_path else [base / name for name in CONFIG_FILENAMES]
    for candidate in search_order:
        if not candidate.exists():
            if explicit_path:
                raise ConfigReadError(candidate, FileNotFoundError(str(candidate)))
            continue
        table = _read_table(candidate)
        if table is None:
            continue
        try:
            model = ConfigModel.model_validate(table)
        except ValidationError as exc:
            raise InvalidConfigFileError(candidate, exc) from exc
        return config_from_model(model, base_dir=candidate.parent.resolve())
    return Config()


__all__ = ["CONFIG_FILENAMES", "load_config"]
