# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from pathlib import Path

import pytest

from svdcheck.config import (
    Config,
    ConfigReadError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
    load_config,
)
from svdcheck.tool_cache import SVDCONV_VERSION

pytestmark = pytest.mark.unit


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_config(root=tmp_path)

    assert config == Config()
    assert config.check_name == "SVDConv"
    assert config.svdconv_version == SVDCONV_VERSION


def test_svdcheck_toml_resolves_relative_paths(tmp_path: Path) -> None:
    _ = (tmp_path / "svdcheck.toml").write_text(
        'check_name = "  Device SVD  "\ncache_dir = ".tools"\ntimeout_seconds = 5\n',
        encoding="utf-8",
    )

    config = load_config(root=tmp_path)

    assert config.check_name == "Device SVD"
    assert config.cache_dir == (tmp_path / ".tools").resolve()
    assert config.timeout_seconds == 5.0
    assert config.executable is None


def test_svdcheck_toml_takes_precedence_over_pyproject(tmp_path: Path) -> None:
    _ = (tmp_path / "svdcheck.toml").write_text('check_name = "primary"\n', encoding="utf-8")
    _ = (tmp_path / "pyproject.toml").write_text(
        '[tool.svdcheck]\ncheck_name = "secondary"\n',
        encoding="utf-8",
    )

    assert load_config(root=tmp_path).check_name == "primary"


def test_pyproject_table_is_read(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "chips"\n\n[tool.svdcheck]\nexecutable = "/opt/SVDConv"\n',
        encoding="utf-8",
    )

    assert load_config(root=tmp_path).executable == Path("/opt/SVDConv")


def test_pyproject_without_table_uses_defaults(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text('[project]\nname = "chips"\n', encoding="utf-8")

    assert load_config(root=tmp_path) == Config()


def test_unsupported_config_version(tmp_path: Path) -> None:
    _ = (tmp_path / "svdcheck.toml").write_text("config_version = 1\n", encoding="utf-8")

    with pytest.raises(UnsupportedConfigVersionError):
        _ = load_config(root=tmp_path)


@pytest.mark.parametrize(
    "content",
    [
        'colour = "blue"\n',
        "timeout_seconds = 0\n",
        'check_name = "   "\n',
    ],
)
def test_invalid_config_values(tmp_path: Path, content: str) -> None:
    _ = (tmp_path / "svdcheck.toml").write_text(content, encoding="utf-8")

    with pytest.raises(InvalidConfigFileError):
        _ = load_config(root=tmp_path)


def test_malformed_toml(tmp_path: Path) -> None:
    _ = (tmp_path / ".svdcheck.toml").write_text("check_name = \n", encoding="utf-8")

    with pytest.raises(ConfigReadError):
        _ = load_config(root=tmp_path)


def test_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError):
        _ = load_config(tmp_path / "absent.toml", root=tmp_path)
