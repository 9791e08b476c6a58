# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import json
from pathlib import Path

import pytest

from svdcheck import __version__
from svdcheck._internal.utils import CommandOutput
from svdcheck.cli import main
from svdcheck.tool_cache import ToolCache
from tests.fixtures.checks import RecordingCheckRunClient, diagnostic_block

pytestmark = pytest.mark.cli

SVDCONV_OUTPUT = (
    "SVDConv.exe Version 3.3.35\n"
    + diagnostic_block("ERROR", "M207", "Register overlaps.", line=40)
    + diagnostic_block("WARNING", "M305", "Field too wide.", line=12)
    + diagnostic_block("INFO", "M100", "Device summary.")
)


class FakeChecksClient(RecordingCheckRunClient):
    instances: list[FakeChecksClient] = []  # noqa: RUF012

    def __init__(self, token: str, *, api_url: str, timeout_seconds: float) -> None:
        super().__init__(check_run_id=77)
        self.token = token
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        FakeChecksClient.instances.append(self)

    def __enter__(self) -> FakeChecksClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


@pytest.fixture
def github_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/chips")
    monkeypatch.setenv("GITHUB_SHA", "deadbeef")
    monkeypatch.setenv("GITHUB_API_URL", "https://api.github.test")
    monkeypatch.setenv("INPUT_TOKEN", "s3cret")
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)
    monkeypatch.delenv("INPUT_PATH", raising=False)
    FakeChecksClient.instances = []
    monkeypatch.setattr("svdcheck.cli.commands.check.GitHubChecksClient", FakeChecksClient)
    return tmp_path


def _patch_svdconv(monkeypatch: pytest.MonkeyPatch, *, stdout: str, stderr: str = "") -> None:
    def fake_run_command(args: list[str], cwd: Path | None = None) -> CommandOutput:
        return CommandOutput(args=list(args), stdout=stdout, stderr=stderr, exit_code=1, duration_ms=2.0)

    monkeypatch.setattr("svdcheck.runner.run_command", fake_run_command)


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0

    assert capsys.readouterr().out.strip() == f"svdcheck {__version__}"


def test_parse_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "svdconv.log"
    _ = output.write_text(SVDCONV_OUTPUT, encoding="utf-8")

    assert main(["parse", str(output), "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["stats"] == {"notes": 1, "warnings": 1, "errors": 1}
    assert [row["line"] for row in payload["messages"]] == [0, 12, 40]
    assert payload["messages"][2] == {
        "line": 40,
        "level": "error",
        "code": "M207",
        "message": "Register overlaps.",
    }


def test_parse_table_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "svdconv.log"
    _ = output.write_text(SVDCONV_OUTPUT, encoding="utf-8")

    assert main(["parse", str(output)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split(" | ")[0].strip() == "line"
    assert lines[-1] == "1 error, 1 warning, 1 note"


def test_parse_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", str(tmp_path / "absent.log")]) == 1

    assert "Unable to read" in capsys.readouterr().err


def test_parse_malformed_output_reports_error_code(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    output = tmp_path / "svdconv.log"
    _ = output.write_text("*** PANIC M1: nope\n", encoding="utf-8")

    assert main(["parse", str(output)]) == 1

    assert "SC201" in capsys.readouterr().err


def test_check_uploads_annotations(
    github_env: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _patch_svdconv(monkeypatch, stdout=SVDCONV_OUTPUT)

    exit_code = main(["check", "ARMCM3.svd", "--executable", "/opt/SVDConv"])

    assert exit_code == 0
    (client,) = FakeChecksClient.instances
    assert client.token == "s3cret"
    assert client.api_url == "https://api.github.test"
    assert client.created[0]["head_sha"] == "deadbeef"
    assert len(client.annotation_batches) == 1
    assert {annotation["path"] for annotation in client.annotation_batches[0]} == {"ARMCM3.svd"}
    assert client.updates[-1]["conclusion"] == "neutral"
    assert "Uploaded 3 annotations in 1 batches to check run 77" in capsys.readouterr().out


def test_check_reads_path_and_name_from_environment(
    github_env: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("INPUT_PATH", "devices/ARMCM3.svd")
    _ = (github_env / "svdcheck.toml").write_text('check_name = "Device SVD"\n', encoding="utf-8")
    _patch_svdconv(monkeypatch, stdout=SVDCONV_OUTPUT)

    assert main(["check", "--executable", "/opt/SVDConv"]) == 0

    (client,) = FakeChecksClient.instances
    assert client.created[0]["name"] == "Device SVD"
    assert client.annotation_batches[0][0]["path"] == "devices/ARMCM3.svd"


def test_check_stderr_fails_before_upload(
    github_env: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _patch_svdconv(monkeypatch, stdout=SVDCONV_OUTPUT, stderr="cannot open file\n")

    assert main(["check", "ARMCM3.svd", "--executable", "/opt/SVDConv"]) == 1

    assert FakeChecksClient.instances == []
    assert "SC300" in capsys.readouterr().err


def test_check_requires_token(
    github_env: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.delenv("INPUT_TOKEN")
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    assert main(["check", "ARMCM3.svd"]) == 1

    assert "SC100" in capsys.readouterr().err


def test_check_cancelled_run_exits_non_zero(
    github_env: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _patch_svdconv(monkeypatch, stdout=SVDCONV_OUTPUT)

    class FailingClient(FakeChecksClient):
        def __init__(self, token: str, *, api_url: str, timeout_seconds: float) -> None:
            super().__init__(token, api_url=api_url, timeout_seconds=timeout_seconds)
            self.fail_updates = frozenset({1})

    monkeypatch.setattr("svdcheck.cli.commands.check.GitHubChecksClient", FailingClient)

    assert main(["check", "ARMCM3.svd", "--executable", "/opt/SVDConv"]) == 1

    (client,) = FakeChecksClient.instances
    assert client.updates[-1]["conclusion"] == "cancelled"
    assert "was cancelled" in capsys.readouterr().err


def test_install_prints_cached_binary(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    calls: list[tuple[ToolCache, str]] = []

    def fake_ensure_svdconv(cache: ToolCache, *, version: str) -> Path:
        calls.append((cache, version))
        return cache.tool_path("SVDConv", version, "SVDConv")

    monkeypatch.setattr("svdcheck.cli.commands.install.ensure_svdconv", fake_ensure_svdconv)

    assert main(["install", "--svdconv-version", "3.3.40", "--cache-dir", str(tmp_path)]) == 0

    assert calls == [(ToolCache(tmp_path), "3.3.40")]
    assert capsys.readouterr().out.strip() == str(tmp_path / "SVDConv" / "3.3.40" / "SVDConv")


def test_check_missing_executable_reports_tool_failure(
    github_env: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    missing = github_env / "nope" / "SVDConv"

    assert main(["check", "ARMCM3.svd", "--executable", str(missing)]) == 1

    assert FakeChecksClient.instances == []
    assert "SC300" in capsys.readouterr().err


def test_parse_tolerates_latin1_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "svdconv.log"
    _ = output.write_bytes(b"*** WARNING M305: Field '\xfcber' (Line 3)\n  Field too wide.\n")

    assert main(["parse", str(output), "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["stats"] == {"notes": 0, "warnings": 1, "errors": 0}
    assert payload["messages"][0]["message"] == "Field too wide."
