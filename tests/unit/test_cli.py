from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from isexecutable import cli
from isexecutable.cli import app


runner = CliRunner()
posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
pytestmark = pytest.mark.usefixtures("reset_logger")


def _ids():
    return ["--uid", str(os.geteuid()), "--gid", str(os.getegid())]


@posix_only
def test_check_executable(make_file):
    path = make_file("tool", 0o755)
    result = runner.invoke(app, ["check", str(path), *_ids()])
    assert result.exit_code == 0


@posix_only
def test_check_not_executable(make_file):
    exe = make_file("tool", 0o755)
    text = make_file("notes.txt", 0o644)
    result = runner.invoke(app, ["check", str(exe), str(text), *_ids()])
    assert result.exit_code == 1


def test_check_missing_path_errors(tmp_path: Path):
    result = runner.invoke(app, ["check", str(tmp_path / "missing")])
    assert result.exit_code == 2


def test_check_missing_path_may_not_exist(tmp_path: Path):
    result = runner.invoke(app, ["--verbose", "check", str(tmp_path / "missing"), "--may-not-exist"])
    assert result.exit_code == 1


class _Abort(BaseException):
    pass


def test_check_reports_base_exceptions_as_errors(monkeypatch: pytest.MonkeyPatch):
    async def _fail(path, options):
        raise _Abort("stat interrupted")

    monkeypatch.setattr(cli, "is_executable", _fail)
    result = runner.invoke(app, ["check", "/opt/tool"])
    assert result.exit_code == 2
