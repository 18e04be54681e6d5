"""Unit tests for utility functions (express_setup.utils).

Tests cover:
- run_command (success, failure, cwd, timeout, capture=False, missing binary)
- dump_json / save_json / save_text / ensure_dir
- step() spinner resolution on success and failure
- Rich output helpers
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from express_setup.utils import (
    dump_json,
    ensure_dir,
    print_banner,
    print_error,
    print_info,
    print_success,
    print_warning,
    run_command,
    save_json,
    save_text,
    step,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    async def test_successful_command(self):
        returncode, stdout, _ = await run_command([sys.executable, "-c", "print('hello')"])
        assert returncode == 0
        assert stdout == "hello"

    async def test_failed_command(self):
        returncode, _, _ = await run_command([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert returncode == 3

    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    async def test_command_timeout(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import time; time.sleep(10)"], timeout=1
        )
        assert returncode == -1
        assert "timed out" in stderr

    async def test_no_capture_returns_empty_output(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "print('live')"], capture=False
        )
        assert returncode == 0
        assert stdout == ""
        assert stderr == ""

    async def test_missing_executable(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["nonexistent-binary-12345-xyz", "install"])


# ---------------------------------------------------------------------------
# File output
# ---------------------------------------------------------------------------


class TestFileOutput:
    def test_dump_json_layout(self):
        assert dump_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}\n'

    async def test_save_json(self, tmp_path: Path):
        path = await save_json({"name": "api"}, tmp_path / "package.json")
        assert json.loads(path.read_text(encoding="utf-8")) == {"name": "api"}
        assert path.read_text(encoding="utf-8").endswith("}\n")

    async def test_save_text(self, tmp_path: Path):
        path = await save_text("PORT=3000\n", tmp_path / ".env")
        assert path.read_text(encoding="utf-8") == "PORT=3000\n"

    async def test_ensure_dir_nested(self, tmp_path: Path):
        path = await ensure_dir(tmp_path / "a" / "b")
        assert path.is_dir()

    async def test_ensure_dir_idempotent(self, tmp_path: Path):
        await ensure_dir(tmp_path / "a")
        await ensure_dir(tmp_path / "a")
        assert (tmp_path / "a").is_dir()


# ---------------------------------------------------------------------------
# step()
# ---------------------------------------------------------------------------


class TestStep:
    async def test_success_line(self, record_console):
        with patch("express_setup.utils.console", record_console):
            async with step("Working...", "Done", "Broken"):
                pass
        output = record_console.file.getvalue()
        assert "✔ Done" in output
        assert "Broken" not in output

    async def test_failure_line_and_reraise(self, record_console):
        with patch("express_setup.utils.console", record_console):
            with pytest.raises(OSError, match="disk full"):
                async with step("Working...", "Done", "Broken"):
                    raise OSError("disk full")
        output = record_console.file.getvalue()
        assert "✖ Broken" in output
        assert "✔ Done" not in output


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestPrintHelpers:
    def test_messages_reach_console(self, record_console):
        with patch("express_setup.utils.console", record_console):
            print_success("ok")
            print_error("bad")
            print_warning("careful")
            print_info("fyi")
        output = record_console.file.getvalue()
        for message in ("ok", "bad", "careful", "fyi"):
            assert message in output

    def test_banner(self, record_console):
        with patch("express_setup.utils.console", record_console):
            print_banner("Express Project Setup CLI", "1.0.0")
        output = record_console.file.getvalue()
        assert "Express Project Setup CLI" in output
        assert "Version 1.0.0" in output
