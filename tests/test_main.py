"""Tests for the extract-and-render driver script."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

import main as driver


def test_main_runs_extract_then_render(tmp_path: Path) -> None:
    """Verify deno doc output is captured and handed to the renderer."""
    argv = ["main.py", "deno.land/x/oak/mod.ts", "--out", str(tmp_path), "--include-private"]
    with patch.object(sys, "argv", argv), patch("main.subprocess.run") as run:
        driver.main()

    assert run.call_count == 2
    extract_cmd = run.call_args_list[0].args[0]
    assert extract_cmd == ["deno", "doc", "--json", "https://deno.land/x/oak/mod.ts"]
    assert "stdout" in run.call_args_list[0].kwargs
    render_cmd = run.call_args_list[1].args[0]
    assert render_cmd[1:3] == ["-m", "docpages.render_docs"]
    assert str(tmp_path / "doc_nodes.json") in render_cmd
    assert "--include-private" in render_cmd


def test_run_command_failure_exits(tmp_path: Path) -> None:
    """Verify that a failing step exits with its return code."""
    err = subprocess.CalledProcessError(3, ["deno"])
    with patch("main.subprocess.run", side_effect=err), pytest.raises(SystemExit) as exc:
        driver.run_command(["deno", "doc"], stdout_path=tmp_path / "out.json")
    assert exc.value.code == 3


def test_main_rejects_library_specifiers(tmp_path: Path) -> None:
    """Verify library specifiers stop before any command runs."""
    argv = ["main.py", "deno/stable", "--out", str(tmp_path)]
    with patch.object(sys, "argv", argv), patch("main.subprocess.run") as run:
        with pytest.raises(SystemExit) as exc:
            driver.main()
    run.assert_not_called()
    assert "deno/stable" in str(exc.value.code)
