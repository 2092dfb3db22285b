"""
Unit tests for SubprocessCommandExecutor.

These run real child processes using the current Python interpreter as a
stand-in for cargo.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dualcargo.core.exceptions import ExecutionError, ToolNotFoundError
from dualcargo.services.execution.executor import (
    SubprocessCommandExecutor,
    normalize_exit_code,
)

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals and modes")


@pytest.fixture
def executor():
    return SubprocessCommandExecutor(logger=MagicMock())


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


class TestNormalizeExitCode:
    @pytest.mark.parametrize(
        ("returncode", "expected"),
        [(0, 0), (1, 1), (101, 101), (-2, 130), (-9, 137), (-15, 143)],
    )
    def test_mapping(self, returncode, expected):
        assert normalize_exit_code(returncode) == expected


class TestSubprocessCommandExecutor:
    def test_success(self, executor):
        assert executor.execute(_python("pass")) == 0

    def test_exit_code_propagated(self, executor):
        assert executor.execute(_python("import sys; sys.exit(3)")) == 3

    def test_argument_passed_verbatim(self, executor, tmp_path: Path):
        out = tmp_path / "argv.txt"
        code = f"import sys; open({str(out)!r}, 'w').write(sys.argv[1])"
        assert executor.execute([*_python(code), "my crate; echo hi"]) == 0
        assert out.read_text() == "my crate; echo hi"

    @posix_only
    def test_signal_death_uses_shell_status(self, executor):
        code = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"
        assert executor.execute(_python(code)) == 143

    def test_missing_program(self, executor):
        with pytest.raises(ToolNotFoundError) as exc_info:
            executor.execute(["dualcargo-no-such-tool-xyz", "test"])

        assert exc_info.value.exit_code == 127
        assert "command not found" in exc_info.value.message
        assert exc_info.value.context["program"] == "dualcargo-no-such-tool-xyz"

    @posix_only
    def test_non_executable_program(self, executor, tmp_path: Path):
        script = tmp_path / "cargo"
        script.write_text("#!/bin/sh\nexit 0\n")
        script.chmod(0o644)

        with pytest.raises(ExecutionError) as exc_info:
            executor.execute([str(script), "test"])

        assert exc_info.value.exit_code == 126

    def test_signal_handler_installed_and_restored(self, executor):
        handler = MagicMock()
        executor.execute(_python("pass"), signal_handler=handler)
        handler.install.assert_called_once()
        handler.restore.assert_called_once()

    def test_signal_handler_restored_when_spawn_fails(self, executor):
        handler = MagicMock()
        with pytest.raises(ToolNotFoundError):
            executor.execute(["dualcargo-no-such-tool-xyz"], signal_handler=handler)
        handler.install.assert_called_once()
        handler.restore.assert_called_once()
