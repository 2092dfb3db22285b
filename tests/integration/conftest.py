"""
Fixtures for integration tests.

Provides a fake `cargo` executable on PATH that logs its arguments and
exits with codes taken from the environment, and a helper that runs
dualcargo as a real subprocess.
"""

import json
import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]

FAKE_CARGO = """#!{python}
import json, os, sys

args = sys.argv[1:]
with open(os.environ["FAKE_CARGO_LOG"], "a") as f:
    f.write(json.dumps(args) + "\\n")
print("fake cargo " + " ".join(args), flush=True)
key = "FAKE_CARGO_EXIT_ALL" if "--all-features" in args else "FAKE_CARGO_EXIT_DEFAULT"
sys.exit(int(os.environ.get(key, "0")))
"""


@pytest.fixture
def fake_cargo(tmp_path: Path) -> Path:
    """Install a fake cargo script in a bin directory; return the log path."""
    if sys.platform == "win32":
        pytest.skip("fake cargo script needs a POSIX shebang")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "cargo"
    script.write_text(FAKE_CARGO.format(python=sys.executable))
    script.chmod(0o755)
    return tmp_path / "cargo.log"


@pytest.fixture
def run_dualcargo(tmp_path: Path, fake_cargo: Path) -> Callable[..., subprocess.CompletedProcess]:
    """Run `python -m dualcargo` inside tmp_path with the fake cargo first on PATH."""
    project = tmp_path / "project"
    project.mkdir()

    def run(*args: str, **env_overrides: str) -> subprocess.CompletedProcess:
        env = {
            k: v for k, v in os.environ.items() if not k.upper().startswith("DUALCARGO_")
        }
        env["PATH"] = f"{tmp_path / 'bin'}{os.pathsep}{env.get('PATH', '')}"
        env["PYTHONPATH"] = f"{REPO_ROOT}{os.pathsep}{env.get('PYTHONPATH', '')}"
        env["FAKE_CARGO_LOG"] = str(fake_cargo)
        env.update(env_overrides)
        return subprocess.run(
            [sys.executable, "-m", "dualcargo", *args],
            cwd=project,
            env=env,
            capture_output=True,
            text=True,
        )

    return run


@pytest.fixture
def cargo_calls(fake_cargo: Path) -> Callable[[], list[list[str]]]:
    """Read back the argument lists the fake cargo was called with."""

    def read() -> list[list[str]]:
        if not fake_cargo.exists():
            return []
        return [json.loads(line) for line in fake_cargo.read_text().splitlines()]

    return read
