"""
Click command implementations for dualcargo CLI.

Each module corresponds to a wrapped cargo subcommand (e.g., test.py
implements 'dualcargo test'). The command objects are also installed as the
standalone `cargo-test-all` and `cargo-check-all` scripts.
"""

from .check import cargo_check
from .test import cargo_test

COMMANDS = [
    cargo_check,
    cargo_test,
]

__all__ = [
    "COMMANDS",
    "cargo_check",
    "cargo_test",
]
