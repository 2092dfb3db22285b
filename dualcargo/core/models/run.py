"""
Run domain models.

Provides Pydantic models for invocation scope, planned cargo invocations
and the outcome of a dual run.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, computed_field

from .base import ImmutableModel

Subcommand = Literal["test", "check"]
ScopeKind = Literal["workspace", "package"]


class Scope(ImmutableModel):
    """Breadth of a run: the whole workspace or one named package.

    Package names are kept verbatim; no trimming or validation is applied.
    """

    kind: ScopeKind
    package: str | None = None

    @classmethod
    def workspace(cls) -> Scope:
        return cls(kind="workspace")

    @classmethod
    def for_package(cls, name: str) -> Scope:
        return cls(kind="package", package=name)

    @classmethod
    def resolve(cls, argument: str | None) -> Scope:
        """Resolve the scope from an optional command-line argument.

        An absent or empty argument selects the workspace; anything else,
        whitespace included, names a package.
        """
        if argument:
            return cls.for_package(argument)
        return cls.workspace()

    @property
    def is_workspace(self) -> bool:
        return self.kind == "workspace"

    @property
    def description(self) -> str:
        """Human-readable name used in the status line."""
        if self.is_workspace:
            return "workspace"
        return self.package or ""


class Invocation(ImmutableModel):
    """A single planned build tool invocation."""

    argv: Annotated[list[str], Field(min_length=1)]
    all_features: bool = False

    @property
    def display(self) -> str:
        return " ".join(self.argv)


class CommandPlan(ImmutableModel):
    """The two invocations of a dual run, in execution order."""

    subcommand: Subcommand
    scope: Scope
    default_run: Invocation
    all_features_run: Invocation

    @property
    def invocations(self) -> list[Invocation]:
        return [self.default_run, self.all_features_run]


class InvocationOutcome(ImmutableModel):
    """Exit status of one executed invocation."""

    invocation: Invocation
    exit_code: int


class RunResult(ImmutableModel):
    """Complete result of a dual run."""

    plan: CommandPlan
    outcomes: list[InvocationOutcome] = Field(default_factory=list)
    exit_code: int
    interrupted: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> bool:
        """Check if the run succeeded (exit code 0)."""
        return self.exit_code == 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def short_circuited(self) -> bool:
        """True when the all-features invocation was skipped."""
        return len(self.outcomes) < len(self.plan.invocations)
