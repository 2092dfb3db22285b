"""
Unit tests for scope resolution.
"""

import pytest
from pydantic import ValidationError

from dualcargo.core.models.run import Scope


class TestScopeResolve:
    def test_no_argument_selects_workspace(self):
        scope = Scope.resolve(None)
        assert scope.is_workspace
        assert scope.package is None
        assert scope.description == "workspace"

    def test_empty_argument_selects_workspace(self):
        assert Scope.resolve("") == Scope.workspace()

    def test_name_selects_package(self):
        scope = Scope.resolve("foo")
        assert not scope.is_workspace
        assert scope.package == "foo"
        assert scope.description == "foo"

    @pytest.mark.parametrize("name", ["  ", "my crate", "--release", "a;b", "ünï"])
    def test_name_kept_verbatim(self, name):
        """Any non-empty string names a package, unchanged."""
        scope = Scope.resolve(name)
        assert scope.kind == "package"
        assert scope.package == name
        assert scope.description == name

    def test_resolution_is_deterministic(self):
        assert Scope.resolve("foo") == Scope.resolve("foo")
        assert Scope.resolve(None) == Scope.resolve("")

    def test_scope_is_immutable(self):
        scope = Scope.resolve("foo")
        with pytest.raises(ValidationError):
            scope.package = "bar"
