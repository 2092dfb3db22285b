"""
Base Pydantic models for dualcargo.

Run values (scopes, invocations, results) are strict and frozen: they are
built once from validated input and only read afterwards. Config sections
relax strictness in config.py so TOML and environment strings coerce.
"""

from pydantic import BaseModel, ConfigDict


class DualCargoBaseModel(BaseModel):
    """Strict model that rejects unknown fields and revalidates on assignment."""

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
        revalidate_instances="never",
    )


class ImmutableModel(DualCargoBaseModel):
    """Frozen variant for values that never change after construction."""

    model_config = ConfigDict(frozen=True)
