"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, minmax.toml only contains overrides.
An empty (or missing) minmax.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- minmax.toml sections ---


class OperandsConfig(BaseModel):
    """[operands] section."""

    model_config = {"frozen": True}

    allow_strings: bool = False


class ClampConfig(BaseModel):
    """[clamp] section."""

    model_config = {"frozen": True}

    warn_inverted_bounds: bool = True


# --- Root config ---


class MinmaxConfig(BaseModel):
    """Root configuration model for minmax.toml."""

    model_config = {"frozen": True}

    operands: OperandsConfig = Field(default_factory=OperandsConfig)
    clamp: ClampConfig = Field(default_factory=ClampConfig)
