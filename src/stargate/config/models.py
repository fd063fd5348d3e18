"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, stargate.toml only contains
overrides. An empty (or missing) stargate.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    filename: str = "starbase.db"
    # Seconds a command waits for another writer's lock before failing.
    busy_timeout: float = Field(default=30.0, gt=0)


class SeedConfig(BaseModel):
    """[seed] section."""

    model_config = {"frozen": True}

    on_startup: bool = False
