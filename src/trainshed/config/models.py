"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, trainshed.toml only contains
overrides. A fresh collection needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel

from trainshed.domain.currency import Currency

# --- trainshed.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    filename: str = "trainshed.db"


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    default_currency: Currency = Currency.EUR
