"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, pieshop.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ShopConfig(BaseModel):
    """[shop] section."""

    model_config = {"frozen": True}

    name: str = "Bethany's Pie Shop"
    currency: str = "USD"


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    busy_timeout_ms: int = Field(default=5000, ge=0)


class SessionConfig(BaseModel):
    """[session] section."""

    model_config = {"frozen": True}

    name: str = "default"
    cookie_key: str = "CartId"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
