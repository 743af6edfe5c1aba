"""Tests for the config section models."""

import pytest
from pydantic import ValidationError

from pieshop.config.models import PluginsConfig, SessionConfig, ShopConfig, StoreConfig


class TestDefaults:
    def test_shop(self) -> None:
        cfg = ShopConfig()
        assert cfg.name == "Bethany's Pie Shop"
        assert cfg.currency == "USD"

    def test_store(self) -> None:
        assert StoreConfig().busy_timeout_ms == 5000

    def test_session(self) -> None:
        cfg = SessionConfig()
        assert cfg.name == "default"
        assert cfg.cookie_key == "CartId"

    def test_plugins(self) -> None:
        assert PluginsConfig().enabled is True


class TestValidation:
    def test_negative_busy_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StoreConfig(busy_timeout_ms=-1)

    def test_frozen(self) -> None:
        cfg = ShopConfig()
        with pytest.raises(ValidationError):
            cfg.name = "Other"  # type: ignore[misc]
