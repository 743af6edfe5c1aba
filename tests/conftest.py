"""Shared pytest fixtures for pieshop tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from pieshop.config.settings import PieSettings
from pieshop.infrastructure.database.engine import init_database
from pieshop.infrastructure.store import Store
from pieshop.services.cart import CartService
from pieshop.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PIESHOP_* environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("PIESHOP_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Iterator[None]:
    """Undo telemetry enabled by a ``-v`` invocation."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created and the catalog seeded."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def shop_root(tmp_path: Path) -> Path:
    """Temporary shop directory.

    The single source of truth for the shop location; ``store`` and
    ``_isolated_shop`` both build on it.
    """
    return tmp_path


@pytest.fixture
def store(shop_root: Path) -> Iterator[Store]:
    """Store on a fresh, seeded database (no event bus wired)."""
    settings = PieSettings.from_cli(shop_root=shop_root)
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def cart_service(store: Store) -> CartService:
    return CartService(store)


@pytest.fixture
def cart_id() -> str:
    return "3f2c9a4e-8b1d-4c7a-9e5f-0a1b2c3d4e5f"


@pytest.fixture
def _isolated_shop(shop_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp shop root so the CLI creates an isolated shop.

    Use via ``@pytest.mark.usefixtures("_isolated_shop")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly
    (pytest deduplicates: it's the same directory).
    """
    monkeypatch.chdir(shop_root)
