"""InitService: shop initialization.

Writes ``pieshop.toml``, creates the database with the seed catalog, and
stamps it at the current Alembic head.
"""

from __future__ import annotations

import json
from pathlib import Path

from pieshop.config.discovery import CONFIG_FILENAME
from pieshop.services.result import ServiceResult


def _render_toml(name: str, currency: str) -> str:
    # json.dumps yields a valid TOML basic string for these values
    return (
        "[shop]\n"
        f"name = {json.dumps(name)}\n"
        f"currency = {json.dumps(currency)}\n"
        "\n"
        "[session]\n"
        'name = "default"\n'
    )


class InitService:
    """Creates a new shop directory. Runs before any Store exists."""

    @staticmethod
    def init_shop(
        path: Path,
        *,
        name: str = "Bethany's Pie Shop",
        currency: str = "USD",
    ) -> ServiceResult:
        op = "init"
        config_path = path / CONFIG_FILENAME
        if config_path.exists():
            return ServiceResult.failure(
                op,
                "ALREADY_INITIALIZED",
                f"{CONFIG_FILENAME} already exists in {path}",
                config_path=str(config_path),
            )

        path.mkdir(parents=True, exist_ok=True)
        config_path.write_text(_render_toml(name, currency), encoding="utf-8")

        from pieshop.config.settings import PieSettings
        from pieshop.infrastructure.store import Store
        from pieshop.services.upgrade import UpgradeService

        settings = PieSettings.from_cli(config_path=str(config_path), shop_root=path)
        store = Store(settings)
        warnings: list[str] = []
        try:
            stamped = UpgradeService(store).stamp_current()
            if not stamped.ok and stamped.error is not None:
                warnings.append(stamped.error.message)

            with store.transaction() as txn:
                pie_count = len(txn.list_pies())

            store.init_event_bus()
            bus = store.event_bus
            if bus is not None:
                if not bus.dispatch("post_init", {"shop_name": name, "shop_root": str(path)}):
                    warnings.append("Event dispatch failed for post_init")
        finally:
            store.close()

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "shop_root": str(path),
                "config_path": str(config_path),
                "db_path": str(store.db_path),
                "pies": pie_count,
            },
            warnings=warnings,
        )
