"""Shop lifecycle commands: ``init`` and ``upgrade``."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pieshop.commands._base import PieCommand

if TYPE_CHECKING:
    from pieshop.commands._context import AppContext


@click.command(
    "init",
    cls=PieCommand,
    examples="""\
  pieshop init
  pieshop init /srv/shop --name "Bethany's Pie Shop"
  pieshop init . --currency EUR""",
)
@click.argument("path", required=False, default=".")
@click.option("--name", default=None, help="Shop name.")
@click.option("--currency", default=None, help="ISO currency code shown next to totals.")
@click.pass_obj
def init_shop(app: AppContext, path: str, name: str | None, currency: str | None) -> None:
    """Initialize a new pie shop: config file, database and seed catalog."""
    from pieshop.services.init import InitService

    shop = app.settings.shop
    app.emit(
        InitService.init_shop(
            Path(path).resolve(),
            name=name or shop.name,
            currency=(currency or shop.currency).upper(),
        )
    )


@click.command(
    cls=PieCommand,
    examples="""\
  pieshop upgrade
  pieshop upgrade --check
  pieshop --json upgrade --check""",
)
@click.option("--check", is_flag=True, help="List pending migrations, apply nothing.")
@click.pass_obj
def upgrade(app: AppContext, check: bool) -> None:
    """Migrate the shop database to the latest schema."""
    from pieshop.services.upgrade import UpgradeService

    svc = UpgradeService(app.store)
    app.emit(svc.check_pending() if check else svc.apply())
