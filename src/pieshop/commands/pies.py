"""Command group: browse the pie catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pieshop.commands._base import PieGroup
from pieshop.services.catalog import CatalogService

if TYPE_CHECKING:
    from pieshop.commands._context import AppContext

_PIES_EXAMPLES = """\
  pieshop pies list
  pieshop pies list --week
  pieshop pies show 2
  pieshop --json pies categories"""


@click.group(cls=PieGroup, examples=_PIES_EXAMPLES)
@click.pass_obj
def pies(app: AppContext) -> None:
    """Browse pies and categories."""


@pies.command(
    "list",
    examples="""\
  pieshop pies list
  pieshop pies list --week
  pieshop -q pies list""",
)
@click.option("--week", is_flag=True, help="Only the pies of the week.")
@click.pass_obj
def list_cmd(app: AppContext, week: bool) -> None:
    """List every pie in the catalog."""
    svc = CatalogService(app.store)
    app.emit(svc.pies_of_the_week() if week else svc.all_pies())


@pies.command(
    examples="""\
  pieshop pies show 1
  pieshop -v pies show 6"""
)
@click.argument("pie_id", type=int)
@click.pass_obj
def show(app: AppContext, pie_id: int) -> None:
    """Show the details of one pie."""
    app.emit(CatalogService(app.store).get_pie(pie_id))


@pies.command(examples="  pieshop pies categories")
@click.pass_obj
def categories(app: AppContext) -> None:
    """List pie categories."""
    app.emit(CatalogService(app.store).categories())
