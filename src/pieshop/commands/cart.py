"""Command group: the visitor's shopping cart.

Every subcommand resolves the cart id from the active session (minting one
on first contact) and hands it to :class:`CartService`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pieshop.commands._base import PieGroup
from pieshop.services.cart import CartService
from pieshop.services.catalog import CatalogService
from pieshop.services.result import ServiceResult

if TYPE_CHECKING:
    from pieshop.commands._context import AppContext

_CART_EXAMPLES = """\
  pieshop cart add 1
  pieshop cart remove 1
  pieshop cart show
  pieshop --session alice cart add 2
  pieshop -q cart total"""


def _pie_not_found(op: str, pie_id: int) -> ServiceResult:
    return ServiceResult.failure(op, "NOT_FOUND", f"No pie found with ID: {pie_id}", pie_id=pie_id)


@click.group(cls=PieGroup, examples=_CART_EXAMPLES)
@click.pass_obj
def cart(app: AppContext) -> None:
    """Add, remove and review the pies in your cart."""


@cart.command(
    examples="""\
  pieshop cart add 1
  pieshop --json cart add 3"""
)
@click.argument("pie_id", type=int)
@click.pass_obj
def add(app: AppContext, pie_id: int) -> None:
    """Put one pie in the cart."""
    pie = CatalogService(app.store).lookup(pie_id)
    if pie is None:
        app.emit(_pie_not_found("add_item", pie_id))
        return
    app.emit(CartService(app.store).add_item(pie, app.cart_id()))


@cart.command(
    examples="""\
  pieshop cart remove 1
  pieshop -q cart remove 2"""
)
@click.argument("pie_id", type=int)
@click.pass_obj
def remove(app: AppContext, pie_id: int) -> None:
    """Take one pie out of the cart."""
    pie = CatalogService(app.store).lookup(pie_id)
    if pie is None:
        app.emit(_pie_not_found("remove_item", pie_id))
        return
    app.emit(CartService(app.store).remove_item(pie, app.cart_id()))


@cart.command(
    "list",
    examples="""\
  pieshop cart list
  pieshop -q cart list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List the lines in the cart."""
    app.emit(CartService(app.store).list_items(app.cart_id()))


@cart.command(
    examples="""\
  pieshop cart show
  pieshop --session alice cart show"""
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the cart with its total."""
    app.emit(CartService(app.store).summary(app.cart_id()))


@cart.command(
    examples="""\
  pieshop cart total
  pieshop -q cart total"""
)
@click.pass_obj
def total(app: AppContext) -> None:
    """Print the cart total."""
    app.emit(CartService(app.store).total(app.cart_id()))


@cart.command(examples="  pieshop cart clear")
@click.pass_obj
def clear(app: AppContext) -> None:
    """Remove every line from the cart."""
    app.emit(CartService(app.store).clear(app.cart_id()))


@cart.command("id", examples="  pieshop cart id\n  pieshop --session alice cart id")
@click.pass_obj
def id_cmd(app: AppContext) -> None:
    """Print the session's cart id, minting one if needed."""
    minted = app.session.get(app.settings.session.cookie_key) is None
    app.emit(
        ServiceResult(
            ok=True,
            op="cart_id",
            data={
                "cart_id": app.cart_id(),
                "session": app.settings.active_session,
                "minted": minted,
            },
        )
    )


@cart.command(examples="  pieshop cart forget")
@click.pass_obj
def forget(app: AppContext) -> None:
    """Drop the cart id from the session; the next command starts a new cart."""
    from pieshop.services.identity import forget_cart_id

    forgotten = forget_cart_id(app.session, key=app.settings.session.cookie_key)
    app.emit(
        ServiceResult(
            ok=True,
            op="forget_cart",
            data={"session": app.settings.active_session, "forgotten": forgotten},
        )
    )
