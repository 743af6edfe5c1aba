"""Click subcommands for pieshop.

Command modules are imported inside :func:`register_commands` so that
``pieshop --help`` stays cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the storefront groups and the shop lifecycle commands to *cli*."""
    from pieshop.commands.cart import cart
    from pieshop.commands.pies import pies
    from pieshop.commands.shop import init_shop, upgrade

    for command in (pies, cart, init_shop, upgrade):
        cli.add_command(command)
