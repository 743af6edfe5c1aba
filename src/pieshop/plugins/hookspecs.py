"""Pluggy hook specifications for cart and shop lifecycle events.

Hooks are called synchronously after the triggering transaction commits.
"""

from __future__ import annotations

import pluggy

PROJECT_NAME = "pieshop"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class PieshopHookSpec:
    """Hook specifications for the pieshop plugin system."""

    @hookspec
    def post_cart_add(self, cart_id: str, pie_id: int, quantity: int) -> None:
        """Called after a pie is added; *quantity* is the line's new quantity."""

    @hookspec
    def post_cart_remove(self, cart_id: str, pie_id: int, quantity: int) -> None:
        """Called after a pie is removed; *quantity* is 0 when the line was deleted."""

    @hookspec
    def post_cart_clear(self, cart_id: str, removed: int) -> None:
        """Called after a non-empty cart is cleared."""

    @hookspec
    def post_init(self, shop_name: str, shop_root: str) -> None:
        """Called after a shop is initialized."""
