"""Common base for the shop's services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pieshop.infrastructure.store import Store

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the :class:`Store` a service works against.

    The store belongs to the caller (one per CLI invocation). Each service
    method opens its own ``self._store.transaction()`` and commits before
    returning, so plugin hooks only ever observe committed state.
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def _dispatch_event(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Fire a plugin hook after a committed change.

        A plugin that fails adds to *warnings*; the operation still succeeds.
        Nothing happens when the store has no event bus.
        """
        bus = self._store.event_bus
        if bus is None:
            return
        try:
            delivered = bus.dispatch(hook_name, payload)
        except Exception:
            logger.debug("Could not dispatch %s", hook_name, exc_info=True)
            delivered = False
        if not delivered:
            warnings.append(f"Event dispatch failed for {hook_name}")
