"""Synchronous event dispatch over the pluggy hook relay.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pieshop.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class EventBus:
    """Calls every registered implementation of a hook, in process."""

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager

    @property
    def plugin_manager(self) -> PluginManager:
        return self._pm

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> bool:
        """Invoke *hook_name* with *payload* as keyword arguments.

        Returns True when every implementation ran cleanly. A failing plugin
        is logged and reported as False; the exception does not propagate.

        Raises:
            AttributeError: If *hook_name* is not a declared hook.
        """
        hook = getattr(self._pm.hook, hook_name)
        try:
            hook(**payload)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            return False
        return True
