"""Extension layer: plugin system via pluggy.

Discovery: entry points in the ``pieshop.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from pieshop.plugins.event_bus import EventBus
from pieshop.plugins.hookspecs import hookimpl
from pieshop.plugins.manager import PluginManager

__all__ = ["EventBus", "PluginManager", "hookimpl"]
