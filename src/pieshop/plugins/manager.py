"""pluggy plugin manager for the shop's lifecycle hooks.

Third-party plugins register under the ``pieshop.plugins`` entry-point
group and implement any of the hooks in :mod:`pieshop.plugins.hookspecs`.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from pieshop.plugins.hookspecs import PROJECT_NAME, PieshopHookSpec

ENTRY_POINT_GROUP = "pieshop.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(PieshopHookSpec)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self) -> list[str]:
        """Load ``pieshop.plugins`` entry points; returns every registered name."""
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d plugin entry point(s)", count)
        for plugin in list(self._pm.get_plugins()):
            if inspect.isclass(plugin):
                self._instantiate(plugin)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def _instantiate(self, plugin_cls: type) -> None:
        # Entry points may name a class; hooks must be bound to an instance
        name = self._pm.get_name(plugin_cls) or plugin_cls.__name__
        self._pm.unregister(plugin_cls)
        try:
            instance = plugin_cls()
        except Exception:
            logger.warning("Failed to instantiate plugin %s", name, exc_info=True)
            return
        self._pm.register(instance, name=name)
