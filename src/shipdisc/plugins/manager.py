"""Plugin discovery, registration, and hook dispatch.

The built-in CampaignDiscountPlugin is registered by
:meth:`PluginManager.from_settings`. Third-party plugins are discovered
through the ``shipdisc.plugins`` entry-point group.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import MutableSequence
from typing import TYPE_CHECKING

import pluggy

from shipdisc.plugins.hookspecs import ShipdiscHookSpec

if TYPE_CHECKING:
    from shipdisc.config.settings import ShipdiscSettings
    from shipdisc.domain.contracts import CartLike, ShippingRateLike

PROJECT_NAME = "shipdisc"
ENTRY_POINT_GROUP = "shipdisc.plugins"
BUILTIN_PLUGIN_NAME = "campaigns"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ShipdiscHookSpec)

    @classmethod
    def from_settings(cls, settings: ShipdiscSettings, *, discover: bool = True) -> PluginManager:
        """Create a manager for the hosting platform.

        Entry-point plugins are loaded first and the built-in campaign plugin
        is registered last, so campaign discounts run before any third-party
        implementation sees the rates.
        """
        from shipdisc.plugins.builtins.campaigns import CampaignDiscountPlugin

        manager = cls()
        if discover:
            manager.discover_and_load()
        manager.register_plugin(
            CampaignDiscountPlugin(settings.build_runner()),
            name=BUILTIN_PLUGIN_NAME,
        )
        return manager

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names of all registered plugins."""
        try:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load entry-point plugins", exc_info=True)
        self._normalize_plugin_instances()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def discount_shipping_rates(
        self,
        cart: CartLike,
        shipping_rates: MutableSequence[ShippingRateLike],
    ) -> MutableSequence[ShippingRateLike]:
        """Run every registered implementation and return the same, mutated list."""
        self._pm.hook.discount_shipping_rates(cart=cart, shipping_rates=shipping_rates)
        return shipping_rates

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly, which
        leaves ``self`` unbound at dispatch time.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
