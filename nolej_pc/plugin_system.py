import copy
import logging
from typing import Dict, Any, Optional

from nolej_pc.constants import PLUGIN_NAME, PLUGIN_VERSION

logger = logging.getLogger('main')


class PageComponentPlugin:
    """Base class for all page component plugins"""
    def __init__(self, app=None, active=True):
        self.app = app
        self.name = "Base Plugin"
        self.description = "Base plugin description"
        self.version = "1.0.0"
        self.active = active

    def get_plugin_name(self) -> str:
        return self.name

    def is_active(self) -> bool:
        return self.active

    def is_valid_parent_type(self, parent_type: str) -> bool:
        """Check if the page parent type ("cat", "crs", ...) accepts this component"""
        return True

    def on_load(self):
        """Called when plugin is registered"""
        pass

    def on_clone(self, properties: Dict[str, Any], plugin_version: str) -> Dict[str, Any]:
        """Called when the page content is cloned, returns the properties of the copy"""
        return properties

    def on_delete(self, properties: Dict[str, Any], plugin_version: str):
        """Called before the page content is deleted"""
        pass


class NolejPageComponentPlugin(PageComponentPlugin):
    """Embed an activity generated by Nolej in a page"""
    def __init__(self, app=None, active=True):
        super().__init__(app, active)
        self.name = PLUGIN_NAME
        self.description = "Insert a Nolej activity in a content page"
        self.version = PLUGIN_VERSION

    def is_valid_parent_type(self, parent_type: str) -> bool:
        # Any parent: auth, cat, crs, ...
        return True

    def on_clone(self, properties, plugin_version):
        # Nothing to clone.
        return copy.deepcopy(properties)

    def on_delete(self, properties, plugin_version):
        # Nothing to delete.
        pass


class PluginManager:
    """Keeps the page component plugins known to the application"""
    def __init__(self, app=None):
        self.app = app
        self.plugins: Dict[str, PageComponentPlugin] = {}

    def register(self, plugin: PageComponentPlugin):
        self.plugins[plugin.get_plugin_name()] = plugin
        plugin.on_load()
        state = "active" if plugin.is_active() else "inactive"
        logger.info(f"Registered page component plugin: {plugin.name} v{plugin.version} ({state})")
        return plugin

    def get(self, name: str) -> Optional[PageComponentPlugin]:
        return self.plugins.get(name)
