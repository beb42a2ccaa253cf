"""Plugin pipeline run around every message."""

from nexus.plugins.models import DataBag, HookKind, Plugin, PluginRecord
from nexus.plugins.pipeline import PluginPipeline

__all__ = [
    "DataBag",
    "HookKind",
    "Plugin",
    "PluginPipeline",
    "PluginRecord",
]
