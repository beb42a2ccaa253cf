"""Ordered, fail-open plugin pipeline.

Plugins run in registration order for the hooks they declared. A plugin
that raises, or returns something other than a mapping, is logged and
skipped; the bag as it was before that attempt flows on to the next plugin.
Chat availability wins over middleware correctness.
"""

import copy
import inspect
from collections.abc import Mapping, Sequence, Set
from typing import Any

from nexus.observability.logging import get_logger
from nexus.observability.metrics import PLUGIN_FAILURES
from nexus.plugins.models import DataBag, HookKind, PluginRecord

logger = get_logger(__name__)

# Handles passed to every plugin by reference rather than copied
SHARED_KEYS: frozenset[str] = frozenset({"context"})


def _isolate(bag: DataBag) -> DataBag:
    """Copy a bag so in-place edits by a failing plugin cannot leak."""
    isolated: DataBag = {}
    for key, value in bag.items():
        if key in SHARED_KEYS:
            isolated[key] = value
            continue
        try:
            isolated[key] = copy.deepcopy(value)
        except (TypeError, copy.Error):
            # Uncopyable values (locks, clients) are shared as-is
            isolated[key] = value
    return isolated


class PluginPipeline:
    """Registry and runner for pre-process and post-process plugins."""

    def __init__(self) -> None:
        self._records: list[PluginRecord] = []

    def register(self, plugin: Any) -> bool:
        """Validate and register a plugin.

        Invalid plugins are rejected with a warning, never an exception.

        Returns:
            True if the plugin was registered
        """
        name = getattr(plugin, "name", None)
        if not isinstance(name, str) or not name.strip():
            return self._reject(name, "name must be a non-empty string")

        if any(r.name == name for r in self._records):
            return self._reject(name, "a plugin with this name is already registered")

        execute = getattr(plugin, "execute", None)
        if not callable(execute):
            return self._reject(name, "execute must be callable")

        hooks = self._parse_hooks(getattr(plugin, "hooks", None))
        if hooks is None:
            return self._reject(
                name,
                "hooks must be a non-empty set or sequence of "
                + ", ".join(h.value for h in HookKind),
            )

        self._records.append(PluginRecord(name=name, hooks=hooks, execute=execute))
        logger.info("plugin_registered", plugin=name, hooks=sorted(h.value for h in hooks))
        return True

    @staticmethod
    def _parse_hooks(raw: Any) -> frozenset[HookKind] | None:
        if isinstance(raw, (str, bytes)) or not isinstance(raw, (Set, Sequence)):
            return None
        if not raw:
            return None
        try:
            return frozenset(HookKind(h) for h in raw)
        except ValueError:
            return None

    @staticmethod
    def _reject(name: Any, reason: str) -> bool:
        logger.warning("plugin_rejected", plugin=repr(name), reason=reason)
        return False

    @property
    def names(self) -> list[str]:
        return [r.name for r in self._records]

    def plugins_for(self, hook: HookKind) -> list[str]:
        return [r.name for r in self._records if r.handles(hook)]

    async def run(self, hook: HookKind, bag: DataBag) -> DataBag:
        """Run every plugin registered for hook, in registration order."""
        hook = HookKind(hook)
        for record in self._records:
            if not record.handles(hook):
                continue

            try:
                result = record.execute(hook, _isolate(bag))
                if inspect.isawaitable(result):
                    result = await result
            except Exception as e:
                logger.error(
                    "plugin_failed",
                    plugin=record.name,
                    hook=hook.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                PLUGIN_FAILURES.labels(plugin=record.name, hook=hook.value).inc()
                continue

            if not isinstance(result, Mapping):
                logger.warning(
                    "plugin_returned_invalid_bag",
                    plugin=record.name,
                    hook=hook.value,
                    result_type=type(result).__name__,
                )
                PLUGIN_FAILURES.labels(plugin=record.name, hook=hook.value).inc()
                continue

            bag = dict(result)

        return bag
