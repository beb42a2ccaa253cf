"""Plugin records and hook kinds."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

DataBag = dict[str, Any]


class HookKind(str, Enum):
    """Extension points in the turn pipeline."""

    PRE_PROCESS = "pre-process"
    POST_PROCESS = "post-process"


ExecuteFn = Callable[[HookKind, DataBag], Mapping[str, Any] | Awaitable[Mapping[str, Any]]]


class Plugin(Protocol):
    """Anything with a name, declared hooks and an execute callable."""

    name: str
    hooks: Any
    execute: ExecuteFn


@dataclass(frozen=True)
class PluginRecord:
    """A plugin that passed registration checks."""

    name: str
    hooks: frozenset[HookKind]
    execute: ExecuteFn

    def handles(self, hook: HookKind) -> bool:
        return hook in self.hooks
