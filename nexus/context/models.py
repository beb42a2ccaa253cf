"""Context entry model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NAMESPACE = "global"


class ContextEntry(BaseModel):
    """A value stored under (namespace, key) with an absolute expiry."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Any = Field(..., description="Opaque stored value")
    expires_at: float = Field(..., description="Monotonic expiry instant")
    namespace: str = Field(default=DEFAULT_NAMESPACE, description="Key partition")

    def is_expired(self, now: float) -> bool:
        """An entry is dead from its expiry instant onwards."""
        return self.expires_at <= now
