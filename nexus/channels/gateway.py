"""Platform gateway for translating payloads to and from canonical form.

Dispatches standardize/adapt calls to the adapter registered for a platform.
"""

from typing import Any

from nexus.channels.adapter import PlatformAdapter
from nexus.channels.adapters import (
    DefaultAdapter,
    FacebookAdapter,
    TelegramAdapter,
    TikTokAdapter,
    WeiboAdapter,
    ZaloAdapter,
)
from nexus.channels.models import CanonicalResponse, InboundEvent, Platform
from nexus.observability.logging import get_logger

logger = get_logger(__name__)


def default_adapters() -> dict[Platform, PlatformAdapter]:
    """One adapter per supported platform."""
    return {
        Platform.FACEBOOK: FacebookAdapter(),
        Platform.ZALO: ZaloAdapter(),
        Platform.TELEGRAM: TelegramAdapter(),
        Platform.TIKTOK: TikTokAdapter(),
        Platform.WEIBO: WeiboAdapter(),
    }


class PlatformGateway:
    """Registry of platform adapters with a generic fallback.

    The registry must cover every Platform member; DefaultAdapter only
    serves platform names outside the enum.
    """

    def __init__(self, adapters: dict[Platform, PlatformAdapter] | None = None) -> None:
        """Initialize the gateway.

        Args:
            adapters: Adapter per platform, defaults to default_adapters()

        Raises:
            ValueError: If any Platform member has no adapter
        """
        registry = default_adapters() if adapters is None else dict(adapters)
        missing = [p.value for p in Platform if p not in registry]
        if missing:
            raise ValueError(f"No adapter registered for: {', '.join(missing)}")
        self._adapters: dict[str, PlatformAdapter] = {
            Platform(p).value: a for p, a in registry.items()
        }
        logger.info("platform_gateway_ready", platforms=sorted(self._adapters))

    @property
    def platforms(self) -> list[str]:
        return sorted(self._adapters)

    def adapter_for(self, platform: str) -> PlatformAdapter:
        """Adapter for a platform, or a DefaultAdapter for unknown names."""
        adapter = self._adapters.get(platform)
        if adapter is None:
            logger.debug("platform_adapter_fallback", platform=platform)
            return DefaultAdapter(platform)
        return adapter

    def standardize(self, platform: str, payload: Any) -> InboundEvent:
        """Convert a raw webhook payload into a canonical event.

        Raises:
            PayloadError: If payload is not a JSON object
        """
        return self.adapter_for(platform).standardize(payload)

    def adapt_to_platform(self, platform: str, response: CanonicalResponse) -> dict[str, Any]:
        """Render a canonical response in the platform's wire format."""
        return self.adapter_for(platform).adapt(response)
