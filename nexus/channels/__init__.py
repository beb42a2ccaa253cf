"""Platform adapters and canonical message models.

Adapters are stateless translators between each messaging platform's
webhook format and the canonical InboundEvent / CanonicalResponse pair.
"""

from nexus.channels.adapter import PlatformAdapter
from nexus.channels.adapters import DefaultAdapter
from nexus.channels.gateway import PlatformGateway, default_adapters
from nexus.channels.models import CanonicalResponse, InboundEvent, Platform

__all__ = [
    "CanonicalResponse",
    "DefaultAdapter",
    "InboundEvent",
    "Platform",
    "PlatformAdapter",
    "PlatformGateway",
    "default_adapters",
]
