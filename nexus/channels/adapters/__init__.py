"""Platform adapter implementations."""

from nexus.channels.adapters.default import DefaultAdapter
from nexus.channels.adapters.facebook import FacebookAdapter
from nexus.channels.adapters.telegram import TelegramAdapter
from nexus.channels.adapters.tiktok import TikTokAdapter
from nexus.channels.adapters.weibo import WeiboAdapter
from nexus.channels.adapters.zalo import ZaloAdapter

__all__ = [
    "DefaultAdapter",
    "FacebookAdapter",
    "TelegramAdapter",
    "TikTokAdapter",
    "WeiboAdapter",
    "ZaloAdapter",
]
