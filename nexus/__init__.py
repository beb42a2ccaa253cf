"""Nexus: multi-platform chat-bot relay.

Normalizes inbound webhooks from messaging platforms into canonical events,
runs them through a stateful conversation engine and translates the reply
back into each platform's wire format.
"""

__version__ = "3.0.0"
