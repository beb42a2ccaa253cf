"""Webhook routing."""

from nexus.routing.models import RouteResult
from nexus.routing.router import Router

__all__ = ["RouteResult", "Router"]
