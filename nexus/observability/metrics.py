"""Prometheus metrics for Nexus.

Provides turn counters, latencies, plugin failure tracking and sweep
statistics.
"""

from prometheus_client import Counter, Gauge, Histogram

# Turn metrics
TURN_COUNT = Counter(
    "nexus_turn_count_total",
    "Total number of webhook turns routed",
    labelnames=["platform", "status"],
)

TURN_LATENCY = Histogram(
    "nexus_turn_latency_seconds",
    "End-to-end turn latency in seconds",
    labelnames=["platform"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

REPLIES = Counter(
    "nexus_replies_total",
    "Replies emitted by the conversation engine",
    labelnames=["kind"],
)

# Plugin metrics
PLUGIN_FAILURES = Counter(
    "nexus_plugin_failures_total",
    "Plugin executions that raised or returned an invalid bag",
    labelnames=["plugin", "hook"],
)

# Session metrics
ACTIVE_SESSIONS = Gauge(
    "nexus_active_sessions",
    "Number of live sessions",
)

SWEEP_EVICTIONS = Counter(
    "nexus_sweep_evictions_total",
    "Entries evicted by the periodic sweep",
    labelnames=["kind"],
)
