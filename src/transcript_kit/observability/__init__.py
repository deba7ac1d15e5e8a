from . import names
from .base import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook, elapsed_ms

__all__ = [
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "elapsed_ms",
    "names",
]
