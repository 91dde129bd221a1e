"""Sleep metrics sources for the tool executor.

The executor reads all sleep data through a SleepMetricsProvider so that the
placeholder values can be replaced by a live Oura feed later.
"""

from oura_mcp_server.metrics.provider import (
    PlaceholderSleepMetricsProvider,
    SleepMetricsProvider,
)
from oura_mcp_server.metrics.types import SleepMetrics, WeeklySleepSummary

__all__ = [
    "PlaceholderSleepMetricsProvider",
    "SleepMetrics",
    "SleepMetricsProvider",
    "WeeklySleepSummary",
]
