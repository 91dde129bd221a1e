"""Sleep metrics providers.

No live Oura Ring integration exists yet. PlaceholderSleepMetricsProvider
returns fixed values so tool results stay reproducible.
"""

import logging
from typing import Protocol

from oura_mcp_server.metrics.types import SleepMetrics, WeeklySleepSummary

logger = logging.getLogger(__name__)

# Placeholder nights: (score, total sleep minutes)
FORCED_ALERT_NIGHT = SleepMetrics(score=65, total_sleep_minutes=360)
RESTED_NIGHT = SleepMetrics(score=85, total_sleep_minutes=450)

PLACEHOLDER_WEEK = WeeklySleepSummary(
    weekly_average=82,
    trend="improving",
    good_nights=5,
    poor_nights=2,
    message="📊 Your sleep has been improving this week. Keep it up!",
)


class SleepMetricsProvider(Protocol):
    """Source of sleep data consumed by the tool executor."""

    def daily_sleep(self, force_alert: bool) -> SleepMetrics:
        """Get the metrics for the most recent night.

        Args:
            force_alert: Whether the caller asked for an alert scenario.
                Placeholder providers use it to pick a poor night.

        Returns:
            SleepMetrics for the night.
        """
        ...

    def weekly_summary(self) -> WeeklySleepSummary:
        """Get the sleep summary for the last seven nights."""
        ...


class PlaceholderSleepMetricsProvider:
    """Metrics provider returning fixed placeholder data."""

    def daily_sleep(self, force_alert: bool) -> SleepMetrics:
        metrics = FORCED_ALERT_NIGHT if force_alert else RESTED_NIGHT
        logger.debug(f"Placeholder daily sleep (force_alert={force_alert}): {metrics}")
        return metrics

    def weekly_summary(self) -> WeeklySleepSummary:
        return PLACEHOLDER_WEEK
