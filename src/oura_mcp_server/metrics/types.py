"""Type definitions for sleep metrics.

This module contains dataclasses describing the sleep data handed from a
metrics provider to the tool executor.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SleepMetrics:
    """Sleep metrics for a single night.

    Attributes:
        score: Sleep score on a 0-100 scale
        total_sleep_minutes: Total time asleep in minutes
    """

    score: int
    total_sleep_minutes: int

    @property
    def total_sleep_hours(self) -> str:
        """Total sleep in hours, formatted with one decimal place."""
        return f"{self.total_sleep_minutes / 60:.1f}"


@dataclass(frozen=True)
class WeeklySleepSummary:
    """Aggregated sleep information for the last seven nights.

    Attributes:
        weekly_average: Average sleep score over the week
        trend: Trend label (e.g., "improving")
        good_nights: Number of nights with good sleep
        poor_nights: Number of nights with poor sleep
        message: Human-readable summary
    """

    weekly_average: int
    trend: str
    good_nights: int
    poor_nights: int
    message: str
