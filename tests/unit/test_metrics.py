"""Unit tests for the sleep metrics provider."""

from oura_mcp_server.metrics import PlaceholderSleepMetricsProvider, SleepMetrics


def test_placeholder_daily_sleep_values():
    provider = PlaceholderSleepMetricsProvider()

    assert provider.daily_sleep(False) == SleepMetrics(score=85, total_sleep_minutes=450)
    assert provider.daily_sleep(True) == SleepMetrics(score=65, total_sleep_minutes=360)


def test_placeholder_weekly_summary():
    summary = PlaceholderSleepMetricsProvider().weekly_summary()

    assert summary.weekly_average == 82
    assert summary.trend == "improving"
    assert summary.good_nights == 5
    assert summary.poor_nights == 2


def test_total_sleep_hours_formatting():
    """Test that hours are formatted with one decimal place."""
    assert SleepMetrics(score=85, total_sleep_minutes=450).total_sleep_hours == "7.5"
    assert SleepMetrics(score=65, total_sleep_minutes=360).total_sleep_hours == "6.0"
    assert SleepMetrics(score=70, total_sleep_minutes=425).total_sleep_hours == "7.1"
