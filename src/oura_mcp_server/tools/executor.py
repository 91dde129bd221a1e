"""Tool execution.

This module provides the ToolExecutor class which validates a tool call
against the registry, checks its arguments and computes the result from the
configured sleep metrics provider.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from oura_mcp_server.metrics import SleepMetricsProvider
from oura_mcp_server.tools.errors import ToolNotFoundError, ToolValidationError
from oura_mcp_server.tools.registry import ToolRegistry
from oura_mcp_server.tools.types import ToolArguments, ToolResult

logger = logging.getLogger(__name__)

# Sleep scores below this mean the user should rest
TRAINING_SCORE_THRESHOLD = 70


class ToolExecutor:
    """Executes registered tools.

    Every invocation is independent: the executor holds no mutable state
    beyond the registry and metrics provider it was built with.
    """

    def __init__(self, registry: ToolRegistry, metrics_provider: SleepMetricsProvider):
        """Initialize the ToolExecutor.

        Args:
            registry: Registry of tools that may be invoked.
            metrics_provider: Source of sleep metrics.

        Raises:
            ValueError: If a registered tool has no handler.
        """
        self.registry = registry
        self.metrics_provider = metrics_provider
        self._handlers: dict[str, Callable[[Mapping[str, Any]], ToolResult]] = {
            "sleep_check": self._sleep_check,
            "sleep_summary": self._sleep_summary,
        }

        missing = [name for name in registry.names if name not in self._handlers]
        if missing:
            raise ValueError(f"No handler for registered tools: {', '.join(missing)}")

    def invoke(self, name: str, args: ToolArguments | None = None) -> ToolResult:
        """Invoke a tool by name.

        Args:
            name: Name of the registered tool.
            args: Argument mapping. None is treated as no arguments.

        Returns:
            The tool result.

        Raises:
            ToolNotFoundError: If the tool is not registered.
            ToolValidationError: If the arguments are malformed.
        """
        if name not in self.registry:
            logger.info(f"Tool not found: {name}")
            raise ToolNotFoundError(name)

        if args is None:
            args = {}
        elif not isinstance(args, Mapping):
            raise ToolValidationError(name, "args", "arguments must be an object")

        result = self._handlers[name](args)
        logger.debug(f"Executed tool {name} with args {dict(args)}")
        return result

    def _sleep_check(self, args: Mapping[str, Any]) -> ToolResult:
        force_alert = args.get("forceAlert", False)
        # bool only; 0/1 and "true" are rejected rather than coerced
        if not isinstance(force_alert, bool):
            raise ToolValidationError("sleep_check", "forceAlert", "must be a boolean")

        metrics = self.metrics_provider.daily_sleep(force_alert)
        score = metrics.score
        recommendation = "train" if score >= TRAINING_SCORE_THRESHOLD else "rest"
        alert = force_alert or score < TRAINING_SCORE_THRESHOLD

        if alert:
            message = f"⚠️ Sleep score is {score}. Consider resting today."
        else:
            message = f"✅ Sleep score is {score}. You're good to train!"

        return {
            "sleepScore": score,
            "totalSleepHours": metrics.total_sleep_hours,
            "recommendation": recommendation,
            "alert": alert,
            "message": message,
        }

    def _sleep_summary(self, args: Mapping[str, Any]) -> ToolResult:
        summary = self.metrics_provider.weekly_summary()
        return {
            "weeklyAverage": summary.weekly_average,
            "trend": summary.trend,
            "daysWithGoodSleep": summary.good_nights,
            "daysWithPoorSleep": summary.poor_nights,
            "message": summary.message,
        }
