"""Resolve the run configuration from baseline defaults and user overrides."""

import logging
import re
from typing import Any

from qan_agent import constants
from qan_agent.defaults import BaselineDefaults
from qan_agent.errors import ConfigValidationError
from qan_agent.settings import QANConfig
from qan_agent.utils import to_bool

logger = logging.getLogger(__name__)

UNSIGNED_INT_RE = re.compile(r"[0-9]+")


def worker_run_time(interval: int) -> int:
    """Return 90% of the interval, rounded down."""
    return (
        interval
        * constants.WORKER_RUNTIME_NUMERATOR
        // constants.WORKER_RUNTIME_DENOMINATOR
    )


def parse_uint(value: str, max_value: int = constants.MAX_INTERVAL_LITERAL) -> int:
    """Parse an unsigned base-10 integer.

    Raises:
        ValueError: With "invalid syntax" or "value out of range"
    """
    if not UNSIGNED_INT_RE.fullmatch(value):
        raise ValueError("invalid syntax")
    n = int(value)
    if n > max_value:
        raise ValueError("value out of range")
    return n


def _build(fields: dict[str, Any]) -> QANConfig:
    return QANConfig(
        **fields, worker_run_time=worker_run_time(fields["interval"])
    )


def validate_config(
    set_config: dict[str, str], defaults: BaselineDefaults
) -> QANConfig:
    """Merge user overrides onto the baseline defaults.

    Only the keys present in ``set_config`` are considered: ``UUID``,
    ``CollectFrom``, ``Interval`` and ``ExampleQueries``. Other keys are
    ignored. ``WorkerRunTime`` is always derived from the final interval.

    Args:
        set_config: Raw override values keyed by wire-format field name
        defaults: Baseline defaults, only read

    Returns:
        QANConfig: The fully populated run configuration

    Raises:
        ConfigValidationError: If an override is malformed or out of range.
            Its ``config`` holds the overrides accepted before the failure.
    """
    fields: dict[str, Any] = {
        "uuid": set_config.get("UUID", ""),
        "collect_from": defaults.collect_from,
        "interval": defaults.interval,
        "max_slow_log_size": defaults.max_slow_log_size,
        "example_queries": defaults.example_queries,
        "report_limit": defaults.report_limit,
    }

    def fail(field: str, value: str, message: str) -> ConfigValidationError:
        logger.debug("Rejected %s=%r: %s", field, value, message)
        return ConfigValidationError(field, value, message, config=_build(fields))

    # Strings
    if "CollectFrom" in set_config:
        val = set_config["CollectFrom"]
        if val not in constants.COLLECT_FROM_CHOICES:
            raise fail(
                "CollectFrom",
                val,
                f"CollectFrom must be 'slowlog' or 'perfschema', got '{val}'",
            )
        fields["collect_from"] = val

    # Integers
    if "Interval" in set_config:
        val = set_config["Interval"]
        try:
            n = parse_uint(val)
        except ValueError as e:
            raise fail("Interval", val, f"invalid Interval: '{val}': {e}") from e
        if n < constants.MIN_INTERVAL or n > constants.MAX_INTERVAL:
            raise fail(
                "Interval",
                val,
                f"Interval must be > 0 and <= {constants.MAX_INTERVAL} (1 hour), got '{val}'",
            )
        fields["interval"] = n

    # Bools
    if "ExampleQueries" in set_config:
        fields["example_queries"] = to_bool(set_config["ExampleQueries"])

    config = _build(fields)
    logger.debug("Resolved run configuration: %s", config)
    return config
