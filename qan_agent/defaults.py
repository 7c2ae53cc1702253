"""Baseline defaults for the run configuration.

One ``BaselineDefaults`` instance is owned by whatever schedules server
probes. Probes update it field by field; resolution only reads it. The fields
are not updated atomically, so callers must not resolve while a probe is in
flight, or must resolve against a ``snapshot()``.
"""

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from qan_agent import constants
from qan_agent.settings import CollectFrom, Interval


class BaselineDefaults(BaseModel):
    """The agent's best-known default configuration values."""

    model_config = ConfigDict(validate_assignment=True)

    collect_from: CollectFrom = constants.DEFAULT_COLLECT_FROM
    interval: Interval = constants.DEFAULT_INTERVAL
    long_query_time: float = Field(default=constants.DEFAULT_LONG_QUERY_TIME, ge=0)
    max_slow_log_size: int = constants.DEFAULT_MAX_SLOW_LOG_SIZE
    remove_old_slow_logs: bool = constants.DEFAULT_REMOVE_OLD_SLOW_LOGS
    example_queries: bool = constants.DEFAULT_EXAMPLE_QUERIES
    slow_log_verbosity: str = constants.DEFAULT_SLOW_LOG_VERBOSITY
    rate_limit: NonNegativeInt = constants.DEFAULT_RATE_LIMIT
    log_slow_admin_statements: bool = constants.DEFAULT_LOG_SLOW_ADMIN_STATEMENTS
    log_slow_slave_statements: bool = constants.DEFAULT_LOG_SLOW_SLAVE_STATEMENTS
    report_limit: NonNegativeInt = constants.DEFAULT_REPORT_LIMIT

    def snapshot(self) -> "BaselineSnapshot":
        """Return an immutable copy that later probes cannot modify."""
        return BaselineSnapshot(**self.model_dump())


class BaselineSnapshot(BaselineDefaults):
    """Read-only view of the baseline defaults at one point in time."""

    model_config = ConfigDict(frozen=True)
