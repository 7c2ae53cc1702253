from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
)

from qan_agent import constants

CollectFrom = Literal["slowlog", "perfschema"]
Interval = Annotated[int, Field(ge=constants.MIN_INTERVAL, le=constants.MAX_INTERVAL)]


class QANConfig(BaseModel):
    """Resolved run configuration consumed by the collector.

    Attributes use snake_case; the wire-format names used by the rest of the
    agent are the aliases (``model_dump(by_alias=True)``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uuid: str = Field(alias="UUID")
    collect_from: CollectFrom = Field(alias="CollectFrom")
    interval: Interval = Field(alias="Interval")
    max_slow_log_size: int = Field(alias="MaxSlowLogSize")
    example_queries: bool = Field(alias="ExampleQueries")
    worker_run_time: NonNegativeInt = Field(alias="WorkerRunTime")
    report_limit: NonNegativeInt = Field(alias="ReportLimit")


class AgentSettings(BaseModel):
    """Agent startup settings loaded from CLI flags, environment and YAML.

    Override values stay raw; they are validated when the run configuration
    is resolved.
    """

    model_config = ConfigDict(frozen=True)

    dsn: str | None = None
    probe: bool = True

    # Overrides
    uuid: str | None = None
    collect_from: str | None = None
    interval: str | None = None
    example_queries: str | None = None

    def to_overrides(self) -> dict[str, str]:
        """Return the sparse override map, keyed by wire-format field name."""
        overrides = {
            "UUID": self.uuid,
            "CollectFrom": self.collect_from,
            "Interval": self.interval,
            "ExampleQueries": self.example_queries,
        }
        return {key: value for key, value in overrides.items() if value is not None}
