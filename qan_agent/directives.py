"""Server statements that switch a collection strategy on and off."""

from qan_agent import constants
from qan_agent.errors import UnsupportedStrategyError
from qan_agent.settings import QANConfig


def make_slow_log_config() -> tuple[list[str], list[str]]:
    # log_output cannot safely change while the slow log is on
    on = [
        constants.SLOW_QUERY_LOG_OFF,
        constants.LOG_OUTPUT_FILE,
        constants.SLOW_QUERY_LOG_ON,
        constants.TIME_ZONE_UTC,
    ]
    off = [constants.SLOW_QUERY_LOG_OFF]
    return on, off


def make_perf_schema_config() -> tuple[list[str], list[str]]:
    return [constants.TIME_ZONE_UTC], []


def get_mysql_config(config: QANConfig | str) -> tuple[list[str], list[str]]:
    """Get the statements that enable and disable a collection strategy.

    The statements are only generated; the caller executes them in order.

    Args:
        config: Resolved run configuration, or a bare CollectFrom value

    Returns:
        Tuple of (enable statements, disable statements)

    Raises:
        UnsupportedStrategyError: If the strategy is not slowlog or perfschema
    """
    collect_from = config if isinstance(config, str) else config.collect_from

    if collect_from == constants.COLLECT_FROM_SLOWLOG:
        return make_slow_log_config()
    elif collect_from == constants.COLLECT_FROM_PERFSCHEMA:
        return make_perf_schema_config()
    else:
        raise UnsupportedStrategyError(collect_from)
