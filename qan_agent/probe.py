"""Refresh the baseline defaults from live server state."""

import logging
from typing import Any, Callable

from pydantic import ValidationError

from qan_agent import constants
from qan_agent.defaults import BaselineDefaults
from qan_agent.errors import VariableReadError
from qan_agent.mysql import Connector
from qan_agent.utils import to_bool

logger = logging.getLogger(__name__)


def _collect_from(perfschema: str) -> str:
    if to_bool(perfschema):
        return constants.COLLECT_FROM_PERFSCHEMA
    return constants.COLLECT_FROM_SLOWLOG


def _update(
    defaults: BaselineDefaults,
    field: str,
    name: str,
    reader: Callable[[str], Any],
    convert: Callable[[Any], Any] | None = None,
) -> None:
    """Store one server variable in a baseline field.

    A variable that cannot be read, converted or stored keeps its default.
    """
    try:
        value = reader(name)
        logger.debug("Global variable %s = %r", name, value)
        if convert is not None:
            value = convert(value)
        setattr(defaults, field, value)
    except (VariableReadError, ValidationError, ValueError, OverflowError) as e:
        logger.warning("Keeping default for %s: %s", name, e)


def read_mysql_config(conn: Connector, defaults: BaselineDefaults) -> None:
    """Overwrite baseline defaults with the server's current settings.

    Each variable is read independently; one that cannot be read or holds an
    invalid value leaves its default untouched. The baseline is updated field
    by field, not atomically.

    Args:
        conn: Connector to a server that is not connected yet
        defaults: Baseline defaults updated in place

    Raises:
        MySQLConnectionError: If the connection cannot be established, in
            which case no default is modified
    """
    conn.connect()

    _update(
        defaults,
        "collect_from",
        "performance_schema",
        conn.get_global_var_string,
        _collect_from,
    )
    _update(defaults, "long_query_time", "long_query_time", conn.get_global_var_number)
    _update(
        defaults,
        "log_slow_admin_statements",
        "log_slow_admin_statements",
        conn.get_global_var_string,
        to_bool,
    )
    # Percona Server samples 1 in log_slow_rate_limit queries
    _update(
        defaults, "rate_limit", "log_slow_rate_limit", conn.get_global_var_number, int
    )
    _update(
        defaults,
        "log_slow_slave_statements",
        "log_slow_slave_statements",
        conn.get_global_var_string,
        to_bool,
    )
    _update(
        defaults, "slow_log_verbosity", "log_slow_verbosity", conn.get_global_var_string
    )

    logger.info(
        "Server defaults: collect_from=%s long_query_time=%s rate_limit=%d",
        defaults.collect_from,
        defaults.long_query_time,
        defaults.rate_limit,
    )
