"""Shared pytest fixtures and configuration."""

import pytest
from unittest.mock import Mock

from qan_agent.defaults import BaselineDefaults
from qan_agent.errors import VariableReadError
from qan_agent.mysql import Connector


@pytest.fixture
def defaults():
    """Fresh baseline defaults built from the hardcoded literals."""
    return BaselineDefaults()


@pytest.fixture
def server_variables():
    """Global variables of a Percona Server with performance_schema on."""
    return {
        "performance_schema": "ON",
        "long_query_time": "0.5",
        "log_slow_admin_statements": "OFF",
        "log_slow_rate_limit": "10",
        "log_slow_slave_statements": "OFF",
        "log_slow_verbosity": "microtime",
    }


class FakeConnector(Connector):
    """Connector serving global variables from a dict."""

    def __init__(self, variables: dict[str, str]):
        self.variables = variables
        self.connected = False
        self.closed = False

    def connect(self) -> None:
        self.connected = True

    def get_global_var_string(self, name: str) -> str:
        if name not in self.variables:
            raise VariableReadError(name, "no such variable")
        return self.variables[name]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_connector(server_variables):
    """Connector backed by the sample server variables."""
    return FakeConnector(server_variables)


@pytest.fixture
def mock_connector():
    """Mock connector; configure side effects per test."""
    return Mock(spec=Connector)
