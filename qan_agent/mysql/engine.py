"""MySQL connector backed by a SQLAlchemy engine."""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from qan_agent.errors import MySQLConnectionError, VariableReadError
from qan_agent.mysql.types import Connector

logger = logging.getLogger(__name__)

GLOBAL_VARIABLE_QUERY = text("SHOW GLOBAL VARIABLES WHERE Variable_name = :name")


class SQLAlchemyConnector(Connector):
    """Connector reading global variables through SQLAlchemy.

    The DSN is a SQLAlchemy URL such as ``mysql+pymysql://user:pw@host:3306/``.
    """

    _engine: Engine | None
    _connection: Connection | None

    def __init__(self, dsn: str, connect_timeout: int = 10) -> None:
        self.dsn = dsn
        self.connect_timeout = connect_timeout
        self._engine = None
        self._connection = None

    @property
    def safe_dsn(self) -> str:
        """DSN with the password masked, suitable for logging."""
        try:
            return make_url(self.dsn).render_as_string(hide_password=True)
        except ArgumentError:
            return "<invalid dsn>"

    def connect(self) -> None:
        if self._connection is not None:
            return

        logger.debug("Connecting to %s", self.safe_dsn)
        try:
            self._engine = create_engine(
                self.dsn,
                pool_pre_ping=True,
                connect_args={"connect_timeout": self.connect_timeout},
            )
            self._connection = self._engine.connect()
            self._connection.execute(text("SELECT 1"))
        except (SQLAlchemyError, ImportError) as e:
            self.close()
            raise MySQLConnectionError(
                f"cannot connect to {self.safe_dsn}: {e}"
            ) from e
        logger.info("Connected to %s", self.safe_dsn)

    def get_global_var_string(self, name: str) -> str:
        if self._connection is None:
            raise VariableReadError(name, "not connected")

        try:
            row = self._connection.execute(
                GLOBAL_VARIABLE_QUERY, {"name": name}
            ).first()
        except SQLAlchemyError as e:
            raise VariableReadError(name, str(e)) from e

        if row is None:
            raise VariableReadError(name, "no such variable")
        # SHOW GLOBAL VARIABLES yields (Variable_name, Value)
        return "" if row[1] is None else str(row[1])

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
