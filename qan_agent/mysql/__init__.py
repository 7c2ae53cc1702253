"""Connectors for reading MySQL server state."""

from .types import Connector
from .engine import SQLAlchemyConnector

__all__ = [
    "Connector",
    "SQLAlchemyConnector",
]
