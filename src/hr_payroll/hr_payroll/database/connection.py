from __future__ import annotations

import logging
from dataclasses import dataclass

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


class DatabaseConnection:
    """DB connection factory injected into every repository.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    Built once per process by the container; ``close`` marks the shutdown boundary.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._closed = False

    def connect(self):
        if self._closed:
            raise RuntimeError("Database connection factory is closed")
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

    def close(self) -> None:
        if not self._closed:
            logger.info("Database disconnected")
        self._closed = True
