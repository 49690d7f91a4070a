from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.database import Database


@dataclass(frozen=True)
class DBConfig:
    uri: str
    database: str


class DatabaseConnection:
    """Singleton-like Mongo client factory.

    Note: MongoClient keeps its own connection pool, so one client per process
    is enough. ``client_factory`` lets tests plug in ``mongomock.MongoClient``.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig, *, client_factory: Callable[..., Any] = MongoClient):
        self._config = config
        self._client_factory = client_factory
        self._client = None

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def client(self):
        if self._client is None:
            self._client = self._client_factory(self._config.uri)
        return self._client

    def database(self) -> Database:
        return self.client()[self._config.database]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a string id to ObjectId; malformed ids become None."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None
