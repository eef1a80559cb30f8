# app/core/db.py
import logging
from typing import Any, Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.core.config import Settings
from app.models.task import COLLECTION_NAME

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "taskmaster"


class MongoDatabase:
    """Owns the Mongo client and hands out the collections the API uses."""

    def __init__(self, client: Any, db_name: Optional[str] = None):
        self._client = client
        if db_name:
            self._db = client[db_name]
        else:
            self._db = client.get_default_database(DEFAULT_DB_NAME)

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoDatabase":
        # connect=False defers the first network round trip to the first operation.
        client = MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            connect=False,
        )
        return cls(client, db_name=settings.mongo_db_name)

    @property
    def tasks(self) -> Collection:
        return self._db[COLLECTION_NAME]

    def connect(self) -> None:
        """Round trip to the server; raises PyMongoError when it is unreachable."""
        self._client.admin.command("ping")

    def is_connected(self) -> bool:
        try:
            self.connect()
        except PyMongoError as exc:
            logger.debug("MongoDB ping failed: %s", exc)
            return False
        return True

    def close(self) -> None:
        self._client.close()


def get_database(request: Request) -> MongoDatabase:
    return request.app.state.database


def get_tasks_collection(request: Request) -> Collection:
    return get_database(request).tasks
