"""
MongoDB connection handling for file metadata.

A single connection per process is created on first use and reused by every
request for the rest of the process lifetime. There is no refresh or
reconnection: if the connection goes bad the process has to be recycled,
which on Lambda happens when the execution environment is replaced.
"""

import logging
import threading
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from file_links_api.settings import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "file_links"


class MongoConnection:
    """Lazily-constructed, process-wide MongoDB client and database handle."""

    def __init__(self, connection_string: str):
        if not connection_string:
            raise ValueError("MongoDB connection string required. Set MONGODB_URI environment variable")
        self.connection_string = connection_string
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    def get_database(self) -> Database:
        """Return the database, connecting on first call."""
        logger.debug("=> connect to database")
        if self._db is not None:
            logger.debug("=> using cached database instance")
            return self._db

        with self._lock:
            # another thread may have connected while we waited
            if self._db is None:
                self._connect()
        return self._db

    def _connect(self) -> None:
        """Establish MongoDB connection"""
        try:
            client = MongoClient(self.connection_string, tz_aware=True)
            db = client.get_default_database(default=DEFAULT_DATABASE_NAME)
        except Exception as e:
            logger.error(f"MongoDB connection error: {e}")
            raise
        self._client = client
        self._db = db
        logger.info(f"Connected to MongoDB database: {db.name}")

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
            self._client = None
            self._db = None


_connection: Optional[MongoConnection] = None
_connection_lock = threading.Lock()


def get_connection(connection_string: Optional[str] = None) -> MongoConnection:
    """
    Get the process-wide connection, creating it on first use.

    The connection string of the first call wins; later calls reuse the
    cached connection whatever they pass.
    """
    global _connection
    if _connection is None:
        with _connection_lock:
            if _connection is None:
                _connection = MongoConnection(connection_string or get_settings().mongodb_uri)
    return _connection


def reset_connection() -> None:
    """Close and forget the cached connection."""
    global _connection
    with _connection_lock:
        if _connection is not None:
            _connection.close()
        _connection = None


def get_files_collection(settings: Optional[Settings] = None) -> Collection:
    """Get the collection holding file records."""
    settings = settings or get_settings()
    db = get_connection(settings.mongodb_uri).get_database()
    return db[settings.files_collection]


def ensure_indexes(collection: Collection) -> None:
    """Create the unique index on ``file_name``."""
    try:
        collection.create_index([("file_name", ASCENDING)], unique=True)
        logger.info(f"Indexes ensured on collection {collection.name}")
    except Exception as e:
        logger.error(f"Error creating indexes on {collection.name}: {e}")
        raise
