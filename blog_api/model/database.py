"""
Database Model - Pooled MongoDB connection with scoped access
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from pymongo import MongoClient, ASCENDING
from pymongo.database import Database as MongoDatabase
from pymongo.errors import ConnectionFailure, PyMongoError

from ..utils.errors import StoreConnectionError, StoreOperationError

logger = logging.getLogger(__name__)


class Database:
    """Database connection manager, one per application"""

    def __init__(self):
        self._client: Optional[MongoClient] = None
        self._db: Optional[MongoDatabase] = None
        self.name: Optional[str] = None

    def connect(self, connection_string: str = "mongodb://localhost:27017/",
                database_name: str = "my-blog",
                max_pool_size: int = 50,
                min_pool_size: int = 0,
                timeout_ms: int = 5000,
                client: Optional[MongoClient] = None) -> None:
        """Establish database connection with connection pooling.

        An already constructed ``client`` may be supplied instead of a
        connection string, in which case no new pool is created.
        """
        if self._client is not None:
            logger.debug("MongoDB client already initialized")
            return

        if client is None:
            client = MongoClient(
                connection_string,
                maxPoolSize=max_pool_size,
                minPoolSize=min_pool_size,
                serverSelectionTimeoutMS=timeout_ms
            )
        self._client = client
        self._db = self._client[database_name]
        self.name = database_name
        self._setup_indexes()
        logger.info(f"Connected to MongoDB database: {database_name}")

    def _setup_indexes(self):
        """Create the unique lookup index on article names."""
        try:
            self._db['articles'].create_index(
                [('name', ASCENDING)], unique=True, name='idx_name_unique'
            )
            logger.info("Database indexes created successfully")
        except PyMongoError as e:
            # The store may be unreachable at startup; requests report it later.
            logger.warning(f"Index creation warning: {e}")

    @contextmanager
    def scope(self) -> Iterator[MongoDatabase]:
        """Hand out the pooled database handle for the duration of a block.

        Driver errors raised inside the block are translated into the
        API error taxonomy. Sockets go back to the pool after each
        operation whether or not the block succeeds.
        """
        if self._db is None:
            raise StoreConnectionError("Database not connected. Call connect() first.")
        try:
            yield self._db
        except ConnectionFailure as e:
            logger.error(f"MongoDB connection failure: {e}")
            raise StoreConnectionError(e) from e
        except PyMongoError as e:
            logger.error(f"MongoDB operation failure: {e}")
            raise StoreOperationError(e) from e

    def get_collection(self, collection_name: str):
        """Get a collection from the database"""
        if self._db is None:
            raise StoreConnectionError("Database not connected. Call connect() first.")
        return self._db[collection_name]

    def ping(self) -> None:
        """Round-trip to the server, raising StoreConnectionError if unreachable"""
        with self.scope() as db:
            db.command('ping')

    def close(self) -> None:
        """Close database connection"""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoDB connection closed")

    @property
    def is_connected(self) -> bool:
        """Check if database is connected"""
        return self._client is not None and self._db is not None
