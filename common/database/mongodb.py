"""
Lazily connected MongoDB handle built on Motor.

The client is created on first use and then shared by every request served
by the process. Concurrent first calls are serialized by an asyncio lock so
exactly one client is ever constructed.

Example:
    from common.database import MongoDB, set_main_database, get_main_database

    db = MongoDB(uri="mongodb://localhost:27017", database_name="fitracker")
    set_main_database(db)

    # Anywhere else
    progress = await get_main_database().get_collection("progress")
"""

import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────
# Singleton database instance
# ─────────────────────────────────────────────────────────────────

_main_database: Optional["MongoDB"] = None


def mask_uri(uri: str) -> str:
    """Strip credentials from a connection string for logging."""
    if "@" not in uri:
        return uri
    scheme, sep, rest = uri.partition("://")
    if not sep:
        return uri.split("@")[-1]
    return f"{scheme}://{rest.split('@')[-1]}"


class MongoDB:
    """Process-wide MongoDB handle, connected on first use."""

    def __init__(self, uri: str, database_name: str):
        self._uri = uri
        self._database_name = database_name
        self._client: Optional[AsyncIOMotorClient] = None
        self._lock = asyncio.Lock()

    async def connect(self) -> AsyncIOMotorDatabase:
        """
        Return the database, creating the client if this is the first call.

        Safe to call from any number of concurrent tasks; only the first one
        constructs the client.

        Returns:
            AsyncIOMotorDatabase instance
        """
        if self._client is not None:
            return self._client[self._database_name]

        async with self._lock:
            if self._client is None:
                logger.info(f"Connecting to MongoDB: {mask_uri(self._uri)}")
                logger.debug(f"Database name: {self._database_name}")
                client = AsyncIOMotorClient(self._uri, tz_aware=True)
                try:
                    await client.admin.command("ping")
                except Exception as e:
                    logger.error(f"Failed to connect to MongoDB: {e}")
                    client.close()
                    raise
                self._client = client
                logger.info(f"Successfully connected to MongoDB database: {self._database_name}")

        return self._client[self._database_name]

    async def get_collection(self, name: str) -> AsyncIOMotorCollection:
        """
        Get a Motor collection, connecting first if needed.

        Args:
            name: Collection name

        Returns:
            AsyncIOMotorCollection instance
        """
        db = await self.connect()
        logger.debug(f"Getting collection: {name}")
        return db[name]

    async def disconnect(self) -> None:
        """Close the MongoDB connection."""
        async with self._lock:
            if self._client:
                logger.info(f"Disconnecting from MongoDB database: {self._database_name}")
                self._client.close()
                self._client = None
                logger.debug("MongoDB connection closed")

    @property
    def is_connected(self) -> bool:
        """Check whether the client has been created."""
        return self._client is not None


# ─────────────────────────────────────────────────────────────────
# Singleton initialization and getters
# ─────────────────────────────────────────────────────────────────

def set_main_database(db: Optional["MongoDB"]) -> None:
    """
    Set the main database singleton.

    Args:
        db: MongoDB instance to use as main database, or None to clear it
    """
    global _main_database
    _main_database = db
    logger.info("Main database singleton set")


def get_main_database() -> "MongoDB":
    """
    Get the main application database singleton.

    Returns:
        MongoDB instance

    Raises:
        RuntimeError: If database not initialized
    """
    if _main_database is None:
        raise RuntimeError("Main database not initialized. Call set_main_database() first.")
    return _main_database
