"""
MongoDB client factory.

Builds the process-wide pymongo client and database handle from
application settings. ``MongoClient`` is thread-safe and pools its
connections, so one instance serves every request.
"""

import logging
from functools import lru_cache

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from userapi.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

SERVER_SELECTION_TIMEOUT_MS = 5_000


def create_client(settings: Settings) -> MongoClient:
    """Create a MongoDB client. Does not connect until first use.

    Args:
        settings: Application settings holding host, port and credentials.

    Returns:
        A configured MongoClient.
    """
    logger.info(
        "Creating MongoDB client for %s:%d (database=%s)",
        settings.mongodb_host,
        settings.mongodb_port,
        settings.mongodb_database,
    )
    return MongoClient(
        settings.get_mongodb_uri(),
        serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
    )


@lru_cache
def get_client() -> MongoClient:
    """Return the process-wide MongoDB client."""
    return create_client(get_settings())


def get_database() -> Database:
    """Return the configured database handle."""
    return get_client()[get_settings().mongodb_database]


def check_connection(client: MongoClient) -> None:
    """Ping the server.

    Raises:
        ConnectionError: If the server cannot be reached or rejects
            the credentials.
    """
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        raise ConnectionError(f"failed to connect to MongoDB: {exc}") from exc
    logger.info("MongoDB connection established.")
