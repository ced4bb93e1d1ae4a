import logging
import threading
from pymongo import MongoClient
from app.internal import config

logger = logging.getLogger(__name__)

_client = None
_client_lock = threading.Lock()


def get_client() -> MongoClient:
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = MongoClient(config.DATABASE_URL)
    return _client


def get_database(client=None):
    if client is None:
        client = get_client()
    return client[config.DATABASE_NAME]


def connect(databaseUrl=None) -> MongoClient:
    """Open the shared client and make sure the server answers."""
    if databaseUrl is not None and databaseUrl != config.DATABASE_URL:
        disconnect()
        config.DATABASE_URL = databaseUrl
    client = get_client()
    client.admin.command("ping")
    logger.info("Connected to MongoDB at %s", config.DATABASE_URL)
    return client


def disconnect():
    global _client
    with _client_lock:
        client, _client = _client, None
    if client is not None:
        client.close()
        logger.info("Disconnected from MongoDB")
