import logging
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are noisy at INFO
pymongo_logger = logging.getLogger('pymongo')
pymongo_logger.setLevel(logging.WARNING)

USERS_COLLECTION_NAME = 'users'

_client_cache = None
_connection_attempted = False
_not_configured = False


def reset_client():
    global _client_cache, _connection_attempted, _not_configured
    _client_cache = None
    _connection_attempted = False
    _not_configured = False


def get_mongodb_client(mongo_url: str | None) -> MongoClient | None:
    """Get MongoDB client with connection caching and reconnection logic.

    Connection strategy:
    1. Return cached client if healthy (ping succeeds)
    2. Otherwise build a new client; a failed connect returns None and
       the next call tries again
    3. A missing MONGO_URL is a configuration error and is never retried

    Returns:
        MongoDB client or None if connection fails
    """
    global _client_cache, _connection_attempted, _not_configured

    if _client_cache:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            _client_cache = None
            logger.debug("[MONGODB] Cached client failed ping, attempting reconnection...")

    if _not_configured:
        return None

    if not mongo_url:
        logger.error("[MONGODB] MONGO_URL not configured.")
        _not_configured = True
        return None

    client = None
    try:
        client = MongoClient(
            mongo_url,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            maxPoolSize=10,
            minPoolSize=0,
            maxIdleTimeMS=30000,
            waitQueueTimeoutMS=10000,
            # Writes are never retried: a failed insert surfaces to the caller
            retryWrites=False,
            retryReads=True,
        )
        client.admin.command('ping')
    except PyMongoError as e:
        logger.error(f"[MONGODB] Connection failed: {str(e)[:200]}")
        if client is not None:
            client.close()
        return None

    if not _connection_attempted:
        logger.info("[MONGODB] Connected successfully")
    _connection_attempted = True
    _client_cache = client
    return client
