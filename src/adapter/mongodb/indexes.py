"""MongoDB index management utilities."""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def _find_conflicting_index(collection, keys: list, name: str) -> str | None:
    """Name of an existing index that clashes with (keys, name), if any.

    A clash is the same name over different keys, or the same keys under
    a different name.
    """
    wanted = dict(keys)
    for idx_name, idx_info in collection.index_information().items():
        if idx_name == '_id_':
            continue
        same_name = idx_name == name
        same_keys = dict(idx_info.get('key', [])) == wanted
        if same_name != same_keys:
            return idx_name
    return None


def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create an index, replacing a conflicting one if MongoDB refuses."""
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise

    conflicting = _find_conflicting_index(collection, keys, name)
    if conflicting is None:
        logger.error(f"Failed to resolve index conflict for {name}")
        return False

    logger.warning(f"Dropping conflicting index: {conflicting}")
    collection.drop_index(conflicting)
    collection.create_index(keys, name=name, **kwargs)
    logger.info(f"Recreated index: {name}")
    return True


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.user_repository import MongoUserRepository

    return MongoUserRepository(db).ensure_indexes()
