"""
Migration 001 - initial collections and indexes.

Creates the four collections (users, categories, products, orders)
and every index declared in shopdb.db.schema.INDEXES.

It must define a function "run(db)" that the migration runner will call.
"""
from shopdb.db.schema import Collections, INDEXES
from shopdb.services.log import get_logger

logger = get_logger("shopdb-init")


def run(db):

    existing = set(db.list_collection_names())

    for name in Collections.ALL:
        if name not in existing:
            db.create_collection(name)
            logger.info("collection_created", extra={"extra": {"collection": name}})

    for collection_name, indexes in INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            created = collection.create_index(keys, **kwargs)
            logger.debug("index_created", extra={"extra": {"collection": collection_name, "index": created}})

    logger.info("Migration 001: created collections and indexes.")
