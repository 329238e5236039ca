"""
Migration 002 - sample categories.

Inserts the four storefront categories in one batch. A category that
already exists with the same name fails the unique index and aborts the
run with BulkWriteError, so the migration is not recorded.
"""
from shopdb.db.schema import Collections, category_seed_documents
from shopdb.services.log import get_logger

logger = get_logger("shopdb-init")


def run(db):
    result = db[Collections.CATEGORIES].insert_many(category_seed_documents())
    logger.info("Migration 002: inserted sample categories.", extra={"extra": {"count": len(result.inserted_ids)}})
