import mongomock
import pytest


@pytest.fixture
def mongo_client():
    """In-memory MongoDB client."""
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def db(mongo_client):
    return mongo_client["ecommerce_test"]


@pytest.fixture
def initialized_db(db):
    from shopdb.db.init_db import run_migrations

    run_migrations(db)
    return db
