# shopdb/tests/integration/test_bootstrap_mongo.py
"""
Integration test against a real MongoDB.

What this test does:
- Starts an ephemeral MongoDB using testcontainers.
- Runs the migrations and the demo seeder against a fresh database.
- Asserts the behaviour that only a real server provides:
    - $text search over product name/description through the text index
    - unique indexes rejecting duplicate category names and user emails
    - a second bootstrap run is a no-op
Notes:
- Requires Docker (testcontainers) locally or on the CI agent.
- Run with: pytest -m integration
"""

import os

import pytest
from pymongo.errors import BulkWriteError, DuplicateKeyError
from testcontainers.mongodb import MongoDbContainer

from shopdb.db import seeder
from shopdb.db.init_db import run_migrations
from shopdb.db.schema import Collections, category_seed_documents
from shopdb.db.verify import verify

pytestmark = pytest.mark.integration

MONGO_IMAGE = os.getenv("MONGO_TEST_IMAGE", "mongo:7.0")


@pytest.fixture(scope="module")
def mongo_client():
    with MongoDbContainer(MONGO_IMAGE) as mongo_cont:
        client = mongo_cont.get_connection_client()
        yield client
        client.close()


@pytest.fixture(scope="module")
def bootstrapped_db(mongo_client):
    db = mongo_client["ecommerce_it"]
    run_migrations(db)
    seeder.run(db)
    yield db
    mongo_client.drop_database("ecommerce_it")


def test_bootstrap_passes_verification(bootstrapped_db):
    assert verify(bootstrapped_db) == []


def test_text_search_matches_name_and_description(bootstrapped_db):
    products = bootstrapped_db[Collections.PRODUCTS]

    by_name = list(products.find({"$text": {"$search": "headphones"}}))
    by_description = list(products.find({"$text": {"$search": "hardcover"}}))

    assert by_name
    assert all("Headphones" in p["name"] for p in by_name)
    assert by_description
    assert all(p["category"]["name"] == "Books" for p in by_description)


def test_duplicate_category_name_rejected(bootstrapped_db):
    with pytest.raises(DuplicateKeyError):
        bootstrapped_db[Collections.CATEGORIES].insert_one({"name": "Electronics"})


def test_duplicate_user_email_rejected(bootstrapped_db):
    with pytest.raises(DuplicateKeyError):
        bootstrapped_db[Collections.USERS].insert_one({"email": "user1@example.com"})


def test_reinserting_seed_batch_fails(bootstrapped_db):
    with pytest.raises(BulkWriteError):
        bootstrapped_db[Collections.CATEGORIES].insert_many(category_seed_documents())

    assert bootstrapped_db[Collections.CATEGORIES].count_documents({}) == 4


def test_second_run_is_a_no_op(bootstrapped_db):
    assert run_migrations(bootstrapped_db) == []
    assert bootstrapped_db[Collections.CATEGORIES].count_documents({}) == 4


def test_recent_orders_sorted_by_date(bootstrapped_db):
    orders = list(
        bootstrapped_db[Collections.ORDERS].find().sort("dateOrdered", -1).limit(5)
    )
    dates = [o["dateOrdered"] for o in orders]

    assert dates == sorted(dates, reverse=True)
