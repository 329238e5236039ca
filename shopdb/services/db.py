import os
from pymongo.mongo_client import MongoClient
from dotenv import load_dotenv
from shopdb.db.schema import DB_NAME_DEFAULT

load_dotenv()

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB = os.getenv("MONGO_DB", DB_NAME_DEFAULT)
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", 5000))


def get_client(uri=None):
    return MongoClient(uri or MONGO_URI, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)


def get_db(client=None, name=None):
    if client is None:
        client = get_client()
    return client[name or MONGO_DB]


def ping(client):
    """Raises ServerSelectionTimeoutError when the server is unreachable."""
    return client.admin.command("ping")
