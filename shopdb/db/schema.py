"""
E-commerce database layout.

Collections:
- users: customer accounts, unique by email
- categories: product categories, unique by name
- products: catalogue, text-searchable on name and description
- orders: customer orders, newest first by dateOrdered
- migrations: ledger of applied bootstrap migrations
"""
from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, TEXT

DB_NAME_DEFAULT = "ecommerce"


class Collections:
    """Collection names in the ecommerce database."""
    USERS = "users"
    CATEGORIES = "categories"
    PRODUCTS = "products"
    ORDERS = "orders"
    MIGRATIONS = "migrations"

    ALL = [USERS, CATEGORIES, PRODUCTS, ORDERS]


# Index definitions for each collection
INDEXES = {
    Collections.USERS: [
        {"keys": [("email", ASCENDING)], "unique": True},
    ],
    Collections.CATEGORIES: [
        {"keys": [("name", ASCENDING)], "unique": True},
    ],
    Collections.PRODUCTS: [
        {"keys": [("name", TEXT), ("description", TEXT)]},  # Text index for search
        {"keys": [("category.id", ASCENDING)]},
        {"keys": [("isFeatured", ASCENDING)]},
    ],
    Collections.ORDERS: [
        {"keys": [("user.id", ASCENDING)]},
        {"keys": [("status", ASCENDING)]},
        {"keys": [("dateOrdered", DESCENDING)]},
    ],
}


CATEGORY_SEED = [
    {"name": "Electronics", "icon": "fa-laptop", "color": "#3498db"},
    {"name": "Clothing", "icon": "fa-tshirt", "color": "#e74c3c"},
    {"name": "Books", "icon": "fa-book", "color": "#f39c12"},
    {"name": "Home & Garden", "icon": "fa-home", "color": "#27ae60"},
]


def category_seed_documents():
    return [{"_id": ObjectId(), **row} for row in CATEGORY_SEED]


def index_name(keys):
    """Default name the server gives an index, e.g. dateOrdered_-1."""
    return "_".join(f"{field}_{direction}" for field, direction in keys)
