import os
import sys
import hashlib
import binascii
import random
from datetime import datetime, timedelta, timezone
from shopdb.db.schema import Collections
from shopdb.services.db import get_client, get_db, ping
from shopdb.services.log import get_logger

logger = get_logger("shopdb-seed")

SEED = 42
BASE_DATE = datetime(2025, 1, 1, tzinfo=timezone.utc)

ORDER_STATUSES = ["Pending", "Processing", "Shipped", "Delivered", "Cancelled"]

first_names = [
    "James", "Mary", "John", "Patricia", "Robert", "Jennifer", "Michael", "Linda",
    "William", "Elizabeth", "David", "Barbara", "Richard", "Susan", "Joseph", "Jessica",
    "Thomas", "Sarah", "Charles", "Karen", "Christopher", "Nancy", "Daniel", "Lisa",
]

surnames = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson",
]

cities = [
    ("Berlin", "Germany"), ("Lyon", "France"), ("Austin", "USA"), ("Toronto", "Canada"),
    ("Porto", "Portugal"), ("Leeds", "UK"), ("Osaka", "Japan"), ("Izmir", "Turkey"),
]

# category name -> (brands, product nouns, description blurb)
catalogue = {
    "Electronics": (
        ["Voltix", "Nordwave", "Pixelo"],
        ["Laptop", "Headphones", "Smartwatch", "Tablet", "Bluetooth Speaker"],
        "with long battery life and fast charging",
    ),
    "Clothing": (
        ["Threadly", "Urbanfox", "Linea"],
        ["T-Shirt", "Denim Jacket", "Hoodie", "Running Shorts", "Wool Scarf"],
        "made from breathable organic cotton",
    ),
    "Books": (
        ["Quill Press", "Harbor House", "Penwright"],
        ["Cookbook", "Travel Guide", "Mystery Novel", "Poetry Collection", "Atlas"],
        "in a durable hardcover edition",
    ),
    "Home & Garden": (
        ["Verdant", "Hearthly", "Oakline"],
        ["Plant Pot", "Garden Hose", "Table Lamp", "Throw Blanket", "Herb Kit"],
        "built for everyday indoor and outdoor use",
    ),
}


def _hash_password(plain_password: str, salt: bytes = None, iterations: int = 100_000):
    if salt is None:
        salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, iterations)
    # pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>
    return "$".join([
        "pbkdf2_sha256",
        str(iterations),
        binascii.hexlify(salt).decode("ascii"),
        binascii.hexlify(dk).decode("ascii"),
    ])


def seed_users(db, count=20, rng=None):
    rng = rng or random.Random(SEED)
    for n in range(1, count + 1):
        first = rng.choice(first_names)
        last = rng.choice(surnames)
        city, country = rng.choice(cities)
        email = f"user{n}@example.com"
        salt = bytes(rng.getrandbits(8) for _ in range(16))
        user_doc = {
            "name": f"{first} {last}",
            "email": email,
            "passwordHash": _hash_password(f"password{n}", salt=salt),
            "phone": f"555 000 {n:04d}",
            "isAdmin": n == 1,
            "street": f"{rng.randint(1, 200)} Market Street",
            "apartment": "",
            "zip": f"{rng.randint(10000, 99999)}",
            "city": city,
            "country": country,
        }
        db[Collections.USERS].update_one({"email": email}, {"$set": user_doc}, upsert=True)
    logger.info("users_seeded", extra={"extra": {"count": count}})


def seed_products(db, count=40, rng=None):
    rng = rng or random.Random(SEED)
    categories = list(db[Collections.CATEGORIES].find({"name": {"$in": list(catalogue)}}))
    if not categories:
        raise RuntimeError("No categories found. Run shopdb-init before seeding products.")
    categories.sort(key=lambda c: c["name"])

    for n in range(1, count + 1):
        category = categories[(n - 1) % len(categories)]
        brands, nouns, blurb = catalogue[category["name"]]
        brand = rng.choice(brands)
        noun = nouns[(n - 1) // len(categories) % len(nouns)]
        name = f"{brand} {noun} {n}"
        product_doc = {
            "name": name,
            "description": f"{brand} {noun.lower()} {blurb}",
            "brand": brand,
            "price": round(rng.uniform(5, 500), 2),
            "category": {"id": category["_id"], "name": category["name"]},
            "countInStock": rng.randint(0, 150),
            "rating": round(rng.uniform(0, 5), 1),
            "numReviews": rng.randint(0, 300),
            "isFeatured": n % 5 == 0,
            "dateCreated": BASE_DATE + timedelta(days=n),
        }
        db[Collections.PRODUCTS].update_one({"name": name}, {"$set": product_doc}, upsert=True)
    logger.info("products_seeded", extra={"extra": {"count": count}})


def seed_orders(db, count=30, rng=None):
    rng = rng or random.Random(SEED)
    users = list(db[Collections.USERS].find({}, {"name": 1, "email": 1, "phone": 1, "city": 1, "country": 1, "zip": 1}).sort("email", 1))
    products = list(db[Collections.PRODUCTS].find({}, {"name": 1, "price": 1}).sort("name", 1))
    if not users or not products:
        raise RuntimeError("Users and products must be seeded before orders.")

    for n in range(1, count + 1):
        user = rng.choice(users)
        picked = rng.sample(products, k=min(len(products), rng.randint(1, 3)))
        items = [
            {
                "quantity": rng.randint(1, 4),
                "product": {"id": p["_id"], "name": p["name"], "price": p["price"]},
            }
            for p in picked
        ]
        order_number = f"ORD-{n:05d}"
        order_doc = {
            "orderNumber": order_number,
            "orderItems": items,
            "shippingAddress1": f"{rng.randint(1, 200)} Market Street",
            "shippingAddress2": "",
            "city": user.get("city"),
            "zip": user.get("zip"),
            "country": user.get("country"),
            "phone": user.get("phone"),
            "status": rng.choice(ORDER_STATUSES),
            "totalPrice": round(sum(i["product"]["price"] * i["quantity"] for i in items), 2),
            "user": {"id": user["_id"], "name": user["name"], "email": user["email"]},
            "dateOrdered": BASE_DATE + timedelta(days=n, hours=rng.randint(0, 23)),
        }
        db[Collections.ORDERS].update_one({"orderNumber": order_number}, {"$set": order_doc}, upsert=True)
    logger.info("orders_seeded", extra={"extra": {"count": count}})


def run(db):
    seed_users(db)
    seed_products(db)
    seed_orders(db)
    logger.info("Seeder finished.")


def main():
    client = get_client()
    try:
        ping(client)
        run(get_db(client))
    except Exception:
        logger.exception("seeding_failed")
        raise
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
