import sys
from shopdb.db.schema import CATEGORY_SEED, Collections, INDEXES, index_name
from shopdb.services.db import get_client, get_db, ping
from shopdb.services.log import get_logger

logger = get_logger("shopdb-verify")


def _index_problems(db, collection_name):
    problems = []
    info = db[collection_name].index_information()
    for index_def in INDEXES[collection_name]:
        keys = index_def["keys"]
        name = index_name(keys)
        if name not in info:
            problems.append(f"{collection_name}: missing index {name}")
        elif index_def.get("unique") and not info[name].get("unique"):
            problems.append(f"{collection_name}: index {name} is not unique")
    return problems


def verify(db):
    """
    Check that the bootstrap left the database in its expected state.

    Returns a list of human readable problems, empty when everything is in place.
    """
    problems = []

    existing = set(db.list_collection_names())
    missing = [name for name in Collections.ALL if name not in existing]
    for name in missing:
        problems.append(f"missing collection {name}")

    for name in Collections.ALL:
        if name not in missing:
            problems.extend(_index_problems(db, name))

    count = db[Collections.CATEGORIES].count_documents({})
    if count != len(CATEGORY_SEED):
        problems.append(f"expected {len(CATEGORY_SEED)} categories, found {count}")

    categories = {
        c["name"]: c for c in db[Collections.CATEGORIES].find({}, {"_id": 0})
    }
    for row in CATEGORY_SEED:
        found = categories.get(row["name"])
        if found is None:
            problems.append(f"missing category {row['name']}")
        elif found.get("icon") != row["icon"] or found.get("color") != row["color"]:
            problems.append(f"category {row['name']} has unexpected icon/color")

    return problems


def main():
    client = get_client()
    try:
        ping(client)
        problems = verify(get_db(client))
    except Exception:
        logger.exception("verification_failed")
        raise
    finally:
        client.close()

    for problem in problems:
        logger.error("verification_problem", extra={"extra": {"problem": problem}})
    if problems:
        return 1
    logger.info("verification_passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
