import os
import runpy
import sys
from shopdb.db import utils
from shopdb.services.db import get_client, get_db, ping
from shopdb.services.log import get_logger
from dotenv import load_dotenv

load_dotenv()

logger = get_logger("shopdb-init")

MIGRATIONS_DIR = os.getenv(
    "MIGRATIONS_DIR", os.path.join(os.path.dirname(__file__), "migrations")
)


def _skip_migrations():
    return os.getenv("SKIP_MIGRATIONS", "false").lower() == "true"


def _sorted_migration_paths(migrations_dir):
    files = [
        f
        for f in os.listdir(migrations_dir)
        if f.endswith(".py") and not f.startswith("__")
    ]
    files.sort()
    return [os.path.join(migrations_dir, f) for f in files]


def run_migrations(db=None, migrations_dir=MIGRATIONS_DIR):
    if db is None:
        db = get_db()
    applied = utils.list_applied_migrations(db)
    newly_applied = []

    for path in _sorted_migration_paths(migrations_dir):
        name = os.path.basename(path)
        if name in applied:
            logger.info("migration_skipped", extra={"extra": {"migration": name}})
            continue

        logger.info("migration_applying", extra={"extra": {"migration": name}})
        module_globals = runpy.run_path(path)
        if not callable(module_globals.get("run")):
            raise RuntimeError(
                f"Migration file {name} does not define a run(db) function."
            )
        module_globals["run"](db)
        utils.record_migration(db, name)
        newly_applied.append(name)
        logger.info("migration_recorded", extra={"extra": {"migration": name}})

    logger.info(
        "Database initialized with sample data",
        extra={"extra": {"event": "database_initialized", "database": db.name, "applied": newly_applied}},
    )
    return newly_applied


def main():
    if _skip_migrations():
        logger.info("SKIP_MIGRATIONS is set. Exiting without running migrations.")
        return 0

    client = get_client()
    try:
        ping(client)
        logger.info("mongodb_connected")
        run_migrations(get_db(client))
    except Exception:
        logger.exception("database_initialization_failed")
        raise
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
