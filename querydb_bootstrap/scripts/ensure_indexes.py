"""Bootstrap utility that creates the pedido_read indexes in querydb."""

from __future__ import annotations

import logging
import sys

from pymongo.errors import PyMongoError

from querydb_bootstrap.app.config import config
from querydb_bootstrap.app.db import ensure_indexes, get_db, ping


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def main() -> None:
    logging.basicConfig(level=_log_level(config.LOG_LEVEL), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    coll_name = config.READ_MODEL_COLLECTION

    print(f"Creating indexes for collection {coll_name}...")
    try:
        ping()
        ensure_indexes(get_db(), coll_name)
    except PyMongoError as exc:
        print(f"Index creation failed for {coll_name}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(f"Indexes created successfully for {coll_name}!")


if __name__ == "__main__":
    main()
