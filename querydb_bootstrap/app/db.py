from __future__ import annotations

import logging
from typing import Any, Dict, NamedTuple, Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from .config import config

logger = logging.getLogger(__name__)

_client: MongoClient | None = None


def get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = MongoClient(config.MONGO_URI, serverSelectionTimeoutMS=config.MONGO_TIMEOUT_MS)
    return _client


def get_db() -> Database:
    return get_client()[config.MONGO_DBNAME]


def ping() -> None:
    get_client().admin.command("ping")


class IndexDefinition(NamedTuple):
    name: str
    keys: tuple[tuple[str, int], ...]
    unique: bool = False

    def options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"name": self.name}
        if self.unique:
            options["unique"] = True
        return options


PEDIDO_READ_INDEXES: tuple[IndexDefinition, ...] = (
    IndexDefinition("uk_numeroPedido", (("numeroPedido", ASCENDING),), unique=True),
    IndexDefinition("idx_cliente_data", (("clienteId", ASCENDING), ("dataCriacao", DESCENDING))),
    IndexDefinition("idx_status_data", (("status", ASCENDING), ("dataCriacao", DESCENDING))),
    IndexDefinition(
        "idx_cliente_status_data",
        (("clienteId", ASCENDING), ("status", ASCENDING), ("dataCriacao", DESCENDING)),
    ),
    IndexDefinition("idx_cliente_email", (("clienteEmail", ASCENDING), ("dataCriacao", DESCENDING))),
    IndexDefinition("idx_valorTotal", (("valorTotal", ASCENDING),)),
)


def ensure_indexes(
    db: Database,
    collection_name: Optional[str] = None,
    indexes: tuple[IndexDefinition, ...] = PEDIDO_READ_INDEXES,
) -> list[str]:
    """Create the read-model indexes one at a time, in declaration order.

    Errors raised by the server propagate immediately: indexes already created
    stay in place and the remaining definitions are not attempted. Creating an
    index identical to an existing one is a no-op on the server side.
    """
    collection_name = collection_name or config.READ_MODEL_COLLECTION
    coll = db[collection_name]
    created: list[str] = []
    for index in indexes:
        name = coll.create_index(list(index.keys), **index.options())
        logger.info("Ensured index %s on %s: %s unique=%s", name, collection_name, index.keys, index.unique)
        created.append(name)
    return created


def index_mismatches(
    db: Database,
    collection_name: Optional[str] = None,
    indexes: tuple[IndexDefinition, ...] = PEDIDO_READ_INDEXES,
) -> list[str]:
    """Names of the definitions that are missing or differ on the collection."""
    info = db[collection_name or config.READ_MODEL_COLLECTION].index_information()
    mismatches: list[str] = []
    for index in indexes:
        existing = info.get(index.name)
        if existing is None:
            mismatches.append(index.name)
            continue
        keys = tuple((field, direction) for field, direction in existing["key"])
        if keys != index.keys or bool(existing.get("unique", False)) != index.unique:
            mismatches.append(index.name)
    return mismatches
