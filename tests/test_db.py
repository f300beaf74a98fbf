import mongomock

from querydb_bootstrap.app import db as db_module
from querydb_bootstrap.app.config import config


def test_get_db_selects_configured_database(monkeypatch):
    client = mongomock.MongoClient()
    monkeypatch.setattr(db_module, "_client", client)
    monkeypatch.setattr(config, "MONGO_DBNAME", "querydb")

    db = db_module.get_db()

    assert db.name == "querydb"
    assert db_module.get_client() is client


def test_get_client_is_created_once(monkeypatch):
    created = []

    def fake_client(uri, **kwargs):
        created.append((uri, kwargs))
        return mongomock.MongoClient()

    monkeypatch.setattr(db_module, "_client", None)
    monkeypatch.setattr(db_module, "MongoClient", fake_client)
    monkeypatch.setattr(config, "MONGO_URI", "mongodb://mongo:27017/")
    monkeypatch.setattr(config, "MONGO_TIMEOUT_MS", 2500)

    first = db_module.get_client()

    assert db_module.get_client() is first
    assert created == [("mongodb://mongo:27017/", {"serverSelectionTimeoutMS": 2500})]
