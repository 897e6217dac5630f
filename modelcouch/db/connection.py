# =============================================================================
# File:        modelcouch/db/connection.py
# Purpose:     Razrešavanje DB handle-a (store, couchdb2.Database, URL, .env)
# =============================================================================
from __future__ import annotations

from typing import Any

from modelcouch.config.env import EnvLoader
from modelcouch.db.base_store import BaseStore
from modelcouch.db.couch_store import CouchStore
from modelcouch.db.memory_store import MemoryStore
from modelcouch.managers.error_manager import ErrorManager
from modelcouch.managers.log_manager import LogManager

DEFAULT_COUCHDB_URL = "http://localhost:5984/"
MEMORY_URL = "memory://"


def _is_database_like(handle: Any) -> bool:
    return all(callable(getattr(handle, m, None)) for m in ("get", "put", "delete"))


def store_from_env() -> BaseStore:
    url = (EnvLoader.get("COUCHDB_URL", DEFAULT_COUCHDB_URL) or DEFAULT_COUCHDB_URL).strip()
    if url.startswith(MEMORY_URL):
        name = url[len(MEMORY_URL):].strip("/") or None
        return MemoryStore(name=name)

    return CouchStore.from_url(
        url,
        database=EnvLoader.get("COUCHDB_DATABASE", None),
        username=EnvLoader.get("COUCHDB_USERNAME", None),
        password=EnvLoader.get("COUCHDB_PASSWORD", None),
        create=EnvLoader.get_bool("COUCHDB_CREATE_DB", False),
    )


def resolve_store(handle: Any = None) -> BaseStore:
    """
    Uniformno pravljenje store-a iz onoga što je prosleđeno:
    - BaseStore -> koristi se direktno
    - objekat sa get/put/delete (npr. couchdb2.Database) -> CouchStore
    - str -> CouchDB URL (http://host:5984/ime_baze)
    - None -> .env (COUCHDB_URL, COUCHDB_DATABASE, ...)
    """
    try:
        if isinstance(handle, BaseStore):
            store = handle
            source = "store"
        elif isinstance(handle, str):
            store = CouchStore.from_url(handle)
            source = "url"
        elif handle is None:
            store = store_from_env()
            source = "env"
        elif _is_database_like(handle):
            store = CouchStore(handle)
            source = "database"
        else:
            raise TypeError(f"Nepodržan DB handle: {type(handle).__name__}")
    except Exception as e:
        ErrorManager.create(e, context="[connection]")
        raise

    LogManager.info(f"[connection] resolve_store -> {store.name} source={source}")
    return store
