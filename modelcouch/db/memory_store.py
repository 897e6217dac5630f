# ========================================================================
# File:       modelcouch/db/memory_store.py
# Purpose:    In-memory store sa CouchDB semantikom _id/_rev (dev + testovi)
# Author:     Aleksandar Popovic
# Updated:    2025-08-19
# ========================================================================

from __future__ import annotations
import copy
import threading
import uuid
from typing import Any, Dict, Optional

from modelcouch.db.base_store import BaseStore
from modelcouch.db.errors import DocumentConflict, DocumentNotFound


def _next_rev(rev: Optional[str]) -> str:
    n = int(rev.split("-", 1)[0]) if rev else 0
    return f"{n + 1}-{uuid.uuid4().hex}"


class MemoryStore(BaseStore):
    """
    Dokumenti se čuvaju u dict-u po _id.
    - put bez _id -> novi uuid4 hex
    - put postojećeg _id mora nositi aktuelni _rev (inače DocumentConflict)
    - delete nepostojećeg -> DocumentNotFound, zastarelog _rev -> DocumentConflict;
      rezultat nosi obrisanu (poslednju živu) reviziju
    Svi povratni dokumenti su kopije.
    """

    def __init__(self, **params):
        self._docs: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()
        self.db_name = params.get("name") or "memory"

    @property
    def name(self) -> str:
        return f"MemoryStore({self.db_name})"

    def __len__(self) -> int:
        return len(self._docs)

    def get(self, doc_id: Any) -> Optional[Dict[str, Any]]:
        with self._lock:
            doc = self._docs.get(doc_id)
            return copy.deepcopy(doc) if doc is not None else None

    def put(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            payload = copy.deepcopy(dict(doc))
            doc_id = payload.get("_id") or uuid.uuid4().hex
            current = self._docs.get(doc_id)
            if current is not None and payload.get("_rev") != current["_rev"]:
                raise DocumentConflict(doc_id, payload.get("_rev"))
            if current is None and payload.get("_rev"):
                # revizija za dokument koji (više) ne postoji
                raise DocumentConflict(doc_id, payload.get("_rev"))

            payload["_id"] = doc_id
            payload["_rev"] = _next_rev(current["_rev"] if current else None)
            self._docs[doc_id] = payload
            return copy.deepcopy(payload)

    def delete(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            doc_id = doc.get("_id")
            current = self._docs.get(doc_id)
            if current is None:
                raise DocumentNotFound(doc_id)
            if doc.get("_rev") != current["_rev"]:
                raise DocumentConflict(doc_id, doc.get("_rev"))
            del self._docs[doc_id]
            return {"id": doc_id, "rev": current["_rev"]}

    def ids(self):
        with self._lock:
            return list(self._docs)
