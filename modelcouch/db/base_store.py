# =============================================================================
# File:        modelcouch/db/base_store.py
# Purpose:     Jedinstven interfejs za sve dokument store-ove (CouchDB, memorija)
# Author:      Aleksandar Popović
# Created:     2025-08-07
# Updated:     2025-08-19
# =============================================================================
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class BaseStore(ABC):
    """Svi store-ovi moraju implementirati isti API."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    # --- Osnovni CRUD ---
    @abstractmethod
    def get(self, doc_id: Any) -> Optional[Dict[str, Any]]:
        """Vrati dokument ili None ako ne postoji."""

    @abstractmethod
    def put(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """Upiši dokument; vraća dokument sa dodeljenim _id/_rev."""

    @abstractmethod
    def delete(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """
        Obriši dokument po _id/_rev; vraća {"id": ..., "rev": ...}, gde je
        "rev" revizija koja je obrisana (ona prosleđena u doc), ne tombstone.
        """

    def __repr__(self) -> str:
        return f"<{self.name}>"
