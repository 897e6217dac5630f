# =============================================================================
# File:        modelcouch/db/errors.py
# Purpose:     Greške store sloja
# Author:      Aleksandar Popović
# Created:     2025-08-12
# Updated:     2025-08-19
# =============================================================================


class StoreError(Exception):
    """Bazna greška store sloja."""
    pass


class DocumentNotFound(StoreError):
    """Traženi dokument ne postoji."""

    def __init__(self, doc_id):
        super().__init__(f"Document not found: {doc_id!r}")
        self.doc_id = doc_id


class DocumentConflict(StoreError):
    """_rev ne odgovara poslednjoj reviziji u bazi."""

    def __init__(self, doc_id, rev=None):
        super().__init__(f"Document update conflict: {doc_id!r} (rev={rev!r})")
        self.doc_id = doc_id
        self.rev = rev
