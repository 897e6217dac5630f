# ========================================================================
# File:       modelcouch/helpers/core_helper.py
# Purpose:    Bezbedni pozivi + mali helperi za dokumente
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-19
# ========================================================================

from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, Mapping


def safe_call(func: Callable, *args, **kwargs):
    """Poziva funkciju i prepušta izuzetke višem sloju; zadržavamo postojeći ugovor."""
    return func(*args, **kwargs)


def is_blank(value: Any) -> bool:
    """
    True za None i prazne kolekcije/stringove.
    Brojevi (i 0) nikad nisu "prazni".
    """
    if value is None:
        return True
    if hasattr(value, "__len__"):
        return len(value) == 0
    return False


def select_present(doc: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """Zadrži samo deklarisana polja koja imaju ne-None vrednost."""
    return {f: doc[f] for f in fields if f in doc and doc[f] is not None}
