# ============================================================================
# File:       modelcouch/handlers/validator_handler.py
# Purpose:    Core validacija dokumenta po ModelSpec-u (required + validatori)
# Author:     Aleksandar Popovic
# Created:    2025-08-13
# Updated:    2025-08-19 (iscrpna provera, (predikat, poruka) parovi, hook)
# ============================================================================

from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from modelcouch.helpers.core_helper import is_blank

REQUIRED_MESSAGE = "is a required field"

Predicate = Callable[[Any], Any]
ErrorHook = Callable[[Dict[str, Any], str, str], Any]


class ValidationFailure(NamedTuple):
    field: str
    message: str
    error: Optional[Exception] = None  # izuzetak iz predikata, ako ga je bilo


class ValidatorHandler:
    @staticmethod
    def check(
        doc: Mapping[str, Any],
        fields: Iterable[str],
        required: Iterable[str],
        validators: Optional[Mapping[str, Sequence[Tuple[Predicate, str]]]] = None,
        on_error: Optional[ErrorHook] = None,
    ) -> List[ValidationFailure]:
        """
        Prolazi kroz SVA deklarisana polja, redom:
        - required polje sa None/praznom vrednošću -> "is a required field"
        - inače se izvršavaju svi (predikat, poruka) parovi za polje;
          falsy rezultat (ili izuzetak) je neuspeh sa tom porukom.
        Nema prekida na prvoj grešci: on_error se zove za svaki neuspeh.
        Vraća listu neuspeha (prazna lista = dokument je validan).
        """
        required = required if isinstance(required, (set, frozenset)) else set(required or ())
        validators = validators or {}
        failures: List[ValidationFailure] = []

        def fail(field: str, message: str, error: Optional[Exception] = None):
            failures.append(ValidationFailure(field, message, error))
            if on_error is not None:
                on_error(doc, field, message)

        for f in fields:
            value = doc.get(f)
            if f in required and is_blank(value):
                fail(f, REQUIRED_MESSAGE)
                continue

            for predicate, message in validators.get(f, ()):
                try:
                    ok = predicate(value)
                except Exception as e:
                    fail(f, message, e)
                    continue
                if not ok:
                    fail(f, message)

        return failures
