# =============================================================================
# File:        modelcouch/model/spec.py
# Purpose:     ModelSpec — deklarativni opis dokument tipa (polja, required,
#              validatori, lifecycle hook-ovi)
# Author:      Aleksandar Popović
# Created:     2025-08-19
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass, field, fields as dc_fields
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

# CouchDB identitet i revizija (ubacuje ih store pri upisu)
ID_FIELD = "_id"
REV_FIELD = "_rev"

HOOKS = ("on_init", "on_put", "on_delete", "on_validate_error")


class SpecError(ValueError):
    """Neispravno zadat ModelSpec."""
    pass


def _normalize_fields(raw: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(raw, str):
        raise SpecError("fields mora biti lista imena polja, ne string")
    out = [ID_FIELD, REV_FIELD]
    for f in raw or ():
        if not isinstance(f, str) or not f:
            raise SpecError(f"Neispravno ime polja: {f!r}")
        if f not in out:
            out.append(f)
    return tuple(out)


def _normalize_validators(raw: Optional[Mapping[str, Any]], declared: Tuple[str, ...]) -> Mapping[str, Tuple]:
    out: Dict[str, Tuple] = {}
    for f, pairs in (raw or {}).items():
        if f not in declared:
            raise SpecError(f"Validator za nedeklarisano polje: {f!r}")
        normalized = []
        for pair in pairs or ():
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                raise SpecError(f"Validator za '{f}' mora biti (predikat, poruka), dobijeno: {pair!r}")
            predicate, message = pair
            if not callable(predicate):
                raise SpecError(f"Predikat za '{f}' nije callable: {predicate!r}")
            normalized.append((predicate, str(message)))
        out[f] = tuple(normalized)
    return MappingProxyType(out)


@dataclass(frozen=True)
class ModelSpec:
    """
    - fields:     imena polja; _id i _rev se uvek dodaju na početak
    - required:   polja koja moraju imati ne-None i ne-praznu vrednost
    - validators: { polje: [(predikat, poruka), ...] } — predikat prima
                  vrednost polja i vraća truthy ako je validna
    - on_init(doc) -> doc           posle make()
    - on_put(doc) -> doc            pre čišćenja i validacije u put()
    - on_delete(result)             posle uspešnog delete(), {"id", "rev"}
    - on_validate_error(doc, f, m)  za svaki neuspeli check
    """

    fields: Tuple[str, ...] = ()
    required: FrozenSet[str] = frozenset()
    validators: Mapping[str, Tuple] = field(default_factory=dict)
    on_init: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None
    on_put: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None
    on_delete: Optional[Callable[[Dict[str, Any]], Any]] = None
    on_validate_error: Optional[Callable[[Dict[str, Any], str, str], Any]] = None

    def __post_init__(self):
        declared = _normalize_fields(self.fields)

        required = self.required or ()
        if isinstance(required, str):
            required = (required,)
        required = frozenset(required)
        unknown = required.difference(declared)
        if unknown:
            raise SpecError(f"Required polja nisu deklarisana: {sorted(unknown)}")

        for hook in HOOKS:
            fn = getattr(self, hook)
            if fn is not None and not callable(fn):
                raise SpecError(f"Hook '{hook}' nije callable: {fn!r}")

        object.__setattr__(self, "fields", declared)
        object.__setattr__(self, "required", required)
        object.__setattr__(self, "validators", _normalize_validators(self.validators, declared))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ModelSpec":
        allowed = {f.name for f in dc_fields(cls)}
        unknown = set(data).difference(allowed)
        if unknown:
            raise SpecError(f"Nepoznati ključevi u spec-u: {sorted(unknown)}")
        return cls(**dict(data))

    def empty_document(self) -> Dict[str, Any]:
        return {f: None for f in self.fields}
